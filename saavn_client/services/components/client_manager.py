"""
Client Manager Component

Handles Saavn client instantiation and session management.
Extracted from SaavnService to follow single responsibility principle.
"""

from typing import Optional

import structlog

from ...api import APIClientFactory, SaavnClient
from ...models.config import ClientConfig

logger = structlog.get_logger(__name__)


class ClientManager:
    """
    Manages the Saavn client instance and its session.

    Responsibilities:
    - Client instantiation and caching
    - Session management
    - Connection lifecycle management
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        client_factory: Optional[APIClientFactory] = None
    ):
        """
        Initialize client manager.

        Args:
            config: Client configuration (defaults to environment resolution)
            client_factory: Factory to build clients with (optional)
        """
        self.logger = logger.bind(component="ClientManager")

        self.client_factory = client_factory or APIClientFactory(config)
        self._saavn_client: Optional[SaavnClient] = None

        self.logger.info(
            "Client Manager initialized",
            base_urls=self.client_factory.config.base_urls
        )

    async def get_saavn_client(self) -> SaavnClient:
        """
        Get shared Saavn client instance with an open session.

        Returns:
            Configured SaavnClient instance
        """
        if self._saavn_client is None:
            self._saavn_client = self.client_factory.create_saavn_client()

            # Initialize the session immediately
            await self._saavn_client.__aenter__()

            self.logger.info("Saavn client created and cached")

        return self._saavn_client

    async def close(self):
        """Close the Saavn client connection."""
        if self._saavn_client:
            await self._saavn_client.__aexit__(None, None, None)
            self._saavn_client = None

        self.logger.info("Client Manager connections closed")
