"""
Saavn API Client

HTTP facade for a JioSaavn search proxy (saavn.sumit.co and compatible
mirrors). Inherits failover and error handling from BaseAPIClient.
"""

from typing import Any, Dict, Optional, Sequence, Union

import structlog

from ..models.config import ClientConfig
from .base_client import BaseAPIClient
from .failover import BaseURLPool

logger = structlog.get_logger(__name__)


class SaavnClient(BaseAPIClient):
    """
    Saavn proxy client.

    Issues GET requests with query parameters against the currently
    selected base URL, with a fixed timeout.
    """

    HEALTH_CHECK_ENDPOINT = "/api/search"
    HEALTH_CHECK_QUERY = "test"

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        url_pool: Optional[BaseURLPool] = None
    ):
        """
        Initialize Saavn client.

        Args:
            config: Client configuration (defaults to environment resolution)
            url_pool: Shared base URL pool (optional, built from config if not provided)
        """
        self.config = config or ClientConfig.from_env()

        base_urls: Union[BaseURLPool, Sequence[str]] = url_pool or self.config.base_urls

        super().__init__(
            base_urls=base_urls,
            timeout=self.config.timeout_seconds,
            service_name="Saavn",
            rate_limit_marker=self.config.rate_limit_marker,
            user_agent=self.config.user_agent
        )

        self.logger.info(
            "Saavn client initialized",
            base_urls=self.url_pool.base_urls,
            timeout=self.timeout
        )

    def _extract_api_error(self, data: Any) -> Optional[str]:
        """
        Extract the proxy's error message, e.g. {"success": false, "message": "..."}.

        Args:
            data: Decoded error body

        Returns:
            Error message if found, None otherwise
        """
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
            if message:
                return str(message)
            if data.get("success") is False:
                return "Request unsuccessful"
        return None

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a proxy path.

        Args:
            path: API path, e.g. "/api/search/songs"
            params: Query parameters

        Returns:
            Parsed JSON response data
        """
        return await self._make_request(endpoint=path, params=params, method="GET")

    async def health_check(self) -> Dict[str, Any]:
        """Health check using a minimal global search."""
        return await super().health_check(
            self.HEALTH_CHECK_ENDPOINT,
            params={"query": self.HEALTH_CHECK_QUERY}
        )
