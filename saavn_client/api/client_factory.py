"""
API Client Factory

Provides standardized creation and configuration of Saavn API clients.
Clients built for the same base URLs share one failover pool, so a switch
to a backup host applies to every client in the process.
"""

from typing import Any, Dict, List, Optional, Tuple

import structlog

from ..models.config import ClientConfig
from .failover import BaseURLPool
from .saavn_client import SaavnClient

logger = structlog.get_logger(__name__)


class APIClientFactory:
    """
    Factory for creating configured Saavn clients.

    Caches base URL pools by URL list so failover state is shared.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize client factory.

        Args:
            config: Client configuration (defaults to environment resolution)
        """
        self.config = config or ClientConfig.from_env()
        self.logger = logger.bind(service="APIClientFactory")

        # Failover pools (shared across clients with the same base URLs)
        self._url_pools: Dict[Tuple[str, ...], BaseURLPool] = {}

        self.logger.info(
            "API Client Factory initialized",
            base_urls=self.config.base_urls
        )

    def create_saavn_client(
        self,
        base_urls: Optional[List[str]] = None,
        timeout_seconds: Optional[float] = None
    ) -> SaavnClient:
        """
        Create configured Saavn client.

        Args:
            base_urls: Base URLs overriding the configured ones
            timeout_seconds: Request timeout overriding the configured one

        Returns:
            Configured SaavnClient instance
        """
        overrides: Dict[str, Any] = {}
        if base_urls:
            overrides["base_urls"] = base_urls
        if timeout_seconds:
            overrides["timeout_seconds"] = timeout_seconds

        config = ClientConfig(**{**self.config.model_dump(), **overrides}) if overrides else self.config

        pool_key = tuple(config.base_urls)
        if pool_key not in self._url_pools:
            self._url_pools[pool_key] = BaseURLPool(config.base_urls, service_name="Saavn")

        client = SaavnClient(config=config, url_pool=self._url_pools[pool_key])

        self.logger.info(
            "Saavn client created",
            base_urls=config.base_urls,
            timeout=config.timeout_seconds
        )

        return client

    def get_failover_stats(self) -> Dict[str, Dict[str, Any]]:
        """
        Get state for all base URL pools.

        Returns:
            Dictionary of pool usage keyed by comma-joined base URLs
        """
        return {
            ",".join(key): pool.get_current_usage()
            for key, pool in self._url_pools.items()
        }

    def reset_url_pools(self) -> None:
        """Reset all base URL pools (useful for testing)."""
        for pool in self._url_pools.values():
            pool.reset()

        self.logger.info("All base URL pools reset")


# Global factory instance for convenience
_global_factory: Optional[APIClientFactory] = None


def get_client_factory(config: Optional[ClientConfig] = None) -> APIClientFactory:
    """
    Get global client factory instance.

    Args:
        config: Client configuration (optional, used for initialization)

    Returns:
        Global APIClientFactory instance
    """
    global _global_factory

    if _global_factory is None:
        _global_factory = APIClientFactory(config)

    return _global_factory


def reset_client_factory():
    """Reset global client factory (useful for testing)."""
    global _global_factory
    _global_factory = None


def create_saavn_client(
    base_urls: Optional[List[str]] = None,
    timeout_seconds: Optional[float] = None
) -> SaavnClient:
    """Create Saavn client using global factory."""
    factory = get_client_factory()
    return factory.create_saavn_client(base_urls, timeout_seconds)
