"""
API Module

HTTP layer for the Saavn proxy.
Provides consistent request handling, base-URL failover, and error handling.
"""

from .base_client import BaseAPIClient
from .failover import BaseURLPool, PendingRequest, is_rate_limited
from .saavn_client import SaavnClient
from .client_factory import (
    APIClientFactory,
    get_client_factory,
    reset_client_factory,
    create_saavn_client
)

__all__ = [
    # Base infrastructure
    "BaseAPIClient",
    "BaseURLPool",
    "PendingRequest",
    "is_rate_limited",

    # Saavn client
    "SaavnClient",

    # Client factory
    "APIClientFactory",
    "get_client_factory",
    "reset_client_factory",
    "create_saavn_client",
]
