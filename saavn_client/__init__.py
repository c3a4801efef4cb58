"""
saavn-client

Asynchronous client for JioSaavn search proxies with base-URL failover
on rate limiting.
"""

__version__ = "1.0.0"

from .exceptions import (
    SaavnAPIError,
    RateLimitedError,
    SongNotFoundError,
    InvalidResponseError
)
from .models import ClientConfig
from .api import SaavnClient, APIClientFactory
from .services import SaavnService, get_saavn_service, close_saavn_service

__all__ = [
    "SaavnAPIError",
    "RateLimitedError",
    "SongNotFoundError",
    "InvalidResponseError",
    "ClientConfig",
    "SaavnClient",
    "APIClientFactory",
    "SaavnService",
    "get_saavn_service",
    "close_saavn_service",
]
