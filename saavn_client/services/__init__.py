"""
Services Module

Domain operations on top of the Saavn API client.
"""

from .api_service import (
    SaavnService,
    get_saavn_service,
    close_saavn_service
)

__all__ = [
    "SaavnService",
    "get_saavn_service",
    "close_saavn_service",
]
