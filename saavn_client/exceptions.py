"""
Saavn Client Exceptions

Errors raised by the client layer. HTTP and network failures that are not
rate-limiting are left as the aiohttp exceptions they already are.
"""

from typing import Optional


class SaavnAPIError(Exception):
    """Base class for saavn-client errors."""


class RateLimitedError(SaavnAPIError):
    """Raised when the upstream proxy keeps rate-limiting and no failover is left."""

    DEFAULT_MESSAGE = (
        "Rate limited by the Saavn API. "
        "Please wait a minute or switch the API base URL."
    )

    def __init__(
        self,
        message: Optional[str] = None,
        base_url: Optional[str] = None,
        status: Optional[int] = None
    ):
        super().__init__(message or self.DEFAULT_MESSAGE)
        self.base_url = base_url
        self.status = status


class SongNotFoundError(SaavnAPIError):
    """Raised when a song lookup returns no result."""

    def __init__(self, song_id: str):
        super().__init__("Song not found")
        self.song_id = song_id


class InvalidResponseError(SaavnAPIError):
    """Raised when a successful response body is not valid JSON."""
