"""
Client Configuration

Pydantic configuration for the Saavn API client. Base URLs are resolved
once from the environment and drive base-URL failover.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://saavn.sumit.co"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_RATE_LIMIT_MARKER = "rate limited"
DEFAULT_USER_AGENT = "saavn-client/1.0"

BASE_URLS_ENV = "SAAVN_API_BASE_URLS"
BASE_URL_ENV = "SAAVN_API_BASE_URL"
TIMEOUT_ENV = "SAAVN_API_TIMEOUT"


def parse_base_urls(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated list of base URLs.

    Entries are trimmed and empty entries dropped. Falls back to the
    default host when nothing usable is left.

    Args:
        value: Raw configuration value (may be None)

    Returns:
        Non-empty list of base URLs
    """
    if not value:
        return [DEFAULT_BASE_URL]

    urls = [url.strip() for url in value.split(",")]
    urls = [url for url in urls if url]
    return urls or [DEFAULT_BASE_URL]


class ClientConfig(BaseModel):
    """Saavn API client configuration"""

    base_urls: List[str] = Field(
        default_factory=lambda: [DEFAULT_BASE_URL],
        description="Ordered base URLs; the first is used until it rate-limits"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Per-request timeout in seconds"
    )
    rate_limit_marker: str = Field(
        default=DEFAULT_RATE_LIMIT_MARKER,
        min_length=1,
        description="Text in an error body that marks a rate-limited response"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")

    @field_validator("base_urls")
    @classmethod
    def _normalize_base_urls(cls, value: List[str]) -> List[str]:
        urls = [url.strip().rstrip("/") for url in value]
        urls = [url for url in urls if url]
        if not urls:
            raise ValueError("At least one base URL is required")
        return urls

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build configuration from environment variables.

        SAAVN_API_BASE_URLS takes precedence over SAAVN_API_BASE_URL; an
        empty value counts as unset.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Resolved ClientConfig
        """
        env = os.environ if environ is None else environ

        raw_urls = env.get(BASE_URLS_ENV) or env.get(BASE_URL_ENV)
        values = {"base_urls": parse_base_urls(raw_urls)}

        timeout = env.get(TIMEOUT_ENV)
        if timeout:
            values["timeout_seconds"] = timeout

        return cls(**values)
