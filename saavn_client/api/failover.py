"""
Base URL Failover

Tracks the configured Saavn proxy hosts and which one is currently in use.
Also classifies failed responses as rate-limited or not.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import structlog

from ..models.config import DEFAULT_RATE_LIMIT_MARKER

logger = structlog.get_logger(__name__)

RATE_LIMIT_STATUS = 429


def is_rate_limited(
    status: Optional[int],
    body: Any = None,
    marker: str = DEFAULT_RATE_LIMIT_MARKER
) -> bool:
    """
    Detect a rate-limited response (HTTP 429 or a Cloudflare-style HTML page).

    Args:
        status: HTTP status code of the failed response
        body: Response body; JSON-decoded when possible, raw text otherwise
        marker: Text that marks a rate-limit page

    Returns:
        True if the response means the quota was exceeded
    """
    if status == RATE_LIMIT_STATUS:
        return True
    if isinstance(body, str) and marker.lower() in body.lower():
        return True
    return False


@dataclass
class PendingRequest:
    """A request in flight, retargetable at another base URL."""
    path: str
    base_url: str
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "GET"
    retried: bool = False

    @property
    def url(self) -> str:
        if not self.path:
            return self.base_url
        return f"{self.base_url}/{self.path.lstrip('/')}"


class BaseURLPool:
    """
    Ordered list of base URLs with a wrapping current-index pointer.

    The pointer only moves inside the failure handler, synchronously, so
    cooperative (single event loop) callers never see it half-updated.
    """

    def __init__(self, base_urls: Sequence[str], service_name: str = "saavn"):
        """
        Initialize the pool.

        Args:
            base_urls: Base URLs in preference order (at least one)
            service_name: Service name for logging
        """
        urls = [url.rstrip("/") for url in base_urls if url]
        if not urls:
            raise ValueError("BaseURLPool requires at least one base URL")

        self.base_urls: List[str] = urls
        self.index = 0
        self.rotations = 0
        self.service_name = service_name

        self.logger = logger.bind(service=f"BaseURLPool-{service_name}")
        self.logger.info(
            "Base URL pool initialized",
            base_urls=self.base_urls,
            can_failover=self.can_failover
        )

    @property
    def current(self) -> str:
        return self.base_urls[self.index]

    @property
    def can_failover(self) -> bool:
        return len(self.base_urls) > 1

    def advance(self) -> str:
        """
        Move to the next base URL, wrapping around.

        Returns:
            The new current base URL
        """
        previous = self.current
        self.index = (self.index + 1) % len(self.base_urls)
        self.rotations += 1

        self.logger.debug(
            "Base URL rotated",
            previous=previous,
            current=self.current,
            rotations=self.rotations
        )
        return self.current

    def get_current_usage(self) -> Dict[str, Any]:
        """Failover state for monitoring."""
        return {
            "base_urls": list(self.base_urls),
            "current_base_url": self.current,
            "current_index": self.index,
            "rotations": self.rotations,
            "can_failover": self.can_failover,
        }

    def reset(self) -> None:
        """Reset pool to the first base URL (useful for testing)."""
        self.index = 0
        self.rotations = 0
        self.logger.info("Base URL pool reset")
