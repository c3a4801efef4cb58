"""
Base API Client

Provides unified HTTP request handling, base-URL failover on rate limiting,
and error handling for the Saavn proxy client.
"""

import json
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Union

import aiohttp
import structlog

from ..exceptions import InvalidResponseError, RateLimitedError
from ..models.config import DEFAULT_RATE_LIMIT_MARKER, DEFAULT_USER_AGENT
from ..utils.logging_config import log_api_request
from .failover import BaseURLPool, PendingRequest, is_rate_limited

logger = structlog.get_logger(__name__)


class BaseAPIClient(ABC):
    """
    Base HTTP client with failover across several base URLs.

    A request that fails with rate limiting is moved to the next base URL
    and resubmitted once. Every other failure is propagated unchanged.
    """

    def __init__(
        self,
        base_urls: Union[BaseURLPool, Sequence[str]],
        timeout: float = 10,
        service_name: str = "api",
        rate_limit_marker: str = DEFAULT_RATE_LIMIT_MARKER,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize base API client.

        Args:
            base_urls: Base URL pool, or base URLs to build one from
            timeout: Request timeout in seconds
            service_name: Service name for logging and identification
            rate_limit_marker: Body text that marks a rate-limited response
            user_agent: User-Agent header sent with every request
        """
        if isinstance(base_urls, BaseURLPool):
            self.url_pool = base_urls
        else:
            self.url_pool = BaseURLPool(base_urls, service_name=service_name)

        self.timeout = timeout
        self.service_name = service_name
        self.rate_limit_marker = rate_limit_marker
        self.user_agent = user_agent
        self.session: Optional[aiohttp.ClientSession] = None

        self.logger = logger.bind(
            service=service_name,
            component="BaseAPIClient"
        )

        self.logger.debug(
            "Base API client initialized",
            timeout=timeout,
            base_urls=self.url_pool.base_urls
        )

    @property
    def base_url(self) -> str:
        """Base URL new requests are sent to."""
        return self.url_pool.current

    async def __aenter__(self):
        """Async context manager entry."""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        self.logger.debug("API client session started")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug("API client session closed")

    async def _make_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make HTTP request against the current base URL.

        Args:
            endpoint: API endpoint (relative to the base URL)
            params: Query parameters
            method: HTTP method
            headers: Additional headers

        Returns:
            Parsed JSON response data

        Raises:
            RateLimitedError: Rate limited and no failover left
            aiohttp.ClientResponseError: Any other HTTP error status
            aiohttp.ClientError: Network failures
        """
        if not self.session:
            error_msg = f"{self.service_name} client not initialized. Use async context manager."
            self.logger.error("Client not initialized")
            raise RuntimeError(error_msg)

        request_headers = dict(headers or {})
        request_headers.setdefault("User-Agent", self.user_agent)

        request = PendingRequest(
            path=endpoint,
            base_url=self.url_pool.current,
            params=dict(params or {}),
            headers=request_headers,
            method=method
        )
        return await self._dispatch(request)

    async def _dispatch(self, request: PendingRequest) -> Any:
        """
        Send a request once and route failures to the failover handler.

        Args:
            request: Request to send

        Returns:
            Parsed JSON response data
        """
        self.logger.debug(
            "Making API request",
            method=request.method,
            url=request.url,
            param_count=len(request.params),
            retried=request.retried
        )

        start_time = time.time()
        async with self.session.request(
            method=request.method,
            url=request.url,
            params=request.params or None,
            headers=request.headers
        ) as response:
            duration = time.time() - start_time
            log_api_request(
                method=request.method,
                url=request.url,
                status_code=response.status,
                duration=duration,
                service=self.service_name
            )

            if response.status < 400:
                data = await self._parse_response(response)
                self.logger.debug(
                    "API request successful",
                    endpoint=request.path,
                    status=response.status,
                    response_size=len(str(data)) if data else 0
                )
                return data

            body = await self._read_error_body(response)
            error = aiohttp.ClientResponseError(
                response.request_info,
                response.history,
                status=response.status,
                message=response.reason or "",
                headers=response.headers
            )
            # Decoded body rides on the error for callers that log it
            error.body = body

        return await self._handle_failure(request, error, body)

    async def _handle_failure(
        self,
        request: PendingRequest,
        error: aiohttp.ClientResponseError,
        body: Any
    ) -> Any:
        """
        Fail over to the next base URL once on rate limiting; re-raise otherwise.

        Args:
            request: The failed request
            error: HTTP error built from the response
            body: Decoded error body (JSON or raw text)

        Returns:
            Parsed JSON data of the retried request
        """
        rate_limited = is_rate_limited(error.status, body, self.rate_limit_marker)
        can_failover = self.url_pool.can_failover and not request.retried and rate_limited

        if can_failover:
            failed_base = request.base_url
            next_base = self.url_pool.advance()
            request.base_url = next_base
            request.retried = True
            self.logger.warning(
                f"{self.service_name} API rate-limited; switching to backup base URL",
                failed_base_url=failed_base,
                next_base_url=next_base,
                endpoint=request.path
            )
            return await self._dispatch(request)

        if rate_limited:
            self.logger.error(
                "Rate limited with no failover left",
                base_url=request.base_url,
                endpoint=request.path,
                status=error.status,
                retried=request.retried
            )
            raise RateLimitedError(base_url=request.base_url, status=error.status) from error

        self.logger.warning(
            f"{self.service_name} HTTP error",
            status=error.status,
            endpoint=request.path,
            base_url=request.base_url,
            api_error=self._extract_api_error(body),
            body=body[:500] if isinstance(body, str) else None
        )
        raise error

    async def _parse_response(self, response: aiohttp.ClientResponse) -> Any:
        """
        Parse a successful response body as JSON.

        Args:
            response: HTTP response object

        Returns:
            Parsed response data
        """
        text = await response.text()
        try:
            return json.loads(text)
        except ValueError as e:
            self.logger.error(f"{self.service_name} invalid JSON response", error=str(e))
            raise InvalidResponseError(f"{self.service_name} returned invalid JSON") from e

    async def _read_error_body(self, response: aiohttp.ClientResponse) -> Any:
        """Error body decoded as JSON when possible, raw text otherwise."""
        text = await response.text()
        try:
            return json.loads(text)
        except ValueError:
            return text

    @abstractmethod
    def _extract_api_error(self, data: Any) -> Optional[str]:
        """
        Extract API-specific error information from an error body.
        Must be implemented by subclasses.

        Args:
            data: Decoded error body

        Returns:
            Error message if found, None otherwise
        """
        pass

    async def health_check(self, endpoint: str = "", params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Perform health check against the current base URL.

        Returns:
            Health status information
        """
        try:
            if not self.session:
                return {
                    "service": self.service_name,
                    "status": "not_initialized",
                    "healthy": False,
                    "message": "Client session not initialized"
                }

            start_time = time.time()
            await self._make_request(endpoint, params=params)
            response_time = time.time() - start_time

            return {
                "service": self.service_name,
                "status": "healthy",
                "healthy": True,
                "response_time_ms": int(response_time * 1000),
                "base_url": self.base_url
            }

        except Exception as e:
            self.logger.warning("Health check failed", error=str(e))
            return {
                "service": self.service_name,
                "status": "unhealthy",
                "healthy": False,
                "error": str(e),
                "base_url": self.base_url
            }

    def get_service_info(self) -> Dict[str, Any]:
        """
        Get service information for monitoring.

        Returns:
            Service configuration and failover state
        """
        return {
            "service_name": self.service_name,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "session_active": self.session is not None,
            "failover": self.url_pool.get_current_usage(),
            "component_type": "BaseAPIClient"
        }
