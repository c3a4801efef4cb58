"""
Shared test fixtures.

Builds aiohttp-shaped mocks so the client can be exercised without a
network: `session.request(...)` returns an async context manager yielding
a response with `status`, `reason`, `headers`, and an awaitable `text()`.
"""

import json
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from saavn_client.api.saavn_client import SaavnClient
from saavn_client.models.config import ClientConfig

PRIMARY_URL = "https://primary.example.com"
BACKUP_URL = "https://backup.example.com"


def _make_response(status: int = 200, body: Any = None, text: Optional[str] = None):
    response = MagicMock()
    response.status = status
    response.reason = "OK" if status < 400 else "Error"
    response.headers = {}
    response.request_info = Mock()
    response.history = ()
    response.text = AsyncMock(return_value=text if text is not None else json.dumps(body))
    return response


def _request_context(outcome):
    context = MagicMock()
    if isinstance(outcome, BaseException):
        context.__aenter__ = AsyncMock(side_effect=outcome)
    else:
        context.__aenter__ = AsyncMock(return_value=outcome)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def _make_session(*outcomes) -> Mock:
    session = Mock()
    session.request = Mock(side_effect=[_request_context(o) for o in outcomes])
    session.close = AsyncMock()
    return session


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses."""
    return _make_response


@pytest.fixture
def two_url_config():
    return ClientConfig(base_urls=[PRIMARY_URL, BACKUP_URL])


@pytest.fixture
def one_url_config():
    return ClientConfig(base_urls=[PRIMARY_URL])


@pytest.fixture
def build_client():
    """
    Build a SaavnClient wired to a mock session.

    Each outcome is a mock response, or an exception raised on entering
    the request context.
    """
    def _build(config: ClientConfig, *outcomes) -> SaavnClient:
        client = SaavnClient(config=config)
        client.session = _make_session(*outcomes)
        return client
    return _build


@pytest.fixture
def requested_urls():
    """URLs requested on a client's mock session, in order."""
    def _urls(client: SaavnClient):
        return [c.kwargs["url"] for c in client.session.request.call_args_list]
    return _urls
