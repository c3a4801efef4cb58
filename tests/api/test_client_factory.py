"""
Tests for APIClientFactory.

Ensures clients are built from configuration and that clients for the
same base URLs share failover state.
"""

import pytest

from saavn_client.api import client_factory
from saavn_client.api.client_factory import (
    APIClientFactory,
    create_saavn_client,
    get_client_factory,
    reset_client_factory,
)
from saavn_client.api.saavn_client import SaavnClient
from saavn_client.models.config import ClientConfig


@pytest.fixture
def factory():
    return APIClientFactory(ClientConfig(base_urls=["https://a.example", "https://b.example"]))


@pytest.fixture(autouse=True)
def clean_global_factory():
    reset_client_factory()
    yield
    reset_client_factory()


class TestAPIClientFactory:
    """Test APIClientFactory client creation."""

    def test_creates_client_from_config(self, factory):
        client = factory.create_saavn_client()

        assert isinstance(client, SaavnClient)
        assert client.url_pool.base_urls == ["https://a.example", "https://b.example"]
        assert client.timeout == 10.0

    def test_clients_share_url_pool(self, factory):
        first = factory.create_saavn_client()
        second = factory.create_saavn_client()

        assert first.url_pool is second.url_pool

        first.url_pool.advance()
        assert second.base_url == "https://b.example"

    def test_overrides_get_their_own_pool(self, factory):
        default_client = factory.create_saavn_client()
        custom_client = factory.create_saavn_client(base_urls=["https://c.example/"], timeout_seconds=3)

        assert custom_client.url_pool is not default_client.url_pool
        assert custom_client.base_url == "https://c.example"
        assert custom_client.timeout == 3

    def test_failover_stats_and_reset(self, factory):
        client = factory.create_saavn_client()
        client.url_pool.advance()

        stats = factory.get_failover_stats()
        assert stats["https://a.example,https://b.example"]["current_index"] == 1

        factory.reset_url_pools()
        assert client.base_url == "https://a.example"

    def test_defaults_to_environment(self, monkeypatch):
        monkeypatch.setenv("SAAVN_API_BASE_URLS", "https://env-a.example, https://env-b.example")

        factory = APIClientFactory()

        assert factory.config.base_urls == ["https://env-a.example", "https://env-b.example"]


class TestGlobalFactory:
    """Test module-level factory helpers."""

    def test_global_factory_is_cached(self):
        assert get_client_factory() is get_client_factory()

    def test_reset_client_factory(self):
        first = get_client_factory()
        reset_client_factory()
        assert client_factory._global_factory is None
        assert get_client_factory() is not first

    def test_create_saavn_client_uses_global_factory(self, monkeypatch):
        monkeypatch.delenv("SAAVN_API_BASE_URLS", raising=False)
        monkeypatch.delenv("SAAVN_API_BASE_URL", raising=False)

        client = create_saavn_client()

        assert client.base_url == "https://saavn.sumit.co"
