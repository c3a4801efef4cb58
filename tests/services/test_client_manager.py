"""
Tests for ClientManager.

The manager hands out one cached client per lifetime and owns its session.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from saavn_client.services.components.client_manager import ClientManager


@pytest.fixture
def client_factory(two_url_config):
    """Factory stub returning a client with mocked session hooks."""
    client = Mock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)

    factory = Mock()
    factory.config = two_url_config
    factory.create_saavn_client = Mock(return_value=client)
    return factory


class TestClientManager:
    """Test client caching and teardown."""

    @pytest.mark.asyncio
    async def test_client_is_cached_and_opened_once(self, client_factory):
        manager = ClientManager(client_factory=client_factory)

        first = await manager.get_saavn_client()
        second = await manager.get_saavn_client()

        assert first is second
        client_factory.create_saavn_client.assert_called_once()
        first.__aenter__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_releases_client(self, client_factory):
        manager = ClientManager(client_factory=client_factory)
        client = await manager.get_saavn_client()

        await manager.close()

        client.__aexit__.assert_awaited_once_with(None, None, None)
        assert manager._saavn_client is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self, client_factory):
        manager = ClientManager(client_factory=client_factory)

        await manager.close()

        client_factory.create_saavn_client.assert_not_called()
