"""
Tests for SearchOperations.

The Saavn client is mocked so tests check request building (paths,
pagination defaults) and response reshaping.
"""

from unittest.mock import AsyncMock, Mock

import aiohttp
import pytest

from saavn_client.models.saavn_models import Album, Artist, GlobalSearchResponse, Playlist, Song
from saavn_client.services.components.search_operations import SearchOperations

PAGE_PAYLOAD = {"success": True, "data": {"total": 1, "start": 1, "results": [{"id": "1", "name": "Item"}]}}


@pytest.fixture
def mock_client():
    client = Mock()
    client.get = AsyncMock(return_value=PAGE_PAYLOAD)
    return client


@pytest.fixture
def search_operations(mock_client):
    client_manager = Mock()
    client_manager.get_saavn_client = AsyncMock(return_value=mock_client)
    return SearchOperations(client_manager=client_manager)


class TestSearchOperations:
    """Test search request building and parsing."""

    @pytest.mark.asyncio
    async def test_global_search_passes_query_only(self, search_operations, mock_client):
        mock_client.get.return_value = {"success": True, "data": {"songs": {"results": [{"id": "s", "title": "T"}]}}}

        response = await search_operations.search("arijit")

        mock_client.get.assert_awaited_once_with("/api/search", params={"query": "arijit"})
        assert isinstance(response, GlobalSearchResponse)
        assert response.data.songs.results[0].name == "T"

    @pytest.mark.asyncio
    async def test_pagination_defaults(self, search_operations, mock_client):
        await search_operations.search_songs("believer")

        mock_client.get.assert_awaited_once_with(
            "/api/search/songs",
            params={"query": "believer", "page": 1, "limit": 20}
        )

    @pytest.mark.asyncio
    async def test_pagination_forwarded_verbatim(self, search_operations, mock_client):
        await search_operations.search_albums("evolve", page=3, limit=7)

        mock_client.get.assert_awaited_once_with(
            "/api/search/albums",
            params={"query": "evolve", "page": 3, "limit": 7}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,record_type", [
        ("search_songs", "/api/search/songs", Song),
        ("search_albums", "/api/search/albums", Album),
        ("search_artists", "/api/search/artists", Artist),
        ("search_playlists", "/api/search/playlists", Playlist),
    ])
    async def test_entity_searches(self, search_operations, mock_client, method, path, record_type):
        response = await getattr(search_operations, method)("query")

        assert mock_client.get.await_args.args[0] == path
        assert response.success is True
        assert isinstance(response.data.results[0], record_type)

    @pytest.mark.asyncio
    async def test_errors_are_reraised(self, search_operations, mock_client):
        error = aiohttp.ClientResponseError(Mock(), (), status=500, message="Internal Server Error")
        mock_client.get.side_effect = error

        with pytest.raises(aiohttp.ClientResponseError) as exc_info:
            await search_operations.search_artists("x")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_error_log_includes_response_body(self, search_operations, mock_client):
        error = aiohttp.ClientResponseError(Mock(), (), status=503, message="Service Unavailable")
        error.body = "upstream timed out"
        mock_client.get.side_effect = error
        search_operations.logger = Mock()

        with pytest.raises(aiohttp.ClientResponseError):
            await search_operations.search_songs("believer")

        kwargs = search_operations.logger.error.call_args.kwargs
        assert kwargs["body"] == "upstream timed out"
        assert kwargs["status"] == 503

    @pytest.mark.asyncio
    async def test_global_search_errors_are_logged_and_reraised(self, search_operations, mock_client):
        mock_client.get.side_effect = aiohttp.ClientConnectionError("refused")
        search_operations.logger = Mock()

        with pytest.raises(aiohttp.ClientConnectionError):
            await search_operations.search("arijit")

        kwargs = search_operations.logger.error.call_args.kwargs
        assert kwargs["query"] == "arijit"
        assert kwargs["body"] is None
