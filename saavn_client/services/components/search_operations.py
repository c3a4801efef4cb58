"""
Search Operations Component

Handles search requests against the Saavn proxy: the global search and the
per-entity paginated searches.
"""

from typing import Any, Callable, Dict

import structlog

from ...models.saavn_models import (
    Album,
    Artist,
    GlobalSearchResponse,
    Playlist,
    SearchResponse,
    Song,
)
from .client_manager import ClientManager

logger = structlog.get_logger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


class SearchOperations:
    """
    Handles search API operations.

    Responsibilities:
    - Global search across songs, albums, artists, and playlists
    - Paginated per-entity search
    """

    SEARCH_PATH = "/api/search"

    def __init__(self, client_manager: ClientManager):
        """
        Initialize search operations.

        Args:
            client_manager: Client manager instance
        """
        self.client_manager = client_manager
        self.logger = logger.bind(component="SearchOperations")

        self.logger.info("Search Operations initialized")

    async def search(self, query: str) -> GlobalSearchResponse:
        """
        Global search; returns top query plus a section per entity type.

        Args:
            query: Search text

        Returns:
            Global search response
        """
        client = await self.client_manager.get_saavn_client()

        try:
            payload = await client.get(self.SEARCH_PATH, params={"query": query})
        except Exception as e:
            self.logger.error(
                "Search error",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
                status=getattr(e, "status", None),
                body=getattr(e, "body", None)
            )
            raise

        return GlobalSearchResponse.from_dict(payload)

    async def search_songs(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        """Search songs."""
        return await self._paginated_search("songs", Song.from_dict, query, page, limit)

    async def search_albums(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        """Search albums."""
        return await self._paginated_search("albums", Album.from_dict, query, page, limit)

    async def search_artists(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        """Search artists."""
        return await self._paginated_search("artists", Artist.from_dict, query, page, limit)

    async def search_playlists(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        """Search playlists."""
        return await self._paginated_search("playlists", Playlist.from_dict, query, page, limit)

    async def _paginated_search(
        self,
        entity: str,
        parser: Callable[[Dict[str, Any]], Any],
        query: str,
        page: int,
        limit: int
    ) -> SearchResponse:
        """
        Run a paginated search for one entity type.

        Args:
            entity: Entity path segment ("songs", "albums", ...)
            parser: Record constructor for results
            query: Search text
            page: Page number, forwarded verbatim
            limit: Page size, forwarded verbatim

        Returns:
            Search response with typed results
        """
        path = f"{self.SEARCH_PATH}/{entity}"
        client = await self.client_manager.get_saavn_client()

        try:
            payload = await client.get(path, params={"query": query, "page": page, "limit": limit})
        except Exception as e:
            self.logger.error(
                f"Search {entity} error",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
                status=getattr(e, "status", None),
                body=getattr(e, "body", None)
            )
            raise

        response = SearchResponse.from_dict(payload, parser)
        self.logger.debug(
            f"Search {entity} response",
            query=query,
            page=page,
            success=response.success,
            total=response.data.total,
            returned=len(response.data.results)
        )
        return response
