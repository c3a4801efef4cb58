"""
Saavn Service

Single entry point for the Saavn domain operations (search, songs,
artists), built from modular components that share one client.
"""

from typing import List, Optional

import structlog

from ..api import APIClientFactory
from ..models.config import ClientConfig
from ..models.saavn_models import (
    ArtistDetail,
    GlobalSearchResponse,
    SearchResponse,
    Song,
)
from .components import (
    ArtistOperations,
    ClientManager,
    SearchOperations,
    SongOperations,
)
from .components.search_operations import DEFAULT_LIMIT, DEFAULT_PAGE

logger = structlog.get_logger(__name__)


class SaavnService:
    """
    Saavn API service using modular components.

    Provides:
    - A shared client (and failover state) for every operation
    - Typed records for every response
    - Session lifecycle through async context management
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        client_factory: Optional[APIClientFactory] = None
    ):
        """
        Initialize Saavn service with modular components.

        Args:
            config: Client configuration (defaults to environment resolution)
            client_factory: Factory to build clients with (optional)
        """
        self.logger = logger.bind(service="SaavnService")

        self.client_manager = ClientManager(config=config, client_factory=client_factory)
        self.search_operations = SearchOperations(client_manager=self.client_manager)
        self.song_operations = SongOperations(client_manager=self.client_manager)
        self.artist_operations = ArtistOperations(client_manager=self.client_manager)

        self.logger.info("Saavn Service initialized", components_loaded=4)

    async def __aenter__(self):
        await self.client_manager.get_saavn_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # Search Operations (delegated to SearchOperations)

    async def search(self, query: str) -> GlobalSearchResponse:
        """Global search across all entity types."""
        return await self.search_operations.search(query)

    async def search_songs(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.search_operations.search_songs(query, page=page, limit=limit)

    async def search_albums(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.search_operations.search_albums(query, page=page, limit=limit)

    async def search_artists(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.search_operations.search_artists(query, page=page, limit=limit)

    async def search_playlists(self, query: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.search_operations.search_playlists(query, page=page, limit=limit)

    # Song Operations (delegated to SongOperations)

    async def get_song(self, song_id: str) -> Song:
        """Get a song by id; raises SongNotFoundError when absent."""
        return await self.song_operations.get_song(song_id)

    async def get_suggestions(self, song_id: str) -> List[Song]:
        """Get suggested songs; empty list when none."""
        return await self.song_operations.get_suggestions(song_id)

    # Artist Operations (delegated to ArtistOperations)

    async def get_artist(self, artist_id: str) -> ArtistDetail:
        return await self.artist_operations.get_artist(artist_id)

    async def get_artist_songs(self, artist_id: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.artist_operations.get_artist_songs(artist_id, page=page, limit=limit)

    async def get_artist_albums(self, artist_id: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> SearchResponse:
        return await self.artist_operations.get_artist_albums(artist_id, page=page, limit=limit)

    async def close(self):
        """Close the client connection."""
        await self.client_manager.close()
        self.logger.info("Saavn Service closed")


# Global Saavn service instance
_global_saavn_service: Optional[SaavnService] = None


def get_saavn_service(config: Optional[ClientConfig] = None) -> SaavnService:
    """
    Get global Saavn service instance.

    Args:
        config: Client configuration (optional, used for initialization)

    Returns:
        Global SaavnService instance
    """
    global _global_saavn_service

    if _global_saavn_service is None:
        _global_saavn_service = SaavnService(config=config)

    return _global_saavn_service


async def close_saavn_service():
    """Close global Saavn service."""
    global _global_saavn_service

    if _global_saavn_service:
        await _global_saavn_service.close()
        _global_saavn_service = None
