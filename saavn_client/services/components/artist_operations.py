"""
Artist Operations Component

Handles artist profile, songs, and albums requests.
"""

import structlog

from ...models.saavn_models import Album, ArtistDetail, SearchResponse, Song
from .client_manager import ClientManager
from .search_operations import DEFAULT_LIMIT, DEFAULT_PAGE

logger = structlog.get_logger(__name__)


class ArtistOperations:
    """
    Handles artist-related API operations.

    Responsibilities:
    - Artist profile lookup
    - Paginated artist songs and albums
    """

    def __init__(self, client_manager: ClientManager):
        """
        Initialize artist operations.

        Args:
            client_manager: Client manager instance
        """
        self.client_manager = client_manager
        self.logger = logger.bind(component="ArtistOperations")

        self.logger.info("Artist Operations initialized")

    async def get_artist(self, artist_id: str) -> ArtistDetail:
        """
        Get an artist profile.

        Args:
            artist_id: Saavn artist id

        Returns:
            Artist profile
        """
        client = await self.client_manager.get_saavn_client()
        payload = await client.get(f"/api/artists/{artist_id}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            self.logger.warning("Unexpected artist payload", artist_id=artist_id)
            data = {}
        return ArtistDetail.from_dict(data)

    async def get_artist_songs(
        self,
        artist_id: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT
    ) -> SearchResponse:
        """Get a page of an artist's songs."""
        client = await self.client_manager.get_saavn_client()
        payload = await client.get(
            f"/api/artists/{artist_id}/songs",
            params={"page": page, "limit": limit}
        )
        return SearchResponse.from_dict(payload, Song.from_dict, results_key="songs")

    async def get_artist_albums(
        self,
        artist_id: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT
    ) -> SearchResponse:
        """Get a page of an artist's albums."""
        client = await self.client_manager.get_saavn_client()
        payload = await client.get(
            f"/api/artists/{artist_id}/albums",
            params={"page": page, "limit": limit}
        )
        return SearchResponse.from_dict(payload, Album.from_dict, results_key="albums")
