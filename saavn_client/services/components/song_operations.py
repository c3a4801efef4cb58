"""
Song Operations Component

Handles song lookups and suggestions.
"""

from typing import List

import structlog

from ...exceptions import SongNotFoundError
from ...models.saavn_models import Song
from .client_manager import ClientManager

logger = structlog.get_logger(__name__)


class SongOperations:
    """
    Handles song-related API operations.

    Responsibilities:
    - Song detail lookup by id
    - Song suggestions
    """

    def __init__(self, client_manager: ClientManager):
        """
        Initialize song operations.

        Args:
            client_manager: Client manager instance
        """
        self.client_manager = client_manager
        self.logger = logger.bind(component="SongOperations")

        self.logger.info("Song Operations initialized")

    async def get_song(self, song_id: str) -> Song:
        """
        Get a song by id.

        Args:
            song_id: Saavn song id

        Returns:
            The first song in the response

        Raises:
            SongNotFoundError: Unsuccessful response or empty result list
        """
        client = await self.client_manager.get_saavn_client()
        payload = await client.get(f"/api/songs/{song_id}")

        payload = payload if isinstance(payload, dict) else {}
        songs = payload.get("data")
        if payload.get("success") and isinstance(songs, list) and len(songs) > 0:
            return Song.from_dict(songs[0])

        self.logger.warning("Song not found", song_id=song_id)
        raise SongNotFoundError(song_id)

    async def get_suggestions(self, song_id: str) -> List[Song]:
        """
        Get songs similar to a song.

        Args:
            song_id: Saavn song id

        Returns:
            Suggested songs; empty when the response is unsuccessful
        """
        client = await self.client_manager.get_saavn_client()
        payload = await client.get(f"/api/songs/{song_id}/suggestions")

        songs = payload.get("data") if isinstance(payload, dict) and payload.get("success") else None
        if isinstance(songs, list):
            return [Song.from_dict(song) for song in songs if isinstance(song, dict)]

        self.logger.debug("No suggestions", song_id=song_id)
        return []
