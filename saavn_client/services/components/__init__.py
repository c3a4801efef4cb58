"""
Service Components

Modular components for the Saavn service.
Each component follows single responsibility principle for better maintainability.
"""

from .client_manager import ClientManager
from .search_operations import SearchOperations
from .song_operations import SongOperations
from .artist_operations import ArtistOperations

__all__ = [
    "ClientManager",
    "SearchOperations",
    "SongOperations",
    "ArtistOperations",
]
