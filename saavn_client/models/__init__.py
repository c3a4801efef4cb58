"""
Models Module

Configuration and typed response records for the Saavn client.
"""

from .config import ClientConfig, parse_base_urls, DEFAULT_BASE_URL
from .saavn_models import (
    ImageLink,
    AlbumRef,
    ArtistRef,
    ArtistCredits,
    Song,
    Album,
    Artist,
    Playlist,
    SearchPage,
    SearchResponse,
    GlobalSearchSection,
    GlobalSearchResults,
    GlobalSearchResponse,
    ArtistDetail,
    parse_entity
)

__all__ = [
    # Configuration
    "ClientConfig",
    "parse_base_urls",
    "DEFAULT_BASE_URL",

    # Response records
    "ImageLink",
    "AlbumRef",
    "ArtistRef",
    "ArtistCredits",
    "Song",
    "Album",
    "Artist",
    "Playlist",
    "SearchPage",
    "SearchResponse",
    "GlobalSearchSection",
    "GlobalSearchResults",
    "GlobalSearchResponse",
    "ArtistDetail",
    "parse_entity",
]
