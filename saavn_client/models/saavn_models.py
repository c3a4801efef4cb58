"""
Saavn Response Models

Typed records for the JSON returned by the Saavn proxy. Each record keeps
the raw payload in `raw` so fields not modelled here are still reachable.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union


def _to_int(value: Any) -> Optional[int]:
    """Coerce numeric strings ("245", "2019") to int; None if not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


@dataclass
class ImageLink:
    """Image or download link at a given quality ("500x500", "320kbps")."""
    quality: str
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageLink":
        return cls(quality=str(data.get("quality", "")), url=data.get("url") or data.get("link", ""))


def _links(value: Any) -> List[ImageLink]:
    # Global search returns a bare URL string instead of a list
    if isinstance(value, str):
        return [ImageLink(quality="", url=value)] if value else []
    if not isinstance(value, list):
        return []
    return [ImageLink.from_dict(item) for item in value if isinstance(item, dict)]


@dataclass
class AlbumRef:
    """Album a song belongs to."""
    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AlbumRef":
        data = data or {}
        return cls(id=data.get("id"), name=data.get("name"), url=data.get("url"))


@dataclass
class ArtistRef:
    """Artist credited on a song or album."""
    id: str
    name: str
    role: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    image: List[ImageLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArtistRef":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            role=data.get("role"),
            type=data.get("type"),
            url=data.get("url"),
            image=_links(data.get("image"))
        )


@dataclass
class ArtistCredits:
    """Primary, featured, and full artist credits."""
    primary: List[ArtistRef] = field(default_factory=list)
    featured: List[ArtistRef] = field(default_factory=list)
    all: List[ArtistRef] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ArtistCredits":
        data = data or {}
        return cls(
            primary=[ArtistRef.from_dict(a) for a in data.get("primary") or []],
            featured=[ArtistRef.from_dict(a) for a in data.get("featured") or []],
            all=[ArtistRef.from_dict(a) for a in data.get("all") or []]
        )


@dataclass
class Song:
    """
    Song record.

    Entity endpoints use `name`; global search items use `title`. Both
    are accepted.
    """
    id: str
    name: str
    type: str = "song"
    year: Optional[int] = None
    release_date: Optional[str] = None
    duration: Optional[int] = None  # seconds
    label: Optional[str] = None
    explicit_content: bool = False
    play_count: Optional[int] = None
    language: Optional[str] = None
    has_lyrics: bool = False
    lyrics_id: Optional[str] = None
    url: Optional[str] = None
    copyright: Optional[str] = None
    album: AlbumRef = field(default_factory=AlbumRef)
    artists: ArtistCredits = field(default_factory=ArtistCredits)
    image: List[ImageLink] = field(default_factory=list)
    download_url: List[ImageLink] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Song":
        """
        Create a Song from a proxy payload.

        Args:
            data: Song JSON object

        Returns:
            Song instance
        """
        album = data.get("album")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or data.get("title") or "",
            type=data.get("type") or "song",
            year=_to_int(data.get("year")),
            release_date=data.get("releaseDate"),
            duration=_to_int(data.get("duration")),
            label=data.get("label"),
            explicit_content=_to_bool(data.get("explicitContent")),
            play_count=_to_int(data.get("playCount")),
            language=data.get("language"),
            has_lyrics=_to_bool(data.get("hasLyrics")),
            lyrics_id=data.get("lyricsId"),
            url=data.get("url"),
            copyright=data.get("copyright"),
            # Global search gives the album as a plain name
            album=AlbumRef(name=album) if isinstance(album, str) else AlbumRef.from_dict(album),
            artists=ArtistCredits.from_dict(data.get("artists")),
            image=_links(data.get("image")),
            download_url=_links(data.get("downloadUrl")),
            raw=data
        )

    @property
    def primary_artist_names(self) -> List[str]:
        names = [artist.name for artist in self.artists.primary]
        if not names and self.raw.get("primaryArtists"):
            names = [n.strip() for n in str(self.raw["primaryArtists"]).split(",") if n.strip()]
        return names

    def best_image(self) -> Optional[str]:
        """Highest-quality cover URL (the proxy lists qualities ascending)."""
        return self.image[-1].url if self.image else None

    def best_download_url(self) -> Optional[str]:
        """Highest-bitrate stream URL."""
        return self.download_url[-1].url if self.download_url else None


@dataclass
class Album:
    """Album search result."""
    id: str
    name: str
    description: Optional[str] = None
    year: Optional[int] = None
    type: str = "album"
    play_count: Optional[int] = None
    language: Optional[str] = None
    explicit_content: bool = False
    url: Optional[str] = None
    artists: ArtistCredits = field(default_factory=ArtistCredits)
    image: List[ImageLink] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Album":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or data.get("title") or "",
            description=data.get("description"),
            year=_to_int(data.get("year")),
            type=data.get("type") or "album",
            play_count=_to_int(data.get("playCount")),
            language=data.get("language"),
            explicit_content=_to_bool(data.get("explicitContent")),
            url=data.get("url"),
            artists=ArtistCredits.from_dict(data.get("artists")),
            image=_links(data.get("image")),
            raw=data
        )


@dataclass
class Artist:
    """Artist search result."""
    id: str
    name: str
    role: Optional[str] = None
    type: str = "artist"
    url: Optional[str] = None
    image: List[ImageLink] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artist":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or data.get("title") or "",
            role=data.get("role"),
            type=data.get("type") or "artist",
            url=data.get("url"),
            image=_links(data.get("image")),
            raw=data
        )


@dataclass
class Playlist:
    """Playlist search result."""
    id: str
    name: str
    type: str = "playlist"
    url: Optional[str] = None
    song_count: Optional[int] = None
    language: Optional[str] = None
    explicit_content: bool = False
    image: List[ImageLink] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or data.get("title") or "",
            type=data.get("type") or "playlist",
            url=data.get("url"),
            song_count=_to_int(data.get("songCount")),
            language=data.get("language"),
            explicit_content=_to_bool(data.get("explicitContent")),
            image=_links(data.get("image")),
            raw=data
        )


Entity = Union[Song, Album, Artist, Playlist]

ENTITY_PARSERS: Dict[str, Callable[[Dict[str, Any]], Entity]] = {
    "song": Song.from_dict,
    "album": Album.from_dict,
    "artist": Artist.from_dict,
    "playlist": Playlist.from_dict,
}


def parse_entity(data: Dict[str, Any], default_type: str = "song") -> Entity:
    """
    Parse a search item by its `type` field.

    Args:
        data: Item JSON object
        default_type: Type to assume when the item has none or an unknown one

    Returns:
        Typed record
    """
    parser = ENTITY_PARSERS.get(data.get("type") or default_type) or ENTITY_PARSERS[default_type]
    return parser(data)


@dataclass
class SearchPage:
    """One page of results from a paginated endpoint."""
    total: int = 0
    start: int = 0
    results: List[Entity] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls,
        data: Optional[Dict[str, Any]],
        parser: Callable[[Dict[str, Any]], Entity] = Song.from_dict,
        results_key: str = "results"
    ) -> "SearchPage":
        """
        Create a page from a `data` payload.

        Args:
            data: Payload with total/start and a results list
            parser: Record constructor for each result
            results_key: Key of the results list ("songs"/"albums" on artist pages)

        Returns:
            SearchPage instance
        """
        data = data or {}
        items = data.get(results_key) or []
        return cls(
            total=_to_int(data.get("total")) or 0,
            start=_to_int(data.get("start")) or 0,
            results=[parser(item) for item in items if isinstance(item, dict)]
        )


@dataclass
class SearchResponse:
    """Envelope for paginated search endpoints."""
    success: bool
    data: SearchPage = field(default_factory=SearchPage)

    @classmethod
    def from_dict(
        cls,
        payload: Dict[str, Any],
        parser: Callable[[Dict[str, Any]], Entity] = Song.from_dict,
        results_key: str = "results"
    ) -> "SearchResponse":
        return cls(
            success=bool(payload.get("success")),
            data=SearchPage.from_dict(payload.get("data"), parser, results_key)
        )


@dataclass
class GlobalSearchSection:
    """One section (songs, albums, ...) of a global search."""
    results: List[Entity] = field(default_factory=list)
    position: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], default_type: str) -> "GlobalSearchSection":
        data = data or {}
        return cls(
            results=[
                parse_entity(item, default_type)
                for item in data.get("results") or []
                if isinstance(item, dict)
            ],
            position=_to_int(data.get("position"))
        )


@dataclass
class GlobalSearchResults:
    """All sections returned by /api/search."""
    top_query: GlobalSearchSection = field(default_factory=GlobalSearchSection)
    songs: GlobalSearchSection = field(default_factory=GlobalSearchSection)
    albums: GlobalSearchSection = field(default_factory=GlobalSearchSection)
    artists: GlobalSearchSection = field(default_factory=GlobalSearchSection)
    playlists: GlobalSearchSection = field(default_factory=GlobalSearchSection)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GlobalSearchResults":
        data = data or {}
        return cls(
            top_query=GlobalSearchSection.from_dict(data.get("topQuery"), "song"),
            songs=GlobalSearchSection.from_dict(data.get("songs"), "song"),
            albums=GlobalSearchSection.from_dict(data.get("albums"), "album"),
            artists=GlobalSearchSection.from_dict(data.get("artists"), "artist"),
            playlists=GlobalSearchSection.from_dict(data.get("playlists"), "playlist")
        )


@dataclass
class GlobalSearchResponse:
    """Envelope for /api/search."""
    success: bool
    data: GlobalSearchResults = field(default_factory=GlobalSearchResults)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GlobalSearchResponse":
        return cls(
            success=bool(payload.get("success")),
            data=GlobalSearchResults.from_dict(payload.get("data"))
        )


@dataclass
class ArtistDetail:
    """Artist profile from /api/artists/{id}."""
    id: str
    name: str
    url: Optional[str] = None
    type: str = "artist"
    image: List[ImageLink] = field(default_factory=list)
    follower_count: Optional[int] = None
    fan_count: Optional[int] = None
    is_verified: bool = False
    dominant_language: Optional[str] = None
    dominant_type: Optional[str] = None
    bio: List[Dict[str, Any]] = field(default_factory=list)
    available_languages: List[str] = field(default_factory=list)
    top_songs: List[Song] = field(default_factory=list)
    top_albums: List[Album] = field(default_factory=list)
    singles: List[Song] = field(default_factory=list)
    similar_artists: List[Artist] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArtistDetail":
        """
        Create an artist profile from the `data` payload.

        Args:
            data: Artist JSON object

        Returns:
            ArtistDetail instance
        """
        bio = data.get("bio")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            url=data.get("url"),
            type=data.get("type") or "artist",
            image=_links(data.get("image")),
            follower_count=_to_int(data.get("followerCount")),
            fan_count=_to_int(data.get("fanCount")),
            is_verified=_to_bool(data.get("isVerified")),
            dominant_language=data.get("dominantLanguage"),
            dominant_type=data.get("dominantType"),
            bio=bio if isinstance(bio, list) else [],
            available_languages=list(data.get("availableLanguages") or []),
            top_songs=[Song.from_dict(s) for s in data.get("topSongs") or []],
            top_albums=[Album.from_dict(a) for a in data.get("topAlbums") or []],
            singles=[Song.from_dict(s) for s in data.get("singles") or []],
            similar_artists=[Artist.from_dict(a) for a in data.get("similarArtists") or []],
            raw=data
        )
