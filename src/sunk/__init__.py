"""Client library for Subsonic-compatible music servers."""

from sunk.api import (
    DecodeError,
    ProtocolError,
    Query,
    Sunk,
    SunkError,
    TransportError,
)
from sunk.core import SunkConfig, setup_logging
from sunk.models import (
    Album,
    Artist,
    ArtistInfo,
    SimilarArtist,
    Song,
    get_album,
    get_artist,
    get_song,
)

__version__ = "0.1.0"

__all__ = [
    "Sunk",
    "SunkConfig",
    "Query",
    "setup_logging",
    "Artist",
    "ArtistInfo",
    "SimilarArtist",
    "Album",
    "Song",
    "get_artist",
    "get_album",
    "get_song",
    "SunkError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
]
