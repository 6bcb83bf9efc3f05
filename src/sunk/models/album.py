"""Album model."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import Field

from sunk.api.query import Query
from sunk.models.completion import complete_list, is_complete
from sunk.models.cover_art import CoverArtMixin
from sunk.models.song import RawSong, Song
from sunk.models.wire import (
    WireList,
    WireModel,
    WireNumber,
    decode,
    parse_optional_uint,
    parse_uint,
)

if TYPE_CHECKING:
    from sunk.api.client import Sunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Album(CoverArtMixin):
    """An album, as listed under an artist or fetched on its own.

    Attributes:
        id: Album identifier.
        name: Album title.
        song_count: Number of songs the server reports for this album.
        artist: Album artist name.
        artist_id: Identifier of the album artist.
        cover_id: Cover art identifier, None if the album has none.
        duration: Total duration in seconds.
        play_count: Number of plays recorded by the server.
        year: Release year.
        genre: Genre tag.
        created: Date the album was added to the server (ISO 8601).
        embedded_songs: Songs included in the response; may be partial.
    """

    id: int
    name: str
    song_count: int = 0
    artist: str | None = None
    artist_id: int | None = None
    cover_id: str | None = None
    duration: int | None = None
    play_count: int | None = None
    year: int | None = None
    genre: str | None = None
    created: str | None = None
    embedded_songs: tuple[Song, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Return True if every song is embedded."""
        return is_complete(self.embedded_songs, self.song_count)

    def songs(self, client: "Sunk") -> list[Song]:
        """Return all songs of the album.

        Uses the embedded songs when complete, otherwise fetches the
        album again.

        Raises:
            TransportError: If the refetch fails at the HTTP level.
            ProtocolError: If the server reports a failure.
            DecodeError: If the refetched album is malformed.
        """
        return complete_list(
            self.embedded_songs,
            self.song_count,
            lambda: get_album(client, self.id).embedded_songs,
            "song",
        )

    @classmethod
    def from_dict(cls, data: Any) -> "Album":
        """Decode an album from its JSON object.

        Raises:
            DecodeError: If the object is malformed.
        """
        return decode(RawAlbum, data, "album").to_model()


class RawAlbum(WireModel):
    """Album as sent on the wire."""

    id: WireNumber
    name: str
    song_count: WireNumber
    artist: str | None = None
    artist_id: WireNumber | None = None
    cover_art: str | None = None
    duration: WireNumber | None = None
    play_count: WireNumber | None = None
    year: WireNumber | None = None
    genre: str | None = None
    created: str | None = None
    song: WireList[RawSong] = Field(default_factory=list)

    def to_model(self) -> Album:
        """Convert to the domain model."""
        return Album(
            id=parse_uint(self.id, "id"),
            name=self.name,
            song_count=parse_uint(self.song_count, "songCount"),
            artist=self.artist,
            artist_id=parse_optional_uint(self.artist_id, "artistId"),
            cover_id=self.cover_art,
            duration=parse_optional_uint(self.duration, "duration"),
            play_count=parse_optional_uint(self.play_count, "playCount"),
            year=parse_optional_uint(self.year, "year"),
            genre=self.genre,
            created=self.created,
            embedded_songs=tuple(song.to_model() for song in self.song),
        )


def get_album(client: "Sunk", album_id: int) -> Album:
    """Fetch an album with its songs (getAlbum).

    Raises:
        TransportError: If the request fails at the HTTP level.
        ProtocolError: If the server reports a failure.
        DecodeError: If the response is malformed.
    """
    logger.debug("Fetching album %d", album_id)
    payload = client.get("getAlbum", Query.with_("id", album_id).build())
    return Album.from_dict(payload)
