"""Song model."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sunk.api.query import Query
from sunk.models.cover_art import CoverArtMixin
from sunk.models.wire import (
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
class Song(CoverArtMixin):
    """A single track.

    Attributes:
        id: Song identifier.
        title: Track title.
        album: Album name.
        album_id: Identifier of the containing album.
        artist: Artist name.
        artist_id: Identifier of the artist.
        track: Track number on its disc.
        disc_number: Disc number.
        year: Release year.
        genre: Genre tag.
        cover_id: Cover art identifier, None if the song has none.
        size: File size in bytes.
        content_type: MIME type of the file.
        suffix: File extension.
        duration: Duration in seconds.
        bit_rate: Bit rate in kbps.
        path: Path of the file on the server.
    """

    id: int
    title: str
    album: str | None = None
    album_id: int | None = None
    artist: str | None = None
    artist_id: int | None = None
    track: int | None = None
    disc_number: int | None = None
    year: int | None = None
    genre: str | None = None
    cover_id: str | None = None
    size: int | None = None
    content_type: str | None = None
    suffix: str | None = None
    duration: int | None = None
    bit_rate: int | None = None
    path: str | None = None

    @property
    def display_title(self) -> str:
        """Return title for display, with filename fallback."""
        if self.title or not self.path:
            return self.title
        name = self.path.rsplit("/", 1)[-1]
        if "." in name:
            name = name.rsplit(".", 1)[0]
        return name

    @classmethod
    def from_dict(cls, data: Any) -> "Song":
        """Decode a song from its JSON object.

        Raises:
            DecodeError: If the object is malformed.
        """
        return decode(RawSong, data, "song").to_model()


class RawSong(WireModel):
    """Song as sent on the wire."""

    id: WireNumber
    title: str
    album: str | None = None
    album_id: WireNumber | None = None
    artist: str | None = None
    artist_id: WireNumber | None = None
    track: WireNumber | None = None
    disc_number: WireNumber | None = None
    year: WireNumber | None = None
    genre: str | None = None
    cover_art: str | None = None
    size: WireNumber | None = None
    content_type: str | None = None
    suffix: str | None = None
    duration: WireNumber | None = None
    bit_rate: WireNumber | None = None
    path: str | None = None

    def to_model(self) -> Song:
        """Convert to the domain model."""
        return Song(
            id=parse_uint(self.id, "id"),
            title=self.title,
            album=self.album,
            album_id=parse_optional_uint(self.album_id, "albumId"),
            artist=self.artist,
            artist_id=parse_optional_uint(self.artist_id, "artistId"),
            track=parse_optional_uint(self.track, "track"),
            disc_number=parse_optional_uint(self.disc_number, "discNumber"),
            year=parse_optional_uint(self.year, "year"),
            genre=self.genre,
            cover_id=self.cover_art,
            size=parse_optional_uint(self.size, "size"),
            content_type=self.content_type,
            suffix=self.suffix,
            duration=parse_optional_uint(self.duration, "duration"),
            bit_rate=parse_optional_uint(self.bit_rate, "bitRate"),
            path=self.path,
        )


def get_song(client: "Sunk", song_id: int) -> Song:
    """Fetch a song by id (getSong).

    Raises:
        TransportError: If the request fails at the HTTP level.
        ProtocolError: If the server reports a failure.
        DecodeError: If the response is malformed.
    """
    logger.debug("Fetching song %d", song_id)
    payload = client.get("getSong", Query.with_("id", song_id).build())
    return Song.from_dict(payload)
