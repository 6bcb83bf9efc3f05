"""Artist model and artist-level operations.

Example:
    artist = get_artist(client, 1)
    for album in artist.albums(client):
        print(album.name, album.song_count)
    info = artist.info(client, count=5)
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import Field

from sunk.api.query import Query
from sunk.models.album import Album, RawAlbum
from sunk.models.completion import complete_list, is_complete
from sunk.models.cover_art import CoverArtMixin
from sunk.models.song import Song
from sunk.models.wire import (
    WireList,
    WireModel,
    WireNumber,
    decode,
    parse_uint,
    payload_list,
)

if TYPE_CHECKING:
    from sunk.api.client import Sunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimilarArtist(CoverArtMixin):
    """An artist listed as similar in ``ArtistInfo``.

    Attributes:
        id: Artist identifier.
        name: Artist name.
        cover_id: Cover art identifier (wire ``coverArt``), None if absent.
        album_count: Number of albums the server reports.
    """

    id: int
    name: str
    cover_id: str | None = None
    album_count: int = 0


@dataclass(frozen=True, slots=True)
class ArtistInfo:
    """Supplementary artist metadata, fetched on demand.

    Attributes:
        biography: Biography text (may contain HTML).
        musicbrainz_id: MusicBrainz artist MBID.
        lastfm_url: Last.fm artist page.
        image_urls: Small, medium and large image URLs.
        similar_artists: Similar artists, most similar first.
    """

    biography: str
    musicbrainz_id: str
    lastfm_url: str
    image_urls: tuple[str, str, str]
    similar_artists: tuple[SimilarArtist, ...] = ()

    @property
    def small_image_url(self) -> str:
        """Return the small image URL."""
        return self.image_urls[0]

    @property
    def medium_image_url(self) -> str:
        """Return the medium image URL."""
        return self.image_urls[1]

    @property
    def large_image_url(self) -> str:
        """Return the large image URL."""
        return self.image_urls[2]

    @classmethod
    def from_dict(cls, data: Any) -> "ArtistInfo":
        """Decode artist info from its JSON object.

        Raises:
            DecodeError: If the object is malformed.
        """
        return decode(RawArtistInfo, data, "artist info").to_model()


@dataclass(frozen=True, slots=True)
class Artist(CoverArtMixin):
    """A catalog artist.

    ``album_count`` is the total reported by the server. The embedded
    album list may be shorter; ``albums()`` resolves the full list.

    Attributes:
        id: Artist identifier.
        name: Artist name.
        cover_id: Cover art identifier, None if the artist has none.
        album_count: Number of albums the server reports.
        embedded_albums: Albums included in the response; may be partial.
    """

    id: int
    name: str
    cover_id: str | None = None
    album_count: int = 0
    embedded_albums: tuple[Album, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Return True if every album is embedded."""
        return is_complete(self.embedded_albums, self.album_count)

    def albums(self, client: "Sunk") -> list[Album]:
        """Return all albums of the artist.

        Uses the embedded albums when complete, otherwise issues one
        ``getArtist`` request and returns its albums.

        Raises:
            TransportError: If the refetch fails at the HTTP level.
            ProtocolError: If the server reports a failure.
            DecodeError: If the refetched artist is malformed.
        """
        return complete_list(
            self.embedded_albums,
            self.album_count,
            lambda: get_artist(client, self.id).embedded_albums,
            "album",
        )

    def info(
        self,
        client: "Sunk",
        count: int | None = None,
        include_not_present: bool | None = None,
    ) -> ArtistInfo:
        """Fetch biography, images and similar artists (getArtistInfo).

        Args:
            client: Dispatcher to issue the request with.
            count: Maximum number of similar artists, server default if None.
            include_not_present: Include similar artists absent from the library.

        Raises:
            TransportError: If the request fails at the HTTP level.
            ProtocolError: If the server reports a failure.
            DecodeError: If the response is malformed.
        """
        params = (
            Query.with_("id", self.id)
            .arg("count", count)
            .arg("includeNotPresent", include_not_present)
            .build()
        )
        payload = client.get("getArtistInfo", params)
        return ArtistInfo.from_dict(payload)

    def top_songs(self, client: "Sunk", count: int | None = None) -> list[Song]:
        """Fetch the artist's most popular songs (getTopSongs).

        Args:
            client: Dispatcher to issue the request with.
            count: Maximum number of songs, server default if None.

        Raises:
            TransportError: If the request fails at the HTTP level.
            ProtocolError: If the server reports a failure.
            DecodeError: If any song in the response is malformed.
        """
        params = Query.with_("id", self.id).arg("artist", self.name).arg("count", count).build()
        payload = client.get("getTopSongs", params)
        return [Song.from_dict(item) for item in payload_list(payload, "song")]

    @classmethod
    def from_dict(cls, data: Any) -> "Artist":
        """Decode an artist from its JSON object.

        Raises:
            DecodeError: If the object is malformed.
        """
        return decode(RawArtist, data, "artist").to_model()


class RawSimilarArtist(WireModel):
    """Similar artist as sent on the wire."""

    id: WireNumber
    name: str
    cover_art: str | None = None
    album_count: WireNumber

    def to_model(self) -> SimilarArtist:
        """Convert to the domain model."""
        return SimilarArtist(
            id=parse_uint(self.id, "id"),
            name=self.name,
            cover_id=self.cover_art,
            album_count=parse_uint(self.album_count, "albumCount"),
        )


class RawArtistInfo(WireModel):
    """Artist info as sent on the wire."""

    biography: str
    music_brainz_id: str
    last_fm_url: str
    small_image_url: str
    medium_image_url: str
    large_image_url: str
    similar_artist: WireList[RawSimilarArtist] = Field(default_factory=list)

    def to_model(self) -> ArtistInfo:
        """Convert to the domain model."""
        return ArtistInfo(
            biography=self.biography,
            musicbrainz_id=self.music_brainz_id,
            lastfm_url=self.last_fm_url,
            image_urls=(self.small_image_url, self.medium_image_url, self.large_image_url),
            similar_artists=tuple(similar.to_model() for similar in self.similar_artist),
        )


class RawArtist(WireModel):
    """Artist as sent on the wire."""

    id: WireNumber
    name: str
    cover_art: str | None = None
    album_count: WireNumber
    album: WireList[RawAlbum] = Field(default_factory=list)

    def to_model(self) -> Artist:
        """Convert to the domain model."""
        return Artist(
            id=parse_uint(self.id, "id"),
            name=self.name,
            cover_id=self.cover_art,
            album_count=parse_uint(self.album_count, "albumCount"),
            embedded_albums=tuple(album.to_model() for album in self.album),
        )


def get_artist(client: "Sunk", artist_id: int) -> Artist:
    """Fetch an artist with its albums (getArtist).

    Raises:
        TransportError: If the request fails at the HTTP level.
        ProtocolError: If the server reports a failure.
        DecodeError: If the response is malformed.
    """
    logger.debug("Fetching artist %d", artist_id)
    payload = client.get("getArtist", Query.with_("id", artist_id).build())
    return Artist.from_dict(payload)
