"""Catalog entities decoded from Subsonic responses."""

from sunk.models.album import Album, get_album
from sunk.models.artist import Artist, ArtistInfo, SimilarArtist, get_artist
from sunk.models.cover_art import CoverArtMixin
from sunk.models.song import Song, get_song

__all__ = [
    "Album",
    "Artist",
    "ArtistInfo",
    "CoverArtMixin",
    "SimilarArtist",
    "Song",
    "get_album",
    "get_artist",
    "get_song",
]
