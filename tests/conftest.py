"""Test fixtures for sunk tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from sunk.api.client import Sunk


def album_json(
    album_id: str = "1",
    name: str = "Bellevue",
    song_count: int = 9,
    **extra: Any,
) -> dict[str, Any]:
    """Return an album object as served by getArtist."""
    data: dict[str, Any] = {
        "id": album_id,
        "name": name,
        "artist": "Misteur Valaire",
        "artistId": "1",
        "coverArt": f"al-{album_id}",
        "songCount": song_count,
        "duration": 1920,
        "playCount": 2223,
        "created": "2017-03-12T11:07:25.000Z",
        "genre": "(255)",
    }
    data.update(extra)
    return data


def song_json(song_id: str = "27", title: str = "Brandy", **extra: Any) -> dict[str, Any]:
    """Return a song object as served by getSong/getTopSongs."""
    data: dict[str, Any] = {
        "id": song_id,
        "parent": "25",
        "isDir": False,
        "title": title,
        "album": "Bellevue",
        "artist": "Misteur Valaire",
        "track": 1,
        "year": 2013,
        "genre": "Electronic",
        "coverArt": "25",
        "size": 4891206,
        "contentType": "audio/mpeg",
        "suffix": "mp3",
        "duration": 204,
        "bitRate": 192,
        "path": "Misteur Valaire/Bellevue/01 - Brandy.mp3",
        "albumId": "1",
        "artistId": "1",
        "type": "music",
    }
    data.update(extra)
    return data


@pytest.fixture
def artist_payload() -> dict[str, Any]:
    """Artist whose embedded album list is complete."""
    return {
        "id": "1",
        "name": "Misteur Valaire",
        "coverArt": "ar-1",
        "albumCount": 1,
        "album": [album_json()],
    }


@pytest.fixture
def truncated_artist_payload() -> dict[str, Any]:
    """Artist reporting five albums but embedding only one."""
    return {
        "id": "1",
        "name": "Misteur Valaire",
        "coverArt": "ar-1",
        "albumCount": 5,
        "album": [album_json()],
    }


@pytest.fixture
def mock_client() -> MagicMock:
    """Dispatcher double recording get/get_bytes calls."""
    return MagicMock(spec=Sunk)
