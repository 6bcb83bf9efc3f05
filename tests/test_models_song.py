"""Tests for the Song model."""

from unittest.mock import MagicMock

import pytest

from conftest import song_json
from sunk.api.errors import DecodeError, InvalidNumberError
from sunk.models.song import Song, get_song


class TestSongDecode:
    """Tests for decoding Song payloads."""

    def test_parse_full(self) -> None:
        """Test every supported field."""
        song = Song.from_dict(song_json())
        assert song.id == 27
        assert song.title == "Brandy"
        assert song.album == "Bellevue"
        assert song.album_id == 1
        assert song.artist == "Misteur Valaire"
        assert song.artist_id == 1
        assert song.track == 1
        assert song.year == 2013
        assert song.genre == "Electronic"
        assert song.cover_id == "25"
        assert song.size == 4891206
        assert song.content_type == "audio/mpeg"
        assert song.suffix == "mp3"
        assert song.duration == 204
        assert song.bit_rate == 192
        assert song.path == "Misteur Valaire/Bellevue/01 - Brandy.mp3"

    def test_minimal(self) -> None:
        """Test optional fields default to None."""
        song = Song.from_dict({"id": "3", "title": "Intro"})
        assert song.id == 3
        assert song.album_id is None
        assert song.disc_number is None
        assert song.cover_id is None
        assert song.path is None

    def test_invalid_track(self) -> None:
        """Test a malformed track number names the field."""
        with pytest.raises(InvalidNumberError) as exc_info:
            Song.from_dict(song_json(track="one"))
        assert exc_info.value.field == "track"
        assert exc_info.value.value == "one"

    def test_missing_title(self) -> None:
        """Test title is required."""
        data = song_json()
        del data["title"]
        with pytest.raises(DecodeError) as exc_info:
            Song.from_dict(data)
        assert exc_info.value.field == "title"

    def test_not_an_object(self) -> None:
        """Test a list in place of a song is rejected."""
        with pytest.raises(DecodeError):
            Song.from_dict([song_json()])


class TestSongDisplayTitle:
    """Tests for Song.display_title."""

    def test_uses_title(self) -> None:
        """Test the title is preferred."""
        assert Song(id=1, title="Brandy", path="x/y.mp3").display_title == "Brandy"

    def test_falls_back_to_filename(self) -> None:
        """Test an empty title falls back to the file name."""
        song = Song(id=1, title="", path="Misteur Valaire/Bellevue/01 - Brandy.mp3")
        assert song.display_title == "01 - Brandy"

    def test_no_path(self) -> None:
        """Test an empty title without path stays empty."""
        assert Song(id=1, title="").display_title == ""


class TestGetSong:
    """Tests for get_song."""

    def test_get_song(self, mock_client: MagicMock) -> None:
        """Test fetching a song by id."""
        mock_client.get.return_value = song_json()
        song = get_song(mock_client, 27)
        mock_client.get.assert_called_once_with("getSong", (("id", "27"),))
        assert song.title == "Brandy"

    def test_cover_art(self, mock_client: MagicMock) -> None:
        """Test song covers are fetched by cover id."""
        mock_client.get_bytes.return_value = b"img"
        assert Song.from_dict(song_json()).cover_art(mock_client) == b"img"
        mock_client.get_bytes.assert_called_once_with("getCoverArt", (("id", "25"),))
