"""Tests for SoundSource."""

from pathlib import Path

import pytest

from sound_session.core import MissingArgumentError, SoundSource, SourceKind


class TestSoundSourceCoerce:
    """Tests for SoundSource.coerce()."""

    def test_http_url_is_remote_uri(self):
        source = SoundSource.coerce("https://example.com/a.mp3")
        assert source.kind == SourceKind.URI
        assert source.is_remote is True
        assert source.path is None

    def test_plain_string_is_asset(self):
        source = SoundSource.coerce("assets/sfx/sound3.wav")
        assert source.kind == SourceKind.ASSET
        assert source.is_remote is False
        assert source.path == Path("assets/sfx/sound3.wav")

    def test_path_is_asset(self):
        source = SoundSource.coerce(Path("/tmp/a.wav"))
        assert source == SoundSource.asset("/tmp/a.wav")

    def test_file_uri_has_path(self, tmp_path):
        target = tmp_path / "recording.wav"
        source = SoundSource.coerce(target.as_uri())
        assert source.kind == SourceKind.URI
        assert source.is_remote is False
        assert source.path == target

    def test_content_uri_has_no_path(self):
        source = SoundSource.coerce("content://media/external/audio/1")
        assert source.scheme == "content"
        assert source.path is None

    def test_source_is_returned_unchanged(self):
        source = SoundSource.from_uri("https://example.com/a.mp3")
        assert SoundSource.coerce(source) is source

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_value_raises(self, value):
        with pytest.raises(MissingArgumentError):
            SoundSource.coerce(value)

    def test_empty_location_raises(self):
        with pytest.raises(MissingArgumentError):
            SoundSource("")

    def test_str(self):
        assert str(SoundSource.from_uri("https://example.com/a.mp3")) == "https://example.com/a.mp3"
