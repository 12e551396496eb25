"""Tests for the BaseSound class."""

from unittest.mock import patch

import pytest

from sound_session.core import STATUS, PlaybackError, SoundSource

from .mock_class import MockSound


@pytest.fixture
def sound():
    sound = MockSound(SoundSource.asset("click.wav"))
    sound.load()
    return sound


class TestBaseSoundLoad:
    """Tests for load/unload."""

    def test_initialization(self):
        sound = MockSound(SoundSource.asset("click.wav"))
        assert sound.source == SoundSource.asset("click.wav")
        assert sound.is_loaded is False
        assert sound.status() == STATUS.STOPPED

    def test_load_twice_is_noop(self, sound):
        sound.load()
        assert sound.calls == ["load"]

    def test_play_before_load_raises(self):
        sound = MockSound(SoundSource.asset("click.wav"))
        with pytest.raises(PlaybackError):
            sound.play()
        assert sound.calls == []

    def test_unload_stops_playing_sound(self, sound):
        sound.play()
        sound.unload()
        assert sound.calls == ["load", "play", "stop", "unload"]
        assert sound.is_loaded is False
        assert sound.status() == STATUS.STOPPED

    def test_unload_twice_is_noop(self, sound):
        sound.unload()
        sound.unload()
        assert sound.calls.count("unload") == 1

    def test_play_after_unload_raises(self, sound):
        sound.unload()
        with pytest.raises(PlaybackError):
            sound.replay()


class TestBaseSoundReplay:
    """Tests for replay."""

    def test_replay_from_stopped(self, sound):
        sound.replay()
        assert sound.calls == ["load", "seek:0", "play"]
        assert sound.status() == STATUS.PLAYING

    def test_replay_while_playing_rewinds_only(self, sound):
        sound.play()
        sound.replay()
        assert sound.calls == ["load", "play", "seek:0"]
        assert sound.status() == STATUS.PLAYING

    def test_replay_from_paused(self, sound):
        sound.play()
        sound.pause()
        sound.replay()
        assert sound.calls[-2:] == ["seek:0", "play"]
        assert sound.status() == STATUS.PLAYING

    def test_replay_is_set_status_from_zero(self, sound):
        with patch.object(sound, "set_status", wraps=sound.set_status) as set_status:
            sound.replay()
        set_status.assert_called_once_with(should_play=True, position_ms=0)
        assert sound.status() == STATUS.PLAYING

    def test_replay_after_playback_finished(self, sound):
        sound.play()
        sound._on_playback_finished()
        assert sound.status() == STATUS.STOPPED
        sound.replay()
        assert sound.status() == STATUS.PLAYING


class TestBaseSoundSetStatus:
    """Tests for set_status."""

    def test_should_play_false_pauses(self, sound):
        sound.play()
        sound.set_status(should_play=False)
        assert sound.status() == STATUS.PAUSED

    def test_should_play_true_plays(self, sound):
        sound.set_status(should_play=True)
        assert sound.status() == STATUS.PLAYING

    def test_position_is_applied(self, sound):
        sound.set_status(position_ms=1500)
        assert sound.position_ms == 1500
        assert sound.status() == STATUS.STOPPED

    def test_negative_position_raises(self, sound):
        with pytest.raises(PlaybackError):
            sound.set_status(position_ms=-1)
