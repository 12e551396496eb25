"""Tests for the STATUS enum and the StatusMixin class."""

import pytest

from sound_session.core import STATUS, PlaybackError

from .mock_class import ConcreteStatusMixin


class TestStatusEnum:
    """Tests for the STATUS enum."""

    def test_status_values(self):
        """Test that STATUS enum has correct values."""
        assert STATUS.ERROR.value == -1
        assert STATUS.STOPPED.value == 1
        assert STATUS.PLAYING.value == 2
        assert STATUS.PAUSED.value == 3


class TestStatusMixin:
    """Tests for the StatusMixin base class."""

    def test_initial_status_is_stopped(self):
        obj = ConcreteStatusMixin()
        assert obj.status() == STATUS.STOPPED

    def test_play_changes_status(self):
        obj = ConcreteStatusMixin()
        obj.play()
        assert obj.status() == STATUS.PLAYING

    def test_pause_changes_status(self):
        obj = ConcreteStatusMixin()
        obj.play()
        obj.pause()
        assert obj.status() == STATUS.PAUSED

    def test_pause_when_stopped_is_noop(self):
        obj = ConcreteStatusMixin()
        obj.pause()
        assert obj.status() == STATUS.STOPPED

    def test_resume_from_pause(self):
        obj = ConcreteStatusMixin()
        obj.play()
        obj.pause()
        obj.play()
        assert obj.status() == STATUS.PLAYING

    def test_stop_from_paused(self):
        obj = ConcreteStatusMixin()
        obj.play()
        obj.pause()
        obj.stop()
        assert obj.status() == STATUS.STOPPED

    def test_play_from_error_raises(self):
        obj = ConcreteStatusMixin()
        obj._status = STATUS.ERROR
        with pytest.raises(PlaybackError):
            obj.play()

    def test_failed_hook_keeps_status(self):
        """A hook raising leaves the previous status in place."""
        obj = ConcreteStatusMixin()

        def broken():
            raise RuntimeError("device lost")

        obj._do_play = broken
        with pytest.raises(RuntimeError):
            obj.play()
        assert obj.status() == STATUS.STOPPED
