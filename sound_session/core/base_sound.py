"""BaseSound class: a loaded, playable unit of audio.

A sound is created by an audio engine from a SoundSource, loaded once, and
then driven through play/pause/stop/replay until it is unloaded. All methods
here are synchronous and thread-safe; the engine exposes them to the event
loop.
"""

import logging

from .exceptions import PlaybackError
from .mixins import STATUS, StatusMixin
from .source import SoundSource

logger = logging.getLogger(__name__)

__all__ = [
    "BaseSound",
]


class BaseSound(StatusMixin):
    """Base class for platform-specific sound handles.

    Platform-specific implementations must implement:
    - _do_load(): acquire the platform resources for the source
    - _do_play(), _do_pause(), _do_stop(): playback hooks (lock held)
    - _do_seek(position_ms): move the playback position
    - _do_unload(): release the platform resources
    """

    def __init__(self, source: SoundSource, *args, **kwargs):
        """Initialize the BaseSound.

        Args:
            source: Where the audio comes from
        """
        super().__init__(*args, **kwargs)
        self._source = source
        self._loaded = False

    def __repr__(self):
        return f"<{type(self).__name__} {self._source} {self._status.name}>"

    @property
    def source(self) -> SoundSource:
        return self._source

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self):
        """Load the sound. Loading twice is a no-op."""
        logger.debug("BaseSound.load(%s)", self._source)
        with self._lock:
            if self._loaded:
                return
            self._do_load()
            self._loaded = True

    def play(self, *args, **kwargs):
        self._ensure_loaded()
        super().play(*args, **kwargs)

    def replay(self):
        """Restart playback from position zero."""
        logger.debug("BaseSound.replay()")
        self.set_status(should_play=True, position_ms=0)

    def set_status(self, should_play: bool | None = None, position_ms: int | None = None):
        """Apply a partial status update.

        Args:
            should_play: True to play, False to pause, None to leave as is
            position_ms: New playback position, None to leave as is
        """
        logger.debug("BaseSound.set_status(should_play=%s, position_ms=%s)", should_play, position_ms)
        with self._lock:
            self._ensure_loaded()
            if position_ms is not None:
                if position_ms < 0:
                    raise PlaybackError(f"position_ms must be >= 0, got {position_ms}")
                self._do_seek(position_ms)
            if should_play is True:
                self.play()
            elif should_play is False:
                self.pause()

    def unload(self):
        """Stop the sound if needed and release its resources."""
        logger.debug("BaseSound.unload(%s)", self._source)
        with self._lock:
            if not self._loaded:
                return
            if self.status() != STATUS.STOPPED:
                self._do_stop()
                self._status = STATUS.STOPPED
            self._do_unload()
            self._loaded = False

    def _ensure_loaded(self):
        if not self._loaded:
            raise PlaybackError(f"Sound {self._source} is not loaded")

    def _on_playback_finished(self):
        """Mark the sound stopped once the backend reaches the end of the audio."""
        logger.debug("BaseSound._on_playback_finished(%s)", self._source)
        with self._lock:
            if self._status == STATUS.PLAYING:
                self._status = STATUS.STOPPED

    # Hooks for subclasses

    def _do_load(self):
        raise NotImplementedError()

    def _do_seek(self, position_ms: int):
        raise NotImplementedError()

    def _do_unload(self):
        raise NotImplementedError()
