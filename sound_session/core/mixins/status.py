"""Status mixin for managing playback state."""

import logging
from enum import Enum

from ..exceptions import PlaybackError
from .lock import LockMixin

logger = logging.getLogger(__name__)


class STATUS(Enum):
    """Playback status enumeration."""

    ERROR = -1
    STOPPED = 1
    PLAYING = 2
    PAUSED = 3


# target status -> (statuses the transition is a no-op from, statuses it starts from)
_TRANSITIONS = {
    STATUS.PLAYING: ((STATUS.PLAYING,), (STATUS.STOPPED, STATUS.PAUSED)),
    STATUS.PAUSED: ((STATUS.PAUSED, STATUS.STOPPED), (STATUS.PLAYING,)),
    STATUS.STOPPED: ((STATUS.STOPPED,), (STATUS.PLAYING, STATUS.PAUSED)),
}


class StatusMixin(LockMixin):
    """Thread-safe play/pause/stop state machine.

    Subclasses implement the _do_play/_do_pause/_do_stop hooks; the status is
    only updated once the hook returned, so a failing backend call leaves the
    previous status in place. Backends that can finish on their own override
    status() to report it.
    """

    def __init__(self, *args, **kwargs):
        self._status = STATUS.STOPPED
        super().__init__(*args, **kwargs)

    def status(self) -> STATUS:
        """Get the current playback status."""
        return self._status

    def play(self, *args, **kwargs):
        """Start or resume playback."""
        logger.debug("StatusMixin.play()")
        self._transition(STATUS.PLAYING, self._do_play, *args, **kwargs)

    def pause(self, *args, **kwargs):
        """Pause playback. Pausing a sound that is not playing is a no-op."""
        logger.debug("StatusMixin.pause()")
        self._transition(STATUS.PAUSED, self._do_pause)

    def stop(self, *args, **kwargs):
        """Stop playback and rewind."""
        logger.debug("StatusMixin.stop()")
        self._transition(STATUS.STOPPED, self._do_stop)

    def _transition(self, target: STATUS, hook, *args, **kwargs):
        ignored, allowed = _TRANSITIONS[target]
        with self._lock:
            current = self.status()
            if current in ignored:
                return
            if current not in allowed:
                raise PlaybackError(f"Cannot switch to {target.name} from {current.name}")
            hook(*args, **kwargs)
            self._status = target

    # Hooks for subclasses, called with the lock held

    def _do_play(self, *args, **kwargs):
        raise NotImplementedError()

    def _do_pause(self):
        raise NotImplementedError()

    def _do_stop(self):
        raise NotImplementedError()
