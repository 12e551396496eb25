"""BaseRecording class: an in-progress microphone capture."""

import logging
from pathlib import Path

from .exceptions import RecordingError
from .mixins import LockMixin
from .recording_options import RecordingOptions

logger = logging.getLogger(__name__)

__all__ = [
    "BaseRecording",
]


class BaseRecording(LockMixin):
    """Base class for platform-specific recordings.

    A recording is single use: it is started once, then stopped and unloaded
    once, after which the captured audio is available at get_uri().

    Platform-specific implementations must implement:
    - _do_start(): open the input device and begin capture
    - _do_stop(): stop capture, write the output file, release the device
    """

    def __init__(self, path: Path, options: RecordingOptions, *args, **kwargs):
        """Initialize the BaseRecording.

        Args:
            path: Output file
            options: Capture parameters
        """
        super().__init__(*args, **kwargs)
        self._path = Path(path).resolve()
        self._options = options
        self._recording = False
        self._done = False

    def __repr__(self):
        return f"<{type(self).__name__} {self._path}>"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> RecordingOptions:
        return self._options

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def is_done_recording(self) -> bool:
        return self._done

    def start(self):
        logger.debug("BaseRecording.start(%s)", self._path)
        with self._lock:
            if self._recording or self._done:
                raise RecordingError(f"Recording {self._path} was already started")
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._do_start()
            self._recording = True

    def stop_and_unload(self):
        """Stop capture and finalize the output file."""
        logger.debug("BaseRecording.stop_and_unload(%s)", self._path)
        with self._lock:
            if not self._recording:
                raise RecordingError(f"Recording {self._path} is not in progress")
            try:
                self._do_stop()
            finally:
                self._recording = False
                self._done = True

    def get_uri(self) -> str:
        """URI of the output file."""
        return self._path.as_uri()

    def _do_start(self):
        raise NotImplementedError()

    def _do_stop(self):
        raise NotImplementedError()
