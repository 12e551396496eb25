"""Linux sound implementation using soundfile and sounddevice.

This module provides the LinuxSound class which:
- Decodes the whole file into memory with soundfile (float32 frames)
- Plays it through a sounddevice.OutputStream whose callback copies frames
  from the current position
"""

import contextlib
import logging
import threading
from collections import deque

import numpy as np
import soundfile as sf

from sound_session.core.base_sound import BaseSound
from sound_session.core.exceptions import SoundLoadError
from sound_session.core.mixins import STATUS

try:
    import sounddevice as sd
except ImportError as e:
    raise ImportError(
        "sounddevice is required for audio output on Linux. Install it with: pip install sounddevice"
    ) from e

logger = logging.getLogger(__name__)

__all__ = [
    "LinuxSound",
]


class LinuxSound(BaseSound):
    """Linux sound handle.

    The decoded audio is kept in memory; pausing stops the output stream and
    keeps the position, stopping closes the stream and rewinds.
    """

    def __init__(self, source, path, *args, **kwargs):
        """Initialize the LinuxSound.

        Args:
            source: SoundSource the sound was created from
            path: Local file holding the audio (downloaded copy for remote sources)
        """
        super().__init__(source, *args, **kwargs)
        self._path = path
        self._data: np.ndarray | None = None
        self._sample_rate = 0
        self._position = 0
        self._stream = None
        self._ended = threading.Event()
        # Seeks made while the stream runs, consumed by the audio callback
        self._seeks: deque[int] = deque(maxlen=1)
        # Set by the audio callback once it raised CallbackStop
        self._draining = False

    @property
    def duration_ms(self) -> int:
        if self._data is None or not self._sample_rate:
            return 0
        return int(len(self._data) * 1000 / self._sample_rate)

    @property
    def position_ms(self) -> int:
        if not self._sample_rate:
            return 0
        return int(self._position * 1000 / self._sample_rate)

    def _do_load(self):
        logger.debug("LinuxSound._do_load(%s)", self._path)
        try:
            data, sample_rate = sf.read(str(self._path), dtype="float32", always_2d=True)
        except (sf.LibsndfileError, RuntimeError, OSError) as e:
            raise SoundLoadError(self._source, str(e)) from e
        self._data = data
        self._sample_rate = sample_rate
        self._position = 0

    def _do_play(self):
        """Open a fresh output stream at the current position and start it."""
        logger.debug("LinuxSound._do_play()")
        self._close_stream()
        self._ended.clear()
        self._draining = False
        if self._position >= len(self._data):
            self._position = 0
        self._stream = sd.OutputStream(
            samplerate=self._sample_rate,
            channels=self._data.shape[1],
            dtype="float32",
            callback=self._audio_callback,
            finished_callback=self._finished_callback,
        )
        self._stream.start()

    def _do_pause(self):
        logger.debug("LinuxSound._do_pause()")
        # Position is preserved, the stream is recreated on resume
        self._close_stream()

    def _do_stop(self):
        logger.debug("LinuxSound._do_stop()")
        self._close_stream()
        self._position = 0

    def _do_seek(self, position_ms: int):
        logger.debug("LinuxSound._do_seek(%s)", position_ms)
        frames = min(int(position_ms * self._sample_rate / 1000), len(self._data))
        if self._accepts_seek():
            self._seeks.append(frames)
        else:
            self._position = frames

    def _do_unload(self):
        logger.debug("LinuxSound._do_unload()")
        self._close_stream()
        self._data = None
        self._position = 0

    def replay(self):
        """Restart playback from position zero.

        Once the callback stopped the stream, a pending seek would never be
        consumed: the stream is restarted instead.
        """
        with self._lock:
            if self.status() == STATUS.PLAYING and not self._accepts_seek():
                logger.debug("LinuxSound.replay() on a finishing stream")
                self._position = 0
                self._do_play()
                return
            super().replay()

    def _accepts_seek(self) -> bool:
        stream = self._stream
        return stream is not None and stream.active and not self._draining

    def _close_stream(self):
        stream, self._stream = self._stream, None
        if stream is not None:
            if stream.active:
                stream.stop()
            stream.close()
        # No callback runs anymore: apply the last seek it did not consume
        if self._seeks:
            self._position = self._seeks.pop()

    def _audio_callback(self, outdata, frames, time, status):
        """Called by sounddevice to fill the output buffer.

        Args:
            outdata: Output buffer to fill with audio data
            frames: Number of frames to write
            time: Timestamp information
            status: Stream status (e.g., underflow)
        """
        if status:
            logger.warning(f"Audio callback status: {status}")

        # Runs on the PortAudio thread: never take self._lock here, stop() and
        # pause() hold it while waiting for the stream to finish.
        data = self._data
        if data is None:
            outdata[:] = 0
            self._draining = True
            raise sd.CallbackStop()
        try:
            position = self._seeks.popleft()
        except IndexError:
            position = self._position
        chunk = data[position : position + frames]
        outdata[: len(chunk)] = chunk
        outdata[len(chunk) :] = 0
        self._position = position + len(chunk)
        if len(chunk) < frames:
            self._draining = True
            raise sd.CallbackStop()

    def _finished_callback(self):
        """Called by sounddevice once the stream is inactive."""
        data = self._data
        if data is not None and self._position >= len(data):
            self._ended.set()

    def status(self) -> STATUS:
        if self._status == STATUS.PLAYING and self._ended.is_set():
            self._ended.clear()
            self._on_playback_finished()
            self._position = 0
        return self._status

    def __del__(self):
        """Cleanup on deletion."""
        with contextlib.suppress(Exception):
            self._close_stream()
