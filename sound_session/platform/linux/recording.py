"""Linux recording implementation using sounddevice and soundfile.

Captured float32 blocks are queued by the input stream callback and written
to the output file with soundfile when the recording is stopped.
"""

import logging
from queue import Queue

import numpy as np
import soundfile as sf

from sound_session.core.base_recording import BaseRecording
from sound_session.core.exceptions import RecordingError

try:
    import sounddevice as sd
except ImportError as e:
    raise ImportError(
        "sounddevice is required for audio input on Linux. Install it with: pip install sounddevice"
    ) from e

logger = logging.getLogger(__name__)

__all__ = [
    "LinuxRecording",
]


class LinuxRecording(BaseRecording):
    """Records the default input device into a file."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._chunks: Queue[np.ndarray] = Queue()
        self._stream = None

    def _audio_callback(self, indata: np.ndarray, frames: int, time, status) -> None:
        """Callback for the input stream, receives float32 numpy arrays."""
        if status:
            logger.warning(f"Audio input status: {status}")
        self._chunks.put(indata.copy())

    def _do_start(self):
        logger.debug("LinuxRecording._do_start(%s)", self.path)
        options = self.options
        self._chunks = Queue()
        try:
            self._stream = sd.InputStream(
                samplerate=options.sample_rate,
                channels=options.channels,
                dtype="float32",
                callback=self._audio_callback,
            )
            self._stream.start()
        except sd.PortAudioError as e:
            self._stream = None
            raise RecordingError(f"Cannot open input device: {e}") from e

    def _do_stop(self):
        logger.debug("LinuxRecording._do_stop(%s)", self.path)
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.stop()
            stream.close()

        audio = self.get_audio_array()
        options = self.options
        sf.write(
            str(self.path),
            audio,
            options.sample_rate,
            subtype=options.desktop.subtype,
        )
        logger.debug("Wrote %d frames to %s", len(audio), self.path)

    def get_audio_array(self) -> np.ndarray:
        """Get the captured audio as a (frames, channels) float32 array."""
        chunks = list(self._chunks.queue)
        if not chunks:
            return np.zeros((0, self.options.channels), dtype=np.float32)
        return np.concatenate(chunks, axis=0).astype(np.float32)
