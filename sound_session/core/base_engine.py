"""BaseAudioEngine class: the asynchronous facade over a platform audio API.

Sounds and recordings are synchronous, thread-safe objects. The engine is the
only place the event loop touches them: every operation that may block on the
platform API is pushed to a worker thread with asyncio.to_thread, so each
awaited call is one cooperative suspension point for the caller.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from .audio_mode import AudioMode
from .base_recording import BaseRecording
from .base_sound import BaseSound
from .config import SessionConfig, get_global_session_config
from .exceptions import RecordingError, SoundLoadError
from .recording_options import RecordingOptions
from .source import SoundSource

logger = logging.getLogger(__name__)

__all__ = [
    "BaseAudioEngine",
]


class BaseAudioEngine(ABC):
    """Base class for platform-specific audio engines.

    Platform-specific implementations must implement:
    - _create_sound(source): build and load a BaseSound
    - _new_recording(path, options): build an unstarted BaseRecording
    - _recording_extension(options): file extension of the recorded container
    - request_permissions(): ask for microphone access
    """

    def __init__(self, config: SessionConfig | None = None):
        """Initialize the engine.

        Args:
            config: SessionConfig, or None to use the global default
        """
        self._config = config
        self._audio_mode = AudioMode()

    @property
    def config(self) -> SessionConfig:
        if self._config is None:
            return get_global_session_config()
        return self._config

    @property
    def audio_mode(self) -> AudioMode:
        return self._audio_mode

    async def set_audio_mode(self, mode: AudioMode) -> None:
        """Switch the session mode. Recording is only possible in a mode that allows it."""
        logger.debug("BaseAudioEngine.set_audio_mode(%s)", mode)
        self._audio_mode = mode

    async def create_sound(self, source) -> BaseSound:
        """Create and load a sound from a bundled asset or a URI.

        Raises:
            SoundLoadError: If the source cannot be resolved
        """
        source = SoundSource.coerce(source)
        logger.debug("BaseAudioEngine.create_sound(%s)", source)
        try:
            return await self._create_sound(source)
        except SoundLoadError:
            raise
        except Exception as e:
            raise SoundLoadError(source, str(e)) from e

    async def replay(self, sound: BaseSound) -> None:
        await asyncio.to_thread(sound.replay)

    async def play(self, sound: BaseSound) -> None:
        await asyncio.to_thread(sound.play)

    async def pause(self, sound: BaseSound) -> None:
        await asyncio.to_thread(sound.pause)

    async def stop(self, sound: BaseSound) -> None:
        await asyncio.to_thread(sound.stop)

    async def unload(self, sound: BaseSound) -> None:
        await asyncio.to_thread(sound.unload)

    @abstractmethod
    async def request_permissions(self) -> bool:
        """Ask for microphone access.

        Returns:
            True if recording is permitted
        """

    async def create_recording(self, options: RecordingOptions | None = None) -> BaseRecording:
        """Create a recording and start capturing.

        Raises:
            RecordingError: If the current audio mode does not allow recording
                or the capture cannot start
        """
        if not self._audio_mode.allows_recording:
            raise RecordingError("Recording is not enabled in the current audio mode")

        options = options or self.config.recording_options
        recording = self._new_recording(self._recording_path(options), options)
        logger.debug("BaseAudioEngine.create_recording(%s)", recording.path)
        await asyncio.to_thread(recording.start)
        return recording

    async def stop_and_unload(self, recording: BaseRecording) -> None:
        await asyncio.to_thread(recording.stop_and_unload)

    def _recording_path(self, options: RecordingOptions) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        return self.config.recordings_dir / f"recording-{timestamp}{self._recording_extension(options)}"

    @abstractmethod
    async def _create_sound(self, source: SoundSource) -> BaseSound:
        pass

    @abstractmethod
    def _new_recording(self, path: Path, options: RecordingOptions) -> BaseRecording:
        pass

    @abstractmethod
    def _recording_extension(self, options: RecordingOptions) -> str:
        pass
