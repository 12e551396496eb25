"""SoundSession: the state and actions behind the sound board.

A session owns one audio engine, the sound registry (local and remote sounds)
and at most one active recording. Every user action awaits its engine calls
one after the other, updates state only after the engine succeeded, and never
raises: failures are logged and the action simply has no effect.
"""

import logging

from sound_session.core import BaseAudioEngine, BaseRecording, SessionConfig, get_global_session_config
from sound_session.core.constants import LOCAL_SOUND, RECORDING, REMOTE_SOUND
from sound_session.core.exceptions import (
    ActionInProgressError,
    PermissionDeniedError,
    PlaybackError,
    SessionStartupError,
)
from sound_session.registry import SoundEntry, SoundRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "SoundSession",
]


class SoundSession:
    """Sound board session.

    Use as an async context manager to get guaranteed release of every loaded
    handle:

        async with SoundSession() as session:
            await session.play_local_sound()
    """

    def __init__(self, engine: BaseAudioEngine | None = None, config: SessionConfig | None = None):
        """Initialize the session.

        Args:
            engine: Audio engine, or None for the current platform's engine
            config: SessionConfig, or None to use the engine's (or global) config
        """
        if config is None:
            config = engine.config if engine is not None else get_global_session_config()
        if engine is None:
            from sound_session.platform import AudioEngine

            engine = AudioEngine(config)
        self._engine = engine
        self._config = config
        self._registry = SoundRegistry(engine)
        self._recording: BaseRecording | None = None
        self._latest_recording: str | None = None
        self._initialized = False

    async def __aenter__(self):
        try:
            await self.initialize()
        except BaseException:
            await self.shutdown()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.shutdown()

    @property
    def engine(self) -> BaseAudioEngine:
        return self._engine

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def registry(self) -> SoundRegistry:
        return self._registry

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def local_sound(self) -> SoundEntry | None:
        return self._registry.get(LOCAL_SOUND)

    @property
    def remote_sound(self) -> SoundEntry | None:
        return self._registry.get(REMOTE_SOUND)

    @property
    def remote_sound_playing(self) -> bool:
        entry = self.remote_sound
        return entry is not None and entry.playing

    @property
    def remote_paused(self) -> bool:
        entry = self.remote_sound
        return entry is not None and entry.paused

    @property
    def recording(self) -> BaseRecording | None:
        return self._recording

    @property
    def is_recording(self) -> bool:
        return self._recording is not None

    @property
    def latest_recording(self) -> str | None:
        """URI of the last finished recording."""
        return self._latest_recording

    # Lifecycle

    async def initialize(self) -> None:
        """Set the playback audio mode, then load the local and remote sounds.

        Steps run in order and the first failure aborts the rest.

        Raises:
            SessionStartupError: If a sound could not be loaded
        """
        logger.info("Initializing sound session")
        self._registry.reopen()
        await self._engine.set_audio_mode(self._config.playback_mode)

        logger.info("Loading local sound %s", self._config.local_sound)
        if await self._registry.load_sound(LOCAL_SOUND, self._config.local_sound) is None:
            raise SessionStartupError(f"Could not load local sound {self._config.local_sound}")

        logger.info("Loading remote sound %s", self._config.remote_sound)
        if await self._registry.load_sound(REMOTE_SOUND, self._config.remote_sound) is None:
            raise SessionStartupError(f"Could not load remote sound {self._config.remote_sound}")

        self._initialized = True

    async def shutdown(self) -> dict[str, bool]:
        """Finalize an active recording and release every loaded sound, best effort.

        Returns:
            Mapping of each released key to True if it was released cleanly
        """
        logger.info("Shutting down sound session")
        outcome = {}
        if self._recording is not None:
            recording, self._recording = self._recording, None
            try:
                await self._engine.stop_and_unload(recording)
                outcome[RECORDING] = True
            except Exception as e:
                logger.warning(f"Failed to finalize recording {recording.path}: {e}")
                outcome[RECORDING] = False
        outcome.update(await self._registry.release_all())
        self._initialized = False
        return outcome

    # Playback

    async def play_sound(self, key: str) -> bool:
        """Restart the sound stored under key from the beginning.

        Returns:
            True if playback was restarted
        """
        logger.debug("SoundSession.play_sound(%s)", key)
        try:
            async with self._registry.guard(key):
                handle = self._registry.handle(key)
                if handle is None:
                    raise PlaybackError(f"No sound loaded under '{key}'")
                await self._engine.replay(handle)
                return True
        except ActionInProgressError as e:
            logger.warning(f"Ignored play of '{key}': {e}")
        except Exception as e:
            logger.error(f"Error while playing '{key}': {e}")
        return False

    async def play_local_sound(self) -> bool:
        logger.info("Playing local sound")
        return await self.play_sound(LOCAL_SOUND)

    async def play_remote_sound(self) -> bool:
        """Toggle the remote sound between replay-from-start and stop.

        Returns:
            True if the toggle took effect
        """
        try:
            async with self._registry.guard(REMOTE_SOUND):
                entry = self._remote_entry()
                if not entry.playing:
                    logger.info("Playing remote sound")
                    await self._engine.replay(entry.handle)
                else:
                    logger.info("Stopping remote sound")
                    await self._engine.stop(entry.handle)
                self._registry.record_transition(REMOTE_SOUND, playing=not entry.playing, paused=False)
                return True
        except ActionInProgressError as e:
            logger.warning(f"Ignored remote play/stop: {e}")
        except Exception as e:
            logger.error(f"Error during remote play/stop: {e}")
        return False

    async def pause_remote_sound(self) -> bool:
        """Toggle the remote sound between pause and resume.

        Returns:
            True if the toggle took effect
        """
        try:
            async with self._registry.guard(REMOTE_SOUND):
                entry = self._remote_entry()
                if not entry.paused:
                    logger.info("Pausing remote sound")
                    await self._engine.pause(entry.handle)
                else:
                    logger.info("Resuming remote sound")
                    await self._engine.play(entry.handle)
                self._registry.record_transition(REMOTE_SOUND, paused=not entry.paused)
                return True
        except ActionInProgressError as e:
            logger.warning(f"Ignored remote pause/resume: {e}")
        except Exception as e:
            logger.error(f"Error during remote pause/resume: {e}")
        return False

    def _remote_entry(self) -> SoundEntry:
        entry = self._registry.get(REMOTE_SOUND)
        if entry is None:
            raise PlaybackError("No remote sound loaded")
        return entry

    # Recording

    async def start_recording(self) -> bool:
        """Ask for microphone access, switch to the recording mode and start capturing.

        Returns:
            True if a recording is now in progress
        """
        try:
            async with self._registry.guard(RECORDING):
                if self._recording is not None:
                    logger.warning("A recording is already in progress")
                    return False

                logger.info("Requesting microphone permission")
                if not await self._engine.request_permissions():
                    raise PermissionDeniedError("Microphone permission denied")
                await self._engine.set_audio_mode(self._config.recording_mode)

                logger.info("Starting recording")
                self._recording = await self._engine.create_recording(self._config.recording_options)
                logger.info("Recording started")
                return True
        except ActionInProgressError as e:
            logger.warning(f"Ignored start recording: {e}")
        except Exception as e:
            logger.error(f"Failed to start recording: {e}")
        return False

    async def stop_recording(self) -> str | None:
        """Stop the active recording and load it as the local sound.

        The recording handle is always cleared, whether or not the recorded
        file could be loaded afterwards.

        Returns:
            URI of the recorded file, or None if nothing was recorded
        """
        try:
            async with self._registry.guard(RECORDING):
                recording = self._recording
                if recording is None:
                    logger.warning("No recording in progress")
                    return None

                logger.info("Stopping recording..")
                try:
                    await self._engine.stop_and_unload(recording)
                finally:
                    self._recording = None
                    await self._restore_playback_mode()

                uri = recording.get_uri()
                self._latest_recording = uri
                logger.info("Recording stopped and stored at %s", uri)
        except ActionInProgressError as e:
            logger.warning(f"Ignored stop recording: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to stop recording: {e}")
            return None

        await self.load_local_uri(uri)
        return uri

    async def _restore_playback_mode(self):
        try:
            await self._engine.set_audio_mode(self._config.playback_mode)
        except Exception as e:
            logger.error(f"Failed to restore the playback audio mode: {e}")

    async def toggle_recording(self) -> bool:
        """Start a recording, or stop the active one.

        Returns:
            True if the action took effect
        """
        if self._recording is None:
            return await self.start_recording()
        return await self.stop_recording() is not None

    async def load_local_uri(self, uri: str) -> bool:
        """Load uri as the new local sound, replacing the previous one."""
        try:
            async with self._registry.guard(LOCAL_SOUND):
                entry = await self._registry.load_sound(LOCAL_SOUND, uri)
        except Exception as e:
            logger.error(f"FAILED TO ATTACH {uri}: {e}")
            return False
        if entry is None:
            logger.error("FAILED TO ATTACH %s", uri)
            return False
        logger.info("Attached %s to the local sound", uri)
        return True
