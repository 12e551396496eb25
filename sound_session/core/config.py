"""Session configuration for the sound-session library.

This module provides the SessionConfig dataclass and the process-wide default
used by every session or engine created without an explicit config.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .audio_mode import PLAYBACK_MODE, RECORDING_MODE, AudioMode
from .constants import DEFAULT_DOWNLOAD_TIMEOUT, DEFAULT_LOCAL_SOUND, DEFAULT_REMOTE_SOUND
from .recording_options import RecordingOptions, RecordingOptionsPresets
from .source import SoundSource

logger = logging.getLogger(__name__)

__all__ = [
    "SessionConfig",
    "get_global_session_config",
    "set_global_session_config",
]

ENV_PREFIX = "SOUND_SESSION_"


def _default_data_dir(name: str) -> Path:
    return Path(tempfile.gettempdir()) / "sound-session" / name


@dataclass
class SessionConfig:
    """Configuration of a sound session.

    Attributes:
        local_sound: Bundled clip loaded as the local sound at startup
        remote_sound: URI loaded as the remote sound at startup
        recording_options: Preset used when recording
        recordings_dir: Where finished recordings are written
        cache_dir: Where downloaded remote sounds are stored
        download_timeout: Seconds allowed for fetching a remote sound
        playback_mode: Audio mode set at startup and after recording
        recording_mode: Audio mode set while recording
    """

    local_sound: SoundSource = field(default_factory=lambda: SoundSource.asset(DEFAULT_LOCAL_SOUND))
    remote_sound: SoundSource = field(default_factory=lambda: SoundSource.from_uri(DEFAULT_REMOTE_SOUND))
    recording_options: RecordingOptions = RecordingOptionsPresets.HIGH_QUALITY
    recordings_dir: Path = field(default_factory=lambda: _default_data_dir("recordings"))
    cache_dir: Path = field(default_factory=lambda: _default_data_dir("cache"))
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT
    playback_mode: AudioMode = PLAYBACK_MODE
    recording_mode: AudioMode = RECORDING_MODE

    def __post_init__(self):
        """Validate and normalize configuration parameters."""
        self.local_sound = SoundSource.coerce(self.local_sound)
        self.remote_sound = SoundSource.coerce(self.remote_sound)
        self.recordings_dir = Path(self.recordings_dir)
        self.cache_dir = Path(self.cache_dir)

        if not isinstance(self.recording_options, RecordingOptions):
            raise TypeError(f"Expected RecordingOptions, got {type(self.recording_options).__name__}")

        if self.download_timeout <= 0:
            raise ValueError(f"download_timeout must be positive, got {self.download_timeout}")

        if not self.recording_mode.allows_recording:
            raise ValueError("recording_mode must allow recording")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "SessionConfig":
        """Build a config from SOUND_SESSION_* environment variables.

        Explicit keyword overrides win over the environment.
        """
        environ = os.environ if environ is None else environ
        kwargs = {}

        if value := environ.get(f"{ENV_PREFIX}LOCAL_SOUND"):
            kwargs["local_sound"] = value
        if value := environ.get(f"{ENV_PREFIX}REMOTE_SOUND"):
            kwargs["remote_sound"] = value
        if value := environ.get(f"{ENV_PREFIX}RECORDING_QUALITY"):
            kwargs["recording_options"] = RecordingOptionsPresets.by_name(value)
        if value := environ.get(f"{ENV_PREFIX}RECORDINGS_DIR"):
            kwargs["recordings_dir"] = Path(value)
        if value := environ.get(f"{ENV_PREFIX}CACHE_DIR"):
            kwargs["cache_dir"] = Path(value)
        if value := environ.get(f"{ENV_PREFIX}DOWNLOAD_TIMEOUT"):
            kwargs["download_timeout"] = float(value)

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        logger.debug("SessionConfig.from_env(%s)", sorted(kwargs))
        return cls(**kwargs)


_global_session_config: SessionConfig | None = None


def get_global_session_config() -> SessionConfig:
    """Get the global default session configuration.

    The default is built lazily from the environment on first access.

    Returns:
        The current global SessionConfig instance.
    """
    global _global_session_config
    if _global_session_config is None:
        _global_session_config = SessionConfig.from_env()
    return _global_session_config


def set_global_session_config(config: SessionConfig) -> None:
    """Set the global default session configuration.

    Args:
        config: The new global SessionConfig instance.
    """
    global _global_session_config
    if not isinstance(config, SessionConfig):
        raise TypeError(f"Expected SessionConfig, got {type(config).__name__}")
    _global_session_config = config
