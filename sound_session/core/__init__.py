"""Core classes for the sound-session library.

This module contains the engine-independent base classes, configuration and
errors used throughout the library.
"""

from .audio_mode import PLAYBACK_MODE, RECORDING_MODE, AudioMode
from .base_engine import BaseAudioEngine
from .base_recording import BaseRecording
from .base_sound import BaseSound
from .config import SessionConfig, get_global_session_config, set_global_session_config
from .constants import LOCAL_SOUND, RECORDING, REMOTE_SOUND
from .exceptions import (
    ActionInProgressError,
    MissingArgumentError,
    PermissionDeniedError,
    PlaybackError,
    RecordingError,
    SessionStartupError,
    SoundLoadError,
    SoundSessionError,
)
from .mixins import STATUS, LockMixin, StatusMixin
from .recording_options import RecordingOptions, RecordingOptionsPresets
from .source import SoundSource, SourceKind

__all__ = [
    "AudioMode",
    "PLAYBACK_MODE",
    "RECORDING_MODE",
    "BaseAudioEngine",
    "BaseRecording",
    "BaseSound",
    "SessionConfig",
    "get_global_session_config",
    "set_global_session_config",
    "LOCAL_SOUND",
    "REMOTE_SOUND",
    "RECORDING",
    "SoundSessionError",
    "MissingArgumentError",
    "SoundLoadError",
    "PlaybackError",
    "RecordingError",
    "PermissionDeniedError",
    "ActionInProgressError",
    "SessionStartupError",
    "STATUS",
    "LockMixin",
    "StatusMixin",
    "RecordingOptions",
    "RecordingOptionsPresets",
    "SoundSource",
    "SourceKind",
]
