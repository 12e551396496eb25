import logging

from .controls import Control, build_controls  # noqa: F401
from .core import (  # noqa: F401
    STATUS,
    AudioMode,
    BaseAudioEngine,
    BaseRecording,
    BaseSound,
    RecordingOptions,
    RecordingOptionsPresets,
    SessionConfig,
    SoundSource,
)
from .registry import SoundEntry, SoundRegistry  # noqa: F401
from .session import SoundSession  # noqa: F401

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# The platform engine (sound_session.platform.AudioEngine) is imported lazily by SoundSession
