"""Android platform implementation for the sound-session library.

The engine drives android.media.MediaPlayer for sounds and
android.media.MediaRecorder for recordings.
"""

from .engine import AndroidAudioEngine
from .recording import AndroidRecording
from .sound import AndroidSound

__all__ = [
    "AndroidAudioEngine",
    "AndroidRecording",
    "AndroidSound",
]
