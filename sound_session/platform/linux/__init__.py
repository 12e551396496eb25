"""Linux platform implementation for the sound-session library.

This module provides the soundfile/sounddevice based engine, sound and recording.
"""

from .engine import LinuxAudioEngine
from .recording import LinuxRecording
from .sound import LinuxSound

__all__ = [
    "LinuxAudioEngine",
    "LinuxRecording",
    "LinuxSound",
]
