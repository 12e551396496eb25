"""Audio session modes.

The audio mode is a global setting of the audio engine: it must be set before
operations depending on it (recording needs a mode that allows recording).
"""

from dataclasses import dataclass

__all__ = [
    "AudioMode",
    "PLAYBACK_MODE",
    "RECORDING_MODE",
]


@dataclass(frozen=True)
class AudioMode:
    """Audio session configuration.

    Attributes:
        allows_recording: Whether the microphone may be captured
    """

    allows_recording: bool = False


PLAYBACK_MODE = AudioMode()
RECORDING_MODE = AudioMode(allows_recording=True)
