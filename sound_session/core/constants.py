"""Constants for the sound-session library."""

from pathlib import Path

# Registry keys
LOCAL_SOUND = "local"
REMOTE_SOUND = "remote"
RECORDING = "recording"

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
DEFAULT_LOCAL_SOUND = ASSETS_DIR / "sfx" / "sound3.wav"
DEFAULT_REMOTE_SOUND = "https://www.learningcontainer.com/wp-content/uploads/2020/02/Kalimba.mp3"

# Seconds allowed for downloading a remote sound
DEFAULT_DOWNLOAD_TIMEOUT = 30.0

__all__ = [
    "LOCAL_SOUND",
    "REMOTE_SOUND",
    "RECORDING",
    "ASSETS_DIR",
    "DEFAULT_LOCAL_SOUND",
    "DEFAULT_REMOTE_SOUND",
    "DEFAULT_DOWNLOAD_TIMEOUT",
]
