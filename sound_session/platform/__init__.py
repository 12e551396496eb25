"""Platform-specific implementations for the sound-session library.

This module selects the audio engine of the running platform.
"""

import logging

from currentplatform import platform

logger = logging.getLogger(__name__)

__all__ = [
    "AudioEngine",
]


if platform in ("linux", "windows"):
    # Linux and Windows share the same sounddevice/soundfile-based implementation
    from .linux import LinuxAudioEngine as AudioEngine
elif platform == "android":
    from .android import AndroidAudioEngine as AudioEngine
else:
    logger.critical("No implementation found for platform %s", platform)
    raise NotImplementedError(f"No implementation available for platform: {platform}")
