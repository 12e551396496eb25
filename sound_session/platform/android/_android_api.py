"""Android API classes and constants for the sound-session library.

Loads all required Android API classes via jnius and exposes the constants
needed for playback and recording.

If loading fails, a critical error is logged and the exception is re-raised.
There is no valid fallback: this module must only be imported on Android.
"""

import logging

logger = logging.getLogger(__name__)

try:
    from jnius import autoclass

    # Playback
    MediaPlayer = autoclass("android.media.MediaPlayer")
    AudioAttributesBuilder = autoclass("android.media.AudioAttributes$Builder")
    Uri = autoclass("android.net.Uri")

    # Recording
    MediaRecorder = autoclass("android.media.MediaRecorder")
    _AudioSource = autoclass("android.media.MediaRecorder$AudioSource")
    _OutputFormat = autoclass("android.media.MediaRecorder$OutputFormat")
    _AudioEncoder = autoclass("android.media.MediaRecorder$AudioEncoder")

    # Application context (python-for-android activity)
    PythonActivity = autoclass("org.kivy.android.PythonActivity")

    # Constant sources (not part of public API, only used to read constants below)
    _AudioAttributes = autoclass("android.media.AudioAttributes")

    # AudioAttributes constants
    USAGE_MEDIA = _AudioAttributes.USAGE_MEDIA
    CONTENT_TYPE_MUSIC = _AudioAttributes.CONTENT_TYPE_MUSIC

    # MediaRecorder constants
    AUDIO_SOURCE_MIC = _AudioSource.MIC

except Exception:
    logger.critical("Failed to load Android APIs - cannot continue", exc_info=True)
    raise

# Maps RecordingOptions.android.output_format -> MediaRecorder.OutputFormat constant
OUTPUT_FORMAT_BY_NAME = {
    "DEFAULT": _OutputFormat.DEFAULT,
    "MPEG_4": _OutputFormat.MPEG_4,
    "THREE_GPP": _OutputFormat.THREE_GPP,
    "AAC_ADTS": _OutputFormat.AAC_ADTS,
    "OGG": _OutputFormat.OGG,
}

# Maps RecordingOptions.android.audio_encoder -> MediaRecorder.AudioEncoder constant
AUDIO_ENCODER_BY_NAME = {
    "DEFAULT": _AudioEncoder.DEFAULT,
    "AAC": _AudioEncoder.AAC,
    "AMR_NB": _AudioEncoder.AMR_NB,
    "AMR_WB": _AudioEncoder.AMR_WB,
    "OPUS": _AudioEncoder.OPUS,
}

__all__ = [
    # Playback
    "MediaPlayer",
    "AudioAttributesBuilder",
    "Uri",
    # Recording
    "MediaRecorder",
    # Context
    "PythonActivity",
    # Constants
    "USAGE_MEDIA",
    "CONTENT_TYPE_MUSIC",
    "AUDIO_SOURCE_MIC",
    # Lookup dicts
    "OUTPUT_FORMAT_BY_NAME",
    "AUDIO_ENCODER_BY_NAME",
]
