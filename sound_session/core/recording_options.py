"""Recording quality presets.

Each preset carries the common capture parameters plus one section per
platform family, since the container and codec choices differ between the
Android MediaRecorder and the desktop soundfile writer.
"""

from dataclasses import dataclass, field

__all__ = [
    "AndroidRecordingOptions",
    "DesktopRecordingOptions",
    "RecordingOptions",
    "RecordingOptionsPresets",
]


@dataclass(frozen=True)
class AndroidRecordingOptions:
    """MediaRecorder settings, named after the MediaRecorder constants."""

    extension: str = ".m4a"
    output_format: str = "MPEG_4"
    audio_encoder: str = "AAC"


@dataclass(frozen=True)
class DesktopRecordingOptions:
    """soundfile writer settings."""

    extension: str = ".wav"
    subtype: str = "PCM_16"


@dataclass(frozen=True)
class RecordingOptions:
    """Parameters used to create a recording.

    Attributes:
        sample_rate: Sample rate in Hz
        channels: Number of channels (1=mono, 2=stereo)
        bit_rate: Encoder bit rate in bits per second (compressed formats only)
    """

    sample_rate: int = 44100
    channels: int = 2
    bit_rate: int = 128000
    android: AndroidRecordingOptions = field(default_factory=AndroidRecordingOptions)
    desktop: DesktopRecordingOptions = field(default_factory=DesktopRecordingOptions)

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.channels not in (1, 2):
            raise ValueError(f"channels must be 1 or 2, got {self.channels}")
        if self.bit_rate <= 0:
            raise ValueError(f"bit_rate must be positive, got {self.bit_rate}")


class RecordingOptionsPresets:
    """Named recording presets."""

    HIGH_QUALITY = RecordingOptions(
        sample_rate=44100,
        channels=2,
        bit_rate=128000,
        android=AndroidRecordingOptions(extension=".m4a", output_format="MPEG_4", audio_encoder="AAC"),
        desktop=DesktopRecordingOptions(extension=".wav", subtype="PCM_16"),
    )

    LOW_QUALITY = RecordingOptions(
        sample_rate=44100,
        channels=2,
        bit_rate=64000,
        android=AndroidRecordingOptions(extension=".3gp", output_format="THREE_GPP", audio_encoder="AMR_NB"),
        desktop=DesktopRecordingOptions(extension=".ogg", subtype="VORBIS"),
    )

    @classmethod
    def by_name(cls, name: str) -> RecordingOptions:
        """Look up a preset by short name ("high" or "low")."""
        presets = {
            "high": cls.HIGH_QUALITY,
            "low": cls.LOW_QUALITY,
        }
        try:
            return presets[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown recording quality: {name!r} (expected one of {sorted(presets)})") from None
