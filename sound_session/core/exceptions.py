"""Exception classes for the sound-session library."""

__all__ = [
    "SoundSessionError",
    "MissingArgumentError",
    "SoundLoadError",
    "PlaybackError",
    "RecordingError",
    "PermissionDeniedError",
    "ActionInProgressError",
    "SessionStartupError",
]


class SoundSessionError(Exception):
    """Base exception for sound session errors."""

    pass


class MissingArgumentError(SoundSessionError, ValueError):
    """Raised when a required argument (sound key or source) is empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required argument: {name}")


class SoundLoadError(SoundSessionError):
    """Raised when the audio engine cannot resolve a source into a sound."""

    def __init__(self, source, reason: str = ""):
        self.source = source
        if reason:
            super().__init__(f"Unable to load {source}: {reason}")
        else:
            super().__init__(f"Unable to load {source}")


class PlaybackError(SoundSessionError):
    """Raised when a sound cannot perform the requested playback operation."""

    pass


class RecordingError(SoundSessionError):
    """Raised when a recording cannot be started or finalized."""

    pass


class PermissionDeniedError(RecordingError):
    """Raised when microphone permission is refused."""

    pass


class ActionInProgressError(SoundSessionError):
    """Raised when an action is issued on a key that already has one in flight."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"An action on '{key}' is already in progress")


class SessionStartupError(SoundSessionError):
    """Raised when a startup step fails; the remaining steps are not run."""

    pass
