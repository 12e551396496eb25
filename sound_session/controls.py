"""Controls exposed by the sound board, derived from the session state."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from sound_session.core.constants import LOCAL_SOUND, RECORDING, REMOTE_SOUND
from sound_session.session import SoundSession

__all__ = [
    "Control",
    "build_controls",
]


@dataclass(frozen=True)
class Control:
    """A labelled, triggerable action.

    Attributes:
        name: Stable identifier of the control
        label: Text shown to the user, depends on the session state
        action: Coroutine function run when the control is triggered
        enabled: False while a previous action on the same sound is running
    """

    name: str
    label: str
    action: Callable[[], Awaitable]
    enabled: bool = True


def build_controls(session: SoundSession) -> list[Control]:
    """Build the current list of controls.

    The pause/resume control only appears while the remote sound is playing.
    """
    registry = session.registry
    controls = [
        Control(
            "play_local",
            "Play Local Sound",
            session.play_local_sound,
            not registry.is_busy(LOCAL_SOUND),
        ),
        Control(
            "play_remote",
            "Stop Remote Sound" if session.remote_sound_playing else "Play Remote Sound",
            session.play_remote_sound,
            not registry.is_busy(REMOTE_SOUND),
        ),
    ]
    if session.remote_sound_playing:
        controls.append(
            Control(
                "pause_remote",
                "Resume Remote Sound" if session.remote_paused else "Pause Remote Sound",
                session.pause_remote_sound,
                not registry.is_busy(REMOTE_SOUND),
            )
        )
    controls.append(
        Control(
            "recording",
            "Stop Recording" if session.is_recording else "Start Recording",
            session.stop_recording if session.is_recording else session.start_recording,
            not registry.is_busy(RECORDING),
        )
    )
    return controls
