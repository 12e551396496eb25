"""Android audio engine.

Playback and recording go through MediaPlayer and MediaRecorder; the
microphone permission is requested through python-for-android.
"""

import asyncio
import logging
from pathlib import Path

from android.permissions import Permission, check_permission, request_permissions

from sound_session.core.base_engine import BaseAudioEngine
from sound_session.core.recording_options import RecordingOptions
from sound_session.core.source import SoundSource

from .recording import AndroidRecording
from .sound import AndroidSound

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidAudioEngine",
]


class AndroidAudioEngine(BaseAudioEngine):
    """Audio engine backed by the Android media APIs."""

    async def _create_sound(self, source: SoundSource) -> AndroidSound:
        sound = AndroidSound(source)
        await asyncio.to_thread(sound.load)
        return sound

    async def request_permissions(self) -> bool:
        if check_permission(Permission.RECORD_AUDIO):
            return True

        loop = asyncio.get_running_loop()
        granted = loop.create_future()

        def _on_result(permissions, grant_results):
            # Called on the Android UI thread
            loop.call_soon_threadsafe(granted.set_result, all(grant_results))

        logger.debug("Requesting %s", Permission.RECORD_AUDIO)
        request_permissions([Permission.RECORD_AUDIO], _on_result)
        return await granted

    def _new_recording(self, path: Path, options: RecordingOptions) -> AndroidRecording:
        return AndroidRecording(path, options)

    def _recording_extension(self, options: RecordingOptions) -> str:
        return options.android.extension
