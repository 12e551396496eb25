"""Android sound implementation using MediaPlayer.

MediaPlayer handles both local files and http(s) streaming, so remote
sources are handed over as-is instead of being downloaded first.
"""

import contextlib
import logging

from sound_session.core.base_sound import BaseSound
from sound_session.core.mixins import STATUS

from ._android_api import CONTENT_TYPE_MUSIC, USAGE_MEDIA, AudioAttributesBuilder, MediaPlayer, PythonActivity, Uri

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidSound",
]


class AndroidSound(BaseSound):
    """Android sound handle wrapping an android.media.MediaPlayer."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._player = None

    def _do_load(self):
        logger.debug("AndroidSound._do_load(%s)", self._source)
        player = MediaPlayer()
        try:
            attrs = AudioAttributesBuilder().setUsage(USAGE_MEDIA).setContentType(CONTENT_TYPE_MUSIC).build()
            player.setAudioAttributes(attrs)
            if self._source.scheme == "content":
                player.setDataSource(PythonActivity.mActivity, Uri.parse(self._source.location))
            elif self._source.path is not None:
                player.setDataSource(str(self._source.path))
            else:
                player.setDataSource(self._source.location)
            # Blocking prepare, the engine calls load() from a worker thread
            player.prepare()
        except Exception:
            player.release()
            raise
        self._player = player

    def _do_play(self):
        logger.debug("AndroidSound._do_play()")
        self._player.start()

    def _do_pause(self):
        logger.debug("AndroidSound._do_pause()")
        self._player.pause()

    def _do_stop(self):
        # MediaPlayer.stop() would require a new prepare(): pause and rewind instead
        logger.debug("AndroidSound._do_stop()")
        if self._player.isPlaying():
            self._player.pause()
        self._player.seekTo(0)

    def _do_seek(self, position_ms: int):
        logger.debug("AndroidSound._do_seek(%s)", position_ms)
        self._player.seekTo(position_ms)

    def _do_unload(self):
        logger.debug("AndroidSound._do_unload()")
        player, self._player = self._player, None
        if player is not None:
            player.release()

    def status(self) -> STATUS:
        # MediaPlayer stops by itself at the end of the media
        if self._status == STATUS.PLAYING and self._player is not None and not self._player.isPlaying():
            self._on_playback_finished()
        return self._status

    @property
    def duration_ms(self) -> int:
        return self._player.getDuration() if self._player is not None else 0

    @property
    def position_ms(self) -> int:
        return self._player.getCurrentPosition() if self._player is not None else 0

    def __del__(self):
        """Cleanup on deletion."""
        with contextlib.suppress(Exception):
            self._do_unload()
