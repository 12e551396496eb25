"""Android recording implementation using MediaRecorder."""

import logging

from sound_session.core.base_recording import BaseRecording
from sound_session.core.exceptions import RecordingError

from ._android_api import AUDIO_ENCODER_BY_NAME, AUDIO_SOURCE_MIC, OUTPUT_FORMAT_BY_NAME, MediaRecorder

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidRecording",
]


class AndroidRecording(BaseRecording):
    """Records the microphone with an android.media.MediaRecorder."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._recorder = None

    def _do_start(self):
        logger.debug("AndroidRecording._do_start(%s)", self.path)
        options = self.options
        try:
            output_format = OUTPUT_FORMAT_BY_NAME[options.android.output_format]
            audio_encoder = AUDIO_ENCODER_BY_NAME[options.android.audio_encoder]
        except KeyError as e:
            raise RecordingError(f"Unsupported recording option: {e}") from e

        recorder = MediaRecorder()
        try:
            recorder.setAudioSource(AUDIO_SOURCE_MIC)
            recorder.setOutputFormat(output_format)
            recorder.setAudioEncoder(audio_encoder)
            recorder.setAudioSamplingRate(options.sample_rate)
            recorder.setAudioChannels(options.channels)
            recorder.setAudioEncodingBitRate(options.bit_rate)
            recorder.setOutputFile(str(self.path))
            recorder.prepare()
            recorder.start()
        except Exception as e:
            recorder.release()
            raise RecordingError(f"Cannot start MediaRecorder: {e}") from e
        self._recorder = recorder

    def _do_stop(self):
        logger.debug("AndroidRecording._do_stop(%s)", self.path)
        recorder, self._recorder = self._recorder, None
        if recorder is None:
            return
        try:
            recorder.stop()
        except Exception as e:
            # MediaRecorder.stop() throws when nothing was captured
            raise RecordingError(f"Cannot finalize {self.path}: {e}") from e
        finally:
            recorder.release()
