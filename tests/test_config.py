"""Tests for AudioMode, RecordingOptions and SessionConfig."""

from pathlib import Path

import pytest

from sound_session.core import (
    PLAYBACK_MODE,
    RECORDING_MODE,
    AudioMode,
    RecordingOptions,
    RecordingOptionsPresets,
    SessionConfig,
    SoundSource,
    get_global_session_config,
    set_global_session_config,
)
from sound_session.core import config as config_module
from sound_session.core.constants import DEFAULT_LOCAL_SOUND, DEFAULT_REMOTE_SOUND


class TestAudioMode:
    def test_defaults(self):
        mode = AudioMode()
        assert mode.allows_recording is False
        assert mode == PLAYBACK_MODE

    def test_presets(self):
        assert PLAYBACK_MODE.allows_recording is False
        assert RECORDING_MODE.allows_recording is True
        assert RECORDING_MODE != PLAYBACK_MODE


class TestRecordingOptions:
    def test_high_quality(self):
        options = RecordingOptionsPresets.HIGH_QUALITY
        assert options.sample_rate == 44100
        assert options.channels == 2
        assert options.bit_rate == 128000
        assert options.android.extension == ".m4a"
        assert options.android.audio_encoder == "AAC"
        assert options.desktop.extension == ".wav"

    def test_low_quality(self):
        options = RecordingOptionsPresets.LOW_QUALITY
        assert options.bit_rate == 64000
        assert options.android.output_format == "THREE_GPP"
        assert options.android.audio_encoder == "AMR_NB"

    def test_by_name(self):
        assert RecordingOptionsPresets.by_name("HIGH") is RecordingOptionsPresets.HIGH_QUALITY
        assert RecordingOptionsPresets.by_name("low") is RecordingOptionsPresets.LOW_QUALITY

    def test_by_name_unknown(self):
        with pytest.raises(ValueError):
            RecordingOptionsPresets.by_name("lossless")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_rate": 0},
            {"channels": 3},
            {"bit_rate": -1},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            RecordingOptions(**kwargs)


class TestSessionConfig:
    def test_defaults(self):
        config = SessionConfig()
        assert config.local_sound == SoundSource.asset(DEFAULT_LOCAL_SOUND)
        assert config.remote_sound == SoundSource.from_uri(DEFAULT_REMOTE_SOUND)
        assert config.recording_options is RecordingOptionsPresets.HIGH_QUALITY
        assert config.playback_mode == PLAYBACK_MODE
        assert config.recording_mode == RECORDING_MODE

    def test_bundled_local_sound_exists(self):
        assert DEFAULT_LOCAL_SOUND.is_file()

    def test_sources_and_paths_are_coerced(self, tmp_path):
        config = SessionConfig(
            local_sound=str(tmp_path / "a.wav"),
            remote_sound="https://example.com/b.mp3",
            recordings_dir=str(tmp_path),
        )
        assert config.local_sound == SoundSource.asset(tmp_path / "a.wav")
        assert config.remote_sound.is_remote is True
        assert config.recordings_dir == tmp_path

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            SessionConfig(download_timeout=0)

    def test_recording_mode_must_allow_recording(self):
        with pytest.raises(ValueError):
            SessionConfig(recording_mode=AudioMode())

    def test_invalid_recording_options(self):
        with pytest.raises(TypeError):
            SessionConfig(recording_options="high")


class TestSessionConfigFromEnv:
    def test_reads_environment(self, tmp_path):
        environ = {
            "SOUND_SESSION_LOCAL_SOUND": str(tmp_path / "local.wav"),
            "SOUND_SESSION_REMOTE_SOUND": "https://example.com/remote.mp3",
            "SOUND_SESSION_RECORDING_QUALITY": "low",
            "SOUND_SESSION_RECORDINGS_DIR": str(tmp_path / "rec"),
            "SOUND_SESSION_CACHE_DIR": str(tmp_path / "cache"),
            "SOUND_SESSION_DOWNLOAD_TIMEOUT": "5",
        }
        config = SessionConfig.from_env(environ)
        assert config.local_sound.path == tmp_path / "local.wav"
        assert config.remote_sound.location == "https://example.com/remote.mp3"
        assert config.recording_options is RecordingOptionsPresets.LOW_QUALITY
        assert config.recordings_dir == tmp_path / "rec"
        assert config.cache_dir == tmp_path / "cache"
        assert config.download_timeout == 5.0

    def test_overrides_win(self):
        environ = {"SOUND_SESSION_REMOTE_SOUND": "https://example.com/remote.mp3"}
        config = SessionConfig.from_env(environ, remote_sound="https://example.com/other.mp3", local_sound=None)
        assert config.remote_sound.location == "https://example.com/other.mp3"
        assert config.local_sound == SoundSource.asset(DEFAULT_LOCAL_SOUND)

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            SessionConfig.from_env({"SOUND_SESSION_RECORDING_QUALITY": "best"})


class TestGlobalSessionConfig:
    @pytest.fixture(autouse=True)
    def restore_global(self):
        saved = config_module._global_session_config
        yield
        config_module._global_session_config = saved

    def test_set_and_get(self, tmp_path):
        config = SessionConfig(recordings_dir=Path(tmp_path))
        set_global_session_config(config)
        assert get_global_session_config() is config

    def test_lazy_default(self, monkeypatch):
        config_module._global_session_config = None
        monkeypatch.delenv("SOUND_SESSION_RECORDING_QUALITY", raising=False)
        assert isinstance(get_global_session_config(), SessionConfig)

    def test_set_rejects_other_types(self):
        with pytest.raises(TypeError):
            set_global_session_config({"local_sound": "a.wav"})
