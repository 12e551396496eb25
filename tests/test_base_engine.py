"""Tests for BaseAudioEngine, exercised through MockAudioEngine."""

import pytest

from sound_session.core import (
    PLAYBACK_MODE,
    RECORDING_MODE,
    RecordingError,
    RecordingOptionsPresets,
    SoundLoadError,
    SoundSource,
    STATUS,
)

from .mock_class import MockAudioEngine


class FailingEngine(MockAudioEngine):
    async def _create_sound(self, source):
        raise OSError("disk unplugged")


class TestCreateSound:
    @pytest.mark.asyncio
    async def test_coerces_and_loads(self, engine, tmp_path):
        sound = await engine.create_sound(tmp_path / "click.wav")
        assert sound.source == SoundSource.asset(tmp_path / "click.wav")
        assert sound.is_loaded is True

    @pytest.mark.asyncio
    async def test_load_error_is_propagated(self, engine):
        engine.reject = lambda source: True
        with pytest.raises(SoundLoadError, match="corrupt file"):
            await engine.create_sound("https://example.com/a.mp3")

    @pytest.mark.asyncio
    async def test_other_errors_are_wrapped(self, config):
        engine = FailingEngine(config)
        with pytest.raises(SoundLoadError) as info:
            await engine.create_sound("https://example.com/a.mp3")
        assert isinstance(info.value.__cause__, OSError)
        assert info.value.source == SoundSource.from_uri("https://example.com/a.mp3")


class TestPlayback:
    @pytest.mark.asyncio
    async def test_operations_drive_the_handle(self, engine, tmp_path):
        sound = await engine.create_sound(tmp_path / "click.wav")

        await engine.replay(sound)
        assert sound.status() == STATUS.PLAYING
        await engine.pause(sound)
        assert sound.status() == STATUS.PAUSED
        await engine.play(sound)
        await engine.stop(sound)
        assert sound.status() == STATUS.STOPPED

        await engine.unload(sound)
        assert sound.is_loaded is False


class TestAudioMode:
    @pytest.mark.asyncio
    async def test_set_audio_mode(self, engine):
        await engine.set_audio_mode(RECORDING_MODE)
        assert engine.audio_mode == RECORDING_MODE
        await engine.set_audio_mode(PLAYBACK_MODE)
        assert engine.audio_mode == PLAYBACK_MODE

    def test_config_falls_back_to_global(self):
        from sound_session.core import get_global_session_config

        assert MockAudioEngine().config is get_global_session_config()


class TestCreateRecording:
    @pytest.mark.asyncio
    async def test_refused_without_recording_mode(self, engine):
        await engine.set_audio_mode(PLAYBACK_MODE)
        with pytest.raises(RecordingError):
            await engine.create_recording()

    @pytest.mark.asyncio
    async def test_path_and_extension(self, engine, config):
        await engine.set_audio_mode(RECORDING_MODE)

        recording = await engine.create_recording(RecordingOptionsPresets.LOW_QUALITY)

        assert recording.is_recording is True
        assert recording.path.parent == config.recordings_dir.resolve()
        assert recording.path.name.startswith("recording-")
        assert recording.path.suffix == ".ogg"

    @pytest.mark.asyncio
    async def test_defaults_to_configured_options(self, engine, config):
        await engine.set_audio_mode(RECORDING_MODE)
        recording = await engine.create_recording()
        assert recording.options == config.recording_options

    @pytest.mark.asyncio
    async def test_stop_and_unload_writes_file(self, engine):
        await engine.set_audio_mode(RECORDING_MODE)
        recording = await engine.create_recording()

        await engine.stop_and_unload(recording)

        assert recording.is_done_recording is True
        assert recording.path.read_bytes() == b"RIFF"
        assert recording.get_uri() == recording.path.as_uri()
