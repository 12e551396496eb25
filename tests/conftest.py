"""Test configuration and fixtures for sound-session tests."""

import pytest

from sound_session.core import SessionConfig
from sound_session.session import SoundSession

from .mock_class import MockAudioEngine


@pytest.fixture
def config(tmp_path):
    """SessionConfig writing recordings and downloads under tmp_path."""
    return SessionConfig(
        local_sound=tmp_path / "assets" / "click.wav",
        remote_sound="https://example.com/sounds/kalimba.mp3",
        recordings_dir=tmp_path / "recordings",
        cache_dir=tmp_path / "cache",
    )


@pytest.fixture
def engine(config):
    """MockAudioEngine bound to the test config."""
    return MockAudioEngine(config)


@pytest.fixture
def session(engine, config):
    """Uninitialized SoundSession on the mock engine."""
    return SoundSession(engine=engine, config=config)
