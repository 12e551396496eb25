"""Linux audio engine.

Local files are decoded with soundfile, remote sources are first downloaded
with httpx into the configured cache directory.
"""

import asyncio
import hashlib
import logging
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import httpx
import sounddevice as sd

from sound_session.core.base_engine import BaseAudioEngine
from sound_session.core.exceptions import SoundLoadError
from sound_session.core.recording_options import RecordingOptions
from sound_session.core.source import SoundSource

from .recording import LinuxRecording
from .sound import LinuxSound

logger = logging.getLogger(__name__)

__all__ = [
    "LinuxAudioEngine",
]


class LinuxAudioEngine(BaseAudioEngine):
    """Audio engine backed by soundfile, sounddevice and httpx."""

    async def _create_sound(self, source: SoundSource) -> LinuxSound:
        if source.is_remote:
            path = await self._download(source)
        else:
            path = source.path
            if path is None:
                raise SoundLoadError(source, f"unsupported scheme '{source.scheme}'")
            if not path.is_file():
                raise SoundLoadError(source, "file not found")

        sound = LinuxSound(source, path)
        await asyncio.to_thread(sound.load)
        return sound

    def _cache_path(self, source: SoundSource) -> Path:
        digest = hashlib.sha1(source.location.encode("utf-8")).hexdigest()
        suffix = PurePosixPath(urlparse(source.location).path).suffix
        return self.config.cache_dir / f"{digest}{suffix}"

    async def _download(self, source: SoundSource) -> Path:
        """Fetch a remote source into the cache, reusing an earlier download."""
        path = self._cache_path(source)
        if path.is_file():
            logger.debug("Using cached copy of %s at %s", source, path)
            return path

        logger.debug("Downloading %s to %s", source, path)
        try:
            async with httpx.AsyncClient(timeout=self.config.download_timeout, follow_redirects=True) as client:
                response = await client.get(source.location)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise SoundLoadError(source, str(e)) from e

        path.parent.mkdir(parents=True, exist_ok=True)
        partial = path.with_name(path.name + ".part")
        await asyncio.to_thread(partial.write_bytes, response.content)
        partial.replace(path)
        return path

    async def request_permissions(self) -> bool:
        """There is no permission prompt on desktop: check an input device exists."""
        try:
            device = await asyncio.to_thread(sd.query_devices, kind="input")
        except (ValueError, sd.PortAudioError) as e:
            logger.warning(f"No input device available: {e}")
            return False
        logger.debug("Using input device %s", device["name"])
        return True

    def _new_recording(self, path: Path, options: RecordingOptions) -> LinuxRecording:
        return LinuxRecording(path, options)

    def _recording_extension(self, options: RecordingOptions) -> str:
        return options.desktop.extension
