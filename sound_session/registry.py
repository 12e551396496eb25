"""SoundRegistry: named sound handles with derived playback flags.

The registry maps a sound key (e.g. "local", "remote") to a SoundEntry. Entries
are immutable; the playing/paused flags only change through set_sound() (which
resets them), load_sound(), and record_transition(), called by the session
once the engine confirmed a play/stop/pause/resume.
"""

import contextlib
import dataclasses
import logging
from collections.abc import Awaitable
from dataclasses import dataclass

from sound_session.core import BaseAudioEngine, BaseSound, SoundSource
from sound_session.core.exceptions import ActionInProgressError, MissingArgumentError

logger = logging.getLogger(__name__)

__all__ = [
    "SoundEntry",
    "SoundRegistry",
]


@dataclass(frozen=True)
class SoundEntry:
    """A registered sound handle and its playback flags."""

    handle: BaseSound
    playing: bool = False
    paused: bool = False


class SoundRegistry:
    """Keyed store of sound handles owned by a session.

    The registry:
    - Holds at most one handle per key
    - Loads sounds through the audio engine and releases the handles it replaces
    - Guards keys against overlapping actions (see guard())
    - Stops and unloads every handle on release_all()
    """

    def __init__(self, engine: BaseAudioEngine):
        self._engine = engine
        self._entries: dict[str, SoundEntry] = {}
        self._in_flight: set[str] = set()
        self._closed = False

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> list[str]:
        return list(self._entries)

    def get(self, key: str) -> SoundEntry | None:
        return self._entries.get(key)

    def handle(self, key: str) -> BaseSound | None:
        entry = self._entries.get(key)
        return entry.handle if entry is not None else None

    def set_sound(self, key: str, handle: BaseSound) -> BaseSound | None:
        """Install a handle under key with both flags reset.

        Returns:
            The handle previously stored under key, if any
        """
        logger.debug("SoundRegistry.set_sound(%s, %s)", key, handle)
        if not key:
            raise MissingArgumentError("key")
        previous = self._entries.get(key)
        self._entries[key] = SoundEntry(handle)
        if previous is not None and previous.handle is not handle:
            return previous.handle
        return None

    def load_sound(self, key: str, source) -> Awaitable[SoundEntry | None]:
        """Resolve source into a handle through the engine and install it under key.

        Argument validation happens immediately, before the returned awaitable
        is scheduled, so a missing key or source never reaches the engine.

        Returns:
            An awaitable giving the new entry, or None if the engine rejected the source

        Raises:
            MissingArgumentError: If key or source is empty
        """
        if not key:
            raise MissingArgumentError("key")
        if not source:
            raise MissingArgumentError("source")
        return self._load_sound(key, SoundSource.coerce(source))

    async def _load_sound(self, key: str, source: SoundSource) -> SoundEntry | None:
        logger.debug("SoundRegistry.load_sound(%s, %s)", key, source)
        try:
            handle = await self._engine.create_sound(source)
        except Exception as e:
            logger.error(f"Failed to load {source} as '{key}': {e}")
            return None

        if self._closed:
            # release_all() ran while the engine was loading
            logger.warning(f"Registry closed while loading {source} as '{key}', releasing it")
            await self._release(key, handle)
            return None

        replaced = self.set_sound(key, handle)
        if replaced is not None:
            await self._release(key, replaced)
        return self._entries[key]

    def record_transition(self, key: str, *, playing: bool | None = None, paused: bool | None = None) -> SoundEntry:
        """Update the flags of key after the engine confirmed a transition."""
        entry = self._entries[key]
        changes = {}
        if playing is not None:
            changes["playing"] = playing
        if paused is not None:
            changes["paused"] = paused
        entry = dataclasses.replace(entry, **changes)
        self._entries[key] = entry
        logger.debug("SoundRegistry.record_transition(%s) -> playing=%s paused=%s", key, entry.playing, entry.paused)
        return entry

    def is_busy(self, key: str) -> bool:
        return key in self._in_flight

    @contextlib.asynccontextmanager
    async def guard(self, key: str):
        """Mark key busy for the duration of an action.

        Raises:
            ActionInProgressError: If another action on key has not finished
        """
        if key in self._in_flight:
            raise ActionInProgressError(key)
        self._in_flight.add(key)
        try:
            yield
        finally:
            self._in_flight.discard(key)

    @property
    def closed(self) -> bool:
        return self._closed

    def reopen(self):
        """Accept loads again after release_all()."""
        self._closed = False

    async def release_all(self) -> dict[str, bool]:
        """Stop then unload every handle, best effort.

        The registry is closed afterwards: a load still running at that point
        releases its handle instead of installing it, until reopen().

        Returns:
            Mapping of key to True if the handle was released cleanly
        """
        logger.debug("SoundRegistry.release_all(%s)", self.keys())
        self._closed = True
        entries, self._entries = self._entries, {}
        return {key: await self._release(key, entry.handle) for key, entry in entries.items()}

    async def _release(self, key: str, handle: BaseSound) -> bool:
        released = True
        try:
            await self._engine.stop(handle)
        except Exception as e:
            logger.warning(f"Failed to stop '{key}': {e}")
            released = False
        try:
            await self._engine.unload(handle)
        except Exception as e:
            logger.warning(f"Failed to unload '{key}': {e}")
            released = False
        return released
