"""Lock mixin for thread-safe operations."""

import threading


class LockMixin:
    """Mixin that provides a reentrant lock for thread-safe operations.

    Sounds and recordings are driven from the event loop (through worker
    threads) and from audio callback threads, so every state change goes
    through this lock.
    """

    def __init__(self, *args, **kwargs):
        """Initialize the lock."""
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()
