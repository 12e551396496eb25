"""Mixin classes for the sound-session library.

This package provides reusable mixins for managing locks and playback status.
"""

from .lock import LockMixin
from .status import STATUS, StatusMixin

__all__ = [
    "STATUS",
    "StatusMixin",
    "LockMixin",
]
