"""Sound sources: bundled assets and URIs."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from .exceptions import MissingArgumentError

__all__ = [
    "SourceKind",
    "SoundSource",
]

REMOTE_SCHEMES = ("http", "https")
URI_SCHEMES = REMOTE_SCHEMES + ("file", "content")


class SourceKind(Enum):
    """Where a sound source lives."""

    ASSET = "asset"
    URI = "uri"


@dataclass(frozen=True)
class SoundSource:
    """A location the audio engine can turn into a sound.

    Attributes:
        location: Filesystem path for assets, full URI otherwise
        kind: Whether the location is a bundled asset or a URI
    """

    location: str
    kind: SourceKind = SourceKind.ASSET

    def __post_init__(self):
        if not self.location:
            raise MissingArgumentError("source")

    @classmethod
    def asset(cls, path) -> "SoundSource":
        """Build a source for a bundled asset on disk."""
        return cls(str(path), SourceKind.ASSET)

    @classmethod
    def from_uri(cls, uri: str) -> "SoundSource":
        """Build a source from a URI (http, https, file or content)."""
        return cls(uri, SourceKind.URI)

    @classmethod
    def coerce(cls, value) -> "SoundSource":
        """Turn a str, Path or SoundSource into a SoundSource.

        Strings with a known URI scheme become URI sources, anything else is
        treated as an asset path.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Path):
            return cls.asset(value)
        if not value:
            raise MissingArgumentError("source")
        if urlparse(value).scheme in URI_SCHEMES:
            return cls.from_uri(value)
        return cls.asset(value)

    @property
    def scheme(self) -> str:
        if self.kind == SourceKind.ASSET:
            return ""
        return urlparse(self.location).scheme

    @property
    def is_remote(self) -> bool:
        """True when the source has to be fetched over the network."""
        return self.scheme in REMOTE_SCHEMES

    @property
    def path(self) -> Path | None:
        """Local filesystem path of the source, or None if it has none."""
        if self.kind == SourceKind.ASSET:
            return Path(self.location)
        parsed = urlparse(self.location)
        if parsed.scheme == "file":
            return Path(url2pathname(parsed.path))
        return None

    def __str__(self):
        return self.location
