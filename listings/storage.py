"""Public URL resolution for stored media paths."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from listings.config import StorageConfig


class MediaStorage(Protocol):
    """Anything that maps a stored file path to a public URL."""

    def url(self, path: str | None) -> str | None: ...


class PublicDiskStorage:
    """Resolve paths on the public disk under a fixed base URL.

    Parameters
    ----------
    base_url : str
        Prefix prepended to every stored path (default ``/storage``).
    """

    def __init__(self, base_url: str = "/storage") -> None:
        self.base_url = base_url.rstrip("/")

    def url(self, path: str | None) -> str | None:
        """Return the public URL for ``path``, or ``None`` without a path."""
        if not path:
            return None
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    @classmethod
    def from_config(cls, config: "StorageConfig") -> "PublicDiskStorage":
        return cls(base_url=config.base_url)
