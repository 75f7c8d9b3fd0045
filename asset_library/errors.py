"""Exceptions raised by the asset pipeline.

Every failure the pipeline can report derives from ``AssetError`` so callers
can catch the whole family at the entry points.
"""


class AssetError(Exception):
    """Base class for asset pipeline failures."""


class TransformUnavailableError(AssetError):
    """Raised when a required transform adapter is missing."""


class TransformError(AssetError):
    """Raised when a transform rejects its input."""

    def __init__(self, transform: str, message: str) -> None:
        self.transform = transform
        super().__init__(f"{transform} transform failed: {message}")


class SourceReadError(AssetError):
    """Raised when a source file cannot be read during compilation."""

    def __init__(self, path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Cannot read source file {path}: {cause.strerror or cause}")


class ModeRegistryError(AssetError):
    """Raised when the mode metadata script has no mode list."""


class CacheReadError(AssetError):
    """Raised when the persisted cache cannot be used."""


class CacheMissingError(CacheReadError):
    """Raised when the cache file is absent or unreadable."""


class CacheCorruptError(CacheReadError):
    """Raised when the cache file does not deserialize."""


class CacheWriteError(AssetError):
    """Raised when the cache file cannot be written."""


class CacheOutdatedError(CacheReadError):
    """Raised when the cache was written by another version."""
