"""Compiled cache persistence.

The whole compiled cache lives in one JSON file, byte buffers base64-encoded.
Writes go to a temporary file that is atomically renamed over the cache, so a
reader sees either the previous file or the new one, never a partial write.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..errors import CacheCorruptError
from ..errors import CacheMissingError
from ..errors import CacheWriteError
from ..models import CompiledCache

logger = logging.getLogger(__name__)


class CacheStore:
    """Single-file store for the compiled cache."""

    def __init__(self, cache_path: Path) -> None:
        """Initialize cache store.

        Args:
            cache_path: Location of the cache file
        """
        self.cache_path = Path(cache_path)

    def _write(self, payload: bytes) -> None:
        temp_path: Path | None = None
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)

            fd, temp_name = tempfile.mkstemp(
                dir=self.cache_path.parent, prefix=f".{self.cache_path.name}.", suffix=".tmp"
            )
            temp_path = Path(temp_name)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            # Atomic rename
            os.replace(temp_path, self.cache_path)
        except OSError as e:
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    temp_path.unlink()
            raise CacheWriteError(f"Failed to write cache to {self.cache_path}: {e}") from e

    async def persist(self, cache: CompiledCache) -> None:
        """Serialize the cache and replace the cache file.

        Raises:
            CacheWriteError: If the file cannot be written
        """
        payload = cache.model_dump_json().encode("utf-8")
        await asyncio.to_thread(self._write, payload)
        logger.info(f"Wrote cache to {self.cache_path} ({len(payload)} bytes)")

    async def load(self) -> CompiledCache:
        """Read and deserialize the cache file.

        Raises:
            CacheMissingError: If the file is absent or unreadable
            CacheCorruptError: If the content does not deserialize
        """
        try:
            payload = await asyncio.to_thread(self.cache_path.read_bytes)
        except OSError as e:
            raise CacheMissingError(f"{e.strerror or e} {self.cache_path}") from e

        try:
            return CompiledCache.model_validate_json(payload)
        except ValidationError as e:
            raise CacheCorruptError(f"Cache file {self.cache_path} is corrupt: {e}") from e
