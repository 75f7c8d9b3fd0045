"""Freshness detection for the compiled cache.

The cache is fresh when its modification time is at least the newest
modification time among every tracked source file. Anything that prevents
the comparison counts as stale.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..compilers.sources import resolve_source

logger = logging.getLogger(__name__)


class FreshnessChecker:
    """Compare the cache file against its source files."""

    def __init__(self, cache_path: Path, client_dir: Path) -> None:
        """Initialize freshness checker.

        Args:
            cache_path: Location of the cache file
            client_dir: Directory manifest entries are resolved against
        """
        self.cache_path = Path(cache_path)
        self.client_dir = Path(client_dir)

    def _stat_source(self, file: str | Path) -> os.stat_result:
        return os.stat(resolve_source(self.client_dir, file))

    async def _source_mtime(self, file: str | Path) -> float:
        stats = await asyncio.to_thread(self._stat_source, file)
        return stats.st_mtime

    async def is_fresh(self, files: Iterable[str | Path]) -> bool:
        """Check whether the cache is at least as new as every source.

        Args:
            files: Manifest entries and other inputs of the build

        Returns:
            True if the cache can be served without recompiling
        """
        try:
            cache_mtime = (await asyncio.to_thread(os.stat, self.cache_path)).st_mtime
        except OSError:
            logger.info(f"No cache at {self.cache_path}")
            return False

        files = list(files)
        try:
            mtimes = await asyncio.gather(*(self._source_mtime(f) for f in files))
        except OSError as e:
            logger.warning(f"Cannot stat source file, treating cache as stale: {e}")
            return False

        if not mtimes:
            return True

        newest = max(mtimes)
        fresh = cache_mtime >= newest
        logger.debug(f"Cache mtime {cache_mtime}, newest source {newest}: {'fresh' if fresh else 'stale'}")
        return fresh
