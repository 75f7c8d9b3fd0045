"""Build orchestration.

``AssetPipeline`` is the entry point the host process calls on startup:

- ``load(dev=True)`` always compiles without minifying and never writes the
  cache file.
- ``load(dev=False)`` serves the persisted cache, rebuilding and persisting
  it when it is missing or unreadable.
- ``build()`` pre-warms the cache: it recompiles only when the cache is older
  than its sources or does not parse.

A build is all-or-nothing. Callers get a complete ``CompiledCache`` or an
exception.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

from . import __version__
from .cache.freshness import FreshnessChecker
from .cache.store import CacheStore
from .compilers import compile_all
from .config.settings import AssetSettings
from .config.settings import ClientPaths
from .encoding import encode_assets
from .errors import CacheMissingError
from .errors import CacheOutdatedError
from .errors import CacheReadError
from .errors import TransformUnavailableError
from .manifest import load_manifest
from .models import CompiledCache
from .models import SourceFileSet
from .transforms.defaults import default_transforms
from .transforms.ports import Transforms

logger = logging.getLogger(__name__)


class BuildState(str, Enum):
    """Stages of a pipeline run."""

    IDLE = "idle"
    CHECKING_FRESHNESS = "checking_freshness"
    FRESH_LOAD = "fresh_load"
    COMPILING = "compiling"
    ENCODING = "encoding"
    PERSISTING = "persisting"
    DONE = "done"
    ERROR = "error"


class AssetPipeline:
    """Compile, encode and cache the client assets."""

    def __init__(
        self,
        sources: SourceFileSet,
        paths: ClientPaths,
        transforms: Transforms,
        cache_path: Path,
        version: str = __version__,
        builtin_theme_name: str = "client",
        validate_cache_version: bool = False,
    ) -> None:
        """Initialize asset pipeline.

        Args:
            sources: Manifest of the build
            paths: Client source locations
            transforms: Transform adapters, all required
            cache_path: Location of the cache file
            version: Version stamped into the cache meta
            builtin_theme_name: Key of the built-in editor theme
            validate_cache_version: Treat a cache from another version as invalid
        """
        if transforms is None:
            raise TransformUnavailableError("AssetPipeline requires transform adapters")

        self.sources = sources
        self.paths = paths
        self.transforms = transforms
        self.store = CacheStore(cache_path)
        self.freshness = FreshnessChecker(cache_path, paths.client)
        self.version = version
        self.builtin_theme_name = builtin_theme_name
        self.validate_cache_version = validate_cache_version
        self.state = BuildState.IDLE

    @classmethod
    def from_settings(cls, settings: AssetSettings, transforms: Transforms | None = None) -> AssetPipeline:
        """Create a pipeline from settings.

        Raises:
            TransformUnavailableError: If no transforms are given and a default adapter is missing
        """
        manifest_path = Path(settings.manifest_path) if settings.manifest_path else None
        return cls(
            sources=load_manifest(manifest_path),
            paths=ClientPaths.from_settings(settings),
            transforms=transforms if transforms is not None else default_transforms(settings),
            cache_path=settings.resolved_cache_path(),
            builtin_theme_name=settings.builtin_theme_name,
            validate_cache_version=settings.validate_cache_version,
        )

    @property
    def cache_path(self) -> Path:
        return self.store.cache_path

    def _transition(self, state: BuildState) -> None:
        logger.debug(f"Pipeline {self.state.value} -> {state.value}")
        self.state = state

    def tracked_inputs(self) -> list[str | Path]:
        """Every file whose change invalidates the cache.

        Manifest entries are returned unresolved; the freshness checker
        resolves them at stat time.
        """
        inputs: list[str | Path] = list(self.sources.tracked_files())
        inputs += [self.paths.index_html, self.paths.builtin_theme, self.paths.mode_meta]
        for directory in (self.paths.templates, self.paths.icons):
            try:
                inputs += [directory / name for name in sorted(os.listdir(directory))]
            except FileNotFoundError:
                continue
        return inputs

    async def is_fresh(self) -> bool:
        """Whether the persisted cache is at least as new as every input."""
        return await self.freshness.is_fresh(self.tracked_inputs())

    async def _read_cache(self) -> CompiledCache:
        cache = await self.store.load()
        if self.validate_cache_version and cache.meta.version != self.version:
            raise CacheOutdatedError(f"Cache built by version {cache.meta.version}, running {self.version}")
        return cache

    async def _compile(self, minify: bool, persist: bool) -> CompiledCache:
        self._transition(BuildState.COMPILING)
        assets = await compile_all(self.sources, self.paths, self.transforms, minify, self.builtin_theme_name)

        self._transition(BuildState.ENCODING)
        cache = await encode_assets(assets, self.version)

        if persist:
            self._transition(BuildState.PERSISTING)
            await self.store.persist(cache)

        self._transition(BuildState.DONE)
        return cache

    async def load(self, dev: bool = False) -> CompiledCache:
        """Return the compiled cache.

        Args:
            dev: Compile unminified and never touch the cache file

        Returns:
            Complete compiled cache

        Raises:
            AssetError: If compilation fails
        """
        try:
            if dev:
                return await self._compile(minify=False, persist=False)

            self._transition(BuildState.FRESH_LOAD)
            try:
                cache = await self._read_cache()
            except CacheMissingError as e:
                logger.info(f"{e}, building cache ...")
            except CacheReadError as e:
                logger.error(f"{e}, building cache ...")
            else:
                self._transition(BuildState.DONE)
                return cache

            return await self._compile(minify=True, persist=True)
        except Exception:
            self._transition(BuildState.ERROR)
            raise

    async def build(self) -> None:
        """Refresh the persisted cache if it is stale or invalid.

        Raises:
            AssetError: If compilation fails
        """
        try:
            self._transition(BuildState.CHECKING_FRESHNESS)
            if await self.is_fresh():
                self._transition(BuildState.FRESH_LOAD)
                try:
                    await self._read_cache()
                except CacheReadError as e:
                    logger.warning(f"{e}, rebuilding cache ...")
                else:
                    logger.info(f"Cache at {self.cache_path} is up to date")
                    self._transition(BuildState.DONE)
                    return
            else:
                logger.info(f"Cache at {self.cache_path} is stale, building cache ...")

            await self._compile(minify=True, persist=True)
        except Exception:
            self._transition(BuildState.ERROR)
            raise
