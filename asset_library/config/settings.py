"""Settings models for the asset pipeline.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from dataclasses import dataclass
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..storage.paths import get_cache_path


class AssetSettings(BaseSettings):
    """Configuration for the asset pipeline.

    Attributes:
        client_path: Root of the client sources (default: ./client)
        cache_path: Compiled cache file (default: $ASSETS_HOME/cache/cache.json)
        manifest_path: Optional YAML manifest of source files
        log_level: Logging level (default: info)
        builtin_theme_name: Key of the built-in editor theme
        validate_cache_version: Treat a cache built by another version as invalid
        postcss_command: Executable used for vendor prefixing
        handlebars_command: Executable used for template precompilation

    Example:
        >>> settings = AssetSettings()
        >>> assert settings.log_level == "info"
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_path: str = "client"
    cache_path: str | None = None
    manifest_path: str | None = None
    log_level: str = "info"

    builtin_theme_name: str = "client"
    validate_cache_version: bool = False

    postcss_command: str = "postcss"
    handlebars_command: str = "handlebars"

    @field_validator("client_path", "cache_path", "manifest_path")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string, or None when unset
        """
        if v is None:
            return None
        return str(Path(v).expanduser().resolve())

    def resolved_cache_path(self) -> Path:
        """Cache file path, falling back to the storage default."""
        if self.cache_path:
            return Path(self.cache_path)
        return get_cache_path()


@dataclass(frozen=True)
class ClientPaths:
    """Locations of the client sources the compilers read."""

    client: Path
    templates: Path
    themes: Path
    modes: Path
    icons: Path
    index_html: Path
    builtin_theme: Path
    mode_meta: Path

    @classmethod
    def from_root(cls, client: Path) -> "ClientPaths":
        client = Path(client)
        codemirror = client / "node_modules" / "codemirror"
        return cls(
            client=client,
            templates=client / "templates",
            themes=codemirror / "theme",
            modes=codemirror / "mode",
            icons=client / "svg",
            index_html=client / "lib" / "index.html",
            builtin_theme=client / "lib" / "cmtheme.css",
            mode_meta=codemirror / "mode" / "meta.js",
        )

    @classmethod
    def from_settings(cls, settings: AssetSettings) -> "ClientPaths":
        return cls.from_root(Path(settings.client_path))
