"""Path resolution for asset-library storage locations.

This module provides path resolution based on the ASSETS_HOME environment
variable, with per-directory overrides.

Contract:
- Inputs: Environment variables (ASSETS_HOME, ASSETS_CONFIG_DIR, ASSETS_CACHE_DIR, ASSETS_CACHE_PATH)
- Outputs: Resolved Path objects
- Side Effects: get_config_dir creates its directory; cache locations are created on persist only
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get ASSETS_HOME from environment.

    Returns:
        Path to root directory (default: ~/.assets)
    """
    root = os.environ.get("ASSETS_HOME", "~/.assets")
    return Path(root).expanduser().resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($ASSETS_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("ASSETS_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).expanduser().resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory.

    Not created here: dev builds never touch the cache location.

    Returns:
        Path to cache directory ($ASSETS_HOME/cache)
    """
    cache_dir: Path = get_home_dir() / "cache"

    env_override: str | None = os.environ.get("ASSETS_CACHE_DIR")
    if env_override is not None:
        cache_dir = Path(env_override).expanduser().resolve()

    return cache_dir


def get_cache_path() -> Path:
    """Get path of the compiled cache file.

    Returns:
        Path to cache file ($ASSETS_HOME/cache/cache.json)

    Environment Variables:
        ASSETS_CACHE_PATH: Override the cache file location

    Example:
        >>> cache_path = get_cache_path()
        >>> assert cache_path.name == "cache.json" or "ASSETS_CACHE_PATH" in os.environ
    """
    env_override: str | None = os.environ.get("ASSETS_CACHE_PATH")
    if env_override:
        return Path(env_override).expanduser().resolve()
    return get_cache_dir() / "cache.json"
