"""Configuration loading for the asset pipeline.

This module handles loading settings from a YAML file and environment
variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: AssetSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import AssetSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# asset-library configuration

# Root of the client sources (scripts, styles, templates, node_modules)
client_path: "client"

# Compiled cache file
# Default: $ASSETS_HOME/cache/cache.json
# Can be overridden with ASSETS_CACHE_PATH environment variable
# cache_path: "~/.assets/cache/cache.json"

# Optional YAML manifest listing scripts, styles, other files and libs
# manifest_path: "assets-manifest.yaml"

log_level: "info"

# Rebuild when the cache was written by another asset-library version
validate_cache_version: false
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to assets.yaml in config directory

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.name == "assets.yaml"
    """
    return get_config_dir() / "assets.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> AssetSettings:
    """Load settings from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with ASSETS_ (e.g., ASSETS_CLIENT_PATH).

    Args:
        config_path: Optional config file path (default: assets.yaml in config dir)

    Returns:
        Validated settings
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"ASSETS_{key.upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = AssetSettings(**filtered_yaml)

    logger.info(f"Asset configuration loaded: client_path={settings.client_path}, log_level={settings.log_level}")

    return settings
