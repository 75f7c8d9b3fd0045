"""Configuration module for asset_library.

Public Interface:
    - AssetSettings: Settings model
    - ClientPaths: Client source locations derived from settings
    - load_config: Load configuration
    - create_default_config: Create default config file
    - get_config_path: Get config file path
"""

from .loader import create_default_config
from .loader import get_config_path
from .loader import load_config
from .settings import AssetSettings
from .settings import ClientPaths

__all__ = [
    "AssetSettings",
    "ClientPaths",
    "load_config",
    "create_default_config",
    "get_config_path",
]
