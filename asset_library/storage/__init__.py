"""Storage locations for asset_library.

Public Interface:
    - get_home_dir: Get ASSETS_HOME
    - get_config_dir: Get config directory
    - get_cache_dir: Get cache directory
    - get_cache_path: Get compiled cache file path
"""

from .paths import get_cache_dir
from .paths import get_cache_path
from .paths import get_config_dir
from .paths import get_home_dir

__all__ = [
    "get_home_dir",
    "get_config_dir",
    "get_cache_dir",
    "get_cache_path",
]
