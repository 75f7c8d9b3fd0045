"""
Unit tests for storage path resolution.
"""

from pathlib import Path

import pytest

from asset_library.storage import paths


@pytest.mark.unit
class TestPaths:
    """Test path resolution functions."""

    def test_get_home_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_home_dir defaults to ~/.assets when env var not set."""
        monkeypatch.delenv("ASSETS_HOME", raising=False)
        assert paths.get_home_dir() == (Path.home() / ".assets").resolve()

    def test_get_home_dir_custom(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir() == mock_storage_env

    def test_get_config_dir_creates_directory(self, mock_storage_env: Path) -> None:
        config_dir = paths.get_config_dir()
        assert config_dir.is_dir()
        assert config_dir == mock_storage_env / "config"

    def test_get_cache_dir_is_not_created(self, mock_storage_env: Path) -> None:
        cache_dir = paths.get_cache_dir()
        assert cache_dir == mock_storage_env / "cache"
        assert not cache_dir.exists()

    def test_get_cache_path_default(self, mock_storage_env: Path) -> None:
        assert paths.get_cache_path() == mock_storage_env / "cache" / "cache.json"

    def test_get_cache_path_override(
        self, mock_storage_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ASSETS_CACHE_PATH", str(tmp_path / "elsewhere.json"))
        assert paths.get_cache_path() == (tmp_path / "elsewhere.json").resolve()

    def test_get_cache_dir_override(
        self, mock_storage_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ASSETS_CACHE_DIR", str(tmp_path / "c"))
        assert paths.get_cache_path() == (tmp_path / "c").resolve() / "cache.json"

    def test_paths_are_absolute(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir().is_absolute()
        assert paths.get_config_dir().is_absolute()
        assert paths.get_cache_path().is_absolute()
