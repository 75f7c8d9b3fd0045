"""
Tests for the assets CLI.
"""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from asset_library.cli import cli
from asset_library.models import SourceFileSet
from asset_library.transforms import default_transforms


@pytest.fixture
def cli_env(
    mock_storage_env: Path,
    client_dir: Path,
    sources: SourceFileSet,
    transforms,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Configure the CLI against the client tree fixture with fake transforms."""
    manifest = tmp_path / "manifest.yaml"
    manifest.write_text(yaml.safe_dump(sources.model_dump()))
    cache_path = tmp_path / "cli-cache" / "cache.json"

    monkeypatch.setenv("ASSETS_CLIENT_PATH", str(client_dir))
    monkeypatch.setenv("ASSETS_MANIFEST_PATH", str(manifest))
    monkeypatch.setenv("ASSETS_CACHE_PATH", str(cache_path))
    monkeypatch.setattr("asset_library.pipeline.default_transforms", lambda settings: transforms)
    return cache_path


@pytest.mark.integration
class TestCli:
    """Test CLI commands."""

    def test_build_writes_cache(self, cli_env: Path) -> None:
        result = CliRunner().invoke(cli, ["build"])

        assert result.exit_code == 0, result.output
        assert cli_env.exists()
        assert "Cache ready" in result.output

    def test_load_dev_summarizes_without_writing(self, cli_env: Path) -> None:
        result = CliRunner().invoke(cli, ["load", "--dev"])

        assert result.exit_code == 0, result.output
        assert "resources" in result.output
        assert "libs" in result.output
        assert not cli_env.exists()

    def test_status_reports_stale_then_fresh(self, cli_env: Path) -> None:
        runner = CliRunner()

        assert "Stale" in runner.invoke(cli, ["status"]).output
        runner.invoke(cli, ["build"])
        assert "Fresh" in runner.invoke(cli, ["status"]).output

    def test_missing_tools_exit_nonzero(self, cli_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("asset_library.transforms.defaults.shutil.which", lambda command: None)
        monkeypatch.setattr("asset_library.pipeline.default_transforms", default_transforms)

        result = CliRunner().invoke(cli, ["build"])

        assert result.exit_code == 1
        assert not cli_env.exists()
