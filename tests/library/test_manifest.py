"""
Unit tests for source manifest loading.
"""

from pathlib import Path

import pytest

from asset_library.manifest import load_manifest
from asset_library.manifest import parse_manifest
from asset_library.models import SourceFileSet


@pytest.mark.unit
class TestManifest:
    """Test manifest parsing and the built-in default."""

    def test_default_manifest(self) -> None:
        sources = load_manifest()

        assert sources.scripts[-1] == "lib/client.js"
        assert sources.styles[0] == "lib/style.css"
        assert "ps.css" in sources.rewrite_urls
        assert len(sources.libs["cm.js"]) == 11

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "manifest.yaml"
        path.write_text("scripts: [a.js, b.js]\nlibs:\n  x.js: [a.js, b.js]\n")

        sources = load_manifest(path)

        assert sources.scripts == ["a.js", "b.js"]
        assert sources.libs == {"x.js": ["a.js", "b.js"]}
        assert sources.styles == []

    def test_invalid_manifest_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid asset manifest"):
            parse_manifest("scripts: 12\n")

    def test_malformed_yaml_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid asset manifest"):
            parse_manifest("scripts: [a.js\n")

    def test_tracked_files_in_declared_order(self) -> None:
        sources = SourceFileSet(scripts=["s.js"], styles=["s.css"], other=["o.png"], libs={"l.js": ["l1.js", "l2.js"]})

        assert list(sources.tracked_files()) == ["s.js", "s.css", "o.png", "l1.js", "l2.js"]

    def test_file_set_is_immutable(self) -> None:
        sources = SourceFileSet(scripts=["a.js"])

        with pytest.raises(ValueError):
            sources.scripts = ["b.js"]
