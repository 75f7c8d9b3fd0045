"""
Shared pytest fixtures for the asset-library test suite.

Provides fixtures for:
- Isolated storage directories
- A small client source tree and its manifest
- Deterministic fake transforms
"""

import json
import re
from collections import Counter
from collections.abc import Generator
from pathlib import Path

import pytest

from asset_library.config.settings import ClientPaths
from asset_library.models import SourceFileSet
from asset_library.transforms.ports import Transforms

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\xff\xfe"
MP4_BYTES = b"\x00\x00\x00\x18ftypmp42\x00\x00\x00\x00\xff\xd8"

MODE_META = """(function(mod) { mod(CodeMirror); })(function(CodeMirror) {
  "use strict";
  CodeMirror.modeInfo = [
    {name: "Plain Text", mime: "text/plain", mode: "null", ext: ["txt", "text"]},
    {name: "JavaScript", mimes: ["text/javascript", "application/javascript"], mode: "javascript", ext: ["js"]},
    {name: "CSS", mime: "text/css", mode: "css", ext: ["css"]},
    {name: "JSON", mime: "application/json", mode: "javascript", ext: ["json", "map"]},
    {name: "Dockerfile", mime: "text/x-dockerfile", mode: "dockerfile", file: /^Dockerfile$/}
  ];
  CodeMirror.findModeByMIME = function(mime) { return null; };
});
"""

CLIENT_FILES: dict[str, str | bytes] = {
    "node_modules/vendor/first.js": "var first = 1\n",
    "lib/client.js": "var app = {};\n/* {{ templates }} */\napp.ready = true;\n",
    "lib/style.css": "body {\n  color: red;\n}\n",
    "lib/extra.css": "a {\n  color: blue;\n}\n",
    "lib/index.html": (
        "<!DOCTYPE html>\n<html>\n  <body class=\"{{type}}\">\n    <!-- {{svg}} -->\n  </body>\n</html>\n"
    ),
    "lib/cmtheme.css": ".cm-s-client {\n  color: #000;\n}\n",
    "lib/images/logo.svg": '<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>',
    "lib/images/logo32.png": PNG_BYTES,
    "lib/a.js": "var a=1;",
    "lib/b.js": "var b=2;",
    "lib/ps.css": ".pswp {\n  background: url(default-skin.png);\n}\n",
    "lib/blank.mp4": MP4_BYTES,
    "templates/list.hbs": (
        "<ul>\n  {{#each items}}\n    <li class=\"{{cls}}\">{{name}}</li>\n  {{/each}}\n</ul>\n{{!-- footer --}}\n"
    ),
    "templates/view.html.hbs": "<div>\n  {{title}}\n</div>\n",
    "svg/close.svg": '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n  <path d="M0 0"/>\n</svg>\n',
    "node_modules/codemirror/theme/monokai.css": ".cm-s-monokai {\n  color: #fff;\n}\n",
    "node_modules/codemirror/mode/meta.js": MODE_META,
    "node_modules/codemirror/mode/javascript/javascript.js": (
        "CodeMirror.defineMode('javascript', function() {\n  return {};\n});\n"
    ),
    "node_modules/codemirror/mode/css/css.js": "CodeMirror.defineMode('css', function() {\n  return {};\n});\n",
    "node_modules/codemirror/mode/dockerfile/dockerfile.js": (
        "CodeMirror.defineMode('dockerfile', function() {\n  return {};\n});\n"
    ),
}


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


@pytest.fixture
def client_dir(tmp_path: Path) -> Path:
    """Create a minimal client source tree."""
    root = tmp_path / "client"
    write_tree(root, CLIENT_FILES)
    return root


@pytest.fixture
def client_paths(client_dir: Path) -> ClientPaths:
    return ClientPaths.from_root(client_dir)


@pytest.fixture
def sources() -> SourceFileSet:
    """Manifest matching the client tree fixture."""
    return SourceFileSet(
        scripts=["node_modules/vendor/first.js", "lib/client.js"],
        styles=["lib/style.css", "lib/extra.css"],
        other=["lib/images/logo.svg", "lib/images/logo32.png"],
        libs={
            "x.js": ["lib/a.js", "lib/b.js"],
            "ps.css": ["lib/ps.css"],
            "blank.mp4": ["lib/blank.mp4"],
        },
        rewrite_urls=["ps.css"],
    )


class FakeTransforms:
    """Deterministic stand-ins for the external transforms, counting calls."""

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()

    async def js(self, source: str) -> str:
        self.calls["js"] += 1
        return re.sub(r"\s+", " ", source).strip()

    async def css(self, source: str) -> str:
        self.calls["css"] += 1
        return re.sub(r"\s*([{}:;])\s*", r"\1", source).replace(";}", "}").strip()

    async def html(self, source: str) -> str:
        self.calls["html"] += 1
        return re.sub(r">\s+<", "><", re.sub(r"\s+", " ", source)).strip()

    async def prefix(self, source: str) -> str:
        self.calls["prefix"] += 1
        return source

    async def template(self, source: str) -> str:
        self.calls["template"] += 1
        return json.dumps({"main": source}) + "\n"

    def as_transforms(self) -> Transforms:
        return Transforms(js=self.js, css=self.css, html=self.html, prefix=self.prefix, template=self.template)


@pytest.fixture
def fake() -> FakeTransforms:
    return FakeTransforms()


@pytest.fixture
def transforms(fake: FakeTransforms) -> Transforms:
    return fake.as_transforms()


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point ASSETS_HOME at a temporary directory.

    Clears every other ASSETS_ override so tests see the defaults.
    """
    home = tmp_path / "home"
    for var in ("ASSETS_CONFIG_DIR", "ASSETS_CACHE_DIR", "ASSETS_CACHE_PATH", "ASSETS_CLIENT_PATH",
                "ASSETS_MANIFEST_PATH", "ASSETS_LOG_LEVEL", "ASSETS_VALIDATE_CACHE_VERSION"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ASSETS_HOME", str(home))
    yield home.resolve()
