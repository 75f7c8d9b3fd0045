"""Source manifest loading.

The manifest lists the scripts, styles, static files and on-demand libraries
a build is made of. Projects can ship their own YAML manifest; otherwise the
built-in one below is used.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import SourceFileSet

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = """# Scripts are concatenated in this order into client.js
scripts:
  - node_modules/handlebars/dist/handlebars.runtime.min.js
  - node_modules/file-extension/file-extension.js
  - node_modules/screenfull/dist/screenfull.js
  - node_modules/mousetrap/mousetrap.min.js
  - node_modules/uppie/uppie.js
  - node_modules/jquery/dist/jquery.min.js
  - lib/client.js

# Styles are concatenated in this order into style.css
styles:
  - lib/style.css
  - lib/sprites.css
  - lib/tooltips.css
  - lib/clienttheme.css

# Served as-is, keyed by file name
other:
  - lib/images/logo.svg
  - lib/images/logo32.png
  - lib/images/logo120.png
  - lib/images/logo128.png
  - lib/images/logo152.png
  - lib/images/logo180.png
  - lib/images/logo192.png
  - lib/images/sprites.png

# On-demand libraries, served under !/res/lib/<name>
libs:
  plyr.js: [node_modules/plyr/dist/plyr.polyfilled.min.js]
  plyr.css: [node_modules/plyr/dist/plyr.css]
  plyr.svg: [node_modules/plyr/dist/plyr.svg]
  blank.mp4: [lib/blank.mp4]
  cm.js:
    - node_modules/codemirror/lib/codemirror.js
    - node_modules/codemirror/mode/meta.js
    - node_modules/codemirror/addon/comment/comment.js
    - node_modules/codemirror/addon/mode/overlay.js
    - node_modules/codemirror/addon/dialog/dialog.js
    - node_modules/codemirror/addon/selection/active-line.js
    - node_modules/codemirror/addon/selection/mark-selection.js
    - node_modules/codemirror/addon/search/searchcursor.js
    - node_modules/codemirror/addon/edit/matchbrackets.js
    - node_modules/codemirror/addon/search/search.js
    - node_modules/codemirror/keymap/sublime.js
  cm.css: [node_modules/codemirror/lib/codemirror.css]
  ps.js:
    - node_modules/photoswipe/dist/photoswipe.min.js
    - node_modules/photoswipe/dist/photoswipe-ui-default.min.js
  ps.css:
    - node_modules/photoswipe/dist/photoswipe.css
    - node_modules/photoswipe/dist/default-skin/default-skin.css
  default-skin.png: [node_modules/photoswipe/dist/default-skin/default-skin.png]
  default-skin.svg: [node_modules/photoswipe/dist/default-skin/default-skin.svg]
  pdf.js: [node_modules/pdfjs-dist/build/pdf.js]
  pdf.worker.js: [node_modules/pdfjs-dist/build/pdf.worker.js]

# Library entries whose url(...) references point at sibling libraries
rewrite_urls:
  - ps.css
"""


def parse_manifest(text: str) -> SourceFileSet:
    """Parse a YAML manifest.

    Raises:
        ValueError: If the YAML is malformed or does not describe a file set
    """
    try:
        data = yaml.safe_load(text) or {}
        return SourceFileSet.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ValueError(f"Invalid asset manifest: {e}") from e


def load_manifest(manifest_path: Path | None = None) -> SourceFileSet:
    """Load the source manifest, falling back to the built-in one.

    Args:
        manifest_path: Optional YAML manifest path

    Returns:
        Source file set of the build
    """
    if manifest_path is None:
        return parse_manifest(DEFAULT_MANIFEST)

    manifest_path = Path(manifest_path)
    sources = parse_manifest(manifest_path.read_text(encoding="utf-8"))
    logger.debug(f"Loaded manifest from {manifest_path}")
    return sources
