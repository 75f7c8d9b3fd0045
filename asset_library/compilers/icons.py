"""Inline icon sprite rendering for the markup variants."""

import asyncio
import re
from pathlib import Path

from .sources import list_dir
from .sources import read_text

SVG_ROOT = re.compile(r"<svg\b([^>]*)>([\s\S]*)</svg>", re.IGNORECASE)
VIEWBOX = re.compile(r"""viewBox\s*=\s*["']([^"']*)["']""")


def icon_symbol(name: str, svg: str) -> str:
    """Turn one SVG document into a ``<symbol>`` referenced as ``#i-<name>``."""
    match = SVG_ROOT.search(svg)
    if not match:
        return ""
    viewbox = VIEWBOX.search(match.group(1))
    attrs = f' viewBox="{viewbox.group(1)}"' if viewbox else ""
    body = re.sub(r">\s+<", "><", match.group(2).strip())
    return f'<symbol id="i-{name}"{attrs}>{body}</symbol>'


async def render_icons(icons_dir: Path) -> str:
    """Render every ``*.svg`` in a directory into one hidden sprite.

    Returns an empty string when the directory does not exist.
    """
    if not Path(icons_dir).is_dir():
        return ""
    paths = [p for p in await list_dir(icons_dir) if p.suffix == ".svg"]
    sources = await asyncio.gather(*(read_text(p) for p in paths))
    symbols = "".join(icon_symbol(p.stem, svg) for p, svg in zip(paths, sources))
    return f'<svg style="display:none">{symbols}</svg>'
