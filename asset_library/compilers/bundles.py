"""Asset compilers.

Each compiler reads its sources, applies the transforms of its asset family
and returns raw bytes keyed by output file name. Nothing here encodes,
persists or reads shared state: ``minify`` is always an argument.
"""

import asyncio
import logging
import re
from pathlib import Path

from ..config.settings import ClientPaths
from ..models import SourceFileSet
from ..transforms.ports import Transforms
from .icons import render_icons
from .sources import decode_source
from .sources import list_dir
from .sources import read_all
from .sources import read_text
from .templates import compile_templates

logger = logging.getLogger(__name__)

TEMPLATES_PLACEHOLDER = "/* {{ templates }} */"
ICONS_PLACEHOLDER = "<!-- {{svg}} -->"
TYPE_PLACEHOLDER = "{{type}}"
LIB_PREFIX = "!/res/lib/"

# Markup variant file name -> value substituted for {{type}}
MARKUP_VARIANTS = {
    "auth.html": "a",
    "first.html": "f",
    "main.html": "m",
}


async def compile_scripts(
    sources: SourceFileSet, paths: ClientPaths, transforms: Transforms, minify: bool
) -> dict[str, bytes]:
    """Build ``client.js``: scripts in declared order plus the template registry."""
    parts, templates = await asyncio.gather(
        read_all(paths.client, sources.scripts),
        compile_templates(paths.templates, transforms),
    )
    # Terminate every file so a missing trailing semicolon cannot leak into the next one
    js = "".join(f"{decode_source(part)};" for part in parts)
    js = js.replace(TEMPLATES_PLACEHOLDER, templates, 1)

    if minify:
        js = await transforms.js(js)
    return {"client.js": js.encode("utf-8")}


async def compile_styles(
    sources: SourceFileSet, paths: ClientPaths, transforms: Transforms, minify: bool
) -> dict[str, bytes]:
    """Build ``style.css``: styles in declared order, vendor-prefixed."""
    parts = await read_all(paths.client, sources.styles)
    css = "".join(f"{decode_source(part)}\n" for part in parts)
    css = await transforms.prefix(css)

    if minify:
        css = await transforms.css(css)
    return {"style.css": css.encode("utf-8")}


async def compile_markup(paths: ClientPaths, transforms: Transforms, minify: bool) -> dict[str, bytes]:
    """Build the three page variants from the index template."""
    html, icons = await asyncio.gather(read_text(paths.index_html), render_icons(paths.icons))
    html = html.replace(ICONS_PLACEHOLDER, icons, 1)

    async def variant(value: str) -> bytes:
        page = html.replace(TYPE_PLACEHOLDER, value, 1)
        if minify:
            page = await transforms.html(page)
        return page.encode("utf-8")

    pages = await asyncio.gather(*(variant(value) for value in MARKUP_VARIANTS.values()))
    return dict(zip(MARKUP_VARIANTS, pages))


async def compile_other(sources: SourceFileSet, paths: ClientPaths) -> dict[str, bytes]:
    """Static files, byte for byte, keyed by file name."""
    data = await read_all(paths.client, sources.other)
    return {Path(file).name: content for file, content in zip(sources.other, data)}


def theme_name(path: Path) -> str:
    return path.name.removesuffix(".css")


async def compile_themes(
    paths: ClientPaths, transforms: Transforms, minify: bool, builtin_name: str
) -> dict[str, bytes]:
    """Editor themes keyed by name, plus the built-in theme."""
    theme_paths = await list_dir(paths.themes)
    names = [theme_name(p) for p in theme_paths] + [builtin_name]

    async def theme(path: Path) -> bytes:
        css = await read_text(path)
        if minify:
            css = await transforms.css(css)
        return css.encode("utf-8")

    themes = await asyncio.gather(*(theme(p) for p in [*theme_paths, paths.builtin_theme]))
    return dict(zip(names, themes))


def rewrite_lib_urls(css: bytes) -> bytes:
    """Point relative ``url(`` references at the served library prefix."""
    return re.sub(rb"url\(", b"url(" + LIB_PREFIX.encode("ascii"), css)


async def compile_lib(
    name: str, files: list[str], rewrite: bool, paths: ClientPaths, transforms: Transforms, minify: bool
) -> bytes:
    data = b"".join(await read_all(paths.client, files))
    if rewrite:
        data = rewrite_lib_urls(data)

    if minify:
        suffix = Path(name).suffix
        if suffix == ".js":
            data = (await transforms.js(decode_source(data))).encode("utf-8")
        elif suffix == ".css":
            data = (await transforms.css(decode_source(data))).encode("utf-8")
    return data


async def compile_libs(
    sources: SourceFileSet, paths: ClientPaths, transforms: Transforms, minify: bool
) -> dict[str, bytes]:
    """On-demand libraries: each entry's files concatenated in order."""
    names = list(sources.libs)
    data = await asyncio.gather(
        *(
            compile_lib(name, sources.libs[name], name in sources.rewrite_urls, paths, transforms, minify)
            for name in names
        )
    )
    return dict(zip(names, data))
