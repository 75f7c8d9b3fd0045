"""Template precompilation.

Every file in the templates directory becomes one registration statement in a
script fragment that publishes ``Handlebars.templates``. The fragment replaces
the templates placeholder in the script bundle.
"""

import asyncio
import logging
import re
from pathlib import Path

from ..transforms.ports import Transforms
from .sources import list_dir
from .sources import read_text

logger = logging.getLogger(__name__)

PROLOGUE = (
    "(function(){var template=Handlebars.template,"
    "templates=Handlebars.templates=Handlebars.templates||{};"
)
EPILOGUE = "Handlebars.partials=Handlebars.templates})();"

FRAGMENT = re.compile(r"{{[\s\S]*?}}")
TOKEN = re.compile(r"hbsfrag(\d+)x", re.IGNORECASE)
SPACE_AROUND_FRAGMENT = re.compile(r"(>|^|}}) ({{|<|$)")
FRAGMENT_BODY = re.compile(r"({{2,})([\s\S]*?)(}{2,})")
COMMENT_FRAGMENT = re.compile(r"{{!--[\s\S]*?--}}|{{![\s\S]*?}}")


def template_name(path: Path) -> str:
    """Logical template name: the file name up to its first dot."""
    return path.name.split(".", 1)[0]


async def minify_preserving_fragments(html: str, transforms: Transforms) -> str:
    """Minify markup while keeping ``{{...}}`` fragments opaque.

    Fragments are swapped for inert tokens before the minifier runs, so it
    never collapses, quotes or splits across a fragment boundary.
    """
    fragments: list[str] = []

    def stash(match: re.Match) -> str:
        fragments.append(match.group(0))
        return f"hbsfrag{len(fragments) - 1}x"

    minified = await transforms.html(FRAGMENT.sub(stash, html))
    return TOKEN.sub(lambda m: fragments[int(m.group(1))], minified)


def _normalize_fragment(match: re.Match) -> str:
    body = re.sub(r" {2,}", " ", match.group(2).replace("\n", " ")).strip()
    return match.group(1) + body + match.group(3)


def tidy_fragments(html: str) -> str:
    """Drop whitespace around fragments, normalize inside, strip comments."""
    html = SPACE_AROUND_FRAGMENT.sub(r"\1\2", html)
    html = FRAGMENT_BODY.sub(_normalize_fragment, html).strip()
    return COMMENT_FRAGMENT.sub("", html)


async def compile_template(path: Path, transforms: Transforms) -> str:
    html = await read_text(path)
    html = tidy_fragments(await minify_preserving_fragments(html, transforms))
    spec = (await transforms.template(html)).strip()
    return f"templates['{template_name(path)}']=template({spec});"


async def compile_templates(templates_dir: Path, transforms: Transforms) -> str:
    """Precompile every template into one registry script fragment.

    Args:
        templates_dir: Directory of template files
        transforms: Supplies the markup minifier and template precompiler

    Returns:
        Script fragment registering every template
    """
    paths = await list_dir(templates_dir)
    statements = await asyncio.gather(*(compile_template(p, transforms) for p in paths))
    logger.debug(f"Precompiled {len(statements)} templates from {templates_dir}")
    return PROLOGUE + "".join(statements) + EPILOGUE
