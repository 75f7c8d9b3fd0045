"""Editor language modes.

The list of supported modes lives in the editor's ``mode/meta.js`` as an
array of object literals. It is read declaratively: the array is located and
its ``mode`` properties are extracted. The script is never executed.
"""

import asyncio
import logging
import re

from ..config.settings import ClientPaths
from ..errors import ModeRegistryError
from ..transforms.ports import Transforms
from .sources import read_text

logger = logging.getLogger(__name__)

MODE_INFO_START = re.compile(r"\bmodeInfo\s*=\s*\[")
MODE_INFO_END = re.compile(r"\]\s*;")
MODE_PROPERTY = re.compile(r"""(?<![\w$])["']?mode["']?\s*:\s*(["'])([^"'\\]*)\1""")
NULL_MODE = "null"


def parse_mode_ids(source: str) -> list[str]:
    """Extract mode ids from the mode metadata script.

    Args:
        source: Contents of ``meta.js``

    Returns:
        Mode ids in declaration order, without duplicates or the null mode

    Raises:
        ModeRegistryError: If the script declares no ``modeInfo`` array
    """
    start = MODE_INFO_START.search(source)
    if not start:
        raise ModeRegistryError("Mode metadata declares no modeInfo array")
    end = MODE_INFO_END.search(source, start.end())
    if not end:
        raise ModeRegistryError("Mode metadata modeInfo array is not terminated")

    ids: list[str] = []
    for match in MODE_PROPERTY.finditer(source, start.end(), end.start()):
        mode = match.group(2)
        if mode != NULL_MODE and mode not in ids:
            ids.append(mode)
    return ids


async def compile_mode(paths: ClientPaths, mode: str, transforms: Transforms, minify: bool) -> bytes:
    js = await read_text(paths.modes / mode / f"{mode}.js")
    if minify:
        js = await transforms.js(js)
    return js.encode("utf-8")


async def compile_modes(paths: ClientPaths, transforms: Transforms, minify: bool) -> dict[str, bytes]:
    """Compile every supported language mode, keyed by mode id."""
    ids = parse_mode_ids(await read_text(paths.mode_meta))
    logger.debug(f"Found {len(ids)} editor modes in {paths.mode_meta}")
    compiled = await asyncio.gather(*(compile_mode(paths, mode, transforms, minify) for mode in ids))
    return dict(zip(ids, compiled))
