"""Asset compilers.

``compile_all`` runs every compiler concurrently and groups their output the
way the compiled cache is laid out.
"""

import asyncio
import logging

from ..config.settings import ClientPaths
from ..models import CompiledAssets
from ..models import SourceFileSet
from ..transforms.ports import Transforms
from .bundles import compile_libs
from .bundles import compile_markup
from .bundles import compile_other
from .bundles import compile_scripts
from .bundles import compile_styles
from .bundles import compile_themes
from .modes import compile_modes
from .modes import parse_mode_ids
from .templates import compile_templates

logger = logging.getLogger(__name__)


async def compile_all(
    sources: SourceFileSet,
    paths: ClientPaths,
    transforms: Transforms,
    minify: bool,
    builtin_theme_name: str = "client",
) -> CompiledAssets:
    """Compile every asset group.

    Args:
        sources: Manifest of the build
        paths: Client source locations
        transforms: Transform adapters
        minify: Whether to minify scripts, styles and markup
        builtin_theme_name: Key of the built-in editor theme

    Returns:
        Raw bytes of every output, grouped
    """
    logger.info(f"Compiling assets from {paths.client} (minify={minify})")
    scripts, styles, markup, other, themes, modes, libs = await asyncio.gather(
        compile_scripts(sources, paths, transforms, minify),
        compile_styles(sources, paths, transforms, minify),
        compile_markup(paths, transforms, minify),
        compile_other(sources, paths),
        compile_themes(paths, transforms, minify, builtin_theme_name),
        compile_modes(paths, transforms, minify),
        compile_libs(sources, paths, transforms, minify),
    )

    assets = CompiledAssets(
        resources={**scripts, **styles, **markup, **other},
        themes=themes,
        modes=modes,
        libs=libs,
    )
    logger.info(
        f"Compiled {len(assets.resources)} resources, {len(themes)} themes, "
        f"{len(modes)} modes and {len(libs)} libraries"
    )
    return assets


__all__ = [
    "compile_all",
    "compile_libs",
    "compile_markup",
    "compile_modes",
    "compile_other",
    "compile_scripts",
    "compile_styles",
    "compile_templates",
    "compile_themes",
    "parse_mode_ids",
]
