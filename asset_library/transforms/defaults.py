"""Default transform adapters.

Minification runs the pure-Python minifiers in worker threads. Vendor
prefixing and template precompilation have no Python implementation and are
delegated to the node CLIs (postcss with autoprefixer, handlebars).
"""

import asyncio
import importlib
import logging
import shutil
from types import ModuleType

import rcssmin
import rjsmin

from ..config.settings import AssetSettings
from ..errors import TransformError
from ..errors import TransformUnavailableError
from .ports import Transforms

logger = logging.getLogger(__name__)

NPM_HINT = "install them with `npm install --save-dev postcss-cli autoprefixer handlebars` in the client directory"


async def minify_js(source: str) -> str:
    return await asyncio.to_thread(rjsmin.jsmin, source)


async def minify_css(source: str) -> str:
    return await asyncio.to_thread(rcssmin.cssmin, source)


class HtmlMinifier:
    """Markup minifier backed by an imported ``htmlmin`` module."""

    def __init__(self, htmlmin: ModuleType) -> None:
        self.htmlmin = htmlmin

    async def __call__(self, source: str) -> str:
        return await asyncio.to_thread(
            self.htmlmin.minify,
            source,
            remove_comments=True,
            remove_empty_space=True,
            remove_optional_attribute_quotes=False,
        )


class CommandTransform:
    """Pipe text through an external command, stdin to stdout."""

    def __init__(self, name: str, argv: list[str]) -> None:
        self.name = name
        self.argv = argv

    async def __call__(self, source: str) -> str:
        logger.debug(f"Running {self.name}: {' '.join(self.argv)}")
        proc = await asyncio.create_subprocess_exec(
            *self.argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate(source.encode("utf-8"))

        if proc.returncode != 0:
            error_msg = stderr.decode("utf-8", errors="replace").strip()
            logger.error(f"{self.name} exited with {proc.returncode}: {error_msg}")
            raise TransformError(self.name, error_msg or f"exit status {proc.returncode}")

        return stdout.decode("utf-8", errors="replace")


def _require_command(command: str) -> str:
    resolved = shutil.which(command)
    if resolved is None:
        raise TransformUnavailableError(
            f"Missing `{command}` executable required to compile the asset cache, {NPM_HINT}"
        )
    return resolved


def _require_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as e:
        raise TransformUnavailableError(
            f"Cannot import `{name}` required to compile the asset cache: {e}"
        ) from e


def default_transforms(settings: AssetSettings) -> Transforms:
    """Build the default adapters.

    Args:
        settings: Supplies the postcss and handlebars executables

    Returns:
        Transforms ready for the pipeline

    Raises:
        TransformUnavailableError: If an external tool or minifier package is not installed
    """
    htmlmin = _require_module("htmlmin")
    postcss = _require_command(settings.postcss_command)
    handlebars = _require_command(settings.handlebars_command)

    return Transforms(
        js=minify_js,
        css=minify_css,
        html=HtmlMinifier(htmlmin),
        prefix=CommandTransform("autoprefixer", [postcss, "--use", "autoprefixer", "--no-map"]),
        template=CommandTransform("handlebars", [handlebars, "--simple", "--string", "-"]),
    )
