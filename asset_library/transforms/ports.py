"""Transform ports.

The pipeline never minifies, prefixes or precompiles anything itself. It
receives one adapter per asset kind through ``Transforms`` and awaits it.
"""

from dataclasses import dataclass
from dataclasses import fields
from typing import Protocol

from ..errors import TransformUnavailableError


class TextTransform(Protocol):
    """Text in, text out."""

    async def __call__(self, source: str) -> str: ...


@dataclass(frozen=True)
class Transforms:
    """Adapters the compilers call, one per asset kind.

    Attributes:
        js: Script minifier
        css: Stylesheet minifier
        html: Markup minifier
        prefix: CSS vendor prefixer
        template: Template precompiler, markup in, precompiled spec out
    """

    js: TextTransform
    css: TextTransform
    html: TextTransform
    prefix: TextTransform
    template: TextTransform

    def __post_init__(self) -> None:
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise TransformUnavailableError(f"No adapter configured for transform(s): {', '.join(missing)}")
