"""Transform ports and their default adapters."""

from .defaults import CommandTransform
from .defaults import HtmlMinifier
from .defaults import default_transforms
from .ports import TextTransform
from .ports import Transforms

__all__ = [
    "CommandTransform",
    "HtmlMinifier",
    "TextTransform",
    "Transforms",
    "default_transforms",
]
