"""Models for asset library."""

from .compiled import GROUPS
from .compiled import CacheMeta
from .compiled import CompiledAssets
from .compiled import CompiledCache
from .compiled import CompiledEntry
from .sources import SourceFileSet

__all__ = [
    "GROUPS",
    "CacheMeta",
    "CompiledAssets",
    "CompiledCache",
    "CompiledEntry",
    "SourceFileSet",
]
