"""Compiled cache persistence and freshness detection."""

from .freshness import FreshnessChecker
from .store import CacheStore

__all__ = [
    "CacheStore",
    "FreshnessChecker",
]
