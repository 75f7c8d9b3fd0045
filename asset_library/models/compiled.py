"""Compiled cache models.

``CompiledEntry`` is one served bundle; ``CompiledCache`` is the full result
of a build and the structure persisted to the cache file. Byte fields are
serialized as base64 so the JSON form round-trips buffers exactly.
"""

from dataclasses import dataclass
from dataclasses import field

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

GROUPS = ("resources", "themes", "modes", "libs")


class CompiledEntry(BaseModel):
    """One servable bundle with every representation the server negotiates."""

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    data: bytes
    validator: str
    mime_type: str
    gzip: bytes
    brotli: bytes


class CacheMeta(BaseModel):
    """Build stamp stored beside the entries. Never encoded."""

    version: str


class CompiledCache(BaseModel):
    """Every compiled entry, grouped the way the server mounts them."""

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    resources: dict[str, CompiledEntry] = Field(default_factory=dict)
    themes: dict[str, CompiledEntry] = Field(default_factory=dict)
    modes: dict[str, CompiledEntry] = Field(default_factory=dict)
    libs: dict[str, CompiledEntry] = Field(default_factory=dict)
    meta: CacheMeta

    def groups(self) -> dict[str, dict[str, CompiledEntry]]:
        return {name: getattr(self, name) for name in GROUPS}


@dataclass
class CompiledAssets:
    """Raw compiler output, before encoding."""

    resources: dict[str, bytes] = field(default_factory=dict)
    themes: dict[str, bytes] = field(default_factory=dict)
    modes: dict[str, bytes] = field(default_factory=dict)
    libs: dict[str, bytes] = field(default_factory=dict)

    def groups(self) -> dict[str, dict[str, bytes]]:
        return {name: getattr(self, name) for name in GROUPS}
