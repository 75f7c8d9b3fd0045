"""Encoding stage.

Turns raw compiler output into served entries: a validator for conditional
requests, a MIME type and the gzip and brotli encodings.
"""

import asyncio
import base64
import gzip
import hashlib
import logging
import mimetypes

import brotli

from .models import CacheMeta
from .models import CompiledAssets
from .models import CompiledCache
from .models import CompiledEntry

logger = logging.getLogger(__name__)

GZIP_LEVEL = 9
BROTLI_QUALITY = 11
DEFAULT_MIME = "application/octet-stream"
TEXT_MIMES = {"application/javascript", "application/json", "application/xml", "image/svg+xml"}

# Groups whose keys carry no extension
GROUP_EXTENSIONS = {"themes": "css", "modes": "js"}


def make_validator(data: bytes) -> str:
    """Strong validator for ``data``: length and SHA-1 digest, quoted.

    Example:
        >>> make_validator(b"hello")
        '"5-qvTGHdzF6KLavt4PO0gs2a6pQ00"'
    """
    digest = base64.b64encode(hashlib.sha1(data).digest()).decode("ascii")[:27]
    return f'"{len(data):x}-{digest}"'


def content_type(name: str) -> str:
    """MIME type for an output file name or bare extension."""
    guessed, _ = mimetypes.guess_type(name if "." in name else f"file.{name}", strict=False)
    mime = guessed or DEFAULT_MIME
    if mime.startswith("text/") or mime in TEXT_MIMES:
        return f"{mime}; charset=utf-8"
    return mime


def gzip_encode(data: bytes) -> bytes:
    # mtime=0 keeps the encoding a function of the content alone
    return gzip.compress(data, compresslevel=GZIP_LEVEL, mtime=0)


def brotli_encode(data: bytes) -> bytes:
    return brotli.compress(data, quality=BROTLI_QUALITY)


async def encode_entry(name: str, data: bytes, mime_type: str | None = None) -> CompiledEntry:
    """Encode one entry, compressing both encodings concurrently."""
    gz, br = await asyncio.gather(
        asyncio.to_thread(gzip_encode, data),
        asyncio.to_thread(brotli_encode, data),
    )
    return CompiledEntry(
        data=data,
        validator=make_validator(data),
        mime_type=mime_type or content_type(name),
        gzip=gz,
        brotli=br,
    )


async def encode_group(group: str, entries: dict[str, bytes]) -> dict[str, CompiledEntry]:
    ext = GROUP_EXTENSIONS.get(group)
    mime = content_type(ext) if ext else None
    names = list(entries)
    encoded = await asyncio.gather(*(encode_entry(name, entries[name], mime) for name in names))
    return dict(zip(names, encoded))


async def encode_assets(assets: CompiledAssets, version: str) -> CompiledCache:
    """Encode every entry of every group and stamp the result.

    Args:
        assets: Raw compiler output
        version: Version recorded in the cache meta

    Returns:
        Fully encoded cache
    """
    groups = assets.groups()
    encoded = await asyncio.gather(*(encode_group(group, entries) for group, entries in groups.items()))
    total = sum(len(entries) for entries in encoded)
    logger.info(f"Encoded {total} entries")
    return CompiledCache(**dict(zip(groups, encoded)), meta=CacheMeta(version=version))
