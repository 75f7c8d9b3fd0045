"""Source file resolution and reading shared by every compiler."""

import asyncio
import os
from pathlib import Path

from ..errors import SourceReadError


def resolve_source(client_dir: Path, file: str | Path) -> Path:
    """Resolve a manifest entry to the file on disk.

    The client-relative location wins when it exists; otherwise the entry is
    used as given (absolute, or relative to the working directory). Checked on
    every call.
    """
    candidate = Path(client_dir) / file
    if candidate.exists():
        return candidate
    return Path(file)


async def read_bytes(path: Path) -> bytes:
    """Read a source file.

    Raises:
        SourceReadError: If the file cannot be read
    """
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise SourceReadError(path, e) from e


def decode_source(data: bytes) -> str:
    """Decode source bytes as UTF-8, invalid sequences become U+FFFD."""
    return data.decode("utf-8", errors="replace")


async def read_text(path: Path) -> str:
    return decode_source(await read_bytes(path))


async def read_all(client_dir: Path, files: list[str]) -> list[bytes]:
    """Read manifest entries concurrently, returned in declared order."""
    return list(await asyncio.gather(*(read_bytes(resolve_source(client_dir, f)) for f in files)))


async def list_dir(directory: Path) -> list[Path]:
    """Regular files of a directory, sorted by name.

    Raises:
        SourceReadError: If the directory cannot be listed
    """
    try:
        names = await asyncio.to_thread(os.listdir, directory)
    except OSError as e:
        raise SourceReadError(directory, e) from e
    return [Path(directory) / name for name in sorted(names) if (Path(directory) / name).is_file()]
