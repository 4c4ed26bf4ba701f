from __future__ import annotations
import os
import posixpath
from typing import Iterator, Union

from .errors import PathResolutionError

PathLike = Union[str, bytes, "os.PathLike[str]"]

_SEP = b"/"


def to_bytes(value: PathLike) -> bytes:
    """Table lines and patterns are handled as raw bytes."""
    if isinstance(value, bytes):
        return value
    return os.fsencode(value)


def iter_lines(data: bytes) -> Iterator[bytes]:
    """Yield the non-empty lines of raw table content, in file order."""
    for line in data.split(b"\n"):
        if line:
            yield line


def is_absolute(line: bytes) -> bool:
    if os.name == "nt":
        return os.path.isabs(os.fsdecode(line))
    return line.startswith(_SEP)


def leaf(line: bytes) -> bytes:
    """
    Final path component, ignoring trailing separators.
    b"/home/x/table/" -> b"table", b"/" -> b"".
    """
    if os.name == "nt":
        return os.fsencode(os.path.basename(os.fsdecode(line).rstrip("\\/")))
    return posixpath.basename(line.rstrip(_SEP))


def canonicalize(path: PathLike) -> bytes:
    """
    Absolute, symlink-resolved form of an existing path.
    Used on paths being added or removed, never on the pattern.
    """
    raw = to_bytes(path)
    try:
        return os.path.realpath(raw, strict=True)
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or type(exc).__name__
        raise PathResolutionError(
            f'Error resolving the path "{os.fsdecode(raw)}": {reason}'
        ) from exc
