# jmp/DB/api.py
from __future__ import annotations
import os
from typing import Protocol, Iterable, Optional

from .. import config as CFG


class TableStore(Protocol):
    path: Optional[str]
    # Read
    def read_all(self) -> bytes: ...
    # Append one line (the trailing newline is added by the store)
    def append_line(self, line: bytes) -> None: ...
    # Truncate to zero and write `lines` back, newline-terminated
    def rewrite(self, lines: Iterable[bytes]) -> int: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(
    dsn: str,
    *,
    data: Optional[bytes] = None,
    create: bool = True,
    lock: bool = CFG.LOCK_TABLE,
    max_bytes: int = CFG.MAX_TABLE_BYTES,
) -> TableStore:
    """
    Factory:
      - file:///path or a plain path -> FileStore (created when missing unless create=False)
      - memory://                    -> MemoryStore (seeded with `data` when given)
    """
    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore(data=data, max_bytes=max_bytes)

    path = dsn.removeprefix("file://") if dsn.startswith("file://") else dsn
    if not path:
        raise ValueError(f"Unsupported store DSN: {dsn!r}")

    from .file_store import FileStore
    store = FileStore(os.path.abspath(path), create=create, lock=lock, max_bytes=max_bytes)
    if data:
        store.rewrite(data.split(b"\n"))
    return store
