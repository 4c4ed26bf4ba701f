# jmp/DB/memory_store.py
from __future__ import annotations
from typing import Iterable, Optional

from .. import config as CFG
from ..errors import TableTooLarge

class MemoryStore:
    """Table kept in a bytearray (useful for tests or ephemeral runs)."""
    path: Optional[str] = None

    def __init__(self, data: Optional[bytes] = None, *, max_bytes: int = CFG.MAX_TABLE_BYTES) -> None:
        self._buf = bytearray(data or b"")
        self.max_bytes = max_bytes

    # R
    def read_all(self) -> bytes:
        if len(self._buf) > self.max_bytes:
            raise TableTooLarge(self.max_bytes)
        return bytes(self._buf)

    # C
    def append_line(self, line: bytes) -> None:
        self._buf += line + b"\n"

    # U/D
    def rewrite(self, lines: Iterable[bytes]) -> int:
        del self._buf[:]
        n = 0
        for line in lines:
            if not line:
                continue
            self._buf += line + b"\n"; n += 1
        return n

    def close(self) -> None:
        pass
