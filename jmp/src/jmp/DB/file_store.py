# jmp/DB/file_store.py
from __future__ import annotations
import io
import logging
import os
from typing import BinaryIO, Iterable, Optional

from .. import config as CFG
from ..errors import (
    TableAccessError,
    TableAppendError,
    TableReadError,
    TableSeekError,
    TableTooLarge,
    TableTruncateError,
    TableWriteError,
)

try:
    import fcntl  # POSIX only
except ImportError:  # pragma: no cover
    fcntl = None  # type: ignore[assignment]

log = logging.getLogger(__name__)


class FileStore:
    """
    The jumptable file, opened once read/write for the whole invocation.

    With lock=True an exclusive flock is held from open() to close(), which
    covers the read-modify-write window of add/remove. Without fcntl (or with
    lock=False) concurrent writers are not coordinated.

    rewrite() truncates in place and streams the lines back; if it fails half
    way the file keeps only what was written so far.
    """

    def __init__(self, path: str, *, create: bool = True, lock: bool = CFG.LOCK_TABLE,
                 max_bytes: int = CFG.MAX_TABLE_BYTES) -> None:
        self.path: Optional[str] = path
        self.max_bytes = max_bytes
        self._f: Optional[BinaryIO] = None
        self._locked = False

        flags = os.O_RDWR | (os.O_CREAT if create else 0)
        try:
            fd = os.open(path, flags, 0o644)
            self._f = os.fdopen(fd, "r+b")
        except OSError as exc:
            raise TableAccessError(
                f'Can\'t access jumptable file "{path}". {exc.strerror or exc}'
            ) from exc

        if lock and fcntl is not None:
            try:
                fcntl.flock(self._f.fileno(), fcntl.LOCK_EX)
                self._locked = True
            except OSError as exc:
                self.close()
                raise TableAccessError(f'Can\'t lock jumptable file "{path}". {exc.strerror or exc}') from exc
        log.info("Opened jumptable %s (locked=%s)", path, self._locked)

    # ------------- read -------------

    def read_all(self) -> bytes:
        f = self._file()
        try:
            f.seek(0)
            data = f.read(self.max_bytes + 1)
        except OSError as exc:
            raise TableReadError(f"Error reading jumptable file: {exc.strerror or exc}.") from exc
        if len(data) > self.max_bytes:
            raise TableTooLarge(self.max_bytes)
        return data

    # ------------- write -------------

    def append_line(self, line: bytes) -> None:
        f = self._file()
        try:
            f.seek(0, io.SEEK_END)
            f.write(line + b"\n")
            f.flush()
        except OSError as exc:
            raise TableAppendError(
                f"Can't write the new path to jumptable. {exc.strerror or exc}"
            ) from exc

    def rewrite(self, lines: Iterable[bytes]) -> int:
        f = self._file()
        try:
            f.seek(0)
        except OSError as exc:
            raise TableSeekError(f"Can't seek the jumptable. {exc.strerror or exc}") from exc
        try:
            f.truncate(0)
        except OSError as exc:
            raise TableTruncateError(f"Can't truncate the jumptable. {exc.strerror or exc}") from exc

        written = 0
        try:
            for line in lines:
                if not line:
                    continue
                f.write(line + b"\n")
                written += 1
            f.flush()
        except OSError as exc:
            raise TableWriteError(f"Failed to write to jumptable. {exc.strerror or exc}") from exc
        return written

    # ------------- lifecycle -------------

    def close(self) -> None:
        if self._f is None:
            return
        try:
            if self._locked and fcntl is not None:
                fcntl.flock(self._f.fileno(), fcntl.LOCK_UN)
        finally:
            self._locked = False
            self._f.close()
            self._f = None

    def _file(self) -> BinaryIO:
        if self._f is None:
            raise RuntimeError("FileStore is closed")
        return self._f

    def __enter__(self) -> "FileStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
