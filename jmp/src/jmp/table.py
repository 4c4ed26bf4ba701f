from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Optional

from .DB.api import TableStore
from .models import TableEntry
from .paths import PathLike, canonicalize as _canonicalize, is_absolute
from .search import Reporter, report_malformed

log = logging.getLogger(__name__)

Canonicalizer = Callable[[PathLike], bytes]


def add_path(store: TableStore, path: PathLike, *, canonicalize: Canonicalizer = _canonicalize) -> bytes:
    """
    Append the canonical form of `path` to the table and return it.
    Duplicates are not checked: adding twice stores two identical lines.
    """
    target = canonicalize(path)
    store.append_line(target)
    log.info("Added %r to jumptable", target)
    return target


def remove_path(
    store: TableStore,
    path: PathLike,
    *,
    canonicalize: Canonicalizer = _canonicalize,
    report: Optional[Reporter] = None,
) -> int:
    """
    Drop every line equal to the canonical form of `path`; return how many.

    Kept lines stay in their original order. Lines that are not absolute are
    reported and written back untouched. The store is truncated before the
    kept lines are streamed back, so a failure part way leaves a shortened
    table behind.
    """
    target = canonicalize(path)
    data = store.read_all()

    removed = 0
    kept: List[bytes] = []
    for line in data.split(b"\n"):
        if not line:
            continue
        if not is_absolute(line):
            report_malformed(line, report)
            kept.append(line)
            continue
        if line == target:
            removed += 1
            continue
        kept.append(line)

    store.rewrite(kept)
    log.info("Removed %d line(s) matching %r from jumptable", removed, target)
    return removed


def iter_entries(data: bytes) -> Iterator[TableEntry]:
    """Every non-empty line with its 1-based line number and validity."""
    for i, line in enumerate(data.split(b"\n"), start=1):
        if line:
            yield TableEntry(line_no=i, path=line, valid=is_absolute(line))
