# jmp/engine.py
from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from . import config as CFG
from .distance import string_distance
from .DB.api import TableStore, make_store
from .locate import locate_table
from .models import MatchResult, TableEntry
from .paths import PathLike, to_bytes
from .search import Reporter, find_best_match
from .table import add_path, iter_entries, remove_path

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the table store (file or in-memory) via a TableStore,
      - the matcher (search.find_best_match),
      - the mutator (table.add_path / table.remove_path).

    Public API (used by CLI/Flask):
      * open(...):        locate/open the table and attach a store
      * match(pattern):   best entry for a pattern
      * add(path) / remove(path)
      * entries():        all non-empty lines with their validity
      * shutdown():       close the store (releases the table lock)

    Store DSNs (via jmp.DB.api.make_store):
      - "file:///path/to/jumptable" or a plain path
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._store: Optional[TableStore] = None
        self._data: Optional[bytes] = None
        self.table_path: Optional[str] = None

    # /* ~~~ Resolve the table and open it once for this invocation ~~~ */
    def open(
        self,
        table: Optional[str] = None,           # --jumptable override
        *,
        db_dsn: Optional[str] = None,          # e.g. "memory://"; bypasses location lookup
        data: Optional[bytes] = None,          # seed for a fresh store
        env: Optional[Mapping[str, str]] = None,
        lock: bool = CFG.LOCK_TABLE,
        create: bool = True,                   # False: a missing table is an error
        verbose: bool = False,
    ) -> "Engine":
        if verbose:
            logging.basicConfig(level=logging.INFO)

        if self._store is not None:
            raise RuntimeError("Engine already open. Call shutdown() first.")

        dsn = db_dsn or locate_table(table, env=env, create=create)
        log.info("Opening table store: %s", dsn)
        self._store = make_store(dsn, data=data, create=create, lock=lock)
        self.table_path = self._store.path
        self._data = None
        return self

    # /* ~~~ Close underlying resources ~~~ */
    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            self._data = None
            log.info("Engine shutdown complete")

    def __enter__(self) -> "Engine":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()

    # ------------- query -------------

    def read(self) -> bytes:
        """Table content, read once and reused until the next mutation."""
        if self._data is None:
            self._data = self._require().read_all()
            log.info("Read jumptable: %d bytes", len(self._data))
        return self._data

    # /* ~~~ Best entry for a pattern; raises EmptyMatchSet ~~~ */
    def match(self, pattern: PathLike, *, calculations: bool = False,
              report: Optional[Reporter] = None) -> MatchResult:
        return find_best_match(self.read(), pattern, calculations=calculations, report=report)

    def entries(self) -> List[TableEntry]:
        return list(iter_entries(self.read()))

    @staticmethod
    def compare(a: PathLike, b: PathLike) -> float:
        return string_distance(to_bytes(a), to_bytes(b))

    def locate(self) -> Optional[str]:
        """Canonical path of the open table file (None for in-memory stores)."""
        self._require()
        return os.path.realpath(self.table_path) if self.table_path else None

    # ------------- mutation -------------

    def add(self, path: PathLike) -> bytes:
        store = self._require()
        self._data = None
        return add_path(store, path)

    def remove(self, path: PathLike, *, report: Optional[Reporter] = None) -> int:
        store = self._require()
        self._data = None
        return remove_path(store, path, report=report)

    # ------------- internals -------------

    def _require(self) -> TableStore:
        if self._store is None:
            raise RuntimeError("Engine not initialized. Call open() first.")
        return self._store
