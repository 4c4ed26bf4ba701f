from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class Calculation:
    leaf: bytes               # basename that was compared
    distance: float

@dataclass(frozen=True)
class MatchResult:
    pattern: bytes
    path: bytes               # winning absolute table line
    distance: float
    calculations: List[Calculation] = field(default_factory=list)  # filled only in calculations mode

    @property
    def path_str(self) -> str:
        return os.fsdecode(self.path)

@dataclass(frozen=True)
class TableEntry:
    line_no: int              # 1-based, counting every line of the file
    path: bytes
    valid: bool               # absolute path?
