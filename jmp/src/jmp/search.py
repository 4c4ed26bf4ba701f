from __future__ import annotations
import logging
from typing import Callable, List, Optional

from .distance import string_distance
from .errors import EmptyMatchSet, MalformedTableLine
from .models import Calculation, MatchResult
from .paths import PathLike, is_absolute, iter_lines, leaf, to_bytes

log = logging.getLogger(__name__)

Reporter = Callable[[str], None]


def report_to_log(message: str) -> None:
    """Default diagnostics sink: a WARNING record (stderr unless logging is configured)."""
    log.warning("%s", message)


def report_malformed(line: bytes, report: Optional[Reporter]) -> None:
    (report or report_to_log)(str(MalformedTableLine(line)))


def find_best_match(
    data: bytes,
    pattern: PathLike,
    *,
    calculations: bool = False,
    report: Optional[Reporter] = None,
) -> MatchResult:
    """
    Pick the table line whose basename is closest to `pattern`.

    - empty lines are skipped; non-absolute lines are reported and skipped
    - the first line with the minimum distance wins (strict `<`)
    - a distance of exactly 0.0 ends the scan early, unless `calculations`
      is set, in which case every line is scored and recorded
    Raises EmptyMatchSet when no line qualifies.
    """
    pat = to_bytes(pattern)
    if not pat:
        raise ValueError("find_best_match(): pattern must not be empty")

    best_line: Optional[bytes] = None
    best_dist = float("inf")
    calcs: List[Calculation] = []

    for line in iter_lines(data):
        if not is_absolute(line):
            report_malformed(line, report)
            continue

        name = leaf(line)
        dist = string_distance(name, pat)

        if calculations:
            calcs.append(Calculation(leaf=name, distance=dist))
        elif dist == 0.0:
            best_line, best_dist = line, dist
            break

        if dist < best_dist:
            best_line, best_dist = line, dist

    if best_line is None:
        raise EmptyMatchSet()

    log.info("Matched %r -> %r (distance=%r)", pat, best_line, best_dist)
    return MatchResult(pattern=pat, path=best_line, distance=best_dist, calculations=calcs)
