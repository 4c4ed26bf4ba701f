from __future__ import annotations
import argparse, logging, os, sys
from typing import Optional

from . import config as CFG
from .distance import format_distance
from .engine import Engine
from .errors import EmptyMatchSet, JmpError
from .host import HostEnvironment, jump
from .models import MatchResult


class _Parser(argparse.ArgumentParser):
    """argparse with the tool's usage exit code (1) instead of argparse's 2."""
    def error(self, message: str):  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(CFG.EXIT_USAGE, f"{self.prog}: error: {message}\nUse '-h' or '--help' to see usage.\n")


def _show(b: bytes) -> str:
    return b.decode("utf-8", "replace")


def _print_calculations(res: Optional[MatchResult], pattern: str) -> None:
    print(f'pattern: "{_show(os.fsencode(pattern))}"')
    if res is None:
        print('match: ""'); return
    for c in res.calculations:
        print(f'leaf: "{_show(c.leaf)}" distance: {format_distance(c.distance)}')
    print(f'match: "{_show(res.path)}"')


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="jmp", usage="jmp [OPTION] [PATTERN]",
                description="Jump into the jumptable entry whose name best matches PATTERN.")
    p.add_argument("-t", "--jumptable", metavar="PATH", default=None, help="Override default jumptable.")
    p.add_argument("-T", "--locate-table", action="store_true", help="Print jumptable path to stdout and exit.")
    p.add_argument("-a", "--add", metavar="PATH", default=None, help="Add target directory to jumptable.")
    p.add_argument("-d", "--del", dest="delete", metavar="PATH", default=None,
                   help="Delete target directory from jumptable.")
    p.add_argument("-c", "--compare", metavar="PATTERN", default=None,
                   help="Print distance between arguments to stdout.")
    p.add_argument("-C", "--calculations", action="store_true", help="Output fuzzy string distance calculations.")
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("pattern", nargs="?", metavar="PATTERN", help="Change dir to fuzzy matched table entry.")
    return p


def main(argv: list[str] | None = None, host: HostEnvironment | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    if args.compare is not None:
        if args.pattern is None:
            print("Must provide a second pattern as an argument.", file=sys.stderr)
            return CFG.EXIT_NO_PATTERN
        try:
            print(format_distance(Engine.compare(args.compare, args.pattern)))
        except JmpError as exc:
            print(exc, file=sys.stderr)
            return exc.exit_code
        return CFG.EXIT_OK

    eng = Engine()
    try:
        eng.open(args.jumptable, env=(host.env if host else None))

        if args.locate_table:
            print(_show(os.fsencode(eng.locate() or "")))
            return CFG.EXIT_OK

        if args.add is not None:
            eng.add(args.add)
            return CFG.EXIT_OK

        if args.delete is not None:
            eng.remove(args.delete)
            return CFG.EXIT_OK

        if not args.pattern:
            print("Must provide a pattern to jump into.", file=sys.stderr)
            return CFG.EXIT_NO_PATTERN

        if args.calculations:
            try:
                res: Optional[MatchResult] = eng.match(args.pattern, calculations=True)
            except EmptyMatchSet:
                res = None
            _print_calculations(res, args.pattern)
            return CFG.EXIT_OK

        target = eng.match(args.pattern).path
    except JmpError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    finally:
        # the table is closed (and unlocked) before the process is replaced
        eng.shutdown()

    try:
        jump(target, host or HostEnvironment.current())
    except JmpError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    return CFG.EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
