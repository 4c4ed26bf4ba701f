from __future__ import annotations

from . import config as CFG


class JmpError(Exception):
    """Base for every failure that ends an invocation with a distinct exit code."""
    exit_code: int = 1


class ResourceExhausted(JmpError):
    exit_code = CFG.EXIT_OOM

    def __init__(self, message: str = "Out of memory.") -> None:
        super().__init__(message)


class EmptyMatchSet(JmpError):
    exit_code = CFG.EXIT_EMPTY_TABLE

    def __init__(self, message: str = (
        "No match has been found. Your jumptable is empty.\n"
        "Add an entry to the table with 'jmp -a <PATH>'"
    )) -> None:
        super().__init__(message)


class MalformedTableLine(JmpError):
    """
    A table line that is not an absolute path. Never raised by the matcher or
    the mutator: they report it and carry on. Kept so callers can format the
    diagnostic the same way everywhere.
    """

    def __init__(self, line: bytes) -> None:
        self.line = line
        super().__init__(f'jumptable: not an absolute path: "{line.decode("utf-8", "replace")}"')


class PathResolutionError(JmpError):
    exit_code = CFG.EXIT_PATH_RESOLUTION


class NoTableLocation(JmpError):
    exit_code = CFG.EXIT_NO_LOCATION

    def __init__(self, message: str = (
        "No predefined location for jumptable is available on the system.\n"
        "Use '-t' or '--jumptable' to provide one."
    )) -> None:
        super().__init__(message)


# ------------- table I/O -------------

class TableIOError(JmpError):
    exit_code = CFG.EXIT_TABLE_READ


class TableAccessError(TableIOError):
    exit_code = CFG.EXIT_TABLE_ACCESS


class TableReadError(TableIOError):
    exit_code = CFG.EXIT_TABLE_READ


class TableTooLarge(TableReadError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Error reading jumptable file: table exceeds {limit} bytes.")


class TableWriteError(TableIOError):
    exit_code = CFG.EXIT_TABLE_REWRITE


class TableAppendError(TableWriteError):
    exit_code = CFG.EXIT_TABLE_ADD


class TableSeekError(TableIOError):
    exit_code = CFG.EXIT_TABLE_SEEK


class TableTruncateError(TableIOError):
    exit_code = CFG.EXIT_TABLE_TRUNCATE


# ------------- host -------------

class ShellNotSet(JmpError):
    exit_code = CFG.EXIT_NO_SHELL

    def __init__(self, message: str = "The SHELL environment variable is not set.") -> None:
        super().__init__(message)


class ChangeDirError(JmpError):
    exit_code = CFG.EXIT_CHDIR


class ExecError(JmpError):
    exit_code = CFG.EXIT_EXEC
