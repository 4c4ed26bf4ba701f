"""
jmp - directory jumping helper

Keeps a flat table of absolute paths, picks the entry whose basename is
closest to a pattern, changes into it and replaces the process with $SHELL
so the shell starts in that directory.

Main Functions:
    string_distance(a, b): position-weighted insertion/deletion distance
    find_best_match(data, pattern): best table line for a pattern
    add_path(store, path) / remove_path(store, path): table mutation

Example Usage:
    from jmp import Engine

    with Engine().open(db_dsn="memory://", data=b"/home/x/table\\n/home/x/notes\\n") as eng:
        print(eng.match("tab").path_str)   # /home/x/table
"""

# src/jmp/__init__.py
from .distance import string_distance
from .engine import Engine
from .search import find_best_match
from .table import add_path, remove_path

__version__ = "1.0.0"
__all__ = ["Engine", "string_distance", "find_best_match", "add_path", "remove_path"]
