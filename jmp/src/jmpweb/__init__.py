"""Read-only web preview of a jumptable (Flask)."""
from .web import app, main

__all__ = ["app", "main"]
