from .api import TableStore, make_store
from .file_store import FileStore
from .memory_store import MemoryStore

__all__ = ["TableStore", "make_store", "FileStore", "MemoryStore"]
