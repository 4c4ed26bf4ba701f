from pathlib import Path
import os
import pytest

from jmp.DB.api import make_store
from jmp.DB.file_store import FileStore
from jmp.DB.memory_store import MemoryStore
from jmp.errors import TableAccessError, TableTooLarge
from jmp.table import add_path, remove_path

fcntl = pytest.importorskip("fcntl") if os.name == "posix" else None


def _seed(tmp: Path) -> Path:
    a = tmp / "alpha"; a.mkdir()
    b = tmp / "beta"; b.mkdir()
    return tmp


@pytest.mark.e2e
def test_file_store_creates_missing_table(tmp_path: Path):
    table = tmp_path / "jumptable"
    store = make_store(str(table))
    try:
        assert isinstance(store, FileStore)
        assert table.exists()
        assert store.read_all() == b""
    finally:
        store.close()


@pytest.mark.e2e
def test_file_dsn_and_no_create(tmp_path: Path):
    table = tmp_path / "missing"
    with pytest.raises(TableAccessError):
        make_store(f"file://{table}", create=False)
    assert not table.exists()


@pytest.mark.e2e
def test_memory_dsn_is_seeded():
    store = make_store("memory://", data=b"/a\n")
    assert isinstance(store, MemoryStore)
    assert store.read_all() == b"/a\n"
    assert store.path is None


@pytest.mark.e2e
def test_oversize_table_fails_closed(tmp_path: Path):
    table = tmp_path / "jumptable"
    table.write_bytes(b"/" + b"x" * 15 + b"\n")      # 17 bytes
    with make_store(str(table), max_bytes=16) as store:
        with pytest.raises(TableTooLarge):
            store.read_all()
    with make_store(str(table), max_bytes=17) as store:
        assert store.read_all().endswith(b"\n")


@pytest.mark.e2e
def test_add_remove_round_trip_on_disk(tmp_path: Path):
    root = _seed(tmp_path)
    table = tmp_path / "jumptable"
    alpha = os.path.realpath(root / "alpha")
    beta = os.path.realpath(root / "beta")

    with make_store(str(table)) as store:
        add_path(store, str(root / "alpha"))
        add_path(store, str(root / "beta"))
        add_path(store, str(root / "alpha"))
    assert table.read_text() == f"{alpha}\n{beta}\n{alpha}\n"

    with make_store(str(table)) as store:
        assert remove_path(store, str(root / "alpha")) == 2
    assert table.read_text() == f"{beta}\n"

    with make_store(str(table)) as store:
        remove_path(store, str(root / "beta"))
    assert table.read_bytes() == b""


@pytest.mark.e2e
def test_symlinks_are_resolved_on_add(tmp_path: Path):
    root = _seed(tmp_path)
    link = tmp_path / "shortcut"
    link.symlink_to(root / "alpha")
    table = tmp_path / "jumptable"
    with make_store(str(table)) as store:
        stored = add_path(store, str(link))
    assert stored == os.fsencode(os.path.realpath(root / "alpha"))
    assert table.read_bytes() == stored + b"\n"


@pytest.mark.e2e
@pytest.mark.skipif(fcntl is None, reason="flock needs fcntl")
def test_table_is_locked_while_open(tmp_path: Path):
    table = tmp_path / "jumptable"
    store = make_store(str(table), lock=True)
    try:
        with open(table, "rb") as other:
            with pytest.raises(BlockingIOError):
                fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
    finally:
        store.close()
    with open(table, "rb") as other:
        fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        fcntl.flock(other.fileno(), fcntl.LOCK_UN)
