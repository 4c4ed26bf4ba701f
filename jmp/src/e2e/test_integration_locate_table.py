from pathlib import Path
import os
import pytest

from jmp.locate import candidate_paths, locate_table
from jmp.errors import NoTableLocation


def _env(tmp: Path) -> dict:
    home = tmp / "home"; home.mkdir()
    data = tmp / "data"; data.mkdir()
    return {"HOME": str(home), "XDG_DATA_HOME": str(data), "XDG_CONFIG_HOME": str(tmp / "nope")}


@pytest.mark.e2e
def test_creates_table_in_first_known_folder(tmp_path: Path):
    env = _env(tmp_path)
    path = locate_table(env=env, platform="linux")
    assert path == os.path.join(env["XDG_DATA_HOME"], "jumptable")
    assert os.path.isfile(path)


@pytest.mark.e2e
def test_existing_table_wins_over_creation(tmp_path: Path):
    env = _env(tmp_path)
    home_table = Path(env["HOME"]) / ".jumptable"
    home_table.write_text("/x\n")
    assert locate_table(env=env, platform="linux") == str(home_table)
    assert not (Path(env["XDG_DATA_HOME"]) / "jumptable").exists()


@pytest.mark.e2e
def test_missing_folders_are_skipped(tmp_path: Path):
    env = _env(tmp_path)
    # config dir does not exist; roaming config maps to it on linux
    assert candidate_paths(env, platform="linux") == [
        os.path.join(env["XDG_DATA_HOME"], "jumptable"),
        os.path.join(env["HOME"], ".jumptable"),
    ]


@pytest.mark.e2e
def test_override_and_env_variable(tmp_path: Path, monkeypatch):
    env = _env(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert locate_table("rel/table", env=env) == os.path.join(os.getcwd(), "rel", "table")
    env["JMP_TABLE"] = str(tmp_path / "from-env")
    assert locate_table(env=env) == str(tmp_path / "from-env")
    assert locate_table(str(tmp_path / "flag"), env=env) == str(tmp_path / "flag")


@pytest.mark.e2e
def test_no_location_available():
    with pytest.raises(NoTableLocation):
        locate_table(env={}, platform="linux")


@pytest.mark.e2e
def test_no_creation_when_disabled(tmp_path: Path):
    with pytest.raises(NoTableLocation):
        locate_table(env=_env(tmp_path), platform="linux", create=False)
