from __future__ import annotations
import logging
import os
import sys
from typing import List, Mapping, Optional, Tuple

from . import config as CFG
from .errors import NoTableLocation

log = logging.getLogger(__name__)

# Known folders, in lookup order: (folder, leaf)
KNOWN_FOLDERS: Tuple[Tuple[str, str], ...] = (
    ("data", CFG.TABLE_NAME),
    ("local_configuration", CFG.TABLE_NAME),
    ("roaming_configuration", CFG.TABLE_NAME),
    ("home", CFG.HOME_TABLE_NAME),
)


def _home(env: Mapping[str, str]) -> Optional[str]:
    home = env.get("HOME") or env.get("USERPROFILE")
    return home or None


def known_folder(name: str, env: Mapping[str, str], platform: str = sys.platform) -> Optional[str]:
    """
    Directory for one of the KNOWN_FOLDERS names, or None if the platform
    has no such folder or the environment does not describe it.
    """
    home = _home(env)
    if name == "home":
        return home

    if platform.startswith("win"):
        if name == "roaming_configuration":
            return env.get("APPDATA") or None
        return env.get("LOCALAPPDATA") or None

    if platform == "darwin":
        if not home:
            return None
        if name == "data":
            return os.path.join(home, "Library", "Application Support")
        return os.path.join(home, "Library", "Preferences")

    # XDG
    if name == "data":
        xdg = env.get("XDG_DATA_HOME")
        return xdg if xdg else (os.path.join(home, ".local", "share") if home else None)
    xdg = env.get("XDG_CONFIG_HOME")
    return xdg if xdg else (os.path.join(home, ".config") if home else None)


def candidate_paths(env: Optional[Mapping[str, str]] = None, platform: str = sys.platform) -> List[str]:
    """Default table paths whose folder exists, without duplicates."""
    env = os.environ if env is None else env
    out: List[str] = []
    for name, leaf in KNOWN_FOLDERS:
        folder = known_folder(name, env, platform)
        if not folder or not os.path.isdir(folder):
            continue
        path = os.path.join(os.path.abspath(folder), leaf)
        if path not in out:
            out.append(path)
    return out


def locate_table(
    override: Optional[str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    platform: str = sys.platform,
    create: bool = True,
) -> str:
    """
    Resolve the jumptable path.

    Order: explicit `override`, then $JMP_TABLE, then the first existing file
    among the known folders, then the first known folder where the file can
    be created. Raises NoTableLocation when nothing is usable.
    """
    env = os.environ if env is None else env
    explicit = override or env.get(CFG.TABLE_ENV)
    if explicit:
        return os.path.abspath(explicit)

    candidates = candidate_paths(env, platform)
    for path in candidates:
        if os.path.isfile(path):
            log.info("Using jumptable %s", path)
            return path

    if create:
        for path in candidates:
            try:
                with open(path, "ab"):
                    pass
            except OSError as exc:
                log.info("Can't create jumptable at %s: %s", path, exc)
                continue
            log.info("Created jumptable %s", path)
            return path

    raise NoTableLocation()
