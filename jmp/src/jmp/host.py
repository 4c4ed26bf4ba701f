from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, NoReturn, Optional

from . import config as CFG
from .errors import ChangeDirError, ExecError, ShellNotSet
from .paths import PathLike

log = logging.getLogger(__name__)


@dataclass
class HostEnvironment:
    """
    Everything the jump needs from the running process, passed in explicitly:
    environment variables plus the chdir/execve calls. Tests swap the calls
    for recorders; the CLI uses HostEnvironment.current().
    """
    env: Dict[str, str] = field(default_factory=dict)
    chdir: Callable[[PathLike], None] = os.chdir
    execve: Callable[..., None] = os.execve

    @classmethod
    def current(cls) -> "HostEnvironment":
        return cls(env=dict(os.environ))

    @property
    def shell(self) -> Optional[str]:
        return self.env.get(CFG.SHELL_ENV) or None

    def next_depth(self) -> int:
        """JUMP_DEPTH + 1, wrapping at 256; unparseable or missing counts as 0."""
        raw = self.env.get(CFG.DEPTH_ENV)
        try:
            depth = int(raw) if raw is not None else 0
        except ValueError:
            depth = 0
        if not 0 <= depth < CFG.DEPTH_WRAP:
            depth = 0
        return (depth + 1) % CFG.DEPTH_WRAP

    def child_env(self) -> Dict[str, str]:
        env = dict(self.env)
        env[CFG.DEPTH_ENV] = str(self.next_depth())
        return env


def jump(path: PathLike, host: HostEnvironment) -> NoReturn:
    """
    Change into `path` and replace the process with $SHELL.

    Only returns by raising (ChangeDirError, ShellNotSet, ExecError); with the
    real os.execve a successful call never comes back.
    """
    shown = os.fsdecode(path)
    try:
        host.chdir(path)
    except OSError as exc:
        raise ChangeDirError(f'Can\'t change directory to "{shown}". {exc.strerror or exc}') from exc

    shell = host.shell
    if shell is None:
        raise ShellNotSet()

    env = host.child_env()
    log.info("Executing %s in %s (%s=%s)", shell, shown, CFG.DEPTH_ENV, env[CFG.DEPTH_ENV])
    try:
        host.execve(shell, [shell], env)
    except OSError as exc:
        raise ExecError(f'Can\'t execute "{shell}". {exc.strerror or exc}') from exc
    raise ExecError(f'Can\'t execute "{shell}". execve returned')
