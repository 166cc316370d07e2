from __future__ import annotations
import enum
import logging
import os
import shlex
import sys
import threading
from pathlib import Path
from typing import Callable, List

from restart_into.errors import CommandFailure, CommandNotFound, LaunchFailed
from restart_into.models import is_valid_boot_id
from restart_into.platforms.common import spawn_async, which


logger = logging.getLogger(__name__)

HELPER_ENV = 'RESTART_INTO_HELPER'
HELPER_NAME = 'restart-into-helper'
DEFAULT_HELPER_PATH = Path('~/.local/bin').expanduser() / HELPER_NAME


def helper_path() -> str:
    """Helper script location: $RESTART_INTO_HELPER, then the script installed
    next to the running interpreter, then ~/.local/bin.

    The helper runs as root under pkexec, so it must come from an install
    whose interpreter can import restart_into without the user site-packages
    (a venv or pipx install).
    """
    override = os.environ.get(HELPER_ENV)
    if override:
        return override
    installed = Path(sys.executable).parent / HELPER_NAME
    if installed.exists():
        return str(installed)
    return str(DEFAULT_HELPER_PATH)


class RestartState(enum.Enum):
    IDLE = 'idle'
    LAUNCHING = 'launching'
    COMPLETED = 'completed'
    LAUNCH_FAILED = 'launch-failed'


class RestartInvoker:
    """Sets the firmware boot-next entry and reboots, through a privileged helper.

    ``restart_into`` never raises and never reports failure to its caller.
    When ``debug`` is set, every step and failure is logged; otherwise the
    invoker is silent.
    """

    def __init__(self, helper: str | None = None, launcher: Callable = spawn_async) -> None:
        self.helper = helper or helper_path()
        self.launcher = launcher
        self.state = RestartState.IDLE
        self.returncode: int | None = None
        self._finished = threading.Event()

    def wait(self, timeout: float | None = None) -> RestartState:
        """Block until the launched command completes (CLI use only)."""
        if self.state == RestartState.LAUNCHING:
            self._finished.wait(timeout)
        return self.state

    def build_command(self, boot_id: str) -> List[str]:
        pkexec = which('pkexec') or 'pkexec'
        return [pkexec, self.helper, boot_id]

    def restart_into(self, boot_id: str, debug: bool = False) -> None:
        if not is_valid_boot_id(boot_id):
            if debug:
                logger.warning('Not restarting: invalid boot ID %r', boot_id)
            return

        if debug:
            logger.info('Restarting to OS with boot ID: %s', boot_id)

        cmd = self.build_command(boot_id)
        if debug:
            logger.info('Executing command: %s', shlex.join(cmd))

        def _on_complete(returncode: int, stdout: str, stderr: str) -> None:
            self.returncode = returncode
            self.state = RestartState.COMPLETED
            if debug:
                if stdout.strip():
                    logger.info('Restart command stdout: %s', stdout.strip())
                if stderr.strip():
                    logger.info('Restart command stderr: %s', stderr.strip())
                if returncode != 0:
                    logger.error('Restart command failed: %s', CommandFailure(cmd[0], returncode, stderr))
            self._finished.set()

        self._finished.clear()
        self.returncode = None
        self.state = RestartState.LAUNCHING
        try:
            self.launcher(cmd, _on_complete)
        except FileNotFoundError as e:
            self._launch_failed(CommandNotFound(cmd[0], e), debug)
        except OSError as e:
            self._launch_failed(LaunchFailed(cmd[0], e), debug)

    def _launch_failed(self, error: Exception, debug: bool) -> None:
        self.state = RestartState.LAUNCH_FAILED
        self._finished.set()
        if debug:
            logger.error('Failed to execute restart command: %s', error)


def restart_into(boot_id: str, debug: bool = False) -> RestartInvoker:
    invoker = RestartInvoker()
    invoker.restart_into(boot_id, debug)
    return invoker
