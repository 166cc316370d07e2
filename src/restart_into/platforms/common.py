from __future__ import annotations
import os
import shutil
import subprocess
import threading
from typing import Callable, List


CompletionCallback = Callable[[int, str, str], None]


def is_admin() -> bool:
    try:
        return os.geteuid() == 0
    except AttributeError:
        return False


def which(cmd: str) -> str | None:
    return shutil.which(cmd)


def run(cmd: List[str], check: bool = False, env: dict | None = None) -> subprocess.CompletedProcess:
    """Run a command to completion, capturing stdout/stderr as text."""
    return subprocess.run(cmd, capture_output=True, text=True, check=check, env=env)


def spawn_async(cmd: List[str], on_complete: CompletionCallback | None = None) -> subprocess.Popen:
    """Launch ``cmd`` without waiting for it.

    Spawn errors (``FileNotFoundError``, ``OSError``) are raised to the caller
    immediately. Output is collected on a daemon thread, which calls
    ``on_complete(returncode, stdout, stderr)`` exactly once when the process
    exits.
    """
    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )

    def _worker() -> None:
        stdout, stderr = process.communicate()
        if on_complete is not None:
            on_complete(process.returncode, stdout or '', stderr or '')

    threading.Thread(target=_worker, daemon=True).start()
    return process
