from __future__ import annotations
import logging
import re
from typing import Iterable, List

from .common import run, which, is_admin
from restart_into.errors import CommandNotFound, LaunchFailed, NoOutput
from restart_into.models import BootEntry


logger = logging.getLogger(__name__)

EFIBOOTMGR = 'efibootmgr'

_ENTRY_RE = re.compile(r"Boot([0-9A-Fa-f]{4})(\*?)\s+(.+)")
_WINDOWS_KEYWORDS = ('windows', 'microsoft', 'boot manager')


def parse_entries(text: str) -> List[BootEntry]:
    """Parse ``efibootmgr`` output into boot entries, one per matching line."""
    current = re.search(r"BootCurrent:\s*([0-9A-Fa-f]{4})", text)
    next_ = re.search(r"BootNext:\s*([0-9A-Fa-f]{4})", text)
    cur = current.group(1).upper() if current else None
    nxt = next_.group(1).upper() if next_ else None

    entries: List[BootEntry] = []
    for line in text.splitlines():
        m = _ENTRY_RE.search(line)
        if not m:
            continue
        bid, star, desc = m.group(1), m.group(2), m.group(3)
        entries.append(BootEntry(
            id=bid,
            description=desc,
            is_current=(bid.upper() == cur),
            is_next=(bid.upper() == nxt),
            active=(star == '*'),
            extra=line,
        ))
    return entries


def is_windows_entry(entry: BootEntry) -> bool:
    label = entry.description.lower()
    return any(word in label for word in _WINDOWS_KEYWORDS)


def filter_windows(entries: Iterable[BootEntry]) -> List[BootEntry]:
    return [e for e in entries if is_windows_entry(e)]


class LinuxBootManager:
    def __init__(self) -> None:
        self.efibootmgr = which(EFIBOOTMGR)
        self.systemctl = which('systemctl')

    def available(self) -> bool:
        return self.efibootmgr is not None

    def _run_efibootmgr(self, args: List[str]):
        if self.efibootmgr is None:
            raise CommandNotFound(EFIBOOTMGR)
        cmd = [self.efibootmgr, *args]
        try:
            return run(cmd)
        except FileNotFoundError as e:
            raise CommandNotFound(EFIBOOTMGR, e) from e
        except OSError as e:
            raise LaunchFailed(EFIBOOTMGR, e) from e

    def scan(self, find_windows: bool = True) -> List[BootEntry]:
        cp = self._run_efibootmgr([])
        text = cp.stdout or ''
        if not text.strip():
            raise NoOutput(EFIBOOTMGR, cp.stderr or '')
        entries = parse_entries(text)
        logger.debug('efibootmgr listed %d entries', len(entries))
        if find_windows:
            return filter_windows(entries)
        return entries

    def list_entries(self) -> List[BootEntry]:
        return self.scan(find_windows=False)

    def set_next(self, entry_id: str) -> tuple[bool, str]:
        if not is_admin():
            return False, 'Root privileges are required to set BootNext with efibootmgr'
        try:
            cp = self._run_efibootmgr(['-n', entry_id])
        except (CommandNotFound, LaunchFailed) as e:
            return False, str(e)
        if cp.returncode == 0:
            return True, 'Next boot entry set to ' + entry_id
        return False, cp.stderr or cp.stdout

    def reboot_now(self) -> tuple[bool, str]:
        if not is_admin():
            return False, 'Root privileges are required to reboot'
        cmd = [self.systemctl, 'reboot'] if self.systemctl else ['reboot']
        try:
            cp = run(cmd)
        except OSError as e:
            return False, f'Could not run {cmd[0]}: {e}'
        return (cp.returncode == 0, cp.stderr or cp.stdout)
