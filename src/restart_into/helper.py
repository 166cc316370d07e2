"""Privileged helper: ``restart-into-helper <ID>``.

Meant to be launched through pkexec. Sets the EFI BootNext entry to ``ID``
and reboots. Exits 2 on invalid input and 1 when either step fails.
"""
from __future__ import annotations
import argparse
import logging
import sys

from restart_into.models import is_valid_boot_id
from restart_into.platforms.common import is_admin
from restart_into.platforms.linux import LinuxBootManager


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='restart-into-helper', description='Set EFI BootNext and reboot')
    p.add_argument('boot_id', help='Boot entry ID, 4 hex digits (e.g. 0000)')
    return p


def run_helper(boot_id: str, mgr: LinuxBootManager | None = None) -> int:
    if not is_valid_boot_id(boot_id):
        print(f'Invalid boot ID: {boot_id!r} (expected 4 hex digits)', file=sys.stderr)
        return 2
    if not is_admin():
        print('restart-into-helper must run as root (use pkexec)', file=sys.stderr)
        return 1
    mgr = mgr or LinuxBootManager()
    if not mgr.available():
        print('efibootmgr not found', file=sys.stderr)
        return 1

    ok, msg = mgr.set_next(boot_id)
    print(msg)
    if not ok:
        return 1
    ok, msg = mgr.reboot_now()
    if not ok:
        print(msg, file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    return run_helper(args.boot_id)


if __name__ == '__main__':
    sys.exit(main())
