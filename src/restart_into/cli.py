from __future__ import annotations
import argparse
import json
from typing import List

from restart_into.errors import CommandNotFound, RestartIntoError
from restart_into.models import BootEntry, is_valid_boot_id
from restart_into.platforms.linux import LinuxBootManager
from restart_into.restart import RestartInvoker, RestartState
from restart_into.settings import BOOT_ID, BUTTON_TEXT, DEBUG_MODE, SettingsStore


KEYS = (BOOT_ID, BUTTON_TEXT, DEBUG_MODE)
_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


def format_entries(entries: List[BootEntry], output: str) -> str:
    if output == 'json':
        return json.dumps([
            {
                'id': e.id,
                'description': e.description,
                'active': e.active,
                'is_current': e.is_current,
                'is_next': e.is_next,
            } for e in entries
        ], ensure_ascii=False, indent=2)
    lines = ["ID\tACTIVE\tCURRENT\tNEXT\tDESCRIPTION"]
    for e in entries:
        lines.append(f"{e.id}\t{int(e.active)}\t{int(e.is_current)}\t{int(e.is_next)}\t{e.description}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='restart-into', description='Restart into another OS via EFI BootNext')
    p.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    p.add_argument('--settings', metavar='PATH', help='Use an INI settings file instead of the user settings')
    sub = p.add_subparsers(dest='cmd', required=False)

    list_p = sub.add_parser('list', help='List Windows boot entries')
    list_p.add_argument('--all', action='store_true', help='List every boot entry, not only Windows ones')
    list_p.add_argument('-o', '--output', choices=['text', 'json'], default='text')

    restart_p = sub.add_parser('restart', help='Set boot-next to the configured entry and reboot')
    restart_p.add_argument('--boot-id', help='Boot entry ID (default: configured boot-id)')
    restart_p.add_argument('--debug', action='store_true', default=None, help='Log every step (default: configured debug-mode)')

    config_p = sub.add_parser('config', help='Read or change settings')
    config_sub = config_p.add_subparsers(dest='config_cmd', required=True)
    get_p = config_sub.add_parser('get', help='Print a setting (or all settings)')
    get_p.add_argument('key', nargs='?', choices=KEYS)
    set_p = config_sub.add_parser('set', help='Change a setting')
    set_p.add_argument('key', choices=KEYS)
    set_p.add_argument('value')

    sub.add_parser('prefs', help='Open the preferences window')
    dialog_p = sub.add_parser('dialog', help='Show the end-session dialog with the restart-into button')
    dialog_p.add_argument('--type', choices=['logout', 'shutdown', 'restart'], default='restart')

    return p


def _print_setting(store: SettingsStore, key: str) -> None:
    if key == DEBUG_MODE:
        print(f'{key}={str(store.get_boolean(key)).lower()}')
    else:
        print(f'{key}={store.get_string(key)}')


def run_config(args: argparse.Namespace, store: SettingsStore) -> int:
    if args.config_cmd == 'get':
        for key in ([args.key] if args.key else KEYS):
            _print_setting(store, key)
        return 0
    value = args.value
    if args.key == BOOT_ID:
        if not is_valid_boot_id(value):
            print(f'Invalid boot ID: {value!r} (expected 4 hex digits, e.g. 0000)')
            return 2
        store.set_string(BOOT_ID, value)
    elif args.key == DEBUG_MODE:
        if value.lower() not in _TRUE + _FALSE:
            print(f'Invalid boolean: {value!r}')
            return 2
        store.set_boolean(DEBUG_MODE, value.lower() in _TRUE)
    else:
        store.set_string(args.key, value)
    store.sync()
    _print_setting(store, args.key)
    return 0


def run_list(args: argparse.Namespace, mgr: LinuxBootManager) -> int:
    try:
        entries = mgr.list_entries() if args.all else mgr.scan()
    except CommandNotFound as e:
        print(f'{e}. Install efibootmgr.')
        return 2
    except RestartIntoError as e:
        print(str(e))
        return 1
    print(format_entries(entries, args.output))
    return 0


def run_restart(args: argparse.Namespace, store: SettingsStore, invoker: RestartInvoker) -> int:
    config = store.load()
    boot_id = args.boot_id or config.boot_id
    debug = config.debug_mode if args.debug is None else args.debug
    if not is_valid_boot_id(boot_id):
        print(f'Invalid boot ID: {boot_id!r} (expected 4 hex digits, e.g. 0000)')
        return 2
    invoker.restart_into(boot_id, debug)
    state = invoker.wait()
    if state != RestartState.COMPLETED:
        return 1
    return 0 if invoker.returncode == 0 else 1


def run_cli(args: argparse.Namespace, store: SettingsStore | None = None,
            mgr: LinuxBootManager | None = None, invoker: RestartInvoker | None = None) -> int:
    if args.cmd == 'list':
        return run_list(args, mgr or LinuxBootManager())
    store = store or SettingsStore(args.settings)
    if args.cmd == 'config':
        return run_config(args, store)
    if args.cmd == 'restart':
        return run_restart(args, store, invoker or RestartInvoker())
    return 0
