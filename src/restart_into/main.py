from __future__ import annotations
import logging
import sys

from PySide6.QtWidgets import QApplication

from restart_into.cli import build_parser, run_cli
from restart_into.gui.dialog import EndSessionDialog
from restart_into.gui.extension import RestartIntoExtension
from restart_into.gui.hooks import DialogType
from restart_into.gui.prefs import PrefsWindow
from restart_into.restart import RestartInvoker
from restart_into.settings import SettingsStore


def run_dialog(store: SettingsStore, dialog_type: DialogType, invoker: RestartInvoker | None = None) -> int:
    ext = RestartIntoExtension(store, invoker)
    ext.enable()
    try:
        EndSessionDialog(dialog_type).exec()
    finally:
        ext.disable()
    # pkexec needs its parent alive, and completion output is logged from our thread
    ext.invoker.wait()
    return 0


def run_gui(args) -> int:
    app = QApplication(sys.argv)
    store = SettingsStore(args.settings)

    if args.cmd == 'dialog':
        return run_dialog(store, DialogType[args.type.upper()])

    w = PrefsWindow(store)
    w.show()
    code = app.exec()
    store.sync()
    return code


def main():
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(name)s: %(message)s',
    )
    if args.cmd in ('list', 'config', 'restart'):
        sys.exit(run_cli(args))
    sys.exit(run_gui(args))


if __name__ == '__main__':
    main()
