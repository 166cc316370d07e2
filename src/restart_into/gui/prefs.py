from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox, QGroupBox, QLabel, QLineEdit, QMessageBox, QPushButton,
    QVBoxLayout, QWidget
)

from restart_into.errors import RestartIntoError
from restart_into.models import BootEntry, is_valid_boot_id
from restart_into.platforms.linux import LinuxBootManager
from restart_into.settings import BOOT_ID, BUTTON_TEXT, DEBUG_MODE, SettingsStore


def format_scan_result(entries: list[BootEntry], find_windows: bool) -> str:
    if not entries:
        return 'No Windows boot entries found' if find_windows else 'No boot entries found'
    heading = 'Found Windows entries:' if find_windows else 'Found boot entries:'
    return '\n'.join([heading, *(f'{e.id}: {e.description}' for e in entries)])


class PrefsWindow(QWidget):
    def __init__(self, store: SettingsStore, manager: LinuxBootManager | None = None):
        super().__init__()
        self.setWindowTitle('Restart Into Preferences')
        self.resize(480, 420)
        self.store = store
        self.manager = manager or LinuxBootManager()
        self._build_ui()

    def _group(self, layout: QVBoxLayout, title: str) -> QVBoxLayout:
        box = QGroupBox(title)
        inner = QVBoxLayout(box)
        layout.addWidget(box)
        return inner

    def _build_ui(self):
        layout = QVBoxLayout(self)

        boot = self._group(layout, 'Boot Configuration')
        boot.addWidget(QLabel('Windows Boot Entry ID (4 hex digits, e.g. 0000):'))
        self.boot_id = QLineEdit(self.store.get_string(BOOT_ID))
        self.boot_id.setMaxLength(4)
        boot.addWidget(self.boot_id)

        button = self._group(layout, 'Button Settings')
        button.addWidget(QLabel('Button Text:'))
        self.button_text = QLineEdit(self.store.get_string(BUTTON_TEXT))
        button.addWidget(self.button_text)

        options = self._group(layout, 'Options')
        self.debug = QCheckBox('Enable debug logging')
        self.debug.setChecked(self.store.get_boolean(DEBUG_MODE))
        options.addWidget(self.debug)

        detection = self._group(layout, 'Boot Entry Detection')
        detection.addWidget(QLabel('Click to scan for Windows boot entries:'))
        self.show_all = QCheckBox('Show all boot entries')
        detection.addWidget(self.show_all)
        self.btn_scan = QPushButton('Scan Boot Entries')
        detection.addWidget(self.btn_scan)
        self.result = QLabel('')
        self.result.setWordWrap(True)
        self.result.setTextInteractionFlags(Qt.TextSelectableByMouse)
        detection.addWidget(self.result)

        self.boot_id.textChanged.connect(self.on_boot_id_changed)
        self.button_text.textChanged.connect(lambda text: self.store.set_string(BUTTON_TEXT, text))
        self.debug.toggled.connect(lambda checked: self.store.set_boolean(DEBUG_MODE, checked))
        self.btn_scan.clicked.connect(self.scan)

    def on_boot_id_changed(self, text: str):
        if is_valid_boot_id(text):
            self.store.set_string(BOOT_ID, text)

    def scan(self):
        find_windows = not self.show_all.isChecked()
        try:
            entries = self.manager.scan(find_windows=find_windows)
        except RestartIntoError as e:
            self.result.setText('Error: ' + str(e))
            QMessageBox.critical(self, 'Scan failed', str(e))
            return
        self.result.setText(format_scan_result(entries, find_windows))
