from __future__ import annotations
from pathlib import Path

from PySide6.QtCore import QSettings

from restart_into.models import Configuration


ORGANIZATION = 'restart-into'
APPLICATION = 'restart-into'

BOOT_ID = 'boot-id'
BUTTON_TEXT = 'button-text'
DEBUG_MODE = 'debug-mode'

DEFAULTS = {
    BOOT_ID: '0000',
    BUTTON_TEXT: 'Restart to Windows',
    DEBUG_MODE: False,
}


class SettingsStore:
    """Key-value store for the extension settings, backed by QSettings.

    Values are stored and returned unchanged; validation of ``boot-id``
    happens where the value is edited or used.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            self._qs = QSettings(ORGANIZATION, APPLICATION)
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    def get_string(self, key: str) -> str:
        return str(self._qs.value(key, DEFAULTS.get(key, ''), type=str))

    def get_boolean(self, key: str) -> bool:
        return bool(self._qs.value(key, DEFAULTS.get(key, False), type=bool))

    def set_string(self, key: str, value: str) -> None:
        self._qs.setValue(key, str(value))

    def set_boolean(self, key: str, value: bool) -> None:
        self._qs.setValue(key, bool(value))

    def sync(self) -> None:
        self._qs.sync()

    def load(self) -> Configuration:
        return Configuration(
            boot_id=self.get_string(BOOT_ID),
            button_text=self.get_string(BUTTON_TEXT),
            debug_mode=self.get_boolean(DEBUG_MODE),
        )
