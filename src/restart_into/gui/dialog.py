from __future__ import annotations

from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from restart_into.gui.hooks import ButtonProviderRegistry, ButtonSpec, DialogType, default_registry


_TITLES = {
    DialogType.LOGOUT: ('Log Out', 'You will be logged out of this session.'),
    DialogType.SHUTDOWN: ('Power Off', 'The system will power off.'),
    DialogType.RESTART: ('Restart', 'The system will restart.'),
}

_BASE_BUTTONS = {
    DialogType.LOGOUT: 'Log Out',
    DialogType.SHUTDOWN: 'Power Off',
    DialogType.RESTART: 'Restart',
}


class EndSessionDialog(QDialog):
    """Modal end-of-session prompt whose button row can be extended."""

    def __init__(self, dialog_type: DialogType = DialogType.RESTART,
                 registry: ButtonProviderRegistry | None = None, parent=None):
        super().__init__(parent)
        self.dialog_type = dialog_type
        self.registry = registry if registry is not None else default_registry
        self.setModal(True)

        title, body = _TITLES[dialog_type]
        self.setWindowTitle(title)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(body))
        self.btn_row = QHBoxLayout()
        layout.addLayout(self.btn_row)
        self.buttons: list[QPushButton] = []
        self.update_buttons()

    def _clear_buttons(self):
        for btn in self.buttons:
            self.btn_row.removeWidget(btn)
            btn.deleteLater()
        self.buttons = []

    def update_buttons(self):
        self._clear_buttons()
        self.add_button(ButtonSpec(label='Cancel', action=lambda dlg: dlg.reject()))
        self.add_button(ButtonSpec(label=_BASE_BUTTONS[self.dialog_type], action=lambda dlg: dlg.accept()))
        for spec in self.registry.buttons_for(self.dialog_type):
            self.add_button(spec)

    def add_button(self, spec: ButtonSpec) -> QPushButton:
        btn = QPushButton(spec.label)
        btn.clicked.connect(lambda _checked=False, s=spec: s.action(self))
        if spec.key is not None and 0 < spec.key < 10:
            btn.setShortcut(str(spec.key))
        self.btn_row.addWidget(btn)
        self.buttons.append(btn)
        return btn
