from __future__ import annotations

from restart_into.gui.extension import RestartIntoExtension
from restart_into.gui.hooks import ButtonProviderRegistry, ButtonSpec, DialogType
from restart_into.settings import BOOT_ID, BUTTON_TEXT, DEBUG_MODE, SettingsStore


class RecordingInvoker:
    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []

    def restart_into(self, boot_id: str, debug: bool = False) -> None:
        self.calls.append((boot_id, debug))


class FakeDialog:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


def _extension(tmp_path):
    store = SettingsStore(tmp_path / 'settings.ini')
    store.set_string(BOOT_ID, '0A1B')
    store.set_string(BUTTON_TEXT, 'Restart to Windows')
    store.set_boolean(DEBUG_MODE, True)
    registry = ButtonProviderRegistry()
    invoker = RecordingInvoker()
    return RestartIntoExtension(store, invoker, registry), store, registry, invoker


def test_disabled_extension_adds_no_buttons(tmp_path) -> None:
    ext, _store, registry, _invoker = _extension(tmp_path)

    assert ext.enabled is False
    assert registry.buttons_for(DialogType.RESTART) == []


def test_enable_adds_button_only_to_restart_dialog(tmp_path) -> None:
    ext, _store, registry, _invoker = _extension(tmp_path)

    ext.enable()

    buttons = registry.buttons_for(DialogType.RESTART)
    assert [(b.label, b.key) for b in buttons] == [('Restart to Windows', 1)]
    assert registry.buttons_for(DialogType.SHUTDOWN) == []
    assert registry.buttons_for(DialogType.LOGOUT) == []


def test_enable_is_idempotent_and_disable_restores(tmp_path) -> None:
    ext, _store, registry, _invoker = _extension(tmp_path)

    ext.enable()
    ext.enable()
    assert len(registry) == 1

    ext.disable()
    assert ext.enabled is False
    assert len(registry) == 0
    ext.disable()
    assert registry.buttons_for(DialogType.RESTART) == []


def test_disable_keeps_other_providers(tmp_path) -> None:
    ext, _store, registry, _invoker = _extension(tmp_path)
    other = lambda dialog_type: ButtonSpec(label='Other', action=lambda dlg: None)
    registry.add(other)

    ext.enable()
    ext.disable()

    assert other in registry
    assert [b.label for b in registry.buttons_for(DialogType.RESTART)] == ['Other']


def test_button_action_closes_dialog_and_restarts(tmp_path) -> None:
    ext, store, registry, invoker = _extension(tmp_path)
    ext.enable()
    dialog = FakeDialog()

    [button] = registry.buttons_for(DialogType.RESTART)
    button.action(dialog)

    assert dialog.closed is True
    assert invoker.calls == [('0A1B', True)]
    assert store.get_string(BOOT_ID) == '0A1B'


def test_button_reads_settings_when_dialog_is_built(tmp_path) -> None:
    ext, store, registry, _invoker = _extension(tmp_path)
    ext.enable()

    store.set_string(BUTTON_TEXT, 'Boot Windows')

    assert [b.label for b in registry.buttons_for(DialogType.RESTART)] == ['Boot Windows']
