from __future__ import annotations

from restart_into.settings import BOOT_ID, BUTTON_TEXT, DEBUG_MODE, SettingsStore


def test_defaults(tmp_path) -> None:
    store = SettingsStore(tmp_path / 'settings.ini')

    config = store.load()

    assert config.boot_id == '0000'
    assert config.button_text == 'Restart to Windows'
    assert config.debug_mode is False
    assert config.boot_id_valid is True


def test_boot_id_round_trip(tmp_path) -> None:
    store = SettingsStore(tmp_path / 'settings.ini')

    store.set_string(BOOT_ID, '00AB')

    assert store.get_string(BOOT_ID) == '00AB'


def test_values_persist_across_instances(tmp_path) -> None:
    path = tmp_path / 'settings.ini'
    store = SettingsStore(path)
    store.set_string(BUTTON_TEXT, 'Boot Windows')
    store.set_boolean(DEBUG_MODE, True)
    store.sync()

    config = SettingsStore(path).load()

    assert config.button_text == 'Boot Windows'
    assert config.debug_mode is True


def test_store_is_passthrough_for_invalid_boot_id(tmp_path) -> None:
    store = SettingsStore(tmp_path / 'settings.ini')

    store.set_string(BOOT_ID, 'zz')

    config = store.load()
    assert config.boot_id == 'zz'
    assert config.boot_id_valid is False
