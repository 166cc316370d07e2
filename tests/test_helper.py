from __future__ import annotations

import pytest

from restart_into import helper


class FakeManager:
    def __init__(self, set_ok: bool = True, reboot_ok: bool = True, available: bool = True) -> None:
        self.set_ok = set_ok
        self.reboot_ok = reboot_ok
        self._available = available
        self.calls: list[tuple] = []

    def available(self) -> bool:
        return self._available

    def set_next(self, entry_id: str):
        self.calls.append(('set_next', entry_id))
        return self.set_ok, 'Next boot entry set to ' + entry_id if self.set_ok else 'efibootmgr failed'

    def reboot_now(self):
        self.calls.append(('reboot',))
        return self.reboot_ok, '' if self.reboot_ok else 'reboot failed'


def test_invalid_id_exits_2_without_running_anything(monkeypatch) -> None:
    monkeypatch.setattr(helper, 'is_admin', lambda: True)
    mgr = FakeManager()

    assert helper.run_helper('00G0', mgr) == 2
    assert helper.run_helper('0000 && rm', mgr) == 2
    assert mgr.calls == []


def test_requires_root(monkeypatch) -> None:
    monkeypatch.setattr(helper, 'is_admin', lambda: False)
    mgr = FakeManager()

    assert helper.run_helper('0000', mgr) == 1
    assert mgr.calls == []


def test_sets_boot_next_then_reboots(monkeypatch) -> None:
    monkeypatch.setattr(helper, 'is_admin', lambda: True)
    mgr = FakeManager()

    assert helper.run_helper('00ab', mgr) == 0
    assert mgr.calls == [('set_next', '00ab'), ('reboot',)]


def test_no_reboot_when_set_next_fails(monkeypatch) -> None:
    monkeypatch.setattr(helper, 'is_admin', lambda: True)
    mgr = FakeManager(set_ok=False)

    assert helper.run_helper('0000', mgr) == 1
    assert mgr.calls == [('set_next', '0000')]


def test_reboot_failure_exits_1(monkeypatch) -> None:
    monkeypatch.setattr(helper, 'is_admin', lambda: True)

    assert helper.run_helper('0000', FakeManager(reboot_ok=False)) == 1


def test_missing_argument_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        helper.main([])
    assert excinfo.value.code == 2
