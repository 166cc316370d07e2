from __future__ import annotations

from restart_into.gui.hooks import ButtonProviderRegistry, ButtonSpec, DialogType, default_registry
from restart_into.restart import RestartInvoker
from restart_into.settings import BOOT_ID, BUTTON_TEXT, DEBUG_MODE, SettingsStore


class RestartIntoExtension:
    """Adds a "restart into" button to restart dialogs while enabled."""

    def __init__(self, store: SettingsStore, invoker: RestartInvoker | None = None,
                 registry: ButtonProviderRegistry | None = None) -> None:
        self.store = store
        self.invoker = invoker or RestartInvoker()
        self.registry = registry if registry is not None else default_registry
        self._provider = None

    @property
    def enabled(self) -> bool:
        return self._provider is not None

    def enable(self) -> None:
        if self._provider is not None:
            return
        self._provider = self._button_for
        self.registry.add(self._provider)

    def disable(self) -> None:
        if self._provider is None:
            return
        self.registry.remove(self._provider)
        self._provider = None

    def _button_for(self, dialog_type: DialogType) -> ButtonSpec | None:
        if dialog_type != DialogType.RESTART:
            return None
        boot_id = self.store.get_string(BOOT_ID)
        button_text = self.store.get_string(BUTTON_TEXT)
        debug_mode = self.store.get_boolean(DEBUG_MODE)

        def _action(dialog) -> None:
            dialog.close()
            self.invoker.restart_into(boot_id, debug_mode)

        return ButtonSpec(label=button_text, action=_action, key=1)
