from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Callable, List, Optional


class DialogType(enum.IntEnum):
    LOGOUT = 0
    SHUTDOWN = 1
    RESTART = 2


@dataclass
class ButtonSpec:
    label: str
    action: Callable[[object], None]  # receives the dialog
    key: Optional[int] = None


ButtonProvider = Callable[[DialogType], Optional[ButtonSpec]]


class ButtonProviderRegistry:
    """Extra buttons contributed to end-session dialogs.

    Dialogs ask the registry for buttons each time they (re)build their
    button row, so providers added or removed later take effect on the next
    dialog shown.
    """

    def __init__(self) -> None:
        self._providers: List[ButtonProvider] = []

    def add(self, provider: ButtonProvider) -> None:
        if provider not in self._providers:
            self._providers.append(provider)

    def remove(self, provider: ButtonProvider) -> None:
        if provider in self._providers:
            self._providers.remove(provider)

    def __contains__(self, provider) -> bool:
        return provider in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def buttons_for(self, dialog_type: DialogType) -> List[ButtonSpec]:
        buttons = []
        for provider in list(self._providers):
            spec = provider(dialog_type)
            if spec is not None:
                buttons.append(spec)
        return buttons


default_registry = ButtonProviderRegistry()
