import re
from dataclasses import dataclass
from typing import Optional


BOOT_ID_PATTERN = re.compile(r"^[0-9A-Fa-f]{4}$")


def is_valid_boot_id(value) -> bool:
    return isinstance(value, str) and BOOT_ID_PATTERN.fullmatch(value) is not None


@dataclass
class BootEntry:
    id: str  # '0000' style, 4 hex digits
    description: str
    is_current: bool = False
    is_next: bool = False
    active: bool = False
    extra: Optional[str] = None  # raw line


@dataclass
class Configuration:
    boot_id: str
    button_text: str
    debug_mode: bool = False

    @property
    def boot_id_valid(self) -> bool:
        return is_valid_boot_id(self.boot_id)
