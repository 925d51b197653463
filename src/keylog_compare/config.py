"""Configuration dataclasses for the keystroke log comparator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


BACKSPACE = 0x00
CAPS_LOCK = 0x09


@dataclass(slots=True)
class ComparisonConfig:
    backspace: int = BACKSPACE
    caps_lock: int = CAPS_LOCK
    check_ascii: bool = False  # validate both logs before comparing

    def markers(self) -> tuple[int, int]:
        return (self.backspace, self.caps_lock)

    def validate(self) -> None:
        if self.backspace == self.caps_lock:
            raise ValueError("Backspace and caps-lock markers must differ")
        for name, value in (("backspace", self.backspace), ("caps-lock", self.caps_lock)):
            if not 0 <= value <= 127:
                raise ValueError(f"The {name} marker must be an ASCII code, got {value}")
            if (65 <= value <= 90) or (97 <= value <= 122):
                raise ValueError(f"The {name} marker cannot be a letter, got {chr(value)!r}")


@dataclass(slots=True)
class ReportConfig:
    output_path: Optional[str] = None
    json_output_path: Optional[str] = None
    include_rendered: bool = True
    include_raw: bool = False
