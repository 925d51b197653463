"""Core dataclasses describing compared logs and their verdicts."""
from __future__ import annotations

from dataclasses import dataclass

from ..utils import LogData


@dataclass(slots=True)
class InputLog:
    label: str
    data: LogData

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class ComparisonResult:
    left: InputLog
    right: InputLog
    equal: bool
    elapsed_seconds: float
    markers: tuple[int, int]
