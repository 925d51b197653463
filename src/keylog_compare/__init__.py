"""Compare keystroke logs by the text they render to."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import BACKSPACE, CAPS_LOCK, ComparisonConfig, ReportConfig
from .core.comparer import compare
from .utils import InputLogError, render

__all__ = [
    "BACKSPACE",
    "CAPS_LOCK",
    "ComparisonConfig",
    "ReportConfig",
    "Comparer",
    "ComparisonResult",
    "InputLog",
    "InputLogError",
    "ReportBuilder",
    "ReverseResolvingCursor",
    "compare",
    "render",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"Comparer", "ComparisonResult", "InputLog", "ReverseResolvingCursor"}:
        module = import_module(".core", __name__)
        return getattr(module, name)
    if name == "ReportBuilder":
        module = import_module(".report", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
