"""Comparator building blocks with no I/O of their own."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "compare",
    "Comparer",
    "ReverseResolvingCursor",
    "InputLog",
    "ComparisonResult",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"compare", "Comparer"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name == "ReverseResolvingCursor":
        module = import_module(".cursor", __name__)
        return module.ReverseResolvingCursor
    if name in {"InputLog", "ComparisonResult"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
