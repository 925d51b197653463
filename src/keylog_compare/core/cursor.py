"""Backward cursor that resolves backspaces while walking a keystroke log."""
from __future__ import annotations

from typing import Optional

from ..config import BACKSPACE, CAPS_LOCK
from ..utils import LogData

Resolved = tuple[int, bool]


class ReverseResolvingCursor:
    """Yields the surviving characters of a log, last character first.

    Each step produces ``(code, toggled)``. ``toggled`` is true when an odd
    number of caps-lock markers sit between this character and the one
    produced before it. A backspace cancels the nearest earlier printable
    character; markers themselves are never cancelled.

    Toggles found on the final scan, after the last surviving character has
    already been produced, are kept in :attr:`caps_toggled_at_front`.
    """

    __slots__ = (
        "backspace",
        "caps_lock",
        "_log",
        "_is_text",
        "_pos",
        "_skip",
        "_front_toggled",
        "_exhausted",
    )

    def __init__(
        self,
        log: LogData,
        *,
        backspace: int = BACKSPACE,
        caps_lock: int = CAPS_LOCK,
    ) -> None:
        self.backspace = backspace
        self.caps_lock = caps_lock
        self._log = log
        self._is_text = isinstance(log, str)
        self._pos = len(log)
        self._skip = 0
        self._front_toggled = False
        self._exhausted = False

    def advance(self) -> Optional[Resolved]:
        """Return the next surviving character, or ``None`` once the log is spent."""
        if self._exhausted:
            return None
        log = self._log
        pos = self._pos
        toggled = False
        while pos > 0:
            pos -= 1
            code = ord(log[pos]) if self._is_text else log[pos]
            if code == self.backspace:
                self._skip += 1
            elif code == self.caps_lock:
                toggled = not toggled
            elif self._skip:
                self._skip -= 1
            else:
                self._pos = pos
                return code, toggled
        self._pos = 0
        self._front_toggled = toggled
        self._exhausted = True
        return None

    def __iter__(self) -> "ReverseResolvingCursor":
        return self

    def __next__(self) -> Resolved:
        resolved = self.advance()
        if resolved is None:
            raise StopIteration
        return resolved

    def __length_hint__(self) -> int:
        # Upper bound only: any of these bytes may still be cancelled.
        return self._pos

    @property
    def remaining(self) -> int:
        return self._pos

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def caps_toggled_at_front(self) -> bool:
        return self._front_toggled

    def is_caps_toggled_at_front(self) -> bool:
        return self._front_toggled


__all__ = ["ReverseResolvingCursor", "Resolved"]
