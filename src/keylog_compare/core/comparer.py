"""Constant-space equality check for keystroke logs."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional, Union

from ..config import BACKSPACE, CAPS_LOCK, ComparisonConfig
from ..utils import InputLogError, LogData, flip_case, is_ascii
from .cursor import ReverseResolvingCursor
from .models import ComparisonResult, InputLog

logger = logging.getLogger(__name__)


def compare(
    log1: LogData,
    log2: LogData,
    *,
    backspace: int = BACKSPACE,
    caps_lock: int = CAPS_LOCK,
) -> bool:
    """Return True when both logs render to the same text.

    Both logs are walked from the end with a :class:`ReverseResolvingCursor`
    each, so backspaces turn into skips and no output is built. Because the
    absolute caps-lock state is unknown until the front is reached, two
    hypotheses are carried: the logs agree at the current position with
    equal toggle parity, or with opposite parity. ``matches[parity]`` is the
    equal-parity hypothesis; a toggle seen on one side only flips ``parity``.
    """
    # Only checked with assertions enabled; this walks both logs in full.
    assert is_ascii(log1), "log1 must only contain ASCII characters"
    assert is_ascii(log2), "log2 must only contain ASCII characters"

    left = ReverseResolvingCursor(log1, backspace=backspace, caps_lock=caps_lock)
    right = ReverseResolvingCursor(log2, backspace=backspace, caps_lock=caps_lock)
    matches = [True, True]
    parity = 0
    while True:
        a = left.advance()
        b = right.advance()
        if a is None and b is None:
            break
        if a is None or b is None:
            return False
        c1, toggled1 = a
        c2, toggled2 = b
        if toggled1 != toggled2:
            parity ^= 1
        literal = matches[parity] and c1 == c2
        inverted = matches[parity ^ 1] and c1 == flip_case(c2)
        if not (literal or inverted):
            return False
        matches[parity] = literal
        matches[parity ^ 1] = inverted
    if left.caps_toggled_at_front != right.caps_toggled_at_front:
        parity ^= 1
    return matches[parity]


class Comparer:
    """Compares logs using the markers and checks from a ComparisonConfig."""

    def __init__(self, config: Optional[ComparisonConfig] = None) -> None:
        self.config = config or ComparisonConfig()
        self.config.validate()

    def compare(
        self,
        left: Union[InputLog, LogData],
        right: Union[InputLog, LogData],
    ) -> ComparisonResult:
        left_log = _as_input_log(left, "left")
        right_log = _as_input_log(right, "right")
        if self.config.check_ascii:
            for entry in (left_log, right_log):
                if not is_ascii(entry.data):
                    raise InputLogError(f"{entry.label} contains non-ASCII data")
        backspace, caps_lock = self.config.markers()
        start = perf_counter()
        equal = compare(left_log.data, right_log.data, backspace=backspace, caps_lock=caps_lock)
        duration = perf_counter() - start
        logger.debug(
            "Compared %s (%d bytes) with %s (%d bytes) in %.6fs: %s",
            left_log.label,
            left_log.size,
            right_log.label,
            right_log.size,
            duration,
            "equal" if equal else "different",
        )
        return ComparisonResult(
            left=left_log,
            right=right_log,
            equal=equal,
            elapsed_seconds=duration,
            markers=(backspace, caps_lock),
        )


def _as_input_log(value: Union[InputLog, LogData], label: str) -> InputLog:
    if isinstance(value, InputLog):
        return value
    return InputLog(label=label, data=value)


__all__ = ["Comparer", "compare"]
