"""Helpers for classifying, decoding and rendering keystroke logs."""
from __future__ import annotations

from typing import Iterator, Union

from .config import BACKSPACE, CAPS_LOCK

LogData = Union[str, bytes, bytearray, memoryview]

_BACKSPACE_GLYPH = "⌫"
_CAPS_LOCK_GLYPH = "⇪"


class InputLogError(ValueError):
    """Raised when a keystroke log cannot be used as comparator input."""


def is_letter(code: int) -> bool:
    """True iff code is an ASCII letter (A-Z or a-z)."""
    return (65 <= code <= 90) or (97 <= code <= 122)


def flip_case(code: int) -> int:
    """Swap the case of an ASCII letter. Non-letters pass through."""
    if is_letter(code):
        return code ^ 0x20
    return code


def iter_codes(log: LogData) -> Iterator[int]:
    if isinstance(log, str):
        return map(ord, log)
    return iter(log)


def is_ascii(log: LogData) -> bool:
    if isinstance(log, (str, bytes, bytearray)):
        return log.isascii()
    return all(code < 128 for code in log)


def decode_escapes(text: str) -> bytes:
    """Turn backslash escapes typed on a command line into raw log bytes.

    ``ab\\0c`` as typed becomes ``b"ab\\x00c"``; ``\\t``, ``\\xNN`` and the
    other Python string escapes are understood as well.
    """
    if not text.isascii():
        raise InputLogError(f"Log contains non-ASCII characters: {text!r}")
    try:
        decoded = text.encode("ascii").decode("unicode_escape")
    except UnicodeDecodeError as exc:
        raise InputLogError(f"Invalid escape sequence in {text!r}: {exc.reason}") from exc
    if not decoded.isascii():
        raise InputLogError(f"Log decodes to non-ASCII characters: {text!r}")
    return decoded.encode("ascii")


def render(log: LogData, *, backspace: int = BACKSPACE, caps_lock: int = CAPS_LOCK) -> str:
    """Replay a log front to back and return the text it produces.

    This builds the full output and is meant for reports and tests; the
    comparator never calls it.
    """
    rendered: list[str] = []
    shifted = False
    for code in iter_codes(log):
        if code == backspace:
            if rendered:
                rendered.pop()
        elif code == caps_lock:
            shifted = not shifted
        else:
            rendered.append(chr(flip_case(code) if shifted else code))
    return "".join(rendered)


def display(log: LogData, *, backspace: int = BACKSPACE, caps_lock: int = CAPS_LOCK) -> str:
    """Printable form of a log with the markers shown as key glyphs."""
    parts: list[str] = []
    for code in iter_codes(log):
        if code == backspace:
            parts.append(_BACKSPACE_GLYPH)
        elif code == caps_lock:
            parts.append(_CAPS_LOCK_GLYPH)
        elif 32 <= code <= 126:
            parts.append(chr(code))
        else:
            parts.append(f"\\x{code:02x}")
    return "".join(parts)


def as_text(log: LogData) -> str:
    if isinstance(log, str):
        return log
    return "".join(chr(code) for code in log)
