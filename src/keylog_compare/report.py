"""Report generation for keystroke log comparisons."""
from __future__ import annotations

from typing import Any, Dict, List

from .config import ReportConfig
from .core.models import ComparisonResult, InputLog
from .utils import as_text, display, render


class ReportBuilder:
    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def build_markdown(self, result: ComparisonResult) -> str:
        backspace, caps_lock = result.markers
        lines: List[str] = []
        lines.append("# Keystroke Log Comparison")
        lines.append("")
        lines.append(f"**Left:** {result.left.label}")
        lines.append(f"**Right:** {result.right.label}")
        lines.append("")
        lines.append("## Verdict")
        lines.append(f"- Rendered text: {'identical' if result.equal else 'different'}")
        lines.append(f"- Comparison time: {result.elapsed_seconds * 1000:.3f} ms")
        lines.append(f"- Backspace marker: {self._format_marker(backspace)}")
        lines.append(f"- Caps-lock marker: {self._format_marker(caps_lock)}")
        lines.append("")
        lines.extend(self._render_log("Left Log", result.left, result.markers))
        lines.extend(self._render_log("Right Log", result.right, result.markers))
        return "\n".join(lines).strip() + "\n"

    def build_json(self, result: ComparisonResult) -> Dict[str, Any]:
        backspace, caps_lock = result.markers
        return {
            "summary": {
                "left": result.left.label,
                "right": result.right.label,
                "equal": result.equal,
                "elapsed_seconds": result.elapsed_seconds,
                "markers": {"backspace": backspace, "caps_lock": caps_lock},
            },
            "logs": {
                "left": self._serialise_log(result.left, result.markers),
                "right": self._serialise_log(result.right, result.markers),
            },
        }

    def _render_log(self, heading: str, entry: InputLog, markers: tuple[int, int]) -> List[str]:
        backspace, caps_lock = markers
        lines = [f"## {heading}"]
        lines.append(f"- Source: {entry.label}")
        lines.append(f"- Size: {entry.size} bytes")
        lines.append(
            f"- Keystrokes: {self._code_span(display(entry.data, backspace=backspace, caps_lock=caps_lock))}"
        )
        if self.config.include_rendered:
            rendered = render(entry.data, backspace=backspace, caps_lock=caps_lock)
            lines.append(f"- Renders as: {self._code_span(rendered)}")
        lines.append("")
        return lines

    def _serialise_log(self, entry: InputLog, markers: tuple[int, int]) -> Dict[str, Any]:
        backspace, caps_lock = markers
        payload: Dict[str, Any] = {
            "label": entry.label,
            "size": entry.size,
            "display": display(entry.data, backspace=backspace, caps_lock=caps_lock),
        }
        if self.config.include_rendered:
            payload["rendered"] = render(entry.data, backspace=backspace, caps_lock=caps_lock)
        if self.config.include_raw:
            payload["raw"] = as_text(entry.data)
        return payload

    @staticmethod
    def _format_marker(code: int) -> str:
        if 32 < code <= 126:
            return f"`{chr(code)}` (0x{code:02x})"
        return f"0x{code:02x}"

    @staticmethod
    def _code_span(value: str) -> str:
        if not value:
            return "_(empty)_"
        if "`" in value:
            return f"`` {value} ``"
        return f"`{value}`"


__all__ = ["ReportBuilder"]
