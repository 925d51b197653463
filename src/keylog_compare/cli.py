"""Command-line interface for the keystroke log comparator."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

if __package__ is None or __package__ == "":  # pragma: no cover - script execution path
    import sys

    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    from keylog_compare.config import ComparisonConfig, ReportConfig
    from keylog_compare.core.comparer import Comparer
    from keylog_compare.core.models import InputLog
    from keylog_compare.report import ReportBuilder
    from keylog_compare.utils import decode_escapes
else:  # pragma: no cover - package execution path
    from .config import ComparisonConfig, ReportConfig
    from .core.comparer import Comparer
    from .core.models import InputLog
    from .report import ReportBuilder
    from .utils import decode_escapes

logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check whether two keystroke logs render to the same text"
    )
    parser.add_argument("left", help="First log; escapes such as \\0 (backspace) and \\t (caps lock) are decoded")
    parser.add_argument("right", help="Second log, in the same form as the first")
    parser.add_argument("--files", action="store_true", help="Treat LEFT and RIGHT as paths and compare their raw bytes")
    parser.add_argument("--backspace", default="\\0", help="Character used as the backspace marker (escapes allowed)")
    parser.add_argument("--caps-lock", default="\\t", help="Character used as the caps-lock toggle marker (escapes allowed)")
    parser.add_argument("--no-rendered", action="store_true", help="Leave the rendered text out of reports")
    parser.add_argument("--include-raw", action="store_true", help="Include the raw log contents in the JSON report")
    parser.add_argument("--output", type=Path, help="Path to save Markdown report; prints to stdout if omitted")
    parser.add_argument("--json-output", type=Path, help="Optional path for JSON report payload")
    parser.add_argument("--quiet", action="store_true", help="Do not print the report; rely on the exit status")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        comparison_config = ComparisonConfig(
            backspace=_parse_marker(args.backspace, "--backspace"),
            caps_lock=_parse_marker(args.caps_lock, "--caps-lock"),
            check_ascii=True,
        )
        comparer = Comparer(comparison_config)
        left = _load_log(args.left, "left", from_file=args.files)
        right = _load_log(args.right, "right", from_file=args.files)
        result = comparer.compare(left, right)
    except (OSError, ValueError) as exc:
        logger.error("Unable to compare logs: %s", exc)
        return EXIT_INPUT_ERROR

    logger.info("Logs %s", "render identically" if result.equal else "differ")
    report_config = ReportConfig(
        output_path=str(args.output) if args.output else None,
        json_output_path=str(args.json_output) if args.json_output else None,
        include_rendered=not args.no_rendered,
        include_raw=args.include_raw,
    )
    builder = ReportBuilder(report_config)
    markdown = builder.build_markdown(result)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(markdown, encoding="utf-8")
        logger.info("Markdown report written to %s", args.output)
    elif not args.quiet:
        print(markdown)

    if args.json_output:
        _ensure_parent(args.json_output)
        payload = builder.build_json(result)
        args.json_output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("JSON report written to %s", args.json_output)

    return EXIT_EQUAL if result.equal else EXIT_DIFFERENT


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_marker(value: str, option: str) -> int:
    decoded = decode_escapes(value)
    if len(decoded) != 1:
        raise ValueError(f"{option} expects a single character, got {value!r}")
    return decoded[0]


def _load_log(value: str, side: str, *, from_file: bool) -> InputLog:
    if from_file:
        path = Path(value)
        data = path.read_bytes()
        logger.debug("Read %d bytes for the %s log from %s", len(data), side, path)
        return InputLog(label=str(path), data=data)
    return InputLog(label=f"{side} argument", data=decode_escapes(value))


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
