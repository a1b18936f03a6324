"""Convert an ASC timetable XML export to normalized JSON.

Run with: asc-timetable export.xml
Lenient:  asc-timetable export.xml --lenient
Output:   asc-timetable export.xml --output data/timetable.json
Stdin:    cat export.xml | asc-timetable -

Exit codes:
  0 = success (JSON on stdout, or file written for --output)
  1 = parse or read error (details on stderr)
  2 = invalid command-line usage
"""

import argparse
import sys
from pathlib import Path

from asc_timetable.config import get_config
from asc_timetable.errors import AscXmlError
from asc_timetable.logging import get_logger, setup_logging
from asc_timetable.parse import parse_asc_xml

log = get_logger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        prog="asc-timetable",
        description="Convert an ASC timetable XML export to normalized JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Path to the XML export, or '-' for stdin.")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the JSON document to this path instead of stdout.",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop malformed entities instead of failing, keep unknown lesson fields.",
    )
    parser.add_argument(
        "--no-coerce-numbers",
        action="store_true",
        help="Do not extract lesson day/period numbers.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default from ASC_JSON_INDENT, 2).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default from ASC_LOG_LEVEL, INFO).",
    )
    return parser.parse_args(argv)


def _read_input(source: str) -> bytes:
    """Read raw bytes so the XML declaration decides the encoding."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = get_config()

    setup_logging(
        json_output=args.log_json or config.log_json,
        log_level=args.log_level or config.log_level,
    )

    options = config.parse_options()
    overrides = {}
    if args.lenient:
        overrides["strict"] = False
    if args.no_coerce_numbers:
        overrides["coerce_numbers"] = False
    if overrides:
        options = options.model_copy(update=overrides)

    try:
        data = _read_input(args.input)
    except OSError as exc:
        log.error("input_read_failed", input=args.input, error=str(exc))
        return 1

    log.info("parse_started", input=args.input, strict=options.strict)
    try:
        document = parse_asc_xml(data, options)
    except AscXmlError as exc:
        log.error("parse_failed", code=exc.code, path=exc.path, error=exc.message)
        return 1

    entities = document.entities
    log.info(
        "parse_completed",
        rooms=len(entities.rooms),
        teachers=len(entities.teachers),
        classes=len(entities.classes),
        subjects=len(entities.subjects),
        periods=None if entities.periods is None else len(entities.periods),
        lessons=len(entities.lessons),
    )

    indent = args.indent if args.indent is not None else config.json_indent
    payload = document.to_json(indent=indent or None)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding="utf-8")
        log.info("document_written", output=str(output_path))
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
