"""Command-line entrypoint for generating, validating and exporting appeal codes."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from appeal_codes.application.dto import ExportRequest, ValidationRequest
from appeal_codes.application.use_cases import (
    ExportAppealCodesUseCase,
    GenerateAppealCodeUseCase,
    ValidateAppealCodeUseCase,
    build_context,
)

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and validate notice appeal codes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Generate the appeal code for a date and notice type")
    encode.add_argument("date", type=str, help="Notice date (YYYY-MM-DD)")
    encode.add_argument("notice_type", type=int, help="Notice type digit (0-9)")

    validate = commands.add_parser("validate", help="Validate an appeal code and show its details")
    validate.add_argument("code", type=str, help="Six character appeal code")
    validate.add_argument("--today", type=str, help="Override the reference date used for the year (YYYY-MM-DD)")

    export = commands.add_parser("export", help="Export codes for every notice type over a date range")
    export.add_argument("start", type=str, help="First date (YYYY-MM-DD)")
    export.add_argument("end", type=str, help="Last date, inclusive (YYYY-MM-DD)")
    export.add_argument("--format", dest="export_format", choices=("csv", "xlsx"), default="csv")
    export.add_argument("--output", type=str, help="Output path (defaults to the suggested file name)")
    return parser.parse_args(argv)


def _run_encode(args: argparse.Namespace) -> int:
    use_case = GenerateAppealCodeUseCase(build_context())
    print(use_case.execute(date.fromisoformat(args.date), args.notice_type))
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    today = date.fromisoformat(args.today) if args.today else None
    use_case = ValidateAppealCodeUseCase(build_context())
    response = use_case.execute(ValidationRequest(code=args.code, today=today))
    print("Valid Code" if response.valid else "Invalid Code")
    print(response.message)
    return 0 if response.valid else 1


def _run_export(args: argparse.Namespace) -> int:
    request = ExportRequest(
        start=date.fromisoformat(args.start),
        end=date.fromisoformat(args.end),
        export_format=args.export_format,
    )
    response = ExportAppealCodesUseCase(build_context()).execute(request)
    output = Path(args.output) if args.output else Path(response.filename)
    output.write_bytes(response.content)
    print(f"Wrote {response.row_count} appeal codes to {output}")
    return 0


COMMANDS = {
    "encode": _run_encode,
    "validate": _run_validate,
    "export": _run_export,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    try:
        return COMMANDS[args.command](args)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
