"""Command-line interface for the night release calculator."""

import argparse
import os
import sys
from dataclasses import replace
from typing import Optional

from nightrelcalc.config import DEFAULT_CONFIG, AppConfig
from nightrelcalc.domain.clock import parse_decimal_hours
from nightrelcalc.errors import ValidationError
from nightrelcalc.output.pdf_generator import PDFGenerator
from nightrelcalc.output.text_generator import TextGenerator
from nightrelcalc.scheduling.calculator import compute


def build_parser(config: AppConfig = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    """Create the argument parser with defaults taken from config."""
    defaults = config.calculator
    parser = argparse.ArgumentParser(
        prog="nightrelcalc",
        description="Night release calculator (CLI or web)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --start 18:30 --length 4              Scenarios for a 4h release
  %(prog)s --start 20:00 --length 5 --combine 2  Add a 2h + 3h split scenario
  %(prog)s --start 22:00 --length 3 --pdf r.pdf  Also write a PDF summary
  %(prog)s --port 8484                           Run the web UI
        """,
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"nightrelcalc v{config.version}",
        help="Show version and exit",
    )
    parser.add_argument("--start", type=str, default="", help="Release start HH:MM")
    parser.add_argument(
        "--length",
        type=str,
        default="0",
        help="Release length in hours (e.g. 4, 3.5)",
    )
    parser.add_argument(
        "--combine",
        type=str,
        default=None,
        help="Hours of release included in full day (optional)",
    )
    parser.add_argument(
        "--full",
        type=str,
        default="0",
        help="Full workday hours (0 = derive from normal-start/normal-end)",
    )
    parser.add_argument(
        "--port",
        type=str,
        default=None,
        help=f"Run web UI on this port (e.g. 8484, env {config.port_env_var})",
    )
    parser.add_argument(
        "--normal-start",
        type=str,
        default=defaults.normal_start,
        help=f"Normal work start time (HH:MM, default {defaults.normal_start})",
    )
    parser.add_argument(
        "--normal-end",
        type=str,
        default=defaults.normal_end,
        help=f"Normal work end time (HH:MM, default {defaults.normal_end})",
    )
    parser.add_argument(
        "--min-rest",
        type=str,
        default=f"{defaults.min_rest_hours:g}",
        help=f"Minimum rest after release end in hours (default {defaults.min_rest_hours:g})",
    )
    parser.add_argument(
        "--max-overtime",
        type=str,
        default=f"{defaults.max_overtime_hours:g}",
        help=(
            "Maximum allowed overtime in hours "
            f"(legal cap, default {defaults.max_overtime_hours:g})"
        ),
    )
    parser.add_argument("--pdf", type=str, help="Also write the result to this PDF file")
    return parser


def run_web(port: int, config: AppConfig) -> None:
    """Print listen addresses and serve the web UI."""
    from nightrelcalc.web import create_app, print_listen_addresses

    print_listen_addresses(port)
    app = create_app(config)
    app.run(host="0.0.0.0", port=port)


def run_cli(args: argparse.Namespace) -> None:
    """Compute and print the scenarios for parsed arguments.

    Raises:
        ValidationError: If any argument is invalid.
    """
    result = compute(
        args.start,
        args.length,
        combine_hours=args.combine,
        full_day_hours=args.full,
        normal_start=args.normal_start,
        normal_end=args.normal_end,
        min_rest_hours=args.min_rest,
        max_overtime_hours=args.max_overtime,
    )
    print(TextGenerator().generate_to_string(result), end="")

    if args.pdf:
        PDFGenerator(version=DEFAULT_CONFIG.version).generate(result, args.pdf)
        print(f"PDF written to {args.pdf}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    config = DEFAULT_CONFIG
    parser = build_parser(config)
    args = parser.parse_args(argv)

    port_text = args.port
    if port_text is None:
        port_text = os.environ.get(config.port_env_var, "")
    try:
        port = int(port_text.strip() or 0)
    except ValueError:
        print(f"invalid port {port_text!r}", file=sys.stderr)
        return 1

    if port > 0:
        # Flags for the normal day and limits become the web fallbacks.
        calculator = replace(
            config.calculator,
            normal_start=args.normal_start,
            normal_end=args.normal_end,
        )
        try:
            calculator = replace(
                calculator,
                min_rest_hours=parse_decimal_hours(args.min_rest, field="min rest"),
                max_overtime_hours=parse_decimal_hours(
                    args.max_overtime, field="max overtime"
                ),
            )
        except ValidationError as exc:
            print(exc, file=sys.stderr)
            return 1
        run_web(port, replace(config, calculator=calculator))
        return 0

    if not args.start.strip():
        print("--start is required (or use --port)", file=sys.stderr)
        return 1

    try:
        run_cli(args)
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
