"""CLI entry point for the applicant ranking tool."""

import argparse
import logging
import sys

from applicants.core.config import Settings
from applicants.pipeline.orchestrator import process_file, write_report

USAGE_NOTICE = "Please provide the input file path"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Deduplicate, adjust and rank applicant submissions from a CSV file",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the submissions CSV (name,email,delivery_datetime,score)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Path of the JSON report (default: output.path from config, output.json)",
    )
    parser.add_argument(
        "--config",
        help="Optional settings YAML file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report instead of writing it",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(config_path: str | None) -> Settings:
    if config_path is None:
        return Settings()
    return Settings.from_yaml(config_path)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if not args.input:
        print(USAGE_NOTICE)
        return

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    output_path = args.output or settings.output.path

    try:
        report_json = process_file(args.input, encoding=settings.input.encoding)
        if args.dry_run:
            print(report_json)
            return
        written = write_report(report_json, output_path, encoding=settings.output.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error processing file: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Result saved to {written}")


if __name__ == "__main__":
    main()
