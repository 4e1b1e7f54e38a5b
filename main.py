#!/usr/bin/env python3
"""ChronoText - Temporal Expression Recognizer

Command line entry point: recognizes the temporal expressions in a sentence
and prints them as JSON.
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dateutil import parser as date_parser

# Adding src to path for development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from chronotext.core.config_manager import ConfigManager  # noqa: E402
from chronotext.core.error_handler import ChronoTextError, ErrorHandler, ParseError  # noqa: E402
from chronotext.core.logging_manager import LoggingManager  # noqa: E402
from chronotext.processors.recognizer import ModelCache, recognize_datetime  # noqa: E402


def parse_reference(value: Optional[str]) -> datetime:
    """Reference date from the command line, now when omitted.

    Raises:
        ParseError: The value is not an ISO 8601 date or date-time
    """
    if not value:
        return datetime.now()
    try:
        return date_parser.isoparse(value)
    except ValueError as e:
        raise ParseError(f"Invalid reference date '{value}': {e}") from e


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ChronoText temporal expression recognizer")
    parser.add_argument("text", nargs="+", help="Sentence to analyse")
    parser.add_argument("--reference", "-r", help="Reference date, ISO 8601 (default: now)")
    parser.add_argument("--culture", "-c", help="Culture code (default: from configuration)")
    parser.add_argument("--config", help="Directory holding configuration files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log to the console at DEBUG level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ChronoText command line."""
    args = build_arg_parser().parse_args(argv)
    error_handler = ErrorHandler()

    try:
        config = ConfigManager(Path(args.config) if args.config else None).load_config()

        LoggingManager().configure(
            level="DEBUG" if args.verbose else config.logging.level,
            log_to_console=args.verbose or config.logging.log_to_console,
            log_to_file=config.logging.log_to_file,
            log_dir=config.logging.log_dir
        )

        reference = parse_reference(args.reference)
        # None selects the process wide cache; a private one keeps this run uncached
        cache = None if config.cache.enabled else ModelCache()
        entities = recognize_datetime(
            " ".join(args.text),
            culture=args.culture or config.culture,
            reference=reference,
            cache=cache,
            resolution_config=config.resolution
        )
    except ChronoTextError as e:
        error_handler.handle_error(e, context="chronotext")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(json.dumps([entity.to_dict() for entity in entities], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
