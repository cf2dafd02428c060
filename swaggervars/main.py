"""Main CLI entry point for swaggervars.

Provides commands: process, sample
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from swaggervars.cli.process import process_command
from swaggervars.cli.sample import sample_command

logger = logging.getLogger("swaggervars.cli")

EPILOG = """\
Supported variable patterns (inside // comments):
  {{VariableName}}     - Double braces
  ${VariableName}      - Dollar brace
  @VAR(VariableName)   - Function-like

Constants and type-inferred variables with literal values (numbers,
strings, booleans) are extracted from the Go files and substituted into
the comments. In directory mode, *_test.go files are skipped.
"""


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swaggervars",
        description=(
            "Swagger Variable Replacer - replaces variable references in Go "
            "comments with the values of declared constants"
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    process_parser = subparsers.add_parser(
        "process",
        help="Process a single Go file or every Go file under a directory",
    )
    process_parser.add_argument(
        "path",
        help="Go file or directory to process",
    )
    process_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the substitutions without writing any file",
    )
    process_parser.add_argument(
        "--backup",
        action="store_true",
        help="Copy each modified file to <file>.backup before writing it",
    )
    process_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. Keys: patterns, exclude_files, "
            "constant_map, comment_marker, source_suffix, test_suffix."
        ),
    )

    sample_parser = subparsers.add_parser(
        "sample",
        help="Create a sample Go file demonstrating all placeholder syntaxes",
    )
    sample_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: sample.go)",
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "process":
        return process_command(args)
    elif args.command == "sample":
        return sample_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
