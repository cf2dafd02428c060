"""Process command implementation."""

import logging
import sys
import time
from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from swaggervars.parsers.base import ReplacerError
from swaggervars.runtime.config_loader import load_replacer_config
from swaggervars.runtime.replacer import VariableReplacer

logger = logging.getLogger("swaggervars.cli.process")

FATAL_PROCESS_ERRORS = (
    ReplacerError,
    ValidationError,
    OSError,
    ValueError,
)


def _report_fatal(exc: BaseException) -> None:
    """Print a framed diagnostic to stderr."""
    print(f"\n{'=' * 70}", file=sys.stderr)
    print("FATAL ERROR:", file=sys.stderr)
    print(f"{'=' * 70}", file=sys.stderr)
    if isinstance(exc, ReplacerError):
        print(f"File: {exc.path}", file=sys.stderr)
        print(f"Cause: {exc.message}", file=sys.stderr)
    else:
        print(f"Exception: {exc}", file=sys.stderr)
    print(f"{'=' * 70}\n", file=sys.stderr)


def process_command(args, console: Optional[Console] = None) -> int:
    """Execute process command.

    Args:
        args: Parsed command-line arguments.
        console: Console for user-facing output (optional).

    Returns:
        int: Exit code.
    """
    try:
        return _process_command_impl(args, console or Console(highlight=False))
    except FATAL_PROCESS_ERRORS as e:
        logger.debug("Processing aborted", exc_info=True)
        _report_fatal(e)
        return 1


def _process_command_impl(args, console: Console) -> int:
    """Internal implementation of process command."""
    dry_run = getattr(args, "dry_run", False)
    backup = getattr(args, "backup", False)
    logger.debug("Path: %s", args.path)
    logger.debug("Dry run: %s, backup: %s", dry_run, backup)

    start_time = time.time()

    config = load_replacer_config(getattr(args, "config", None))
    replacer = VariableReplacer(
        config=config,
        dry_run=dry_run,
        backup=backup,
        console=console,
    )

    summary = replacer.process(args.path)

    elapsed = time.time() - start_time
    logger.info(
        "Processed %d files in %.2fs: %d substitutions, %d files modified, %d unresolved",
        len(summary.files),
        elapsed,
        summary.substitutions,
        len(summary.modified_files),
        len(summary.unresolved),
    )

    console.print("Processing completed!", markup=False)
    return 0
