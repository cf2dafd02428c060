"""File scanner using scandir and generator pattern."""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Generator, List, Optional

logger = logging.getLogger("swaggervars.utils.scanner")

# Version-control metadata is never descended into
DEFAULT_IGNORES = [".git", ".svn", ".hg"]


def _matches_any(path: Path, root_path: Path, patterns: List[str]) -> bool:
    """Check a path against glob patterns by file name and relative path."""
    rel_path = path.relative_to(root_path)
    str_path = str(rel_path).replace(os.sep, "/")

    for pattern in patterns:
        if fnmatch.fnmatch(path.name, pattern):
            return True
        if fnmatch.fnmatch(str_path, pattern) or fnmatch.fnmatch(
            str_path, f"**/{pattern}"
        ):
            return True

    return False


def scan_files(
    root_path: Path,
    suffix: str,
    exclude_suffix: Optional[str] = None,
    ignore_patterns: Optional[List[str]] = None,
    recursive: bool = True,
) -> Generator[Path, None, None]:
    """Scan files by name suffix, respecting ignores.

    Files are yielded in a deterministic order: entries of a directory
    sorted by name, each sub-directory fully visited before the next one.

    Args:
        root_path: Root directory to scan.
        suffix: Required file name suffix (e.g. '.go').
        exclude_suffix: File name suffix to skip (e.g. '_test.go').
        ignore_patterns: Glob patterns for files or directories to skip.
        recursive: Whether to scan recursively.

    Yields:
        Path objects for matching files.
    """
    root_path = Path(root_path)
    ignores = (ignore_patterns or []) + DEFAULT_IGNORES

    stack = [root_path]

    while stack:
        current_dir = stack.pop()

        # Unreadable directories propagate as OSError
        entries = sorted(os.scandir(current_dir), key=lambda e: e.name)

        dirs = []
        files = []

        for entry in entries:
            path = Path(entry.path)

            if _matches_any(path, root_path, ignores):
                logger.debug("Ignoring %s", path)
                continue

            if entry.is_dir():
                if recursive:
                    dirs.append(path)
            elif entry.name.endswith(suffix):
                if exclude_suffix and entry.name.endswith(exclude_suffix):
                    continue
                files.append(path)

        yield from files

        # Reversed so sub-directories pop in name order
        stack.extend(reversed(dirs))
