"""Comment rewriter: substitutes placeholders on comment lines.

Files are read as raw text and split on ``\\n`` only, so line endings and a
trailing newline are preserved exactly. A file is written back in one piece,
and only when at least one line changed.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Pattern, Sequence, Union

from rich.console import Console

from swaggervars.core.bindings import BindingTable
from swaggervars.core.placeholders import BUILTIN_PATTERNS
from swaggervars.parsers.base import FileAccessError

logger = logging.getLogger("swaggervars.core.rewriter")

# Round-trips bytes that are not valid UTF-8
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _printable(text: str) -> str:
    """Replace escaped undecodable bytes so the text can be echoed."""
    return text.encode(_ENCODING, errors=_ERRORS).decode(_ENCODING, errors="replace")


@dataclass
class RewriteResult:
    """Outcome of rewriting one file."""

    path: Path
    modified: bool = False
    written: bool = False
    substitutions: int = 0
    unresolved: List[str] = field(default_factory=list)
    backup_path: Optional[Path] = None


class CommentRewriter:
    """Rewrites placeholders found on comment-bearing lines.

    Args:
        bindings: Completed binding table (read-only here).
        patterns: Placeholder patterns, applied in order. Defaults to the
            three built-in syntaxes.
        comment_marker: Substring that makes a line comment-bearing.
        console: Console used to echo substitutions.
    """

    def __init__(
        self,
        bindings: BindingTable,
        patterns: Optional[Sequence[Pattern[str]]] = None,
        comment_marker: str = "//",
        console: Optional[Console] = None,
    ) -> None:
        self.bindings = bindings
        self.patterns = list(patterns) if patterns is not None else list(BUILTIN_PATTERNS)
        self.comment_marker = comment_marker
        self.console = console or Console(highlight=False)

    def _echo(self, message: str) -> None:
        self.console.print(message, markup=False, emoji=False, soft_wrap=True)

    def is_comment_line(self, line: str) -> bool:
        return self.comment_marker in line

    def rewrite_line(self, line: str, result: Optional[RewriteResult] = None) -> str:
        """Apply every pattern to ``line`` and return the rewritten text.

        Each pattern runs on the output of the previous one. Unknown names
        are left as written and reported as warnings.
        """
        source = result.path if result is not None else None
        crlf = line.endswith("\r")
        rewritten = line

        for pattern in self.patterns:
            def substitute(match) -> str:
                name = match.group(1)
                value = self.bindings.resolve(name)
                if value is None:
                    if source is not None:
                        logger.warning("Variable '%s' not found (%s)", name, source)
                    else:
                        logger.warning("Variable '%s' not found", name)
                    if result is not None:
                        result.unresolved.append(name)
                    return match.group(0)
                if result is not None:
                    result.substitutions += 1
                if crlf:
                    # Continuation lines follow the line ending of the host line
                    value = value.replace("\r\n", "\n").replace("\n", "\r\n")
                return value

            rewritten = pattern.sub(substitute, rewritten)

        return rewritten

    def rewrite_text(self, text: str, result: Optional[RewriteResult] = None) -> str:
        """Rewrite all comment-bearing lines of ``text``."""
        lines = text.split("\n")

        for index, line in enumerate(lines):
            if not self.is_comment_line(line):
                continue
            new_line = self.rewrite_line(line, result)
            if new_line != line:
                lines[index] = new_line
                if result is not None:
                    result.modified = True
                self._echo(f"Replaced: {_printable(line.rstrip())}")
                self._echo(f"    With: {_printable(new_line.rstrip())}")

        return "\n".join(lines)

    def rewrite_file(
        self,
        file_path: Union[str, Path],
        dry_run: bool = False,
        backup: bool = False,
    ) -> RewriteResult:
        """Rewrite placeholders in a file and write it back if it changed.

        Args:
            file_path: File to rewrite.
            dry_run: Report changes without writing.
            backup: Copy the original to ``<file>.backup`` before writing.

        Returns:
            RewriteResult for the file.

        Raises:
            FileAccessError: If the file cannot be read or written.
        """
        path = Path(file_path)
        result = RewriteResult(path=path)

        try:
            content = path.read_bytes().decode(_ENCODING, errors=_ERRORS)
        except OSError as exc:
            raise FileAccessError(path, exc) from exc

        new_content = self.rewrite_text(content, result)

        if not result.modified:
            logger.debug("No placeholders rewritten in %s", path)
            return result

        if dry_run:
            logger.info("DRY RUN: Would modify %s", path)
            self._echo(f"DRY RUN: Would modify {path}")
            return result

        if backup:
            result.backup_path = backup_file(path)

        try:
            path.write_bytes(new_content.encode(_ENCODING, errors=_ERRORS))
        except OSError as exc:
            raise FileAccessError(path, exc) from exc

        result.written = True
        logger.debug(
            "Rewrote %s: %d substitutions, %d unresolved",
            path,
            result.substitutions,
            len(result.unresolved),
        )
        return result


def backup_file(file_path: Union[str, Path]) -> Path:
    """Copy ``file_path`` to ``<file_path>.backup``.

    Returns:
        Path of the backup copy.

    Raises:
        FileAccessError: If the copy fails.
    """
    path = Path(file_path)
    backup_path = path.with_name(path.name + ".backup")
    try:
        shutil.copyfile(path, backup_path)
    except OSError as exc:
        raise FileAccessError(path, exc) from exc
    logger.info("Backup written to %s", backup_path)
    return backup_path
