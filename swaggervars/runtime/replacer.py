"""Two-pass replacer: extract declarations, then rewrite comments.

In directory mode the extraction pass covers every target file before any
file is rewritten, so a placeholder in one file can resolve a constant
declared in another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from swaggervars.config import ReplacerConfig
from swaggervars.core.bindings import BindingTable
from swaggervars.core.placeholders import build_patterns
from swaggervars.core.rewriter import CommentRewriter, RewriteResult, backup_file
from swaggervars.parsers.base import BaseCodeParser, FileAccessError
from swaggervars.parsers.go.code_parser import GoDeclarationParser
from swaggervars.utils.scanner import scan_files

logger = logging.getLogger("swaggervars.runtime.replacer")


@dataclass
class ProcessSummary:
    """Aggregate outcome of one ``process`` call."""

    files: List[Path] = field(default_factory=list)
    results: List[RewriteResult] = field(default_factory=list)

    @property
    def modified_files(self) -> List[Path]:
        return [r.path for r in self.results if r.modified]

    @property
    def substitutions(self) -> int:
        return sum(r.substitutions for r in self.results)

    @property
    def unresolved(self) -> List[str]:
        return [name for r in self.results for name in r.unresolved]


class VariableReplacer:
    """Replaces variable references in comments with declared literal values.

    Args:
        config: Replacer configuration; defaults apply when omitted.
        dry_run: Report changes without writing files.
        backup: Write ``<file>.backup`` before overwriting a file.
        console: Console for progress and substitution echo.
        parser: Declaration parser; a Go parser by default.
    """

    def __init__(
        self,
        config: Optional[ReplacerConfig] = None,
        dry_run: bool = False,
        backup: bool = False,
        console: Optional[Console] = None,
        parser: Optional[BaseCodeParser] = None,
    ) -> None:
        self.config = config or ReplacerConfig.default()
        self.dry_run = dry_run
        self.backup = backup
        self.console = console or Console(highlight=False)
        self.parser = parser or GoDeclarationParser(self.config.comment_marker)
        self.bindings = BindingTable(self.config.constant_map)
        self.rewriter = CommentRewriter(
            self.bindings,
            patterns=build_patterns(self.config.patterns),
            comment_marker=self.config.comment_marker,
            console=self.console,
        )

    def _echo(self, message: str) -> None:
        self.console.print(message, markup=False, emoji=False, soft_wrap=True)

    def process(self, path: Union[str, Path]) -> ProcessSummary:
        """Process a directory tree or a single file.

        Raises:
            ParseError: If a target file is not valid source.
            FileAccessError: If the path or a target file is inaccessible.
        """
        target = Path(path)
        if target.is_dir():
            self._echo(f"Processing directory: {target}")
            return self.process_directory(target)
        if not target.exists():
            raise FileAccessError(
                target, FileNotFoundError(2, "No such file or directory", str(target))
            )
        self._echo(f"Processing file: {target}")
        return self.process_file(target)

    def collect_files(self, directory: Union[str, Path]) -> List[Path]:
        """List the target files under ``directory`` in processing order."""
        directory = Path(directory)
        try:
            return list(
                scan_files(
                    directory,
                    suffix=self.config.source_suffix,
                    exclude_suffix=self.config.test_suffix,
                    ignore_patterns=self.config.exclude_files,
                )
            )
        except OSError as exc:
            raise FileAccessError(directory, exc) from exc

    def process_directory(self, directory: Union[str, Path]) -> ProcessSummary:
        """Extract from every target file, then rewrite every target file."""
        files = self.collect_files(directory)
        summary = ProcessSummary(files=files)
        logger.debug("Found %d target files under %s", len(files), directory)

        for file_path in files:
            self._echo(f"Processing: {file_path}")
            self.extract_file(file_path)

        logger.debug("Extraction complete: %d bindings", len(self.bindings))

        for file_path in files:
            self._echo(f"Processing: {file_path}")
            summary.results.append(self.rewrite_file(file_path))

        return summary

    def process_file(self, file_path: Union[str, Path]) -> ProcessSummary:
        """Extract from and then rewrite a single file."""
        file_path = Path(file_path)
        self.extract_file(file_path)
        result = self.rewrite_file(file_path)
        return ProcessSummary(files=[file_path], results=[result])

    def extract_file(self, file_path: Union[str, Path]) -> int:
        """Add the declarations of one file to the binding table.

        Returns:
            Number of bindings found in the file.
        """
        bindings = self.parser.parse_file(Path(file_path))
        self.bindings.update(bindings)
        return len(bindings)

    def rewrite_file(self, file_path: Union[str, Path]) -> RewriteResult:
        """Rewrite placeholders in one file using the current bindings."""
        return self.rewriter.rewrite_file(
            file_path, dry_run=self.dry_run, backup=self.backup
        )

    def backup_file(self, file_path: Union[str, Path]) -> Path:
        return backup_file(file_path)


__all__ = ["ProcessSummary", "VariableReplacer"]
