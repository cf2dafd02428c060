"""Base declaration parser interface and error hierarchy.

Each source language provides one declaration parser that turns a file into
a mapping of identifier -> literal value. The rewriter never looks at syntax
trees itself; it only consumes these mappings.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger("swaggervars.parsers.base")

BindingValue = Union[int, float, bool, str]


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================

class ReplacerError(Exception):
    """Base class for fatal errors raised while processing a file.

    These errors abort the current run; the CLI reports them together with
    the offending file.
    """

    def __init__(self, path: Union[str, Path], message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class ParseError(ReplacerError):
    """Source file is not syntactically valid.

    Raised before any binding from the file is recorded.
    """

    def __init__(
        self,
        path: Union[str, Path],
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(path, message)


class FileAccessError(ReplacerError):
    """Source file could not be read or written."""

    def __init__(self, path: Union[str, Path], cause: OSError) -> None:
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(path, detail)


class BaseCodeParser(ABC):
    """Base class for declaration parsers.

    Subclasses extract literal-valued declarations from one source file.
    parse_file() must not touch shared state; merging results into a
    binding table is the caller's job.
    """

    @abstractmethod
    def parse_file(self, file_path: Path) -> Dict[str, BindingValue]:
        """Parse a single source file.

        Args:
            file_path: Path to source file.

        Returns:
            Dict[str, BindingValue]: Bindings in declaration order.

        Raises:
            ParseError: If the file is not valid source.
            FileAccessError: If the file cannot be read.
        """
        raise NotImplementedError

