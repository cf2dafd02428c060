"""Parsers package.

Language-specific declaration parsers live in sub-packages.
"""

from swaggervars.parsers.base import (
    BaseCodeParser,
    BindingValue,
    FileAccessError,
    ParseError,
    ReplacerError,
)

__all__ = [
    "BaseCodeParser",
    "BindingValue",
    "FileAccessError",
    "ParseError",
    "ReplacerError",
]
