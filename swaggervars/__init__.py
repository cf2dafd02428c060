"""Swagger Variable Replacer.

Extracts literal constants from Go sources and substitutes them into
placeholder tokens inside comments.
"""

__version__ = "0.1.0"

from swaggervars.core import BindingTable, CommentRewriter, RewriteResult
from swaggervars.parsers import FileAccessError, ParseError, ReplacerError
from swaggervars.runtime import ProcessSummary, VariableReplacer, load_replacer_config

__all__ = [
    "BindingTable",
    "CommentRewriter",
    "FileAccessError",
    "ParseError",
    "ProcessSummary",
    "ReplacerError",
    "RewriteResult",
    "VariableReplacer",
    "load_replacer_config",
]
