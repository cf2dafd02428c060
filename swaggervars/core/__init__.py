"""Binding table, placeholder syntaxes and the comment rewriter."""

from swaggervars.core.bindings import BindingTable, format_value
from swaggervars.core.placeholders import BUILTIN_PATTERNS, build_patterns, compile_pattern
from swaggervars.core.rewriter import CommentRewriter, RewriteResult, backup_file

__all__ = [
    "BUILTIN_PATTERNS",
    "BindingTable",
    "CommentRewriter",
    "RewriteResult",
    "backup_file",
    "build_patterns",
    "compile_pattern",
    "format_value",
]
