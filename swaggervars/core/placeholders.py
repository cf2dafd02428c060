"""Placeholder syntaxes recognised inside comments.

Every pattern carries exactly one capture group: the referenced identifier.
"""

import re
from typing import Iterable, List, Pattern

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"

# {{VariableName}}
DOUBLE_BRACE_PATTERN = re.compile(r"\{\{(" + IDENTIFIER + r")\}\}")
# ${VariableName}
DOLLAR_BRACE_PATTERN = re.compile(r"\$\{(" + IDENTIFIER + r")\}")
# @VAR(VariableName)
VAR_CALL_PATTERN = re.compile(r"@VAR\((" + IDENTIFIER + r")\)")

# Application order is fixed
BUILTIN_PATTERNS: List[Pattern[str]] = [
    DOUBLE_BRACE_PATTERN,
    DOLLAR_BRACE_PATTERN,
    VAR_CALL_PATTERN,
]


def compile_pattern(expression: str) -> Pattern[str]:
    """Compile a user-supplied placeholder pattern.

    Raises:
        ValueError: If the expression is invalid or does not have exactly
            one capture group.
    """
    try:
        pattern = re.compile(expression)
    except re.error as exc:
        raise ValueError(f"Invalid placeholder pattern {expression!r}: {exc}") from exc
    if pattern.groups != 1:
        raise ValueError(
            f"Placeholder pattern {expression!r} must have exactly one capture group, "
            f"found {pattern.groups}"
        )
    return pattern


def build_patterns(extra: Iterable[str] = ()) -> List[Pattern[str]]:
    """Return the built-in patterns followed by compiled ``extra`` ones."""
    return BUILTIN_PATTERNS + [compile_pattern(expr) for expr in extra]
