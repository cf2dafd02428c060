"""Conversion of Go literal expression nodes into Python values."""

from __future__ import annotations

import logging
import re
from typing import Optional

from tree_sitter import Node

from swaggervars.parsers.base import BindingValue

logger = logging.getLogger("swaggervars.parsers.go.literals")

# Single-character escapes allowed in interpreted string literals
_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

ESCAPE_RE = re.compile(
    r"\\(x[0-9a-fA-F]{2}|[0-7]{3}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|.)",
    flags=re.DOTALL,
)


def unquote_interpreted(literal: str) -> str:
    """Decode a double-quoted Go string literal, including its quotes.

    \\x and octal escapes denote single bytes, so the result is assembled as
    UTF-8 bytes and decoded once at the end.
    """
    body = literal[1:-1]
    out = bytearray()
    pos = 0
    for match in ESCAPE_RE.finditer(body):
        out += body[pos:match.start()].encode("utf8")
        esc = match.group(1)
        if esc[0] == "x":
            out.append(int(esc[1:], 16))
        elif esc[0] in "01234567" and len(esc) == 3:
            out.append(int(esc, 8) & 0xFF)
        elif esc[0] in "uU":
            out += chr(int(esc[1:], 16)).encode("utf8", errors="replace")
        elif esc in _SIMPLE_ESCAPES:
            out += _SIMPLE_ESCAPES[esc].encode("utf8")
        else:
            out += match.group(0).encode("utf8")
        pos = match.end()
    out += body[pos:].encode("utf8")
    return out.decode("utf8", errors="replace")


def unquote_raw(literal: str) -> str:
    """Strip the backquotes of a raw string literal.

    Carriage returns inside raw strings are discarded, as the Go compiler does.
    """
    return literal[1:-1].replace("\r", "")


def parse_int(literal: str) -> Optional[int]:
    """Convert a Go integer literal (decimal, hex, octal, binary) to int."""
    text = literal.replace("_", "")
    try:
        if text[:2].lower() in ("0x", "0o", "0b"):
            return int(text, 0)
        if len(text) > 1 and text.startswith("0"):
            return int(text, 8)
        return int(text)
    except ValueError:
        logger.debug("Unsupported integer literal: %s", literal)
        return None


def parse_float(literal: str) -> Optional[float]:
    """Convert a Go floating-point literal, hexadecimal form included."""
    text = literal.replace("_", "")
    try:
        if text[:2].lower() == "0x":
            return float.fromhex(text)
        return float(text)
    except ValueError:
        logger.debug("Unsupported float literal: %s", literal)
        return None


def prefix_continuation_lines(value: str, comment_opener: str = "//") -> str:
    """Prefix every line after the first with the comment opener.

    Keeps a multi-line value inside the comment block it is substituted into.
    """
    if "\n" not in value:
        return value
    first, *rest = value.split("\n")
    return "\n".join([first] + [f"{comment_opener} {line}" for line in rest])


def literal_value(node: Node, comment_opener: str = "//") -> Optional[BindingValue]:
    """Return the Python value of a literal expression node.

    Args:
        node: Expression node from a const/var initializer list.
        comment_opener: Prefix used for continuation lines of multi-line strings.

    Returns:
        int, float, bool or str for literal initializers; None for anything
        else (calls, operators, identifiers, composite literals, ...).
    """
    kind = node.type
    text = node.text.decode("utf8", errors="replace")

    if kind == "int_literal":
        return parse_int(text)
    if kind == "float_literal":
        return parse_float(text)
    if kind == "interpreted_string_literal":
        return prefix_continuation_lines(unquote_interpreted(text), comment_opener)
    if kind == "raw_string_literal":
        return prefix_continuation_lines(unquote_raw(text), comment_opener)
    # Older grammars report the predeclared booleans as plain identifiers
    if kind in ("true", "false") or (kind == "identifier" and text in ("true", "false")):
        return text == "true"
    return None
