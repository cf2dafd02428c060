"""Go declaration parser regression tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from swaggervars.parsers.base import FileAccessError, ParseError
from swaggervars.parsers.go.code_parser import GoDeclarationParser


def _parse(source: str) -> dict:
    return GoDeclarationParser().parse_source(source)


def test_const_group_pairs_names_with_values() -> None:
    """Every name with an initializer at its position gets a binding."""
    bindings = _parse(
        """package main

const (
	StatusSuccess = 200
	StatusCreated = 201
	A, B, C       = 1, 2, 3
)
"""
    )

    assert bindings == {
        "StatusSuccess": 200,
        "StatusCreated": 201,
        "A": 1,
        "B": 2,
        "C": 3,
    }


def test_names_without_initializer_are_skipped() -> None:
    """If the initializer list is shorter than the name list, extra names are dropped."""
    bindings = _parse(
        """package main

var X, Y, Z = 10, 20
const (
	First = iota
	Second
)
"""
    )

    assert bindings == {"X": 10, "Y": 20}


def test_typed_const_kept_typed_var_skipped() -> None:
    """Typed constants bind; only type-inferred variables bind."""
    bindings = _parse(
        """package main

const Limit int = 50
var Timeout int = 30
var Name = "svc"
var Enabled bool
"""
    )

    assert bindings == {"Limit": 50, "Name": "svc"}


def test_literal_kinds() -> None:
    """Integers, floats, strings and booleans are resolved to Python values."""
    bindings = _parse(
        """package main

const (
	Decimal = 42
	Hex     = 0x1F
	Octal   = 0644
	Big     = 1_000_000
	Ratio   = 2.5
	Exp     = 1e3
	Message = "hello \\"world\\""
	Tab     = "a\\tb"
	Raw     = `C:\\path`
	Yes     = true
	No      = false
)
"""
    )

    assert bindings["Decimal"] == 42
    assert bindings["Hex"] == 31
    assert bindings["Octal"] == 420
    assert bindings["Big"] == 1000000
    assert bindings["Ratio"] == 2.5
    assert bindings["Exp"] == 1000.0
    assert bindings["Message"] == 'hello "world"'
    assert bindings["Tab"] == "a\tb"
    assert bindings["Raw"] == "C:\\path"
    assert bindings["Yes"] is True
    assert bindings["No"] is False


def test_non_literal_initializers_produce_no_binding() -> None:
    """Calls, references, operators and composite literals are ignored."""
    bindings = _parse(
        """package main

import "strings"

const Base = 100

var (
	Upper    = strings.ToUpper("x")
	Alias    = Base
	Sum      = Base + 1
	Negative = -1
	Wrapped  = (5)
	Items    = []int{1, 2}
	Nothing  = nil
	Kept     = "ok"
)
"""
    )

    assert bindings == {"Base": 100, "Kept": "ok"}


def test_multiline_string_lines_are_prefixed() -> None:
    """Continuation lines of a multi-line value carry the comment opener."""
    bindings = _parse(
        """package main

const Escaped = "line1\\nline2"
const Raw = `first
second
third`
"""
    )

    assert bindings["Escaped"] == "line1\n// line2"
    assert bindings["Raw"] == "first\n// second\n// third"


def test_custom_comment_marker_used_for_prefix() -> None:
    parser = GoDeclarationParser(comment_marker="#")
    bindings = parser.parse_source('package main\nconst Doc = "a\\nb"\n')
    assert bindings["Doc"] == "a\n# b"


def test_declarations_inside_functions_are_collected() -> None:
    """The whole tree is walked, not only top-level declarations."""
    bindings = _parse(
        """package main

func handler() {
	const local = "inner"
	var counter = 3
	short := 4
	_ = short
}
"""
    )

    assert bindings == {"local": "inner", "counter": 3}


def test_later_declaration_wins() -> None:
    bindings = _parse(
        """package main

const Version = "v1"

func f() {
	var Version = "v2"
	_ = Version
}
"""
    )

    assert bindings["Version"] == "v2"


def test_invalid_source_raises_parse_error(tmp_path: Path) -> None:
    """Syntax errors abort extraction with the file and position."""
    go_file = tmp_path / "broken.go"
    go_file.write_text("package main\n\nconst (\n\tA = \n", encoding="utf-8")

    with pytest.raises(ParseError) as excinfo:
        GoDeclarationParser().parse_file(go_file)

    assert excinfo.value.path == go_file
    assert excinfo.value.line is not None
    assert "broken.go" in str(excinfo.value)


def test_missing_file_raises_file_access_error(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        GoDeclarationParser().parse_file(tmp_path / "missing.go")

    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_parse_file_reads_from_disk(tmp_path: Path) -> None:
    go_file = tmp_path / "consts.go"
    go_file.write_text(
        'package api\n\n// Version of the API\nvar APIVersion = "v1"\n',
        encoding="utf-8",
    )

    assert GoDeclarationParser().parse_file(go_file) == {"APIVersion": "v1"}
