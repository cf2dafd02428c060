"""End-to-end tests for the two-pass replacer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from swaggervars.cli.sample import create_sample_file
from swaggervars.config import ReplacerConfig
from swaggervars.parsers.base import FileAccessError, ParseError
from swaggervars.runtime.replacer import VariableReplacer


def _replacer(**kwargs) -> VariableReplacer:
    console = Console(file=io.StringIO(), highlight=False, width=200)
    return VariableReplacer(console=console, **kwargs)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_directory_mode_resolves_across_files(tmp_path: Path) -> None:
    """Constants from one file resolve placeholders in another."""
    _write(
        tmp_path / "consts" / "status.go",
        "package consts\n\nconst (\n\tStatusSuccess = 200\n\tMessageOK = \"fine\"\n)\n",
    )
    handler = _write(
        tmp_path / "api" / "handler.go",
        "package api\n\n// @Success {{StatusSuccess}} {object} User \"{{MessageOK}}\"\n"
        "func Get() {}\n",
    )

    summary = _replacer().process(tmp_path)

    assert handler.read_text(encoding="utf-8") == (
        "package api\n\n// @Success 200 {object} User \"fine\"\nfunc Get() {}\n"
    )
    assert summary.modified_files == [handler]
    assert summary.substitutions == 2
    assert summary.unresolved == []


def test_directory_mode_skips_test_files(tmp_path: Path) -> None:
    """*_test.go files are neither read for constants nor rewritten."""
    _write(tmp_path / "helpers_test.go", "package api\n\n// {{Status}}\nconst Hidden = 1\n")
    main_file = _write(tmp_path / "main.go", "package api\n\n// {{Hidden}}\nconst Status = 5\n")

    replacer = _replacer()
    summary = replacer.process(tmp_path)

    assert summary.files == [main_file]
    assert "Hidden" not in replacer.bindings
    assert (tmp_path / "helpers_test.go").read_text(encoding="utf-8").startswith(
        "package api\n\n// {{Status}}"
    )
    assert main_file.read_text(encoding="utf-8") == "package api\n\n// {{Hidden}}\nconst Status = 5\n"
    assert summary.unresolved == ["Hidden"]


def test_exclude_patterns_from_config(tmp_path: Path) -> None:
    _write(tmp_path / "vendor" / "lib.go", "package lib\n\n// {{A}}\n")
    _write(tmp_path / "gen_mock.go", "package api\n\n// {{A}}\n")
    kept = _write(tmp_path / "api.go", "package api\n\nconst A = 1\n\n// {{A}}\n")

    config = ReplacerConfig(exclude_files=["vendor", "*_mock.go"])
    summary = _replacer(config=config).process(tmp_path)

    assert summary.files == [kept]
    assert (tmp_path / "vendor" / "lib.go").read_text(encoding="utf-8").endswith("// {{A}}\n")
    assert kept.read_text(encoding="utf-8").endswith("// 1\n")


def test_constant_map_seeds_and_source_overrides(tmp_path: Path) -> None:
    go_file = _write(
        tmp_path / "api.go",
        "package api\n\nconst Version = \"v2\"\n\n// {{Version}} {{Host}}\n",
    )
    config = ReplacerConfig(constant_map={"Version": "v1", "Host": "api.example.com"})

    _replacer(config=config).process(go_file)

    assert go_file.read_text(encoding="utf-8").endswith("// v2 api.example.com\n")


def test_custom_pattern_from_config(tmp_path: Path) -> None:
    go_file = _write(tmp_path / "api.go", "package api\n\nconst Port = 8080\n\n// port <%Port%>\n")
    config = ReplacerConfig(patterns=[r"<%([A-Za-z_]\w*)%>"])

    _replacer(config=config).process(go_file)

    assert go_file.read_text(encoding="utf-8").endswith("// port 8080\n")


def test_single_file_mode_uses_only_that_file(tmp_path: Path) -> None:
    _write(tmp_path / "other.go", "package api\n\nconst Remote = 1\n")
    target = _write(tmp_path / "api.go", "package api\n\n// {{Remote}}\n")

    summary = _replacer().process(target)

    assert summary.files == [target]
    assert summary.unresolved == ["Remote"]
    assert target.read_text(encoding="utf-8") == "package api\n\n// {{Remote}}\n"


def test_parse_error_aborts_before_rewriting(tmp_path: Path) -> None:
    """A broken file stops the run before any file is rewritten."""
    good = _write(tmp_path / "a.go", "package api\n\nconst A = 1\n\n// {{A}}\n")
    _write(tmp_path / "b.go", "package api\n\nfunc {\n")

    with pytest.raises(ParseError) as excinfo:
        _replacer().process(tmp_path)

    assert excinfo.value.path.name == "b.go"
    assert good.read_text(encoding="utf-8").endswith("// {{A}}\n")


def test_missing_path_raises_file_access_error(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        _replacer().process(tmp_path / "does-not-exist.go")


def test_dry_run_and_backup_flags(tmp_path: Path) -> None:
    go_file = _write(tmp_path / "api.go", "package api\n\nconst A = 1\n\n// {{A}}\n")

    summary = _replacer(dry_run=True, backup=True).process(go_file)

    assert summary.modified_files == [go_file]
    assert go_file.read_text(encoding="utf-8").endswith("// {{A}}\n")
    assert not (tmp_path / "api.go.backup").exists()

    _replacer(backup=True).process(go_file)

    assert (tmp_path / "api.go.backup").read_text(encoding="utf-8").endswith("// {{A}}\n")
    assert go_file.read_text(encoding="utf-8").endswith("// 1\n")


def test_sample_file_is_fully_resolved(tmp_path: Path) -> None:
    """Every placeholder in the generated sample resolves."""
    sample = create_sample_file(tmp_path / "sample.go")

    summary = _replacer().process(sample)
    text = sample.read_text(encoding="utf-8")

    assert summary.unresolved == []
    assert "{{" not in text and "${" not in text and "@VAR(" not in text
    assert '// @Success 200 {object} User "Operation completed successfully"' in text
    assert '// @Failure 404 {object} ErrorResponse "Resource not found"' in text
    assert "// @Router /api/v1/users [get]" in text
    assert "// @Router /api/v1/users [post]" in text
    assert '// @Success 201 {object} User "Resource created successfully"' in text
    assert "// @Description Rate limited to 2.5 requests per second" in text
    assert '"Page size (default 20, paging enabled: true)"' in text
    assert (
        "// @Description Retrieve all users from the system.\n"
        "// Results are paginated.\n"
        "// @Tags users\n"
    ) in text


def test_collect_files_order(tmp_path: Path) -> None:
    _write(tmp_path / "b.go", "package x\n")
    _write(tmp_path / "a.go", "package x\n")
    _write(tmp_path / "sub" / "c.go", "package y\n")
    _write(tmp_path / "notes.txt", "// {{A}}\n")

    files = _replacer().collect_files(tmp_path)

    assert files == [tmp_path / "a.go", tmp_path / "b.go", tmp_path / "sub" / "c.go"]
