"""Helpers for loading replacer configuration from TOML/JSON sources.

This module provides a single entry point `load_replacer_config`
that accepts various configuration sources:

* None -> default ReplacerConfig
* dict -> ReplacerConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from swaggervars.config import ReplacerConfig

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - Python <3.11 path
    import tomli as tomllib

logger = logging.getLogger("swaggervars.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _is_file(path: Path) -> bool:
    # Long inline strings can exceed the OS name limit
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def load_replacer_config(source: ConfigSource) -> ReplacerConfig:
    """Load ReplacerConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ReplacerConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ReplacerConfig instance.

    Raises:
        ValueError: If the content is not a mapping or cannot be decoded.
        pydantic.ValidationError: If the mapping fails validation.
    """
    if source is None:
        logger.debug("No config source provided; using default ReplacerConfig")
        return ReplacerConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading ReplacerConfig from provided dict")
        return ReplacerConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        if _is_file(path):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        try:
            data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            raise ValueError(f"Invalid {fmt.upper()} configuration: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return ReplacerConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_replacer_config"]
