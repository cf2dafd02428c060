"""Configuration schema and validation for swaggervars."""

from .schema import ReplacerConfig

__all__ = ["ReplacerConfig"]
