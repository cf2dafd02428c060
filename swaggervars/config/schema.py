"""Configuration schema definitions using Pydantic for validation.

Configuration errors (bad regexes, empty suffixes) are caught when the
config is loaded, before any file is touched.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from swaggervars.core.placeholders import compile_pattern


class ReplacerConfig(BaseModel):
    """Top-level configuration for a replacer run.

    Attributes:
        patterns: Extra placeholder regexes, applied after the built-in
            ``{{Name}}``, ``${Name}`` and ``@VAR(Name)`` syntaxes. Each must
            have exactly one capture group.
        exclude_files: Glob patterns for files skipped in directory mode.
        constant_map: Bindings seeded before extraction. Declarations found
            in source override them.
        comment_marker: Marker identifying comment-bearing lines.
        source_suffix: Suffix of files visited in directory mode.
        test_suffix: Suffix of files skipped in directory mode.
    """

    patterns: List[str] = Field(default_factory=list)
    exclude_files: List[str] = Field(default_factory=list)
    constant_map: Dict[str, str] = Field(default_factory=dict)
    comment_marker: str = Field(default="//", min_length=1)
    source_suffix: str = Field(default=".go", min_length=1)
    test_suffix: str = "_test.go"

    model_config = {"extra": "forbid"}

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: List[str]) -> List[str]:
        """Validate that each pattern compiles with one capture group."""
        for expression in v:
            compile_pattern(expression)
        return v

    @classmethod
    def default(cls) -> "ReplacerConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReplacerConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
