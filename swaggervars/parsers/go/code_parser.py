"""Go declaration parser using BaseCodeParser interface.

Walks the tree-sitter syntax tree of a Go file and collects literal-valued
``const`` and type-inferred ``var`` declarations.
"""

import logging
from pathlib import Path
from typing import Dict, List

from tree_sitter import Node

from swaggervars.parsers.base import BaseCodeParser, BindingValue, FileAccessError
from swaggervars.parsers.go.grammar import GO_PARSER, GoSyntaxTree
from swaggervars.parsers.go.literals import literal_value

logger = logging.getLogger("swaggervars.parsers.go.code_parser")


class GoDeclarationParser(BaseCodeParser):
    """Go parser extracting literal constant and variable bindings.

    Names are paired with initializers by position. A name without an
    initializer at its position, or whose initializer is not a literal,
    produces no binding.
    """

    def __init__(self, comment_marker: str = "//") -> None:
        self._comment_marker = comment_marker

    def parse_file(self, file_path: Path) -> Dict[str, BindingValue]:
        """Parse a Go source file and return its literal bindings.

        Args:
            file_path: Path to Go source file.

        Returns:
            Dict[str, BindingValue]: name -> value, later declarations
            overwriting earlier ones.

        Raises:
            ParseError: If the file is not valid Go.
            FileAccessError: If the file cannot be read.
        """
        try:
            raw = Path(file_path).read_bytes()
        except OSError as exc:
            raise FileAccessError(file_path, exc) from exc

        tree = GO_PARSER.parse(raw, file_path)
        bindings = self.extract(tree)
        logger.debug("Parsed %s: %d bindings", Path(file_path).name, len(bindings))
        return bindings

    def parse_source(self, source: str) -> Dict[str, BindingValue]:
        """Parse Go source held in memory."""
        return self.extract(GO_PARSER.parse(source))

    def extract(self, tree: GoSyntaxTree) -> Dict[str, BindingValue]:
        """Collect bindings from every const and var spec in the tree."""
        bindings: Dict[str, BindingValue] = {}

        for spec in tree.find_all("const_spec", "var_spec"):
            # Typed vars are skipped; typed consts are kept.
            if spec.type == "var_spec" and spec.child_by_field_name("type") is not None:
                continue

            names = spec.children_by_field_name("name")
            values = _initializers(spec)
            for index, name_node in enumerate(names):
                if index >= len(values):
                    break
                value = literal_value(values[index], self._comment_marker)
                if value is None:
                    continue
                name = tree.text(name_node)
                bindings[name] = value
                logger.debug("Found %s: %s = %r", _kind(spec), name, value)

        return bindings


def _initializers(spec: Node) -> List[Node]:
    """Return the initializer expressions of a spec, comments excluded."""
    value_list = spec.child_by_field_name("value")
    if value_list is None:
        return []
    if value_list.type != "expression_list":
        return [value_list]
    return [child for child in value_list.named_children if child.type != "comment"]


def _kind(spec: Node) -> str:
    return "constant" if spec.type == "const_spec" else "variable"


__all__ = ["GoDeclarationParser"]
