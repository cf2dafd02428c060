"""Go parser using tree-sitter-go.

Wraps the tree-sitter parser so callers get either a clean syntax tree or a
ParseError pointing at the first syntax error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from swaggervars.parsers.base import ParseError

GO_LANGUAGE = Language(tree_sitter_go.language())


class GoSyntaxTree:
    """Parsed Go file with helpers for locating nodes by type."""

    def __init__(self, tree: Tree, source_bytes: bytes):
        self.tree = tree
        self.source_bytes = source_bytes

    def find_all(self, *node_types: str) -> Iterator[Node]:
        """Yield every node whose type is one of ``node_types``.

        Nodes are produced in source order, parents before children.
        """
        def traverse(node: Node) -> Iterator[Node]:
            if node.type in node_types:
                yield node
            for child in node.children:
                yield from traverse(child)

        yield from traverse(self.tree.root_node)

    def text(self, node: Node) -> str:
        """Get source text of a node."""
        return self.source_bytes[node.start_byte:node.end_byte].decode(
            "utf8", errors="replace"
        )


class GoParser:
    """Tree-sitter based Go parser."""

    def __init__(self):
        self.parser = Parser(GO_LANGUAGE)

    def parse(self, source: Union[str, bytes], path: Union[str, Path] = "<source>") -> GoSyntaxTree:
        """Parse Go source code.

        Args:
            source: Go source as text or raw bytes.
            path: File name used in error messages.

        Returns:
            GoSyntaxTree for the source.

        Raises:
            ParseError: If the source contains a syntax error.
        """
        source_bytes = source.encode("utf8") if isinstance(source, str) else source
        tree = self.parser.parse(source_bytes)

        if tree.root_node.has_error:
            def find_error(node: Node) -> Node | None:
                if node.is_error or node.is_missing:
                    return node
                for child in node.children:
                    error = find_error(child)
                    if error:
                        return error
                return None

            error_node = find_error(tree.root_node)
            if error_node is None:
                raise ParseError(path, "syntax error")
            line = source_bytes[:error_node.start_byte].count(b"\n") + 1
            col = error_node.start_byte - source_bytes.rfind(b"\n", 0, error_node.start_byte)
            if error_node.is_missing:
                raise ParseError(path, f"missing {error_node.type!r}", line, col)
            raise ParseError(path, "syntax error", line, col)

        return GoSyntaxTree(tree, source_bytes)


# Expose a single shared parser instance
GO_PARSER = GoParser()
