"""Go language support: tree-sitter grammar wrapper and declaration parser."""

from swaggervars.parsers.go.code_parser import GoDeclarationParser
from swaggervars.parsers.go.grammar import GO_PARSER, GoParser, GoSyntaxTree

__all__ = ["GO_PARSER", "GoDeclarationParser", "GoParser", "GoSyntaxTree"]
