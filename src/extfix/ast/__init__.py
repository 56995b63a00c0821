"""Source tree nodes and declaration traversal."""

from extfix.ast.nodes import DeclarationKind, LiteralEdit, SourceTree, SpecifierLiteral
from extfix.ast.visitor import classify_declaration, transform_specifiers, walk_declarations

__all__ = [
    "DeclarationKind",
    "LiteralEdit",
    "SourceTree",
    "SpecifierLiteral",
    "classify_declaration",
    "transform_specifiers",
    "walk_declarations",
]
