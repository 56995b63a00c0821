"""Immutable source-tree wrappers around tree-sitter parse results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import tree_sitter as ts


class DeclarationKind(StrEnum):
    IMPORT = "import"
    EXPORT = "export"


# tree-sitter node type -> declaration kind.  Anything else is not a
# specifier-bearing declaration (``import x = require()`` lives in an
# ``import_require_clause`` and dynamic imports are call expressions).
DECLARATION_NODE_TYPES: dict[str, DeclarationKind] = {
    "import_statement": DeclarationKind.IMPORT,
    "export_statement": DeclarationKind.EXPORT,
}


@dataclass(frozen=True)
class SourceTree:
    """One parsed file: its path, exact bytes and tree-sitter tree.

    Never shared between files.  Rewrites produce a new ``SourceTree``.
    """

    path: Path
    source: bytes
    tree: ts.Tree
    grammar: str

    @property
    def root(self) -> ts.Node:
        return self.tree.root_node

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def has_error(self) -> bool:
        return self.tree.root_node.has_error

    def text(self) -> str:
        return self.source.decode("utf-8")


@dataclass(frozen=True)
class SpecifierLiteral:
    """The module specifier string of an import/export declaration.

    ``start_byte``/``end_byte`` delimit the literal's content, excluding
    quotes, so a replacement keeps the original quote character.
    """

    value: str
    quote: str
    start_byte: int
    end_byte: int
    line: int
    column: int
    kind: DeclarationKind

    @classmethod
    def from_node(cls, node: ts.Node, source: bytes, kind: DeclarationKind) -> SpecifierLiteral:
        start = node.start_byte + 1
        end = node.end_byte - 1
        row, col = node.start_point
        return cls(
            value=source[start:end].decode("utf-8"),
            quote=source[node.start_byte : start].decode("utf-8"),
            start_byte=start,
            end_byte=end,
            line=row + 1,
            column=col + 1,
            kind=kind,
        )


@dataclass(frozen=True)
class LiteralEdit:
    """Replace a specifier literal's content with ``replacement``."""

    literal: SpecifierLiteral
    replacement: str

    @property
    def new_bytes(self) -> bytes:
        return self.replacement.encode("utf-8")
