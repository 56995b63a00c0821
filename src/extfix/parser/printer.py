"""Serialize a ``SourceTree`` back to text."""

from __future__ import annotations

from extfix.ast.nodes import SourceTree


class SourcePrinter:
    """Lossless printer: trees keep their exact source bytes."""

    def print(self, tree: SourceTree) -> str:
        return tree.text()
