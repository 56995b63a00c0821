"""Explicit traversal over import/export declarations.

The walk is iterative over a node stack: it visits every node exactly
once, in document order, so depth is bounded by the tree itself and no
per-node closures are created.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import tree_sitter as ts

from extfix.ast.nodes import (
    DECLARATION_NODE_TYPES,
    DeclarationKind,
    LiteralEdit,
    SpecifierLiteral,
)

DeclarationPredicate = Callable[[ts.Node], DeclarationKind | None]
LiteralTransform = Callable[[SpecifierLiteral], str | None]


def classify_declaration(node: ts.Node) -> DeclarationKind | None:
    """Return the declaration kind of *node*, or ``None`` for any other node."""
    return DECLARATION_NODE_TYPES.get(node.type)


def specifier_node(declaration: ts.Node, kind: DeclarationKind) -> ts.Node | None:
    """Find the string literal in module-specifier position of *declaration*.

    Only the declaration's own ``source`` is considered.  Strings nested
    deeper (``import x = require("y")``, ``export default "y"``) are not
    specifiers of the declaration.
    """
    source = declaration.child_by_field_name("source")
    if source is None:
        # Older grammar releases: ``from_clause`` node or unlabelled string.
        previous: ts.Node | None = None
        for child in declaration.children:
            if child.type == "from_clause":
                source = child.child_by_field_name("source")
                break
            if child.type == "string" and previous is not None:
                if previous.type == "from" or (
                    kind is DeclarationKind.IMPORT and previous.type == "import"
                ):
                    source = child
                    break
            previous = child
    if source is None or source.type != "string":
        return None
    return source


def walk_declarations(
    root: ts.Node,
    is_declaration: DeclarationPredicate = classify_declaration,
) -> Iterator[tuple[ts.Node, DeclarationKind]]:
    """Yield every declaration under *root*, however deeply nested."""
    stack: list[ts.Node] = [root]
    while stack:
        node = stack.pop()
        kind = is_declaration(node)
        if kind is not None:
            yield node, kind
        stack.extend(reversed(node.children))


def transform_specifiers(
    root: ts.Node,
    source: bytes,
    transform: LiteralTransform,
    is_declaration: DeclarationPredicate = classify_declaration,
) -> list[LiteralEdit]:
    """Apply *transform* to every specifier literal and collect the edits.

    *transform* returns the replacement text, or ``None`` to keep the
    literal.  Edits are returned in document order and never overlap.
    """
    edits: list[LiteralEdit] = []
    for declaration, kind in walk_declarations(root, is_declaration):
        node = specifier_node(declaration, kind)
        if node is None:
            continue
        literal = SpecifierLiteral.from_node(node, source, kind)
        replacement = transform(literal)
        if replacement is not None and replacement != literal.value:
            edits.append(LiteralEdit(literal=literal, replacement=replacement))
    return edits
