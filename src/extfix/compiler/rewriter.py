"""Rewrites import/export specifiers of one ``SourceTree``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from extfix.ast.nodes import SourceTree, SpecifierLiteral
from extfix.ast.visitor import classify_declaration, transform_specifiers
from extfix.models.errors import Diagnostic, DiagnosticCode, SourceSpan
from extfix.models.specifier import Resolution
from extfix.parser.loader import SourceParser
from extfix.resolver.specifier import SpecifierResolver

logger = logging.getLogger("extfix.rewriter")


@dataclass(frozen=True)
class SpecifierOutcome:
    """Where a specifier was found and what it resolved to."""

    literal: SpecifierLiteral
    resolution: Resolution


@dataclass
class RewriteResult:
    """The rewritten tree plus every specifier seen along the way."""

    tree: SourceTree
    outcomes: list[SpecifierOutcome] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def rewritten(self) -> int:
        return sum(1 for o in self.outcomes if o.resolution.changed)

    @property
    def unresolved(self) -> list[SpecifierOutcome]:
        return [
            o for o in self.outcomes if o.resolution.kind.is_local and not o.resolution.resolved
        ]


class TreeRewriter:
    """Resolves every import/export specifier in a tree and splices in the result.

    Only the specifier literal of each declaration changes; all other
    bytes, including the literal's quotes, are kept as they are.
    Unresolved local specifiers are left alone and reported as warnings.
    """

    def __init__(self, resolver: SpecifierResolver, parser: SourceParser) -> None:
        self._resolver = resolver
        self._parser = parser

    def rewrite(self, tree: SourceTree, source_dir: Path | None = None) -> RewriteResult:
        """Rewrite *tree*, resolving specifiers relative to *source_dir*.

        *source_dir* defaults to the directory of ``tree.path``.
        """
        directory = source_dir if source_dir is not None else tree.directory
        result = RewriteResult(tree=tree)

        def resolve_literal(literal: SpecifierLiteral) -> str | None:
            resolution = self._resolver.resolve(literal.value, directory)
            result.outcomes.append(SpecifierOutcome(literal=literal, resolution=resolution))
            if resolution.kind.is_local and not resolution.resolved:
                result.diagnostics.append(self._unresolved(tree, literal))
                return None
            return resolution.specifier

        edits = transform_specifiers(tree.root, tree.source, resolve_literal, classify_declaration)
        result.tree = self._parser.reparse(tree, edits)
        for edit in edits:
            logger.debug(
                "%s:%d: %s -> %s",
                tree.path,
                edit.literal.line,
                edit.literal.value,
                edit.replacement,
            )
        return result

    @staticmethod
    def _unresolved(tree: SourceTree, literal: SpecifierLiteral) -> Diagnostic:
        logger.warning(
            "Module not resolved: %s (in %s:%d)", literal.value, tree.path, literal.line
        )
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_SPECIFIER,
            message=f"Module not resolved: {literal.value}",
            path=str(tree.path),
            span=SourceSpan(file=str(tree.path), line=literal.line, column=literal.column),
        )
