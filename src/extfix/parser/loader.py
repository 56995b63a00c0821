"""tree-sitter source loader with safety limits and failure tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter as ts
import tree_sitter_typescript as tsts

from extfix.ast.nodes import LiteralEdit, SourceTree

logger = logging.getLogger("extfix.parser")

# ---------------------------------------------------------------------------
# Grammars and safety limits
# ---------------------------------------------------------------------------

_MAX_SOURCE_SIZE = 5_000_000  # bytes

TYPESCRIPT_GRAMMAR = "typescript"
TSX_GRAMMAR = "tsx"

_LANGUAGES: dict[str, ts.Language] = {
    TYPESCRIPT_GRAMMAR: ts.Language(tsts.language_typescript()),
    TSX_GRAMMAR: ts.Language(tsts.language_tsx()),
}

# Everything else (.tsx, .js, .jsx, .mjs, .cjs) goes through the TSX
# grammar, which accepts JSX as well as plain JavaScript.  Plain .ts must
# not: ``<T>value`` casts are not JSX.
_TYPESCRIPT_SUFFIXES = (".ts", ".mts", ".cts")


class SourceSafetyError(Exception):
    """Raised when a source file exceeds the size limit."""


class SourceParseError(Exception):
    """Raised when a file cannot be turned into a usable tree."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def grammar_for(path: Path) -> str:
    """Pick the grammar for *path* from its suffix."""
    if path.name.endswith(_TYPESCRIPT_SUFFIXES):
        return TYPESCRIPT_GRAMMAR
    return TSX_GRAMMAR


@dataclass
class ParseBatch:
    """Trees for every file that parsed, reasons for every file that did not."""

    trees: dict[Path, SourceTree] = field(default_factory=dict)
    failures: dict[Path, str] = field(default_factory=dict)

    def get(self, path: Path) -> SourceTree | None:
        return self.trees.get(path)


class SourceParser:
    """Parses TypeScript/JavaScript files into ``SourceTree`` objects.

    One ``tree_sitter.Parser`` is kept per grammar and reused across a
    batch.  Files with syntax errors are rejected unless
    ``skip_files_with_syntax_errors`` is off.
    """

    def __init__(self, skip_files_with_syntax_errors: bool = True) -> None:
        self._skip_errors = skip_files_with_syntax_errors
        self._parsers: dict[str, ts.Parser] = {}

    def _parser(self, grammar: str) -> ts.Parser:
        parser = self._parsers.get(grammar)
        if parser is None:
            parser = ts.Parser(_LANGUAGES[grammar])
            self._parsers[grammar] = parser
        return parser

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_source_safety(source: bytes) -> None:
        if len(source) > _MAX_SOURCE_SIZE:
            raise SourceSafetyError(
                f"source exceeds maximum size "
                f"({len(source):,} bytes > {_MAX_SOURCE_SIZE:,} limit)"
            )

    # -- public parsing API --------------------------------------------------

    def parse_bytes(self, source: bytes, path: Path, grammar: str | None = None) -> SourceTree:
        """Parse raw bytes as if read from *path*.

        Raises ``SourceSafetyError`` for oversized input and
        ``UnicodeDecodeError`` for input that is not UTF-8.
        """
        self._check_source_safety(source)
        source.decode("utf-8")
        grammar = grammar or grammar_for(path)
        tree = self._parser(grammar).parse(source)
        return SourceTree(path=path, source=source, tree=tree, grammar=grammar)

    def load(self, path: Path) -> SourceTree:
        """Read and parse *path*, raising ``SourceParseError`` on any failure."""
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise SourceParseError(path, f"cannot read file: {exc.strerror or exc}") from exc
        try:
            tree = self.parse_bytes(source, path)
        except SourceSafetyError as exc:
            raise SourceParseError(path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise SourceParseError(path, f"not valid UTF-8: {exc.reason}") from exc
        if self._skip_errors and tree.has_error:
            raise SourceParseError(path, f"syntax error near line {_first_error_line(tree)}")
        return tree

    def parse(self, path: Path) -> SourceTree | None:
        """Parse *path*; ``None`` means the file is unparseable or unreadable."""
        try:
            return self.load(path)
        except SourceParseError as exc:
            logger.warning("Skipping %s: %s", path, exc.reason)
            return None

    def parse_many(self, paths: Iterable[Path]) -> ParseBatch:
        """Parse a batch of files, sharing one parser per grammar."""
        batch = ParseBatch()
        for path in paths:
            try:
                batch.trees[path] = self.load(path)
            except SourceParseError as exc:
                logger.warning("Skipping %s: %s", path, exc.reason)
                batch.failures[path] = exc.reason
        return batch

    def reparse(self, tree: SourceTree, edits: Sequence[LiteralEdit]) -> SourceTree:
        """Apply literal *edits* to *tree*'s bytes and parse the result.

        The original tree is left untouched.  Edits must not overlap.
        """
        if not edits:
            return tree
        buffer = bytearray(tree.source)
        for edit in sorted(edits, key=lambda e: e.literal.start_byte, reverse=True):
            buffer[edit.literal.start_byte : edit.literal.end_byte] = edit.new_bytes
        source = bytes(buffer)
        new_tree = self._parser(tree.grammar).parse(source)
        return SourceTree(path=tree.path, source=source, tree=new_tree, grammar=tree.grammar)


def _first_error_line(tree: SourceTree) -> int:
    stack = [tree.root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return 1
