"""Tests for declaration traversal and specifier extraction."""

from __future__ import annotations

from pathlib import Path

import tree_sitter as ts

from extfix.ast.nodes import DeclarationKind, SpecifierLiteral
from extfix.ast.visitor import classify_declaration, transform_specifiers, walk_declarations
from extfix.parser.loader import SourceParser
from tests.conftest import SAMPLE_MODULE_TS


def _specifiers(parser: SourceParser, code: str, name: str = "a.ts") -> list[SpecifierLiteral]:
    tree = parser.parse_bytes(code.encode("utf-8"), Path(name))
    seen: list[SpecifierLiteral] = []

    def record(literal: SpecifierLiteral) -> None:
        seen.append(literal)
        return None

    transform_specifiers(tree.root, tree.source, record)
    return seen


class TestClassifyDeclaration:
    def test_import_and_export(self, parser: SourceParser) -> None:
        tree = parser.parse_bytes(b'import a from "./a";\nexport * from "./b";\n', Path("x.ts"))
        kinds = [kind for _, kind in walk_declarations(tree.root)]
        assert kinds == [DeclarationKind.IMPORT, DeclarationKind.EXPORT]

    def test_other_nodes(self, parser: SourceParser) -> None:
        tree = parser.parse_bytes(b"const a = 1;\n", Path("x.ts"))
        assert classify_declaration(tree.root) is None
        assert list(walk_declarations(tree.root)) == []


class TestSpecifierExtraction:
    def test_sample_module(self, parser: SourceParser) -> None:
        values = [lit.value for lit in _specifiers(parser, SAMPLE_MODULE_TS)]
        assert values == [
            "./util",
            "./config",
            "./side-effect",
            "react",
            "./helpers",
            "./missing",
        ]

    def test_literal_positions(self, parser: SourceParser) -> None:
        [literal] = _specifiers(parser, "\n\nimport { x } from './util';\n")
        assert literal.value == "./util"
        assert literal.quote == "'"
        assert literal.line == 3
        assert literal.column == 19
        assert literal.kind is DeclarationKind.IMPORT

    def test_content_offsets_exclude_quotes(self, parser: SourceParser) -> None:
        code = 'import "./a";'
        [literal] = _specifiers(parser, code)
        assert code[literal.start_byte : literal.end_byte] == "./a"

    def test_namespace_reexport(self, parser: SourceParser) -> None:
        [literal] = _specifiers(parser, 'export * as ns from "./ns";\n')
        assert literal.value == "./ns"
        assert literal.kind is DeclarationKind.EXPORT

    def test_non_specifier_strings_ignored(self, parser: SourceParser) -> None:
        code = (
            'export default "./default";\n'
            'export const path = "./const";\n'
            'const m = require("./required");\n'
            'import legacy = require("./legacy");\n'
        )
        assert _specifiers(parser, code) == []

    def test_dynamic_import_ignored(self, parser: SourceParser) -> None:
        code = 'const a = import("./lazy");\nconst b = import(`./p/${a}`);\n'
        assert _specifiers(parser, code) == []

    def test_nested_in_ambient_module(self, parser: SourceParser) -> None:
        code = 'declare module "virtual" {\n  import { a } from "./inner";\n}\n'
        values = [lit.value for lit in _specifiers(parser, code)]
        assert values == ["./inner"]

    def test_javascript_with_jsx(self, parser: SourceParser) -> None:
        code = 'import View from "./View";\nexport const App = () => <View />;\n'
        values = [lit.value for lit in _specifiers(parser, code, name="app.js")]
        assert values == ["./View"]


class TestTransformSpecifiers:
    def test_edits_only_changed_literals(self, parser: SourceParser) -> None:
        tree = parser.parse_bytes(b'import a from "./a";\nimport b from "./b";\n', Path("x.ts"))
        edits = transform_specifiers(
            tree.root,
            tree.source,
            lambda lit: lit.value + ".ts" if lit.value == "./a" else lit.value,
        )
        assert [(e.literal.value, e.replacement) for e in edits] == [("./a", "./a.ts")]

    def test_none_keeps_literal(self, parser: SourceParser) -> None:
        tree = parser.parse_bytes(b'import a from "./a";\n', Path("x.ts"))
        assert transform_specifiers(tree.root, tree.source, lambda lit: None) == []

    def test_custom_predicate(self, parser: SourceParser) -> None:
        tree = parser.parse_bytes(b'import a from "./a";\nexport * from "./b";\n', Path("x.ts"))

        def imports_only(node: ts.Node) -> DeclarationKind | None:
            kind = classify_declaration(node)
            return kind if kind is DeclarationKind.IMPORT else None

        edits = transform_specifiers(tree.root, tree.source, lambda lit: "./z", imports_only)
        assert [e.literal.value for e in edits] == ["./a"]
