"""Shared test fixtures for extfix."""

from __future__ import annotations

from pathlib import Path

import pytest

from extfix.compiler.rewriter import TreeRewriter
from extfix.parser.loader import SourceParser
from extfix.resolver.probe import PathProbe
from extfix.resolver.specifier import SpecifierResolver


def make_tree(root: Path, files: dict[str, str]) -> Path:
    """Create *files* (relative path → text) under *root* and return *root*."""
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def parser() -> SourceParser:
    return SourceParser()


@pytest.fixture
def probe() -> PathProbe:
    return PathProbe()


@pytest.fixture
def resolver() -> SpecifierResolver:
    return SpecifierResolver()


@pytest.fixture
def rewriter(resolver: SpecifierResolver, parser: SourceParser) -> TreeRewriter:
    return TreeRewriter(resolver, parser)


SAMPLE_MODULE_TS = """\
import { x } from "./util";
import type { Config } from './config';
import "./side-effect";
import * as React from "react";
export { helper } from "./helpers";
export * from "./missing";

const label = "./util";

export async function load(name: string) {
  const mod = await import("./lazy");
  const dyn = await import(`./plugins/${name}`);
  return [mod, dyn, label, x];
}
"""
