"""Specifier rewriting pipeline for extfix."""

from extfix.compiler.pipeline import RewritePipeline, mirror_path
from extfix.compiler.rewriter import RewriteResult, TreeRewriter

__all__ = [
    "RewritePipeline",
    "RewriteResult",
    "TreeRewriter",
    "mirror_path",
]
