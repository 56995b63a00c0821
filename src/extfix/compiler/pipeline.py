"""Orchestrates the full run: Collect → Parse → Rewrite → Print → Write."""

from __future__ import annotations

import logging
from pathlib import Path

from extfix.compiler.rewriter import TreeRewriter
from extfix.models.errors import Diagnostic, DiagnosticCode, RunReport, UsageError
from extfix.models.policy import ResolutionPolicy
from extfix.parser.loader import SourceParser
from extfix.parser.printer import SourcePrinter
from extfix.policy.registry import DEFAULT_POLICY, PolicyRegistry
from extfix.resolver.specifier import SpecifierResolver
from extfix.service.collector import FileSetCollector
from extfix.service.writer import OutputWriter
from extfix.settings import Settings

logger = logging.getLogger("extfix.pipeline")


def mirror_path(path: Path, input_root: Path, output_root: Path) -> Path:
    """Map *path* under *input_root* to the same relative path under *output_root*."""
    return output_root / path.relative_to(input_root)


class RewritePipeline:
    """Rewrites every source file under an input root into a mirrored output root.

    Best effort: per-file parse, resolution and write problems become
    diagnostics in the ``RunReport``.  Only a missing input root raises
    (``UsageError``), and it does so before anything is read or written.
    """

    def __init__(
        self,
        policy: ResolutionPolicy = DEFAULT_POLICY,
        *,
        skip_files_with_syntax_errors: bool = True,
        follow_hidden: bool = False,
        write_workers: int = 4,
    ) -> None:
        if write_workers < 1:
            raise UsageError(f"write_workers must be at least 1, got {write_workers}")
        self._policy = policy
        self._parser = SourceParser(skip_files_with_syntax_errors=skip_files_with_syntax_errors)
        self._printer = SourcePrinter()
        self._collector = FileSetCollector(policy.source_suffixes, follow_hidden=follow_hidden)
        self._rewriter = TreeRewriter(SpecifierResolver(policy), self._parser)
        self._write_workers = write_workers

    @classmethod
    def from_settings(cls, settings: Settings, policy_name: str | None = None) -> RewritePipeline:
        """Build a pipeline from settings; *policy_name* overrides the configured policy."""
        policy = PolicyRegistry.get(policy_name or settings.resolution_policy)
        return cls(
            policy,
            skip_files_with_syntax_errors=settings.skip_files_with_syntax_errors,
            follow_hidden=settings.follow_hidden,
            write_workers=settings.write_workers,
        )

    @property
    def policy(self) -> ResolutionPolicy:
        return self._policy

    def run(self, input_root: str | Path, output_root: str | Path) -> RunReport:
        input_root = Path(input_root)
        output_root = Path(output_root)
        if not input_root.is_dir():
            raise UsageError(f"source directory does not exist: {input_root}")

        report = RunReport(
            input_root=str(input_root),
            output_root=str(output_root),
            policy=self._policy.name,
        )

        # Phase 1: Collection (the output root is never read back as input)
        files = self._collector.collect(input_root, exclude=[output_root])
        report.files_collected = len(files)

        # Phase 2: Parse the whole batch with shared parsers
        batch = self._parser.parse_many(files)
        report.files_parsed = len(batch.trees)
        for path, reason in batch.failures.items():
            report.diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.PARSE_FAILURE,
                    message=f"Skipped unparseable file: {reason}",
                    path=str(path),
                )
            )
        report.files_skipped = len(batch.failures)

        # Phase 3: Rewrite, print and write each tree
        with OutputWriter(max_workers=self._write_workers) as writer:
            for path in files:
                tree = batch.get(path)
                if tree is None:
                    continue
                result = self._rewriter.rewrite(tree)
                report.specifiers_rewritten += result.rewritten
                report.diagnostics.extend(result.diagnostics)
                destination = mirror_path(path, input_root, output_root)
                writer.submit(destination, self._printer.print(result.tree))

        # Phase 4: Write outcomes (the writer has drained by now)
        report.files_written = len(writer.written)
        report.diagnostics.extend(writer.failures)

        logger.info(
            "Processed %d file(s): %d written, %d skipped, %d specifier(s) rewritten, "
            "%d warning(s), %d error(s)",
            report.files_collected,
            report.files_written,
            report.files_skipped,
            report.specifiers_rewritten,
            len(report.warnings),
            len(report.errors),
        )
        return report
