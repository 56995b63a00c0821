"""Structured diagnostics with source position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Severity(StrEnum):
    WARNING = "warning"
    ERROR = "error"


class DiagnosticCode(StrEnum):
    PARSE_FAILURE = "PARSE_FAILURE"
    UNRESOLVED_SPECIFIER = "UNRESOLVED_SPECIFIER"
    WRITE_FAILURE = "WRITE_FAILURE"


class UsageError(Exception):
    """Raised for a malformed invocation, before any file is processed."""


class SourceSpan(BaseModel):
    """Points to an exact location in a source file (1-based)."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class Diagnostic(BaseModel):
    """A non-fatal, per-file problem reported during a run."""

    code: DiagnosticCode
    severity: Severity = Severity.WARNING
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class RunReport(BaseModel):
    """Outcome of one pipeline run over a source tree."""

    input_root: str
    output_root: str
    policy: str
    files_collected: int = 0
    files_parsed: int = 0
    files_skipped: int = 0
    files_written: int = 0
    specifiers_rewritten: int = 0
    diagnostics: list[Diagnostic] = []

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def exit_status(self) -> int:
        # Per-file problems never fail a run; only UsageError does.
        return 0
