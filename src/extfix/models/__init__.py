"""Pydantic and dataclass domain models for extfix."""

from extfix.models.errors import (
    Diagnostic,
    DiagnosticCode,
    RunReport,
    Severity,
    SourceSpan,
    UsageError,
)
from extfix.models.policy import ResolutionPolicy
from extfix.models.specifier import Resolution, SpecifierKind

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Resolution",
    "ResolutionPolicy",
    "RunReport",
    "Severity",
    "SourceSpan",
    "SpecifierKind",
    "UsageError",
]
