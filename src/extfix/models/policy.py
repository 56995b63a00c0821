"""Suffix probing policy shared by the resolver, parser and collector."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResolutionPolicy(BaseModel):
    """Ordered suffix list and optional directory-index lookup.

    ``suffixes`` are tried first-match-wins against a base path; the empty
    suffix (exact path) always comes first.  ``index_files`` enables
    ``./dir`` -> ``./dir/index.ts`` style resolution when non-empty.
    ``source_suffixes`` selects which files are collected and parsed.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    suffixes: tuple[str, ...] = ("", ".ts", ".js")
    index_files: tuple[str, ...] = ()
    source_suffixes: tuple[str, ...] = Field(default=(".ts", ".js"), min_length=1)

    @field_validator("suffixes")
    @classmethod
    def _exact_match_first(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        rest = tuple(s for s in v if s != "")
        return ("", *rest)

    @field_validator("source_suffixes")
    @classmethod
    def _dotted(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for suffix in v:
            if not suffix.startswith("."):
                raise ValueError(f"source suffix '{suffix}' must start with '.'")
        return v

    @property
    def supports_index(self) -> bool:
        return bool(self.index_files)
