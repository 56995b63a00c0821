"""Module specifier classification and resolution outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class SpecifierKind(StrEnum):
    LOCAL_RELATIVE = "local-relative"
    LOCAL_ABSOLUTE = "local-absolute"
    EXTERNAL = "external"

    @property
    def is_local(self) -> bool:
        return self is not SpecifierKind.EXTERNAL


@dataclass(frozen=True)
class Resolution:
    """Result of resolving one specifier.

    ``specifier`` equals ``original`` unless ``resolved`` is true.
    ``target`` is the file on disk the new specifier points at.
    """

    original: str
    specifier: str
    kind: SpecifierKind
    resolved: bool = False
    target: Path | None = None

    @property
    def changed(self) -> bool:
        return self.specifier != self.original

    @classmethod
    def unchanged(cls, specifier: str, kind: SpecifierKind) -> Resolution:
        return cls(original=specifier, specifier=specifier, kind=kind)
