"""Module specifier resolution against the file system."""

from extfix.resolver.probe import PathProbe, ProbeHit
from extfix.resolver.specifier import SpecifierResolver, classify_specifier

__all__ = [
    "PathProbe",
    "ProbeHit",
    "SpecifierResolver",
    "classify_specifier",
]
