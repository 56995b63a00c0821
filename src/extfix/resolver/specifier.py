"""Module specifier resolution: classify, probe, rewrite."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from extfix.models.policy import ResolutionPolicy
from extfix.models.specifier import Resolution, SpecifierKind
from extfix.policy.registry import DEFAULT_POLICY
from extfix.resolver.probe import PathProbe

logger = logging.getLogger("extfix.resolver")


def classify_specifier(specifier: str) -> SpecifierKind:
    """Classify *specifier* as relative, absolute or external.

    Anything starting with ``.`` is relative (``./a``, ``../a``, ``.``);
    package names and bare specifiers are external.
    """
    if specifier.startswith("."):
        return SpecifierKind.LOCAL_RELATIVE
    if os.path.isabs(specifier):
        return SpecifierKind.LOCAL_ABSOLUTE
    return SpecifierKind.EXTERNAL


class SpecifierResolver:
    """Resolves local specifiers to on-disk files under a ``ResolutionPolicy``.

    Resolution is purely file-system based; file contents are never read.
    An exact match (empty suffix) always wins first, so specifiers that
    already name a file are returned as-is.
    """

    def __init__(
        self,
        policy: ResolutionPolicy = DEFAULT_POLICY,
        probe: PathProbe | None = None,
    ) -> None:
        self._policy = policy
        self._probe = probe or PathProbe()

    @property
    def policy(self) -> ResolutionPolicy:
        return self._policy

    @staticmethod
    def base_path(specifier: str, kind: SpecifierKind, referencing_dir: str | Path) -> str:
        if kind is SpecifierKind.LOCAL_ABSOLUTE:
            return specifier
        return os.path.join(referencing_dir, specifier)

    def resolve(self, specifier: str, referencing_dir: str | Path) -> Resolution:
        """Resolve *specifier* as seen from a file in *referencing_dir*.

        External specifiers come back unchanged and unresolved without a
        diagnostic.  Local specifiers with no matching file also come back
        unchanged; the caller reports them.
        """
        kind = classify_specifier(specifier)
        if not kind.is_local:
            return Resolution.unchanged(specifier, kind)

        base = self.base_path(specifier, kind, referencing_dir)
        hit = self._probe.probe(base, self._policy.suffixes)
        specifier_root = specifier
        if hit is None and self._policy.supports_index:
            hit = self._probe.probe_index(base, self._policy.index_files, self._policy.suffixes)
            specifier_root = specifier.rstrip("/")
        if hit is None:
            logger.debug("No candidate for %s under %s", specifier, base)
            return Resolution.unchanged(specifier, kind)

        return Resolution(
            original=specifier,
            specifier=f"{specifier_root}{hit.suffix}",
            kind=kind,
            resolved=True,
            target=hit.path,
        )
