"""File-system probing for suffixed module candidates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProbeHit:
    """A candidate that exists as a regular file."""

    path: Path
    suffix: str


class PathProbe:
    """Finds the first ``base + suffix`` naming a regular file.

    Read-only: only ``Path.is_file`` / ``Path.is_dir`` checks are made, so
    a probe is safe to share between files.  Directories never match a
    suffix probe, even when the path string exists.
    """

    def probe(self, base: str | Path, suffixes: Sequence[str]) -> ProbeHit | None:
        base = str(base)
        for suffix in suffixes:
            candidate = Path(base + suffix)
            if candidate.is_file():
                return ProbeHit(path=candidate, suffix=suffix)
        return None

    def probe_index(
        self,
        base: str | Path,
        index_files: Sequence[str],
        suffixes: Sequence[str],
    ) -> ProbeHit | None:
        """Look for ``base/<index><suffix>`` when *base* is a directory.

        The returned ``suffix`` is the path tail to append to the specifier,
        e.g. ``/index.ts``.
        """
        directory = Path(base)
        if not directory.is_dir():
            return None
        for index in index_files:
            hit = self.probe(directory / index, [s for s in suffixes if s])
            if hit is not None:
                return ProbeHit(path=hit.path, suffix=f"/{index}{hit.suffix}")
        return None
