"""Enumerates candidate source files under an input root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

logger = logging.getLogger("extfix.collector")


class FileSetCollector:
    """Finds every regular file under a root whose name ends in a source suffix.

    Hidden (dot-prefixed) files and directories are ignored unless
    ``follow_hidden`` is set.  Results are sorted for stable runs.
    """

    def __init__(
        self,
        source_suffixes: Sequence[str] = (".ts", ".js"),
        follow_hidden: bool = False,
    ) -> None:
        self._suffixes = tuple(source_suffixes)
        self._follow_hidden = follow_hidden

    def _is_hidden(self, name: str) -> bool:
        return not self._follow_hidden and name.startswith(".")

    def collect(self, root: Path, exclude: Iterable[Path] = ()) -> list[Path]:
        """Return the source files under *root*, skipping *exclude* subtrees."""
        excluded = {p.resolve() for p in exclude}
        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not self._is_hidden(d) and (current / d).resolve() not in excluded
            )
            for name in filenames:
                if self._is_hidden(name) or not name.endswith(self._suffixes):
                    continue
                path = current / name
                if path.is_file():
                    files.append(path)
        files.sort()
        logger.debug("Collected %d source file(s) under %s", len(files), root)
        return files
