"""Output writing: directory creation plus background file writes."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from types import TracebackType

from extfix.models.errors import Diagnostic, DiagnosticCode, Severity

logger = logging.getLogger("extfix.writer")


def ensure_dir(path: Path) -> None:
    """Create *path* and any missing parents; a no-op when it exists."""
    path.mkdir(parents=True, exist_ok=True)


class OutputWriter:
    """Writes text files on a thread pool and records every failure.

    ``submit`` creates the parent directory synchronously and hands the
    write to a worker.  ``close`` (or leaving the ``with`` block) waits for
    all pending writes, after which ``written`` and ``failures`` are final.
    Thread-safe.
    """

    def __init__(self, max_workers: int = 4, encoding: str = "utf-8") -> None:
        self._encoding = encoding
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="extfix-writer")
        self._lock = threading.Lock()
        self._written: list[Path] = []
        self._failures: list[Diagnostic] = []

    # -- lifecycle -----------------------------------------------------------

    def __enter__(self) -> OutputWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._pool.shutdown(wait=True)

    # -- writing -------------------------------------------------------------

    def submit(self, path: Path, text: str) -> Future[bool] | None:
        """Queue *text* for writing to *path*.

        Returns ``None`` when the parent directory could not be created; the
        failure is recorded and nothing is queued.
        """
        try:
            ensure_dir(path.parent)
        except OSError as exc:
            self._fail(path, exc)
            return None
        return self._pool.submit(self._write, path, text)

    def _write(self, path: Path, text: str) -> bool:
        try:
            with path.open("w", encoding=self._encoding, newline="") as handle:
                handle.write(text)
        except OSError as exc:
            self._fail(path, exc)
            return False
        with self._lock:
            self._written.append(path)
        return True

    def _fail(self, path: Path, exc: OSError) -> None:
        detail = exc.strerror or str(exc)
        logger.error("Output error: %s: %s", path, detail)
        with self._lock:
            self._failures.append(
                Diagnostic(
                    code=DiagnosticCode.WRITE_FAILURE,
                    severity=Severity.ERROR,
                    message=f"Output error: {detail}",
                    path=str(path),
                )
            )

    # -- results -------------------------------------------------------------

    @property
    def written(self) -> list[Path]:
        with self._lock:
            return sorted(self._written)

    @property
    def failures(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._failures)
