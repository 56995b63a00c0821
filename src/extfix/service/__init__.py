"""File collection and output writing services."""

from extfix.service.collector import FileSetCollector
from extfix.service.writer import OutputWriter, ensure_dir

__all__ = [
    "FileSetCollector",
    "OutputWriter",
    "ensure_dir",
]
