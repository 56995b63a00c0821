"""Source parsing and printing for extfix."""

from extfix.parser.loader import ParseBatch, SourceParseError, SourceParser, SourceSafetyError
from extfix.parser.printer import SourcePrinter

__all__ = [
    "ParseBatch",
    "SourceParseError",
    "SourceParser",
    "SourcePrinter",
    "SourceSafetyError",
]
