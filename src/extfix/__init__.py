"""extfix: rewrite module specifiers to explicit file suffixes."""

__version__ = "0.1.0"
