"""
Statement Parser

Turns CSV and PDF bank statements into categorized transactions.
"""

from .core.models import Transaction
from .exceptions import ParseError, UnsupportedFileError
from .parser import StatementParser, parse_file, parse_file_async, parse_files

__version__ = "0.1.0"

__all__ = [
    "Transaction",
    "ParseError",
    "UnsupportedFileError",
    "StatementParser",
    "parse_file",
    "parse_file_async",
    "parse_files",
]
