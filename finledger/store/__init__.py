"""Persistence layer - reads and writes the ledger data file.

This module re-exports the public persistence functions for easy importing.
"""

from finledger.store.csv_file import (
    DEFAULT_DATA_FILE,
    HEADER,
    LineError,
    LoadReport,
    format_line,
    load_ledger,
    parse_line,
    save_ledger,
)

__all__ = [
    "DEFAULT_DATA_FILE",
    "HEADER",
    "LineError",
    "LoadReport",
    "format_line",
    "load_ledger",
    "parse_line",
    "save_ledger",
]
