"""Domain models and types for finledger.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the interactive shell and the data file
"""

from finledger.domain.ledger import Ledger
from finledger.domain.models import CategoryName, Description, Money, Month
from finledger.domain.records import ParseError, Record, TransactionKind

__all__ = [
    "CategoryName",
    "Description",
    "Ledger",
    "Money",
    "Month",
    "ParseError",
    "Record",
    "TransactionKind",
]
