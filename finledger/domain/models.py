"""Domain type definitions for finledger.

These NewTypes provide semantic clarity and help with type checking:
- Money: Decimal amount, currency-agnostic
- Month: Month in YYYY-MM format
- CategoryName: Free-form category label
- Description: Transaction description text
"""

from decimal import Decimal
from typing import NewType

# Amounts keep the precision they were parsed with; formatting rounds to 2 places
Money = NewType("Money", Decimal)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Category labels are case-sensitive and never validated
CategoryName = NewType("CategoryName", str)

# Transaction description text
Description = NewType("Description", str)
