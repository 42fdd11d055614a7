"""Date utilities for finledger.

Pure functions for interpreting dates typed at the prompt.
"""

import re
import warnings
from datetime import date

import pandas as pd

from finledger.domain.records import ParseError, parse_date

# A bare number such as "2024" or "15" is not a date
DIGITS_ONLY = re.compile(r"[0-9]+")


def parse_entry_date(raw_date: str) -> date:
    """Interpret a date typed by the user.

    YYYY-MM-DD is tried first. Anything else goes through pandas.to_datetime
    with day-first parsing, so "15/03/2024" and "15 Mar 2024" both work.

    Args:
        raw_date: Text entered at the date prompt (already stripped).

    Returns:
        Parsed calendar date.

    Raises:
        ParseError: If the text cannot be understood as a full date.
    """
    try:
        return parse_date(raw_date)
    except ParseError:
        pass

    if DIGITS_ONLY.fullmatch(raw_date):
        raise ParseError(f"Could not parse date '{raw_date}'")

    # pandas warns about format inference and day-first conflicts on stderr
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            parsed = pd.to_datetime(raw_date, dayfirst=True)
        except (ValueError, OverflowError, pd.errors.ParserError) as e:
            raise ParseError(f"Could not parse date '{raw_date}': {e}") from e

    if pd.isna(parsed):
        raise ParseError(f"Could not parse date '{raw_date}'")

    return parsed.date()


def resolve_entry_date(raw_date: str, today: date) -> tuple[date, str | None]:
    """Pick the date for a new record from prompt input.

    Args:
        raw_date: Text entered at the date prompt.
        today: Date to fall back on.

    Returns:
        Tuple of (date, warning). Blank input gives today with no warning;
        unparseable input gives today with a warning message.
    """
    text = raw_date.strip()
    if not text:
        return today, None

    try:
        return parse_entry_date(text), None
    except ParseError:
        return today, "Invalid date format. Using today's date."
