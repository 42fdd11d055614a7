"""Transaction records and the parsing rules for their fields.

Everything here is pure: values in, values (or ParseError) out.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum

from finledger.domain.models import CategoryName, Description, Money, Month

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
CENTS = Decimal("0.01")


class ParseError(ValueError):
    """Raised when a record field cannot be parsed from text."""


class TransactionKind(Enum):
    """Whether a record adds to income or to expenses."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def tag(self) -> str:
        """Textual tag used in the data file and in tables."""
        return _TAG_BY_KIND[self]

    @classmethod
    def parse(cls, text: str) -> "TransactionKind":
        """Look up a kind by its exact tag.

        Args:
            text: Tag text, e.g. "INCOME".

        Returns:
            Matching TransactionKind.

        Raises:
            ParseError: If the tag is unknown.
        """
        try:
            return _KIND_BY_TAG[text]
        except KeyError:
            raise ParseError(f"Unknown transaction type '{text}'") from None


_TAG_BY_KIND = {
    TransactionKind.INCOME: "INCOME",
    TransactionKind.EXPENSE: "EXPENSE",
}
_KIND_BY_TAG = {tag: kind for kind, tag in _TAG_BY_KIND.items()}


@dataclass(frozen=True)
class Record:
    """Immutable income or expense entry."""

    date: date
    kind: TransactionKind
    amount: Money
    category: CategoryName
    description: Description = Description("")

    @property
    def month(self) -> Month:
        """Month key (YYYY-MM) this record is grouped under."""
        return month_key(self.date)

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME


def month_key(day: date) -> Month:
    """Derive the zero-padded YYYY-MM key for a date."""
    return Month(f"{day.year:04d}-{day.month:02d}")


def parse_date(text: str) -> date:
    """Parse a strict YYYY-MM-DD date.

    Raises:
        ParseError: If the text is not a valid calendar date in that format.
    """
    if not DATE_PATTERN.fullmatch(text):
        raise ParseError(f"Invalid date '{text}': expected YYYY-MM-DD")

    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ParseError(f"Invalid date '{text}': expected YYYY-MM-DD") from e


def format_date(day: date) -> str:
    """Format as YYYY-MM-DD, zero-padding years before 1000."""
    return day.isoformat()


def parse_amount(text: str) -> Money:
    """Parse a decimal amount.

    Any number of decimal places is accepted. Sign is not checked.

    Args:
        text: Amount text, e.g. "45.5" or "2500.00".

    Returns:
        Parsed amount.

    Raises:
        ParseError: If the text is not a finite decimal number, or is too
            large to be written with two decimals.
    """
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise ParseError(f"Invalid amount '{text}'") from None

    if not amount.is_finite():
        raise ParseError(f"Invalid amount '{text}'")

    try:
        amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ParseError(f"Amount '{text}' is too large") from None

    return Money(amount)


def round_cents(amount: Decimal) -> Decimal:
    """Round half up to two decimals.

    Precision is widened as needed so large totals never overflow the
    default 28-digit context.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals, rounding half up.

    Args:
        amount: Amount to format.

    Returns:
        Plain string such as "2500.00" or "-3.10".
    """
    return str(round_cents(amount))


def format_money_display(amount: Decimal) -> str:
    """Format an amount for tables (e.g., "$1,234.50" or "-$3.10")."""
    rounded = round_cents(amount)
    if rounded < 0:
        return f"-${abs(rounded):,.2f}"
    return f"${rounded:,.2f}"
