"""Pure functions for summary calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

Records are folded into (income, expense) pairs per group key in one pass.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from finledger.domain.models import Money
from finledger.domain.records import Record

CATEGORY_SORTS = ("seen", "alpha")


@dataclass(frozen=True)
class GroupTotals:
    """Immutable income/expense totals for one group key."""

    key: str
    income: Money
    expense: Money

    @property
    def balance(self) -> Money:
        return Money(self.income - self.expense)


def fold_totals(
    records: Iterable[Record],
    key: Callable[[Record], str],
) -> dict[str, tuple[Money, Money]]:
    """Fold records into income and expense totals per group key.

    Args:
        records: Records to aggregate.
        key: Function deriving the group key of a record.

    Returns:
        Mapping of key to (income, expense), in first-seen key order.
    """
    totals: dict[str, tuple[Money, Money]] = {}

    for record in records:
        group = key(record)
        income, expense = totals.get(group, (Money(Decimal(0)), Money(Decimal(0))))
        if record.is_income:
            income = Money(income + record.amount)
        else:
            expense = Money(expense + record.amount)
        totals[group] = (income, expense)

    return totals


def to_group_totals(totals: dict[str, tuple[Money, Money]]) -> list[GroupTotals]:
    """Convert folded totals into GroupTotals, keeping mapping order."""
    return [GroupTotals(key=key, income=income, expense=expense) for key, (income, expense) in totals.items()]


def summarize_by_month(records: Iterable[Record]) -> list[GroupTotals]:
    """Summarize records per YYYY-MM month, oldest month first.

    Args:
        records: Records to aggregate.

    Returns:
        GroupTotals sorted by month key ascending.
    """
    totals = fold_totals(records, lambda record: record.month)
    return sorted(to_group_totals(totals), key=lambda group: group.key)


def summarize_by_category(records: Iterable[Record], sort_by: str = "seen") -> list[GroupTotals]:
    """Summarize records per category.

    Args:
        records: Records to aggregate.
        sort_by: "seen" keeps the order in which categories first appear,
            "alpha" sorts by category name.

    Returns:
        GroupTotals in the requested order.

    Raises:
        ValueError: If sort_by is not a known ordering.
    """
    if sort_by not in CATEGORY_SORTS:
        raise ValueError(f"Unknown category sort '{sort_by}' (expected one of {', '.join(CATEGORY_SORTS)})")

    groups = to_group_totals(fold_totals(records, lambda record: record.category))

    if sort_by == "alpha":
        return sorted(groups, key=lambda group: group.key)
    return groups


def totals_for(records: Iterable[Record]) -> GroupTotals:
    """Grand totals across all records.

    Args:
        records: Records to aggregate.

    Returns:
        GroupTotals keyed "Total" (zeros when there are no records).
    """
    folded = fold_totals(records, lambda record: "Total")
    income, expense = folded.get("Total", (Money(Decimal(0)), Money(Decimal(0))))
    return GroupTotals(key="Total", income=income, expense=expense)
