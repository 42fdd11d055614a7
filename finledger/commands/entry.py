"""Add-transaction flow for the interactive shell."""

from rich.markup import escape

from finledger.dates import resolve_entry_date
from finledger.domain.models import CategoryName, Description
from finledger.domain.records import Record, TransactionKind, format_date, format_money_display
from finledger.session import Session, read_amount


def add_transaction(session: Session, kind: TransactionKind) -> Record | None:
    """Prompt for one income or expense entry and append it to the ledger.

    Args:
        session: Active session.
        kind: Whether the entry is income or an expense.

    Returns:
        The record added, or None if the amount was never entered correctly.

    Raises:
        EndOfInput: If input runs out mid-entry (nothing is added).
    """
    console = session.console

    raw_date = session.read("Enter date (yyyy-MM-dd) or press Enter for today")
    entry_date, warning = resolve_entry_date(raw_date, session.today())
    if warning:
        console.print(f"[yellow]{warning}[/yellow]")

    amount = read_amount(session, "Enter amount")
    if amount is None:
        console.print("[red]Too many invalid amounts, transaction not added[/red]")
        return None

    category = session.read("Enter category").strip()
    description = session.read("Enter description").strip()

    record = Record(
        date=entry_date,
        kind=kind,
        amount=amount,
        category=CategoryName(category),
        description=Description(description),
    )
    session.ledger.append(record)

    console.print(f"[green]✓[/green] {kind.tag} added successfully!")
    console.print(
        f"[dim]  {format_date(entry_date)} {format_money_display(amount)} {escape(category)}[/dim]",
    )
    return record
