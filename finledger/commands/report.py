"""List and summary views for the interactive shell."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from finledger.domain.ledger import Ledger
from finledger.domain.records import TransactionKind, format_date, format_money_display
from finledger.domain.summary import GroupTotals, summarize_by_category, summarize_by_month, totals_for

NO_DATA = "No transactions to display."


def format_balance_with_color(group: GroupTotals) -> str:
    """Format a balance in green when non-negative, red otherwise."""
    balance = group.balance
    if balance < 0:
        return f"[red]{format_money_display(balance)}[/red]"
    return f"[green]{format_money_display(balance)}[/green]"


def list_transactions(ledger: Ledger, console: Console) -> None:
    """Show every record in entry order."""
    if not ledger:
        console.print(f"[yellow]{NO_DATA}[/yellow]")
        return

    table = Table(title=f"All Transactions ({len(ledger)})")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Amount", justify="right", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")

    for record in ledger:
        if record.kind is TransactionKind.INCOME:
            kind_display = f"[green]{record.kind.tag}[/green]"
        else:
            kind_display = f"[red]{record.kind.tag}[/red]"

        table.add_row(
            format_date(record.date),
            kind_display,
            format_money_display(record.amount),
            escape(record.category),
            escape(record.description),
        )

    console.print(table)


def render_summary_table(title: str, key_header: str, groups: Sequence[GroupTotals], show_balance: bool) -> Table:
    """Build a summary table with one row per group.

    Args:
        title: Table title.
        key_header: Header for the group key column.
        groups: Groups to render, already ordered.
        show_balance: Whether to add a Balance column.

    Returns:
        Table ready to print.
    """
    table = Table(title=title)
    table.add_column(key_header, style="cyan")
    table.add_column("Income", justify="right", no_wrap=True)
    table.add_column("Expenses", justify="right", no_wrap=True)
    if show_balance:
        table.add_column("Balance", justify="right", no_wrap=True)

    for group in groups:
        row = [
            escape(group.key),
            format_money_display(group.income),
            format_money_display(group.expense),
        ]
        if show_balance:
            row.append(format_balance_with_color(group))
        table.add_row(*row)

    return table


def monthly_summary(ledger: Ledger, console: Console) -> None:
    """Show income, expenses and balance per month, oldest first."""
    if not ledger:
        console.print(f"[yellow]{NO_DATA}[/yellow]")
        return

    groups = summarize_by_month(ledger)
    console.print(render_summary_table("Monthly Summary", "Month", groups, show_balance=True))

    total = totals_for(ledger)
    console.print(
        f"\n[bold]Total income:[/bold] {format_money_display(total.income)}"
        f"  [bold]Total expenses:[/bold] {format_money_display(total.expense)}"
        f"  [bold cyan]Net:[/bold cyan] {format_balance_with_color(total)}"
    )


def category_summary(ledger: Ledger, console: Console, sort_by: str = "seen") -> None:
    """Show income and expenses per category.

    Categories appear in the order they were first used unless sort_by="alpha".
    """
    if not ledger:
        console.print(f"[yellow]{NO_DATA}[/yellow]")
        return

    groups = summarize_by_category(ledger, sort_by)
    console.print(render_summary_table("Category Summary", "Category", groups, show_balance=False))
