"""Load and save steps run at the start and end of a session."""

from rich.markup import escape

from finledger.session import Session
from finledger.store import load_ledger, save_ledger


def load_command(session: Session) -> int:
    """Load the data file into the session ledger.

    A missing file is not an error: the ledger just starts empty.

    Args:
        session: Active session.

    Returns:
        Number of records loaded.
    """
    console = session.console

    try:
        report = load_ledger(session.data_path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error loading data: {escape(str(e))}[/red]")
        return 0

    if not report.found:
        return 0

    session.ledger.extend(report.records)

    for line_number in report.skipped:
        console.print(f"[yellow]Skipped line {line_number}: expected 5 comma-separated fields[/yellow]")
    for error in report.errors:
        console.print(f"[yellow]Skipped line {error.line_number}: {escape(error.message)}[/yellow]")

    console.print("[green]✓[/green] Data loaded successfully.")
    console.print(f"[dim]{len(report.records)} transactions from {escape(str(session.data_path))}[/dim]")
    return len(report.records)


def save_command(session: Session) -> bool:
    """Write the session ledger back to the data file.

    Args:
        session: Active session.

    Returns:
        True if the file was written.
    """
    console = session.console

    try:
        count = save_ledger(session.data_path, session.ledger)
    except (OSError, UnicodeEncodeError) as e:
        console.print(f"[red]Error saving data: {escape(str(e))}[/red]")
        return False

    console.print("[green]✓[/green] Data saved successfully.")
    console.print(f"[dim]{count} transactions written to {escape(str(session.data_path))}[/dim]")
    return True
