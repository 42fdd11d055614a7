"""Interactive menu loop."""

from finledger.commands.data import load_command, save_command
from finledger.commands.entry import add_transaction
from finledger.commands.report import category_summary, list_transactions, monthly_summary
from finledger.domain.records import TransactionKind
from finledger.session import EndOfInput, Session, read_int

MENU_OPTIONS = (
    "Add Income",
    "Add Expense",
    "View All Transactions",
    "View Monthly Summary",
    "View Category Summary",
    "Exit",
)
EXIT_CHOICE = len(MENU_OPTIONS)


def show_menu(session: Session) -> None:
    console = session.console
    console.print("\n[bold cyan]===== Personal Finance Tracker =====[/bold cyan]")
    for number, label in enumerate(MENU_OPTIONS, 1):
        console.print(f"{number}. {label}")


def dispatch(session: Session, choice: int) -> bool:
    """Run one menu choice.

    Args:
        session: Active session.
        choice: Menu number entered by the user.

    Returns:
        False once the user has chosen to exit, True otherwise.
    """
    if choice == 1:
        add_transaction(session, TransactionKind.INCOME)
    elif choice == 2:
        add_transaction(session, TransactionKind.EXPENSE)
    elif choice == 3:
        list_transactions(session.ledger, session.console)
    elif choice == 4:
        monthly_summary(session.ledger, session.console)
    elif choice == 5:
        category_summary(session.ledger, session.console, session.category_sort)
    elif choice == EXIT_CHOICE:
        return False
    else:
        session.console.print("[red]Invalid option. Please try again.[/red]")
    return True


def run_shell(session: Session) -> None:
    """Load the ledger, run the menu until exit or end of input, then save.

    Args:
        session: Session to run; its ledger is filled from the data file.
    """
    console = session.console
    load_command(session)

    running = True
    while running:
        show_menu(session)
        try:
            choice = read_int(session, "Choose an option")
            if choice is None:
                console.print("[red]Too many invalid entries[/red]")
                continue
            running = dispatch(session, choice)
        except EndOfInput:
            console.print("\n[dim]End of input[/dim]")
            running = False

    save_command(session)
    console.print("Thank you for using Personal Finance Tracker!")
