"""Session context and bounded input prompts for the interactive shell."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TypeVar

import typer
from rich.console import Console

from finledger.config import DEFAULT_CATEGORY_SORT, DEFAULT_MAX_ATTEMPTS
from finledger.domain.ledger import Ledger
from finledger.domain.models import Money
from finledger.domain.records import parse_amount

T = TypeVar("T")


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


def prompt_line(text: str) -> str:
    """Read one line from the terminal via typer.prompt.

    Args:
        text: Prompt text (": " is appended).

    Returns:
        The entered line; empty string for a blank entry.

    Raises:
        EndOfInput: On end-of-input or Ctrl-C.
    """
    try:
        result: str = typer.prompt(text, default="", show_default=False)
    except typer.Abort:
        raise EndOfInput() from None
    return result


@dataclass
class Session:
    """Everything one interactive run works with.

    The session owns the ledger for its whole lifetime.
    """

    data_path: Path
    console: Console
    ledger: Ledger = field(default_factory=Ledger)
    reader: Callable[[str], str] = prompt_line
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    category_sort: str = DEFAULT_CATEGORY_SORT
    today: Callable[[], date] = date.today

    def read(self, prompt: str) -> str:
        """Read one line of input.

        Raises:
            EndOfInput: When no more input is available.
        """
        try:
            return self.reader(prompt)
        except EOFError:
            raise EndOfInput() from None


def read_parsed(
    session: Session,
    prompt: str,
    retry_prompt: str,
    parse: Callable[[str], T],
) -> T | None:
    """Prompt until the input parses or the attempt bound is reached.

    Args:
        session: Active session.
        prompt: Prompt for the first attempt.
        retry_prompt: Prompt for each later attempt.
        parse: Parser raising ValueError on bad input.

    Returns:
        Parsed value, or None once max_attempts entries have failed.

    Raises:
        EndOfInput: When input runs out before a valid entry.
    """
    text = prompt
    for _ in range(session.max_attempts):
        raw = session.read(text)
        try:
            return parse(raw.strip())
        except ValueError:
            text = retry_prompt
    return None


def read_int(session: Session, prompt: str) -> int | None:
    """Read an integer with bounded retries."""
    return read_parsed(session, prompt, "Please enter a valid number", int)


def read_amount(session: Session, prompt: str) -> Money | None:
    """Read a decimal amount with bounded retries."""
    return read_parsed(session, prompt, "Please enter a valid amount", parse_amount)
