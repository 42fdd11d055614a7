"""Shared fixtures for finledger tests."""

import io
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from finledger.session import Session

TODAY = date(2026, 10, 19)


class ScriptedReader:
    """Feeds canned lines to a session and remembers the prompts shown."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_session(tmp_path: Path, output: io.StringIO) -> Callable[..., Session]:
    """Build a session on a temp data file with scripted input."""

    def factory(lines: list[str], max_attempts: int = 3, **kwargs: object) -> Session:
        return Session(
            data_path=tmp_path / "finance_data.csv",
            console=Console(file=output, width=200, color_system=None),
            reader=ScriptedReader(lines),
            max_attempts=max_attempts,
            today=lambda: TODAY,
            **kwargs,  # type: ignore[arg-type]
        )

    return factory
