"""CLI entry point for finledger."""

import sys
import tomllib
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from finledger.config import (
    create_default_config,
    default_config,
    get_category_sort,
    get_config_path,
    get_data_path,
    get_max_attempts,
    load_config,
)
from finledger.session import Session
from finledger.shell import run_shell

app = typer.Typer(
    name="finledger",
    help="Personal Finance Tracker - record income and expenses, see where the money goes",
    add_completion=False,
)

console = Console()


def read_config(config_path: Path | None) -> dict[str, Any]:
    """Load config, falling back to defaults if the file is malformed."""
    try:
        return load_config(config_path)
    except (tomllib.TOMLDecodeError, OSError) as e:
        console.print(f"[red]Could not read config: {escape(str(e))}[/red]")
        console.print("[dim]Using default settings[/dim]")
        return default_config()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: Path = typer.Option(None, "--data-file", "-f", help="Data file (default: finance_data.csv)"),
    config: Path = typer.Option(None, "--config", help="Config file (default: ~/.config/finledger/config.toml)"),
) -> None:
    """Personal Finance Tracker - run without a command for the interactive menu."""
    if ctx.invoked_subcommand is not None:
        return

    settings = read_config(config)
    session = Session(
        data_path=data_file or get_data_path(settings),
        console=console,
        max_attempts=get_max_attempts(settings),
        category_sort=get_category_sort(settings),
    )
    run_shell(session)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config: Path = typer.Option(None, "--config", help="Config file to create"),
) -> None:
    """Create a default configuration file."""
    config_path = config or get_config_path()

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path}[/red]", style="bold")
        console.print("\n[yellow]Use 'finledger init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config file created at {config_path} (permissions: 600)")


if __name__ == "__main__":
    app()
