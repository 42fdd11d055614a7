"""Tests for the finledger command line."""

from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from finledger.cli import app
from finledger.store import HEADER

runner = CliRunner()


def run(tmp_path: Path, user_input: str, *extra: str) -> Result:
    args = ["--data-file", str(tmp_path / "finance_data.csv"), "--config", str(tmp_path / "config.toml"), *extra]
    return runner.invoke(app, args, input=user_input)


class TestShellCommand:
    """Tests for running the interactive shell through the CLI."""

    def test_exit_writes_header(self, tmp_path: Path) -> None:
        """Choosing Exit should save an empty ledger and exit 0."""
        result = run(tmp_path, "6\n")

        assert result.exit_code == 0
        assert "Personal Finance Tracker" in result.output
        assert "Thank you for using Personal Finance Tracker!" in result.output
        assert (tmp_path / "finance_data.csv").read_text(encoding="utf-8") == HEADER + "\n"

    def test_add_and_summarize(self, tmp_path: Path) -> None:
        """Should add records, print the monthly summary and save."""
        user_input = "\n".join(
            [
                "1",
                "2024-03-15",
                "2500.00",
                "Salary",
                "March paycheck",
                "2",
                "2024-03-15",
                "45.50",
                "Groceries",
                "Weekly shopping",
                "4",
                "6",
                "",
            ]
        )

        result = run(tmp_path, user_input)

        assert result.exit_code == 0
        assert "2024-03" in result.output
        assert "2,454.50" in result.output
        saved = (tmp_path / "finance_data.csv").read_text(encoding="utf-8").splitlines()
        assert saved[1:] == [
            "2024-03-15,INCOME,2500.00,Salary,March paycheck",
            "2024-03-15,EXPENSE,45.50,Groceries,Weekly shopping",
        ]

    def test_end_of_input_exits_cleanly(self, tmp_path: Path) -> None:
        """Running out of input should save and exit 0."""
        result = run(tmp_path, "")

        assert result.exit_code == 0
        assert "Thank you for using Personal Finance Tracker!" in result.output
        assert (tmp_path / "finance_data.csv").exists()

    def test_non_numeric_menu_choice_reprompts(self, tmp_path: Path) -> None:
        """Should ask again for a number without failing."""
        result = run(tmp_path, "abc\n6\n")

        assert result.exit_code == 0
        assert "Please enter a valid number" in result.output

    def test_data_file_from_config(self, tmp_path: Path) -> None:
        """Should use data_file from the config when no option is given."""
        data_path = tmp_path / "from_config.csv"
        config_path = tmp_path / "config.toml"
        config_path.write_text(f'data_file = "{data_path.as_posix()}"\n', encoding="utf-8")

        result = runner.invoke(app, ["--config", str(config_path)], input="6\n")

        assert result.exit_code == 0
        assert data_path.exists()

    def test_malformed_config_uses_defaults(self, tmp_path: Path) -> None:
        """Should warn about a bad config and still run."""
        (tmp_path / "config.toml").write_text("not = [valid\n", encoding="utf-8")

        result = run(tmp_path, "6\n")

        assert result.exit_code == 0
        assert "Could not read config" in result.output


class TestInitCommand:
    """Tests for finledger init."""

    def test_creates_config(self, tmp_path: Path) -> None:
        """Should write a default config file."""
        config_path = tmp_path / "config.toml"

        result = runner.invoke(app, ["init", "--config", str(config_path)])

        assert result.exit_code == 0
        assert 'data_file = "finance_data.csv"' in config_path.read_text(encoding="utf-8")

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """Should exit 1 if the config exists and --force is not given."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("max_attempts = 2\n", encoding="utf-8")

        result = runner.invoke(app, ["init", "--config", str(config_path)])

        assert result.exit_code == 1
        assert config_path.read_text(encoding="utf-8") == "max_attempts = 2\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """Should replace the config with --force."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("max_attempts = 2\n", encoding="utf-8")

        result = runner.invoke(app, ["init", "--force", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "max_attempts = 5" in config_path.read_text(encoding="utf-8")
