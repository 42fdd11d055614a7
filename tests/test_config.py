"""Tests for finledger.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from finledger.config import (
    DEFAULT_MAX_ATTEMPTS,
    create_default_config,
    default_config,
    get_category_sort,
    get_config_path,
    get_data_path,
    get_max_attempts,
    load_config,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should honour XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "finledger" / "config.toml"

    def test_falls_back_to_dot_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert get_config_path() == Path.home() / ".config" / "finledger" / "config.toml"


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should return defaults without creating a file."""
        config = load_config(tmp_path / "config.toml")

        assert config["data_file"] == "finance_data.csv"
        assert config["max_attempts"] == DEFAULT_MAX_ATTEMPTS
        assert config["category_sort"] == "seen"
        assert not (tmp_path / "config.toml").exists()

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Should merge file values over defaults."""
        path = tmp_path / "config.toml"
        path.write_text('data_file = "ledger.csv"\n', encoding="utf-8")

        config = load_config(path)

        assert config["data_file"] == "ledger.csv"
        assert config["max_attempts"] == DEFAULT_MAX_ATTEMPTS

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should raise TOMLDecodeError for malformed files."""
        path = tmp_path / "config.toml"
        path.write_text("data_file = \n", encoding="utf-8")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """Should write TOML readable by load_config."""
        path = tmp_path / "sub" / "config.toml"
        save_config({"data_file": "x.csv", "max_attempts": 2}, path)

        assert load_config(path)["max_attempts"] == 2

    def test_default_config_permissions(self, tmp_path: Path) -> None:
        """Should create the config readable by the owner only."""
        path = tmp_path / "config.toml"
        create_default_config(path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert load_config(path)["data_file"] == "finance_data.csv"

    def test_default_config_is_a_fresh_copy(self) -> None:
        """Should not let one caller's changes leak into the next defaults."""
        first = default_config()
        first["data_file"] = "changed.csv"

        assert default_config()["data_file"] == "finance_data.csv"


class TestSettings:
    """Tests for the typed setting accessors."""

    def test_data_path(self) -> None:
        """Should build a Path from data_file."""
        assert get_data_path({"data_file": "ledger.csv"}) == Path("ledger.csv")

    def test_data_path_default(self) -> None:
        """Should fall back to finance_data.csv."""
        assert get_data_path({}) == Path("finance_data.csv")

    @pytest.mark.parametrize("value", [0, -1, "3", True, 1.5])
    def test_bad_max_attempts_falls_back(self, value: object) -> None:
        """Should ignore values that aren't positive integers."""
        assert get_max_attempts({"max_attempts": value}) == DEFAULT_MAX_ATTEMPTS

    def test_max_attempts(self) -> None:
        """Should accept a positive integer."""
        assert get_max_attempts({"max_attempts": 2}) == 2

    def test_category_sort(self) -> None:
        """Should accept known orderings and fall back otherwise."""
        assert get_category_sort({"category_sort": "alpha"}) == "alpha"
        assert get_category_sort({"category_sort": "value"}) == "seen"
