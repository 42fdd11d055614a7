"""Configuration file management for finledger."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from finledger.domain.summary import CATEGORY_SORTS
from finledger.store import DEFAULT_DATA_FILE

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_CATEGORY_SORT = "seen"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "finledger" / "config.toml"


def default_config() -> dict[str, Any]:
    """Settings used when no config file exists or a key is missing.

    Returns:
        Fresh dict of default settings.
    """
    return {
        "data_file": DEFAULT_DATA_FILE,
        "max_attempts": DEFAULT_MAX_ATTEMPTS,
        "category_sort": DEFAULT_CATEGORY_SORT,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with owner-only permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary. Defaults only if the file doesn't exist.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config()
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        config.update(tomllib.load(f))

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_data_path(config: dict[str, Any]) -> Path:
    """Resolve the data file path from config (relative to the working directory)."""
    return Path(str(config.get("data_file") or DEFAULT_DATA_FILE)).expanduser()


def get_max_attempts(config: dict[str, Any]) -> int:
    """Retry bound for prompts; non-positive or non-integer values fall back to the default."""
    value = config.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_MAX_ATTEMPTS
    return value


def get_category_sort(config: dict[str, Any]) -> str:
    """Category summary order; unknown values fall back to first-seen order."""
    value = config.get("category_sort", DEFAULT_CATEGORY_SORT)
    if value not in CATEGORY_SORTS:
        return DEFAULT_CATEGORY_SORT
    return str(value)
