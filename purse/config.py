"""Configuration file management for purse."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_CONFIG: dict[str, Any] = {
    "show_notifications": True,
    "debounce_ms": 100,
    "actor_type": "character",
    "language": "en",
}


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
    return get_xdg_config_home() / "purse" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(DEFAULT_CONFIG, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Keys missing from the file fall back to their defaults, and a missing
    file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_CONFIG)
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


def set_option(key: str, value: Any, config_path: Path | None = None) -> None:
    """Update a single configuration option.

    Args:
        key: Option name (must be a known option).
        value: New value.
        config_path: Path to config file. If None, uses default location.

    Raises:
        KeyError: If the option is unknown.
    """
    if key not in DEFAULT_CONFIG:
        raise KeyError(key)

    config = load_config(config_path)
    config[key] = value
    save_config(config, config_path)
