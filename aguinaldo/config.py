"""Optional TOML settings for aguinaldo: default receipt directory and locale."""

import os
import tomllib
from pathlib import Path
from typing import Any

from aguinaldo.domain.receipt import DEFAULT_LOCALE
from aguinaldo.errors import ConfigError


def get_xdg_config_home() -> Path:
    """Base directory for user settings: $XDG_CONFIG_HOME or ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Location of the aguinaldo settings file.

    Returns:
        <config home>/aguinaldo/config.toml
    """
    return get_xdg_config_home() / "aguinaldo" / "config.toml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    A missing file is not an error: it yields an empty configuration.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        ConfigError: If the file exists but is not valid UTF-8 TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(str(config_path), str(e)) from e


def get_output_dir(config: dict[str, Any]) -> str | None:
    """Get the default receipt directory.

    Args:
        config: Configuration dictionary.

    Returns:
        Configured output directory or None.
    """
    output_dir = config.get("output_dir")
    if isinstance(output_dir, str) and output_dir:
        return output_dir
    return None


def get_locale(config: dict[str, Any]) -> str:
    """Get the locale used for currency formatting.

    Args:
        config: Configuration dictionary.

    Returns:
        Configured locale name, or the Costa Rican default.
    """
    locale_name = config.get("locale")
    if isinstance(locale_name, str) and locale_name:
        return locale_name
    return DEFAULT_LOCALE
