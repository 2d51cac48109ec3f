"""Configuration management for Payroll Manager.

Only presentation preferences are configurable; employee records are
never written to disk.

settings.json - machine-specific preferences
   - currency_symbol: prefix for money amounts in reports
   - report_format: "text" (plain report) or "table" (rich table)

Config directory resolution:
1. PAYROLL_CONFIG_PATH environment variable (if set)
2. ~/.config/payroll/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError


APP_NAME = "payroll"
SETTINGS_FILENAME = "settings.json"


class SettingsError(Exception):
    """Raised when settings.json is unreadable or holds invalid values."""
    pass


class Settings(BaseModel):
    """Effective settings with defaults applied."""

    model_config = ConfigDict(extra="forbid")

    currency_symbol: str = Field(default="$", min_length=1, max_length=3)
    report_format: Literal["text", "table"] = "text"


SETTING_KEYS = tuple(Settings.model_fields)


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAYROLL_CONFIG_PATH environment variable
    2. ~/.config/payroll/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("PAYROLL_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load raw settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        SettingsError: If the file is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsError(f"Invalid JSON in {settings_file}: {e}")

    if not isinstance(data, dict):
        raise SettingsError(f"Expected a JSON object in {settings_file}")
    return data


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def load_effective_settings() -> Settings:
    """Load settings.json merged over defaults and validate it.

    Raises:
        SettingsError: If a key is unknown or a value is invalid
    """
    raw = load_settings()
    try:
        return Settings(**raw)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {get_settings_path()}:\n{e}")


def get_setting(key: str, default: Any = None) -> Any:
    """Get a raw setting value from settings.json."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Validate and store a setting value.

    Raises:
        SettingsError: If the key is unknown or the value is invalid
    """
    if key not in SETTING_KEYS:
        raise SettingsError(
            f"Unknown setting '{key}'. Known settings: {', '.join(SETTING_KEYS)}"
        )

    settings = load_settings()
    settings[key] = value
    try:
        Settings(**settings)
    except ValidationError as e:
        raise SettingsError(f"Invalid value for '{key}': {value!r}\n{e}")
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting so its default applies again.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
