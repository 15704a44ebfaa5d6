"""XDG base directory helpers for termotype."""

import os
import sys
from pathlib import Path

APP_NAME = "termotype"


def _xdg_dir(env_var: str, fallback: Path) -> Path:
    value = os.environ.get(env_var)
    base = Path(value) if value else fallback
    return base / APP_NAME


def get_config_dir() -> Path:
    """Directory for the profile (%APPDATA% on Windows, else XDG_CONFIG_HOME)."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
    return _xdg_dir("XDG_CONFIG_HOME", Path.home() / ".config")


def get_data_dir() -> Path:
    """Directory for the settings database."""
    return _xdg_dir("XDG_DATA_HOME", Path.home() / ".local" / "share")


def get_state_dir() -> Path:
    """Directory for log files."""
    return _xdg_dir("XDG_STATE_HOME", Path.home() / ".local" / "state")
