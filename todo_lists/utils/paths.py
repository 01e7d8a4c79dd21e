"""Path utilities for locating todo data and configuration files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

APP_NAME = "t"
CONFIG_FILE = "config.json"


def _resolve_dir(xdg_var: str, fallback: Path, override: Optional[str] = None) -> Path:
    if override:
        env = os.environ.get(override)
        if env:
            return Path(env)
    xdg = os.environ.get(xdg_var)
    if xdg:
        return Path(xdg) / APP_NAME
    return fallback / APP_NAME


def get_data_dir() -> Path:
    """Return the data dir. Honors T_DATA_DIR, then XDG_DATA_HOME, defaults to ~/.local/share/t/."""
    return _resolve_dir("XDG_DATA_HOME", Path.home() / ".local" / "share", override="T_DATA_DIR")


def get_config_dir() -> Path:
    """Return the config dir. Honors XDG_CONFIG_HOME, defaults to ~/.config/t/."""
    return _resolve_dir("XDG_CONFIG_HOME", Path.home() / ".config")


def get_config_path() -> Path:
    """Return full path to config.json."""
    return get_config_dir() / CONFIG_FILE
