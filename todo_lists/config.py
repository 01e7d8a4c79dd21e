"""Loading of the optional config.json.

The file holds two objects, ``theme`` and ``icons``. Anything missing
falls back to the built-in defaults; values are validated later when the
theme and icon set are built from them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from todo_lists.utils.paths import CONFIG_FILE, get_config_dir

ICON_MODE_AUTO = "auto"
ICON_MODE_NERD_FONT = "nerd_font"
ICON_MODE_ASCII = "ascii"


class ConfigError(Exception):
    """Raised when the config file cannot be read or decoded."""


@dataclass
class ThemeConfig:
    """Raw hex colour strings for the theme."""

    text: str = "#FFFFFF"
    muted: str = "#696969"
    highlight: str = "#58C5C7"
    success: str = "#99CC00"
    worry: str = "#FF7676"


@dataclass
class IconSetConfig:
    help_separator: str = ""
    add: str = ""
    cancel: str = ""
    edit: str = ""
    navigate: str = ""
    overdue: str = ""
    select: str = ""
    submit: str = ""
    cursor: str = ""
    show_help_icons: Optional[bool] = None

    def with_defaults(self, fallback: "IconSetConfig") -> "IconSetConfig":
        """Fill blank icons and an unset show_help_icons from ``fallback``."""
        out = replace(self)
        for f in fields(self):
            value = getattr(out, f.name)
            if f.name == "show_help_icons":
                if value is None:
                    out.show_help_icons = fallback.show_help_icons
            elif not str(value).strip():
                setattr(out, f.name, getattr(fallback, f.name))
        return out


def default_ascii_icons() -> IconSetConfig:
    return IconSetConfig(
        help_separator="  ",
        add="+",
        cancel="x",
        edit="~",
        navigate="->",
        overdue="!",
        select="*",
        submit="S",
        cursor=">",
        show_help_icons=False,
    )


def default_nerd_font_icons() -> IconSetConfig:
    return IconSetConfig(
        help_separator="    ",
        add="",
        cancel="",
        edit="",
        navigate="",
        overdue="",
        select="",
        submit="",
        cursor="",
        show_help_icons=True,
    )


@dataclass
class IconConfig:
    mode: str = ICON_MODE_AUTO
    ascii: IconSetConfig = field(default_factory=default_ascii_icons)
    nerd_font: IconSetConfig = field(default_factory=default_nerd_font_icons)


@dataclass
class Config:
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    icons: IconConfig = field(default_factory=IconConfig)


# JSON key -> IconSetConfig attribute
_ICON_KEYS = {
    "helpSeparator": "help_separator",
    "help_separator": "help_separator",
    "add": "add",
    "cancel": "cancel",
    "edit": "edit",
    "navigate": "navigate",
    "overdue": "overdue",
    "select": "select",
    "submit": "submit",
    "cursor": "cursor",
    "showHelpIcons": "show_help_icons",
    "show_help_icons": "show_help_icons",
}


def _expect_object(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"decode config: '{name}' must be an object")
    return value


def _parse_theme(raw: Dict[str, Any]) -> ThemeConfig:
    theme = ThemeConfig()
    names = {f.name for f in fields(ThemeConfig)}
    for key, value in raw.items():
        attr = key.lower()
        if attr not in names:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"decode config: theme.{key} must be a string")
        setattr(theme, attr, value)
    return theme


def _parse_icon_set(raw: Dict[str, Any], name: str, base: IconSetConfig) -> IconSetConfig:
    icons = replace(base)
    for key, value in raw.items():
        attr = _ICON_KEYS.get(key)
        if attr is None:
            continue
        if attr == "show_help_icons":
            if value is not None and not isinstance(value, bool):
                raise ConfigError(f"decode config: icons.{name}.{key} must be a boolean")
        elif not isinstance(value, str):
            raise ConfigError(f"decode config: icons.{name}.{key} must be a string")
        setattr(icons, attr, value)
    return icons


def _parse_icons(raw: Dict[str, Any]) -> IconConfig:
    icons = IconConfig()
    if "mode" in raw:
        if not isinstance(raw["mode"], str):
            raise ConfigError("decode config: icons.mode must be a string")
        icons.mode = raw["mode"]
    for name in ("ascii", "nerd_font"):
        if name in raw:
            section = _expect_object(raw[name], f"icons.{name}")
            setattr(icons, name, _parse_icon_set(section, name, getattr(icons, name)))
    return icons


def parse_config(data: Dict[str, Any]) -> Config:
    """Build a Config from decoded JSON, layering values over the defaults."""
    config = Config()
    if "theme" in data:
        config.theme = _parse_theme(_expect_object(data["theme"], "theme"))
    if "icons" in data:
        config.icons = _parse_icons(_expect_object(data["icons"], "icons"))
    return config


def load_config(config_dir: Optional[Path] = None) -> Config:
    """Read config.json from ``config_dir`` (default: the XDG config dir).

    A missing or empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON.
    """
    root = config_dir if config_dir is not None else get_config_dir()
    path = root / CONFIG_FILE

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Config()
    except OSError as exc:
        raise ConfigError(f"read config: {exc}") from exc

    if not text.strip():
        return Config()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"decode config: {exc}") from exc

    return parse_config(_expect_object(data, "config"))
