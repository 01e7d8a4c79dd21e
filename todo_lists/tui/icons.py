"""Icon sets for the help line, cursor and overdue marker.

``auto`` mode picks the Nerd Font set when a Nerd Font appears to be
installed. Detection scans the usual font directories once per process;
callers may pass the answer in instead so nothing touches the filesystem.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from todo_lists.config import (
    ICON_MODE_ASCII,
    ICON_MODE_AUTO,
    ICON_MODE_NERD_FONT,
    IconConfig,
    IconSetConfig,
    default_ascii_icons,
    default_nerd_font_icons,
)

ICON_MODE_ENV_VAR = "T_ICON_MODE"

_TRUE_VALUES = {"1", "t", "true", "yes", "on"}
_FALSE_VALUES = {"0", "f", "false", "no", "off"}


class IconModeError(ValueError):
    """Raised for an icon mode other than auto, nerd_font or ascii."""


@dataclass(frozen=True)
class IconSet:
    help_separator: str
    add: str
    cancel: str
    edit: str
    navigate: str
    overdue: str
    select: str
    submit: str
    cursor: str
    show_help_icons: bool


def _to_set(cfg: IconSetConfig) -> IconSet:
    return IconSet(
        help_separator=cfg.help_separator,
        add=cfg.add,
        cancel=cfg.cancel,
        edit=cfg.edit,
        navigate=cfg.navigate,
        overdue=cfg.overdue,
        select=cfg.select,
        submit=cfg.submit,
        cursor=cfg.cursor,
        show_help_icons=bool(cfg.show_help_icons),
    )


def ascii_icons() -> IconSet:
    return _to_set(default_ascii_icons())


def forced_nerd_font_preference() -> Optional[bool]:
    """Read T_ICON_MODE as a boolean; None when unset or unparseable."""
    raw = os.environ.get(ICON_MODE_ENV_VAR)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def font_search_paths() -> List[Path]:
    home = Path.home()
    candidates = [
        home / "Library" / "Fonts",
        home / ".local" / "share" / "fonts",
        home / ".fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/System/Library/Fonts/Supplemental"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]
    seen = set()
    paths: List[Path] = []
    for path in candidates:
        if path not in seen:
            seen.add(path)
            paths.append(path)
    return paths


def _is_nerd_font_name(name: str) -> bool:
    name = name.lower()
    return "nerd font" in name or "nerdfont" in name


def has_nerd_font(directory: Path) -> bool:
    """Whether ``directory`` directly contains a Nerd Font file or folder."""
    try:
        entries = list(directory.iterdir())
    except OSError:
        return False
    return any(_is_nerd_font_name(entry.name) for entry in entries)


@functools.lru_cache(maxsize=None)
def detect_nerd_fonts() -> bool:
    """Scan the font directories once per process."""
    return any(has_nerd_font(path) for path in font_search_paths())


def nerd_fonts_enabled() -> bool:
    forced = forced_nerd_font_preference()
    if forced is not None:
        return forced
    return detect_nerd_fonts()


def icons_from_config(cfg: IconConfig, nerd_fonts: Optional[bool] = None) -> IconSet:
    """Resolve the icon set for ``cfg``.

    Args:
        cfg: Raw icon configuration; blank icons fall back to the defaults.
        nerd_fonts: Whether Nerd Fonts are available, used in auto mode.
            Detected via :func:`nerd_fonts_enabled` when None.

    Raises:
        IconModeError: If ``cfg.mode`` is not a known mode.
    """
    ascii_set = cfg.ascii.with_defaults(default_ascii_icons())
    nerd_set = cfg.nerd_font.with_defaults(default_nerd_font_icons())

    mode = cfg.mode.strip().lower()
    if mode in ("", ICON_MODE_AUTO):
        if nerd_fonts is None:
            nerd_fonts = nerd_fonts_enabled()
        return _to_set(nerd_set if nerd_fonts else ascii_set)
    if mode == ICON_MODE_NERD_FONT:
        return _to_set(nerd_set)
    if mode == ICON_MODE_ASCII:
        return _to_set(ascii_set)
    raise IconModeError(f"unknown icon mode {cfg.mode!r}")
