"""Theme colours and their curses colour pairs."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import Dict, Tuple

from todo_lists.config import ThemeConfig

RGB = Tuple[int, int, int]

# Style names used by the views
STYLE_TEXT = "text"
STYLE_MUTED = "muted"
STYLE_HIGHLIGHT = "highlight"
STYLE_SUCCESS = "success"
STYLE_WORRY = "worry"
STYLE_ACTIVE_TAB = "active_tab"
# Reverse-video cell marking a text input's insertion point
STYLE_CURSOR = "cursor"

# Color pair IDs
_PAIR_TEXT = 1
_PAIR_MUTED = 2
_PAIR_HIGHLIGHT = 3
_PAIR_SUCCESS = 4
_PAIR_WORRY = 5
_PAIR_ACTIVE_TAB = 6

# Custom color slots for true-color terminals
_COLOR_BASE = 20


class ThemeError(ValueError):
    """Raised for a colour that is not a 3- or 6-digit hex value."""


@dataclass(frozen=True)
class Theme:
    text: RGB
    muted: RGB
    highlight: RGB
    success: RGB
    worry: RGB


def normalize_hex(value: str) -> str:
    """Return ``value`` as '#RRGGBB', expanding the 3-digit shorthand."""
    s = value.strip()
    if not s:
        raise ThemeError("colour cannot be blank")
    s = s[1:] if s.startswith("#") else s
    s = s.lower()
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    elif len(s) != 6:
        raise ThemeError(f"hex colour must be 3 or 6 characters, got {len(s)}")
    for ch in s:
        if ch not in "0123456789abcdef":
            raise ThemeError(f"invalid hex digit {ch!r}")
    return "#" + s.upper()


def hex_to_rgb(value: str) -> RGB:
    s = normalize_hex(value)[1:]
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def theme_from_config(cfg: ThemeConfig) -> Theme:
    """Build a Theme, raising ThemeError naming the first bad colour."""
    colours: Dict[str, RGB] = {}
    for name in ("text", "muted", "highlight", "success", "worry"):
        try:
            colours[name] = hex_to_rgb(getattr(cfg, name))
        except ThemeError as exc:
            raise ThemeError(f"parse {name} colour: {exc}") from exc
    return Theme(**colours)


def default_theme() -> Theme:
    return theme_from_config(ThemeConfig())


def init_colors(theme: Theme) -> None:
    """Initialize curses color pairs using true-color if available."""
    curses.start_color()
    curses.use_default_colors()

    if curses.can_change_color() and curses.COLORS > _COLOR_BASE + 5:
        # curses uses 0-1000 scale
        def _set(color_id: int, rgb: RGB) -> int:
            r, g, b = rgb
            curses.init_color(color_id, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
            return color_id

        text = _set(_COLOR_BASE, theme.text)
        muted = _set(_COLOR_BASE + 1, theme.muted)
        highlight = _set(_COLOR_BASE + 2, theme.highlight)
        success = _set(_COLOR_BASE + 3, theme.success)
        worry = _set(_COLOR_BASE + 4, theme.worry)
    else:
        # Fallback: use built-in colors
        text = -1
        muted = curses.COLOR_WHITE
        highlight = curses.COLOR_CYAN
        success = curses.COLOR_GREEN
        worry = curses.COLOR_RED

    curses.init_pair(_PAIR_TEXT, text, -1)
    curses.init_pair(_PAIR_MUTED, muted, -1)
    curses.init_pair(_PAIR_HIGHLIGHT, highlight, -1)
    curses.init_pair(_PAIR_SUCCESS, success, -1)
    curses.init_pair(_PAIR_WORRY, worry, -1)
    curses.init_pair(_PAIR_ACTIVE_TAB, text if text != -1 else curses.COLOR_WHITE, highlight)


def style_attr(style: str) -> int:
    """Return the curses attribute for a view style name."""
    if style == STYLE_MUTED:
        return curses.color_pair(_PAIR_MUTED)
    if style == STYLE_HIGHLIGHT:
        return curses.color_pair(_PAIR_HIGHLIGHT)
    if style == STYLE_SUCCESS:
        return curses.color_pair(_PAIR_SUCCESS)
    if style == STYLE_WORRY:
        return curses.color_pair(_PAIR_WORRY)
    if style == STYLE_ACTIVE_TAB:
        return curses.color_pair(_PAIR_ACTIVE_TAB) | curses.A_BOLD
    if style == STYLE_CURSOR:
        return curses.color_pair(_PAIR_TEXT) | curses.A_REVERSE
    return curses.color_pair(_PAIR_TEXT)
