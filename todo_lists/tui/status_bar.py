"""Status bar renderer for the TUI.

Draws a single line at the bottom listing the keys that do something in
the current state.
"""

from __future__ import annotations

import curses
from typing import List, Tuple

from todo_lists.tui.icons import IconSet
from todo_lists.tui.session import Session

_SEPARATOR = " · "


def _join(items: List[Tuple[str, str]], icons: IconSet) -> str:
    if icons.show_help_icons:
        return icons.help_separator.join(f"{icon} {text}" for icon, text in items)
    return _SEPARATOR.join(text for _, text in items)


def hints(session: Session, icons: IconSet) -> str:
    """Return the key hints for the session's current state."""
    if session.form is not None:
        return _join([
            (icons.navigate, "Tab/Arrows to navigate"),
            (icons.select, "←/→ to select list"),
            (icons.submit, "Ctrl+S to save"),
            (icons.cancel, "Esc to cancel"),
        ], icons)

    items = [(icons.add, "A to add")]
    if session.current_list.todos:
        items.append((icons.edit, "E to edit"))
        items.append((icons.select, "Enter to select"))
    if session.has_any_todos():
        items.append((icons.navigate, "Tab/Arrow keys to navigate"))
        items.append((icons.submit, "Ctrl+S to submit"))
    items.append((icons.cancel, "Esc to cancel"))
    return _join(items, icons)


def draw(stdscr: curses.window, text: str, attr: int, width: int, y: int) -> None:
    """Render the status bar at the given row.

    Args:
        stdscr: The curses window to draw on.
        text: Key hints for the current state.
        attr: Curses attribute for the bar.
        width: Terminal width in columns.
        y: Row number where the status bar should be drawn.
    """
    line = " " + text

    # Pad or truncate to fill the full width
    line = line[:width].ljust(width)

    try:
        stdscr.addstr(y, 0, line, attr)
    except curses.error:
        # Writing to the very last cell can raise on some terminals
        pass
