"""Main TUI application loop.

Manages curses setup/teardown, input dispatch and the render loop. All
state lives in the Session; this module only paints the lines built by
the list and form panes and feeds key presses back as actions.
"""

from __future__ import annotations

import curses
import os
from datetime import datetime
from typing import Callable, List

from todo_lists.tui import form_pane, list_pane, status_bar
from todo_lists.tui.icons import IconSet
from todo_lists.tui.keys import action_for
from todo_lists.tui.list_pane import Line
from todo_lists.tui.session import Session
from todo_lists.tui.theme import STYLE_MUTED, Theme, init_colors, style_attr

# Padding around the content area
_PAD_Y = 1
_PAD_X = 2


class _Screen:
    """Scroll position for the content area."""

    def __init__(self) -> None:
        self.scroll_offset = 0


def _ensure_row_visible(screen: _Screen, row: int, height: int) -> None:
    """Adjust scroll_offset so the given content row is on screen."""
    if row < screen.scroll_offset:
        screen.scroll_offset = row
    elif row >= screen.scroll_offset + height:
        screen.scroll_offset = row - height + 1


def _draw_line(stdscr: curses.window, y: int, x: int, line: Line, width: int) -> None:
    """Draw one line of styled segments, truncated to ``width`` columns."""
    col = 0
    for text, style in line:
        if col >= width:
            break
        text = text[: width - col]
        try:
            stdscr.addstr(y, x + col, text, style_attr(style))
        except curses.error:
            pass
        col += len(text)


def _render(stdscr: curses.window, session: Session, icons: IconSet,
            screen: _Screen, now: datetime) -> None:
    """Perform a full render of the TUI."""
    stdscr.erase()
    max_y, max_x = stdscr.getmaxyx()

    if max_y < 4 or max_x < 20:
        # Terminal too small
        try:
            stdscr.addstr(0, 0, "Terminal too small")
        except curses.error:
            pass
        stdscr.noutrefresh()
        curses.doupdate()
        return

    if session.form is not None:
        lines: List[Line] = form_pane.lines(session.form, icons)
        focus_row = 0
    else:
        lines, focus_row = list_pane.lines(session, icons, now)

    # Status bar takes the last row
    status_y = max_y - 1
    height = max(1, status_y - _PAD_Y * 2)
    width = max_x - _PAD_X * 2

    _ensure_row_visible(screen, focus_row, height)
    visible = lines[screen.scroll_offset: screen.scroll_offset + height]
    for i, line in enumerate(visible):
        _draw_line(stdscr, _PAD_Y + i, _PAD_X, line, width)

    status_bar.draw(stdscr, status_bar.hints(session, icons),
                    style_attr(STYLE_MUTED), max_x, status_y)

    stdscr.noutrefresh()
    curses.doupdate()


def _main(stdscr: curses.window, session: Session, theme: Theme, icons: IconSet,
          clock: Callable[[], datetime]) -> None:
    """Curses main function, run inside curses.wrapper."""
    # Setup
    curses.curs_set(0)  # hide cursor
    curses.raw()  # deliver Ctrl+C and Ctrl+S as keys
    stdscr.keypad(True)
    stdscr.timeout(100)  # 100ms timeout for responsive resize handling
    init_colors(theme)

    screen = _Screen()
    in_form = False

    while not session.done:
        _render(stdscr, session, icons, screen, clock())

        try:
            key = stdscr.get_wch()
        except curses.error:
            # Timeout with no input; re-render (handles resize)
            continue

        if key == curses.KEY_RESIZE:
            stdscr.clear()
            continue

        mapped = action_for(key, session.form is not None)
        if mapped is None:
            continue

        action, text = mapped
        session.handle(action, text)

        # Switching between list and form starts from the top
        if in_form != (session.form is not None):
            in_form = session.form is not None
            screen.scroll_offset = 0


def run(session: Session, theme: Theme, icons: IconSet,
        clock: Callable[[], datetime]) -> Session:
    """Entry point for the TUI. Runs until the session is quit or submitted."""
    # Keep Esc responsive; curses waits a full second by default
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_main, session, theme, icons, clock)
    return session
