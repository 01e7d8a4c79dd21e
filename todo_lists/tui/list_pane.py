"""Browsing view: the tab bar and the active list.

Builds styled lines from session state without touching curses; the app
paints them. Each line is a list of ``(text, style)`` segments.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from todo_lists.data.lists import LIST_IDS, definition
from todo_lists.tui.icons import IconSet
from todo_lists.tui.session import Session
from todo_lists.tui.theme import (
    STYLE_ACTIVE_TAB,
    STYLE_HIGHLIGHT,
    STYLE_MUTED,
    STYLE_SUCCESS,
    STYLE_TEXT,
    STYLE_WORRY,
)

Segment = Tuple[str, str]
Line = List[Segment]

DESCRIPTION_INDENT = "      "


def tab_bar(session: Session) -> Line:
    line: Line = []
    for tab, list_id in enumerate(LIST_IDS):
        style = STYLE_ACTIVE_TAB if tab == session.active_tab else STYLE_MUTED
        line.append((f"  {definition(list_id).name}  ", style))
    return line


def lines(session: Session, icons: IconSet, now: datetime) -> Tuple[List[Line], int]:
    """Render the browsing view.

    Returns:
        The lines, and the index of the line holding the cursor item
        (0 when the list is empty).
    """
    out: List[Line] = []
    has_any = session.has_any_todos()

    if has_any:
        out.append(tab_bar(session))
        out.append([])

    todos = session.current_list.todos
    if not todos:
        out.append([("No todos yet." if has_any else "No todos", STYLE_TEXT)])
        return out, 0

    cursor_row = 0
    blank_cursor = " " * (len(icons.cursor) + 1)
    for i, todo in enumerate(todos):
        if i > 0:
            out.append([])

        is_cursor = i == session.cursor
        if is_cursor:
            cursor_row = len(out)

        line: Line = [(icons.cursor + " " if is_cursor else blank_cursor, STYLE_HIGHLIGHT)]
        if todo.completed:
            line.extend([("[", STYLE_TEXT), ("✓", STYLE_SUCCESS), ("]", STYLE_TEXT)])
        else:
            line.append(("[ ]", STYLE_TEXT))

        if is_cursor:
            title_style = STYLE_MUTED if todo.completed else STYLE_HIGHLIGHT
        else:
            title_style = STYLE_MUTED if todo.completed else STYLE_TEXT
        line.append((" " + todo.title, title_style))

        if todo.is_overdue(now):
            line.append((f" {icons.overdue} Overdue", STYLE_WORRY))
        out.append(line)

        for desc_line in todo.description.splitlines():
            out.append([(DESCRIPTION_INDENT + desc_line, STYLE_MUTED)])

    return out, cursor_row
