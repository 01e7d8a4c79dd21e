"""Add/edit form view."""

from __future__ import annotations

from typing import List

from todo_lists.data.lists import LIST_IDS, definition
from todo_lists.tui.icons import IconSet
from todo_lists.tui.list_pane import Line
from todo_lists.tui.session import Form, FormField, FormMode
from todo_lists.tui.text_input import TextInput
from todo_lists.tui.theme import (
    STYLE_ACTIVE_TAB,
    STYLE_CURSOR,
    STYLE_HIGHLIGHT,
    STYLE_MUTED,
    STYLE_TEXT,
)

INPUT_INDENT = "  "


def _merge(line: Line) -> Line:
    """Join adjacent segments that share a style."""
    merged: Line = []
    for text, style in line:
        if merged and merged[-1][1] == style:
            merged[-1] = (merged[-1][0] + text, style)
        else:
            merged.append((text, style))
    return merged


def input_lines(text_input: TextInput) -> List[Line]:
    """Render a text input, one line per buffer line."""
    value = text_input.value
    if not value and not text_input.focused:
        return [[(INPUT_INDENT, STYLE_TEXT), (text_input.placeholder, STYLE_MUTED)]]

    out: List[Line] = [[(INPUT_INDENT, STYLE_TEXT)]]
    for i, ch in enumerate(value):
        at_cursor = text_input.focused and i == text_input.position
        if ch == "\n":
            if at_cursor:
                out[-1].append((" ", STYLE_CURSOR))
            out.append([(INPUT_INDENT, STYLE_TEXT)])
            continue
        out[-1].append((ch, STYLE_CURSOR if at_cursor else STYLE_TEXT))

    if text_input.focused and text_input.position == len(value):
        out[-1].append((" ", STYLE_CURSOR))
    if not value:
        out[-1].append((text_input.placeholder, STYLE_MUTED))

    return [_merge(line) for line in out]


def _label(text: str, focused: bool, icons: IconSet) -> Line:
    if focused:
        return [(f"{icons.cursor} {text}", STYLE_HIGHLIGHT)]
    return [(" " * (len(icons.cursor) + 1) + text, STYLE_TEXT)]


def list_chooser(form: Form) -> Line:
    line: Line = []
    focused = form.focused_field == FormField.LIST
    for tab, list_id in enumerate(LIST_IDS):
        if tab == form.target:
            style = STYLE_ACTIVE_TAB if focused else STYLE_HIGHLIGHT
            indicator = "▸ "
        else:
            style = STYLE_MUTED
            indicator = "  "
        line.append(("  " + indicator, STYLE_TEXT))
        line.append((definition(list_id).name, style))
        line.append(("  ", STYLE_TEXT))
    return line


def lines(form: Form, icons: IconSet) -> List[Line]:
    """Render the open form."""
    editing = form.mode == FormMode.EDIT
    out: List[Line] = [
        [(" Edit Todo " if editing else " Add Todo ", STYLE_ACTIVE_TAB)],
        [],
        _label("Title:", form.focused_field == FormField.TITLE, icons),
    ]
    out.extend(input_lines(form.title))
    out.append([])
    out.append(_label("Description:", form.focused_field == FormField.DESCRIPTION, icons))
    out.extend(input_lines(form.description))
    out.append([])
    out.append(_label("Move to list:" if editing else "Add to list:",
                      form.focused_field == FormField.LIST, icons))
    out.append(list_chooser(form))
    return out
