"""Translation of curses key input into session actions.

``get_wch`` hands back a ``str`` for characters (control characters
included) and an ``int`` for special keys, so both forms are mapped here.
"""

from __future__ import annotations

import curses
from typing import Optional, Tuple, Union

from todo_lists.tui.session import Action

Key = Union[str, int]
KeyAction = Tuple[Action, str]

ESC = "\x1b"
CTRL_C = "\x03"
CTRL_S = "\x13"
TAB = "\t"
ENTER_KEYS = ("\n", "\r", curses.KEY_ENTER)
BACKSPACE_KEYS = ("\x7f", "\x08", curses.KEY_BACKSPACE)

_BROWSE_KEYS = {
    "k": Action.UP,
    curses.KEY_UP: Action.UP,
    "j": Action.DOWN,
    curses.KEY_DOWN: Action.DOWN,
    "h": Action.PREV_TAB,
    curses.KEY_LEFT: Action.PREV_TAB,
    curses.KEY_BTAB: Action.PREV_TAB,
    "l": Action.NEXT_TAB,
    curses.KEY_RIGHT: Action.NEXT_TAB,
    TAB: Action.NEXT_TAB,
    " ": Action.TOGGLE,
    "a": Action.ADD,
    "e": Action.EDIT,
    "q": Action.QUIT,
    ESC: Action.QUIT,
    CTRL_C: Action.QUIT,
    CTRL_S: Action.SUBMIT,
}

_FORM_KEYS = {
    ESC: Action.CANCEL,
    CTRL_S: Action.SUBMIT,
    TAB: Action.NEXT_FIELD,
    curses.KEY_DOWN: Action.NEXT_FIELD,
    curses.KEY_BTAB: Action.PREV_FIELD,
    curses.KEY_UP: Action.PREV_FIELD,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_DC: Action.DELETE,
    curses.KEY_HOME: Action.HOME,
    curses.KEY_END: Action.END,
}


def browse_action(key: Key) -> Optional[KeyAction]:
    """Map a key pressed while browsing the lists."""
    if key in ENTER_KEYS:
        return Action.TOGGLE, ""
    action = _BROWSE_KEYS.get(key)
    if action is None:
        return None
    return action, ""


def form_action(key: Key) -> Optional[KeyAction]:
    """Map a key pressed while the add/edit form is open."""
    action = _FORM_KEYS.get(key)
    if action is not None:
        return action, ""
    if key in BACKSPACE_KEYS:
        return Action.BACKSPACE, ""
    if key in ENTER_KEYS:
        return Action.INSERT, "\n"
    if isinstance(key, str) and key.isprintable():
        return Action.INSERT, key
    return None


def action_for(key: Key, in_form: bool) -> Optional[KeyAction]:
    return form_action(key) if in_form else browse_action(key)
