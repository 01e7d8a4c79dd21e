from __future__ import annotations

import curses

from todo_lists.tui.keys import CTRL_C, CTRL_S, ESC, action_for, browse_action, form_action
from todo_lists.tui.session import Action


class TestBrowseKeys:
    def test_navigation(self):
        assert browse_action("k") == (Action.UP, "")
        assert browse_action(curses.KEY_DOWN) == (Action.DOWN, "")
        assert browse_action("\t") == (Action.NEXT_TAB, "")
        assert browse_action(curses.KEY_BTAB) == (Action.PREV_TAB, "")
        assert browse_action(curses.KEY_LEFT) == (Action.PREV_TAB, "")

    def test_toggle_add_edit(self):
        assert browse_action("\n") == (Action.TOGGLE, "")
        assert browse_action(" ") == (Action.TOGGLE, "")
        assert browse_action("a") == (Action.ADD, "")
        assert browse_action("e") == (Action.EDIT, "")

    def test_quit_and_submit(self):
        for key in (ESC, CTRL_C, "q"):
            assert browse_action(key) == (Action.QUIT, "")
        assert browse_action(CTRL_S) == (Action.SUBMIT, "")

    def test_unbound_key(self):
        assert browse_action("z") is None


class TestFormKeys:
    def test_characters_are_inserted(self):
        assert form_action("a") == (Action.INSERT, "a")
        assert form_action("q") == (Action.INSERT, "q")
        assert form_action("é") == (Action.INSERT, "é")
        assert form_action("\n") == (Action.INSERT, "\n")

    def test_field_and_list_navigation(self):
        assert form_action("\t") == (Action.NEXT_FIELD, "")
        assert form_action(curses.KEY_UP) == (Action.PREV_FIELD, "")
        assert form_action(curses.KEY_RIGHT) == (Action.RIGHT, "")

    def test_editing_keys(self):
        assert form_action("\x7f") == (Action.BACKSPACE, "")
        assert form_action(curses.KEY_BACKSPACE) == (Action.BACKSPACE, "")
        assert form_action(curses.KEY_DC) == (Action.DELETE, "")

    def test_escape_cancels_instead_of_quitting(self):
        assert action_for(ESC, in_form=True) == (Action.CANCEL, "")
        assert action_for(ESC, in_form=False) == (Action.QUIT, "")

    def test_unprintable_keys_are_ignored(self):
        assert form_action("\x01") is None
        assert form_action(curses.KEY_F1) is None
