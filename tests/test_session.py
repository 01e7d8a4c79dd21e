from __future__ import annotations

from tests.helpers import NOW, TODAY, TOMORROW, FixedClock, make_lists, make_todo
from todo_lists.data import ListId
from todo_lists.tui.session import Action, FormField, FormMode, Session


def new_session(**lists) -> Session:
    if not lists:
        lists = {
            "today": [make_todo("Test todo 1", "Test description 1"),
                      make_todo("Test todo 2", "Test description 2"),
                      make_todo("Test todo 3", "Test description 3")],
            "tomorrow": [make_todo("Tomorrow task")],
            "todos": [make_todo("General task")],
        }
    return Session(make_lists(**lists), clock=FixedClock())


def type_text(session: Session, text: str) -> None:
    for ch in text:
        session.handle(Action.INSERT, ch)


def counts(session: Session):
    return [len(session.lists[list_id].todos) for list_id in ListId]


class TestBrowsing:
    def test_starts_on_today_at_top(self):
        session = new_session()
        assert session.active_list_id == ListId.TODAY
        assert session.cursor == 0
        assert session.form is None

    def test_tabs_cycle_in_both_directions(self):
        session = new_session()

        session.handle(Action.NEXT_TAB)
        assert session.active_list_id == ListId.TOMORROW

        session.handle(Action.PREV_TAB)
        session.handle(Action.PREV_TAB)
        assert session.active_list_id == ListId.TODOS

    def test_three_forward_steps_return_to_start(self):
        session = new_session(todos=[make_todo()])
        for _ in range(3):
            session.handle(Action.NEXT_TAB)
        assert session.active_list_id == ListId.TODAY

    def test_tabs_do_not_move_when_every_list_is_empty(self):
        session = new_session(today=[], tomorrow=[], todos=[])

        session.handle(Action.NEXT_TAB)
        session.handle(Action.PREV_TAB)

        assert session.active_tab == 0

    def test_tab_change_resets_cursor(self):
        session = new_session()
        session.handle(Action.DOWN)
        session.handle(Action.NEXT_TAB)
        assert session.cursor == 0

    def test_cursor_is_clamped(self):
        session = new_session()

        session.handle(Action.UP)
        assert session.cursor == 0

        for _ in range(5):
            session.handle(Action.DOWN)
        assert session.cursor == 2

    def test_cursor_stays_put_on_empty_list(self):
        session = new_session(today=[], todos=[make_todo()])
        session.handle(Action.DOWN)
        assert session.cursor == 0

    def test_toggle_stamps_and_clears_completed_at(self):
        session = new_session()
        todo = session.current_list.todos[0]

        session.handle(Action.TOGGLE)
        assert todo.completed is True
        assert todo.completed_at == NOW

        session.handle(Action.TOGGLE)
        assert todo.completed is False
        assert todo.completed_at is None

    def test_toggle_on_empty_list_is_a_no_op(self):
        session = new_session(today=[], tomorrow=[], todos=[])
        session.handle(Action.TOGGLE)
        assert counts(session) == [0, 0, 0]

    def test_quit_and_submit_are_terminal(self):
        quitter = new_session()
        quitter.handle(Action.QUIT)
        assert quitter.exited and not quitter.submitted

        submitter = new_session()
        submitter.handle(Action.SUBMIT)
        assert submitter.submitted and not submitter.exited

        submitter.handle(Action.DOWN)
        assert submitter.cursor == 0


class TestAddForm:
    def test_opens_with_cleared_fields_targeting_active_tab(self):
        session = new_session()
        session.handle(Action.NEXT_TAB)
        session.handle(Action.ADD)

        form = session.form
        assert form.mode == FormMode.ADD
        assert form.target == 1
        assert form.focused_field == FormField.TITLE
        assert form.title.value == ""
        assert form.description.value == ""
        assert form.title.focused and not form.description.focused

    def test_submit_appends_to_target_with_policy_due_date(self):
        session = new_session()
        session.handle(Action.ADD)
        type_text(session, "  New task  ")
        session.handle(Action.NEXT_FIELD)
        type_text(session, " details ")
        session.handle(Action.NEXT_FIELD)
        session.handle(Action.RIGHT)
        session.handle(Action.SUBMIT)

        assert session.form is None
        added = session.lists[ListId.TOMORROW].todos[-1]
        assert added.title == "New task"
        assert added.description == "details"
        assert added.due_date == TOMORROW
        assert added.created_at == NOW

    def test_added_todo_due_date_per_list(self):
        expected = {0: TODAY, 1: TOMORROW, 2: None}
        for tab, due in expected.items():
            session = new_session()
            session.handle(Action.ADD)
            type_text(session, "x")
            session.handle(Action.PREV_FIELD)
            for _ in range(tab):
                session.handle(Action.RIGHT)
            session.handle(Action.SUBMIT)
            assert session.list_for_tab(tab).todos[-1].due_date == due

    def test_blank_title_submit_creates_nothing(self):
        session = new_session()
        before = counts(session)

        session.handle(Action.ADD)
        type_text(session, "   ")
        session.handle(Action.SUBMIT)

        assert session.form is None
        assert counts(session) == before

    def test_cancel_discards(self):
        session = new_session()
        before = counts(session)

        session.handle(Action.ADD)
        type_text(session, "Never saved")
        session.handle(Action.CANCEL)

        assert session.form is None
        assert counts(session) == before
        assert not session.exited


class TestFormFields:
    def test_field_focus_wraps_both_ways(self):
        session = new_session()
        session.handle(Action.ADD)
        form = session.form

        session.handle(Action.PREV_FIELD)
        assert form.focused_field == FormField.LIST
        assert not form.title.focused and not form.description.focused

        session.handle(Action.NEXT_FIELD)
        assert form.focused_field == FormField.TITLE
        assert form.title.focused

        session.handle(Action.NEXT_FIELD)
        assert form.focused_field == FormField.DESCRIPTION
        assert form.description.focused and not form.title.focused

    def test_typing_goes_to_focused_field_only(self):
        session = new_session()
        session.handle(Action.ADD)
        type_text(session, "ab")
        session.handle(Action.NEXT_FIELD)
        type_text(session, "cd")
        session.handle(Action.NEXT_FIELD)
        type_text(session, "ef")

        assert session.form.title.value == "ab"
        assert session.form.description.value == "cd"

    def test_left_right_move_text_cursor_outside_list_field(self):
        session = new_session()
        session.handle(Action.ADD)
        type_text(session, "ac")
        session.handle(Action.LEFT)
        type_text(session, "b")

        assert session.form.title.value == "abc"
        assert session.form.target == 0

    def test_target_list_wraps(self):
        session = new_session()
        session.handle(Action.ADD)
        session.handle(Action.PREV_FIELD)

        session.handle(Action.LEFT)
        assert session.form.target == 2
        session.handle(Action.RIGHT)
        assert session.form.target == 0

    def test_tab_keys_do_not_change_active_tab_while_form_open(self):
        session = new_session()
        session.handle(Action.ADD)
        session.handle(Action.NEXT_TAB)
        session.handle(Action.CANCEL)
        assert session.active_tab == 0


class TestEditForm:
    def test_opens_prefilled_from_cursor_item(self):
        session = new_session()
        session.handle(Action.DOWN)
        session.handle(Action.EDIT)

        form = session.form
        assert form.mode == FormMode.EDIT
        assert form.editing_index == 1
        assert form.title.value == "Test todo 2"
        assert form.description.value == "Test description 2"
        assert form.title.focused

    def test_does_not_open_on_empty_list(self):
        session = new_session(today=[], todos=[make_todo()])
        session.handle(Action.EDIT)
        assert session.form is None

    def test_in_place_edit_keeps_order(self):
        session = new_session()
        ids = [t.id for t in session.current_list.todos]
        session.handle(Action.DOWN)
        session.handle(Action.EDIT)
        session.form.title.set_value("Updated")
        session.form.description.set_value("")
        session.handle(Action.SUBMIT)

        todos = session.current_list.todos
        assert [t.id for t in todos] == ids
        assert todos[1].title == "Updated"
        assert todos[1].description == ""

    def test_blank_title_leaves_item_untouched(self):
        session = new_session()
        session.handle(Action.EDIT)
        session.form.title.set_value("  ")
        session.handle(Action.SUBMIT)

        assert session.current_list.todos[0].title == "Test todo 1"
        assert counts(session) == [3, 1, 1]

    def test_move_to_other_list(self):
        session = new_session()
        todo = session.current_list.todos[1]
        session.handle(Action.DOWN)
        session.handle(Action.EDIT)
        session.form.title.set_value("Moved")
        session.handle(Action.PREV_FIELD)
        session.handle(Action.RIGHT)
        session.handle(Action.SUBMIT)

        today = session.lists[ListId.TODAY].todos
        tomorrow = session.lists[ListId.TOMORROW].todos
        assert todo not in today
        assert tomorrow[-1] is todo
        assert [t.id for t in tomorrow].count(todo.id) == 1
        assert todo.title == "Moved"
        assert todo.due_date == TOMORROW
        assert counts(session) == [2, 2, 1]
        assert session.cursor == 1

    def test_moving_to_todos_clears_due_date(self):
        session = new_session(today=[make_todo(due_date=TODAY)], todos=[])
        session.handle(Action.EDIT)
        session.handle(Action.PREV_FIELD)
        session.handle(Action.LEFT)
        session.handle(Action.SUBMIT)

        assert session.lists[ListId.TODOS].todos[0].due_date is None

    def test_moving_last_item_pulls_cursor_back(self):
        session = new_session()
        session.handle(Action.DOWN)
        session.handle(Action.DOWN)
        session.handle(Action.EDIT)
        session.handle(Action.PREV_FIELD)
        session.handle(Action.LEFT)
        session.handle(Action.SUBMIT)

        assert len(session.current_list.todos) == 2
        assert session.cursor == 1

    def test_moving_only_item_leaves_cursor_at_zero(self):
        session = new_session(today=[make_todo("Only")], tomorrow=[], todos=[])
        session.handle(Action.EDIT)
        session.handle(Action.PREV_FIELD)
        session.handle(Action.RIGHT)
        session.handle(Action.SUBMIT)

        assert session.current_list.todos == []
        assert session.cursor == 0
        assert session.active_list_id == ListId.TODAY
