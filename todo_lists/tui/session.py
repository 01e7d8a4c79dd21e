"""Interactive session state.

Holds the three lists, the active tab, the cursor and the optional add/edit
form, and applies one action at a time. Nothing here touches curses or the
disk, so every transition can be driven directly from tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Callable, Dict, Optional

from todo_lists.data.lists import LIST_IDS, ListId, default_due_date, definition
from todo_lists.data.models import Todo, TodoList
from todo_lists.tui.text_input import TextInput
from todo_lists.utils.formatting import local_now

TITLE_CHAR_LIMIT = 100
DESCRIPTION_CHAR_LIMIT = 500

TAB_COUNT = len(LIST_IDS)


class Action(Enum):
    QUIT = "quit"
    SUBMIT = "submit"
    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    ADD = "add"
    EDIT = "edit"
    # Form actions
    CANCEL = "cancel"
    NEXT_FIELD = "next_field"
    PREV_FIELD = "prev_field"
    LEFT = "left"
    RIGHT = "right"
    INSERT = "insert"
    BACKSPACE = "backspace"
    DELETE = "delete"
    HOME = "home"
    END = "end"


class FormMode(Enum):
    ADD = "add"
    EDIT = "edit"


class FormField(IntEnum):
    TITLE = 0
    DESCRIPTION = 1
    LIST = 2


FIELD_COUNT = len(FormField)


def _new_title_input() -> TextInput:
    return TextInput(char_limit=TITLE_CHAR_LIMIT, placeholder="Todo title")


def _new_description_input() -> TextInput:
    return TextInput(char_limit=DESCRIPTION_CHAR_LIMIT, multiline=True,
                     placeholder="Description (optional)")


@dataclass
class Form:
    """An open add or edit form."""

    mode: FormMode
    target: int
    source: int
    focused_field: FormField = FormField.TITLE
    title: TextInput = field(default_factory=_new_title_input)
    description: TextInput = field(default_factory=_new_description_input)
    editing_index: Optional[int] = None

    def focused_input(self) -> Optional[TextInput]:
        if self.focused_field == FormField.TITLE:
            return self.title
        if self.focused_field == FormField.DESCRIPTION:
            return self.description
        return None


class Session:
    """State machine for one run of the interactive interface."""

    def __init__(self, lists: Dict[ListId, TodoList],
                 clock: Callable[[], datetime] = local_now) -> None:
        self.lists: Dict[ListId, TodoList] = {}
        for list_id in LIST_IDS:
            todo_list = lists.get(list_id)
            if todo_list is None:
                todo_list = TodoList(name=definition(list_id).name)
            self.lists[list_id] = todo_list
        self.clock = clock
        self.active_tab = 0
        self.cursor = 0
        self.submitted = False
        self.exited = False
        self.form: Optional[Form] = None

    @property
    def done(self) -> bool:
        return self.submitted or self.exited

    @property
    def active_list_id(self) -> ListId:
        return LIST_IDS[self.active_tab]

    @property
    def current_list(self) -> TodoList:
        return self.lists[self.active_list_id]

    def list_for_tab(self, tab: int) -> TodoList:
        return self.lists[LIST_IDS[tab]]

    def has_any_todos(self) -> bool:
        return any(todo_list.todos for todo_list in self.lists.values())

    def current_todo(self) -> Optional[Todo]:
        todos = self.current_list.todos
        if 0 <= self.cursor < len(todos):
            return todos[self.cursor]
        return None

    def handle(self, action: Action, text: str = "") -> None:
        """Apply one action. ``text`` carries the characters for INSERT."""
        if self.done:
            return
        if self.form is not None:
            self._handle_form(action, text)
        else:
            self._handle_browse(action)

    def _handle_browse(self, action: Action) -> None:
        if action == Action.QUIT:
            self.exited = True
        elif action == Action.SUBMIT:
            self.submitted = True
        elif action == Action.NEXT_TAB:
            self.next_tab()
        elif action == Action.PREV_TAB:
            self.previous_tab()
        elif action == Action.UP:
            self.cursor_up()
        elif action == Action.DOWN:
            self.cursor_down()
        elif action == Action.TOGGLE:
            self.toggle_current()
        elif action == Action.ADD:
            self.open_add_form()
        elif action == Action.EDIT:
            self.open_edit_form()

    def _handle_form(self, action: Action, text: str) -> None:
        form = self.form
        if action == Action.CANCEL:
            self.close_form()
        elif action == Action.SUBMIT:
            self.submit_form()
        elif action == Action.NEXT_FIELD:
            self._focus_field((form.focused_field + 1) % FIELD_COUNT)
        elif action == Action.PREV_FIELD:
            self._focus_field((form.focused_field + FIELD_COUNT - 1) % FIELD_COUNT)
        elif action in (Action.LEFT, Action.RIGHT) and form.focused_field == FormField.LIST:
            step = 1 if action == Action.RIGHT else TAB_COUNT - 1
            form.target = (form.target + step) % TAB_COUNT
        else:
            self._edit_text(action, text)

    def _edit_text(self, action: Action, text: str) -> None:
        text_input = self.form.focused_input()
        if text_input is None:
            return
        if action == Action.INSERT:
            text_input.insert(text)
        elif action == Action.BACKSPACE:
            text_input.backspace()
        elif action == Action.DELETE:
            text_input.delete()
        elif action == Action.LEFT:
            text_input.move_left()
        elif action == Action.RIGHT:
            text_input.move_right()
        elif action == Action.HOME:
            text_input.home()
        elif action == Action.END:
            text_input.end()

    def next_tab(self) -> None:
        # An all-empty tab set has nothing to navigate to
        if self.has_any_todos():
            self.active_tab = (self.active_tab + 1) % TAB_COUNT
            self.cursor = 0

    def previous_tab(self) -> None:
        if self.has_any_todos():
            self.active_tab = (self.active_tab + TAB_COUNT - 1) % TAB_COUNT
            self.cursor = 0

    def cursor_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def cursor_down(self) -> None:
        if self.cursor < len(self.current_list.todos) - 1:
            self.cursor += 1

    def toggle_current(self) -> None:
        todo = self.current_todo()
        if todo is not None:
            todo.toggle_completed(self.clock())

    def open_add_form(self) -> None:
        self.form = Form(mode=FormMode.ADD, target=self.active_tab, source=self.active_tab)
        self.form.title.focus()

    def open_edit_form(self) -> None:
        todo = self.current_todo()
        if todo is None:
            return
        form = Form(mode=FormMode.EDIT, target=self.active_tab, source=self.active_tab,
                    editing_index=self.cursor)
        form.title.set_value(todo.title)
        form.description.set_value(todo.description)
        form.title.focus()
        self.form = form

    def close_form(self) -> None:
        self.form = None

    def _focus_field(self, index: int) -> None:
        form = self.form
        form.focused_field = FormField(index)
        form.title.blur()
        form.description.blur()
        focused = form.focused_input()
        if focused is not None:
            focused.focus()

    def submit_form(self) -> None:
        """Commit the form and return to browsing. A blank title cancels."""
        form = self.form
        title = form.title.value.strip()
        if not title:
            self.close_form()
            return

        description = form.description.value.strip()
        now = self.clock()
        target_id = LIST_IDS[form.target]

        if form.mode == FormMode.EDIT:
            self._apply_edit(form, title, description, now)
        else:
            todo = Todo.new(title, description, default_due_date(target_id, now), now)
            self.lists[target_id].todos.append(todo)

        self.close_form()

    def _apply_edit(self, form: Form, title: str, description: str, now: datetime) -> None:
        # The item lives in the tab that was active when the form opened
        source = self.list_for_tab(form.source)
        index = form.editing_index
        if index is None or not 0 <= index < len(source.todos):
            return

        todo = source.todos[index]
        todo.title = title
        todo.description = description

        if form.target == form.source:
            return

        target_id = LIST_IDS[form.target]
        del source.todos[index]
        todo.set_due_date(default_due_date(target_id, now))
        self.lists[target_id].todos.append(todo)

        if self.cursor >= len(source.todos) and self.cursor > 0:
            self.cursor -= 1
