"""Scheduled automation applied to the lists before every command.

Tomorrow's items that have come due move to Today, and due dates on Today
and Tomorrow are pinned to each list's policy. ``now`` is always passed
in so the pass is deterministic.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from todo_lists.data.lists import ListId, default_definitions, default_due_date, definition
from todo_lists.data.models import Todo, TodoList
from todo_lists.utils.formatting import start_of_day

Lists = Dict[ListId, TodoList]


def _ensure_lists(lists: Lists) -> None:
    """Fill in any missing list as an empty list with its default name."""
    for list_id in ListId:
        if lists.get(list_id) is None:
            lists[list_id] = TodoList(name=definition(list_id).name)


def _apply_due_date(todo: Todo, due: Optional[datetime]) -> bool:
    if todo.due_date == due:
        return False
    todo.set_due_date(due)
    return True


def _normalize_due_dates(todo_list: TodoList, list_id: ListId, now: datetime) -> bool:
    changed = False
    policy = default_due_date(list_id, now)

    for todo in todo_list.todos:
        if policy is not None:
            if _apply_due_date(todo, policy):
                changed = True
        elif todo.due_date is not None:
            # Lists without a policy keep their date, at midnight
            if _apply_due_date(todo, start_of_day(todo.due_date)):
                changed = True

    return changed


def _migrate_due_todos(tomorrow: TodoList, today: TodoList, now: datetime) -> bool:
    # Calendar days, not instants: a due date written before a UTC offset
    # change is still midnight of its own day
    today_date = now.date()
    remaining: List[Todo] = []
    moved = False

    for todo in tomorrow.todos:
        if todo.completed or todo.due_date is None or todo.due_date.date() > today_date:
            remaining.append(todo)
            continue
        today.todos.append(todo)
        moved = True

    if moved:
        tomorrow.todos = remaining
    return moved


def sync(lists: Lists, now: datetime) -> bool:
    """Migrate due Tomorrow items into Today and normalize due dates in place.

    Returns True if any todo moved or had its due date changed, i.e. the
    lists need to be saved.
    """
    _ensure_lists(lists)

    changed = _migrate_due_todos(lists[ListId.TOMORROW], lists[ListId.TODAY], now)

    for list_id in ListId:
        if _normalize_due_dates(lists[list_id], list_id, now):
            changed = True

    return changed


def load_and_sync(store, now: datetime) -> Lists:
    """Load all lists from ``store``, run :func:`sync`, and save them if it changed anything.

    Raises:
        StorageError: If any list fails to load or save.
    """
    lists: Lists = {}
    for list_def in default_definitions():
        lists[list_def.id] = store.load_list(list_def)

    if sync(lists, now):
        for list_def in default_definitions():
            store.save_list(list_def, lists[list_def.id])

    return lists
