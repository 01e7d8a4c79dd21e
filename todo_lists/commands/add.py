"""Handler for adding a todo from the command line.

Runs the scheduled sync first, then appends a new todo to the chosen list
and saves that list.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, Optional

from todo_lists.data import FileStorage, ListId, StorageError, Todo, default_due_date, definition, load_and_sync
from todo_lists.utils.formatting import local_now

TITLE_CHAR_LIMIT = 100


class ValidationError(ValueError):
    """Raised for a title that cannot be added."""


def validate_title(title: str) -> str:
    """Return the trimmed title, or raise ValidationError."""
    title = title.strip()
    if not title:
        raise ValidationError("todo title cannot be blank")
    if len(title) > TITLE_CHAR_LIMIT:
        raise ValidationError(f"todo title must be {TITLE_CHAR_LIMIT} characters or fewer")
    return title


def run(title: str, list_id: ListId = ListId.TODOS, store: Optional[FileStorage] = None,
        clock: Callable[[], datetime] = local_now) -> Todo:
    """Add a todo titled ``title`` to ``list_id``.

    Args:
        title: Todo title; blank or over-long titles are rejected.
        list_id: List to append to, Todos by default.
        store: Storage to use; file storage in the data dir by default.
        clock: Source of the current time.
    """
    try:
        title = validate_title(title)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    store = store if store is not None else FileStorage()
    now = clock()

    try:
        lists = load_and_sync(store, now)
        todo = Todo.new(title, "", default_due_date(list_id, now), now)
        lists[list_id].todos.append(todo)
        store.save_list(definition(list_id), lists[list_id])
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    return todo
