from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from todo_lists.data import ListId, Todo, TodoList, definition

TZ = timezone(timedelta(hours=2))
NOW = datetime(2025, 1, 2, 9, 0, tzinfo=TZ)
TODAY = datetime(2025, 1, 2, tzinfo=TZ)
TOMORROW = datetime(2025, 1, 3, tzinfo=TZ)
YESTERDAY = datetime(2025, 1, 1, tzinfo=TZ)

# UK winter and summer offsets, for days when the local clock changes
GMT = timezone.utc
BST = timezone(timedelta(hours=1))

_ids = itertools.count(1)


def make_todo(title: str = "Task", description: str = "", completed: bool = False,
              created_at: Optional[datetime] = None,
              due_date: Optional[datetime] = None) -> Todo:
    created_at = created_at or NOW - timedelta(days=1)
    return Todo(
        id=f"test-{next(_ids)}",
        title=title,
        description=description,
        completed=completed,
        completed_at=created_at if completed else None,
        created_at=created_at,
        due_date=due_date,
    )


def make_lists(today=(), tomorrow=(), todos=()) -> Dict[ListId, TodoList]:
    return {
        ListId.TODAY: TodoList(definition(ListId.TODAY).name, list(today)),
        ListId.TOMORROW: TodoList(definition(ListId.TOMORROW).name, list(tomorrow)),
        ListId.TODOS: TodoList(definition(ListId.TODOS).name, list(todos)),
    }


class FixedClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now
