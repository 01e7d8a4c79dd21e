"""The fixed set of todo lists and their due-date policy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from todo_lists.utils.formatting import days_from


class ListId(str, Enum):
    """Identifies one of the three todo lists."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    TODOS = "todos"


@dataclass(frozen=True)
class ListDefinition:
    """Metadata needed to load and store a list."""

    id: ListId
    name: str
    filename: str


_DEFINITIONS: Dict[ListId, ListDefinition] = {
    ListId.TODAY: ListDefinition(ListId.TODAY, "Today", "today.json"),
    ListId.TOMORROW: ListDefinition(ListId.TOMORROW, "Tomorrow", "tomorrow.json"),
    ListId.TODOS: ListDefinition(ListId.TODOS, "Todos", "todo.json"),
}

# UI order, also the order tabs cycle in
LIST_IDS: List[ListId] = [ListId.TODAY, ListId.TOMORROW, ListId.TODOS]

# Days after "now" a list's items are due; None means no due date
_DUE_OFFSETS: Dict[ListId, Optional[int]] = {
    ListId.TODAY: 0,
    ListId.TOMORROW: 1,
    ListId.TODOS: None,
}


def definition(list_id: ListId) -> ListDefinition:
    """Return the definition for a list id."""
    return _DEFINITIONS[list_id]


def default_definitions() -> List[ListDefinition]:
    """Return the list definitions in UI order."""
    return [_DEFINITIONS[list_id] for list_id in LIST_IDS]


def default_due_date(list_id: ListId, now: datetime) -> Optional[datetime]:
    """Return the due date a todo gets when it lands on ``list_id`` at ``now``."""
    offset = _DUE_OFFSETS[list_id]
    if offset is None:
        return None
    return days_from(now, offset)
