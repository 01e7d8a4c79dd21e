"""Data models for todos and todo lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from todo_lists.utils.formatting import format_timestamp, parse_timestamp, start_of_day

ID_FORMAT = "%Y%m%d%H%M%S.%f"


@dataclass
class Todo:
    """A single todo item."""

    id: str
    title: str
    description: str = ""
    completed: bool = False
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    due_date: Optional[datetime] = None

    @classmethod
    def new(cls, title: str, description: str, due_date: Optional[datetime],
            now: datetime) -> "Todo":
        """Create a todo stamped with ``now`` and an id derived from it."""
        todo = cls(id=now.strftime(ID_FORMAT), title=title,
                   description=description, created_at=now)
        todo.set_due_date(due_date)
        return todo

    def toggle_completed(self, now: datetime) -> None:
        """Flip completion, stamping or clearing completed_at."""
        self.completed = not self.completed
        self.completed_at = now if self.completed else None

    def set_due_date(self, due_date: Optional[datetime]) -> None:
        """Set the due date, truncated to midnight."""
        self.due_date = start_of_day(due_date) if due_date is not None else None

    def is_overdue(self, reference: datetime) -> bool:
        """Whether the todo was due before the day of ``reference``."""
        if self.completed or self.due_date is None:
            return False
        # Due dates keep the offset they were written with, so compare days
        return self.due_date.date() < reference.date()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": format_timestamp(self.created_at),
            "completed_at": format_timestamp(self.completed_at),
            "due_date": format_timestamp(self.due_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            completed=bool(data.get("completed", False)),
            created_at=parse_timestamp(data.get("created_at")),
            completed_at=parse_timestamp(data.get("completed_at")),
            due_date=parse_timestamp(data.get("due_date")),
        )


@dataclass
class TodoList:
    """A named, ordered collection of todos. Order is display order."""

    name: str
    todos: List[Todo] = field(default_factory=list)
