"""Data layer for t."""

from todo_lists.data.lists import (
    LIST_IDS,
    ListDefinition,
    ListId,
    default_definitions,
    default_due_date,
    definition,
)
from todo_lists.data.models import Todo, TodoList
from todo_lists.data.storage import FileStorage, StorageError
from todo_lists.data.sync import load_and_sync, sync

__all__ = [
    "LIST_IDS",
    "FileStorage",
    "ListDefinition",
    "ListId",
    "StorageError",
    "Todo",
    "TodoList",
    "default_definitions",
    "default_due_date",
    "definition",
    "load_and_sync",
    "sync",
]
