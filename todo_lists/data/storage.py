"""JSON file persistence for todo lists.

Each list lives in its own file under the data directory as a JSON array
of todo records. Writes go through a temp file in the same directory that
is fsynced and renamed over the original, so a reader never sees a
partially written list.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from todo_lists.data.lists import ListDefinition
from todo_lists.data.models import Todo, TodoList
from todo_lists.utils.paths import get_data_dir

DIR_MODE = 0o700
FILE_MODE = 0o600


class StorageError(Exception):
    """Raised when a list cannot be read, parsed or written."""


class FileStorage:
    """Stores each todo list as a JSON file in ``data_dir``."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()

    def _path(self, definition: ListDefinition) -> Path:
        return self.data_dir / definition.filename

    def _ensure_data_dir(self) -> None:
        try:
            self.data_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            os.chmod(self.data_dir, DIR_MODE)
        except OSError as exc:
            raise StorageError(f"Failed to create data directory {self.data_dir}: {exc}") from exc

    def load_list(self, definition: ListDefinition) -> TodoList:
        """Read a list. A missing or empty file yields an empty named list.

        Raises:
            StorageError: If the file cannot be read or is not a JSON array
                of todo records.
        """
        path = self._path(definition)

        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return TodoList(name=definition.name)
        except OSError as exc:
            raise StorageError(f"Failed to read {path}: {exc}") from exc

        if not text.strip():
            return TodoList(name=definition.name)

        try:
            records = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Failed to parse {path}: {exc}") from exc

        if records is None:
            return TodoList(name=definition.name)
        if not isinstance(records, list):
            raise StorageError(f"Failed to parse {path}: expected a JSON array")

        todos: List[Todo] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise StorageError(f"Failed to parse {path}: entry {index} is not an object")
            try:
                todos.append(Todo.from_dict(record))
            except (TypeError, ValueError) as exc:
                raise StorageError(f"Failed to parse {path}: entry {index}: {exc}") from exc

        return TodoList(name=definition.name, todos=todos)

    def save_list(self, definition: ListDefinition, todo_list: TodoList) -> None:
        """Atomically replace the list's file with the given todos.

        Raises:
            StorageError: If the directory or file cannot be written. The
                previous file, if any, is left untouched.
        """
        self._ensure_data_dir()
        path = self._path(definition)
        data = json.dumps([todo.to_dict() for todo in todo_list.todos], indent=2, ensure_ascii=False)

        fd, tmp_name = tempfile.mkstemp(prefix=f"{definition.filename}.tmp-", dir=self.data_dir)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                os.fchmod(tmp_file.fileno(), FILE_MODE)
                tmp_file.write(data)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            tmp_path.replace(path)
        except OSError as exc:
            # Clean up temp file on failure; original remains untouched
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                pass
            raise StorageError(f"Failed to write {path}: {exc}") from exc
