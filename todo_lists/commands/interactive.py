"""Handler for the interactive interface.

Syncs the lists, runs the TUI, and saves all three lists only when the
user submits.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, Optional

from todo_lists.data import FileStorage, StorageError, default_definitions, load_and_sync
from todo_lists.tui import app
from todo_lists.tui.icons import IconSet
from todo_lists.tui.session import Session
from todo_lists.tui.theme import Theme
from todo_lists.utils.formatting import local_now


def save_session(store: FileStorage, session: Session) -> None:
    """Write every list held by the session."""
    for list_def in default_definitions():
        store.save_list(list_def, session.lists[list_def.id])


def run(theme: Theme, icons: IconSet, store: Optional[FileStorage] = None,
        clock: Callable[[], datetime] = local_now) -> Session:
    """Open the interactive interface."""
    store = store if store is not None else FileStorage()

    try:
        lists = load_and_sync(store, clock())
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    session = app.run(Session(lists, clock=clock), theme, icons, clock)

    if not session.submitted:
        print("Exited without saving changes")
        return session

    try:
        save_session(store, session)
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print("✓ Changes saved!")
    return session
