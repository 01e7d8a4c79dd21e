"""Command-line entry point for t.

``t TITLE`` adds a todo (to Todos, or Today/Tomorrow with a flag);
plain ``t`` opens the interactive interface.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from todo_lists import __version__
from todo_lists.commands import add, interactive
from todo_lists.config import ConfigError, Config, load_config
from todo_lists.data import ListId
from todo_lists.tui.icons import IconModeError, IconSet, ascii_icons, icons_from_config
from todo_lists.tui.theme import Theme, ThemeError, default_theme, theme_from_config
from todo_lists.utils.paths import get_config_path

EXAMPLES = """\
examples:
  # Add some todos.
  t "Do something"
  t "Do something today" --today
  t "Do something tomorrow" --tomorrow

  # Open the interactive interface.
  t
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="t",
        description="Manage your todo lists in the CLI. Add new todos, or launch an "
                    "interactive interface to view and manage your todos.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("title", nargs="?", help="Title of a todo to add")
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--today", action="store_true", help="Add a todo for today")
    when.add_argument("--tomorrow", action="store_true", help="Add a todo for tomorrow")
    return parser


def _warn(what: str, exc: Exception, fallback: str) -> None:
    print(f"Warning: {what} at {get_config_path()}: {exc}; using {fallback}", file=sys.stderr)


def load_appearance() -> tuple[Theme, IconSet]:
    """Load the theme and icons, falling back to defaults with a warning."""
    try:
        config = load_config()
    except ConfigError as exc:
        _warn("failed to load config", exc, "defaults")
        config = Config()

    try:
        theme = theme_from_config(config.theme)
    except ThemeError as exc:
        _warn("invalid theme configuration", exc, "default theme")
        theme = default_theme()

    try:
        icons = icons_from_config(config.icons)
    except IconModeError as exc:
        _warn("invalid icon configuration", exc, "default icons")
        icons = ascii_icons()

    return theme, icons


def target_list(args: argparse.Namespace) -> ListId:
    if args.today:
        return ListId.TODAY
    if args.tomorrow:
        return ListId.TOMORROW
    return ListId.TODOS


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.title is None:
        theme, icons = load_appearance()
        interactive.run(theme, icons)
        return 0

    add.run(args.title, target_list(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
