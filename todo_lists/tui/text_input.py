"""Editable text buffer backing the form fields."""

from __future__ import annotations


class TextInput:
    """A text buffer with an insertion point, a character limit and focus."""

    def __init__(self, char_limit: int = 0, multiline: bool = False,
                 placeholder: str = "") -> None:
        self.char_limit = char_limit
        self.multiline = multiline
        self.placeholder = placeholder
        self.focused = False
        self._chars: list = []
        self.position = 0

    @property
    def value(self) -> str:
        return "".join(self._chars)

    def set_value(self, value: str) -> None:
        """Replace the buffer and move the insertion point to the end."""
        if not self.multiline:
            value = value.replace("\n", " ")
        chars = list(value)
        if self.char_limit > 0:
            chars = chars[: self.char_limit]
        self._chars = chars
        self.position = len(chars)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def insert(self, text: str) -> None:
        """Insert text at the insertion point. Ignored while blurred."""
        if not self.focused:
            return
        for ch in text:
            if ch == "\n" and not self.multiline:
                continue
            if not ch.isprintable() and ch != "\n":
                continue
            if self.char_limit > 0 and len(self._chars) >= self.char_limit:
                break
            self._chars.insert(self.position, ch)
            self.position += 1

    def backspace(self) -> None:
        if self.focused and self.position > 0:
            self.position -= 1
            del self._chars[self.position]

    def delete(self) -> None:
        if self.focused and self.position < len(self._chars):
            del self._chars[self.position]

    def move_left(self) -> None:
        if self.focused and self.position > 0:
            self.position -= 1

    def move_right(self) -> None:
        if self.focused and self.position < len(self._chars):
            self.position += 1

    def home(self) -> None:
        if self.focused:
            self.position = 0

    def end(self) -> None:
        if self.focused:
            self.position = len(self._chars)
