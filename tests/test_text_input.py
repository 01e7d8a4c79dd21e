from __future__ import annotations

from todo_lists.tui.text_input import TextInput


def focused(**kwargs) -> TextInput:
    text_input = TextInput(**kwargs)
    text_input.focus()
    return text_input


class TestTextInput:
    def test_ignores_input_while_blurred(self):
        text_input = TextInput()
        text_input.insert("abc")
        assert text_input.value == ""

    def test_editing_at_the_insertion_point(self):
        text_input = focused()
        text_input.insert("helo")
        text_input.move_left()
        text_input.insert("l")
        text_input.end()
        text_input.backspace()
        text_input.home()
        text_input.delete()

        assert text_input.value == "ell"
        assert text_input.position == 0

    def test_char_limit_counts_code_points(self):
        text_input = focused(char_limit=3)
        text_input.insert("héllo")
        assert text_input.value == "hél"

    def test_newlines_only_in_multiline(self):
        single = focused()
        single.insert("a\nb")
        assert single.value == "ab"

        multi = focused(multiline=True)
        multi.insert("a\nb")
        assert multi.value == "a\nb"

    def test_set_value_moves_to_end_and_applies_limit(self):
        text_input = TextInput(char_limit=4)
        text_input.set_value("abcdef")
        assert text_input.value == "abcd"
        assert text_input.position == 4
