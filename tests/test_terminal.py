import io

import pytest

from menucli.colors import Fg, FgB, Style, set_color, set_no_color, sgr
from menucli.inputdevice import KeyType
from menucli.terminal import Symbol, Terminal


@pytest.fixture(autouse=True)
def no_color():
    set_no_color()
    yield
    set_no_color()


def type_text(term, text):
    for c in text:
        assert term.keypressed(KeyType.ASCII, c) == (Symbol.NOTHING, "")


def test_typing_and_return_gives_command():
    out = io.StringIO()
    term = Terminal(out)
    type_text(term, "abc")
    assert term.get_line() == "abc"
    assert term.keypressed(KeyType.RET) == (Symbol.COMMAND, "abc")
    assert term.get_line() == ""
    assert out.getvalue() == "abc\r\n"


def test_special_keys_return_symbols():
    term = Terminal(io.StringIO())
    assert term.keypressed(KeyType.UP) == (Symbol.UP, "")
    assert term.keypressed(KeyType.DOWN) == (Symbol.DOWN, "")
    assert term.keypressed(KeyType.EOF) == (Symbol.EOF, "")
    assert term.keypressed(KeyType.ASCII, "\t") == (Symbol.TAB, "")
    assert term.keypressed(KeyType.IGNORED) == (Symbol.NOTHING, "")


def test_tab_does_not_change_line():
    term = Terminal(io.StringIO())
    type_text(term, "ab")
    term.keypressed(KeyType.ASCII, "\t")
    assert term.get_line() == "ab"


def test_insert_in_the_middle():
    term = Terminal(io.StringIO())
    type_text(term, "ac")
    term.keypressed(KeyType.LEFT)
    term.keypressed(KeyType.ASCII, "b")
    assert term.get_line() == "abc"


def test_backspace_at_start_writes_nothing():
    out = io.StringIO()
    term = Terminal(out)
    term.keypressed(KeyType.BACKSPACE)
    assert out.getvalue() == ""
    assert term.get_line() == ""


def test_backspace_removes_previous_char():
    term = Terminal(io.StringIO())
    type_text(term, "abc")
    term.keypressed(KeyType.LEFT)
    term.keypressed(KeyType.BACKSPACE)
    assert term.get_line() == "ac"


def test_home_and_canc_remove_first_char():
    term = Terminal(io.StringIO())
    type_text(term, "xyz")
    term.keypressed(KeyType.HOME)
    term.keypressed(KeyType.CANC)
    assert term.get_line() == "yz"


def test_canc_at_end_does_nothing():
    out = io.StringIO()
    term = Terminal(out)
    type_text(term, "ab")
    before = out.getvalue()
    term.keypressed(KeyType.CANC)
    assert term.get_line() == "ab"
    assert out.getvalue() == before


def test_end_moves_cursor_to_end():
    term = Terminal(io.StringIO())
    type_text(term, "ab")
    term.keypressed(KeyType.HOME)
    term.keypressed(KeyType.END)
    term.keypressed(KeyType.ASCII, "c")
    assert term.get_line() == "abc"


def test_right_does_not_pass_end():
    term = Terminal(io.StringIO())
    type_text(term, "a")
    term.keypressed(KeyType.HOME)
    term.keypressed(KeyType.RIGHT)
    term.keypressed(KeyType.RIGHT)
    term.keypressed(KeyType.ASCII, "b")
    assert term.get_line() == "ab"


def test_left_at_start_writes_nothing():
    out = io.StringIO()
    term = Terminal(out)
    term.keypressed(KeyType.LEFT)
    assert out.getvalue() == ""


def test_set_line_replaces_content():
    out = io.StringIO()
    term = Terminal(out)
    type_text(term, "long")
    term.set_line("ab")
    assert term.get_line() == "ab"
    assert term.keypressed(KeyType.RET) == (Symbol.COMMAND, "ab")


def test_set_line_erases_leftover_chars():
    out = io.StringIO()
    term = Terminal(out)
    term.set_line("abcd")
    mark = len(out.getvalue())
    term.set_line("a")
    written = out.getvalue()[mark:]
    assert written.endswith(" " * 3 + "\b" * 3)


def test_set_line_then_typing_appends():
    term = Terminal(io.StringIO())
    term.set_line("ab")
    type_text(term, "c")
    assert term.get_line() == "abc"


def test_reset_cursor_moves_insertion_point_to_start():
    term = Terminal(io.StringIO())
    term.set_line("bc")
    term.reset_cursor()
    term.keypressed(KeyType.ASCII, "a")
    assert term.get_line() == "abc"


def test_colored_echo_uses_input_colors():
    set_color()
    out = io.StringIO()
    term = Terminal(out)
    term.keypressed(KeyType.ASCII, "a")
    text = out.getvalue()
    assert text.startswith(sgr(FgB.GRAY) + "a")
    assert sgr(Style.RESET) in text
    assert sgr(Fg.GREEN) not in text