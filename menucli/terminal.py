"""Line editing on a terminal-like output stream."""

from __future__ import annotations

from enum import Enum, auto
from typing import TextIO, Tuple

from .colors import after_input, before_input
from .inputdevice import KeyType

__all__ = ["Symbol", "Terminal"]


class Symbol(Enum):
    """What a key press means to the session using the terminal."""

    NOTHING = auto()
    COMMAND = auto()
    UP = auto()
    DOWN = auto()
    TAB = auto()
    EOF = auto()


class Terminal:
    """Keeps the line being edited and echoes changes to ``out``."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._line = ""
        self._position = 0

    def _emit(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def reset_cursor(self) -> None:
        self._position = 0

    def set_line(self, new_line: str) -> None:
        """Replace the edited line, e.g. with an entry from the history."""
        self._emit(before_input() + "\b" * self._position + new_line + after_input())
        shrink = len(self._line) - len(new_line)
        if shrink > 0:
            self._emit(" " * shrink + "\b" * shrink)
        self._line = new_line
        self._position = len(new_line)

    def get_line(self) -> str:
        return self._line

    def keypressed(self, key: KeyType, char: str = " ") -> Tuple[Symbol, str]:
        """Apply a key press and return its meaning and, for commands, the line."""
        line, pos = self._line, self._position

        if key is KeyType.EOF:
            return Symbol.EOF, ""
        if key is KeyType.UP:
            return Symbol.UP, ""
        if key is KeyType.DOWN:
            return Symbol.DOWN, ""
        if key is KeyType.RET:
            self._out.write("\r\n")
            self._line = ""
            self._position = 0
            return Symbol.COMMAND, line

        if key is KeyType.BACKSPACE:
            if pos > 0:
                pos -= 1
                line = line[:pos] + line[pos + 1:]
                self._emit("\b" + line[pos:] + " " + "\b" * (len(line) - pos + 1))
        elif key is KeyType.LEFT:
            if pos > 0:
                self._emit("\b")
                pos -= 1
        elif key is KeyType.RIGHT:
            if pos < len(line):
                self._emit(before_input() + line[pos] + after_input())
                pos += 1
        elif key is KeyType.ASCII:
            if char == "\t":
                return Symbol.TAB, ""
            rest = line[pos:]
            self._emit(before_input() + char + rest + after_input() + "\b" * len(rest))
            line = line[:pos] + char + rest
            pos += 1
        elif key is KeyType.CANC:
            if pos < len(line):
                self._emit(line[pos + 1:] + " " + "\b" * (len(line) - pos))
                line = line[:pos] + line[pos + 1:]
        elif key is KeyType.END:
            self._emit(before_input() + line[pos:] + after_input())
            pos = len(line)
        elif key is KeyType.HOME:
            self._emit("\b" * pos)
            pos = 0

        self._line, self._position = line, pos
        return Symbol.NOTHING, ""