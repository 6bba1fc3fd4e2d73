"""Key events read from a terminal file descriptor."""

from __future__ import annotations

import os
import select
import sys
import threading
from typing import Callable, Optional, Tuple

from .inputdevice import InputDevice, KeyType

try:
    import termios
except ImportError:  # platforms without POSIX terminal control
    termios = None  # type: ignore[assignment]

__all__ = ["EOF", "decode_key", "Keyboard"]

EOF = -1

_ESC = 27
_CSI = 91


def decode_key(getchar: Callable[[], Optional[int]]) -> Tuple[KeyType, str]:
    """Read one key from ``getchar`` and return it as ``(key, char)``.

    ``getchar`` returns the next byte as an int, or ``EOF`` (or None) at the
    end of the input. Escape sequences consume as many bytes as they need.
    """
    ch = getchar()
    if ch is None or ch == EOF or ch == 4:
        return KeyType.EOF, " "
    if ch in (127, 8):
        return KeyType.BACKSPACE, " "
    if ch == 10:
        return KeyType.RET, " "
    if ch != _ESC:
        return KeyType.ASCII, chr(ch)

    if getchar() != _CSI:
        return KeyType.IGNORED, " "
    ch = getchar()
    if ch == 51:
        if getchar() == 126:
            return KeyType.CANC, " "
        return KeyType.IGNORED, " "
    arrows = {
        65: KeyType.UP,
        66: KeyType.DOWN,
        68: KeyType.LEFT,
        67: KeyType.RIGHT,
        70: KeyType.END,
        72: KeyType.HOME,
    }
    return arrows.get(ch, KeyType.IGNORED), " "


class Keyboard(InputDevice):
    """Reads keys from a file descriptor in a background thread.

    While started, a terminal descriptor is switched to non-canonical mode
    without echo; the previous settings come back on stop. Each key is
    posted to the scheduler given at construction.
    """

    def __init__(self, scheduler, fd: Optional[int] = None) -> None:
        super().__init__(scheduler)
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._thread: Optional[threading.Thread] = None
        self._wake_read: Optional[int] = None
        self._wake_write: Optional[int] = None
        self._saved_attrs = None
        self._at_eof = False

    def __enter__(self) -> "Keyboard":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Enter manual terminal mode and start reading keys."""
        if self._thread is not None:
            raise RuntimeError("keyboard already started")
        self._to_manual_mode()
        self._at_eof = False
        self._wake_read, self._wake_write = os.pipe()
        self._thread = threading.Thread(target=self._read_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Restore the terminal and stop the reading thread."""
        if self._thread is None:
            return
        self._to_standard_mode()
        os.write(self._wake_write, b" ")
        os.close(self._wake_write)
        self._thread.join()
        os.close(self._wake_read)
        self._thread = None
        self._wake_read = self._wake_write = None

    def _getchar(self) -> int:
        data = os.read(self._fd, 1)
        if not data:
            self._at_eof = True
            return EOF
        return data[0]

    def _read_loop(self) -> None:
        while True:
            try:
                readable, _, _ = select.select([self._fd, self._wake_read], [], [])
            except (OSError, ValueError):
                return
            if self._wake_read in readable:
                return
            try:
                key, char = decode_key(self._getchar)
            except OSError:
                return
            self.notify(key, char)
            if self._at_eof:
                return

    def _to_manual_mode(self) -> None:
        if termios is None or not os.isatty(self._fd):
            return
        self._saved_attrs = termios.tcgetattr(self._fd)
        attrs = termios.tcgetattr(self._fd)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self._fd, termios.TCSANOW, attrs)

    def _to_standard_mode(self) -> None:
        if self._saved_attrs is None:
            return
        termios.tcsetattr(self._fd, termios.TCSANOW, self._saved_attrs)
        self._saved_attrs = None