"""Telnet protocol handling for remote command-line sessions.

The classes here are independent of any socket library: outgoing bytes go
through a ``send`` callable and incoming bytes are handed to ``receive``.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum, auto
from typing import Callable

from .inputdevice import InputDevice, KeyType

__all__ = ["TelnetSession", "TelnetKeyDecoder"]

_log = logging.getLogger(__name__)

Sender = Callable[[bytes], None]


class _Command(IntEnum):
    SE = 0xF0
    NOP = 0xF1
    DATA_MARK = 0xF2
    BREAK = 0xF3
    INTERRUPT_PROCESS = 0xF4
    ABORT_OUTPUT = 0xF5
    ARE_YOU_THERE = 0xF6
    ERASE_CHARACTER = 0xF7
    ERASE_LINE = 0xF8
    GO_AHEAD = 0xF9
    SB = 0xFA
    WILL = 0xFB
    WONT = 0xFC
    DO = 0xFD
    DONT = 0xFE
    IAC = 0xFF


class _Option(IntEnum):
    ECHO = 0x01
    SUPPRESS_GO_AHEAD = 0x03
    TERMINAL_TYPE = 0x18
    NEGOTIATE_ABOUT_WIN_SIZE = 0x1F
    TERMINAL_SPEED = 0x20
    LINEMODE = 0x22
    NEW_ENV_OPTION = 0x27


class _State(Enum):
    DATA = auto()
    SUB = auto()
    WAIT_WILL = auto()
    WAIT_WONT = auto()
    WAIT_DO = auto()
    WAIT_DONT = auto()


_SIMPLE_COMMANDS = frozenset(
    {
        _Command.DATA_MARK,
        _Command.BREAK,
        _Command.INTERRUPT_PROCESS,
        _Command.ABORT_OUTPUT,
        _Command.ARE_YOU_THERE,
        _Command.ERASE_CHARACTER,
        _Command.ERASE_LINE,
        _Command.GO_AHEAD,
        _Command.NOP,
    }
)

_WAIT_STATES = {
    _Command.WILL: _State.WAIT_WILL,
    _Command.WONT: _State.WAIT_WONT,
    _Command.DO: _State.WAIT_DO,
    _Command.DONT: _State.WAIT_DONT,
}

_GREETING = bytes(
    [
        _Command.IAC, _Command.DO, _Option.LINEMODE,
        _Command.IAC, _Command.SB, _Option.LINEMODE, 0x01, 0x00,
        _Command.IAC, _Command.SE,
        _Command.IAC, _Command.WILL, _Option.ECHO,
    ]
)


class TelnetSession:
    """Server side of the telnet option negotiation.

    Incoming bytes are split into protocol commands, which are answered
    through ``send``, and plain data bytes, which are passed to ``output``.
    """

    def __init__(self, send: Sender) -> None:
        self._send = send
        self._state = _State.DATA
        self._escape = False

    def encode(self, text: str) -> str:
        """Turn each newline into the CR LF pair a telnet client expects."""
        return text.replace("\n", "\r\n")

    def greeting(self) -> bytes:
        """Bytes to send on connection: request line mode and offer echo."""
        return _GREETING

    def receive(self, data: bytes) -> None:
        """Consume bytes received from the client."""
        for byte in bytes(data):
            self._consume(byte)

    def output(self, byte: int) -> None:
        """Handle one data byte; the base session discards it."""

    def _consume(self, byte: int) -> None:
        if self._escape:
            self._escape = False
            if byte == _Command.IAC:
                self._data(byte)
            else:
                self._command(byte)
        elif byte == _Command.IAC:
            self._escape = True
        else:
            self._data(byte)

    def _data(self, byte: int) -> None:
        state = self._state
        if state is _State.DATA:
            self.output(byte)
        elif state is _State.SUB:
            pass  # subnegotiation parameters are not used
        else:
            self._state = _State.DATA
            if state is _State.WAIT_WILL:
                self._rx_will(byte)
            elif state is _State.WAIT_DO:
                self._rx_do(byte)

    def _command(self, byte: int) -> None:
        if byte == _Command.SE:
            if self._state is _State.SUB:
                self._state = _State.DATA
            else:
                _log.error("received SE when not in sub state")
        elif byte in _SIMPLE_COMMANDS:
            self._state = _State.DATA
        elif byte == _Command.SB:
            if self._state is not _State.SUB:
                self._state = _State.SUB
            else:
                _log.error("received SB when already in sub state")
        elif byte in _WAIT_STATES:
            self._state = _WAIT_STATES[_Command(byte)]

    def _rx_will(self, option: int) -> None:
        if option == _Option.SUPPRESS_GO_AHEAD:
            self._send_iac(_Command.WILL, _Option.SUPPRESS_GO_AHEAD)
        elif option == _Option.NEGOTIATE_ABOUT_WIN_SIZE:
            self._send_iac(_Command.DO, _Option.NEGOTIATE_ABOUT_WIN_SIZE)
        else:
            self._send_iac(_Command.DONT, option)

    def _rx_do(self, option: int) -> None:
        if option == _Option.ECHO:
            self._send_iac(_Command.DO, _Option.ECHO)
        elif option == _Option.SUPPRESS_GO_AHEAD:
            self._send_iac(_Command.WILL, _Option.SUPPRESS_GO_AHEAD)
        else:
            self._send_iac(_Command.WONT, option)

    def _send_iac(self, action: int, option: int) -> None:
        self._send(bytes([_Command.IAC, action, option]))


class _Step(Enum):
    FIRST = auto()
    AFTER_ESC = auto()
    AFTER_CSI = auto()
    TILDE = auto()
    WAIT_NUL = auto()


_CSI_KEYS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class TelnetKeyDecoder(TelnetSession, InputDevice):
    """Telnet session that turns the client's data bytes into key events.

    Key events are posted to ``scheduler`` like those of a local keyboard.
    """

    def __init__(self, scheduler, send: Sender) -> None:
        TelnetSession.__init__(self, send)
        InputDevice.__init__(self, scheduler)
        self._step = _Step.FIRST

    def output(self, byte: int) -> None:
        """Decode one data byte, notifying a key once it is complete."""
        step = self._step
        if step is _Step.FIRST:
            if byte in (0xFF, 4):
                self.notify(KeyType.EOF, " ")
            elif byte in (8, 127):
                self.notify(KeyType.BACKSPACE, " ")
            elif byte == 27:
                self._step = _Step.AFTER_ESC
            elif byte == 13:
                self._step = _Step.WAIT_NUL
            else:
                self.notify(KeyType.ASCII, chr(byte))
        elif step is _Step.AFTER_ESC:
            if byte == 91:
                self._step = _Step.AFTER_CSI
            else:
                self._step = _Step.FIRST
                self.notify(KeyType.IGNORED, " ")
        elif step is _Step.AFTER_CSI:
            key = _CSI_KEYS.get(byte)
            if key is None:
                self._step = _Step.TILDE
            else:
                self._step = _Step.FIRST
                self.notify(key, " ")
        elif step is _Step.TILDE:
            self._step = _Step.FIRST
            self.notify(KeyType.CANC if byte == 126 else KeyType.IGNORED, " ")
        else:
            self._step = _Step.FIRST
            self.notify(KeyType.RET if byte in (0, 10) else KeyType.IGNORED, " ")