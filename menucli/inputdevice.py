"""Source of key events delivered through a scheduler."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Optional, Protocol

__all__ = ["KeyType", "InputDevice"]


class KeyType(Enum):
    """Kinds of key press an input device can report."""

    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


KeyHandler = Callable[[KeyType, str], None]


class _Scheduler(Protocol):
    def post(self, task: Callable[[], None]) -> None: ...


class InputDevice:
    """Base for devices that turn raw input into key events.

    Events are not delivered directly: each one is posted to the scheduler,
    so the registered handler runs in the thread that drives the scheduler.
    """

    def __init__(self, scheduler: _Scheduler) -> None:
        self._scheduler = scheduler
        self._handler: Optional[KeyHandler] = None

    def register(self, handler: Optional[KeyHandler]) -> None:
        """Set the callable that receives ``(key, char)`` events."""
        self._handler = handler

    def notify(self, key: KeyType, char: str = " ") -> None:
        """Post a key event to the scheduler for later delivery."""

        def deliver() -> None:
            if self._handler is not None:
                self._handler(key, char)

        self._scheduler.post(deliver)