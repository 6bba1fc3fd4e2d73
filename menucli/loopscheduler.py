"""A simple thread-safe task scheduler driven by an explicit loop."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque, Optional

__all__ = ["LoopScheduler"]

Task = Callable[[], None]


class LoopScheduler:
    """Queue of tasks executed by whichever thread calls run/exec_one/poll_one.

    Tasks may be posted from any thread. Exceptions raised by a task
    propagate out of the call that executed it.
    """

    def __init__(self) -> None:
        self._tasks: Deque[Optional[Task]] = deque()
        self._running = True
        self._cond = threading.Condition()

    def __enter__(self) -> "LoopScheduler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def stop(self) -> None:
        """Stop the scheduler and wake any thread waiting for a task."""
        with self._cond:
            self._running = False
            self._cond.notify_all()

    def run(self) -> None:
        """Execute tasks until the scheduler is stopped."""
        while self.exec_one():
            pass

    def stopped(self) -> bool:
        with self._cond:
            return not self._running

    def post(self, task: Optional[Task]) -> None:
        """Queue a task for execution."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify_all()

    def exec_one(self) -> bool:
        """Wait for one task and execute it; return False once stopped."""
        with self._cond:
            self._cond.wait_for(lambda: not self._running or bool(self._tasks))
            if not self._running:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True

    def poll_one(self) -> bool:
        """Execute one task if one is ready; return whether one was run."""
        with self._cond:
            if not self._running or not self._tasks:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True