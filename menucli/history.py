"""Storage for the command history, in memory or in a file."""

from __future__ import annotations

import os
from collections import deque
from typing import Deque, Iterable, List, Union

__all__ = ["VolatileHistoryStorage", "FileHistoryStorage"]


class VolatileHistoryStorage:
    """History kept in memory, holding at most ``size`` commands."""

    def __init__(self, size: int = 1000) -> None:
        self._commands: Deque[str] = deque(maxlen=size)

    def store(self, commands: Iterable[str]) -> None:
        """Append commands, dropping the oldest beyond the size limit."""
        self._commands.extend(commands)

    def commands(self) -> List[str]:
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()


class FileHistoryStorage:
    """History kept in a text file, one command per line."""

    def __init__(self, file_name: Union[str, os.PathLike], size: int = 1000) -> None:
        self._max_size = size
        self._file_name = file_name

    def store(self, commands: Iterable[str]) -> None:
        """Append commands to the file, keeping only the newest ``size``."""
        all_commands = self.commands()
        all_commands.extend(commands)
        excess = len(all_commands) - self._max_size
        if excess > 0:
            del all_commands[:excess]
        with open(self._file_name, "w", encoding="utf-8", newline="") as f:
            f.writelines(line + "\n" for line in all_commands)

    def commands(self) -> List[str]:
        try:
            with open(self._file_name, encoding="utf-8", newline="") as f:
                content = f.read()
        except OSError:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def clear(self) -> None:
        with open(self._file_name, "w", encoding="utf-8"):
            pass