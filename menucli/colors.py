"""ANSI colour codes and the colour profile used for prompts and input."""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping

__all__ = [
    "Style",
    "Fg",
    "Bg",
    "FgB",
    "BgB",
    "sgr",
    "supports_color",
    "set_color",
    "set_no_color",
    "color_enabled",
    "before_prompt",
    "after_prompt",
    "before_input",
    "after_input",
]


class Style(IntEnum):
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(IntEnum):
    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgB(IntEnum):
    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgB(IntEnum):
    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


_COLOR_TERMS = (
    "ansi", "color", "console", "cygwin", "gnome", "konsole", "kterm",
    "linux", "msys", "putty", "rxvt", "screen", "vt100", "xterm",
)


def sgr(code: int) -> str:
    """Return the escape sequence selecting the given graphic rendition."""
    return f"\033[{int(code)}m"


def supports_color(environ: Mapping[str, str]) -> bool:
    """Tell whether the TERM variable in ``environ`` names a colour terminal."""
    term = environ.get("TERM")
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


class _Profile:
    enabled = False


_profile = _Profile()


def set_color() -> None:
    """Turn colours on for prompts and input."""
    _profile.enabled = True


def set_no_color() -> None:
    """Turn colours off for prompts and input."""
    _profile.enabled = False


def color_enabled() -> bool:
    return _profile.enabled


def before_prompt() -> str:
    """Sequence written before the prompt: bold green while colours are on."""
    return sgr(Fg.GREEN) + sgr(Style.BOLD) if _profile.enabled else ""


def after_prompt() -> str:
    """Sequence written after the prompt: a reset while colours are on."""
    return sgr(Style.RESET) if _profile.enabled else ""


def before_input() -> str:
    """Sequence written before echoed input: bright gray while colours are on."""
    return sgr(FgB.GRAY) if _profile.enabled else ""


def after_input() -> str:
    """Sequence written after echoed input: a reset while colours are on."""
    return sgr(Style.RESET) if _profile.enabled else ""