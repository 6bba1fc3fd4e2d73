"""Conversion of command-line words into typed values.

Targets are either Python types (``str``, ``int``, ``float``, ``bool``,
``None``) or the names of fixed-width C numeric types such as ``"int"``,
``"unsigned short"`` or ``"double"``. Integer targets with a fixed width
reject values outside their range.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable

__all__ = ["BadConversion", "from_string"]

_DIGITS = frozenset("0123456789")

_SIGNED_BITS = {
    "signed char": 8,
    "short": 16,
    "short int": 16,
    "int": 32,
    "long": 64,
    "long int": 64,
    "long long": 64,
    "long long int": 64,
}

_UNSIGNED_BITS = {
    "unsigned char": 8,
    "unsigned short": 16,
    "unsigned short int": 16,
    "unsigned int": 32,
    "unsigned": 32,
    "unsigned long": 64,
    "unsigned long int": 64,
    "unsigned long long": 64,
    "unsigned long long int": 64,
}

_FLOAT_MAX = {
    "float": 3.4028234663852886e38,
    "double": math.inf,
    "long double": math.inf,
}

_DECIMAL_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_INF_FLOAT = re.compile(r"([+-]?)inf(?:inity)?", re.IGNORECASE)
_NAN_FLOAT = re.compile(r"([+-]?)nan(?:\([0-9A-Za-z_]*\))?", re.IGNORECASE)


class BadConversion(ValueError):
    """Raised when a string cannot be interpreted as the requested type."""

    def __init__(self) -> None:
        super().__init__(
            "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


def _unsigned_digits(text: str, limit: int | None) -> int:
    if not text or not set(text) <= _DIGITS:
        raise BadConversion()
    value = int(text)
    if limit is not None and value > limit:
        raise BadConversion()
    return value


def _unsigned(text: str, bits: int) -> int:
    if text.startswith("+"):
        text = text[1:]
    return _unsigned_digits(text, 2**bits - 1)


def _signed(text: str, bits: int | None) -> int:
    if not text:
        raise BadConversion()
    if text.startswith("-"):
        limit = None if bits is None else 2 ** (bits - 1)
        return -_unsigned_digits(text[1:], limit)
    if text.startswith("+"):
        text = text[1:]
    limit = None if bits is None else 2 ** (bits - 1) - 1
    return _unsigned_digits(text, limit)


def _boolean(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    value = _signed(text, 64)
    if value in (0, 1):
        return value == 1
    raise BadConversion()


def _character(text: str) -> str:
    if len(text) != 1:
        raise BadConversion()
    return text


def _floating(text: str, maximum: float) -> float:
    if any(c.isspace() for c in text):
        raise BadConversion()
    if match := _INF_FLOAT.fullmatch(text):
        return -math.inf if match.group(1) == "-" else math.inf
    if match := _NAN_FLOAT.fullmatch(text):
        return -math.nan if match.group(1) == "-" else math.nan
    if _DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT.fullmatch(text):
        value = float.fromhex(text)
    else:
        raise BadConversion()
    if math.isinf(value) or abs(value) > maximum:
        raise BadConversion()
    return value


def _converter(target: Any) -> Callable[[str], Any]:
    if target is str or target == "string":
        return lambda text: text
    if target is None or target is type(None):
        return lambda text: None
    if target is bool or target == "bool":
        return _boolean
    if target is int:
        return lambda text: _signed(text, None)
    if target is float:
        return lambda text: _floating(text, math.inf)
    if isinstance(target, str):
        if target == "char":
            return _character
        if target in _SIGNED_BITS:
            bits = _SIGNED_BITS[target]
            return lambda text: _signed(text, bits)
        if target in _UNSIGNED_BITS:
            bits = _UNSIGNED_BITS[target]
            return lambda text: _unsigned(text, bits)
        if target in _FLOAT_MAX:
            maximum = _FLOAT_MAX[target]
            return lambda text: _floating(text, maximum)
        raise TypeError(f"unsupported conversion target: {target!r}")
    if callable(target):

        def convert(text: str) -> Any:
            try:
                return target(text.strip())
            except (ValueError, TypeError) as exc:
                raise BadConversion() from exc

        return convert
    raise TypeError(f"unsupported conversion target: {target!r}")


def from_string(text: str, target: Any) -> Any:
    """Convert ``text`` to ``target``, raising BadConversion on failure."""
    return _converter(target)(text)