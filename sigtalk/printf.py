"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any

_CONVERSION = re.compile(r"%([cspdiuxX%]|$)")
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _PTR_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec in ("", "%"):
        return "%" if spec == "%" else ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in ("d", "i"):
        return str(_as_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return f"{int(value) & _UINT_MASK:x}"
    return f"{int(value) & _UINT_MASK:X}"


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    A ``%`` followed by an unsupported character is kept as written; a
    trailing ``%`` produces nothing. Extra arguments are ignored.
    """
    remaining = iter(args)
    return _CONVERSION.sub(lambda match: _convert(match.group(1), remaining), fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)