"""Character-class tests and case conversion on integer character codes.

Only the ASCII letters, digits and printable range are recognised.
Any other code is not in a class and is returned unchanged by the
case conversions.
"""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def is_alpha(code: int) -> bool:
    """Return whether ``code`` is an ASCII letter."""
    return code in _UPPER or code in _LOWER


def is_digit(code: int) -> bool:
    """Return whether ``code`` is an ASCII decimal digit."""
    return code in _DIGITS


def is_alnum(code: int) -> bool:
    """Return whether ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return whether ``code`` lies in the range 0 to 127."""
    return code in _ASCII


def is_print(code: int) -> bool:
    """Return whether ``code`` is a printable ASCII character (space to tilde)."""
    return code in _PRINTABLE


def to_upper(code: int) -> int:
    """Return the upper-case code of an ASCII lower-case letter, else ``code``."""
    return code - _CASE_OFFSET if code in _LOWER else code


def to_lower(code: int) -> int:
    """Return the lower-case code of an ASCII upper-case letter, else ``code``."""
    return code + _CASE_OFFSET if code in _UPPER else code