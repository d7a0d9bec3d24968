"""String helpers with C-library semantics: parsing, splitting, searching, comparing."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps to a signed 32-bit integer.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = ""
    for char in body:
        if not "0" <= char <= "9":
            break
        digits += char
    return _wrap_int32(sign * int(digits or "0"))


def itoa(number: int) -> str:
    """Return the decimal text of ``number`` taken as a signed 32-bit integer."""
    return str(_wrap_int32(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces.

    An empty separator or empty text gives an empty list.
    """
    if not separator or not text:
        return []
    return [word for word in text.split(_single_char(separator)) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly within ``haystack[:length]``.

    An empty needle is found at 0; ``None`` means not found.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(0, min(length, len(haystack))))
    return None if index < 0 else index


def _byte_at(data: bytes, index: int) -> int:
    return data[index] if index < len(data) else 0


def strncmp(first: str | bytes, second: str | bytes, count: int) -> int:
    """Compare at most ``count`` bytes, stopping at the end of either string.

    Returns the difference of the first differing bytes, or 0.
    """
    left, right = _as_bytes(first), _as_bytes(second)
    for index in range(count):
        a, b = _byte_at(left, index), _byte_at(right, index)
        if a != b or a == 0 or index == count - 1:
            return a - b
    return 0


def memcmp(first: str | bytes, second: str | bytes, count: int) -> int:
    """Compare the first ``count`` bytes; return the first difference or 0."""
    left, right = _as_bytes(first), _as_bytes(second)
    if count > len(left) or count > len(right):
        raise ValueError("count exceeds the length of an operand")
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    The terminator ``"\\0"`` is found at ``len(text)``; ``None`` means absent.
    """
    index = text.find(_single_char(char))
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    The terminator ``"\\0"`` is found at ``len(text)``; ``None`` means absent.
    """
    if _single_char(char) == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index