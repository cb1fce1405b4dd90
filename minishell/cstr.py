"""String and number helpers that follow C library conventions.

Searches return an index into the string, or None where nothing was found.
Comparisons return the difference of the first pair of differing character
codes. Number parsing wraps to a signed 32-bit value, as a C ``int`` result does.
"""

from __future__ import annotations

from itertools import islice, zip_longest

_INT_BITS = 32
_BLANKS = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _parse_leading_integer(text: str) -> int:
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _BLANKS:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def atoi(text: str) -> int:
    """Parse the integer at the start of ``text``.

    Leading blanks and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0.
    """
    return _parse_leading_integer(text)


def atol(text: str) -> int:
    """Parse like :func:`atoi`; the result is also a signed 32-bit value."""
    return _parse_leading_integer(text)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty pieces."""
    if not delim:
        return [text] if text else []
    return [piece for piece in text.split(delim) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at 0. Returns the index of the match or None.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    found = haystack[:length].find(needle)
    return found if found >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the shorter string ends in a NUL."""
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings fully."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def _char_code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def strchr(text: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``text``.

    Searching for the NUL character gives ``len(text)``, the terminator's place.
    """
    code = _char_code(c)
    if code > 255:
        code %= 256
    if code == 0:
        return len(text)
    found = text.find(chr(code & 0xFF))
    return found if found >= 0 else None


def strrchr(text: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``text``.

    Searching for the NUL character gives ``len(text)``, the terminator's place.
    """
    code = _char_code(c) & 0xFF
    if code == 0:
        return len(text)
    found = text.rfind(chr(code))
    return found if found >= 0 else None