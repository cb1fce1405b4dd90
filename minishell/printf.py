"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion '%{spec}'") from None

    if spec == "c":
        value = take()
        return value if isinstance(value, str) else chr(value & 0xFF)
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        value = take()
        if not value:
            return "(nil)"
        return f"0x{value:x}"
    if spec in ("d", "i"):
        return str(_to_int32(take()))
    if spec == "u":
        return str(take() & _UINT32_MASK)
    if spec == "x":
        return f"{take() & _UINT32_MASK:x}"
    if spec == "X":
        return f"{take() & _UINT32_MASK:X}"
    # "%%" prints a percent sign; an unknown conversion prints one and drops its letter.
    return "%"


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises TypeError when there are fewer arguments than conversions.
    """
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)