"""Reading the hexadecimal colour part of a map cell."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_UINT32 = 0xFFFFFFFF


def hextoi(text: str | None) -> int:
    """Return the hexadecimal number that follows the first ``x`` or ``X``.

    Reading stops at the first character that is not a hexadecimal digit.
    The result wraps to an unsigned 32-bit value. ``None`` gives 0.
    """
    if text is None:
        return 0
    marks = [pos for pos in (text.find("x"), text.find("X")) if pos != -1]
    if not marks:
        raise ValueError(f"no hexadecimal marker in {text!r}")
    digits = []
    for char in text[min(marks) + 1:]:
        if char not in _HEX_DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return int("".join(digits), 16) & _UINT32