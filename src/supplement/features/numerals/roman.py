"""Roman numeral rendering and parsing."""

from __future__ import annotations

from typing import Final

ROMAN_SYMBOLS: Final[dict[int, str]] = {
    1: "I",
    5: "V",
    10: "X",
    50: "L",
    100: "C",
    500: "D",
    1000: "M",
}

# Largest first, subtractive pairs included.
_ROMAN_TABLE: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_SYMBOL_VALUES: Final[dict[str, int]] = {symbol: value for value, symbol in ROMAN_SYMBOLS.items()}


class InvalidRomanNumeralError(ValueError):
    """Raised when a string is not a canonical Roman numeral."""


def to_roman(number: int) -> str | None:
    """Return ``number`` as an uppercase Roman numeral, or None if impossible.

    There is no upper bound; thousands are written as repeated ``M``.

        >>> to_roman(1994)
        'MCMXCIV'
        >>> to_roman(-1) is None
        True
    """
    if number <= 0:
        return None

    parts: list[str] = []
    remaining = number
    for value, symbol in _ROMAN_TABLE:
        count, remaining = divmod(remaining, value)
        parts.append(symbol * count)
    return "".join(parts)


def from_roman(numeral: str) -> int:
    """Parse a Roman numeral (any case) into an integer.

    Raises:
        InvalidRomanNumeralError: Empty input, unknown symbols, or a
            non-canonical spelling such as ``"IIII"`` or ``"IC"``.
    """
    text = numeral.strip().upper()
    if not text:
        raise InvalidRomanNumeralError("Empty Roman numeral")

    total = 0
    previous = 0
    for symbol in reversed(text):
        value = _SYMBOL_VALUES.get(symbol)
        if value is None:
            raise InvalidRomanNumeralError(f"Unknown Roman symbol {symbol!r} in {numeral!r}")
        if value < previous:
            total -= value
        else:
            total += value
            previous = value

    if total <= 0 or to_roman(total) != text:
        raise InvalidRomanNumeralError(f"Non-canonical Roman numeral {numeral!r}")
    return total


__all__ = ["InvalidRomanNumeralError", "ROMAN_SYMBOLS", "from_roman", "to_roman"]
