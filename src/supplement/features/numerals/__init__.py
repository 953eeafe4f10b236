"""Integer helpers."""

from .roman import InvalidRomanNumeralError, ROMAN_SYMBOLS, from_roman, to_roman

__all__ = ["InvalidRomanNumeralError", "ROMAN_SYMBOLS", "from_roman", "to_roman"]
