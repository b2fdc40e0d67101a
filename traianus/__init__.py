"""
Traianus — Strict Roman numeral parsing.

Architecture: single-pass scanner with one symbol of lookahead → int or typed error
Philosophy:  Exactly one spelling per number. Everything else is rejected.
"""

from .exceptions import InvalidCharacter, InvalidNumeral, NumeralError
from .numerals import MAX_VALUE, is_roman_numeral, parse_roman_numeral

__version__ = "1.0.0"

__all__ = [
    "InvalidCharacter",
    "InvalidNumeral",
    "MAX_VALUE",
    "NumeralError",
    "is_roman_numeral",
    "parse_roman_numeral",
]
