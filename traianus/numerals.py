"""
Convert Roman numeral strings to their integer value.

Only the canonical ("standard form") spelling of each number is accepted:

    "MMXXIV"   → 2024
    "MCMLXIX"  → 1969
    "CMXCIX"   → 999
    ""         → 0      (the empty numeral)

    "IIII", "VV", "IC", "XM", "IIX" → InvalidNumeral
    "XIZI"                           → InvalidCharacter('Z')

The scan runs left to right with one symbol of lookahead and never
backtracks. Instead of counting repeats, legality of the next symbol is read
off the accumulator's residues: each tier (ones, tens, hundreds, thousands)
occupies its own decimal digit, so `acc % b` tells whether anything below
tier `b` has been consumed and `acc % (5 * b)` tells how many `b`s follow
the last five-symbol.
"""

from __future__ import annotations

from .exceptions import InvalidCharacter, InvalidNumeral, NumeralError

# ─── Symbol Tables ───────────────────────────────────────────────────

SYMBOLS: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Symbol → the symbols it may precede as a subtractive pair
_SUBTRACTIVE: dict[str, frozenset[str]] = {
    "I": frozenset({"V", "X"}),
    "X": frozenset({"L", "C"}),
    "C": frozenset({"D", "M"}),
}

_FIVES: frozenset[str] = frozenset({"V", "L", "D"})

MAX_VALUE = 3999


# ─── Transition Checks ───────────────────────────────────────────────


def _can_take_pair(acc: int, base: int) -> bool:
    """IV/IX, XL/XC and CD/CM open their tier: nothing at or below it yet."""
    return acc % (10 * base) == 0


def _can_take_single(acc: int, symbol: str, value: int) -> bool:
    if symbol in _FIVES:
        # A five-symbol opens its tier, same as a subtractive pair.
        return acc % (2 * value) == 0
    # Nothing below this tier yet, and fewer than three in a row.
    return acc % value == 0 and acc % (5 * value) < 3 * value


# ─── Main Parser ─────────────────────────────────────────────────────


def parse_roman_numeral(text: str) -> int:
    """Convert a canonical Roman numeral to an int.

    Args:
        text: e.g. "MCMXCIV"

    Returns:
        1994

    Raises:
        InvalidCharacter: On the first character that is not a Roman symbol.
        InvalidNumeral: If the symbols do not form a canonical numeral.
            The exception carries the whole input.
    """
    if not text:
        return 0

    acc = 0
    pos = 0
    end = len(text)

    while pos < end:
        symbol = text[pos]
        value = SYMBOLS.get(symbol)
        if value is None:
            raise InvalidCharacter(symbol, pos)

        ahead = text[pos + 1] if pos + 1 < end else ""
        ahead_value = SYMBOLS.get(ahead, 0)

        if symbol in _SUBTRACTIVE and ahead_value > value:
            if ahead not in _SUBTRACTIVE[symbol] or not _can_take_pair(acc, value):
                raise InvalidNumeral(text)
            acc += ahead_value - value
            pos += 2
            continue

        if symbol in _FIVES and ahead_value >= value:
            raise InvalidNumeral(text)

        if not _can_take_single(acc, symbol, value):
            raise InvalidNumeral(text)

        acc += value
        pos += 1

    return acc


def is_roman_numeral(text: str) -> bool:
    """True if `text` is a canonical Roman numeral (the empty string included)."""
    try:
        parse_roman_numeral(text)
    except NumeralError:
        return False
    return True
