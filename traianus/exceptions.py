"""
Custom exception hierarchy for numeral parsing.

There are exactly two failure kinds: a character outside the Roman alphabet,
or a well-spelled alphabet arranged into something that is not a canonical
numeral. Both are final; the same input can never parse on a retry.
"""

from __future__ import annotations


class NumeralError(ValueError):
    """Base exception for all numeral parsing failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity()))

    def _identity(self) -> tuple:
        """Fields that decide equality."""
        return tuple(sorted(self.details.items()))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{type(self).__name__}({args})"


class InvalidCharacter(NumeralError):
    """A character outside {I, V, X, L, C, D, M} appeared in the input."""

    def __init__(self, character: str, position: int | None = None):
        self.character = character
        self.position = position
        super().__init__(
            "INVALID_CHARACTER",
            f"Invalid character: {character}",
            {"character": character, "position": position},
        )

    def _identity(self) -> tuple:
        # Position is reported in details but does not affect equality.
        return (self.character,)


class InvalidNumeral(NumeralError):
    """Every character is a Roman symbol, but the arrangement is not canonical.

    Carries the complete original input, not the failing fragment, so callers
    can report the whole malformed token.
    """

    def __init__(self, numeral: str):
        self.numeral = numeral
        super().__init__(
            "INVALID_NUMERAL",
            f"Invalid numeral: {numeral}",
            {"numeral": numeral},
        )
