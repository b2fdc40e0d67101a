"""
Pydantic models for parse reports.

The library call itself returns an int or raises. These models are for
callers (CLI, HTTP API, batch jobs) that want a verdict per numeral instead
of an exception.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Verdict ─────────────────────────────────────────────────────────


class Status(str, Enum):
    """Verdict for a single numeral."""

    VALID = "VALID"
    INVALID = "INVALID"


# ─── Error Payload ──────────────────────────────────────────────────


class ParseError(BaseModel):
    """Serialisable form of a NumeralError."""

    code: str  # "INVALID_CHARACTER" or "INVALID_NUMERAL"
    message: str
    details: dict = Field(default_factory=dict)


# ─── Outcomes ───────────────────────────────────────────────────────


class ParseOutcome(BaseModel):
    """Result of parsing one numeral. Exactly one of value/error is set."""

    numeral: str
    status: Status
    value: Optional[int] = None
    error: Optional[ParseError] = None

    @property
    def is_valid(self) -> bool:
        return self.status == Status.VALID


class BatchReport(BaseModel):
    """Outcomes for many numerals, in input order."""

    outcomes: list[ParseOutcome] = Field(default_factory=list)
    total: int = 0
    valid_count: int = 0
    invalid_count: int = 0
