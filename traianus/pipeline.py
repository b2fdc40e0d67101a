"""
Report-producing wrapper around the parser.

Flow:
  raw text → (optional strip) → parse_roman_numeral → ParseOutcome
  many     → run() each, in order                    → BatchReport

The parser raises; the pipeline never does for a malformed numeral. Each
NumeralError is converted into a typed INVALID outcome so one bad token
cannot abort a batch.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .exceptions import NumeralError
from .models import BatchReport, ParseError, ParseOutcome, Status
from .numerals import parse_roman_numeral

logger = logging.getLogger(__name__)


class NumeralPipeline:
    """Parses numerals into reports.

    Usage:
        pipeline = NumeralPipeline()
        outcome = pipeline.run("MCMXCIV")
        if outcome.is_valid:
            print(outcome.value)
    """

    def __init__(self, strip_whitespace: bool = True):
        self.strip_whitespace = strip_whitespace

    def run(self, text: str) -> ParseOutcome:
        """Parse a single numeral into a ParseOutcome."""
        numeral = text.strip() if self.strip_whitespace else text

        try:
            value = parse_roman_numeral(numeral)
        except NumeralError as exc:
            logger.debug("Rejected %r: %s", numeral, exc)
            return ParseOutcome(
                numeral=numeral,
                status=Status.INVALID,
                error=ParseError(
                    code=exc.code, message=exc.message, details=exc.details
                ),
            )

        logger.debug("Parsed %r -> %d", numeral, value)
        return ParseOutcome(numeral=numeral, status=Status.VALID, value=value)

    def run_batch(self, texts: Iterable[str]) -> BatchReport:
        """Parse every numeral, preserving input order."""
        outcomes = [self.run(text) for text in texts]
        valid = sum(1 for o in outcomes if o.is_valid)

        logger.info(
            "Parsed batch of %d numeral(s): %d valid, %d invalid",
            len(outcomes),
            valid,
            len(outcomes) - valid,
        )
        return BatchReport(
            outcomes=outcomes,
            total=len(outcomes),
            valid_count=valid,
            invalid_count=len(outcomes) - valid,
        )

    def parse_lines(self, blob: str) -> BatchReport:
        """Parse a text blob holding one numeral per line. Blank lines are skipped."""
        return self.run_batch(line for line in blob.splitlines() if line.strip())
