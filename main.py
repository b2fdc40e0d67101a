#!/usr/bin/env python3
"""
Traianus — Entry Point
======================

Parses Roman numerals given on the command line and prints a report.

Usage:
    python main.py                      # Parse a built-in sample set
    python main.py MMXXIV XIZI IIII     # Parse your own numerals
    TRAIANUS_LOG_LEVEL=DEBUG python main.py MCMXCIV
"""

from __future__ import annotations

import logging
import os
import sys

from traianus.models import BatchReport, ParseOutcome
from traianus.pipeline import NumeralPipeline

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Sample Numerals — a few bad ones on purpose ────────────────────

SAMPLE_NUMERALS = [
    "",
    "IV",
    "MCMLXIX",
    "MMXXIV",
    "CMXCIX",
    "MMMCMXCIX",
    "IIII",
    "IC",
    "XIZI",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_outcome(outcome: ParseOutcome) -> None:
    """Print one numeral's verdict on a single line (plus error details)."""
    shown = outcome.numeral or f"{_DIM}(empty){_RESET}"
    if outcome.is_valid:
        print(f"  {_GREEN}OK {_RESET}  {shown:<20} {_BOLD}{outcome.value}{_RESET}")
        return

    assert outcome.error is not None
    print(f"  {_RED}ERR{_RESET}  {shown:<20} {_RED}[{outcome.error.code}]{_RESET}")
    print(f"       {outcome.error.message}")
    for k, v in outcome.error.details.items():
        print(f"         {_DIM}{k}: {v}{_RESET}")


def print_report(report: BatchReport) -> int:
    """Pretty-print a batch report.

    Returns:
        0 if every numeral parsed, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ROMAN NUMERAL REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")

    for outcome in report.outcomes:
        _print_outcome(outcome)

    print(f"{'=' * _WIDTH}")
    if report.invalid_count == 0:
        print(f"  {_GREEN}{_BOLD}ALL {report.total} NUMERAL(S) VALID{_RESET}")
    else:
        print(
            f"  {_RED}{_BOLD}{report.invalid_count} of {report.total} "
            f"numeral(s) rejected{_RESET}"
        )
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.invalid_count == 0 else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse the given numerals (or the sample set) and print the report."""
    logging.basicConfig(
        level=os.environ.get("TRAIANUS_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    numerals = sys.argv[1:] if argv is None else argv
    if not numerals:
        numerals = SAMPLE_NUMERALS

    pipeline = NumeralPipeline()
    report = pipeline.run_batch(numerals)
    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
