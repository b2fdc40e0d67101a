#!/usr/bin/env python3
"""
Micro-benchmark for parse_roman_numeral.

Usage:
    python benchmarks/bench_parse.py
    python benchmarks/bench_parse.py --number 200000
"""

from __future__ import annotations

import argparse
import sys
import timeit
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from traianus import parse_roman_numeral  # noqa: E402

SMALL = ["", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]
LARGE = ["MCMLXIX", "MMXXIV", "MMMDCCCLXXXVIII", "MMMCMXCIX"]


def bench(inputs: list[str], number: int) -> list[tuple[str, float]]:
    """Return (input, nanoseconds per call) for each input."""
    rows = []
    for text in inputs:
        seconds = timeit.timeit(lambda: parse_roman_numeral(text), number=number)
        rows.append((text, seconds / number * 1e9))
    return rows


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--number", type=int, default=100_000, help="calls per input")
    args = parser.parse_args()

    print(f"{'input':<18} {'ns/call':>10}")
    print(f"{'-' * 18} {'-' * 10}")
    for text, ns in bench(SMALL + LARGE, args.number):
        print(f"{text or '(empty)':<18} {ns:>10.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
