"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

import main


def test_all_valid_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["MMXXIV", "IV"]) == 0
    out = capsys.readouterr().out
    assert "2024" in out
    assert "ALL 2 NUMERAL(S) VALID" in out


def test_invalid_exits_one(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["MMXXIV", "XIZI"]) == 1
    out = capsys.readouterr().out
    assert "[INVALID_CHARACTER]" in out
    assert "Invalid character: Z" in out
    assert "1 of 2" in out


def test_sample_set_used_without_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main([]) == 1
    out = capsys.readouterr().out
    assert "1969" in out
    assert "[INVALID_NUMERAL]" in out
