"""
Tests for the report-producing pipeline and its models.

The pipeline must never raise for a malformed numeral: every NumeralError
becomes an INVALID outcome with no partial value attached.
"""

from __future__ import annotations

import logging

import pytest

from traianus.models import BatchReport, Status
from traianus.pipeline import NumeralPipeline


@pytest.fixture
def pipeline() -> NumeralPipeline:
    return NumeralPipeline()


class TestRun:
    def test_valid_outcome(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("MCMXCIV")
        assert outcome.status == Status.VALID
        assert outcome.is_valid
        assert outcome.value == 1994
        assert outcome.error is None

    def test_empty_numeral_is_zero(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("")
        assert outcome.is_valid
        assert outcome.value == 0

    def test_invalid_numeral_outcome(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("IIII")
        assert outcome.status == Status.INVALID
        assert outcome.value is None
        assert outcome.error is not None
        assert outcome.error.code == "INVALID_NUMERAL"
        assert outcome.error.details == {"numeral": "IIII"}

    def test_invalid_character_outcome(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("XIZI")
        assert outcome.error is not None
        assert outcome.error.code == "INVALID_CHARACTER"
        assert outcome.error.message == "Invalid character: Z"
        assert outcome.error.details == {"character": "Z", "position": 2}

    def test_strips_surrounding_whitespace(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("  XIV\n")
        assert outcome.numeral == "XIV"
        assert outcome.value == 14

    def test_interior_whitespace_still_invalid(self, pipeline: NumeralPipeline) -> None:
        outcome = pipeline.run("X IV")
        assert outcome.error is not None
        assert outcome.error.details == {"character": " ", "position": 1}

    def test_no_strip_mode(self) -> None:
        outcome = NumeralPipeline(strip_whitespace=False).run(" XIV")
        assert outcome.status == Status.INVALID
        assert outcome.error is not None
        assert outcome.error.code == "INVALID_CHARACTER"

    def test_logs_rejections_at_debug(
        self, pipeline: NumeralPipeline, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="traianus.pipeline"):
            pipeline.run("VV")
        assert any("Rejected 'VV'" in r.getMessage() for r in caplog.records)


class TestBatch:
    def test_preserves_order_and_counts(self, pipeline: NumeralPipeline) -> None:
        report = pipeline.run_batch(["MMXXIV", "IIII", "XIZI", "IV"])
        assert isinstance(report, BatchReport)
        assert [o.numeral for o in report.outcomes] == ["MMXXIV", "IIII", "XIZI", "IV"]
        assert [o.value for o in report.outcomes] == [2024, None, None, 4]
        assert report.total == 4
        assert report.valid_count == 2
        assert report.invalid_count == 2

    def test_empty_batch(self, pipeline: NumeralPipeline) -> None:
        report = pipeline.run_batch([])
        assert report.total == 0
        assert report.valid_count == 0
        assert report.invalid_count == 0

    def test_accepts_generators(self, pipeline: NumeralPipeline) -> None:
        report = pipeline.run_batch(n for n in ["I", "II"])
        assert report.valid_count == 2

    def test_logs_summary(
        self, pipeline: NumeralPipeline, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="traianus.pipeline"):
            pipeline.run_batch(["I", "VV"])
        assert "1 valid, 1 invalid" in caplog.text


class TestParseLines:
    def test_one_numeral_per_line(self, pipeline: NumeralPipeline) -> None:
        report = pipeline.parse_lines("MMXXIV\n\nIIII\r\n  CM  \n")
        assert [o.numeral for o in report.outcomes] == ["MMXXIV", "IIII", "CM"]
        assert report.valid_count == 2
        assert report.invalid_count == 1

    def test_blank_blob(self, pipeline: NumeralPipeline) -> None:
        assert pipeline.parse_lines("\n \n").total == 0


class TestModels:
    def test_outcome_serialises(self, pipeline: NumeralPipeline) -> None:
        data = pipeline.run("XIZI").model_dump(mode="json")
        assert data["status"] == "INVALID"
        assert data["value"] is None
        assert data["error"]["code"] == "INVALID_CHARACTER"
