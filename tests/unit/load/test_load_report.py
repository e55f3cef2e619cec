"""Tests for TaskOutcome and LoadReport."""

from __future__ import annotations

import httpx

from handler_chain.load.report import LoadReport, TaskOutcome


class TestTaskOutcome:
    def test_ok_without_error(self) -> None:
        outcome = TaskOutcome(index=0, duration_ms=1.0, status_code=200, body="hi")
        assert outcome.ok is True

    def test_not_ok_with_error(self) -> None:
        outcome = TaskOutcome(
            index=0, duration_ms=1.0, error=httpx.ConnectError("refused")
        )
        assert outcome.ok is False
        assert outcome.status_code is None


class TestLoadReport:
    def test_counts(self) -> None:
        report = LoadReport(
            label="3 requests",
            count=3,
            outcomes=[
                TaskOutcome(index=0, duration_ms=1.0, status_code=200, body="a"),
                TaskOutcome(index=1, duration_ms=1.0, error=RuntimeError("x")),
                TaskOutcome(index=2, duration_ms=1.0, status_code=500, body=""),
            ],
        )
        assert report.succeeded == 2
        assert [o.index for o in report.failed] == [1]

    def test_timing_line(self) -> None:
        report = LoadReport(label="100 requests", count=100, elapsed_ms=12.3456)
        assert report.timing_line() == "100 requests: 12.346ms"

    def test_empty_report(self) -> None:
        report = LoadReport(label="0 requests", count=0)
        assert report.succeeded == 0
        assert report.failed == []
