"""Tests for finding accumulation, scoring and suggestions."""

from __future__ import annotations

import pytest

from responsive_check.report import (
    FindingsAccumulator,
    build_report,
    compute_score,
    score_tier,
)
from responsive_check.rules.base import Finding
from responsive_check.suggestions import generate_suggestions


def test_accumulator_routes_findings_by_severity() -> None:
    accumulator = FindingsAccumulator()
    accumulator.extend(
        [
            Finding("a", "first pass", "pass"),
            Finding("b", "a warning", "warning"),
            Finding("c", "an issue", "issue"),
            Finding("d", "second pass", "pass"),
        ]
    )
    assert [item.message for item in accumulator.passed] == ["first pass", "second pass"]
    assert [item.message for item in accumulator.warnings] == ["a warning"]
    assert [item.message for item in accumulator.issues] == ["an issue"]
    assert accumulator.total == 4


def test_accumulator_rejects_unknown_severity() -> None:
    with pytest.raises(ValueError, match="Unknown finding severity"):
        FindingsAccumulator().add(Finding("x", "bad", "fatal"))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("passed", "warnings", "issues", "expected"),
    [
        (0, 0, 0, 0),
        (0, 2, 1, 0),
        (9, 1, 0, 90),
        (2, 1, 0, 67),
        (1, 7, 0, 13),
        (3, 0, 0, 100),
    ],
)
def test_compute_score(passed: int, warnings: int, issues: int, expected: int) -> None:
    assert compute_score(passed, warnings, issues) == expected


@pytest.mark.parametrize(
    ("score", "total", "tier"),
    [
        (100, 5, "excellent"),
        (90, 10, "excellent"),
        (89, 10, "good"),
        (70, 10, "good"),
        (69, 10, "needs_work"),
        (0, 3, "needs_work"),
        (0, 0, "not_applicable"),
    ],
)
def test_score_tier(score: int, total: int, tier: str) -> None:
    assert score_tier(score, total) == tier


def test_empty_report_is_defined() -> None:
    report = build_report(FindingsAccumulator())
    assert report.score == 0
    assert report.tier == "not_applicable"
    assert report.exit_code == 0


def test_report_exit_code_ignores_warnings() -> None:
    accumulator = FindingsAccumulator()
    accumulator.add(Finding("w", "warn", "warning"))
    assert build_report(accumulator).exit_code == 0

    accumulator.add(Finding("i", "issue", "issue"))
    report = build_report(accumulator)
    assert report.exit_code == 1
    assert report.score == 0


def test_report_is_a_snapshot() -> None:
    accumulator = FindingsAccumulator()
    accumulator.add(Finding("p", "ok", "pass"))
    report = build_report(accumulator)
    accumulator.add(Finding("i", "issue", "issue"))
    assert len(report.issues) == 0
    assert report.score == 100


def test_suggestions_include_mobile_breakpoint_only_when_missing() -> None:
    missing = generate_suggestions(mobile_breakpoint_present=False)
    assert [item.priority for item in missing] == ["high", "medium", "high"]
    assert "max-width: 480px" in missing[0].message
    assert missing[0].snippet is not None and "@media (max-width: 480px)" in missing[0].snippet

    present = generate_suggestions(mobile_breakpoint_present=True)
    assert [item.priority for item in present] == ["medium", "high"]
    assert "44x44" in present[0].message
    assert all(item.snippet for item in present)
