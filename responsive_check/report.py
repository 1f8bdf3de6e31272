"""Finding accumulation and score aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from responsive_check.rules.base import Finding

Tier = Literal["excellent", "good", "needs_work", "not_applicable"]


@dataclass(slots=True)
class FindingsAccumulator:
    """Ordered pass/warning/issue sequences shared across a whole run."""

    passed: list[Finding] = field(default_factory=list)
    warnings: list[Finding] = field(default_factory=list)
    issues: list[Finding] = field(default_factory=list)

    def add(self, finding: Finding) -> None:
        if finding.severity == "pass":
            self.passed.append(finding)
        elif finding.severity == "warning":
            self.warnings.append(finding)
        elif finding.severity == "issue":
            self.issues.append(finding)
        else:
            raise ValueError(f"Unknown finding severity: {finding.severity!r}")

    def extend(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.add(finding)

    @property
    def total(self) -> int:
        return len(self.passed) + len(self.warnings) + len(self.issues)


@dataclass(frozen=True, slots=True)
class Report:
    """Read-only view over accumulated findings."""

    passed: tuple[Finding, ...]
    warnings: tuple[Finding, ...]
    issues: tuple[Finding, ...]
    score: int

    @property
    def total(self) -> int:
        return len(self.passed) + len(self.warnings) + len(self.issues)

    @property
    def tier(self) -> Tier:
        return score_tier(self.score, self.total)

    @property
    def exit_code(self) -> int:
        return 1 if self.issues else 0


def compute_score(passed: int, warnings: int, issues: int) -> int:
    """Percentage of pass findings, rounded half up; 0 when nothing was scored."""
    total = passed + warnings + issues
    if total == 0:
        return 0
    ratio = Decimal(100 * passed) / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_tier(score: int, total: int) -> Tier:
    if total == 0:
        return "not_applicable"
    if score >= 90:
        return "excellent"
    if score >= 70:
        return "good"
    return "needs_work"


def build_report(accumulator: FindingsAccumulator) -> Report:
    return Report(
        passed=tuple(accumulator.passed),
        warnings=tuple(accumulator.warnings),
        issues=tuple(accumulator.issues),
        score=compute_score(
            len(accumulator.passed), len(accumulator.warnings), len(accumulator.issues)
        ),
    )
