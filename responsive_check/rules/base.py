"""Base rule protocol and finding model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

Severity = Literal["pass", "warning", "issue"]


@dataclass(frozen=True, slots=True)
class Finding:
    """A single verdict emitted by a rule."""

    rule_id: str
    message: str
    severity: Severity


class Rule(Protocol):
    """Protocol for pattern-matching stylesheet rules."""

    rule_id: str

    def evaluate(self, corpus: str) -> list[Finding]:
        """Evaluate stylesheet text and return findings."""
