"""Horizontal overflow rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

OVERFLOW_X_HIDDEN_RE = compile(r"overflow-x:\s*hidden")


class OverflowControlRule:
    """Expects horizontal overflow to be clipped."""

    rule_id = "overflow_control"

    def evaluate(self, corpus: str) -> list[Finding]:
        if OVERFLOW_X_HIDDEN_RE.search(corpus):
            return [Finding(self.rule_id, "Horizontal overflow is controlled", "pass")]
        return [
            Finding(self.rule_id, "Consider adding overflow-x: hidden on the body", "warning")
        ]
