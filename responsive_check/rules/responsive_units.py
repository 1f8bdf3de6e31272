"""Relative unit usage rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

RELATIVE_UNIT_RE = compile(r"\d+(\.\d+)?(vw|vh|rem|em|%|clamp)")


class ResponsiveUnitsRule:
    """Credits relative units (vw, vh, rem, em, %) or clamp()."""

    rule_id = "responsive_units"

    def evaluate(self, corpus: str) -> list[Finding]:
        if RELATIVE_UNIT_RE.search(corpus) is None:
            return []
        return [
            Finding(self.rule_id, "Uses responsive units (vw, vh, rem, em, %, clamp)", "pass")
        ]
