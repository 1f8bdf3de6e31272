"""Fixed pixel width rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

FIXED_WIDTH_RE = compile(r"width:\s*(\d{3,})px")
MAX_FIXED_WIDTH = 400


class FixedWidthRule:
    """Warns about fixed pixel widths wider than a small phone screen."""

    rule_id = "fixed_width"

    def evaluate(self, corpus: str) -> list[Finding]:
        widths = [int(value) for value in FIXED_WIDTH_RE.findall(corpus)]
        if not widths:
            return []

        too_wide = [value for value in widths if value > MAX_FIXED_WIDTH]
        if too_wide:
            return [
                Finding(
                    self.rule_id,
                    f"{len(too_wide)} fixed widths > {MAX_FIXED_WIDTH}px found",
                    "warning",
                )
            ]
        return [Finding(self.rule_id, "No problematic fixed widths", "pass")]
