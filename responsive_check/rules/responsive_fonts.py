"""Fluid typography rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

CLAMP_FONT_RE = compile(r"font-size:\s*clamp")


class ResponsiveFontsRule:
    """Credits clamp() font sizes."""

    rule_id = "responsive_fonts"

    def evaluate(self, corpus: str) -> list[Finding]:
        if CLAMP_FONT_RE.search(corpus) is None:
            return []
        return [Finding(self.rule_id, "Uses clamp() for responsive fonts", "pass")]
