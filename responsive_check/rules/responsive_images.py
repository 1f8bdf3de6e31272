"""Fluid image rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

FLUID_MAX_WIDTH_RE = compile(r"max-width:\s*100%")


class ResponsiveImagesRule:
    """Credits max-width: 100% declarations."""

    rule_id = "responsive_images"

    def evaluate(self, corpus: str) -> list[Finding]:
        if FLUID_MAX_WIDTH_RE.search(corpus) is None:
            return []
        return [Finding(self.rule_id, "Images with max-width: 100%", "pass")]
