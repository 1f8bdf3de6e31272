"""Modern layout rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

FLEX_RE = compile(r"display:\s*flex")
GRID_RE = compile(r"display:\s*grid")


class LayoutPrimitivesRule:
    """Credits Flexbox or Grid layouts."""

    rule_id = "layout_primitives"

    def evaluate(self, corpus: str) -> list[Finding]:
        if FLEX_RE.search(corpus) or GRID_RE.search(corpus):
            return [Finding(self.rule_id, "Uses Flexbox/Grid for layout", "pass")]
        return []
