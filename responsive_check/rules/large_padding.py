"""Oversized padding rule."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

LARGE_PADDING_RE = compile(r"padding:\s*\d{3,}px")


class LargePaddingRule:
    """Warns about padding of 100px or more."""

    rule_id = "large_padding"

    def evaluate(self, corpus: str) -> list[Finding]:
        count = len(LARGE_PADDING_RE.findall(corpus))
        if count == 0:
            return []
        return [Finding(self.rule_id, f"{count} paddings >= 100px found", "warning")]
