"""Media-query breakpoint coverage rules."""

from __future__ import annotations

from re import compile

from responsive_check.rules.base import Finding

MEDIA_PREFIX_RE = compile(r"@media[^{]+\{")
MAX_WIDTH_RE = compile(r"max-width:\s*(\d+)px")
MIN_WIDTH_RE = compile(r"min-width:\s*(\d+)px")

TABLET_RANGE = (600, 900)
MOBILE_MAX = 500


def find_media_queries(corpus: str) -> list[str]:
    """Return every ``@media ... {`` prefix in source order."""
    return MEDIA_PREFIX_RE.findall(corpus)


def extract_breakpoints(corpus: str) -> set[int]:
    """Collect pixel thresholds declared in media query prefixes.

    Only the first ``max-width`` and the first ``min-width`` of each prefix
    are taken, so ``(min-width: 600px) and (max-width: 900px)`` yields both
    values while a second ``max-width`` in the same prefix is ignored.
    """
    values: set[int] = set()
    for prefix in find_media_queries(corpus):
        for pattern in (MAX_WIDTH_RE, MIN_WIDTH_RE):
            match = pattern.search(prefix)
            if match:
                values.add(int(match.group(1)))
    return values


def has_mobile_breakpoint(corpus: str) -> bool:
    return any(value <= MOBILE_MAX for value in extract_breakpoints(corpus))


class TabletBreakpointRule:
    """Expects a breakpoint between 600px and 900px for tablets."""

    rule_id = "tablet_breakpoint"

    def evaluate(self, corpus: str) -> list[Finding]:
        low, high = TABLET_RANGE
        if any(low <= value <= high for value in extract_breakpoints(corpus)):
            return [Finding(self.rule_id, "Tablet breakpoint (~768px) defined", "pass")]
        return [
            Finding(self.rule_id, "Missing a dedicated tablet breakpoint (~768px)", "warning")
        ]


class MobileBreakpointRule:
    """Requires a breakpoint at or below 500px for small phones."""

    rule_id = "mobile_breakpoint"

    def evaluate(self, corpus: str) -> list[Finding]:
        if has_mobile_breakpoint(corpus):
            return [Finding(self.rule_id, "Mobile breakpoint defined", "pass")]
        return [Finding(self.rule_id, "Missing breakpoint for small mobile (~480px)", "issue")]
