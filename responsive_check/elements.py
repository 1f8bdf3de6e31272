"""Per-selector check for media-query overrides."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from responsive_check.rules.base import Finding

ElementStatus = Literal["responsive", "needs_review", "not_found"]

CHECKER_ID = "critical_elements"

CRITICAL_ELEMENTS: tuple[tuple[str, str], ...] = (
    (".container", "Main container"),
    (".hero", "Hero section"),
    (".logo", "Logo"),
    (".form-section", "Form"),
    (".submit-btn", "Submit button"),
    (".form-grid", "Form grid"),
    (".text-block", "Text blocks"),
    (".benefits-grid", "Benefits grid"),
    (".benefit-card", "Benefit cards"),
    (".partnership-container", "Partnership section"),
    (".form-group", "Form fields"),
    (".social-link", "Social links"),
    (".header", "Header"),
    (".footer", "Footer"),
)


@dataclass(frozen=True, slots=True)
class ElementResult:
    """Outcome of checking one catalog selector."""

    selector: str
    label: str
    status: ElementStatus

    def to_finding(self) -> Finding | None:
        if self.status == "responsive":
            return Finding(CHECKER_ID, f"{self.label}: has responsive styles", "pass")
        if self.status == "needs_review":
            return Finding(CHECKER_ID, f"{self.label}: may need mobile adjustments", "warning")
        return None


def mentioned_after_media(corpus: str, name: str) -> bool:
    """Return True when ``name`` occurs anywhere after an ``@media`` token.

    This is a textual heuristic, not a scoped lookup: the name may belong to
    an unrelated rule that merely follows a media query.
    """
    fragments = corpus.split("@media")
    return any(name in fragment for fragment in fragments[1:])


def check_element(corpus: str, selector: str, label: str) -> ElementResult:
    block_re = re.compile(re.escape(selector) + r"\s*\{[^}]*\}")
    if block_re.search(corpus) is None:
        return ElementResult(selector, label, "not_found")

    if mentioned_after_media(corpus, selector.lstrip(".")):
        return ElementResult(selector, label, "responsive")
    return ElementResult(selector, label, "needs_review")


def check_elements(
    corpus: str,
    catalog: tuple[tuple[str, str], ...] = CRITICAL_ELEMENTS,
) -> list[ElementResult]:
    """Check every catalog selector against the corpus, in catalog order."""
    return [check_element(corpus, selector, label) for selector, label in catalog]
