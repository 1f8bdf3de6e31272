"""Remediation snippets keyed off rule outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Priority = Literal["high", "medium", "low"]

MOBILE_BREAKPOINT_SNIPPET = """@media (max-width: 480px) {
    .container { padding: 20px 16px; }
    .logo { font-size: 2.5rem; }
    .form-section { padding: 24px 16px; }
    .submit-btn { width: 100%; padding: 18px 24px; }
}"""

TOUCH_TARGET_SNIPPET = """@media (max-width: 768px) {
    .submit-btn, .social-link, button, a { min-height: 44px; }
}"""

FORM_INPUT_SNIPPET = """@media (max-width: 768px) {
    .form-group input, .form-group select, .form-group textarea {
        width: 100%;
        font-size: 16px; /* keeps iOS from zooming on focus */
    }
}"""


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A prioritized fix with an optional CSS snippet."""

    priority: Priority
    message: str
    snippet: str | None = None


def generate_suggestions(mobile_breakpoint_present: bool) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    if not mobile_breakpoint_present:
        suggestions.append(
            Suggestion(
                priority="high",
                message="Add a breakpoint for small mobile screens (max-width: 480px)",
                snippet=MOBILE_BREAKPOINT_SNIPPET,
            )
        )

    suggestions.append(
        Suggestion(
            priority="medium",
            message="Make touch targets at least 44x44px on mobile",
            snippet=TOUCH_TARGET_SNIPPET,
        )
    )
    suggestions.append(
        Suggestion(
            priority="high",
            message="Form inputs should be full width on mobile",
            snippet=FORM_INPUT_SNIPPET,
        )
    )
    return suggestions
