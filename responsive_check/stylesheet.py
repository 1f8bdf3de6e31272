"""Inline stylesheet extraction."""

from __future__ import annotations

from re import DOTALL, IGNORECASE, compile

STYLE_BLOCK_RE = compile(r"<style[^>]*>(.*?)</style>", IGNORECASE | DOTALL)


def extract_style_blocks(html: str) -> list[str]:
    """Return the inner text of every ``<style>`` element in document order."""
    return STYLE_BLOCK_RE.findall(html)


def extract_corpus(html: str) -> str | None:
    """Join inline stylesheets into one corpus, or None when there are none.

    Matching is textual: a ``<style>`` inside a comment or script string is
    extracted like any other.
    """
    blocks = extract_style_blocks(html)
    if not blocks:
        return None
    return "\n".join(blocks)
