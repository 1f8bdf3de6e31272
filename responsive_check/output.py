"""Output rendering."""

from __future__ import annotations

import json
from typing import Any

import click

from responsive_check import __version__
from responsive_check.analyzer import AnalysisRun, CorpusAnalysis
from responsive_check.elements import CHECKER_ID
from responsive_check.report import Report, Tier
from responsive_check.rules.base import Finding
from responsive_check.suggestions import Suggestion
from responsive_check.visual import CaptureResult, VisualRun

RULE_WIDTH = 60

SEVERITY_STYLE = {
    "pass": ("✅", "green"),
    "warning": ("⚠️", "yellow"),
    "issue": ("❌", "red"),
}

PRIORITY_COLOR = {"high": "red", "medium": "yellow", "low": "blue"}

TIER_BANNER: dict[Tier, tuple[str, str]] = {
    "excellent": ("EXCELLENT! Responsiveness OK", "green"),
    "good": ("GOOD, but could improve", "yellow"),
    "needs_work": ("NEEDS IMPROVEMENT", "red"),
    "not_applicable": ("NOT APPLICABLE - nothing was scored", "blue"),
}

CHECKLIST = (
    "Viewport meta tag",
    "Text readable without zoom (16px minimum)",
    "Elements stay within the viewport",
    "Buttons sized for touch (44x44px)",
    "Forms usable on mobile",
    "Responsive images",
    "No horizontal scrolling",
    "Breakpoints defined (480, 768, 1024)",
)


def render_banner(title: str) -> str:
    rule = "═" * RULE_WIDTH
    return "\n".join(
        [
            click.style(rule, fg="cyan", bold=True),
            click.style(f"  {title}", fg="cyan", bold=True),
            click.style(rule, fg="cyan", bold=True),
        ]
    )


def render_section(title: str) -> str:
    rule = "─" * RULE_WIDTH
    return "\n".join(
        [
            "",
            click.style(rule, fg="cyan", bold=True),
            click.style(f"  {title}", fg="cyan", bold=True),
            click.style(rule, fg="cyan", bold=True),
            "",
        ]
    )


def render_finding(finding: Finding) -> str:
    icon, color = SEVERITY_STYLE[finding.severity]
    return f"{click.style(icon, fg=color)} {finding.message}"


def render_info(message: str) -> str:
    return f"{click.style('ℹ', fg='blue')} {message}"


def render_analysis(analysis: CorpusAnalysis) -> str:
    """Render rule results, element checks and suggestions for one corpus."""
    lines = [render_section(f"Analyzing: {analysis.label}")]
    lines.append(render_info(f"Media queries found: {analysis.media_query_count}"))
    if analysis.breakpoints:
        joined = ", ".join(f"{value}px" for value in sorted(analysis.breakpoints))
        lines.append(render_info(f"Breakpoints: {joined}"))
    for finding in analysis.findings:
        if finding.rule_id != CHECKER_ID:
            lines.append(render_finding(finding))

    lines.append(render_section("CRITICAL ELEMENTS FOR MOBILE"))
    for element in analysis.elements:
        finding = element.to_finding()
        if finding is None:
            lines.append(render_info(f"{element.label}: not found"))
        else:
            lines.append(render_finding(finding))

    lines.append(render_section("SUGGESTED IMPROVEMENTS"))
    for suggestion in analysis.suggestions:
        lines.extend(render_suggestion(suggestion))
    return "\n".join(lines)


def render_suggestion(suggestion: Suggestion) -> list[str]:
    tag = click.style(f"[{suggestion.priority.upper()}]", fg=PRIORITY_COLOR[suggestion.priority])
    lines = ["", f"{tag} {suggestion.message}"]
    if suggestion.snippet:
        lines.append(click.style("Suggested code:", fg="cyan"))
        lines.append(click.style(suggestion.snippet, bold=True))
    return lines


def render_missing_file(name: str) -> str:
    return f"{click.style('⚠️', fg='yellow')} File not found: {name}"


def render_unstyled_file(name: str) -> str:
    return render_info(f"No inline <style> blocks in: {name}")


def render_checklist() -> str:
    lines = [render_section("RESPONSIVENESS CHECKLIST")]
    lines.extend(f"  ☐ {item}" for item in CHECKLIST)
    return "\n".join(lines)


def render_report(report: Report) -> str:
    """Render passes, warnings, issues and the score banner."""
    rule = "═" * RULE_WIDTH
    lines = [
        "",
        click.style(rule, bold=True),
        click.style("  RESPONSIVENESS REPORT", bold=True),
        click.style(rule, bold=True),
        "",
        click.style(f"✅ PASSED ({len(report.passed)}):", fg="green"),
    ]
    lines.extend(f"   • {finding.message}" for finding in report.passed)

    if report.warnings:
        lines.append("")
        lines.append(click.style(f"⚠️ WARNINGS ({len(report.warnings)}):", fg="yellow"))
        lines.extend(f"   • {finding.message}" for finding in report.warnings)

    if report.issues:
        lines.append("")
        lines.append(click.style(f"❌ ISSUES ({len(report.issues)}):", fg="red"))
        lines.extend(f"   • {finding.message}" for finding in report.issues)

    lines.append("")
    lines.append("─" * RULE_WIDTH)
    lines.append("")
    lines.append(render_score_banner(report))
    return "\n".join(lines)


def render_score_banner(report: Report) -> str:
    message, color = TIER_BANNER[report.tier]
    return click.style(f"  Score: {report.score}% - {message}  ", bg=color, bold=True)


def render_run(run: AnalysisRun) -> str:
    """Render a whole analysis run in human-readable form."""
    sections = [render_banner("Responsiveness Check")]
    for outcome in run.outcomes:
        if outcome.analysis is not None:
            sections.append(render_analysis(outcome.analysis))
        elif outcome.status == "missing":
            sections.append(render_missing_file(outcome.name))
        else:
            sections.append(render_unstyled_file(outcome.name))
    sections.append(render_checklist())
    sections.append(render_report(run.report))
    return "\n".join(sections)


def render_json(run: AnalysisRun) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(run), sort_keys=True)


def build_json_payload(run: AnalysisRun) -> dict[str, Any]:
    report = run.report
    return {
        "passed": [_serialize_finding(item) for item in report.passed],
        "warnings": [_serialize_finding(item) for item in report.warnings],
        "issues": [_serialize_finding(item) for item in report.issues],
        "score": report.score,
        "tier": report.tier,
        "files": [_serialize_analysis(item) for item in run.analyses],
        "missing_files": list(run.missing_files),
        "meta": {"version": __version__, "unstyled_files": list(run.unstyled_files)},
    }


def _serialize_finding(finding: Finding) -> dict[str, Any]:
    return {
        "rule_id": finding.rule_id,
        "message": finding.message,
        "severity": finding.severity,
    }


def _serialize_analysis(analysis: CorpusAnalysis) -> dict[str, Any]:
    return {
        "file": analysis.label,
        "media_queries": analysis.media_query_count,
        "breakpoints": sorted(analysis.breakpoints),
        "findings": [_serialize_finding(item) for item in analysis.findings],
        "elements": [
            {"selector": item.selector, "label": item.label, "status": item.status}
            for item in analysis.elements
        ],
        "suggestions": [
            {"priority": item.priority, "message": item.message, "snippet": item.snippet}
            for item in analysis.suggestions
        ],
    }


def render_capture(result: CaptureResult) -> str:
    viewport = result.viewport
    size = f"{viewport.name} ({viewport.width}x{viewport.height})"
    if result.error is not None:
        return click.style(f"❌ {viewport.name}: Error - {result.error}", fg="red")
    if result.findings:
        color = "yellow" if result.horizontal_scroll else "green"
        return click.style(f"⚠️ {size} - Captured", fg=color)
    return click.style(f"✅ {size} - Captured", fg="green")


def render_visual_summary(run: VisualRun) -> str:
    lines = [
        render_section("FINAL REPORT"),
        click.style(f"✅ Screenshots captured: {run.captured}/{run.total}", fg="green"),
        click.style(f"📁 Saved to: {run.screenshots_dir}", fg="cyan"),
    ]
    if run.stale_removed:
        lines.append(render_info(f"Previous screenshots removed: {run.stale_removed}"))
    lines.append("")
    if run.issues:
        lines.append(click.style("⚠️ Problems found:", fg="yellow"))
        lines.extend(f"   • {issue}" for issue in run.issues)
    else:
        lines.append(click.style("✨ No responsiveness problems detected!", fg="green"))

    lines.append("")
    lines.append("─" * RULE_WIDTH)
    lines.append(click.style("Open the screenshots folder to review visually.", dim=True))
    lines.append("─" * RULE_WIDTH)
    return "\n".join(lines)
