"""Tests for stylesheet extraction and the file-level analysis run."""

from __future__ import annotations

from pathlib import Path

from responsive_check.analyzer import DEFAULT_FILES, analyze_corpus, analyze_files
from responsive_check.report import FindingsAccumulator
from responsive_check.rules import build_rules
from responsive_check.stylesheet import extract_corpus, extract_style_blocks

GOOD_CSS = """
body { overflow-x: hidden; }
.container { display: flex; max-width: 100%; }
h1 { font-size: clamp(1.5rem, 4vw, 3rem); }
@media (max-width: 768px) { .container { padding: 16px; } }
@media (max-width: 480px) { .container { padding: 8px; } }
"""


def test_extract_style_blocks_in_document_order() -> None:
    html = (
        "<html><head><style>.a { color: red; }</style>"
        '<STYLE media="screen">\n.b { color: blue; }\n</STYLE></head>'
        "<body><style>.c {}</style></body></html>"
    )
    assert extract_style_blocks(html) == [".a { color: red; }", "\n.b { color: blue; }\n", ".c {}"]
    assert extract_corpus(html) == ".a { color: red; }\n\n.b { color: blue; }\n\n.c {}"


def test_extract_corpus_without_style_is_none() -> None:
    assert extract_corpus("<html><body><p>hi</p></body></html>") is None
    assert extract_corpus("") is None


def test_default_files() -> None:
    assert DEFAULT_FILES == ("index.html", "confirmacao.html")


def test_analyze_files_accumulates_across_files(tmp_path: Path) -> None:
    _write_page(tmp_path, "index.html", GOOD_CSS)
    _write_page(tmp_path, "confirmacao.html", ".hero { width: 900px; }")

    run = analyze_files(tmp_path)
    assert [analysis.label for analysis in run.analyses] == ["index.html", "confirmacao.html"]
    assert run.missing_files == []

    report = run.report
    assert len(report.passed) == 8
    issue_rules = [finding.rule_id for finding in report.issues]
    assert issue_rules == ["mobile_breakpoint"]
    assert report.exit_code == 1
    assert report.total == sum(len(analysis.findings) for analysis in run.analyses)


def test_analyze_files_skips_missing_files(tmp_path: Path) -> None:
    _write_page(tmp_path, "index.html", GOOD_CSS)

    run = analyze_files(tmp_path)
    assert run.missing_files == ["confirmacao.html"]
    assert len(run.analyses) == 1
    assert run.report.issues == ()
    assert run.report.exit_code == 0


def test_analyze_files_with_nothing_on_disk(tmp_path: Path) -> None:
    run = analyze_files(tmp_path)
    assert run.missing_files == ["index.html", "confirmacao.html"]
    assert run.report.score == 0
    assert run.report.tier == "not_applicable"
    assert run.report.exit_code == 0


def test_analyze_files_records_pages_without_styles(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<html><body>plain</body></html>", encoding="utf-8")
    run = analyze_files(tmp_path, ["index.html"])
    assert run.unstyled_files == ["index.html"]
    assert run.analyses == []
    assert run.report.total == 0


def test_analyze_files_is_idempotent(tmp_path: Path) -> None:
    _write_page(tmp_path, "index.html", GOOD_CSS)
    _write_page(tmp_path, "confirmacao.html", ".logo { width: 600px; }")

    first = analyze_files(tmp_path).report
    second = analyze_files(tmp_path).report
    assert first == second


def test_analyze_files_honours_rule_selection(tmp_path: Path) -> None:
    _write_page(tmp_path, "index.html", "")
    rules = build_rules(disabled_rule_ids=["mobile_breakpoint"])
    run = analyze_files(tmp_path, ["index.html"], rules=rules)
    assert run.report.issues == ()
    assert [finding.rule_id for finding in run.report.warnings] == [
        "tablet_breakpoint",
        "overflow_control",
    ]


def test_no_breakpoints_scores_the_two_negative_findings() -> None:
    accumulator = FindingsAccumulator()
    analyze_corpus(
        "body { display: flex; overflow-x: hidden; }",
        accumulator=accumulator,
    )
    assert [finding.rule_id for finding in accumulator.warnings] == ["tablet_breakpoint"]
    assert [finding.rule_id for finding in accumulator.issues] == ["mobile_breakpoint"]
    assert len(accumulator.passed) == 2


def test_analyze_corpus_reports_media_queries_and_suggestions() -> None:
    analysis = analyze_corpus(GOOD_CSS, label="index.html")
    assert analysis.label == "index.html"
    assert analysis.media_query_count == 2
    assert analysis.breakpoints == {768, 480}
    assert [item.priority for item in analysis.suggestions] == ["medium", "high"]


def test_analyze_corpus_empty_scores_zero() -> None:
    accumulator = FindingsAccumulator()
    analysis = analyze_corpus("", accumulator=accumulator)
    assert analysis.media_query_count == 0
    assert accumulator.passed == []
    assert len(accumulator.warnings) == 2
    assert len(accumulator.issues) == 1
    assert analysis.suggestions[0].priority == "high"


def test_analyze_files_tolerates_invalid_utf8(tmp_path: Path) -> None:
    page = f"<html><head><style>/* caf\xe9 */{GOOD_CSS}</style></head></html>"
    (tmp_path / "index.html").write_bytes(page.encode("latin-1"))

    run = analyze_files(tmp_path, ["index.html"])
    assert [analysis.label for analysis in run.analyses] == ["index.html"]
    assert run.analyses[0].breakpoints == {768, 480}
    assert run.report.issues == ()
    assert run.report.exit_code == 0


def test_analyze_files_keeps_file_order_across_outcomes(tmp_path: Path) -> None:
    _write_page(tmp_path, "b.html", GOOD_CSS)
    (tmp_path / "c.html").write_text("<html><body>plain</body></html>", encoding="utf-8")

    run = analyze_files(tmp_path, ["a.html", "b.html", "c.html"])
    assert [(outcome.name, outcome.status) for outcome in run.outcomes] == [
        ("a.html", "missing"),
        ("b.html", "analyzed"),
        ("c.html", "unstyled"),
    ]
    assert run.missing_files == ["a.html"]
    assert run.unstyled_files == ["c.html"]


def _write_page(root: Path, name: str, css: str) -> None:
    (root / name).write_text(
        f"<!doctype html><html><head><style>{css}</style></head><body></body></html>",
        encoding="utf-8",
    )
