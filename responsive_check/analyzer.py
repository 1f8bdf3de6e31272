"""Analysis orchestration over page files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from responsive_check.elements import ElementResult, check_elements
from responsive_check.report import FindingsAccumulator, Report, build_report
from responsive_check.rules import default_rules
from responsive_check.rules.base import Finding, Rule
from responsive_check.rules.breakpoints import (
    extract_breakpoints,
    find_media_queries,
    has_mobile_breakpoint,
)
from responsive_check.stylesheet import extract_corpus
from responsive_check.suggestions import Suggestion, generate_suggestions

DEFAULT_FILES = ("index.html", "confirmacao.html")


FileStatus = Literal["analyzed", "missing", "unstyled"]


@dataclass(slots=True)
class CorpusAnalysis:
    """Everything produced for one stylesheet corpus."""

    label: str
    media_query_count: int
    breakpoints: set[int]
    findings: list[Finding]
    elements: list[ElementResult]
    suggestions: list[Suggestion]


@dataclass(frozen=True, slots=True)
class FileOutcome:
    name: str
    status: FileStatus
    analysis: CorpusAnalysis | None = None


@dataclass(slots=True)
class AnalysisRun:
    """Results of a whole run; findings accumulate across every file.

    ``outcomes`` keeps one entry per requested file in the order the files
    were given, so reports can show each file where it was listed.
    """

    accumulator: FindingsAccumulator = field(default_factory=FindingsAccumulator)
    outcomes: list[FileOutcome] = field(default_factory=list)

    def add_analysis(self, analysis: CorpusAnalysis) -> None:
        self.outcomes.append(FileOutcome(analysis.label, "analyzed", analysis))

    def add_missing(self, name: str) -> None:
        self.outcomes.append(FileOutcome(name, "missing"))

    def add_unstyled(self, name: str) -> None:
        self.outcomes.append(FileOutcome(name, "unstyled"))

    @property
    def analyses(self) -> list[CorpusAnalysis]:
        return [outcome.analysis for outcome in self.outcomes if outcome.analysis is not None]

    @property
    def missing_files(self) -> list[str]:
        return [outcome.name for outcome in self.outcomes if outcome.status == "missing"]

    @property
    def unstyled_files(self) -> list[str]:
        return [outcome.name for outcome in self.outcomes if outcome.status == "unstyled"]

    @property
    def report(self) -> Report:
        return build_report(self.accumulator)


def analyze_corpus(
    corpus: str,
    *,
    rules: Sequence[Rule] | None = None,
    accumulator: FindingsAccumulator | None = None,
    label: str = "<inline>",
) -> CorpusAnalysis:
    """Run rules, element checks and suggestions over one corpus.

    Findings from rules come first, followed by element findings, and all of
    them are folded into ``accumulator`` when one is given.
    """
    active_rules = rules if rules is not None else default_rules()
    findings: list[Finding] = []
    for rule in active_rules:
        findings.extend(rule.evaluate(corpus))

    elements = check_elements(corpus)
    for element in elements:
        element_finding = element.to_finding()
        if element_finding is not None:
            findings.append(element_finding)

    if accumulator is not None:
        accumulator.extend(findings)

    return CorpusAnalysis(
        label=label,
        media_query_count=len(find_media_queries(corpus)),
        breakpoints=extract_breakpoints(corpus),
        findings=findings,
        elements=elements,
        suggestions=generate_suggestions(has_mobile_breakpoint(corpus)),
    )


def analyze_files(
    root: Path,
    files: Sequence[str] = DEFAULT_FILES,
    *,
    rules: Sequence[Rule] | None = None,
) -> AnalysisRun:
    """Analyze each existing file under ``root`` in the given order."""
    active_rules = list(rules) if rules is not None else default_rules()
    run = AnalysisRun()
    for name in files:
        path = root / name
        if not path.is_file():
            run.add_missing(name)
            continue

        corpus = extract_corpus(path.read_text(encoding="utf-8", errors="replace"))
        if corpus is None:
            run.add_unstyled(name)
            continue

        run.add_analysis(
            analyze_corpus(corpus, rules=active_rules, accumulator=run.accumulator, label=name)
        )
    return run
