# -*- coding: utf-8 -*-
"""
QA Pass
=======
One full check of a source/target pair, re-run on every edit.

Checks:
1. Structural validation of the source
2. Structural validation of the target
3. Cross-document placeholder matching (reported on the target side,
   at the source line numbers)
4. Tag statistics for both documents (display only)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from bgreflector.core.grammar import TagFamily
from bgreflector.core.tag_matcher import SUPPRESS_TRUNCATED_DEFAULT, TagComparator, comparators_for
from bgreflector.core.tag_stats import TagStats, count_stats, format_stats
from bgreflector.core.tokenizer import split_lines
from bgreflector.core.validator import Diagnostic, validate

logger = logging.getLogger(__name__)


# ────────────────────────── Data Classes ──────────────────────────

@dataclass
class DocumentReport:
    diagnostics: List[Diagnostic] = field(default_factory=list)
    stats: TagStats = field(default_factory=dict)
    line_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.diagnostics


@dataclass
class PairReport:
    source: DocumentReport = field(default_factory=DocumentReport)
    target: DocumentReport = field(default_factory=DocumentReport)
    missing_in_target: List[Diagnostic] = field(default_factory=list)

    @property
    def issues(self) -> int:
        return len(self.source.diagnostics) + len(self.target.diagnostics)

    @property
    def ok(self) -> bool:
        return self.issues == 0

    def summary(self) -> str:
        status = "PASS" if self.ok else "FAIL"
        return (
            f"Tag check: {status}\n"
            f"  Source: {self.source.line_count} lines, {len(self.source.diagnostics)} issue(s)\n"
            f"  Target: {self.target.line_count} lines, {len(self.target.diagnostics)} issue(s)"
            f" ({len(self.missing_in_target)} source tag(s) missing)"
        )

    def stats_summary(self) -> str:
        return (
            f"  Source tags: {format_stats(self.source.stats)}\n"
            f"  Target tags: {format_stats(self.target.stats)}"
        )


# ────────────────────────── Core Pass ──────────────────────────

def check_document(text: str) -> DocumentReport:
    return DocumentReport(
        diagnostics=validate(text),
        stats=count_stats(text),
        line_count=len(split_lines(text)),
    )


def check_pair(source_text: str, target_text: str,
               families: Iterable[TagFamily] = (TagFamily.ICON,),
               suppress_truncated: bool = SUPPRESS_TRUNCATED_DEFAULT,
               comparators: Optional[List[TagComparator]] = None) -> PairReport:
    """
    Run every check on a source/target pair.

    Args:
        families: Self-closing families cross-checked source → target.
        suppress_truncated: Truncated-tag policy of the matcher.
        comparators: Prebuilt comparators; overrides ``families``.
    """
    if comparators is None:
        comparators = comparators_for(families, suppress_truncated)

    report = PairReport(
        source=check_document(source_text),
        target=check_document(target_text),
    )
    for comparator in comparators:
        report.missing_in_target.extend(comparator.compare(source_text, target_text))
    report.target.diagnostics.extend(report.missing_in_target)

    logger.debug(
        "QA pass: %d source / %d target issue(s)",
        len(report.source.diagnostics), len(report.target.diagnostics),
    )
    return report
