# -*- coding: utf-8 -*-
"""
Cross-Document Tag Matcher
==========================
Checks that every placeholder tag of the source survives verbatim in the target.

The check is a membership test, not an alignment: a single target tag satisfies
every source occurrence with the same text, and tag order is ignored.

Truncated-tag policy
--------------------
When a source tag has no exact match, the target may still hold a damaged copy
of it (``<Icon KeyAction='X'>`` instead of ``<Icon KeyAction='X'/>``). With the
policy enabled (the default everywhere), a target occurrence that starts with
the source tag minus its last two characters suppresses the diagnostic. The
damaged copy is still reported by the target's structural validation, so this
trades missed cross-document reports for less duplicate noise. The
two-character cut is kept exactly as is.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Set

from bgreflector.core.grammar import SELF_CLOSING_FAMILIES, TagFamily, rule_for, terminated_pattern
from bgreflector.core.tokenizer import split_lines
from bgreflector.core.validator import Diagnostic

logger = logging.getLogger(__name__)

TRUNCATED_TAG_POLICY = "truncated_tag_prefix"
TRUNCATED_TAG_CUT = 2
# Default of every entry point (matcher, QA pass, CheckSettings, CLI)
SUPPRESS_TRUNCATED_DEFAULT = True


@dataclass(frozen=True)
class TagComparator:
    """
    Reusable source → target comparator keyed by a tag-extraction regex.

    Attributes:
        label: Name used in messages ("Icon").
        pattern: Extracts complete tags (full raw text including attributes).
        candidate_pattern: Extracts possibly-damaged occurrences in the target,
            used only by the truncated-tag policy.
        suppress_truncated: Enable the truncated-tag policy.
    """
    label: str
    pattern: Pattern
    candidate_pattern: Optional[Pattern] = None
    suppress_truncated: bool = SUPPRESS_TRUNCATED_DEFAULT

    @classmethod
    def for_family(cls, family: TagFamily, suppress_truncated: bool = SUPPRESS_TRUNCATED_DEFAULT) -> "TagComparator":
        rule = rule_for(family)
        return cls(
            label=family.value,
            pattern=terminated_pattern(family),
            candidate_pattern=rule.scan if rule else None,
            suppress_truncated=suppress_truncated,
        )

    def extract(self, text: str) -> Set[str]:
        found: Set[str] = set()
        for line in split_lines(text):
            found.update(m.group(0) for m in self.pattern.finditer(line))
        return found

    def _looks_truncated(self, tag: str, target_text: str) -> bool:
        if self.candidate_pattern is None:
            return False
        prefix = tag[:-TRUNCATED_TAG_CUT]
        for line in split_lines(target_text):
            for m in self.candidate_pattern.finditer(line):
                if m.group(0).startswith(prefix):
                    return True
        return False

    def compare(self, source_text: str, target_text: str) -> List[Diagnostic]:
        target_tags = self.extract(target_text)
        diagnostics: List[Diagnostic] = []

        for line_number, line in enumerate(split_lines(source_text), 1):
            for m in self.pattern.finditer(line):
                tag = m.group(0)
                if tag in target_tags:
                    continue
                if self.suppress_truncated and self._looks_truncated(tag, target_text):
                    logger.debug("Suppressed likely truncated %s tag: %s", self.label, tag)
                    continue
                diagnostics.append(Diagnostic(
                    line_number=line_number,
                    message=f"<{self.label}> tag missing or damaged in target",
                    tag=tag,
                ))
        return diagnostics


def compare_icon_tags(source_text: str, target_text: str,
                      suppress_truncated: bool = SUPPRESS_TRUNCATED_DEFAULT) -> List[Diagnostic]:
    """Source Icon tags missing verbatim from the target, at their source line."""
    return TagComparator.for_family(TagFamily.ICON, suppress_truncated).compare(source_text, target_text)


def comparators_for(families: Iterable[TagFamily],
                    suppress_truncated: bool = SUPPRESS_TRUNCATED_DEFAULT) -> List[TagComparator]:
    """One comparator per self-closing family; other families are skipped."""
    comparators = []
    for family in families:
        if family not in SELF_CLOSING_FAMILIES:
            logger.warning("Family %s is not a self-closing placeholder, skipping cross-check", family.value)
            continue
        comparators.append(TagComparator.for_family(family, suppress_truncated))
    return comparators
