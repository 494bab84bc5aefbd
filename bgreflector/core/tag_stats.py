# -*- coding: utf-8 -*-
"""
Tag Statistics
==============
Per-document occurrence counts, shown next to each editor. Counting only:
malformed markup is counted when it matches and ignored otherwise.
"""

import re
from typing import Dict, Mapping, Pattern, Tuple

from bgreflector.core.grammar import TagFamily, rule_for
from bgreflector.core.tokenizer import split_lines

TagStats = Dict[str, int]

_FAMILY_COUNTERS = (
    TagFamily.ICON,
    TagFamily.PARAM,
    TagFamily.ALIAS,
    TagFamily.PLAYER_NAME,
    TagFamily.CMS,
    TagFamily.FONT_STYLE_OPEN,
    TagFamily.FONT_STYLE_CLOSE,
    TagFamily.SPAN_COLOR_OPEN,
)

STAT_PATTERNS: Tuple[Tuple[str, Pattern], ...] = tuple(
    (family.value, rule_for(family).scan) for family in _FAMILY_COUNTERS
) + (
    ("{N}", re.compile(r"\{\d+\}")),
    ("<XXXXXXXX>", re.compile(r"<[0-9A-Fa-f]{8}>")),
)

STAT_LABELS: Tuple[str, ...] = tuple(label for label, _ in STAT_PATTERNS)


def empty_stats() -> TagStats:
    return {label: 0 for label in STAT_LABELS}


def count_stats(text: str) -> TagStats:
    stats = empty_stats()
    for line in split_lines(text):
        for label, pattern in STAT_PATTERNS:
            stats[label] += len(pattern.findall(line))
    return stats


def merge_stats(first: Mapping[str, int], second: Mapping[str, int]) -> TagStats:
    merged = empty_stats()
    for stats in (first, second):
        for label, count in stats.items():
            merged[label] = merged.get(label, 0) + count
    return merged


def format_stats(stats: Mapping[str, int], skip_zero: bool = True) -> str:
    """``Icon 2 · param 1`` style one-liner for the UI and CLI."""
    parts = [f"{label} {count}" for label, count in stats.items() if count or not skip_zero]
    return " · ".join(parts) if parts else "-"
