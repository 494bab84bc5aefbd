# -*- coding: utf-8 -*-
"""
Structural Validator
====================
Per-line markup checks for one document.

Checks (in this order for every line):
1. Paired-tag balance: FontStyle and color span open/close counts must be equal.
2. Unterminated placeholders: Icon, param, alias, PlayerName and cms must end
   with ``/>``.

Balance is a count check only. ``</FontStyle><FontStyle name="Bold">`` has
equal counts and passes; nesting order is not verified.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from bgreflector.core.grammar import (
    PAIRED_FAMILIES,
    SELF_CLOSING_FAMILIES,
    TagFamily,
    is_terminated,
    rule_for,
)
from bgreflector.core.tokenizer import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    line_number: int
    message: str
    tag: Optional[str] = None

    def __str__(self):
        text = f"Line {self.line_number}: {self.message}"
        if self.tag:
            text += f" → {self.tag}"
        return text


_PAIR_LABELS = {
    TagFamily.FONT_STYLE_OPEN: "<FontStyle> / </FontStyle>",
    TagFamily.SPAN_COLOR_OPEN: "<span color> / </>",
}


def check_paired_balance(line: str, line_number: int) -> List[Diagnostic]:
    """One diagnostic per paired family whose open/close counts differ on this line."""
    diagnostics = []
    for open_family, close_family in PAIRED_FAMILIES:
        opened = len(rule_for(open_family).scan.findall(line))
        closed = len(rule_for(close_family).scan.findall(line))
        if opened != closed:
            diagnostics.append(Diagnostic(
                line_number=line_number,
                message=(
                    f"{_PAIR_LABELS.get(open_family, open_family.value)} count mismatch "
                    f"(open {opened}, close {closed})"
                ),
            ))
    return diagnostics


def check_unterminated_tags(line: str, line_number: int) -> List[Diagnostic]:
    """One diagnostic per self-closing occurrence that does not end with ``/>``."""
    diagnostics = []
    for family in SELF_CLOSING_FAMILIES:
        for m in rule_for(family).scan.finditer(line):
            raw = m.group(0)
            if not is_terminated(raw):
                diagnostics.append(Diagnostic(
                    line_number=line_number,
                    message=f"Unterminated <{family.value}> tag",
                    tag=raw,
                ))
    return diagnostics


def validate(text: str) -> List[Diagnostic]:
    """Validate a whole document; diagnostics come in line order."""
    diagnostics: List[Diagnostic] = []
    for line_number, line in enumerate(split_lines(text), 1):
        diagnostics.extend(check_paired_balance(line, line_number))
        diagnostics.extend(check_unterminated_tags(line, line_number))
    if diagnostics:
        logger.debug("Structural validation found %d issue(s)", len(diagnostics))
    return diagnostics
