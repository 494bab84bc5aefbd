# -*- coding: utf-8 -*-
"""
Tag Grammar
===========
Single source of truth for the inline markup recognized by BG Reflector.

The tokenizer, the structural validator, the cross-document matcher, the
statistics counter and the renderer all read this table, so they always agree
on what a tag is.

Markup families:
    Self-closing placeholders:  <Icon .../>  <param .../>  <alias .../>
                                <PlayerName/>  <cms .../>
    Paired scopes:              <FontStyle name="Bold"> ... </FontStyle>
                                <span color="#FF0000"> ... </>
    Inline codes:               %Y %m %d %H %M  (date preview)
                                \\n \\r         (escaped line breaks)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Pattern, Tuple

from pyparsing import Regex, Suppress, Word, alphanums, printables, quoted_string, remove_quotes


class TagFamily(Enum):
    """Token families produced by the tokenizer."""
    ICON = "Icon"
    PARAM = "param"
    ALIAS = "alias"
    PLAYER_NAME = "PlayerName"
    CMS = "cms"
    FONT_STYLE_OPEN = "FontStyle"
    FONT_STYLE_CLOSE = "/FontStyle"
    SPAN_COLOR_OPEN = "span"
    SPAN_CLOSE = "</>"
    DATE_CODE = "DateCode"
    ESCAPE_BREAK = "EscapeBreak"
    LITERAL = "Literal"


@dataclass(frozen=True)
class TagRule:
    """
    One grammar entry.

    Attributes:
        family: Family this rule recognizes.
        recognizer: Tested against a whole ``<...>`` candidate.
        scan: Finds occurrences of the family inside a raw line (validator/stats).
        self_closing: Occurrence must end with ``/>``.
        closed_by: For paired opens, the family that closes the scope.
    """
    family: TagFamily
    recognizer: Pattern
    scan: Pattern
    self_closing: bool = False
    closed_by: Optional[TagFamily] = None

    def matches(self, raw: str) -> bool:
        return self.recognizer.match(raw) is not None


def _open_rule(family: TagFamily, name: str, **kwargs) -> TagRule:
    # "<Icon" ... up to the next ">", the next "<" or the end of the line (truncated tag)
    return TagRule(
        family=family,
        recognizer=re.compile(re.escape(f"<{name}")),
        scan=re.compile(re.escape(f"<{name}") + r"[^<>]*(?:>|(?=<)|$)"),
        **kwargs,
    )


# =============================================================================
# GRAMMAR TABLE (priority order: most specific first)
# =============================================================================
GRAMMAR: Tuple[TagRule, ...] = (
    TagRule(
        family=TagFamily.FONT_STYLE_CLOSE,
        recognizer=re.compile(r"</FontStyle\s*>$"),
        scan=re.compile(r"</FontStyle\s*>"),
    ),
    TagRule(
        family=TagFamily.SPAN_CLOSE,
        recognizer=re.compile(r"</>$"),
        scan=re.compile(r"</>"),
    ),
    TagRule(
        family=TagFamily.FONT_STYLE_OPEN,
        recognizer=re.compile(r"<FontStyle(?=[\s>])"),
        scan=re.compile(r"<FontStyle(?=[\s>])[^>]*>"),
        closed_by=TagFamily.FONT_STYLE_CLOSE,
    ),
    TagRule(
        family=TagFamily.SPAN_COLOR_OPEN,
        recognizer=re.compile(r"<span\s+color\s*=", re.IGNORECASE),
        scan=re.compile(r"<span\s+color\s*=[^>]*>", re.IGNORECASE),
        closed_by=TagFamily.SPAN_CLOSE,
    ),
    _open_rule(TagFamily.PLAYER_NAME, "PlayerName", self_closing=True),
    _open_rule(TagFamily.ICON, "Icon", self_closing=True),
    _open_rule(TagFamily.PARAM, "param", self_closing=True),
    _open_rule(TagFamily.ALIAS, "alias", self_closing=True),
    _open_rule(TagFamily.CMS, "cms", self_closing=True),
)

_RULES_BY_FAMILY: Dict[TagFamily, TagRule] = {rule.family: rule for rule in GRAMMAR}

SELF_CLOSING_FAMILIES: Tuple[TagFamily, ...] = (
    TagFamily.ICON,
    TagFamily.PARAM,
    TagFamily.ALIAS,
    TagFamily.PLAYER_NAME,
    TagFamily.CMS,
)

# open family -> close family, in validation order
PAIRED_FAMILIES: Tuple[Tuple[TagFamily, TagFamily], ...] = tuple(
    (rule.family, rule.closed_by) for rule in GRAMMAR if rule.closed_by is not None
)

CLOSING_FAMILIES = frozenset({TagFamily.FONT_STYLE_CLOSE, TagFamily.SPAN_CLOSE})

# Self-closing terminator, whitespace tolerated before "/" and before ">"
SELF_CLOSE_END_RE = re.compile(r"/\s*>$")

# Inline codes outside <...> markup
TAG_CANDIDATE_PATTERN = r"<[^<>]+>"
ESCAPE_BREAK_PATTERN = r"\\[nr]"
DATE_CODE_PATTERN = r"%[YmdHM]"


def rule_for(family: TagFamily) -> Optional[TagRule]:
    return _RULES_BY_FAMILY.get(family)


def family_by_name(name: str) -> Optional[TagFamily]:
    """Resolve ``"Icon"`` / ``"ICON"`` / ``"param"`` style names (config input)."""
    for family in TagFamily:
        if name == family.value or name.upper() == family.name:
            return family
    return None


def classify(raw: str) -> TagFamily:
    """Classify a ``<...>`` candidate. Unknown markup is ``LITERAL``."""
    for rule in GRAMMAR:
        if rule.matches(raw):
            return rule.family
    return TagFamily.LITERAL


def terminated_pattern(family: TagFamily) -> Pattern:
    """Regex for a complete occurrence of a self-closing family (``<Icon ... />``)."""
    return re.compile(re.escape(f"<{family.value}") + r"[^<>]*?/\s*>")


def is_terminated(raw: str) -> bool:
    return SELF_CLOSE_END_RE.search(raw) is not None


# =============================================================================
# ATTRIBUTE EXTRACTION (pyparsing)
# =============================================================================
_ATTR_NAME = Word(alphanums + "_-:")
# Quoted value with either quote style; a value whose closing quote got lost
# still yields its text; bare values are accepted as well.
_ATTR_VALUE = (
    quoted_string.copy().set_parse_action(remove_quotes)
    | Regex(r"[\"'][^\"'/>\s]+").set_parse_action(lambda t: t[0][1:])
    | Word(printables, exclude_chars="\"'/<>=")
)
_ATTRIBUTE = _ATTR_NAME("name") + Suppress("=") + _ATTR_VALUE("value")


def extract_attributes(raw: str) -> Dict[str, str]:
    """
    Extract ``key="value"`` / ``key='value'`` pairs from a raw tag.

    The first occurrence of a key wins. Never raises; malformed markup simply
    yields fewer (or no) attributes.
    """
    attributes: Dict[str, str] = {}
    if "=" not in raw:
        return attributes
    for tokens, _start, _end in _ATTRIBUTE.scan_string(raw):
        attributes.setdefault(tokens["name"], tokens["value"])
    return attributes
