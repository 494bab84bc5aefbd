# -*- coding: utf-8 -*-
"""
Token Renderer
==============
Turns tokens into presentation units for the preview panes.

The renderer is framework-free: it only decides *what* is shown (labels,
substitutions, active styles, width classes). The GUI layer decides *how*.

State per line:
    StyleStack: FontStyle names and span colors opened so far on the line.
    It starts empty for every line, matching the validator's same-line
    balance rule.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from bgreflector.core import constants
from bgreflector.core.grammar import TagFamily
from bgreflector.core.lookup import LookupTables
from bgreflector.core.tokenizer import LiteralRun, Tag, Token, split_lines, tokenize


class UnitKind(Enum):
    TEXT = "text"
    KEY_CAP = "key_cap"
    BADGE = "badge"
    PLAYER_NAME = "player_name"
    DATE = "date"
    LINE_BREAK = "line_break"
    RAW_TAG = "raw_tag"


class CharWidthClass(Enum):
    NONE = "none"
    FULL_WIDTH_PUNCTUATION = "full_width_punctuation"
    HALF_WIDTH_DIGIT = "half_width_digit"
    HALF_WIDTH_BRACKET = "half_width_bracket"
    HALF_WIDTH_SYMBOL = "half_width_symbol"


WIDTH_CLASS_TOOLTIPS = {
    CharWidthClass.NONE: "",
    CharWidthClass.FULL_WIDTH_PUNCTUATION: "Full-width punctuation",
    CharWidthClass.HALF_WIDTH_DIGIT: "Half-width digit",
    CharWidthClass.HALF_WIDTH_BRACKET: "Half-width bracket",
    CharWidthClass.HALF_WIDTH_SYMBOL: "Half-width symbol",
}

_HIDDEN_CHAR_TABLE = str.maketrans(constants.HIDDEN_CHAR_GLYPHS)


@dataclass(frozen=True)
class RenderOptions:
    show_hidden_chars: bool = False
    show_char_width_rule: bool = False
    show_line_breaks: bool = False


@dataclass(frozen=True)
class PresentationUnit:
    kind: UnitKind
    text: str
    styles: Tuple[str, ...] = ()
    color: Optional[str] = None
    width_class: CharWidthClass = CharWidthClass.NONE
    tooltip: str = ""


def classify_char_width(char: str) -> CharWidthClass:
    if char in constants.FULL_WIDTH_PUNCTUATION:
        return CharWidthClass.FULL_WIDTH_PUNCTUATION
    if char in constants.HALF_WIDTH_DIGITS:
        return CharWidthClass.HALF_WIDTH_DIGIT
    if char in constants.HALF_WIDTH_BRACKETS:
        return CharWidthClass.HALF_WIDTH_BRACKET
    if char in constants.HALF_WIDTH_SYMBOLS:
        return CharWidthClass.HALF_WIDTH_SYMBOL
    return CharWidthClass.NONE


def reveal_hidden_chars(text: str) -> str:
    return text.translate(_HIDDEN_CHAR_TABLE)


class StyleStack:
    """Active inline styles for one line."""

    def __init__(self):
        self._styles: List[str] = []
        self._colors: List[str] = []

    def push_style(self, name: str):
        self._styles.append(name)

    def pop_style(self):
        # A stray close has nothing to pop; the validator reports it
        if self._styles:
            self._styles.pop()

    def push_color(self, color: str):
        self._colors.append(color)

    def pop_color(self):
        if self._colors:
            self._colors.pop()

    def reset(self):
        self._styles.clear()
        self._colors.clear()

    @property
    def styles(self) -> Tuple[str, ...]:
        return tuple(self._styles)

    @property
    def color(self) -> Optional[str]:
        return self._colors[-1] if self._colors else None


def _first_attribute(tag: Tag, *names: str) -> Optional[str]:
    for name in names:
        value = tag.attributes.get(name)
        if value:
            return value
    return None


def icon_label(tag: Tag, tables: LookupTables) -> str:
    """KeyAction wins when present (even if unknown); UIKeySpecificIconId otherwise."""
    key_action = tag.attributes.get("KeyAction")
    if key_action is not None:
        return tables.icon_label(key_action)
    icon_id = tag.attributes.get("UIKeySpecificIconId")
    if icon_id is not None:
        return tables.icon_label(icon_id)
    return constants.UNRESOLVED_LABEL


class TokenRenderer:
    """Renders the tokens of one line at a time."""

    def __init__(self, options: Optional[RenderOptions] = None, tables: Optional[LookupTables] = None):
        self.options = options or RenderOptions()
        self.tables = tables or LookupTables()
        self.stack = StyleStack()

    def _unit(self, kind: UnitKind, text: str, **kwargs) -> PresentationUnit:
        return PresentationUnit(kind, text, styles=self.stack.styles, color=self.stack.color, **kwargs)

    def render_line(self, tokens: Sequence[Token]) -> List[PresentationUnit]:
        self.stack.reset()
        units: List[PresentationUnit] = []
        for token in tokens:
            if isinstance(token, LiteralRun):
                units.extend(self._render_literal(token.text))
            else:
                units.extend(self._render_tag(token))
        return units

    def _render_literal(self, text: str) -> List[PresentationUnit]:
        if self.options.show_hidden_chars:
            text = reveal_hidden_chars(text)
        if not self.options.show_char_width_rule:
            return [self._unit(UnitKind.TEXT, text)]

        units = []
        for char in text:
            width_class = classify_char_width(char)
            units.append(self._unit(
                UnitKind.TEXT, char,
                width_class=width_class,
                tooltip=WIDTH_CLASS_TOOLTIPS[width_class],
            ))
        return units

    def _render_tag(self, tag: Tag) -> List[PresentationUnit]:
        family = tag.family

        if family is TagFamily.ICON:
            return [self._unit(UnitKind.KEY_CAP, icon_label(tag, self.tables), tooltip="Icon Key")]

        if family is TagFamily.DATE_CODE:
            value = self.tables.date_substitutions.get(tag.raw, constants.UNRESOLVED_LABEL)
            return [self._unit(UnitKind.DATE, value, tooltip=tag.raw)]

        if family in (TagFamily.PARAM, TagFamily.ALIAS, TagFamily.CMS):
            name = _first_attribute(tag, "Name", "name") or constants.UNRESOLVED_LABEL
            return [self._unit(UnitKind.BADGE, self.tables.badge_text(family.value, name), tooltip=tag.raw)]

        if family is TagFamily.PLAYER_NAME:
            return [self._unit(UnitKind.PLAYER_NAME, self.tables.player_name_label, tooltip=tag.raw)]

        if family is TagFamily.FONT_STYLE_OPEN:
            name = _first_attribute(tag, "name", "Name", "style", "Style")
            if name is None and tag.attributes:
                name = next(iter(tag.attributes.values()))
            self.stack.push_style(name or constants.UNRESOLVED_LABEL)
            return []

        if family is TagFamily.FONT_STYLE_CLOSE:
            self.stack.pop_style()
            return []

        if family is TagFamily.SPAN_COLOR_OPEN:
            self.stack.push_color(_first_attribute(tag, "color", "Color") or "")
            return []

        if family is TagFamily.SPAN_CLOSE:
            self.stack.pop_color()
            return []

        if family is TagFamily.ESCAPE_BREAK:
            glyph = constants.LINE_BREAK_GLYPH if self.options.show_line_breaks else ""
            return [self._unit(UnitKind.LINE_BREAK, glyph, tooltip=tag.raw)]

        return [self._unit(UnitKind.RAW_TAG, tag.raw)]


def render(tokens: Sequence[Token], options: Optional[RenderOptions] = None,
           tables: Optional[LookupTables] = None) -> List[PresentationUnit]:
    """Render the tokens of a single line."""
    return TokenRenderer(options, tables).render_line(tokens)


def render_text(text: str, options: Optional[RenderOptions] = None,
                tables: Optional[LookupTables] = None) -> List[List[PresentationUnit]]:
    """Render a whole document, one unit list per line."""
    renderer = TokenRenderer(options, tables)
    return [renderer.render_line(tokenize(line)) for line in split_lines(text)]


def visible_text(units: Sequence[PresentationUnit]) -> str:
    return "".join(unit.text for unit in units)
