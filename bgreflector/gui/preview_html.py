# -*- coding: utf-8 -*-
"""
Preview HTML
============
Converts presentation units into the Qt rich-text subset shown in the
preview panes.
"""

import html
from typing import Dict, List, Optional, Sequence

from bgreflector.core.lookup import LookupTables
from bgreflector.core.renderer import CharWidthClass, PresentationUnit, UnitKind

KEY_CAP_CSS = "background-color:#202124; color:#ffffff; font-weight:bold;"
BADGE_CSS = "background-color:#e8f0fe; color:#1967d2;"
PLAYER_NAME_CSS = "background-color:#fef7e0; color:#b06000; font-style:italic;"
DATE_CSS = "background-color:#e6f4ea; color:#137333;"
RAW_TAG_CSS = "color:#9aa0a6;"
LINE_BREAK_CSS = "color:#d93025;"

WIDTH_CLASS_CSS = {
    CharWidthClass.FULL_WIDTH_PUNCTUATION: "background-color:#dcfce7; color:#166534; font-weight:bold;",
    CharWidthClass.HALF_WIDTH_DIGIT: "background-color:#dbeafe; color:#1e40af;",
    CharWidthClass.HALF_WIDTH_BRACKET: "background-color:#f3e8ff; color:#6b21a8;",
    CharWidthClass.HALF_WIDTH_SYMBOL: "background-color:#fce7f3; color:#9d174d; font-weight:600;",
}

_KIND_CSS = {
    UnitKind.KEY_CAP: KEY_CAP_CSS,
    UnitKind.BADGE: BADGE_CSS,
    UnitKind.PLAYER_NAME: PLAYER_NAME_CSS,
    UnitKind.DATE: DATE_CSS,
    UnitKind.RAW_TAG: RAW_TAG_CSS,
    UnitKind.LINE_BREAK: LINE_BREAK_CSS,
}


def scope_css(unit: PresentationUnit, tables: LookupTables) -> str:
    """CSS for the FontStyle names and span color active on a unit."""
    props: Dict[str, str] = {}
    for name in unit.styles:
        style = tables.font_styles.get(name)
        if not style:
            continue
        if style.get("bold"):
            props["font-weight"] = "bold"
        if style.get("italic"):
            props["font-style"] = "italic"
        if style.get("color"):
            props["color"] = str(style["color"])
    if unit.color:
        props["color"] = unit.color
    return "".join(f"{key}:{value};" for key, value in props.items())


def _span(text: str, css: str, tooltip: Optional[str] = None) -> str:
    if not css and not tooltip:
        return text
    title = f' title="{html.escape(tooltip)}"' if tooltip else ""
    return f'<span style="{html.escape(css)}"{title}>{text}</span>'


def unit_to_html(unit: PresentationUnit, tables: LookupTables) -> str:
    text = html.escape(unit.text)
    css = scope_css(unit, tables)

    if unit.kind is UnitKind.LINE_BREAK:
        glyph = _span(text, LINE_BREAK_CSS) if text else ""
        return glyph + "<br/>"

    if unit.kind is UnitKind.TEXT:
        css += WIDTH_CLASS_CSS.get(unit.width_class, "")
        return _span(text, css, unit.tooltip or None)

    if unit.kind in (UnitKind.KEY_CAP, UnitKind.BADGE, UnitKind.PLAYER_NAME, UnitKind.DATE):
        text = f"&nbsp;{text}&nbsp;"
    return _span(text, css + _KIND_CSS.get(unit.kind, ""), unit.tooltip or None)


def units_to_html(lines: Sequence[Sequence[PresentationUnit]], tables: Optional[LookupTables] = None) -> str:
    tables = tables or LookupTables()
    rendered: List[str] = ["".join(unit_to_html(unit, tables) for unit in line) for line in lines]
    return '<div style="white-space:pre-wrap;">' + "<br/>".join(rendered) + "</div>"
