# -*- coding: utf-8 -*-
"""
Core Constants
==============
Built-in lookup data for the BG Reflector core.
These values are defaults only: a ``lookup_tables.json`` file next to the
application replaces any of them at start without code changes.
"""

# ============================================================================
# ICON KEY CAPS
# ============================================================================

# KeyAction / UIKeySpecificIconId -> key-cap label shown in the preview
ICON_KEY_LABELS = {
    "WeaponSkill_Slot_Basic": "Z",
    "WeaponSkill_Slot_Smite": "X",
    "WeaponSkill_Slot_Dodge": "C",
    "WeaponSkill_Slot_Defence": "V",
    "101": "Z",
    "103": "X",
}

UNRESOLVED_LABEL = "?"

# ============================================================================
# DATE PREVIEW
# ============================================================================

# Fixed sample date, not the real clock
DATE_SUBSTITUTIONS = {
    "%Y": "2025",
    "%m": "06",
    "%d": "15",
    "%H": "14",
    "%M": "30",
}

# ============================================================================
# INLINE STYLES
# ============================================================================

# FontStyle name -> display properties understood by the preview
FONT_STYLES = {
    "Bold": {"bold": True},
    "Red": {"color": "#e53935"},
    "Grade_Rare": {"color": "#1e88e5", "bold": True},
    "Grade_Epic": {"color": "#8e24aa", "bold": True},
    "Grade_Legendary": {"color": "#fb8c00", "bold": True},
}

# Badge decoration per placeholder family ("{name}" is replaced)
BADGE_FORMATS = {
    "param": "{{{name}}}",
    "alias": "[{name}]",
    "cms": "「{name}」",
}

PLAYER_NAME_LABEL = "Player"

# ============================================================================
# HIDDEN CHARACTERS & WIDTH RULES
# ============================================================================

HIDDEN_CHAR_GLYPHS = {
    " ": "·",   # middle dot
    "\t": "→",  # rightwards arrow
    "\r": "␍",  # symbol for carriage return
    "\n": "↵",  # downwards arrow with corner leftwards
}

LINE_BREAK_GLYPH = "↵"

FULL_WIDTH_PUNCTUATION = "、。！？：；「」『』【】"
HALF_WIDTH_DIGITS = "0123456789"
HALF_WIDTH_BRACKETS = "[](){}〈〉《》〔〕"
HALF_WIDTH_SYMBOLS = "+-"
