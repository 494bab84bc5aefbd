# -*- coding: utf-8 -*-
"""
Lookup Tables
=============
Replaceable display data used by the renderer (icon key caps, sample date,
inline styles, badge formats). Defaults come from ``core.constants``; the
configuration layer can overlay a JSON document on top of them.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from bgreflector.core import constants

logger = logging.getLogger(__name__)


@dataclass
class LookupTables:
    icon_keys: Dict[str, str] = field(default_factory=lambda: dict(constants.ICON_KEY_LABELS))
    date_substitutions: Dict[str, str] = field(default_factory=lambda: dict(constants.DATE_SUBSTITUTIONS))
    font_styles: Dict[str, Dict[str, Any]] = field(
        default_factory=lambda: {name: dict(props) for name, props in constants.FONT_STYLES.items()}
    )
    badge_formats: Dict[str, str] = field(default_factory=lambda: dict(constants.BADGE_FORMATS))
    player_name_label: str = constants.PLAYER_NAME_LABEL

    def icon_label(self, key: str) -> str:
        return self.icon_keys.get(key, constants.UNRESOLVED_LABEL)

    def badge_text(self, family_name: str, name: str) -> str:
        fmt = self.badge_formats.get(family_name, "{name}")
        try:
            return fmt.format(name=name)
        except (KeyError, IndexError, ValueError):
            # Broken format string from a user table
            return name

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LookupTables":
        """
        Build tables from a JSON-like mapping.

        Dictionary tables are merged over the defaults (so a file may add one
        icon key without restating the rest); scalar entries replace them.
        Unknown keys and values of the wrong type are ignored.
        """
        tables = cls()
        if not isinstance(data, Mapping):
            logger.warning("Lookup tables must be a JSON object, using defaults")
            return tables

        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            current = getattr(tables, f.name)
            if isinstance(current, dict):
                if isinstance(value, dict):
                    current.update(cls._valid_entries(f.name, value))
                else:
                    logger.warning(f"Lookup table '{f.name}' must be an object, ignoring")
            elif isinstance(value, str):
                setattr(tables, f.name, value)
            else:
                logger.warning(f"Lookup entry '{f.name}' must be a string, ignoring")
        return tables

    @staticmethod
    def _valid_entries(table: str, entries: Mapping[str, Any]) -> Dict[str, Any]:
        # font_styles maps to property objects, every other table to strings
        expected = dict if table == "font_styles" else str
        valid = {}
        for key, value in entries.items():
            if isinstance(value, expected):
                valid[key] = value
            else:
                logger.warning(f"Lookup table '{table}' entry '{key}' has the wrong type, ignoring")
        return valid
