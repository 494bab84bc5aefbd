"""
Configuration Manager
====================

Manages application settings, lookup tables and UI strings.

``config.json`` is read at start and never written: view toggles live only
for the running session.
"""

import json
import logging
import locale
import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

from bgreflector.core.grammar import TagFamily, family_by_name
from bgreflector.core.lookup import LookupTables
from bgreflector.core.tag_matcher import SUPPRESS_TRUNCATED_DEFAULT


class GameProfile(Enum):
    """Supported games (selector value, grammar is shared)."""
    ARCHEAGE = "ArcheAge"
    MIR4 = "MIR4"


class Language(Enum):
    """Supported UI languages."""
    KOREAN = "ko"
    ENGLISH = "en"


def detect_system_language() -> str:
    """Detect the system language and return the matching UI language code."""
    try:
        system_locale = locale.getlocale()[0]
        if system_locale and system_locale.lower().startswith(("ko", "korean")):
            return 'ko'
    except ValueError:
        pass

    for env_var in ['LANG', 'LANGUAGE', 'LC_ALL', 'LC_MESSAGES']:
        env_value = os.environ.get(env_var, '').lower()
        if env_value.startswith('ko'):
            return 'ko'

    return 'en'


@dataclass
class CheckSettings:
    """Validation-related settings."""
    game_profile: str = GameProfile.ARCHEAGE.value
    # Self-closing families cross-checked source -> target
    cross_check_families: List[str] = field(default_factory=lambda: ["Icon"])
    # Truncated-tag policy of the cross-document matcher
    suppress_truncated_tags: bool = SUPPRESS_TRUNCATED_DEFAULT


@dataclass
class ViewSettings:
    """Preview toggles (session only)."""
    show_line_breaks: bool = False
    show_hidden_chars: bool = False
    show_char_width_rule: bool = False
    show_tag_stats: bool = False
    show_help: bool = True


@dataclass
class AppSettings:
    """General application settings."""
    ui_language: str = ""  # Will be auto-detected if empty
    lookup_tables_file: str = "lookup_tables.json"
    log_file: str = "bgreflector.log"


class ConfigManager:
    """Loads configuration and lookup tables; serves UI strings."""

    def __init__(self, config_file: str = "config.json"):
        self.logger = logging.getLogger(__name__)
        self.config_file = Path(config_file)

        # Default configuration
        self.check_settings = CheckSettings()
        self.view_settings = ViewSettings()
        self.app_settings = AppSettings()

        self._language_data = self._get_fallback_translations()

        self.load_config()

        if not self.app_settings.ui_language:
            self.app_settings.ui_language = detect_system_language()

        self.lookup_tables = self.load_lookup_tables(self.app_settings.lookup_tables_file)

    def _filter_config_data(self, dataclass_type, data):
        """Filter dictionary keys to match dataclass fields to avoid __init__ errors."""
        if not isinstance(data, dict):
            return {}
        valid_fields = {f.name for f in fields(dataclass_type)}
        return {k: v for k, v in data.items() if k in valid_fields}

    def _sanitize_settings(self, settings):
        """Reset fields whose JSON value has the wrong type to their defaults."""
        defaults = type(settings)()
        for f in fields(settings):
            value = getattr(settings, f.name)
            expected = type(getattr(defaults, f.name))
            # A single family name is accepted where a list is expected
            if isinstance(value, expected) or (expected is list and isinstance(value, str)):
                continue
            self.logger.warning(
                f"Config value {f.name}={value!r} should be {expected.__name__}, using default"
            )
            setattr(settings, f.name, getattr(defaults, f.name))
        return settings

    def _load_json_file(self, filename: str, default):
        """Load a JSON file; return default on error."""
        try:
            path = Path(filename)
            if path.exists():
                with open(path, 'r', encoding='utf-8') as f:
                    return json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Could not load JSON file {filename}: {e}")
        return default

    def load_config(self) -> bool:
        """Load configuration from file. Missing file keeps the defaults."""
        data = self._load_json_file(str(self.config_file), default=None)
        if data is None:
            self.logger.debug(f"No configuration at {self.config_file}, using defaults")
            return False
        if not isinstance(data, dict):
            self.logger.warning(f"Configuration {self.config_file} is not a JSON object, using defaults")
            return False

        self.check_settings = self._sanitize_settings(CheckSettings(
            **self._filter_config_data(CheckSettings, data.get('check_settings', {}))
        ))
        self.app_settings = self._sanitize_settings(AppSettings(
            **self._filter_config_data(AppSettings, data.get('app_settings', {}))
        ))
        self.logger.info("Configuration loaded successfully")
        return True

    def load_lookup_tables(self, filename: str) -> LookupTables:
        """Lookup tables from ``filename`` merged over the built-in defaults."""
        data = self._load_json_file(filename, default=None)
        if data is None:
            return LookupTables()
        self.logger.info(f"Loaded lookup tables from {filename}")
        return LookupTables.from_mapping(data)

    def get_cross_check_families(self) -> List[TagFamily]:
        names = self.check_settings.cross_check_families
        if isinstance(names, str):
            names = [names]
        families = []
        for name in names:
            family = family_by_name(str(name))
            if family is None:
                self.logger.warning(f"Unknown tag family in cross_check_families: {name}")
                continue
            families.append(family)
        return families

    def get_ui_text(self, key: str, default: str = None, **kwargs) -> str:
        """Get UI text for the configured language (English fallback)."""
        lang = self.app_settings.ui_language or Language.ENGLISH.value
        text = self._language_data.get(lang, {}).get(key)
        if text is None:
            text = self._language_data[Language.ENGLISH.value].get(key, default if default is not None else key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return text
        return text

    def _get_fallback_translations(self) -> Dict[str, Dict[str, Any]]:
        """Embedded UI translations."""
        return {
            'ko': {
                'app_title': 'BG Reflector',
                'game_label': '게임',
                'show_line_breaks': '줄바꿈 표시',
                'show_hidden_chars': '공백 문자 표시',
                'show_char_width_rule': 'Character Width Rules 적용',
                'show_tag_stats': '태그 통계',
                'show_help': '도움말',
                'copy_all': '전체 복사',
                'copied': '타겟 텍스트를 복사했습니다.',
                'source_input': '🟥 소스 입력 ({count}줄)',
                'target_input': '🟦 타겟 입력 ({count}줄)',
                'source_errors': '소스 유효성 오류:',
                'target_errors': '타겟 유효성 오류:',
                'source_preview': '소스 미리보기',
                'target_preview': '타겟 미리보기',
                'help_text': '왼쪽에 소스 텍스트, 오른쪽에 번역 텍스트를 붙여 넣으세요. '
                             '태그가 누락되거나 닫히지 않으면 아래에 표시됩니다.',
            },
            'en': {
                'app_title': 'BG Reflector',
                'game_label': 'Game',
                'show_line_breaks': 'Show line breaks',
                'show_hidden_chars': 'Show hidden characters',
                'show_char_width_rule': 'Apply character width rules',
                'show_tag_stats': 'Tag statistics',
                'show_help': 'Help',
                'copy_all': 'Copy all',
                'copied': 'Target text copied.',
                'source_input': 'Source ({count} lines)',
                'target_input': 'Target ({count} lines)',
                'source_errors': 'Source issues:',
                'target_errors': 'Target issues:',
                'source_preview': 'Source preview',
                'target_preview': 'Target preview',
                'help_text': 'Paste the source text on the left and the translation on the right. '
                             'Missing or unterminated tags are listed below the editors.',
            },
        }
