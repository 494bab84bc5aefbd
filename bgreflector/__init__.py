"""
BG Reflector
============

Localization QA for game text: markup tokenizing, tag validation and preview.
"""

from .version import VERSION

__all__ = ['VERSION']
