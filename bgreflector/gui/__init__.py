"""
GUI module for BG Reflector
===========================
"""

from .main_window import MainWindow, run_app

__all__ = [
    'MainWindow',
    'run_app',
]
