# -*- coding: utf-8 -*-
"""
BG Reflector Launcher
Cross-platform launcher for the PyQt6 window
"""

import sys

# Ensure stdout/stderr use UTF-8 where possible (Korean UI strings in logs)
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from bgreflector.gui.main_window import run_app


if __name__ == "__main__":
    sys.exit(run_app())
