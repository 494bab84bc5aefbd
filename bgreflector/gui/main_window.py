# -*- coding: utf-8 -*-
"""
Main Window
==========

Side-by-side source/target editors with live tag diagnostics and previews.
Every edit re-runs the full QA pass and re-renders both previews.
"""

import sys
import logging
from typing import List, Optional

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QComboBox, QCheckBox, QPlainTextEdit, QTextBrowser,
    QListWidget,
)
from PyQt6.QtGui import QFont

from bgreflector.core.qa_pass import PairReport, check_pair
from bgreflector.core.renderer import RenderOptions, render_text
from bgreflector.core.tag_stats import format_stats
from bgreflector.core.validator import Diagnostic
from bgreflector.gui.preview_html import units_to_html
from bgreflector.utils.config import ConfigManager, GameProfile
from bgreflector.utils.logger import setup_logger


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        super().__init__()
        self.logger = logging.getLogger(__name__)

        self.config_manager = config_manager or ConfigManager()
        self.view_settings = self.config_manager.view_settings
        self.cross_check_families = self.config_manager.get_cross_check_families()
        self.last_report: Optional[PairReport] = None

        self.init_ui()
        self.refresh()

    def ui_text(self, key: str, **kwargs) -> str:
        return self.config_manager.get_ui_text(key, **kwargs)

    # ── layout ──

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(self.ui_text("app_title"))
        self.setMinimumSize(1000, 700)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        self.create_toolbar(layout)

        self.help_label = QLabel(self.ui_text("help_text"))
        self.help_label.setWordWrap(True)
        self.help_label.setStyleSheet("background-color:#e8f0fe; padding:6px; border-radius:4px;")
        layout.addWidget(self.help_label)

        self.create_main_content(layout)
        self.apply_view_settings()

        # Connect last so refresh() sees every widget
        self.source_edit.textChanged.connect(self.refresh)
        self.target_edit.textChanged.connect(self.refresh)

    def create_toolbar(self, layout: QVBoxLayout):
        row = QHBoxLayout()

        row.addWidget(QLabel(self.ui_text("game_label")))
        self.game_combo = QComboBox()
        self.game_combo.addItems([profile.value for profile in GameProfile])
        self.game_combo.setCurrentText(self.config_manager.check_settings.game_profile)
        self.game_combo.currentTextChanged.connect(self.on_game_changed)
        row.addWidget(self.game_combo)

        self.line_breaks_check = self._make_toggle(row, "show_line_breaks", self.view_settings.show_line_breaks)
        self.hidden_chars_check = self._make_toggle(row, "show_hidden_chars", self.view_settings.show_hidden_chars)
        self.width_rule_check = self._make_toggle(row, "show_char_width_rule", self.view_settings.show_char_width_rule)
        self.tag_stats_check = self._make_toggle(row, "show_tag_stats", self.view_settings.show_tag_stats)
        self.help_check = self._make_toggle(row, "show_help", self.view_settings.show_help)

        row.addStretch()

        self.copy_button = QPushButton(self.ui_text("copy_all"))
        self.copy_button.setStyleSheet("background-color:#1a73e8; color:white; padding:6px 14px;")
        self.copy_button.clicked.connect(self.copy_target)
        row.addWidget(self.copy_button)

        layout.addLayout(row)

    def _make_toggle(self, row: QHBoxLayout, key: str, checked: bool) -> QCheckBox:
        check = QCheckBox(self.ui_text(key))
        check.setChecked(checked)
        check.toggled.connect(self.on_view_toggled)
        row.addWidget(check)
        return check

    def create_main_content(self, layout: QVBoxLayout):
        grid = QGridLayout()
        mono = QFont("Consolas")
        mono.setStyleHint(QFont.StyleHint.Monospace)

        self.source_label = QLabel()
        self.target_label = QLabel()
        self.source_edit = QPlainTextEdit()
        self.target_edit = QPlainTextEdit()
        for edit in (self.source_edit, self.target_edit):
            edit.setFont(mono)
            edit.setMinimumHeight(160)

        self.source_stats_label = QLabel()
        self.target_stats_label = QLabel()
        self.source_errors = QListWidget()
        self.target_errors = QListWidget()
        for errors in (self.source_errors, self.target_errors):
            errors.setStyleSheet("color:#d93025;")
            errors.setMaximumHeight(120)

        self.source_preview = QTextBrowser()
        self.target_preview = QTextBrowser()

        grid.addWidget(self.source_label, 0, 0)
        grid.addWidget(self.target_label, 0, 1)
        grid.addWidget(self.source_edit, 1, 0)
        grid.addWidget(self.target_edit, 1, 1)
        grid.addWidget(self.source_stats_label, 2, 0)
        grid.addWidget(self.target_stats_label, 2, 1)
        grid.addWidget(self.source_errors, 3, 0)
        grid.addWidget(self.target_errors, 3, 1)
        grid.addWidget(QLabel(self.ui_text("source_preview")), 4, 0)
        grid.addWidget(QLabel(self.ui_text("target_preview")), 4, 1)
        grid.addWidget(self.source_preview, 5, 0)
        grid.addWidget(self.target_preview, 5, 1)

        layout.addLayout(grid)

    # ── state ──

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            show_hidden_chars=self.view_settings.show_hidden_chars,
            show_char_width_rule=self.view_settings.show_char_width_rule,
            show_line_breaks=self.view_settings.show_line_breaks,
        )

    def apply_view_settings(self):
        self.help_label.setVisible(self.view_settings.show_help)
        self.source_stats_label.setVisible(self.view_settings.show_tag_stats)
        self.target_stats_label.setVisible(self.view_settings.show_tag_stats)

    def on_view_toggled(self, _checked: bool = False):
        self.view_settings.show_line_breaks = self.line_breaks_check.isChecked()
        self.view_settings.show_hidden_chars = self.hidden_chars_check.isChecked()
        self.view_settings.show_char_width_rule = self.width_rule_check.isChecked()
        self.view_settings.show_tag_stats = self.tag_stats_check.isChecked()
        self.view_settings.show_help = self.help_check.isChecked()
        self.apply_view_settings()
        self.refresh()

    def on_game_changed(self, profile: str):
        # Stored only; every profile shares one grammar for now
        self.config_manager.check_settings.game_profile = profile
        self.logger.info(f"Game profile: {profile}")

    # ── refresh ──

    def refresh(self):
        source_text = self.source_edit.toPlainText()
        target_text = self.target_edit.toPlainText()

        report = check_pair(
            source_text, target_text,
            families=self.cross_check_families,
            suppress_truncated=self.config_manager.check_settings.suppress_truncated_tags,
        )
        self.last_report = report

        self.source_label.setText(self.ui_text("source_input", count=report.source.line_count))
        self.target_label.setText(self.ui_text("target_input", count=report.target.line_count))
        self.source_stats_label.setText(format_stats(report.source.stats))
        self.target_stats_label.setText(format_stats(report.target.stats))
        self._fill_errors(self.source_errors, "source_errors", report.source.diagnostics)
        self._fill_errors(self.target_errors, "target_errors", report.target.diagnostics)

        options = self.render_options()
        tables = self.config_manager.lookup_tables
        self.source_preview.setHtml(units_to_html(render_text(source_text, options, tables), tables))
        self.target_preview.setHtml(units_to_html(render_text(target_text, options, tables), tables))

    def _fill_errors(self, widget: QListWidget, title_key: str, diagnostics: List[Diagnostic]):
        widget.clear()
        if not diagnostics:
            return
        widget.addItem(self.ui_text(title_key))
        for diagnostic in diagnostics:
            widget.addItem(f"• {diagnostic}")

    def copy_target(self):
        QApplication.clipboard().setText(self.target_edit.toPlainText())
        self.statusBar().showMessage(self.ui_text("copied"), 2000)


def run_app() -> int:
    config_manager = ConfigManager()
    setup_logger(log_file=config_manager.app_settings.log_file)

    app = QApplication(sys.argv)
    app.setApplicationName("BG Reflector")

    window = MainWindow(config_manager)
    window.show()
    return app.exec()
