# -*- coding: utf-8 -*-
"""
BG Reflector CLI Main Module

Batch variant of the editor check: validates a source/target file pair and
prints the same diagnostics the GUI lists under the editors.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from bgreflector.core.grammar import family_by_name
from bgreflector.core.qa_pass import PairReport, check_pair
from bgreflector.utils.config import ConfigManager
from bgreflector.utils.encoding import read_text_safely
from bgreflector.version import VERSION

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_BAD_INPUT = 2


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def configure_console():
    """Ensure stdout/stderr use UTF-8 where possible (diagnostics print • and →)."""
    for stream in (sys.stdout, sys.stderr):
        if not hasattr(stream, "reconfigure"):
            continue
        try:
            stream.reconfigure(encoding="utf-8", errors="replace")
        except (ValueError, OSError) as e:
            logger.debug(f"Could not reconfigure console stream: {e}")


def print_report(report: PairReport, show_stats: bool = False):
    print("\n" + "=" * 60)
    print(report.summary())
    if show_stats:
        print(report.stats_summary())
    print("=" * 60)

    for title, document in (("Source", report.source), ("Target", report.target)):
        if not document.diagnostics:
            continue
        print(f"\n{title}:")
        for diagnostic in document.diagnostics:
            print(f"  • {diagnostic}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"BG Reflector V{VERSION} tag checker")
    parser.add_argument("source", help="Source-language text file")
    parser.add_argument("target", help="Translated text file")
    parser.add_argument("--config", default="config.json", help="Path to JSON configuration file")
    parser.add_argument("--family", "-f", action="append", dest="families",
                        help="Placeholder family to cross-check (repeatable, default from config: Icon)")
    parser.add_argument("--no-truncated-policy", action="store_true",
                        help="Report source tags even when a truncated copy exists in the target")
    parser.add_argument("--stats", action="store_true", help="Print tag statistics")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_console()
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    config_manager = ConfigManager(args.config)

    families = config_manager.get_cross_check_families()
    if args.families:
        families = []
        for name in args.families:
            family = family_by_name(name)
            if family is None:
                print(f"Error: Unknown tag family: {name}")
                return EXIT_BAD_INPUT
            families.append(family)

    texts = []
    for path in (args.source, args.target):
        text = read_text_safely(Path(path))
        if text is None:
            print(f"Error: Cannot read file: {path}")
            return EXIT_BAD_INPUT
        texts.append(text)

    suppress_truncated = config_manager.check_settings.suppress_truncated_tags and not args.no_truncated_policy
    report = check_pair(texts[0], texts[1], families=families, suppress_truncated=suppress_truncated)
    print_report(report, show_stats=args.stats)

    return EXIT_OK if report.ok else EXIT_ISSUES


if __name__ == "__main__":
    sys.exit(main())
