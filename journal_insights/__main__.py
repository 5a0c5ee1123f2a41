"""Command line entry point: ``python -m journal_insights [JOURNAL_DIR]``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import SUPPORTED_BACKENDS, AnalysisConfig
from .errors import JournalInsightsError
from .workflows.analysis_pipeline import run

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="journal-insights",
        description="Generate topic reports from a directory of markdown journal entries.",
    )
    parser.add_argument("journal_dir", nargs="?", help="directory of *.md entries (default: $JOURNAL_DIR)")
    parser.add_argument("--backend", choices=SUPPORTED_BACKENDS, help="model backend")
    parser.add_argument("--language", help="language the reports are written in")
    parser.add_argument("--json", action="store_true", help="print the topic -> report mapping as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.language:
        overrides["report_language"] = args.language
    try:
        config = AnalysisConfig(**overrides)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        results = run(args.journal_dir, config)
    except JournalInsightsError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for topic, report in results.items():
            print(f"## {topic}\n\n{report.strip()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
