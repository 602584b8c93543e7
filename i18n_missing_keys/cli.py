#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Report translation keys missing from one or more locales.
Usage: i18n-missing-keys [--locales-dir DIR] [--ignore-file FILE] [--reference LOCALE]

Example:
i18n-missing-keys --locales-dir config/locales --reference en

Output:
- The available locales and the number of unique keys
- Every key missing from at least one locale, with the locales lacking it

The exit code is 0 whenever the report completes, missing keys or not.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config, report
from .backend import FileBackend
from .errors import I18nAuditError
from .finder import MissingKeysFinder
from .ignore import load_ignore_rules

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-missing-keys",
        description="Find translation keys missing from one or more locales.",
    )
    parser.add_argument(
        "--locales-dir",
        default=None,
        help=f"Directory of locale files (default: ${config.LOCALES_DIR_ENV} or {config.DEFAULT_LOCALES_DIR})",
    )
    parser.add_argument(
        "--ignore-file",
        default=None,
        help=f"YAML ignore list (default: ${config.IGNORE_FILE_ENV} or {config.DEFAULT_IGNORE_FILE})",
    )
    parser.add_argument("--reference", default=None, help="Reference locale, listed first")
    parser.add_argument(
        "--match",
        choices=config.MATCH_MODES,
        default=config.DEFAULT_MATCH_MODE,
        help="How ignore list paths are matched against keys",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    locales_dir = args.locales_dir or config.locales_dir()
    ignore_file = args.ignore_file or config.ignore_file()
    logger.debug("Locales from %s, ignore list %s", locales_dir, ignore_file)

    try:
        backend = FileBackend(locales_dir, reference_locale=args.reference).load()
        rules = load_ignore_rules(ignore_file, mode=args.match)
        finder = MissingKeysFinder(
            backend, rules, echo=print if args.format == "text" else None
        )
        missing = finder.find_missing_keys()
    except I18nAuditError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.format == "json":
        print(report.format_json(missing))
    return 0


if __name__ == "__main__":
    sys.exit(main())
