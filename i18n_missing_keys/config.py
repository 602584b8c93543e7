# -*- coding: utf-8 -*-

"""
Default locations and settings, overridable from the environment.
"""

import os

DEFAULT_LOCALES_DIR = os.path.join("config", "locales")
DEFAULT_IGNORE_FILE = os.path.join("config", "ignore_missing_keys.yml")

MATCH_PREFIX = "prefix"
MATCH_EXACT = "exact"
MATCH_PATTERN = "pattern"
MATCH_MODES = (MATCH_PREFIX, MATCH_EXACT, MATCH_PATTERN)
DEFAULT_MATCH_MODE = MATCH_PREFIX

LOCALE_EXTENSIONS = (".yml", ".yaml", ".json")

LOCALES_DIR_ENV = "I18N_LOCALES_DIR"
IGNORE_FILE_ENV = "I18N_IGNORE_FILE"


def locales_dir() -> str:
    return os.environ.get(LOCALES_DIR_ENV) or DEFAULT_LOCALES_DIR


def ignore_file() -> str:
    return os.environ.get(IGNORE_FILE_ENV) or DEFAULT_IGNORE_FILE
