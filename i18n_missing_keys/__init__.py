# -*- coding: utf-8 -*-

"""
Audit locale catalogues for translation keys missing from some locales.
"""

from .backend import DictBackend, FileBackend, TranslationBackend
from .errors import BackendError, ConfigurationError, I18nAuditError
from .finder import MissingKeysFinder
from .ignore import IgnoreRule, load_ignore_rules
from .tree import Leaf, Node, build_tree, flatten, lookup

__version__ = "0.1.0"

__all__ = [
    "BackendError",
    "ConfigurationError",
    "DictBackend",
    "FileBackend",
    "I18nAuditError",
    "IgnoreRule",
    "Leaf",
    "MissingKeysFinder",
    "Node",
    "TranslationBackend",
    "build_tree",
    "flatten",
    "load_ignore_rules",
    "lookup",
]
