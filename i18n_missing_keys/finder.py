# -*- coding: utf-8 -*-

"""
Missing translation key discovery.

``MissingKeysFinder`` flattens every locale's catalogue into dotted key
paths, takes the union of them all and reports, per key, the locales in which
that key has no translation. Gaps listed in the ignore rules are not
reported.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from . import report
from .backend import TranslationBackend
from .errors import BackendError, ConfigurationError
from .ignore import IgnoreRule, is_ignored
from .tree import Tree, build_tree, flatten, lookup

logger = logging.getLogger(__name__)

MissingKeys = Mapping[str, Tuple[str, ...]]


class MissingKeysFinder:
    """Compare the catalogues held by a translation backend.

    Args:
        backend: Initialized backend supplying locales and their catalogues
        ignore_rules: Gaps that must not be reported
        echo: Called with each summary line; summaries are dropped when None
    """

    def __init__(
        self,
        backend: TranslationBackend,
        ignore_rules: Iterable[IgnoreRule] = (),
        echo: Optional[Callable[[str], None]] = None,
    ):
        self.backend = backend
        self.ignore_rules = frozenset(ignore_rules)
        self.echo = echo

    def available_locales(self) -> List[str]:
        locales = list(self.backend.available_locales())
        if not locales:
            raise ConfigurationError("The translation backend declares no locales")
        return locales

    @property
    def reference_locale(self) -> str:
        return self.available_locales()[0]

    def tree(self, locale: str) -> Tree:
        try:
            translations = self.backend.translations(locale)
        except KeyError:
            raise BackendError(f"No translations loaded for locale '{locale}'") from None
        if translations is None:
            raise BackendError(f"No translations loaded for locale '{locale}'")
        return build_tree(translations)

    def _trees(self) -> Dict[str, Tree]:
        return {locale: self.tree(locale) for locale in self.available_locales()}

    @staticmethod
    def _union(trees: Iterable[Tree]) -> List[str]:
        keys: Set[str] = set()
        for tree in trees:
            keys.update(flatten(tree))
        return sorted(keys)

    def all_keys(self) -> List[str]:
        """Every dotted key defined by at least one locale, sorted."""
        return self._union(self._trees().values())

    def key_exists(self, key: str, locale: str) -> bool:
        return self._exists(self.tree(locale), key)

    @staticmethod
    def _exists(tree: Tree, key: str) -> bool:
        resolved = lookup(tree, key)
        return resolved is not None and resolved.is_present()

    def find_missing_keys(self) -> MissingKeys:
        """Map each incompletely translated key to the locales lacking it.

        Keys are in ascending order, locales in the backend's order.
        """
        trees = self._trees()
        locales = list(trees)
        all_keys = self._union(trees.values())

        self.output_available_locales(locales)
        self.output_unique_key_stats(all_keys)

        missing: Dict[str, Tuple[str, ...]] = {}
        for key in all_keys:
            lacking = tuple(
                locale
                for locale in locales
                if not self._exists(trees[locale], key)
                and not is_ignored(self.ignore_rules, key, locale)
            )
            if lacking:
                missing[key] = lacking

        logger.debug(
            "%d of %d keys missing from one or more of %d locales",
            len(missing),
            len(all_keys),
            len(locales),
        )
        result = MappingProxyType(missing)
        self.output_missing_keys(result)
        return result

    def _emit(self, text: str) -> None:
        if self.echo is not None:
            self.echo(text)

    def output_available_locales(self, locales: Optional[List[str]] = None) -> None:
        if locales is None:
            locales = self.available_locales()
        self._emit(report.format_available_locales(locales))

    def output_unique_key_stats(self, keys: List[str]) -> None:
        self._emit(report.format_unique_key_stats(keys))

    def output_missing_keys(self, missing: MissingKeys) -> None:
        self._emit(report.format_missing_keys(missing))
