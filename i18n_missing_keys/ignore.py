# -*- coding: utf-8 -*-

"""
Ignore list: known gaps that should not be reported.

The resource maps a key path to the locales in which its absence is
accepted::

    activerecord:
      - en
    help.legal: [da, it]

How a rule's path is matched against a key depends on the match mode:
``prefix`` (the path itself or anything nested under it), ``exact``, or
``pattern`` (the path is a regular expression searched in the key).
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Union

import yaml

from . import config
from .errors import ConfigurationError
from .tree import SEPARATOR

logger = logging.getLogger(__name__)

IgnoreResource = Union[None, str, os.PathLike, Mapping[str, Any]]


@dataclass(frozen=True)
class IgnoreRule:
    path: str
    locales: FrozenSet[str]
    mode: str = config.DEFAULT_MATCH_MODE

    def __post_init__(self):
        if self.mode not in config.MATCH_MODES:
            raise ConfigurationError(
                f"Unknown match mode '{self.mode}', expected one of {', '.join(config.MATCH_MODES)}"
            )
        if self.mode == config.MATCH_PATTERN:
            try:
                re.compile(self.path)
            except re.error as e:
                raise ConfigurationError(f"Invalid ignore pattern '{self.path}': {e}") from e

    def matches(self, key: str) -> bool:
        if self.mode == config.MATCH_EXACT:
            return key == self.path
        if self.mode == config.MATCH_PATTERN:
            return re.search(self.path, key) is not None
        return key == self.path or key.startswith(self.path + SEPARATOR)

    def tolerates(self, key: str, locale: str) -> bool:
        return locale in self.locales and self.matches(key)


def is_ignored(rules: Iterable[IgnoreRule], key: str, locale: str) -> bool:
    return any(rule.tolerates(key, locale) for rule in rules)


def _read(path: str) -> Optional[Any]:
    if not os.path.exists(path):
        logger.debug("No ignore list at %s", path)
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing failed in {path} - {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Not valid UTF-8: {path} - {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path} - {e}") from e


def _locales(path: str, value: Any) -> FrozenSet[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(
            f"Ignore entry '{path}' must list locale identifiers, got {value!r}"
        )
    return frozenset(value)


def load_ignore_rules(
    resource: IgnoreResource, mode: str = config.DEFAULT_MATCH_MODE
) -> FrozenSet[IgnoreRule]:
    """Build ignore rules from a YAML file or an already parsed mapping.

    Args:
        resource: Path of the ignore list, its parsed content, or None
        mode: How rule paths are matched against keys

    Returns:
        The rules; empty when the resource is absent or empty

    Raises:
        ConfigurationError: the resource exists but is not a mapping of key
            paths to locale lists
    """
    data = _read(os.fspath(resource)) if isinstance(resource, (str, os.PathLike)) else resource
    if data is None:
        return frozenset()
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Ignore list must be a mapping of key paths to locales, got {type(data).__name__}"
        )

    rules = set()
    for path, locales in data.items():
        if path is None or str(path) == "":
            raise ConfigurationError("Ignore list contains an empty key path")
        rules.add(IgnoreRule(str(path), _locales(str(path), locales), mode))
    logger.debug("Loaded %d ignore rules", len(rules))
    return frozenset(rules)
