# -*- coding: utf-8 -*-

"""
Translation backends.

The finder only needs two things from a backend: the locales it knows, in a
stable order with the reference locale first, and the nested mapping for one
of those locales. ``DictBackend`` holds catalogues in memory, ``FileBackend``
reads a directory of YAML/JSON catalogue files.
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

import yaml

from . import config
from .errors import BackendError, ConfigurationError

logger = logging.getLogger(__name__)


class TranslationBackend(Protocol):
    def available_locales(self) -> Sequence[str]:
        ...

    def translations(self, locale: str) -> Mapping[str, Any]:
        ...


class DictBackend:
    """Backend over an in-memory ``{locale: catalogue}`` mapping.

    Locales are reported in the mapping's insertion order.
    """

    def __init__(self, translations: Mapping[Any, Mapping[str, Any]]):
        self._translations = {str(locale): tree for locale, tree in translations.items()}

    def available_locales(self) -> List[str]:
        return list(self._translations)

    def translations(self, locale: str) -> Mapping[str, Any]:
        try:
            return self._translations[locale]
        except KeyError:
            raise BackendError(f"No translations loaded for locale '{locale}'") from None


def load_catalogue(path: str) -> Mapping[str, Any]:
    """Read one YAML or JSON catalogue file.

    Args:
        path: Path of the ``.yml``/``.yaml``/``.json`` file

    Returns:
        The parsed mapping, ``{}`` for an empty document
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.endswith(".json"):
                data = json.load(f)
            else:
                # Use safe_load to prevent arbitrary code execution
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"File not found - {e.filename}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"JSON parsing failed in {path} - {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing failed in {path} - {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Not valid UTF-8: {path} - {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path} - {e}") from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"{path} must contain a mapping of translations, got {type(data).__name__}"
        )
    return data


# YAML 1.1 reads these bare words as booleans, ``no:`` (Norwegian) among them
YAML_BOOLEANS = {
    True: {"y", "yes", "true", "on"},
    False: {"n", "no", "false", "off"},
}


def _is_locale_key(key: Any, locale: str) -> bool:
    if isinstance(key, bool):
        return locale.lower() in YAML_BOOLEANS[key]
    return str(key) == locale


class FileBackend:
    """Backend reading one catalogue file per locale from a directory.

    The locale is the file stem (``locales/da.yml`` holds ``da``). Rails-style
    files that nest everything under the locale name (``da: {...}``) are
    unwrapped. Locales are ordered by name, with ``reference_locale`` first
    when given.
    """

    def __init__(self, directory: str, reference_locale: Optional[str] = None):
        self.directory = directory
        self.reference_locale = reference_locale
        self._translations: Optional[Dict[str, Mapping[str, Any]]] = None

    def load(self) -> "FileBackend":
        if not os.path.isdir(self.directory):
            raise ConfigurationError(f"Locales directory not found: {self.directory}")

        files = sorted(
            f for f in os.listdir(self.directory) if f.endswith(config.LOCALE_EXTENSIONS)
        )
        translations: Dict[str, Mapping[str, Any]] = {}
        for file in files:
            locale = os.path.splitext(file)[0]
            if locale in translations:
                raise ConfigurationError(
                    f"Locale '{locale}' is defined by more than one file in {self.directory}"
                )
            data = load_catalogue(os.path.join(self.directory, file))
            if len(data) == 1 and _is_locale_key(next(iter(data)), locale):
                inner = next(iter(data.values()))
                if inner is None or isinstance(inner, Mapping):
                    data = inner or {}
            translations[locale] = data
            logger.debug("Loaded %s (%d top-level keys)", file, len(data))

        if not translations:
            raise ConfigurationError(f"No locale files found in {self.directory}")

        if self.reference_locale is not None:
            if self.reference_locale not in translations:
                raise ConfigurationError(
                    f"Reference locale '{self.reference_locale}' not found in {self.directory}"
                )
            reference = translations.pop(self.reference_locale)
            translations = {self.reference_locale: reference, **translations}

        self._translations = translations
        return self

    def _loaded(self) -> Dict[str, Mapping[str, Any]]:
        if self._translations is None:
            raise BackendError("Translation backend is not initialized, call load() first")
        return self._translations

    def available_locales(self) -> List[str]:
        return list(self._loaded())

    def translations(self, locale: str) -> Mapping[str, Any]:
        try:
            return self._loaded()[locale]
        except KeyError:
            raise BackendError(f"No translations loaded for locale '{locale}'") from None
