# -*- coding: utf-8 -*-

"""
Human-readable renderings of the finder's output.
"""

import json
from typing import Mapping, Sequence


def pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def to_sentence(words: Sequence[str]) -> str:
    """Join words the way a person would: ``a``, ``a and b``, ``a, b and c``."""
    words = list(words)
    if len(words) < 2:
        return "".join(words)
    return f"{', '.join(words[:-1])} and {words[-1]}"


def format_available_locales(locales: Sequence[str]) -> str:
    return f"{pluralize(len(locales), 'locale', 'locales')} available: {to_sentence(locales)}"


def format_unique_key_stats(keys: Sequence[str]) -> str:
    return f"{pluralize(len(keys), 'unique key', 'unique keys')} found."


def format_missing_keys(missing: Mapping[str, Sequence[str]]) -> str:
    if not missing:
        return "No keys are missing."

    lines = [
        f"{pluralize(len(missing), 'key is', 'keys are')} missing from one or more locales:"
    ]
    for key in sorted(missing):
        lines.append(f"'{key}': Missing from {', '.join(missing[key])}")
    return "\n".join(lines)


def format_json(missing: Mapping[str, Sequence[str]]) -> str:
    return json.dumps(
        {key: list(locales) for key, locales in sorted(missing.items())},
        indent=2,
        ensure_ascii=False,
    )
