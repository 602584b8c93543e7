"""Shared fixtures for the missing-keys tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from i18n_missing_keys import DictBackend, MissingKeysFinder


@pytest.fixture
def greetings_backend() -> DictBackend:
    return DictBackend(
        {
            "en": {"greetings": {"hi": "Hi", "hello": "Hello"}},
            "da": {"greetings": {"hi": "Hej"}},
        }
    )


@pytest.fixture
def finder(greetings_backend: DictBackend) -> MissingKeysFinder:
    return MissingKeysFinder(greetings_backend)


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "en.yml").write_text(
        "en:\n"
        "  greetings:\n"
        "    hi: Hi\n"
        "    hello: Hello\n"
        "  activerecord:\n"
        "    foo: Foo\n",
        encoding="utf-8",
    )
    (directory / "da.yml").write_text(
        "greetings:\n  hi: Hej\n",
        encoding="utf-8",
    )
    (directory / "it.json").write_text(
        '{"greetings": {"hi": "Ciao", "hello": "Salve"}, "activerecord": {"foo": "Foo"}}',
        encoding="utf-8",
    )
    return directory
