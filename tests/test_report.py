"""Tests for report formatting."""

from __future__ import annotations

from i18n_missing_keys import report


def test_to_sentence() -> None:
    assert report.to_sentence([]) == ""
    assert report.to_sentence(["en"]) == "en"
    assert report.to_sentence(["en", "da"]) == "en and da"
    assert report.to_sentence(["en", "da", "it"]) == "en, da and it"


def test_singular_forms() -> None:
    assert report.format_available_locales(["en"]) == "1 locale available: en"
    assert report.format_unique_key_stats(["hi"]) == "1 unique key found."


def test_missing_keys_sorted() -> None:
    text = report.format_missing_keys({"zeta": ("da",), "alpha": ("en", "da")})
    assert text.splitlines() == [
        "2 keys are missing from one or more locales:",
        "'alpha': Missing from en, da",
        "'zeta': Missing from da",
    ]


def test_json() -> None:
    assert report.format_json({"b": ("da",), "a": ("en",)}) == (
        '{\n  "a": [\n    "en"\n  ],\n  "b": [\n    "da"\n  ]\n}'
    )
