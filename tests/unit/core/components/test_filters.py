from __future__ import annotations

"""
Unit tests for the File Filters module.

Verifies:
1. Extension filter compilation (bracketed, dot-prefixed, end-anchored).
2. Case-insensitive exclusion matching.
3. Label extension stripping.
"""

import re

import pytest

from dirmenu.core.pipeline.components.filters import (
    compile_exclusion,
    compile_extension_filter,
    is_excluded,
    matches_extension,
    strip_extension,
)


@pytest.mark.parametrize("name, expected", [
    ("index.html", True),
    ("INDEX.HTML", True),
    ("old.htm", True),
    ("page.html.bak", False),
    ("html", False),
    ("notes.txt", False),
])
def test_extension_filter_matches_after_dot_at_end(name, expected):
    rx = compile_extension_filter("html?")

    assert matches_extension(name, rx) is expected


def test_extension_filter_brackets_alternations():
    rx = compile_extension_filter("txt|md")

    # Without the brackets 'txt' would match anywhere
    assert matches_extension("readme.md", rx) is True
    assert matches_extension("txt_notes.rst", rx) is False


def test_invalid_extension_fragment_raises():
    with pytest.raises(re.error):
        compile_extension_filter("(")


def test_compile_exclusion_empty_disables():
    assert compile_exclusion(None) is None
    assert compile_exclusion("") is None
    assert is_excluded("anything", None) is False


def test_exclusion_is_case_insensitive_search():
    rx = compile_exclusion(r"^(private|_.*)$")

    assert is_excluded("PRIVATE", rx) is True
    assert is_excluded("_drafts", rx) is True
    assert is_excluded("public", rx) is False


@pytest.mark.parametrize("label, expected", [
    ("index.html", "index"),
    ("Report.HTM", "Report"),
    ("My Page Title", "My Page Title"),
    ("archive.html.html", "archive.html"),
])
def test_strip_extension(label, expected):
    assert strip_extension(label, compile_extension_filter("html?")) == expected
