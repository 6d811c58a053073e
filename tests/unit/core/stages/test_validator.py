from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Fail-fast rejection (mode, start directory, regexes).
2. Default injection and root defaulting.
3. Legacy option aliases and unknown-key retention.
4. Type coercion and strict mode.
"""

import os

import pytest

from dirmenu.core.pipeline.stages.validator import validate_config
from dirmenu.domain.config import ConfigurationError, MenuConfig, MenuMode


def test_validate_non_mapping_raises():
    with pytest.raises(ConfigurationError):
        validate_config(None)


def test_validate_missing_mode_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="mode"):
        validate_config({"start_path": str(tmp_path)})


def test_validate_invalid_mode_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Invalid mode"):
        validate_config({"mode": "everything", "start_path": str(tmp_path)})


def test_validate_missing_start_raises():
    with pytest.raises(ConfigurationError, match="start_path"):
        validate_config({"mode": "all"})


def test_validate_mode_is_case_insensitive(tmp_path):
    cfg, _ = validate_config({"mode": "DiRs", "start_path": str(tmp_path)})

    assert cfg.mode is MenuMode.DIRS


def test_validate_defaults(tmp_path):
    cfg, warnings = validate_config({"mode": "all", "start_path": str(tmp_path)})

    assert isinstance(cfg, MenuConfig)
    assert cfg.start_path == str(tmp_path)
    assert cfg.article_root == str(tmp_path)
    assert cfg.url_root == "http://localhost/"
    assert cfg.extensions_pattern == "html?"
    assert cfg.title_from == "title"
    assert cfg.recurse is False
    assert cfg.print_extensions is False
    assert cfg.dir_start == "<big>"
    assert cfg.html_default == "[No content]"
    assert cfg.extras == {}
    assert warnings == []


def test_validate_start_defaults_to_article_root(tmp_path):
    cfg, _ = validate_config({"mode": "files", "article_root": str(tmp_path)})

    assert cfg.start_path == str(tmp_path)


def test_validate_separate_roots_are_normalized(tmp_path):
    start = tmp_path / "site" / "blog"
    cfg, _ = validate_config({
        "mode": "all",
        "start_path": str(start) + os.sep,
        "article_root": str(tmp_path / "site"),
    })

    assert cfg.start_path == str(start)
    assert cfg.article_root == str(tmp_path / "site")


def test_validate_legacy_aliases(tmp_path):
    cfg, _ = validate_config({
        "MODE": "files",
        "START": str(tmp_path),
        "EXTENSIONS": "txt",
        "EXC_FILES": "^_",
        "EXC_DIRS": "^tmp$",
        "TITLE_IN": "H1",
        "HTMLTOP": "<ol>",
        "ITEMOPEN": "<li>",
        "PRINTEXTENSIONS": "yes",
    })

    assert cfg.mode is MenuMode.FILES
    assert cfg.start_path == str(tmp_path)
    assert cfg.extensions_pattern == "txt"
    assert cfg.exclude_files_pattern == "^_"
    assert cfg.exclude_dirs_pattern == "^tmp$"
    assert cfg.title_from == "h1"
    assert cfg.list_start == "<ol>"
    assert cfg.article_start == "<li>"
    assert cfg.print_extensions is True


def test_validate_unknown_keys_are_kept_verbatim(tmp_path):
    cfg, _ = validate_config({"mode": "all", "start_path": str(tmp_path), "OUTPUT": "LIST"})

    assert cfg.extras == {"OUTPUT": "LIST"}


def test_validate_markup_is_not_stripped(tmp_path):
    cfg, _ = validate_config({"mode": "all", "start_path": str(tmp_path), "article_start": "  <li>"})

    assert cfg.article_start == "  <li>"


def test_validate_converts_strings_to_bools(tmp_path):
    cfg, warnings = validate_config({
        "mode": "all",
        "start_path": str(tmp_path),
        "recurse": "true",
        "print_extensions": "no",
        "include_empty_dirs": 1,
    })

    assert cfg.recurse is True
    assert cfg.print_extensions is False
    assert cfg.include_empty_dirs is True
    assert len(warnings) == 3


@pytest.mark.parametrize("value, expected", [
    (None, None),
    (False, None),
    ("", None),
    ("false", None),
    (True, "title"),
    ("yes", "title"),
    (" H2 ", "h2"),
])
def test_validate_title_from(tmp_path, value, expected):
    cfg, _ = validate_config({"mode": "all", "start_path": str(tmp_path), "title_from": value})

    assert cfg.title_from == expected


def test_validate_bad_type_falls_back_with_warning(tmp_path):
    cfg, warnings = validate_config({"mode": "all", "start_path": str(tmp_path), "recurse": [1]})

    assert cfg.recurse is False
    assert any("recurse" in w for w in warnings)


def test_validate_strict_mode_raises_on_bad_type(tmp_path):
    with pytest.raises(ConfigurationError):
        validate_config({"mode": "all", "start_path": str(tmp_path), "recurse": "true"}, strict=True)


@pytest.mark.parametrize("field", ["extensions_pattern", "exclude_dirs_pattern", "exclude_files_pattern"])
def test_validate_invalid_regex_raises(tmp_path, field):
    with pytest.raises(ConfigurationError, match="Invalid"):
        validate_config({"mode": "all", "start_path": str(tmp_path), field: "(unclosed"})


@pytest.mark.parametrize("order", ["legacy_first", "canonical_first"])
def test_validate_canonical_name_beats_legacy_alias(tmp_path, order):
    legacy = ("START", str(tmp_path / "legacy"))
    canonical = ("start_path", str(tmp_path / "canonical"))
    pairs = [legacy, canonical] if order == "legacy_first" else [canonical, legacy]

    cfg, warnings = validate_config(dict([("mode", "all")] + pairs))

    assert cfg.start_path == str(tmp_path / "canonical")
    assert warnings == ["Legacy option 'START' ignored: 'start_path' already set."]
