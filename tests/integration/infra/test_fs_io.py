from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, directory creation and text persistence.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirmenu.infra.fs import normalize_path, safe_mkdir, save_text

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_expansion() -> None:
    """Environment variables and user shortcuts are expanded."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert "code" in Path(path).parts


def test_normalize_path_fallback_and_trailing_separator(tmp_path: Path) -> None:
    assert normalize_path("   ", fallback=str(tmp_path)) == str(tmp_path)
    assert normalize_path(str(tmp_path) + os.sep, fallback=".") == str(tmp_path)

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_safe_mkdir_success(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "dir"
    success, err = safe_mkdir(str(target))

    assert success is True
    assert err is None
    assert target.exists()


def test_safe_mkdir_permission_error() -> None:
    with patch("os.makedirs", side_effect=OSError("Permission Denied")):
        success, err = safe_mkdir("/root/forbidden")
        assert success is False
        assert "Permission Denied" in err


def test_save_text_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "public" / "nav" / "menu.html"

    save_text(str(target), "<ul>\n</ul>")

    assert target.read_text(encoding="utf-8") == "<ul>\n</ul>"


def test_save_text_reports_mkdir_failure(tmp_path: Path) -> None:
    with patch("os.makedirs", side_effect=OSError("read-only")):
        with pytest.raises(OSError, match="read-only"):
            save_text(str(tmp_path / "x" / "menu.html"), "")
