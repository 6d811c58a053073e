from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample site trees and menu configurations.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirmenu.domain.config import MenuConfig, MenuMode  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
    """
    Create a small static site.

    Structure:
    /site
      index.html        (<title>Home</title>)
      notes.txt
      /blog
        post.html       (no title tag)
        Draft.HTM       (<title>  Draft
                          Post </title>)
      /assets
        logo.png
    """
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text(
        "<html><head><title>Home</title></head><body></body></html>", encoding="utf-8"
    )
    (site / "notes.txt").write_text("not a page", encoding="utf-8")

    blog = site / "blog"
    blog.mkdir()
    (blog / "post.html").write_text("<html><body><p>Hello</p></body></html>", encoding="utf-8")
    (blog / "Draft.HTM").write_text(
        "<html><head><title>  Draft\n   Post </title></head></html>", encoding="utf-8"
    )

    assets = site / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG")

    return site


@pytest.fixture
def make_config() -> Callable[..., MenuConfig]:
    """
    Return a factory for MenuConfig instances with test-friendly defaults.

    Markup defaults to a plain <ul>/<li>/<h2> layout so assertions stay readable.
    """
    def _factory(start_path: Any, **overrides: Any) -> MenuConfig:
        values: Dict[str, Any] = {
            "mode": MenuMode.ALL,
            "start_path": str(start_path),
            "article_root": str(start_path),
            "url_root": "http://x/",
            "list_start": "<ul>",
            "list_end": "</ul>",
            "article_start": "<li>",
            "article_end": "</li>",
            "dir_start": "<h2>",
            "dir_end": "</h2>",
        }
        values.update(overrides)
        return MenuConfig(**values)

    return _factory
