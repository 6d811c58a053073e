from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of MenuResult factories (success and error).
2. Immutability of frozen dataclasses.
3. Default values in domain objects.
"""

import pytest

from dirmenu.domain.menu_models import MenuEntry
from dirmenu.domain.pipeline_models import (
    MenuResult,
    create_error_result,
    create_success_result,
)


def test_create_success_result_populates_fields():
    entries = {"/": [MenuEntry(link="//a.html", text="a.html")]}

    result = create_success_result(
        start_path="/srv/www",
        html="<ul></ul>",
        directory_map=entries,
        output_path="/tmp/menu.html",
        summary_extra={"files": 1},
    )

    assert isinstance(result, MenuResult)
    assert result.ok is True
    assert result.error == ""
    assert result.directory_map is entries
    assert result.unreadable_dirs == []
    assert result.output_path == "/tmp/menu.html"
    assert result.summary == {"files": 1}


def test_create_error_result_handles_defaults():
    result = create_error_result(error="Critical disk error", start_path="/srv/www")

    assert result.ok is False
    assert result.error == "Critical disk error"
    assert result.html == ""
    assert result.directory_map == {}
    assert result.unreadable_dirs == []
    assert result.summary == {}


def test_menu_entry_dto():
    entry = MenuEntry(link="/docs", text="docs", is_directory=True)

    assert entry.link == "/docs"
    assert entry.is_directory is True
    assert MenuEntry(link="/a.html", text="a").is_directory is False

    with pytest.raises(Exception):
        entry.text = "other"  # type: ignore[misc]
