from __future__ import annotations

"""
Directory Menu Data Models.

Provides the entry type and the directory mapping produced by the
collection phase and consumed by the HTML renderer.
"""

from dataclasses import dataclass
from typing import Dict, List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuEntry:
    """
    Represents one renderable link of the menu.

    Attributes:
        link: Public URL the entry points at.
        text: Display label (extracted title or raw filename).
        is_directory: True for directory self-references and child links.
    """
    link: str
    text: str
    is_directory: bool = False

# Rewritten directory URL -> entries found directly inside that directory
DirectoryMap = Dict[str, List[MenuEntry]]
