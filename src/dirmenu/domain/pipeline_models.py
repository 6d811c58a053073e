from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
menu generation outcomes between the engine and the interface layers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dirmenu.domain.menu_models import DirectoryMap

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuResult:
    """
    Unified result object of a menu generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        start_path: Directory the traversal started from.
        html: Rendered menu fragment (or the filled template).
        directory_map: Collected entries keyed by rewritten directory path.
        unreadable_dirs: Directories skipped because they could not be listed.
        output_path: File the HTML was written to, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    start_path: str
    html: str = ""

    directory_map: DirectoryMap = field(default_factory=dict)
    unreadable_dirs: List[str] = field(default_factory=list)

    output_path: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        start_path: str,
        html: str = "",
        directory_map: Optional[DirectoryMap] = None,
        unreadable_dirs: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> MenuResult:
    """
    Create a failed menu result instance.

    Args:
        error: Detailed error description.
        start_path: The target start directory.
        html: Whatever HTML could still be rendered.
        directory_map: Entries collected before the failure.
        unreadable_dirs: Directories that could not be listed.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        MenuResult: An immutable error result object.
    """
    return MenuResult(
        ok=False,
        error=error,
        start_path=start_path,
        html=html,
        directory_map=directory_map or {},
        unreadable_dirs=unreadable_dirs or [],
        summary=summary_extra or {},
    )


def create_success_result(
        start_path: str,
        html: str,
        directory_map: DirectoryMap,
        unreadable_dirs: Optional[List[str]] = None,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> MenuResult:
    """
    Create a successful menu result instance.
    """
    return MenuResult(
        ok=True,
        error="",
        start_path=start_path,
        html=html,
        directory_map=directory_map,
        unreadable_dirs=unreadable_dirs or [],
        output_path=output_path,
        summary=summary_extra or {},
    )
