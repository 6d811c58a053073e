from __future__ import annotations

"""
Configuration Domain Management.

Defines the immutable menu configuration record, the menu mode enumeration,
and the JSON profile loading used by the CLI. Raw values are normalized by
the validator stage before a MenuConfig is built.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from dirmenu.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_EXTENSIONS_PATTERN,
    DEFAULT_MARKUP,
    DEFAULT_TITLE_TAG,
    DEFAULT_TOP_DIR_TEXT,
    DEFAULT_URL_ROOT,
    DEFAULT_URL_ROOT_TEXT,
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a menu configuration is missing a required field or is invalid."""


# -----------------------------------------------------------------------------
# Mode Enumeration
# -----------------------------------------------------------------------------
class MenuMode(str, Enum):
    """Selects which entry kinds appear in the menu."""

    ALL = "all"
    DIRS = "dirs"
    FILES = "files"

    @classmethod
    def parse(cls, value: Any) -> "MenuMode":
        """
        Resolve a mode from an enum member or a case-insensitive string.

        Raises:
            ConfigurationError: If the value names no known mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError(
            f"Invalid mode {value!r}: expected one of 'all', 'dirs' or 'files'."
        )

    @property
    def includes_files(self) -> bool:
        return self in (MenuMode.ALL, MenuMode.FILES)

    @property
    def includes_dirs(self) -> bool:
        return self in (MenuMode.ALL, MenuMode.DIRS)


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MenuConfig:
    """
    Immutable settings of one menu generation run.

    Attributes:
        mode: Entry kinds to include.
        start_path: Directory where traversal begins.
        article_root: Filesystem prefix stripped when forming URLs.
        url_root: Public base URL prepended to stripped paths.
        url_root_text: Label used for a path equal to url_root.
        top_dir_text: Label used for a path without any '/'.
        extensions_pattern: Regex fragment matched as \\.(fragment)$.
        exclude_dirs_pattern: Directory names matching this are skipped.
        exclude_files_pattern: File names matching this are skipped.
        title_from: Tag whose first occurrence labels each file.
        recurse: Descend into subdirectories instead of linking them.
        print_extensions: Keep the matched extension in file labels.
        include_empty_dirs: List directories without matching files.
        list_start, list_end: Markup wrapping the whole menu.
        article_start, article_end: Markup wrapping each item.
        dir_start, dir_end: Markup wrapping each directory heading.
        html_default: Markup used when nothing was found.
        extras: Unrecognized options, kept verbatim.
    """
    mode: MenuMode
    start_path: str
    article_root: Optional[str] = None

    url_root: str = DEFAULT_URL_ROOT
    url_root_text: str = DEFAULT_URL_ROOT_TEXT
    top_dir_text: str = DEFAULT_TOP_DIR_TEXT

    extensions_pattern: str = DEFAULT_EXTENSIONS_PATTERN
    exclude_dirs_pattern: Optional[str] = None
    exclude_files_pattern: Optional[str] = None
    title_from: Optional[str] = DEFAULT_TITLE_TAG

    recurse: bool = False
    print_extensions: bool = False
    include_empty_dirs: bool = False

    list_start: str = DEFAULT_MARKUP["list_start"]
    list_end: str = DEFAULT_MARKUP["list_end"]
    article_start: str = DEFAULT_MARKUP["article_start"]
    article_end: str = DEFAULT_MARKUP["article_end"]
    dir_start: str = DEFAULT_MARKUP["dir_start"]
    dir_end: str = DEFAULT_MARKUP["dir_end"]
    html_default: str = DEFAULT_MARKUP["html_default"]

    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Frozen: defaults are filled through object.__setattr__
        if not self.article_root:
            object.__setattr__(self, "article_root", self.start_path)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default option values (everything except the required fields).

    Returns:
        Dict[str, Any]: Default configuration values keyed by field name.
    """
    return {
        "url_root": DEFAULT_URL_ROOT,
        "url_root_text": DEFAULT_URL_ROOT_TEXT,
        "top_dir_text": DEFAULT_TOP_DIR_TEXT,
        "extensions_pattern": DEFAULT_EXTENSIONS_PATTERN,
        "exclude_dirs_pattern": None,
        "exclude_files_pattern": None,
        "title_from": DEFAULT_TITLE_TAG,
        "recurse": False,
        "print_extensions": False,
        "include_empty_dirs": False,
        **DEFAULT_MARKUP,
    }


def config_to_dict(config: MenuConfig) -> Dict[str, Any]:
    """
    Serialize a MenuConfig into a JSON-compatible dictionary.
    """
    data = asdict(config)
    data["mode"] = config.mode.value
    data["version"] = CURRENT_CONFIG_VERSION
    return data


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a raw menu profile from a JSON file.

    Args:
        path: Path to a JSON document holding an object at the top level.

    Returns:
        Dict[str, Any]: The raw (unvalidated) options.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load config '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Corrupted config file '{path}': expected a JSON object."
        )

    # Stamp written by --dump-config; not an option
    data.pop("version", None)
    logger.debug(f"Loaded menu profile from {path}")
    return data
