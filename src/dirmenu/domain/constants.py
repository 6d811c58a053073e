from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the default markup fragments, filter
patterns, and the legacy option names accepted for backwards compatibility
with older menu profiles.
"""

from typing import Dict

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# URL AND LABEL DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_URL_ROOT = "http://localhost/"
DEFAULT_URL_ROOT_TEXT = "Home"
DEFAULT_TOP_DIR_TEXT = "Home"

# Fragment wrapped as \.(fragment)$ when matching filenames
DEFAULT_EXTENSIONS_PATTERN = "html?"
DEFAULT_TITLE_TAG = "title"

# -----------------------------------------------------------------------------
# MARKUP DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_MARKUP: Dict[str, str] = {
    "list_start": "",
    "list_end": "",
    "article_start": "",
    "article_end": "",
    "dir_start": "<big>",
    "dir_end": "</big>",
    "html_default": "[No content]",
}

# -----------------------------------------------------------------------------
# LEGACY OPTION NAMES
# -----------------------------------------------------------------------------

# Older profiles used terse upper-case slot names. Keys are compared lower-cased.
LEGACY_KEY_ALIASES: Dict[str, str] = {
    "start": "start_path",
    "extensions": "extensions_pattern",
    "exc_dirs": "exclude_dirs_pattern",
    "exc_files": "exclude_files_pattern",
    "title_in": "title_from",
    "titles": "title_from",
    "printextensions": "print_extensions",
    "htmldefault": "html_default",
    "topdirtext": "top_dir_text",
    "htmltop": "list_start",
    "htmlbot": "list_end",
    "itemopen": "article_start",
    "itemclose": "article_end",
    "diropen": "dir_start",
    "dirclose": "dir_end",
}
