from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted option mappings (CLI, JSON
profiles, keyword arguments) and the immutable MenuConfig. Handles key
normalization, legacy aliases, type coercion, default injection and
fail-fast rejection of unusable configurations.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dirmenu.core.pipeline.components.filters import (
    compile_exclusion,
    compile_extension_filter,
)
from dirmenu.domain.config import (
    ConfigurationError,
    MenuConfig,
    MenuMode,
    get_default_config,
)
from dirmenu.domain.constants import DEFAULT_TITLE_TAG, LEGACY_KEY_ALIASES
from dirmenu.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_PATH_FIELDS = ("start_path", "article_root")

_STRING_FIELDS = (
    "url_root", "url_root_text", "top_dir_text", "extensions_pattern",
    "list_start", "list_end", "article_start", "article_end",
    "dir_start", "dir_end", "html_default",
)

_OPTIONAL_PATTERN_FIELDS = ("exclude_dirs_pattern", "exclude_files_pattern")

_BOOL_FIELDS = ("recurse", "print_extensions", "include_empty_dirs")

_KNOWN_FIELDS = frozenset(
    ("mode", "title_from") + _PATH_FIELDS + _STRING_FIELDS
    + _OPTIONAL_PATTERN_FIELDS + _BOOL_FIELDS
)

_TRUE_WORDS = ("true", "1", "yes", "y", "on")
_FALSE_WORDS = ("false", "0", "no", "n", "off")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[MenuConfig, List[str]]:
    """
    Validate a raw option mapping and build the immutable MenuConfig.

    Keys are matched case-insensitively ('-' and '_' are equivalent) and
    legacy option names are translated. Unknown keys are kept verbatim in
    MenuConfig.extras.

    Args:
        config: Raw configuration mapping.
        strict: If True, type mismatches raise instead of being coerced.

    Returns:
        Tuple[MenuConfig, List[str]]: The configuration and a list of warnings.

    Raises:
        ConfigurationError: On a missing or invalid mode, a missing start
            directory, an invalid regular expression, or (strict) any type
            mismatch.
    """
    warnings: List[str] = []

    # 1. Base Type Validation
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Invalid config type: expected a mapping, received {type(config).__name__}."
        )

    options, extras = _normalize_keys(config, warnings)
    merged: Dict[str, Any] = get_default_config()
    merged.update(options)

    # 2. Required Fields
    if merged.get("mode") in (None, ""):
        raise ConfigurationError("Please supply the mode as either 'all', 'dirs' or 'files'.")
    mode = MenuMode.parse(merged["mode"])

    start_path, article_root = _resolve_roots(merged, warnings, strict)

    # 3. Field Processing & Normalization
    values: Dict[str, Any] = {}
    for field in _STRING_FIELDS:
        values[field] = _as_str(merged.get(field), get_default_config()[field], field, warnings, strict)

    for field in _OPTIONAL_PATTERN_FIELDS:
        values[field] = _as_optional_str(merged.get(field), field, warnings, strict)

    for field in _BOOL_FIELDS:
        values[field] = _as_bool(merged.get(field), False, field, warnings, strict)

    values["title_from"] = _as_tag_name(merged.get("title_from"), warnings, strict)

    # 4. Pattern Compilation (fail-fast)
    _check_patterns(values)

    if extras:
        logger.debug(f"Unrecognized options stored verbatim: {sorted(extras)}")

    return MenuConfig(
        mode=mode,
        start_path=start_path,
        article_root=article_root,
        extras=extras,
        **values,
    ), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: KEYS AND ROOTS
# -----------------------------------------------------------------------------

def _normalize_keys(config: Mapping[str, Any], warnings: List[str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split raw options into known fields (canonical names) and extras."""
    options: Dict[str, Any] = {}
    extras: Dict[str, Any] = {}
    # canonical field -> legacy key that set it
    from_legacy: Dict[str, str] = {}

    for raw_key, value in config.items():
        if not isinstance(raw_key, str):
            extras[raw_key] = value
            continue

        key = raw_key.strip().lower().replace("-", "_")
        if key in LEGACY_KEY_ALIASES:
            canonical = LEGACY_KEY_ALIASES[key]
            if canonical in options:
                warnings.append(f"Legacy option '{raw_key}' ignored: '{canonical}' already set.")
                continue
            options[canonical] = value
            from_legacy[canonical] = raw_key
        elif key in _KNOWN_FIELDS:
            legacy_key = from_legacy.pop(key, None)
            if legacy_key is not None:
                warnings.append(f"Legacy option '{legacy_key}' ignored: '{key}' already set.")
            options[key] = value
        else:
            extras[raw_key] = value

    return options, extras


def _resolve_roots(
        merged: Dict[str, Any],
        warnings: List[str],
        strict: bool
) -> Tuple[str, str]:
    """Make start_path and article_root default to each other."""
    start = _as_optional_str(merged.get("start_path"), "start_path", warnings, strict)
    root = _as_optional_str(merged.get("article_root"), "article_root", warnings, strict)

    if not start and not root:
        raise ConfigurationError("Please supply either the 'start_path' or 'article_root' option.")

    start_path = normalize_path(start or root, fallback=root or "")
    article_root = normalize_path(root, fallback=start_path) if root else start_path
    return start_path, article_root


def _check_patterns(values: Dict[str, Any]) -> None:
    """Compile every configured pattern once so runtime never sees a bad regex."""
    try:
        compile_extension_filter(values["extensions_pattern"])
    except re.error as e:
        raise ConfigurationError(
            f"Invalid extensions pattern {values['extensions_pattern']!r}: {e}"
        ) from e

    for field in _OPTIONAL_PATTERN_FIELDS:
        try:
            compile_exclusion(values[field])
        except re.error as e:
            raise ConfigurationError(f"Invalid {field} {values[field]!r}: {e}") from e


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs. Markup is kept verbatim, whitespace included."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Validate optional string inputs; empty strings disable the option."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in _TRUE_WORDS:
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in _FALSE_WORDS:
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_tag_name(value: Any, warnings: List[str], strict: bool) -> Optional[str]:
    """
    Normalize the title tag option.

    False-like values disable extraction; a bare True (as in older
    profiles) selects the default 'title' tag.
    """
    if value is None or value is False:
        return None
    if value is True:
        return DEFAULT_TITLE_TAG

    if isinstance(value, str):
        s = value.strip().lower()
        if not s or s in _FALSE_WORDS:
            return None
        if s in _TRUE_WORDS:
            return DEFAULT_TITLE_TAG
        return s

    _reject(f"Invalid field 'title_from': expected str, received {type(value).__name__}.", warnings, strict)
    return None
