from __future__ import annotations

"""
HTML Menu Renderer.

Converts a collected DirectoryMap into the HTML fragment of the menu:
one optional breadcrumb heading per directory and one hyperlink item per
entry, wrapped in the configured list, item and heading markup.
"""

from html import escape
from typing import List

from dirmenu.core.analysis.url_paths import dir2txt
from dirmenu.core.pipeline.components.filters import (
    compile_extension_filter,
    strip_extension,
)
from dirmenu.domain.config import MenuConfig
from dirmenu.domain.menu_models import DirectoryMap, MenuEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_menu(directory_map: DirectoryMap, config: MenuConfig) -> str:
    """
    Render the complete menu fragment.

    Directories are emitted in lexicographic key order, independent of the
    order they were collected in. An empty map yields a single default
    item instead.

    Args:
        directory_map: Entries keyed by rewritten directory URL.
        config: Menu configuration supplying markup and label rules.

    Returns:
        str: The HTML fragment, one line per emitted element.
    """
    lines: List[str] = [config.list_start]

    if not directory_map:
        lines.append(f"{config.article_start}{config.html_default}{config.article_end}")
    else:
        for dir_url in sorted(directory_map):
            lines.extend(render_directory_block(dir_url, directory_map[dir_url], config))

    lines.append(config.list_end)
    return "\n".join(lines)


def render_directory_block(dir_url: str, entries: List[MenuEntry], config: MenuConfig) -> List[str]:
    """
    Render the heading and items of one directory.

    The directory's own self-reference is represented by the heading and
    is never emitted as an item.
    """
    lines: List[str] = []

    if config.mode.includes_dirs:
        lines.append(f"{config.dir_start}{render_breadcrumb(dir_url, config)}{config.dir_end}")

    for entry in entries:
        if entry.is_directory and entry.link == dir_url:
            continue
        lines.append(f"{config.article_start}{_link(entry.link, _entry_label(entry, config))}{config.article_end}")

    return lines


def render_breadcrumb(dir_url: str, config: MenuConfig) -> str:
    """
    Build the breadcrumb trail of a directory URL.

    Each non-empty segment below url_root becomes a link to the running
    prefix (url_root + '/seg1/seg2...'); links are separated by a space.
    The URL root itself is a single link labelled url_root_text.
    """
    path = dir_url
    if config.url_root and path.startswith(config.url_root):
        path = path[len(config.url_root):]

    prefix = config.url_root
    crumbs: List[str] = []
    for segment in path.split("/"):
        if not segment:
            continue
        prefix += "/" + segment
        crumbs.append(_link(prefix, segment))

    if not crumbs:
        label = dir2txt(config.url_root, config.url_root, config.url_root_text, config.top_dir_text)
        return _link(config.url_root, label)

    return " ".join(crumbs)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _entry_label(entry: MenuEntry, config: MenuConfig) -> str:
    if entry.is_directory or config.print_extensions:
        return entry.text
    return strip_extension(entry.text, compile_extension_filter(config.extensions_pattern))


def _link(href: str, text: str) -> str:
    return f'<a href="{escape(href)}">{escape(text, quote=False)}</a>'
