from __future__ import annotations

"""
Directory Tree Collector.

Walks a directory tree and records, per visited directory, the menu
entries found directly inside it. Integrates with the filtering system and
the title extraction service, and survives unreadable branches by
omitting them.
"""

import logging
import os
from typing import Callable, List, Optional, Set, Tuple

from dirmenu.core.analysis.title_extractor import extract_first_tag_text
from dirmenu.core.analysis.url_paths import dir2txt, dir2url
from dirmenu.core.pipeline.components.filters import (
    compile_exclusion,
    compile_extension_filter,
    is_excluded,
    matches_extension,
)
from dirmenu.domain.config import MenuConfig
from dirmenu.domain.menu_models import DirectoryMap, MenuEntry

logger = logging.getLogger(__name__)

TitleExtractor = Callable[[str, str], Optional[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_tree(config: MenuConfig) -> DirectoryMap:
    """
    Collect the DirectoryMap of config.start_path in one scoped pass.

    Args:
        config: Validated menu configuration.

    Returns:
        DirectoryMap: Entries keyed by rewritten directory URL. Empty when
            nothing matched or the start directory could not be read.
    """
    collector = TreeCollector(config)
    collector.collect(config.start_path)
    return collector.directory_map


class TreeCollector:
    """
    Depth-first collector that fills a single DirectoryMap.

    One instance corresponds to one top-level collection: the map, the
    list of unreadable directories and the set of visited real paths all
    live exactly as long as the collector.

    Known limitation: recursion follows the directory depth, so a tree
    nested deeper than the interpreter recursion limit (about 1000 levels
    by default) raises RecursionError out of collect().
    """

    def __init__(
            self,
            config: MenuConfig,
            title_extractor: TitleExtractor = extract_first_tag_text,
    ):
        self.config = config
        self.directory_map: DirectoryMap = {}
        self.unreadable_dirs: List[str] = []

        self._extension_rx = compile_extension_filter(config.extensions_pattern)
        self._exclude_dirs_rx = compile_exclusion(config.exclude_dirs_pattern)
        self._exclude_files_rx = compile_exclusion(config.exclude_files_pattern)
        self._title_extractor = title_extractor
        self._visited: Set[str] = set()

    def collect(self, directory: str) -> bool:
        """
        Record the entries of one directory, recursing when configured.

        Args:
            directory: Filesystem path of the directory to collect.

        Returns:
            bool: False if the directory could not be listed (or was
                already visited through a symlink cycle), True otherwise.
        """
        cfg = self.config
        mode = cfg.mode
        dir_url = self._to_url(directory)

        real_path = os.path.realpath(directory)
        if real_path in self._visited:
            logger.warning(f"Skipping already visited directory (symlink cycle?): {directory}")
            return False
        self._visited.add(real_path)

        listing = self._list_directory(directory)
        if listing is None:
            return False
        files, subdirs = listing
        logger.debug(f"Collecting {directory}: {len(files)} matching files, {len(subdirs)} dirs")

        # 1. Files of this directory
        if mode.includes_files:
            for file_name in files:
                if is_excluded(file_name, self._exclude_files_rx):
                    continue
                label = self._file_label(directory, file_name)
                self._add(dir_url, MenuEntry(link=f"{dir_url}/{file_name}", text=label))

        # Directories without matching files are not listed unless asked for
        if not mode.includes_dirs or not (files or cfg.include_empty_dirs):
            return True

        # 2. Self-reference of this directory
        self._add(dir_url, MenuEntry(link=dir_url, text=self._dir_label(dir_url), is_directory=True))

        # 3. Subdirectories: walked, or linked as inert leaves
        for dir_name in subdirs:
            if is_excluded(dir_name, self._exclude_dirs_rx):
                continue
            if cfg.recurse:
                self.collect(f"{directory}/{dir_name}")
            else:
                link = f"{dir_url}/{dir_name}"
                self._add(dir_url, MenuEntry(link=link, text=self._dir_label(link), is_directory=True))

        return True

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _list_directory(self, directory: str) -> Optional[Tuple[List[str], List[str]]]:
        """List a directory sorted by name; split into matching files and dirs."""
        files: List[str] = []
        subdirs: List[str] = []
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
                for entry in entries:
                    if _is_dir(entry):
                        subdirs.append(entry.name)
                    elif matches_extension(entry.name, self._extension_rx):
                        files.append(entry.name)
        except OSError as e:
            logger.warning(f"Passed dir <{directory}> can't be opened: {e}")
            self.unreadable_dirs.append(directory)
            return None
        return files, subdirs

    def _file_label(self, directory: str, file_name: str) -> str:
        tag = self.config.title_from
        if tag:
            title = self._title_extractor(os.path.join(directory, file_name), tag)
            if title:
                return title
        return file_name

    def _dir_label(self, url: str) -> str:
        cfg = self.config
        return dir2txt(url, cfg.url_root, cfg.url_root_text, cfg.top_dir_text)

    def _to_url(self, path: str) -> str:
        root = self.config.article_root
        return dir2url(to_url_separators(path), to_url_separators(root) if root else root, self.config.url_root)

    def _add(self, dir_url: str, entry: MenuEntry) -> None:
        self.directory_map.setdefault(dir_url, []).append(entry)


def to_url_separators(path: str, sep: str = os.sep) -> str:
    """Spell a filesystem path with '/' separators, as used in URLs."""
    if sep == "/":
        return path
    return path.replace(sep, "/")


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False
