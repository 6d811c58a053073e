from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the menu generation workflow:
1. Validates the configuration.
2. Collects the directory tree into a DirectoryMap.
3. Renders the HTML fragment.
4. Optionally splices the fragment into a host template.
5. Optionally persists the result, refusing silent overwrites.
"""

import logging
import os
from typing import Any, Dict, Optional

from dirmenu.core.analysis.html_renderer import render_menu
from dirmenu.core.analysis.tree_collector import TreeCollector
from dirmenu.core.pipeline.components.template import fill_template_file
from dirmenu.core.pipeline.stages.validator import validate_config
from dirmenu.domain.config import ConfigurationError, MenuConfig
from dirmenu.domain.menu_models import DirectoryMap
from dirmenu.domain.pipeline_models import (
    MenuResult,
    create_error_result,
    create_success_result,
)
from dirmenu.infra.fs import save_text

logger = logging.getLogger(__name__)

DEFAULT_ITEM_NAME = "menu"


def build_menu(config: MenuConfig) -> MenuResult:
    """
    Collect the tree of config.start_path and render it.

    Unreadable subdirectories are omitted from the menu. If the start
    directory itself cannot be listed the result is a failure that still
    carries the rendered default block.

    Args:
        config: Validated menu configuration.

    Returns:
        MenuResult: Status, HTML, collected map and statistics.
    """
    logger.info(f"Generating directory menu for: {config.start_path}")

    collector = TreeCollector(config)
    root_ok = collector.collect(config.start_path)
    directory_map = collector.directory_map

    html = render_menu(directory_map, config)
    summary = _summarize(directory_map)

    if collector.unreadable_dirs:
        summary["unreadable"] = len(collector.unreadable_dirs)

    if not root_ok:
        msg = f"Invalid start directory: {config.start_path}"
        logger.error(msg)
        return create_error_result(
            msg, config.start_path, html=html, directory_map=directory_map,
            unreadable_dirs=list(collector.unreadable_dirs), summary_extra=summary,
        )

    logger.info(
        f"Menu generated: {summary['directories']} directories, {summary['files']} files."
    )
    return create_success_result(
        config.start_path, html, directory_map,
        unreadable_dirs=list(collector.unreadable_dirs), summary_extra=summary,
    )


def run_pipeline(
        config: Any,
        *,
        output_path: Optional[str] = None,
        template_path: Optional[str] = None,
        item_name: str = DEFAULT_ITEM_NAME,
        overwrite: bool = False,
        dry_run: bool = False,
) -> MenuResult:
    """
    Execute the full menu pipeline from raw options to an optional file.

    Args:
        config: A MenuConfig or a raw option mapping.
        output_path: File to write the HTML (or filled template) to.
        template_path: Host document whose placeholder receives the menu.
        item_name: Placeholder name filled in the template.
        overwrite: If True, replace an existing output file.
        dry_run: If True, build everything but write nothing.

    Returns:
        MenuResult: Object containing status, HTML and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config Validation
    # -------------------------------------------------------------------------
    if isinstance(config, MenuConfig):
        cfg = config
    else:
        try:
            cfg, warnings = validate_config(config, strict=False)
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            start = str(config.get("start_path", "")) if isinstance(config, dict) else ""
            return create_error_result(str(e), start)
        for warning in warnings:
            logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    if output_path and os.path.exists(output_path) and not overwrite and not dry_run:
        msg = f"Output file already exists and overwrite=False: {output_path}"
        logger.warning(msg)
        return create_error_result(msg, cfg.start_path, summary_extra={"existing_file": output_path})

    # -------------------------------------------------------------------------
    # 3) Collection & Rendering
    # -------------------------------------------------------------------------
    result = build_menu(cfg)
    if not result.ok:
        return result

    html = result.html

    # -------------------------------------------------------------------------
    # 4) Template Splicing
    # -------------------------------------------------------------------------
    if template_path:
        try:
            html = fill_template_file(template_path, {item_name: html})
        except OSError as e:
            msg = f"Failed to read template '{template_path}': {e}"
            logger.error(msg)
            return create_error_result(
                msg, cfg.start_path, html=result.html, directory_map=result.directory_map,
                unreadable_dirs=result.unreadable_dirs, summary_extra=result.summary,
            )

    summary = dict(result.summary)
    summary["dry_run"] = dry_run

    # -------------------------------------------------------------------------
    # 5) Persistence
    # -------------------------------------------------------------------------
    if output_path and not dry_run:
        try:
            save_text(output_path, html)
        except OSError as e:
            msg = f"Failed to save menu to '{output_path}': {e}"
            logger.error(msg)
            return create_error_result(
                msg, cfg.start_path, html=html, directory_map=result.directory_map,
                unreadable_dirs=result.unreadable_dirs, summary_extra=summary,
            )

    logger.info("Pipeline finished successfully.")
    return create_success_result(
        cfg.start_path, html, result.directory_map,
        unreadable_dirs=result.unreadable_dirs,
        output_path=output_path if output_path and not dry_run else "",
        summary_extra=summary,
    )


def _summarize(directory_map: DirectoryMap) -> Dict[str, int]:
    """Count directories, file entries and directory links in a map."""
    files = sum(1 for entries in directory_map.values() for e in entries if not e.is_directory)
    dir_links = sum(
        1 for key, entries in directory_map.items()
        for e in entries if e.is_directory and e.link != key
    )
    return {"directories": len(directory_map), "files": files, "dir_links": dir_links}
