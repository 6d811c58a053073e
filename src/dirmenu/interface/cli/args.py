from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (help messages, argument types,
defaults) and translates parsed namespaces into raw configuration
overrides for the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirmenu CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirmenu",
        description="Render an HTML navigation menu from a directory tree.",
    )

    # --- Traversal ---
    p.add_argument(
        "-s", "--start",
        dest="start_path",
        default=None,
        help="Directory to start the menu from.",
    )
    p.add_argument(
        "--article-root",
        dest="article_root",
        default=None,
        help="Filesystem prefix stripped from paths to form URLs (default: start).",
    )
    p.add_argument(
        "-m", "--mode",
        dest="mode",
        default=None,
        type=str.lower,
        choices=["all", "dirs", "files"],
        help="Entry kinds to include.",
    )
    p.add_argument(
        "-r", "--recurse",
        action="store_true",
        help="Descend into subdirectories instead of linking them.",
    )
    p.add_argument(
        "--include-empty-dirs",
        action="store_true",
        help="List directories that contain no matching files.",
    )

    # --- URLs and Labels ---
    p.add_argument("-u", "--url-root", dest="url_root", default=None, help="Public base URL.")
    p.add_argument("--url-root-text", dest="url_root_text", default=None, help="Label of the URL root.")
    p.add_argument("--top-dir-text", dest="top_dir_text", default=None, help="Label of the top directory.")

    # --- Filters ---
    p.add_argument(
        "-e", "--ext",
        dest="extensions_pattern",
        default=None,
        help="Regex fragment of accepted extensions, matched as \\.(EXT)$ (default: html?).",
    )
    p.add_argument("--exclude-dirs", dest="exclude_dirs_pattern", default=None, help="Regex of directory names to skip.")
    p.add_argument("--exclude-files", dest="exclude_files_pattern", default=None, help="Regex of file names to skip.")

    # --- Labels ---
    title = p.add_mutually_exclusive_group()
    title.add_argument("--title-from", dest="title_from", default=None, help="Tag whose text labels each file (default: title).")
    title.add_argument("--no-titles", action="store_true", help="Label files by filename only.")
    p.add_argument("--print-extensions", action="store_true", help="Keep extensions in file labels.")

    # --- Markup ---
    for flag, field, help_text in (
            ("--list-start", "list_start", "Markup opening the menu."),
            ("--list-end", "list_end", "Markup closing the menu."),
            ("--article-start", "article_start", "Markup opening each item."),
            ("--article-end", "article_end", "Markup closing each item."),
            ("--dir-start", "dir_start", "Markup opening each directory heading."),
            ("--dir-end", "dir_end", "Markup closing each directory heading."),
            ("--html-default", "html_default", "Markup used when nothing is found."),
    ):
        p.add_argument(flag, dest=field, default=None, help=help_text)

    # --- Output ---
    p.add_argument("-o", "--output", dest="output_path", default=None, help="Write the HTML to this file.")
    p.add_argument("--template", dest="template_path", default=None, help="Host document to splice the menu into.")
    p.add_argument("--item", dest="item_name", default="menu", help="TEMPLATEITEM name receiving the menu.")
    p.add_argument("--overwrite", action="store_true", help="Replace an existing output file.")
    p.add_argument("--dry-run", action="store_true", help="Build the menu without writing files.")

    # --- Configuration and Diagnostics ---
    p.add_argument("-c", "--config", dest="config_file", default=None, help="JSON profile with menu options.")
    p.add_argument("--dump-config", action="store_true", help="Print the resolved configuration and exit.")
    p.add_argument("--json", dest="json_output", action="store_true", help="Print the result as JSON.")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

_VALUE_FIELDS = (
    "start_path", "article_root", "mode", "url_root", "url_root_text", "top_dir_text",
    "extensions_pattern", "exclude_dirs_pattern", "exclude_files_pattern", "title_from",
    "list_start", "list_end", "article_start", "article_end", "dir_start", "dir_end",
    "html_default",
)


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options given on the command line appear in the result, so a
    JSON profile keeps its values for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for field in _VALUE_FIELDS:
        value = getattr(args, field)
        if value is not None:
            overrides[field] = value

    if args.no_titles:
        overrides["title_from"] = None
    if args.recurse:
        overrides["recurse"] = True
    if args.print_extensions:
        overrides["print_extensions"] = True
    if args.include_empty_dirs:
        overrides["include_empty_dirs"] = True

    return overrides
