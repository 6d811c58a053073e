from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of
configuration sources (JSON profile and CLI overrides), pipeline execution
and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from dirmenu.core.pipeline.engine import run_pipeline
from dirmenu.core.pipeline.stages.validator import validate_config
from dirmenu.domain.config import ConfigurationError, config_to_dict, load_config_file
from dirmenu.domain.pipeline_models import MenuResult
from dirmenu.infra.logging import LoggingConfig, configure_logging, get_logger
from dirmenu.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 configuration error).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, stdout stays clean for HTML)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Resolve configuration (profile, then command-line overrides)
    try:
        raw_conf: Dict[str, Any] = load_config_file(args.config_file) if args.config_file else {}
        raw_conf.update(cli_args.args_to_overrides(args))
        config, warnings = validate_config(raw_conf, strict=False)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # Short-circuit if configuration dump is requested
    if args.dump_config:
        print(json.dumps(config_to_dict(config), ensure_ascii=False, indent=2))
        return 0

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(
            config,
            output_path=args.output_path,
            template_path=args.template_path,
            item_name=args.item_name,
            overwrite=bool(args.overwrite),
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(_result_to_dict(result), ensure_ascii=False, indent=2))
    else:
        _print_result(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: MenuResult) -> None:
    """
    Print the HTML (when not persisted) or a short report.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.output_path:
        summary = result.summary
        print(f"Menu written to: {result.output_path}")
        print(f"Directories: {summary.get('directories', 0)}  Files: {summary.get('files', 0)}")
    else:
        print(result.html)

    for path in result.unreadable_dirs:
        print(f"WARNING: skipped unreadable directory {path}", file=sys.stderr)


def _result_to_dict(result: MenuResult) -> Dict[str, Any]:
    """Convert a MenuResult into a JSON-compatible dictionary."""
    return {
        "ok": result.ok,
        "error": result.error,
        "start_path": result.start_path,
        "html": result.html,
        "directory_map": {
            key: [
                {"link": e.link, "text": e.text, "is_directory": e.is_directory}
                for e in entries
            ]
            for key, entries in result.directory_map.items()
        },
        "unreadable_dirs": result.unreadable_dirs,
        "output_path": result.output_path,
        "summary": result.summary,
    }

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
