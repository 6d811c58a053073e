from __future__ import annotations

"""
Logging Setup for the dirmenu CLI.

Diagnostics go to stderr so that stdout carries only the rendered menu
(or the JSON report). Records are routed through a Queue so that an
optional rotating log file is written on the listener thread instead of
inside the directory walk. Configuration is idempotent: repeated calls
keep a single set of handlers unless force=True.
"""

import atexit
import logging
import os
import queue
import sys
from dataclasses import dataclass, field
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional, Union

CONSOLE_FORMAT = "dirmenu: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging options of one CLI run.

    Attributes:
        level: Minimum severity, as a name ('DEBUG') or a numeric level.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Log file size that triggers a rollover.
        backup_count: Number of rolled-over log files kept.
    """
    level: Union[str, int] = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 512 * 1024
    backup_count: int = 2

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Quiet console by default, everything when debugging."""
        return cls(level="DEBUG" if debug else "WARNING", log_file=log_file)


@dataclass
class _LoggingState:
    listener: Optional[QueueListener] = None
    queue_handler: Optional[logging.Handler] = None
    sinks: List[logging.Handler] = field(default_factory=list)


_state = _LoggingState()


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the dirmenu handlers to the root logger.

    Args:
        cfg: Logging options.
        force: Replace an existing setup instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if is_configured() and not force:
        return root

    reset_logging()

    level = _parse_level(cfg.level)
    root.setLevel(level)

    sinks: List[logging.Handler] = []
    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        sinks.append(console)

    if cfg.log_file:
        file_handler = _open_log_file(cfg)
        if file_handler is not None:
            sinks.append(file_handler)

    if not sinks:
        return root

    for sink in sinks:
        sink.setLevel(level)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    _state.listener = listener
    _state.queue_handler = queue_handler
    _state.sinks = sinks

    # Flush pending records on shutdown
    atexit.register(_stop_listener, listener)
    return root


def reset_logging() -> None:
    """Detach the dirmenu handlers and stop the listener, if any."""
    root = logging.getLogger()

    if _state.queue_handler is not None:
        root.removeHandler(_state.queue_handler)
        _state.queue_handler.close()

    _stop_listener(_state.listener)
    for sink in _state.sinks:
        sink.close()

    _state.listener = None
    _state.queue_handler = None
    _state.sinks = []


def is_configured() -> bool:
    """True while the dirmenu handlers are attached to the root logger."""
    return _state.queue_handler is not None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file; an unusable path only costs the file log."""
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"dirmenu: WARNING: cannot open log file '{cfg.log_file}': {e}\n")
        return None

    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() fails on a listener whose thread was already joined
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
