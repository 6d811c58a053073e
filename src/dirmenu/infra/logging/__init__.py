from __future__ import annotations

from .core import (
    LoggingConfig,
    configure_logging,
    get_logger,
    is_configured,
    reset_logging,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "is_configured",
    "reset_logging",
]
