# bulk_units/core/logging_utils.py
"""
Logging helpers.

Modules log through logging.getLogger(__name__) under the "bulk_units" namespace.
get_debug_logger() wires that namespace once: DEBUG level plus a rotating file
handler at logs/bulk_units.log, but only when BULKUNITS_DEBUG is on. Without it
the namespace stays unconfigured and records propagate to whatever the host set up.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "bulk_units"

_LOGGER: logging.Logger | None = None


def debug_enabled() -> bool:
    return os.getenv("BULKUNITS_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def get_debug_logger(log_dir: str = "logs") -> logging.Logger:
    """Create/reuse the package logger, attaching a rotating file handler in debug mode."""
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    logger = logging.getLogger(LOGGER_NAME)

    if debug_enabled() and not logger.handlers:
        logger.setLevel(logging.DEBUG)
        log_path = os.path.join(log_dir, "bulk_units.log")
        try:
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                    datefmt="(%Y-%m-%d %H:%M:%S)",
                )
            )
            logger.addHandler(handler)
        except OSError:
            # unwritable log dir: keep the logger, drop the file handler
            pass

    _LOGGER = logger
    return logger


def reset_debug_logger() -> None:
    """Forget the cached logger and close its handlers (tests, REPL reloads)."""
    global _LOGGER
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    _LOGGER = None


__all__ = ["LOGGER_NAME", "debug_enabled", "get_debug_logger", "reset_debug_logger"]
