"""Logging setup shared by the mdlist command line and embedding applications."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str, verbose: bool = False, trace: bool = False) -> int:
    """Turn command-line logging flags into a numeric level.

    ``trace`` wins over ``verbose``, which only lowers the level when the
    requested level is still the default ``WARNING``.
    """
    if trace:
        return logging.DEBUG
    if isinstance(log_level, int):
        resolved = log_level
    else:
        resolved = getattr(logging, str(log_level).upper(), logging.INFO)
    if verbose and resolved == logging.WARNING:
        return logging.DEBUG
    return resolved


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else PLAIN_FORMAT,
        datefmt=TRACE_DATE_FORMAT if trace_mode else None,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file and len(handlers) > 1:
        root_logger.info("Logging to file: %s", log_file)

    return root_logger
