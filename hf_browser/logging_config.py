from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("werkzeug", "kaleido", "choreographer")


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv("HF_BROWSER_LOG_LEVEL", "INFO").upper()
    return logging.getLevelName(name) if isinstance(logging.getLevelName(name), int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
        stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logger for the app

    Modes:
    - JSON (default), structured `extra={...}` fields become JSON keys
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var HF_BROWSER_LOG_FORMAT
        3) default = "json"

    Level: argument, else env var HF_BROWSER_LOG_LEVEL, else INFO.
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv("HF_BROWSER_LOG_FORMAT", "json").lower()

    logger = logging.getLogger()
    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler(stream)

    if format_mode == "plain":
        formatter = logging.Formatter(LOG_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(LOG_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
