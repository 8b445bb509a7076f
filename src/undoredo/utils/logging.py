"""Structured logging configuration for undoredo.

Uses structlog processors on top of stdlib logging so the library's
``logging.getLogger(__name__)`` calls are rendered through structlog.
Supports console, JSON, and file output modes.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

ROOT_LOGGER = "undoredo"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_json: bool = False,
) -> None:
    """Configure structured logging for the ``undoredo`` logger tree.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file. ``None`` disables file logging.
        log_json: If True, render log lines as JSON instead of human-readable.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file is not None:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(file_path), encoding="utf-8"))

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root = logging.getLogger(ROOT_LOGGER)
    for old in list(root.handlers):
        old.close()
    root.handlers.clear()
    root.setLevel(numeric_level)
    for h in handlers:
        h.setLevel(numeric_level)
        h.setFormatter(formatter)
        root.addHandler(h)
    root.propagate = False


def setup_logging_from_config(system_cfg) -> None:
    """Apply the ``system:`` section of a loaded config."""
    setup_logging(
        system_cfg.get("log_level", "INFO"),
        log_file=system_cfg.get("log_file", None),
        log_json=bool(system_cfg.get("log_json", False)),
    )
