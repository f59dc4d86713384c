"""Structured logging configuration: structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os
from typing import Any

import structlog

PACKAGE_LOGGER = "ts_stager"


def stringify_paths(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render ``os.PathLike`` values as plain strings.

    Staging events carry project and file paths; this keeps them readable in
    console output and serialisable by the JSON renderer.
    """
    for key, value in event_dict.items():
        if isinstance(value, os.PathLike):
            event_dict[key] = os.fspath(value)
    return event_dict


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    package_level: str | None = None,
) -> None:
    """Configure structlog and route it through stdlib logging to stderr.

    Args:
        log_level: Level for the root logger and, unless overridden, for
            ``ts_stager`` itself.
        log_format: ``console`` or ``json``.
        package_level: Level for the ``ts_stager`` loggers only, e.g.
            ``DEBUG`` under ``ts-stage -v``. The handler passes everything
            through so third-party loggers stay at ``log_level``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        stringify_paths,
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                    "level": "NOTSET",
                },
            },
            "root": {
                "handlers": ["stderr"],
                "level": log_level,
            },
            "loggers": {
                PACKAGE_LOGGER: {"level": package_level or log_level},
            },
        }
    )
