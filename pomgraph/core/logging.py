"""Structured logging configuration: structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os
import sys

import structlog


def configure_library_logging() -> None:
    """Keep structlog quiet when pomgraph is used as a library.

    structlog's unconfigured default prints every level to stdout.  Unless the
    host application has configured structlog itself, only warnings and above
    are emitted, and they go to stderr.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for the CLI.

    Reads from environment variables:
        POMGRAPH_LOG_LEVEL   log level (default: WARNING)
        POMGRAPH_LOG_FORMAT  console | json (default: console)

    An explicit *level* wins over ``POMGRAPH_LOG_LEVEL``.  Records go to
    stderr; stdout is reserved for command output.
    """
    log_level = (level or os.environ.get("POMGRAPH_LOG_LEVEL", "WARNING")).upper()
    log_format = os.environ.get("POMGRAPH_LOG_FORMAT", "console").lower()

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
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
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": {"pomgraph": {"level": log_level}},
        }
    )
