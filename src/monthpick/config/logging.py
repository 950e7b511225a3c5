"""Logging setup: structlog processors over stdlib handlers.

Every module logs through ``logging.getLogger(__name__)``. A single
stderr handler renders those records, plus any structlog loggers,
either for humans (console renderer) or as JSON lines (``--log-json``).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

# Third-party loggers held at WARNING even in verbose mode.
QUIET_LOGGERS: tuple[str, ...] = ("pluggy",)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _build_handler(stream: TextIO, *, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all logging to one handler on *stream* (default: stderr).

    Args:
        verbose: Let ``monthpick.*`` DEBUG records through (parse
            attempts, field transitions). Otherwise WARNING and up.
        log_json: Render JSON lines instead of console output.
        stream: Destination, mainly for tests.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_build_handler(stream or sys.stderr, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("monthpick").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
