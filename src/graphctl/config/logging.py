"""Diagnostic logging for graphctl.

Command results go to stdout; everything here goes to stderr. Two kinds of
record share one handler:

- stdlib ``logging.getLogger(__name__)`` records from the store, workspace
  and services (load/save of the snapshot file, skipped edges on replay)
- structlog ``span.complete`` events from ``graphctl.telemetry``, one per
  traced service call when ``--verbose`` is on

``--verbose`` drops the ``graphctl`` logger to DEBUG; otherwise only
warnings surface, such as edges skipped while replaying a snapshot.
``--log-json`` swaps the console renderer for one JSON object per line.
Loggers outside ``graphctl`` stay at WARNING either way.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "graphctl"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route graphctl's stdlib and structlog records to one stderr handler.

    Safe to call once per CLI invocation: the root handler is replaced,
    not appended to.
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
