"""structlog configuration for dicectl.

All log output goes to stderr so it never mixes with roll output on stdout.
Human mode uses structlog's console renderer; ``--log-json`` switches to one
JSON object per line.  Stdlib loggers under ``dicectl`` share the same
processor chain, so ``logging.getLogger(__name__)`` and
``structlog.get_logger(__name__)`` produce identical records.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "dicectl"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: Emit ``dicectl`` DEBUG records (roll events). Otherwise WARNING+.
        log_json: Render JSON lines instead of the console format.

    Safe to call repeatedly: the root handler is replaced, never stacked.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _final_renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_invocation(**context: Any) -> None:
    """Attach *context* (command name, seed, ...) to every later log line.

    Replaces whatever an earlier invocation bound in the same thread.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)
