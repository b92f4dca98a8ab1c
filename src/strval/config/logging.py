"""structlog configuration for strval.

Two handlers, both writing to stderr:
- the root handler for general logs, console- or JSON-rendered
- a dedicated handler for coercion diagnostics on ``strval.coerce``

Diagnostics do not propagate to the root logger and keep their own level,
so a fallback to a zero value is always reported, verbose or not, and is
never reported twice. In console mode each one renders as a single line::

    error Int: cannot parse 'abc' as int [token]
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from strval.domain.diagnostics import DEFAULT_LOGGER_NAME

# Libraries whose INFO/DEBUG chatter is never useful on the CLI.
_QUIET_LOGGERS = ("sqlalchemy",)


def _render_diagnostic(_logger: Any, _method_name: str, event_dict: EventDict) -> str:
    """Render one coercion record as a compact console line."""
    level = event_dict.get("level", "error")
    kind = event_dict.get("kind", "value")
    error = event_dict.get("error", event_dict.get("event", ""))
    source = event_dict.get("source")
    line = f"{level} {kind}: {error}"
    return f"{line} [{source}]" if source else line


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _handler(shared: list[Processor], renderer: Processor) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
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
) -> None:
    """Configure structlog processors and output routing.

    Safe to call repeatedly; handlers are replaced, never stacked.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer, for
            diagnostics as well as general logs.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    diagnostic_renderer: Processor
    if log_json:
        renderer: Processor = structlog.processors.JSONRenderer()
        diagnostic_renderer = renderer
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        diagnostic_renderer = _render_diagnostic

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_handler(shared, renderer))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("strval").setLevel(logging.DEBUG if verbose else logging.WARNING)

    diagnostics = logging.getLogger(DEFAULT_LOGGER_NAME)
    diagnostics.handlers.clear()
    diagnostics.addHandler(_handler(shared, diagnostic_renderer))
    diagnostics.setLevel(logging.ERROR)
    diagnostics.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
