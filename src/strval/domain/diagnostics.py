"""Diagnostic sink used when a coercion falls back to a zero value.

Callers inject a sink explicitly (``sink=``), through a pydantic validation
context (``context={"strval_sink": sink}``), or through a SQLAlchemy column
type. Without one, records go to the ``strval.coerce`` structlog logger.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import structlog

DEFAULT_LOGGER_NAME = "strval.coerce"
SINK_CONTEXT_KEY = "strval_sink"

# Events emitted by the coercion routine.
INVALID_VALUE_EVENT = "coerce.invalid_value"
UNSUPPORTED_TYPE_EVENT = "coerce.unsupported_type"


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything accepting an error record made of an event plus key/values.

    Every structlog logger satisfies this protocol.
    """

    def error(self, event: str, **fields: Any) -> Any: ...


def default_sink() -> DiagnosticSink:
    """Return the ambient sink.

    Once structlog is configured (see :func:`strval.config.logging.configure_logging`)
    this is the regular ``strval.coerce`` logger. Before that, records are
    rendered as key/value text onto the stdlib logger of the same name, so
    an unconfigured process never writes diagnostics to stdout.
    """
    if structlog.is_configured():
        return structlog.get_logger(DEFAULT_LOGGER_NAME)
    return structlog.wrap_logger(
        logging.getLogger(DEFAULT_LOGGER_NAME),
        processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def resolve_sink(
    sink: DiagnosticSink | None = None,
    context: Any = None,
) -> DiagnosticSink:
    """Pick the sink for one coercion: explicit, then context, then default."""
    if sink is not None:
        return sink
    if isinstance(context, Mapping):
        from_context = context.get(SINK_CONTEXT_KEY)
        if from_context is not None:
            return from_context
    return default_sink()
