"""Console output for the ``tokbox`` loggers.

Records from this package carry their fields in ``extra={"data": {...}}``.
``configure_logging`` renders them as a compact JSON suffix and stamps the
active trace/span ids when a span is recording.
"""

from __future__ import annotations

import json
import logging
import os
import sys

from opentelemetry import trace

PACKAGE_LOGGER = "tokbox"


class ExtrasFormatter(logging.Formatter):
    """Append the record's ``data`` mapping (and trace ids) after the message."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        extras = dict(getattr(record, "data", None) or {})
        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            extras["trace_id"] = trace_id
            extras["span_id"] = getattr(record, "span_id", None)
        if not extras:
            return formatted
        return f"{formatted} | data={json.dumps(extras, sort_keys=True, separators=(',', ':'), default=str)}"


class OtelContextLogFilter(logging.Filter):
    """Copy the current span context onto the record."""

    def filter(self, record: logging.LogRecord) -> bool:
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.trace_id = f"{span_context.trace_id:032x}"
            record.span_id = f"{span_context.span_id:016x}"
        return True


def configure_logging(level: str | None = None) -> logging.Handler:
    """Attach a stdout handler to the ``tokbox`` logger and return it.

    ``level`` falls back to ``TOKBOX_LOG_LEVEL``, then ``WARNING``.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ExtrasFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
    )
    handler.addFilter(OtelContextLogFilter())

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, ExtrasFormatter):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel((level or os.getenv("TOKBOX_LOG_LEVEL", "WARNING")).upper())
    logger.propagate = False
    return handler


__all__ = ["ExtrasFormatter", "OtelContextLogFilter", "configure_logging"]
