"""Logging bootstrap for the webhook process.

``setup_logging`` installs one stdout handler on the root logger and on
uvicorn's loggers. Records are rendered as JSON lines tagged with
``service=dialogbridge`` or, with ``json_output=False``, as coloured text.

Conversation transcripts go to a dedicated ``dialogbridge.transcript``
logger. It is switched by ``LoggingConfig.log_transcripts`` alone, so the
root level can sit at DEBUG without shipping user messages and transcripts
can be enabled without DEBUG noise from everything else.
"""

from __future__ import annotations

import logging
import sys

from opentelemetry import trace

from dialogbridge.configs.system import LoggingConfig

SERVICE_NAME = "dialogbridge"
TRANSCRIPT_LOGGER_NAME = "dialogbridge.transcript"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s"
_JSON_RENAMES = {"asctime": "timestamp", "levelname": "level", "name": "logger"}

_DEV_FORMAT = "%(levelprefix)s %(asctime)s %(name)s  %(message)s"
_DEV_DATEFMT = "%H:%M:%S"


def get_transcript_logger() -> logging.Logger:
    return logging.getLogger(TRANSCRIPT_LOGGER_NAME)


class _TraceIdFilter(logging.Filter):
    """Tags records with the active OpenTelemetry trace id, or ``""``."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = trace.get_current_span().get_span_context()
        record.trace_id = (  # type: ignore[attr-defined]
            format(ctx.trace_id, "032x") if ctx.is_valid else ""
        )
        return True


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.json_output:
        from pythonjsonlogger.json import JsonFormatter

        return JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields=_JSON_RENAMES,
            static_fields={"service": SERVICE_NAME},
            defaults={"trace_id": ""},
        )

    from uvicorn.logging import DefaultFormatter

    return DefaultFormatter(fmt=_DEV_FORMAT, datefmt=_DEV_DATEFMT, use_colors=True)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure process-wide logging. Call once, before uvicorn starts."""
    if config is None:
        config = LoggingConfig()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(_TraceIdFilter())
    handler.setFormatter(_build_formatter(config))

    root = logging.getLogger()
    root.setLevel(config.level.upper())
    root.handlers = [handler]

    for name in _UVICORN_LOGGERS:
        uvi = logging.getLogger(name)
        uvi.handlers = [handler]
        uvi.propagate = False

    # Records propagate to the root handler regardless of the root level.
    get_transcript_logger().setLevel(
        logging.DEBUG if config.log_transcripts else logging.CRITICAL + 1
    )

    for name in config.quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
