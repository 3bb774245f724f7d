"""
Structured Logging with structlog
=============================================================================
CONCEPT: Why Structured (JSON) Logging Instead of Plain Text?

Traditional (plain text) log:
    2025-01-15 10:30:45 INFO Created employee 7 with email jane@corp.com

Structured (JSON) log:
    {
        "timestamp": "2025-01-15T10:30:45.123Z",
        "level": "info",
        "logger": "employee_api.services.employee_service",
        "event": "employee_created",
        "employee_id": 7
    }

The JSON version carries the same information in a MACHINE-PARSEABLE shape,
so "all conflicts in the last hour" becomes a query instead of a regex:
    jq 'select(.event == "employee_conflict")'

STRUCTLOG PIPELINE:
  When you call logger.info("event", key=value), structlog runs the log
  entry through a chain of "processors":

    Raw event  ->  [add_timestamp]  ->  [add_log_level]  ->  [add_logger_name]
               ->  [Console/JSON renderer]  ->  Final output

  Each processor enriches the log entry with additional context.
=============================================================================
"""

import logging
import sys

import structlog

from employee_api.config import settings


# ---------------------------------------------------------------------------
# Module-level state
# ---------------------------------------------------------------------------
_logging_configured: bool = False


def setup_logging() -> None:
    """
    Configure structlog for structured logging.

    Called once during application startup (in main.py's lifespan function).
    Calling it again is a no-op.

    THE PROCESSOR CHAIN:
      1. merge_contextvars: fields bound with bind_contextvars() (e.g. a
         request id) appear in every entry of that async context.
      2. filter_by_level: drops entries below LOG_LEVEL.
      3. add_logger_name / add_log_level: "logger" and "level" fields.
      4. TimeStamper(fmt="iso"): ISO-8601 timestamp.
      5. format_exc_info: renders tracebacks from logger.exception().
      6. ProcessorFormatter.wrap_for_formatter: hands the entry to the
         stdlib formatter, so uvicorn and SQLAlchemy logs share one pipeline.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Human-readable colors while developing, JSON lines in production
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer(),
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Reduce noise from verbose third-party libraries
    for noisy_logger in ["uvicorn.access", "sqlalchemy.engine", "aiosqlite", "asyncio"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Factory function to get a named structured logger.

    Use the module's __name__ as the logger name, so entries can be filtered
    by component (logger:"employee_api.services.*").

    USAGE:
        from employee_api.observability.logging import get_logger

        logger = get_logger(__name__)
        logger.info("employee_created", employee_id=7)
    """
    return structlog.get_logger(name)
