"""Logging setup for MCP Jira.

Every record carries a ``context`` attribute describing the operation in
progress, e.g. ``operation=call_tool,tool=add-comment,trace_id=1a2b3c4d``.
The context is stored in a ``ContextVar`` so it follows a tool call into the
worker thread started by ``asyncio.to_thread``.
"""

import logging
import os
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
EMPTY_CONTEXT = "-"

_log_context: ContextVar[dict[str, Any]] = ContextVar("mcp_jira_log_context")


def _format_context(data: dict[str, Any]) -> str:
    return ",".join(f"{key}={value}" for key, value in data.items()) or EMPTY_CONTEXT


class ContextualLogger(logging.Logger):
    """Logger whose records are stamped with the active operation context."""

    def makeRecord(self, *args: Any, **kwargs: Any) -> logging.LogRecord:
        record = super().makeRecord(*args, **kwargs)
        if not hasattr(record, "context"):
            record.context = _format_context(_log_context.get({}))
        return record


class ContextFilter(logging.Filter):
    """Fills in ``context`` for records created by plain loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = _format_context(_log_context.get({}))
        return True


def _attach(
    logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter
) -> None:
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)


def setup_logger(
    name: str = "mcp-jira",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure a logger and return it.

    Handlers are only installed on top-level loggers. A dotted name such as
    ``mcp-jira.jira`` just gets its level and propagates to ``mcp-jira``.
    Console output goes to stderr since stdout is the stdio transport.
    Repeated calls never add a second handler of the same kind.

    Args:
        name: Logger name
        level: Level name, falls back to ``LOG_LEVEL`` then INFO
        log_to_file: Also write to a rotating file
        log_dir: Directory for the log file, falls back to ``LOG_DIR``
        log_format: Format string, falls back to ``LOG_FORMAT``

    Returns:
        The configured logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    level_name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if "." in name:
        return cast(ContextualLogger, logger)

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    installed = {type(handler) for handler in logger.handlers}

    if logging.StreamHandler not in installed:
        _attach(logger, logging.StreamHandler(sys.stderr), formatter)

    if log_to_file and RotatingFileHandler not in installed:
        directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        directory.mkdir(parents=True, exist_ok=True)
        _attach(
            logger,
            RotatingFileHandler(
                directory / f"{name}.log",
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
            ),
            formatter,
        )

    logger.propagate = False
    return cast(ContextualLogger, logger)


@contextmanager
def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> Iterator[str]:
    """
    Tag every record emitted inside the block with ``operation`` and a trace id.

    The start is logged at INFO, a clean finish at DEBUG and a failure at
    ERROR, each with the elapsed time. The exception is re-raised.

    Yields:
        The trace id of the operation
    """
    trace_id = str(context.pop("trace_id", "") or uuid.uuid4().hex[:8])
    token = _log_context.set(
        {**_log_context.get({}), "operation": operation, **context, "trace_id": trace_id}
    )
    started = time.monotonic()
    logger.info(f"Operation started: {operation}")
    try:
        yield trace_id
    except Exception as e:
        elapsed = time.monotonic() - started
        logger.error(f"Operation failed: {operation} after {elapsed:.3f}s: {e}")
        raise
    else:
        elapsed = time.monotonic() - started
        logger.debug(f"Operation completed: {operation} in {elapsed:.3f}s")
    finally:
        _log_context.reset(token)
