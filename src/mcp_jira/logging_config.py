"""Logging configuration for MCP Jira.

Records carry a thread-local context (operation, trace id, tool arguments)
that is rendered into every line, so all log lines produced while serving one
tool call can be correlated.
"""

import logging
import sys
import threading
import time
import types
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError

DEFAULT_LOGGER_NAME = "mcp-jira"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "debug"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_context_data = threading.local()


def _current_context() -> dict[str, Any]:
    return getattr(_context_data, "data", {})


def _set_current_context(data: dict[str, Any]) -> None:
    _context_data.data = data


def get_context_str() -> str:
    """Render the current thread's logging context as ``k=v,k=v``."""
    context_data = _current_context()
    if not context_data:
        return "no-context"
    return ",".join(f"{k}={v}" for k, v in context_data.items())


class ContextFilter(logging.Filter):
    """Attaches the thread-local context to every record passing a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context_str()
        return True


def set_context(**kwargs: Any) -> None:
    """
    Adds context values for the current thread.

    Args:
        **kwargs: Key-value pairs to add to the context
    """
    _set_current_context({**_current_context(), **kwargs})


def clear_context() -> None:
    """Removes all context data for the current thread."""
    _set_current_context({})


class LoggingContextManager:
    """Context manager for logging with tracking."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger receiving the start/end records
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self.old_context: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContextManager":
        """Starts the logging context."""
        self.old_context = _current_context().copy()

        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        _set_current_context({**self.old_context, **self.context})

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Finalizes the logging context."""
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        _set_current_context(self.old_context)


def resolve_log_level(level: str | None) -> int:
    """Translate a level name (debug, info, warning, error) to a logging level.

    Args:
        level: Level name, case-insensitive. None selects the default (debug).

    Returns:
        The numeric logging level.

    Raises:
        ConfigurationError: If the name is not a known level.
    """
    name = (level or DEFAULT_LOG_LEVEL).strip().lower()
    if name not in LOG_LEVELS:
        msg = (
            f"Invalid log level '{level}'. "
            f"Expected one of: debug, info, warning, error"
        )
        raise ConfigurationError(msg)
    return LOG_LEVELS[name]


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | int | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Configures and returns the named logger.

    Console output goes to stderr; stdout is reserved for the stdio transport.

    Args:
        name: Logger name
        level: Level name or number (defaults to debug)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    log_level = level if isinstance(level, int) else resolve_log_level(level)
    logger.setLevel(log_level)

    # Reconfiguring must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT)
    context_filter = ContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = Path(log_dir or DEFAULT_LOG_DIRECTORY)
        log_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_directory / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger receiving the start/end records
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
