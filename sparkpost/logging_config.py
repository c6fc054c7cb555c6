"""
Logging configuration for the SparkPost client.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs for
tracing a request from dispatch to response.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


@contextmanager
def correlation_scope() -> Iterator[str]:
    """
    Tie the log events of one API call together.

    Reuses the caller's correlation ID when one is set, otherwise sets a new
    one for the duration of the block.

    Yields:
        The correlation ID in effect inside the block
    """
    current = correlation_id_var.get()
    if current:
        yield current
        return

    correlation_id = str(uuid.uuid4())
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for the SparkPost client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if not name.startswith("sparkpost"):
        name = f"sparkpost.{name}"
    return structlog.get_logger(name)


# Convenience functions for common logging patterns

def log_api_request(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    url: str,
    mode: str,
    **kwargs: Any,
) -> None:
    """
    Log an outbound API request.

    Headers are deliberately not part of the event: they carry the API key.

    Args:
        logger: Logger instance
        method: HTTP method
        url: Target URL
        mode: Dispatch mode ("sync" or "async")
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "method": method,
        "url": url,
        "mode": mode,
    }

    log_data.update(kwargs)

    logger.debug("api_request", **log_data)


def log_api_response(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    url: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed API call.

    Args:
        logger: Logger instance
        method: HTTP method
        url: Target URL
        status_code: HTTP status returned by the API
        duration_ms: Round-trip duration in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_response",
        "method": method,
        "url": url,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }

    log_data.update(kwargs)

    logger.debug("api_response", **log_data)


def log_api_failure(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    url: str,
    error: BaseException,
    status_code: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log a failed API call.

    Args:
        logger: Logger instance
        method: HTTP method
        url: Target URL
        error: Exception raised by the HTTP client
        status_code: HTTP status if the API answered
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_failure",
        "method": method,
        "url": url,
        "error_type": type(error).__name__,
        "error": str(error),
    }

    if status_code is not None:
        log_data["status_code"] = status_code

    log_data.update(kwargs)

    logger.warning("api_failure", **log_data)
