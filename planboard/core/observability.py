"""
Observability Infrastructure

Structured logging, correlation tracking and Prometheus metrics for the
planning board backend.
"""

import asyncio
import contextvars
import functools
import logging
import sys
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from prometheus_client import Counter, Histogram

from .config import settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)

F = TypeVar("F", bound=Callable[..., Any])

# Prometheus metrics
REQUEST_COUNT = Counter(
    "planboard_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

REQUEST_DURATION = Histogram(
    "planboard_http_request_duration_seconds",
    "HTTP request duration",
    ["method", "endpoint"],
)

LAYOUT_OPERATIONS = Counter(
    "planboard_layout_operations_total",
    "Total layout operations",
    ["operation_type", "status"],
)

LAYOUT_DURATION = Histogram(
    "planboard_layout_operation_duration_seconds",
    "Layout operation duration",
    ["operation_type"],
)

LANE_CLAMPS = Counter(
    "planboard_lane_clamps_total",
    "Tasks that could not be placed below the lane ceiling",
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")
        if correlation_id:
            event_dict.setdefault("correlation_id", correlation_id)
        return event_dict


def setup_structured_logging() -> None:
    """Configure structured logging with JSON output and correlation tracking."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id_var.get("")


def monitor_performance(operation_type: str, include_args: bool = False):
    """Decorator to monitor function performance with metrics and logging."""

    def decorator(func: F) -> F:
        def _log_context(args: tuple, kwargs: dict) -> dict[str, Any]:
            log_context: dict[str, Any] = {
                "operation": operation_type,
                "function": func.__name__,
            }
            if include_args:
                log_context.update(
                    {
                        "args_count": len(args),
                        "kwargs_keys": list(kwargs.keys()),
                    }
                )
            return log_context

        def _record_success(logger: Any, log_context: dict, start_time: float) -> None:
            duration = time.perf_counter() - start_time
            LAYOUT_OPERATIONS.labels(
                operation_type=operation_type, status="success"
            ).inc()
            LAYOUT_DURATION.labels(operation_type=operation_type).observe(duration)
            logger.info(
                "Operation completed successfully",
                **log_context,
                duration_seconds=duration,
            )

        def _record_failure(
            logger: Any, log_context: dict, start_time: float, error: Exception
        ) -> None:
            duration = time.perf_counter() - start_time
            LAYOUT_OPERATIONS.labels(operation_type=operation_type, status="error").inc()
            logger.error(
                "Operation failed",
                **log_context,
                duration_seconds=duration,
                error=str(error),
                error_type=type(error).__name__,
            )

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            log_context = _log_context(args, kwargs)
            start_time = time.perf_counter()
            logger.debug("Operation started", **log_context)

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _record_failure(logger, log_context, start_time, e)
                raise

            _record_success(logger, log_context, start_time)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            log_context = _log_context(args, kwargs)
            start_time = time.perf_counter()
            logger.debug("Operation started", **log_context)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _record_failure(logger, log_context, start_time, e)
                raise

            _record_success(logger, log_context, start_time)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper  # type: ignore[return-value]
        return sync_wrapper  # type: ignore[return-value]

    return decorator


def initialize_observability() -> None:
    """Initialize all observability components."""
    setup_structured_logging()

    logger = get_logger("observability")
    logger.info(
        "Observability system initialized",
        log_format=settings.LOG_FORMAT,
        log_level=settings.LOG_LEVEL,
        metrics_enabled=settings.ENABLE_METRICS,
    )
