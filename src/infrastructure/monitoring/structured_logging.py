"""Structured logging with OpenTelemetry trace correlation."""

import json
import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from opentelemetry import trace


class EventType(str, Enum):
    """Event types for structured logging."""

    ERROR = "error"
    PERFORMANCE = "performance"
    BUSINESS = "business"
    SYSTEM = "system"


# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRIBUTES = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "funcName",
        "lineno",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "exc_info",
        "exc_text",
        "stack_info",
        "event_type",
    }
)


@dataclass
class LogContext:
    """Log context information."""

    correlation_id: str
    user_id: Optional[str] = None
    request_id: Optional[str] = None
    trace_id: Optional[str] = None
    span_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class StructuredLogRecord:
    """Structured log record."""

    timestamp: datetime
    level: str
    logger: str
    message: str
    event_type: EventType
    context: LogContext
    metadata: Dict[str, Any]
    error_details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        record = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level,
            "logger": self.logger,
            "message": self.message,
            "event_type": self.event_type.value,
            "context": self.context.to_dict(),
            "metadata": self.metadata,
        }

        if self.error_details:
            record["error"] = self.error_details

        return record

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)


class ContextManager:
    """Thread-local context management."""

    def __init__(self):
        self._local = threading.local()

    def set_context(self, context: LogContext):
        """Set context for current thread."""
        self._local.context = context

    def get_context(self) -> Optional[LogContext]:
        """Get context for current thread."""
        return getattr(self._local, "context", None)

    def clear_context(self):
        """Clear context for current thread."""
        if hasattr(self._local, "context"):
            delattr(self._local, "context")

    @contextmanager
    def context_scope(self, context: LogContext) -> Iterator[LogContext]:
        """Context manager for temporary context."""
        old_context = self.get_context()
        try:
            self.set_context(context)
            yield context
        finally:
            if old_context:
                self.set_context(old_context)
            else:
                self.clear_context()


_context_manager = ContextManager()


def get_context_manager() -> ContextManager:
    """Get the process-wide log context manager."""
    return _context_manager


@contextmanager
def log_context(**kwargs) -> Iterator[LogContext]:
    """Attach user/request identifiers to every record logged in the block."""
    context = LogContext(
        correlation_id=kwargs.get("correlation_id", str(uuid.uuid4())),
        user_id=kwargs.get("user_id"),
        request_id=kwargs.get("request_id"),
    )

    with _context_manager.context_scope(context):
        yield context


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, context_manager: Optional[ContextManager] = None):
        super().__init__()
        self.context_manager = context_manager or _context_manager

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        context = self.context_manager.get_context()
        if context:
            context = replace(context)
        else:
            context = LogContext(correlation_id=str(uuid.uuid4()))

        span = trace.get_current_span()
        if span and span.get_span_context().is_valid:
            span_context = span.get_span_context()
            context.trace_id = format(span_context.trace_id, "032x")
            context.span_id = format(span_context.span_id, "016x")

        event_type = getattr(record, "event_type", EventType.SYSTEM)
        if record.levelno >= logging.ERROR:
            event_type = EventType.ERROR

        metadata = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRIBUTES
        }
        metadata.update(
            {
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }
        )

        error_details = None
        if record.exc_info:
            error_details = {
                "exception_type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "exception_message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        structured_record = StructuredLogRecord(
            timestamp=datetime.fromtimestamp(record.created),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
            event_type=EventType(event_type),
            context=context,
            metadata=metadata,
            error_details=error_details,
        )

        return structured_record.to_json()
