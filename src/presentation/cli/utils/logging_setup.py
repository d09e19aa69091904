"""Logging setup utilities for CLI."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from ....infrastructure.monitoring.structured_logging import JSONFormatter


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_colors: bool = True,
    json_logs: bool = False,
) -> None:
    """Setup logging configuration for CLI.

    Args:
        level: Logging level
        log_file: Optional log file path
        log_format: Optional log format string
        enable_colors: Whether to enable colored output
        json_logs: Emit one JSON document per record instead of text
    """
    # Default format
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Create formatter
    formatter = JSONFormatter() if json_logs else logging.Formatter(log_format)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if not json_logs and enable_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
        # Use colored formatter if terminal supports it
        console_handler.setFormatter(ColoredFormatter(log_format))
    else:
        console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, coloring the level name."""
        message = super().format(record)

        color = self.COLORS.get(record.levelname, "")
        if color:
            levelname = record.levelname
            message = message.replace(levelname, f"{color}{levelname}{self.RESET}", 1)

        return message
