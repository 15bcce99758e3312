"""Structured logging system for themeforge.

This module provides a centralized logging system with structured output,
configurable log levels, and integration with the CLI verbose flag.

Secrets must never be handed to these helpers. Command logging records the
program and subcommand only, never the full argument list.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_RESERVED_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "getMessage",
        "message",
        "taskName",
    },
)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type = record.exc_info[0].__name__ if record.exc_info[0] else None
            exc_message = str(record.exc_info[1]) if record.exc_info[1] else None
            log_entry["exception"] = {
                "type": exc_type,
                "message": exc_message,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {key: value for key, value in record.__dict__.items() if key not in _RESERVED_FIELDS}
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ThemeforgeLogger:
    """Centralized logger for themeforge with structured output support."""

    def __init__(self, name: str = "themeforge"):
        self.name = name
        self.logger = logging.getLogger(name)
        self.console = Console(stderr=True)
        self._configured = False
        self._verbose = False
        self._structured_output = False

    def configure(
        self,
        level: str | LogLevel = LogLevel.INFO,
        verbose: bool = False,
        structured_output: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """Configure the logging system.

        Calling this again replaces the handlers, so every CLI invocation
        gets the options it asked for.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            verbose: Enable verbose logging (sets level to DEBUG)
            structured_output: Enable structured JSON output
            log_file: Optional file path for log output
        """
        self._verbose = verbose
        self._structured_output = structured_output

        if verbose:
            log_level = logging.DEBUG
        elif isinstance(level, LogLevel):
            log_level = getattr(logging, level.value)
        else:
            log_level = getattr(logging, level.upper())

        self.logger.setLevel(log_level)
        self.logger.propagate = False

        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        if structured_output:
            console_handler: logging.Handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(StructuredFormatter())
        else:
            console_handler = RichHandler(
                console=self.console,
                show_time=verbose,
                show_path=verbose,
                markup=False,
                rich_tracebacks=True,
            )
            console_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

        console_handler.setLevel(log_level)
        self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(StructuredFormatter())
            file_handler.setLevel(logging.DEBUG)
            self.logger.addHandler(file_handler)

        self._configured = True

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, extra=kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self.logger.critical(message, extra=kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self.logger.exception(message, extra=kwargs)

    def log_operation(
        self,
        operation: str,
        status: str,
        details: dict[str, Any] | None = None,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        """Log a structured operation result.

        Args:
            operation: Name of the operation (e.g., "scaffold", "redact")
            status: Operation status (e.g., "success", "failed", "skipped")
            details: Additional operation details
            level: Log level for this operation
        """
        details = details or {}
        # "message" is a reserved LogRecord attribute
        log_data: dict[str, Any] = {key: value for key, value in details.items() if key != "message"}
        log_data.update(operation=operation, status=status)

        message = str(details.get("message", f"Operation '{operation}' {status}"))

        getattr(self, level.value.lower())(message, **log_data)

    def log_command(self, args: list[str], returncode: int, tolerated: bool = False) -> None:
        """Log the outcome of an external command.

        Only the program and its subcommand are recorded.

        Args:
            args: Command arguments as executed
            returncode: Exit status of the command
            tolerated: Whether a failure is expected to be ignored by the caller
        """
        summary = " ".join(args[:2])
        log_data = {"command": summary, "returncode": returncode}

        if returncode == 0:
            self.debug(f"Command succeeded: {summary}", **log_data)
        elif tolerated:
            self.info(f"Command failed (ignored): {summary} (exit {returncode})", **log_data)
        else:
            self.warning(f"Command failed: {summary} (exit {returncode})", **log_data)

    def log_file_written(self, file_path: str, description: str, success: bool = True) -> None:
        """Log a generated or copied file.

        Args:
            file_path: Path of the written file
            description: Short description of what was written
            success: Whether the write succeeded
        """
        log_data = {"file_path": file_path, "description": description, "success": success}
        if success:
            self.debug(f"Wrote {file_path}: {description}", **log_data)
        else:
            self.error(f"Failed to write {file_path}: {description}", **log_data)


# Global logger instance
_logger_instance: ThemeforgeLogger | None = None


def get_logger(name: str = "themeforge") -> ThemeforgeLogger:
    """Get the global logger instance.

    Args:
        name: Logger name (default: "themeforge")

    Returns:
        ThemeforgeLogger instance
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = ThemeforgeLogger(name)
    return _logger_instance


def configure_logging(
    level: str | LogLevel = LogLevel.INFO,
    verbose: bool = False,
    structured_output: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure the global logging system."""
    get_logger().configure(
        level=level,
        verbose=verbose,
        structured_output=structured_output,
        log_file=log_file,
    )


def debug(message: str, **kwargs: Any) -> None:
    get_logger().debug(message, **kwargs)


def info(message: str, **kwargs: Any) -> None:
    get_logger().info(message, **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    get_logger().warning(message, **kwargs)


def error(message: str, **kwargs: Any) -> None:
    get_logger().error(message, **kwargs)
