"""
Base58Check - Logging System
==============================
Structured logging (JSON or colored text) for debugging and auditing
encode/decode failures.

Security Level: MEDIUM
Last Updated: 2026-10-18
Version: 1.0.0

Features:
- Structured JSON logging
- Automatic file rotation
- Console and file handlers
- Context enrichment
- Performance tracking

No handler is installed on import: applications (and the CLI) call
setup_logging() explicitly.
"""

import logging
import logging.handlers
import json
import sys
import time
from pathlib import Path
from typing import Optional, Dict, Any
from datetime import datetime, timezone
import traceback


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    Formatter for JSON log lines.

    Output structure:
    {
        "timestamp": "2026-10-18T10:00:00.000000Z",
        "level": "WARNING",
        "logger": "base58check.codec",
        "message": "Checksum mismatch",
        "extra_data": {...},
        "exception": {...}
    }
    """

    def __init__(
        self,
        include_extra: bool = True,
        include_stack: bool = True
    ):
        super().__init__()
        self.include_extra = include_extra
        self.include_stack = include_stack

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a LogRecord as JSON.

        Args:
            record: LogRecord to format

        Returns:
            str: JSON string
        """
        log_data = {
            "timestamp": _utc_timestamp(record.created).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.thread:
            log_data["thread_id"] = record.thread
            log_data["thread_name"] = record.threadName

        if self.include_extra and hasattr(record, 'extra_data'):
            log_data["extra_data"] = record.extra_data

        if record.exc_info and self.include_stack:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_data, default=str)


# ============================================================================
# TEXT FORMATTER (Human-Readable)
# ============================================================================

class ColoredTextFormatter(logging.Formatter):
    """
    Colored formatter for the console.

    Colors:
    - DEBUG: Gray
    - INFO: Green
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Bold Red
    """

    COLORS = {
        'DEBUG': '\033[90m',
        'INFO': '\033[92m',
        'WARNING': '\033[93m',
        'ERROR': '\033[91m',
        'CRITICAL': '\033[1;91m',
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_colors and levelname in self.COLORS:
            levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        timestamp = _utc_timestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        message = f"{timestamp} [{levelname}] {record.name}: {record.getMessage()}"

        if hasattr(record, 'extra_data'):
            message += f" | {record.extra_data}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def _utc_timestamp(created: float) -> datetime:
    return datetime.fromtimestamp(created, tz=timezone.utc)


# ============================================================================
# LOGGER CLASS
# ============================================================================

class Base58Logger:
    """
    Logger wrapper with context enrichment.

    Every call accepts an ``extra_data`` dict that ends up in the
    ``extra_data`` field of the record (JSON formatter) or appended to the
    line (text formatter).
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger
        self._context: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._logger.name

    def set_context(self, **kwargs):
        """
        Set context merged into every record.

        Example:
            >>> logger.set_context(prefix_length=4)
        """
        self._context.update(kwargs)

    def clear_context(self):
        self._context.clear()

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(
        self,
        level: int,
        message: str,
        extra_data: Optional[Dict[str, Any]] = None,
        exc_info=None
    ):
        merged_extra = {**self._context}
        if extra_data:
            merged_extra.update(extra_data)

        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={'extra_data': merged_extra} if merged_extra else {}
        )

    def debug(self, message: str, extra_data: Optional[Dict] = None):
        self._log(logging.DEBUG, message, extra_data)

    def info(self, message: str, extra_data: Optional[Dict] = None):
        self._log(logging.INFO, message, extra_data)

    def warning(self, message: str, extra_data: Optional[Dict] = None):
        self._log(logging.WARNING, message, extra_data)

    def error(self, message: str, extra_data: Optional[Dict] = None, exc_info=None):
        self._log(logging.ERROR, message, extra_data, exc_info)

    def exception(self, message: str, extra_data: Optional[Dict] = None):
        """Log ERROR with the current traceback"""
        self._log(logging.ERROR, message, extra_data, exc_info=sys.exc_info())


# ============================================================================
# SETUP FUNCTION
# ============================================================================

def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path = Path("./logs"),
    log_format: str = "text",
    log_rotation_mb: int = 10,
    log_retention_files: int = 5,
    enable_console: bool = True,
    stream=None,
) -> Base58Logger:
    """
    Configure the ``base58check`` logger hierarchy.

    Args:
        log_level: Level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Also write to a rotating file in log_dir
        log_dir: Directory for log files
        log_format: Format of the file handler (json, text)
        log_rotation_mb: MB before rotation
        log_retention_files: Rotated files kept
        enable_console: Log to the console
        stream: Console stream (default sys.stderr)

    Returns:
        Base58Logger: Configured root logger

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.debug("ready", extra_data={"alphabet": "bitcoin"})
    """
    root_logger = logging.getLogger("base58check")
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()

    # ========================================================================
    # FILE HANDLER (with rotation)
    # ========================================================================

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / "base58check.log",
            maxBytes=log_rotation_mb * 1024 * 1024,
            backupCount=log_retention_files,
            encoding='utf-8'
        )

        if log_format == "json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                )
            )

        root_logger.addHandler(file_handler)

    # ========================================================================
    # CONSOLE HANDLER
    # ========================================================================

    if enable_console:
        console_stream = stream or sys.stderr
        console_handler = logging.StreamHandler(console_stream)

        if log_format == "json":
            console_handler.setFormatter(JSONFormatter())
        else:
            is_tty = hasattr(console_stream, "isatty") and console_stream.isatty()
            console_handler.setFormatter(ColoredTextFormatter(use_colors=is_tty))

        root_logger.addHandler(console_handler)

    return Base58Logger(root_logger)


# ============================================================================
# CATEGORY LOGGERS
# ============================================================================

def get_logger(category: str) -> Base58Logger:
    """
    Get the logger of a category.

    Args:
        category: Category (codec, checksum, cli, ...)

    Returns:
        Base58Logger: Logger named ``base58check.<category>``

    Example:
        >>> codec_logger = get_logger("codec")
        >>> codec_logger.debug("decoding")
    """
    return Base58Logger(logging.getLogger(f"base58check.{category}"))


# ============================================================================
# PERFORMANCE TRACKING
# ============================================================================

class PerformanceLogger:
    """
    Context manager timing a block of code.

    Example:
        >>> logger = get_logger("codec")
        >>> with PerformanceLogger(logger, "encode", threshold_ms=50):
        ...     encode(payload)
        # Logs: "encode completed in 0.12ms"
    """

    def __init__(
        self,
        logger: Base58Logger,
        operation: str,
        threshold_ms: Optional[int] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.extra_data = extra_data or {}
        self.start_time = None
        self.elapsed_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000

        extra = {
            **self.extra_data,
            "operation": self.operation,
            "duration_ms": round(self.elapsed_ms, 2)
        }

        if self.threshold_ms and self.elapsed_ms > self.threshold_ms:
            self.logger.warning(
                f"{self.operation} took {self.elapsed_ms:.2f}ms (threshold: {self.threshold_ms}ms)",
                extra_data=extra
            )
        else:
            self.logger.debug(
                f"{self.operation} completed in {self.elapsed_ms:.2f}ms",
                extra_data=extra
            )


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "setup_logging",
    "get_logger",
    "Base58Logger",
    "PerformanceLogger",
    "JSONFormatter",
    "ColoredTextFormatter",
]
