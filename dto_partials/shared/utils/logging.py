# 📄 File: dto_partials/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what the data layer decides in a structured way,
# making it easy to see why a field was included or left out of a response.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting and request-scoped contextual information
# for the partials resolution engine and the HTTP boundary.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: partials parser, allowed partials parser, partials tree resolver, data transformer,
# presentation responses

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from dto_partials.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'dto-partials'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter that adds contextual information to log records.

    Adds the request ID and a UTC timestamp to every log message
    for better traceability.
    """

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def __init__(self):
        super().__init__('%(levelname)s %(name)s %(message)s')

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = log_record.pop('levelname', record.levelname)
        log_record['logger'] = log_record.pop('name', record.name)
        log_record['service'] = SERVICE_NAME
        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()


class StructuredLogger:
    """
    Logger wrapper with structured extra fields.

    Extra fields are passed as plain keyword dictionaries and
    end up as top-level keys in JSON output.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}

        if extra_fields:
            clean_kwargs['extra'] = extra_fields

        self.logger.log(level, message, **clean_kwargs)


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    log_file: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup logging configuration for the data layer.

    Args:
        log_level: Logging level name, defaults to settings.LOG_LEVEL
        log_format: 'json' or 'text', defaults to settings.LOG_FORMAT
        log_file: Optional file to log into, defaults to settings.LOG_FILE
        enable_console: Whether to log to stdout

    Returns:
        The package root logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("dto_partials")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True
    return logging.getLogger("dto_partials")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(request_id: Optional[str] = None):
    """
    Context manager binding a request identifier to every log record.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)
