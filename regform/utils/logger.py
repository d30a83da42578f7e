"""
Centralized logging infrastructure for the registration form engine.

This module provides consistent logging across all modules with proper
log levels, formatting, optional file rotation and masking of sensitive
field values (SSN, passwords, date of birth).
"""

import logging
import logging.handlers
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any
import json

from ..config.constants import SENSITIVE_FIELDS


class FormLogger:
    """
    Centralized logger for form validation with consistent formatting.

    Features:
    - Structured logging with keyword context rendered as JSON
    - Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - Optional file rotation (enabled when a log directory is configured)
    - Masking of sensitive field values and SSN-like digit runs
    """

    SENSITIVE_FIELDS = set(SENSITIVE_FIELDS)

    SSN_PATTERN = re.compile(r'\b\d{3}-?\d{2}-?\d{4}\b')

    def __init__(
        self,
        name: str,
        log_dir: Optional[str] = None,
        log_level: str = "INFO",
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        enable_console: bool = True,
        enable_file: bool = False
    ):
        """
        Initialize the form logger.

        Args:
            name: Logger name (usually module name)
            log_dir: Directory for log files (required when enable_file is True)
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            max_bytes: Max size of log file before rotation
            backup_count: Number of backup files to keep
            enable_console: Whether to log to console
            enable_file: Whether to log to file
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.handlers = []  # Clear any existing handlers

        if enable_file and not log_dir:
            log_dir = "logs"

        if enable_file:
            Path(log_dir).mkdir(parents=True, exist_ok=True)

        detailed_formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        simple_formatter = logging.Formatter(
            '%(levelname)s | %(message)s'
        )

        if enable_console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.WARNING)  # Console stays quiet during normal typing
            console_handler.setFormatter(simple_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            log_file = os.path.join(log_dir, f"{name}_{datetime.now():%Y%m%d}.log")
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            self.logger.addHandler(file_handler)

            error_log_file = os.path.join(log_dir, f"{name}_errors_{datetime.now():%Y%m%d}.log")
            error_handler = logging.handlers.RotatingFileHandler(
                filename=error_log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(detailed_formatter)
            self.logger.addHandler(error_handler)

    def _mask_sensitive_data(self, data: Any) -> Any:
        """
        Mask sensitive data in log messages.

        Args:
            data: Data to mask (dict, list, or string)

        Returns:
            Data with sensitive fields masked
        """
        if isinstance(data, dict):
            masked = {}
            for key, value in data.items():
                if key.lower() in self.SENSITIVE_FIELDS:
                    masked[key] = "***MASKED***" if value else value
                elif key == "value" and data.get("field") in self.SENSITIVE_FIELDS:
                    masked[key] = "***MASKED***" if value else value
                else:
                    masked[key] = self._mask_sensitive_data(value)
            return masked
        elif isinstance(data, list):
            return [self._mask_sensitive_data(item) for item in data]
        elif isinstance(data, str):
            return self.SSN_PATTERN.sub('***-**-****', data)
        else:
            return data

    def _format(self, message: str, kwargs: Dict[str, Any]) -> str:
        if kwargs:
            masked_kwargs = self._mask_sensitive_data(kwargs)
            message = f"{message} | {json.dumps(masked_kwargs, default=str)}"
        return message

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self.logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.logger.warning(self._format(message, kwargs))

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs):
        """Log error message with optional exception."""
        message = self._format(message, kwargs)
        if exception:
            message = f"{message} | Exception: {str(exception)}"
        self.logger.error(message, exc_info=exception is not None)

    def critical(self, message: str, exception: Optional[Exception] = None, **kwargs):
        """Log critical message with optional exception."""
        message = self._format(message, kwargs)
        if exception:
            message = f"{message} | Exception: {str(exception)}"
        self.logger.critical(message, exc_info=exception is not None)

    # Specialized logging methods

    def log_field_event(self, event: str, field_name: str, value: Any = None):
        """Log a field change or blur coming from the host surface."""
        self.debug(
            "Field event",
            event=event,
            field=field_name,
            value=value
        )

    def log_validation(self, field_name: str, error: Optional[str]):
        """Log a single field evaluation."""
        if error:
            self.debug(
                "Validation failed",
                field=field_name,
                error=error
            )
        else:
            self.debug(
                "Validation passed",
                field=field_name
            )

    def log_submission(self, accepted: bool, errors: Optional[list] = None):
        """Log the outcome of a submit request."""
        if accepted:
            self.info("Submission accepted")
        else:
            self.info(
                "Submission blocked",
                error_count=len(errors) if errors else 0,
                errors=errors if errors else []
            )


_loggers: Dict[str, FormLogger] = {}


def get_logger(
    name: str,
    log_level: Optional[str] = None,
    **kwargs
) -> FormLogger:
    """
    Get or create a logger instance.

    Reads REGFORM_LOG_LEVEL for the default level and REGFORM_LOG_DIR to
    turn on rotating file logs.

    Args:
        name: Logger name (usually module name)
        log_level: Override default log level
        **kwargs: Additional arguments for FormLogger

    Returns:
        FormLogger instance
    """
    if name not in _loggers:
        if log_level is None:
            log_level = os.environ.get('REGFORM_LOG_LEVEL', 'INFO')

        log_dir = os.environ.get('REGFORM_LOG_DIR')
        if log_dir and 'enable_file' not in kwargs:
            kwargs['enable_file'] = True
            kwargs.setdefault('log_dir', log_dir)

        _loggers[name] = FormLogger(name, log_level=log_level, **kwargs)

    return _loggers[name]


def get_module_logger() -> FormLogger:
    """
    Get a logger for the calling module.

    Returns:
        FormLogger instance for the calling module
    """
    import inspect
    frame = inspect.currentframe()
    if frame and frame.f_back:
        module_name = frame.f_back.f_globals.get('__name__', 'unknown')
    else:
        module_name = 'unknown'

    # Simplify module name (e.g., regform.validation.ssn_masker -> ssn_masker)
    module_name = module_name.split('.')[-1]

    return get_logger(module_name)
