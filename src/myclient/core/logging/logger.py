"""
Logger used by the request pipeline.

Without a LoggingConfig the logger attaches no handlers: records go to the
"myclient" logger, which only has a NullHandler until the application
configures logging itself.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from ...utils.sanitizer import mask_sensitive_data

LOGGER_NAME = "myclient"


class MyclientLogger:
    """
    Thin wrapper over logging.Logger with keyword fields.

    Keyword arguments become LogRecord attributes (after masking secrets),
    which the JSON and text formatters render.

    Example:
        >>> logger = MyclientLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Response received", status_code=200)
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = LOGGER_NAME):
        self.config = config
        self.name = name
        self._closed = False
        self._logger = logging.getLogger(name)

        if config is None:
            return

        level = self._get_level(config.level)
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._remove_handlers()

        filters: List[logging.Filter] = []
        if config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if config.extra_fields:
            filters.append(ExtraFieldsFilter(config.extra_fields))

        formatter = get_formatter(config.format.value)

        handlers: List[logging.Handler] = []
        if config.enable_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.enable_file and config.file_path:
            Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(
                filename=config.file_path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            ))

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            for f in filters:
                handler.addFilter(f)
            self._logger.addHandler(handler)

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    def _log(self, level: int, message: str, fields: dict) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra=mask_sensitive_data(fields))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def _remove_handlers(self) -> None:
        for handler in self._logger.handlers[:]:
            if isinstance(handler, logging.NullHandler):
                continue

            try:
                handler.flush()
            except Exception:
                # Stream may already be closed by its owner
                pass

            try:
                handler.close()
            except Exception:
                pass

            self._logger.removeHandler(handler)

    def close(self) -> None:
        """
        Flush and close handlers added by this logger.

        Idempotent. A logger created without config owns no handlers.
        """
        if self._closed:
            return
        if self.config is not None:
            self._remove_handlers()
            self._logger.propagate = True
            self._logger.setLevel(logging.NOTSET)
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


# Global logger instance
_default_logger: Optional[MyclientLogger] = None


def get_logger() -> MyclientLogger:
    """Return the process-wide pipeline logger, creating an unconfigured one if needed."""
    global _default_logger

    if _default_logger is None:
        _default_logger = MyclientLogger()

    return _default_logger


def configure_logging(config: Optional[LoggingConfig]) -> MyclientLogger:
    """
    Replace the process-wide logger.

    Passing None restores the library default (no handlers of our own).

    Example:
        >>> configure_logging(LoggingConfig.create(level="DEBUG", format="json"))
    """
    global _default_logger

    if _default_logger is not None:
        _default_logger.close()

    _default_logger = MyclientLogger(config)
    return _default_logger
