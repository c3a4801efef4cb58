"""
Saavn Client Logging Configuration

Structured logging for the Saavn client that provides:
- structlog over the stdlib logging module
- Rotating log files (everything, errors only)
- Console output for development
- API request logging
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog


class SaavnLogger:
    """
    Centralized logging configuration for saavn-client.

    Provides structured logging with:
    - File rotation by size
    - Quieter HTTP library loggers
    - Console output for development
    """

    EXTERNAL_MODULES = ["aiohttp", "aiohttp.access", "aiohttp.client", "urllib3"]
    LOG_FILES = {"saavn_client.log": None, "errors.log": logging.ERROR}

    def __init__(
        self,
        log_dir: Optional[Union[str, Path]] = "logs",
        log_level: str = "INFO",
        enable_console: bool = True,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        """
        Initialize the logging system.

        Args:
            log_dir: Directory to store log files (None disables file logging)
            log_level: Default log level
            enable_console: Whether to enable console logging
            max_file_size: Maximum size per log file before rotation
            backup_count: Number of backup files to keep
        """
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.log_level = getattr(logging, log_level.upper())
        self.enable_console = enable_console
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_logging()

    def _setup_logging(self):
        """Configure the complete logging system."""
        logging.getLogger().handlers.clear()

        self._configure_structlog()

        if self.log_dir is not None:
            self._setup_file_handlers()

        if self.enable_console:
            self._setup_console_handler()

        self._configure_external_loggers()

        logging.getLogger().setLevel(self.log_level)

    def _configure_structlog(self):
        """Configure structlog for structured logging."""
        shared_processors = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        structlog.configure(
            processors=shared_processors + [
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def _setup_file_handlers(self):
        """Attach one rotating handler per entry in LOG_FILES (None means the configured level)."""
        root_logger = logging.getLogger()
        for filename, level in self.LOG_FILES.items():
            root_logger.addHandler(self._create_rotating_file_handler(filename, level or self.log_level))

    def _create_rotating_file_handler(
        self,
        filename: str,
        level: int
    ) -> logging.handlers.RotatingFileHandler:
        """Create a rotating file handler with plain key/value formatting."""
        handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding='utf-8'
        )

        handler.setLevel(level)
        handler.setFormatter(self._formatter(colors=False))
        return handler

    def _setup_console_handler(self):
        """Colored console output on stdout."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(self._formatter(colors=True))
        logging.getLogger().addHandler(console_handler)

    @staticmethod
    def _formatter(colors: bool) -> structlog.stdlib.ProcessorFormatter:
        return structlog.stdlib.ProcessorFormatter(processor=structlog.dev.ConsoleRenderer(colors=colors))

    def _configure_external_loggers(self):
        """Reduce noise from HTTP libraries unless debugging."""
        level = logging.DEBUG if self.log_level == logging.DEBUG else logging.WARNING
        for ext_module in self.EXTERNAL_MODULES:
            logging.getLogger(ext_module).setLevel(level)

    def get_logger(self, name: str) -> structlog.BoundLogger:
        """Get a structured logger for a specific component."""
        return structlog.get_logger(name)

    def log_api_request(
        self,
        method: str,
        url: str,
        status_code: int,
        duration: float,
        **kwargs
    ):
        """Log API request details."""
        api_logger = self.get_logger("api")
        api_logger.info(
            "api_request",
            method=method,
            url=url,
            status_code=status_code,
            duration_seconds=round(duration, 4),
            **kwargs
        )

    def log_error(self, error: Exception, context: Dict[str, Any], **kwargs):
        """Log an exception with its type, message and the caller's context."""
        self.get_logger("errors").error(
            "error_occurred",
            error_type=type(error).__name__,
            error_message=str(error),
            context=context,
            **kwargs
        )


# Global logger instance
_logger_instance: Optional[SaavnLogger] = None


def setup_logging(
    log_dir: Optional[Union[str, Path]] = "logs",
    log_level: str = "INFO",
    enable_console: bool = True
) -> SaavnLogger:
    """Install the process-wide SaavnLogger and return it."""
    global _logger_instance
    _logger_instance = SaavnLogger(log_dir=log_dir, log_level=log_level, enable_console=enable_console)
    return _logger_instance


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a logger for a specific component.

    Raises:
        RuntimeError: If logging hasn't been setup
    """
    if _logger_instance is None:
        raise RuntimeError("Logging not setup. Call setup_logging() first.")

    return _logger_instance.get_logger(name)


def log_api_request(method: str, url: str, status_code: int, duration: float, **kwargs):
    """Log API request details."""
    if _logger_instance:
        _logger_instance.log_api_request(method, url, status_code, duration, **kwargs)


def log_error(error: Exception, context: Dict[str, Any], **kwargs):
    """Log errors with full context."""
    if _logger_instance:
        _logger_instance.log_error(error, context, **kwargs)
