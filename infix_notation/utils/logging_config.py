# infix_notation/utils/logging_config.py

import logging
import logging.config
import os
import time
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "infix_notation"
PERFORMANCE_LOGGER = "infix_notation.performance"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_performance: bool = False
) -> None:
    """
    Set up logging configuration for the notation converter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        enable_console: Whether to enable console logging
        enable_performance: Whether to enable detailed performance logging
    """
    log_level = log_level.upper()

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'simple': {
                'format': '%(levelname)s - %(name)s - %(message)s'
            },
            'performance': {
                'format': '%(asctime)s - PERF - %(name)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {},
        'loggers': {
            ROOT_LOGGER: {
                'level': log_level,
                'handlers': [],
                'propagate': False
            },
            PERFORMANCE_LOGGER: {
                'level': 'DEBUG' if enable_performance else 'WARNING',
                'handlers': [],
                'propagate': False
            }
        }
    }

    # Diagnostics go to stderr so they never mix with converted output on stdout.
    if enable_console:
        config['handlers']['console'] = {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('console')

    if log_file:
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'DEBUG',
            'formatter': 'detailed',
            'filename': log_file,
            'maxBytes': 10485760,  # 10MB
            'backupCount': 5,
            'encoding': 'utf8'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('file')

    if enable_performance:
        perf_file = log_file.replace('.log', '_performance.log') if log_file else None
        if perf_file:
            config['handlers']['performance'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'DEBUG',
                'formatter': 'performance',
                'filename': perf_file,
                'maxBytes': 10485760,  # 10MB
                'backupCount': 3,
                'encoding': 'utf8'
            }
        else:
            config['handlers']['performance'] = {
                'class': 'logging.StreamHandler',
                'level': 'DEBUG',
                'formatter': 'performance',
                'stream': 'ext://sys.stderr'
            }
        config['loggers'][PERFORMANCE_LOGGER]['handlers'].append('performance')

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Module names already inside the package (``infix_notation.parser...``)
    are used as-is; anything else is nested under the package logger.
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def get_performance_logger() -> logging.Logger:
    return logging.getLogger(PERFORMANCE_LOGGER)


class PerformanceTimer:
    """Context manager for timing operations and logging performance metrics."""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None):
        self.operation_name = operation_name
        self.logger = logger or get_performance_logger()
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug("Starting %s", self.operation_name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.debug("%s completed in %.6fs", self.operation_name, self.duration)
        else:
            self.logger.debug("%s failed after %.6fs: %s", self.operation_name, self.duration, exc_val)
        return False


def init_default_logging(log_level: Optional[str] = None) -> None:
    """Initialize default logging configuration if not already set up."""
    if get_logger(ROOT_LOGGER).handlers:
        return
    level = (log_level or os.getenv('INFIX_NOTATION_LOG_LEVEL', 'WARNING')).upper()
    enable_perf = os.getenv('INFIX_NOTATION_ENABLE_PERFORMANCE_LOGGING', 'false').lower() == 'true'
    setup_logging(
        log_level=level,
        enable_console=True,
        enable_performance=enable_perf
    )
