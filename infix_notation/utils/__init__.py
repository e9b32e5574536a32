# infix_notation/utils/__init__.py

from .logging_config import (
    setup_logging,
    get_logger,
    get_performance_logger,
    init_default_logging,
    PerformanceTimer,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'get_performance_logger',
    'init_default_logging',
    'PerformanceTimer',
]
