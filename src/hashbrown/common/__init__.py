"""Common utilities for hashbrown packages."""

from .config import ConfigLoader
from .config_utils import expand_path_variables, auto_detect_io_workers
from .logging import setup_logging, LogContext
from .logging_config import LoggingConfig
from .errors import HashbrownError, FileProcessingError

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'setup_logging',
    'LogContext',
    'HashbrownError',
    'FileProcessingError',
    'expand_path_variables',
    'auto_detect_io_workers',
]
