"""Utility modules for pagesmith"""

from .error_handler import critical_operation, log_failure
from .logger import (
    get_logger,
    preview_source,
    setup_logging,
)
from .mixins import LoggerMixin

__all__ = [
    "LoggerMixin",
    "critical_operation",
    "get_logger",
    "log_failure",
    "preview_source",
    "setup_logging",
]
