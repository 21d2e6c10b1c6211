"""
Sitecraft Core Module

Provides centralized logging and configuration.
"""

from sitecraft.core.logger import (
    setup_logging,
    get_logger,
    dev_log,
    truncate_for_log,
    log_timing,
    IS_DEV,
)
from sitecraft.core.config import (
    Settings,
    get_settings,
    reset_settings,
    DEFAULT_PROJECT_ROOT,
    DEFAULT_MAX_FILES,
    MIN_MAX_FILES,
    MAX_MAX_FILES,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "dev_log",
    "truncate_for_log",
    "log_timing",
    "IS_DEV",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
    "DEFAULT_PROJECT_ROOT",
    "DEFAULT_MAX_FILES",
    "MIN_MAX_FILES",
    "MAX_MAX_FILES",
]
