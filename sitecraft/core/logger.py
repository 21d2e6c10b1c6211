"""
Sitecraft Centralized Logging Configuration

Provides:
- Environment-based log levels (dev=DEBUG, prod=INFO)
- Namespaced loggers under 'sitecraft.*'
- Dev-only logging utilities
- Third-party log silencing

Usage:
    from sitecraft.core.logger import get_logger, dev_log

    logger = get_logger("context")
    logger.info("[CONTEXT] Always visible")
    dev_log(logger, "Only in dev mode: %s", some_data)
"""

import logging
import os
import sys
import time
from functools import wraps

# ============================================================================
# ENVIRONMENT DETECTION
# ============================================================================

def is_dev_mode() -> bool:
    """Check if running in development mode."""
    env = os.getenv("SITECRAFT_ENV", "development").lower()
    return env in ("development", "dev", "local", "test")

IS_DEV = is_dev_mode()

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

class SensitiveDataFilter(logging.Filter):
    """
    Filter to keep secrets out of production logs.
    Records mentioning key/token-like words are replaced wholesale.
    """

    SENSITIVE_PATTERNS = [
        "api_key",
        "secret",
        "password",
        "token=",
        "bearer",
        "authorization",
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if IS_DEV:
            return True

        msg = record.getMessage().lower()
        for pattern in self.SENSITIVE_PATTERNS:
            if pattern in msg:
                record.msg = "[REDACTED - contains sensitive data]"
                record.args = ()
                return True

        return True


def setup_logging() -> logging.Logger:
    """
    Configure centralized logging for Sitecraft.

    Call this ONCE at application startup (see sitecraft.api.create_app).

    Returns:
        Root Sitecraft logger
    """
    level = logging.DEBUG if IS_DEV else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    root_logger = logging.getLogger("sitecraft")
    root_logger.setLevel(level)

    if not IS_DEV:
        root_logger.addFilter(SensitiveDataFilter())

    noisy_loggers = [
        ("httpx", logging.WARNING),
        ("httpcore", logging.WARNING),
        ("urllib3", logging.WARNING),
        ("asyncio", logging.WARNING),
        ("uvicorn.access", logging.WARNING),
    ]

    for logger_name, log_level in noisy_loggers:
        logging.getLogger(logger_name).setLevel(log_level)

    mode = "DEVELOPMENT" if IS_DEV else "PRODUCTION"
    root_logger.info(f"Logging initialized ({mode} mode, level={logging.getLevelName(level)})")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a namespaced logger under sitecraft.*.

    Example:
        logger = get_logger("context")
        logger.info("[CONTEXT] Selected files")
    """
    return logging.getLogger(f"sitecraft.{name}")


# ============================================================================
# DEV-ONLY LOGGING UTILITIES
# ============================================================================

def dev_log(logger: logging.Logger, message: str, *args, level: int = logging.DEBUG):
    """
    Log a message ONLY in development mode.

    Example:
        dev_log(logger, "Query: %s", truncate_for_log(query))
    """
    if IS_DEV:
        logger.log(level, message, *args)


def truncate_for_log(content: str, max_length: int = 100) -> str:
    """Truncate content for safe logging, adding ... when cut."""
    if len(content) <= max_length:
        return content
    return content[:max_length] + "..."


def log_timing(logger: logging.Logger):
    """
    Decorator to log function execution time (dev mode only).

    Example:
        @log_timing(logger)
        def grep_for_specific_text(query, files):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not IS_DEV:
                return func(*args, **kwargs)

            start = time.perf_counter()
            result = func(*args, **kwargs)
            duration = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__name__} completed in {duration:.2f}ms")
            return result

        return wrapper

    return decorator
