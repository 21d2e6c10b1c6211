"""
Sitecraft Settings

Environment-driven configuration for the context engine.
Values are read once and cached; call reset_settings() after changing
the environment (tests do this through monkeypatch).

Variables:
    SITECRAFT_ENV                development | production
    SITECRAFT_PROJECT_ROOT       prefix of root-qualified paths (default /home/project/)
    SITECRAFT_MAX_CONTEXT_FILES  default cap on selected files (1-30, default 12)
    SITECRAFT_EXTRA_IGNORE       comma-separated gitignore-style patterns
"""

import logging
import os
from typing import List, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger("sitecraft.config")

DEFAULT_PROJECT_ROOT = "/home/project/"
DEFAULT_MAX_FILES = 12
MIN_MAX_FILES = 1
MAX_MAX_FILES = 30


class Settings(BaseModel):
    """Resolved runtime settings."""
    env: str = "development"
    project_root: str = DEFAULT_PROJECT_ROOT
    max_context_files: int = Field(default=DEFAULT_MAX_FILES, ge=MIN_MAX_FILES, le=MAX_MAX_FILES)
    extra_ignore: List[str] = Field(default_factory=list)


_settings: Optional[Settings] = None


def _read_max_files() -> int:
    raw = os.getenv("SITECRAFT_MAX_CONTEXT_FILES", "")
    if not raw:
        return DEFAULT_MAX_FILES
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"[CONFIG] Ignoring non-integer SITECRAFT_MAX_CONTEXT_FILES={raw!r}")
        return DEFAULT_MAX_FILES
    return max(MIN_MAX_FILES, min(MAX_MAX_FILES, value))


def _read_project_root() -> str:
    root = os.getenv("SITECRAFT_PROJECT_ROOT", DEFAULT_PROJECT_ROOT).strip() or DEFAULT_PROJECT_ROOT
    # Root is used as a string prefix, so it must end with a separator
    if not root.endswith("/"):
        root += "/"
    return root


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    extra = os.getenv("SITECRAFT_EXTRA_IGNORE", "")
    return Settings(
        env=os.getenv("SITECRAFT_ENV", "development").lower(),
        project_root=_read_project_root(),
        max_context_files=_read_max_files(),
        extra_ignore=[p.strip() for p in extra.split(",") if p.strip()],
    )


def get_settings() -> Settings:
    """Get the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
