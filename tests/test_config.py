"""
Tests for settings and logging helpers.
"""

import logging

from sitecraft.core.config import DEFAULT_PROJECT_ROOT, get_settings, reset_settings
from sitecraft.core.logger import SensitiveDataFilter, get_logger, log_timing, truncate_for_log


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.project_root == DEFAULT_PROJECT_ROOT
        assert settings.max_context_files == 12
        assert settings.extra_ignore == []

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SITECRAFT_MAX_CONTEXT_FILES", "20")

        assert get_settings() is first

        reset_settings()
        assert get_settings().max_context_files == 20

    def test_max_files_clamped(self, monkeypatch):
        monkeypatch.setenv("SITECRAFT_MAX_CONTEXT_FILES", "50")
        reset_settings()

        assert get_settings().max_context_files == 30

    def test_max_files_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv("SITECRAFT_MAX_CONTEXT_FILES", "lots")
        reset_settings()

        assert get_settings().max_context_files == 12

    def test_project_root_gets_trailing_slash(self, monkeypatch):
        monkeypatch.setenv("SITECRAFT_PROJECT_ROOT", "/workspace/site")
        reset_settings()

        assert get_settings().project_root == "/workspace/site/"

    def test_extra_ignore_parsed(self, monkeypatch):
        monkeypatch.setenv("SITECRAFT_EXTRA_IGNORE", " a/** ,, b/** ")
        reset_settings()

        assert get_settings().extra_ignore == ["a/**", "b/**"]

    def test_project_root_used_by_selection(self, monkeypatch):
        from sitecraft.models.files import FileEntry
        from sitecraft.models.messages import Message
        from sitecraft.services.context import select_context

        monkeypatch.setenv("SITECRAFT_PROJECT_ROOT", "/workspace/site/")
        reset_settings()

        result = select_context(
            [Message.user("change the header")],
            {"/workspace/site/src/components/Hero.tsx": FileEntry(content="hero")},
        )

        assert list(result) == ["src/components/Hero.tsx"]


class TestLogger:
    """Logging helpers."""

    def test_namespaced(self):
        assert get_logger("context").name == "sitecraft.context"

    def test_truncate_for_log(self):
        assert truncate_for_log("short") == "short"
        assert truncate_for_log("x" * 150, max_length=100) == "x" * 100 + "..."

    def test_log_timing_returns_result(self):
        @log_timing(get_logger("test"))
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_sensitive_filter_never_drops(self):
        record = logging.LogRecord("sitecraft", logging.INFO, __file__, 1, "api_key=abc", (), None)

        assert SensitiveDataFilter().filter(record) is True
