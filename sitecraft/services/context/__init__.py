"""
Local context selection.

Deterministic replacement for model-driven file selection: scores project
files against the user's request and greps for quoted literals.
"""

from sitecraft.services.context.errors import (
    ContextSelectionError,
    NoUserMessageError,
    NoFilesSelectedError,
    NoUserMessage,
    NoFilesSelected,
)
from sitecraft.services.context.patterns import CORE_PATTERNS, KEYWORD_MAP, PatternCatalog, DEFAULT_CATALOG
from sitecraft.services.context.scorer import SignalScorer, get_context_files, get_context_files_with_scores
from sitecraft.services.context.grep import extract_patterns, grep_for_specific_text
from sitecraft.services.context.selector import (
    ContextSelector,
    get_file_paths,
    select_context,
    select_context_with_scores,
)

__all__ = [
    "ContextSelectionError",
    "NoUserMessageError",
    "NoFilesSelectedError",
    "NoUserMessage",
    "NoFilesSelected",
    "CORE_PATTERNS",
    "KEYWORD_MAP",
    "PatternCatalog",
    "DEFAULT_CATALOG",
    "SignalScorer",
    "get_context_files",
    "get_context_files_with_scores",
    "extract_patterns",
    "grep_for_specific_text",
    "ContextSelector",
    "get_file_paths",
    "select_context",
    "select_context_with_scores",
]
