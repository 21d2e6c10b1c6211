"""
Context Selection Models

Types for the local, deterministic context selection system that picks
which project files go into an edit prompt.

Key Models:
1. ContextOptions - per-call configuration (recent edits, chat history, cap)
2. BoostWeights - score contribution of each signal
3. ScoredFile - a candidate path with its score and fired signals
4. SelectionReport - summary passed to on_finish callbacks
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sitecraft.core.config import DEFAULT_MAX_FILES, MAX_MAX_FILES, MIN_MAX_FILES


# ============================================================================
# SIGNALS
# ============================================================================

SIGNAL_CORE = "core"
SIGNAL_RECENTLY_EDITED = "recentlyEdited"
SIGNAL_CHAT_MENTION = "chatMention"
SIGNAL_GREP_MATCH = "grepMatch"
SIGNAL_KEYWORD_PREFIX = "keyword:"


def keyword_signal(keyword: str) -> str:
    """Signal name recorded when `keyword` fires for a file."""
    return f"{SIGNAL_KEYWORD_PREFIX}{keyword}"


# ============================================================================
# OPTIONS
# ============================================================================

class ContextOptions(BaseModel):
    """
    Configuration for a single scoring call.

    Every field defaults independently, so ContextOptions() is valid.
    Camel-case aliases are accepted for payloads from the web client.
    """
    model_config = ConfigDict(populate_by_name=True)

    # Paths edited in the current chat session (root-qualified or relative)
    recently_edited: List[str] = Field(default_factory=list, alias="recentlyEdited")

    # Prior user message texts, used for file-mention detection
    chat_history: List[str] = Field(default_factory=list, alias="chatHistory")

    max_files: int = Field(
        default=DEFAULT_MAX_FILES,
        ge=MIN_MAX_FILES,
        le=MAX_MAX_FILES,
        alias="maxFiles",
        description="Maximum number of files to return",
    )


# ============================================================================
# WEIGHTS
# ============================================================================

class BoostWeights(BaseModel):
    """
    Score contribution of each signal.

    The ordering core >= recently_edited >= keyword_match == grep_match >= chat_mention
    encodes how much each signal is trusted and is enforced on construction.
    """
    model_config = ConfigDict(frozen=True)

    core: int = 10
    recently_edited: int = 8
    keyword_match: int = 5
    grep_match: int = 5
    chat_mention: int = 3

    @model_validator(mode="after")
    def _check_ordering(self) -> "BoostWeights":
        ordered = (
            self.core >= self.recently_edited >= self.keyword_match
            and self.keyword_match == self.grep_match
            and self.grep_match >= self.chat_mention > 0
        )
        if not ordered:
            raise ValueError(
                "boost weights must satisfy core >= recently_edited >= "
                "keyword_match == grep_match >= chat_mention > 0"
            )
        return self


DEFAULT_BOOST_WEIGHTS = BoostWeights()


# ============================================================================
# RESULTS
# ============================================================================

class ScoredFile(BaseModel):
    """A candidate file with its relevance score and the signals that fired."""
    path: str
    score: int = 0
    signals: List[str] = Field(default_factory=list)

    def add(self, points: int, signal: str) -> None:
        self.score += points
        self.signals.append(signal)


class SelectionReport(BaseModel):
    """Summary of a selection run handed to on_finish callbacks."""
    text: str
    keyword_count: int
    grep_count: int
    total_selected: int
    duration_ms: float
    # No model is called, so token usage is always zero
    usage: Dict[str, int] = Field(
        default_factory=lambda: {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}
    )
