"""
Context Selection API

Request-handling boundary for local context selection. The chat backend
posts the conversation and the project's FileMap; the response is the
subset of files to inject into the edit prompt.

Selection failures are reported as 422 with a user-facing message;
retrying is pointless because selection is deterministic.
"""

import time
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from sitecraft.core.logger import get_logger
from sitecraft.models.context import ScoredFile
from sitecraft.models.files import Entry
from sitecraft.models.messages import Message
from sitecraft.services.context import (
    ContextSelectionError,
    select_context,
    select_context_with_scores,
)

logger = get_logger("api.context")

router = APIRouter(prefix="/context", tags=["context"])


# ============================================================================
# Models
# ============================================================================

class SelectContextRequest(BaseModel):
    """Conversation plus project files to select from."""
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Message]
    files: Dict[str, Optional[Entry]] = Field(default_factory=dict)
    recently_edited: List[str] = Field(default_factory=list, alias="recentlyEdited")


class ScoresRequest(SelectContextRequest):
    """Same body as /select, with an optional cap on the ranking."""
    max_files: Optional[int] = Field(default=None, ge=1, le=30, alias="maxFiles")


class SelectContextResponse(BaseModel):
    files: Dict[str, Entry]
    count: int
    duration_ms: float


class ScoresResponse(BaseModel):
    scores: List[ScoredFile]


def _user_facing(error: ContextSelectionError) -> HTTPException:
    return HTTPException(status_code=422, detail=f"Could not determine relevant files: {error}")


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/select", response_model=SelectContextResponse)
async def select_files(request: SelectContextRequest):
    """Select the files relevant to the latest user message."""
    start = time.perf_counter()
    try:
        selected = select_context(
            request.messages,
            request.files,
            recently_edited=request.recently_edited,
        )
    except ContextSelectionError as e:
        logger.warning(f"[CONTEXT] Selection failed: {e}")
        raise _user_facing(e)

    return SelectContextResponse(
        files=selected,
        count=len(selected),
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )


@router.post("/scores", response_model=ScoresResponse)
async def score_files(request: ScoresRequest):
    """
    Debug view: every candidate with its score and signals.

    Not exposed to end users.
    """
    try:
        scores = select_context_with_scores(
            request.messages,
            request.files,
            recently_edited=request.recently_edited,
            max_files=request.max_files,
        )
    except ContextSelectionError as e:
        logger.warning(f"[CONTEXT] Scoring failed: {e}")
        raise _user_facing(e)

    return ScoresResponse(scores=scores)
