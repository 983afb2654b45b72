"""
NoteScore Backend — Score Request/Response Schemas
====================================================

What:  Pydantic models for the Score endpoints (/score).
Who:   Used by routes/score.py and returned by ScoreService.

Score values:
    `score` is declared as int, so 5 and 5.0 are accepted while 5.5 fails
    validation with HTTP 400. The range is inclusive on both ends.
"""

from pydantic import BaseModel, Field

from notescore.models.score import NOTE_MAX_LENGTH, NOTE_MIN_LENGTH, SCORE_MAX, SCORE_MIN


class ScoreResponse(BaseModel):
    """A stored score entry."""
    id: str = Field(description="Opaque score identifier (UUID text)")
    note: str = Field(
        min_length=NOTE_MIN_LENGTH,
        max_length=NOTE_MAX_LENGTH,
        description="Short descriptive label",
    )
    score: int = Field(ge=SCORE_MIN, le=SCORE_MAX, description="Rating")

    model_config = {"from_attributes": True}


class ScorePayload(BaseModel):
    """Request body for POST /score and PATCH /score/{id}."""
    note: str = Field(
        min_length=NOTE_MIN_LENGTH,
        max_length=NOTE_MAX_LENGTH,
        description=f"Label ({NOTE_MIN_LENGTH}-{NOTE_MAX_LENGTH} characters)",
        examples=["Soup"],
    )
    score: int = Field(
        ge=SCORE_MIN,
        le=SCORE_MAX,
        description=f"Rating between {SCORE_MIN} and {SCORE_MAX} inclusive",
        examples=[5],
    )
