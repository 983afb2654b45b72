"""
NoteScore Backend — Note Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract for the Notes endpoints.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models before the handler
       runs; a violation short-circuits with HTTP 400 (see main.py).
Who:   Used by routes/notes.py and returned by NoteService.

Design Decision:
    One static model per shape (payload vs. response) instead of deriving
    payloads from the response model at runtime. The shapes are fixed, so
    spelling them out keeps the OpenAPI document readable.
"""

from pydantic import BaseModel, Field

from notescore.models.note import TEXT_MAX_LENGTH, TEXT_MIN_LENGTH


class NoteResponse(BaseModel):
    """
    What:  A stored note as returned by every Notes endpoint.
    Who:   GET /notes (as array items), POST, PATCH and DELETE /notes.
    """
    id: str = Field(description="Opaque note identifier (UUID text)")
    text: str = Field(
        min_length=TEXT_MIN_LENGTH,
        max_length=TEXT_MAX_LENGTH,
        description="Note body",
    )

    model_config = {"from_attributes": True}


class NotePayload(BaseModel):
    """
    What:  Request body for POST /notes and PATCH /notes/{id}.

    Unknown fields are ignored rather than rejected, so clients may send a
    whole note object back when editing it.
    """
    text: str = Field(
        min_length=TEXT_MIN_LENGTH,
        max_length=TEXT_MAX_LENGTH,
        description=f"Note body ({TEXT_MIN_LENGTH}-{TEXT_MAX_LENGTH} characters)",
        examples=["Hello world"],
    )
