"""
NoteScore Backend — Notes Route Handlers
==========================================

What:  GET/POST /notes and PATCH/DELETE /notes/{id}, mounted directly under
       the API prefix (/api/v1/notes).
How:   FastAPI validates query strings and bodies against the schemas, then
       the handler delegates to NoteService and returns its result as JSON.

Status codes:
    200 on every success (POST included)
    400 on schema violation (RequestValidationError handler in main.py)
    404 {"message": "NotFound"} when the id is unknown
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from notescore.dependencies import get_note_service
from notescore.schemas.common import QUERY_MAX_LENGTH, QUERY_MIN_LENGTH, ErrorResponse
from notescore.schemas.note import NotePayload, NoteResponse
from notescore.services.note_service import NoteService

# ── Router Configuration ──────────────────────────────────────────────────
# Prefix (/api/v1) is applied by create_app()
router = APIRouter(tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={400: {"description": "Invalid query", "model": ErrorResponse}},
    summary="List notes, optionally filtered by a search query",
)
async def list_notes(
    query: Optional[str] = Query(
        default=None,
        min_length=QUERY_MIN_LENGTH,
        max_length=QUERY_MAX_LENGTH,
        description="Case-insensitive substring to look for in the note text",
    ),
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return service.list_notes(query=query)


@router.post(
    "/notes",
    response_model=NoteResponse,
    responses={400: {"description": "Invalid body", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.create_note(text=payload.text)


@router.patch(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid body", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace the text of a note",
)
async def update_note(
    note_id: str,
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Returns the note as stored after the update."""
    return service.update_note(note_id=note_id, text=payload.text)


@router.delete(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Returns the deleted note."""
    return service.delete_note(note_id=note_id)
