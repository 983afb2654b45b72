"""
NoteScore Backend — Score Route Handlers
==========================================

What:  GET/POST /score and PATCH/DELETE /score/{id} (/api/v1/score).
How:   Same layout as routes/notes.py, delegating to ScoreService.

Status codes (differ from Notes on purpose, existing clients rely on them):
    201 on POST
    200 on GET, PATCH and DELETE
    400 on schema violation
    400 {"message": "Score does not exist"} when the id is unknown

PATCH returns the entry as it was before the update.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from notescore.dependencies import get_score_service
from notescore.schemas.common import QUERY_MAX_LENGTH, QUERY_MIN_LENGTH, ErrorResponse
from notescore.schemas.score import ScorePayload, ScoreResponse
from notescore.services.score_service import ScoreService

router = APIRouter(prefix="/score", tags=["Score"])


@router.get(
    "",
    response_model=List[ScoreResponse],
    responses={400: {"description": "Invalid query", "model": ErrorResponse}},
    summary="List score entries, optionally filtered by a search query",
)
async def list_scores(
    query: Optional[str] = Query(
        default=None,
        min_length=QUERY_MIN_LENGTH,
        max_length=QUERY_MAX_LENGTH,
        description="Case-insensitive substring to look for in the label",
    ),
    service: ScoreService = Depends(get_score_service),
) -> List[ScoreResponse]:
    return service.list_scores(query=query)


@router.post(
    "",
    response_model=ScoreResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid body", "model": ErrorResponse}},
    summary="Create a score entry",
)
async def create_score(
    payload: ScorePayload,
    service: ScoreService = Depends(get_score_service),
) -> ScoreResponse:
    return service.create_score(note=payload.note, score=payload.score)


@router.patch(
    "/{score_id}",
    response_model=ScoreResponse,
    responses={
        400: {
            "description": "Invalid body, or the score does not exist",
            "model": ErrorResponse,
        },
    },
    summary="Replace the label and rating of a score entry",
    description=(
        "Stores the new label and rating. The response body is the entry as it "
        "was before the update."
    ),
)
async def update_score(
    score_id: str,
    payload: ScorePayload,
    service: ScoreService = Depends(get_score_service),
) -> ScoreResponse:
    return service.update_score(score_id=score_id, note=payload.note, score=payload.score)


@router.delete(
    "/{score_id}",
    response_model=ScoreResponse,
    responses={400: {"description": "Score does not exist", "model": ErrorResponse}},
    summary="Delete a score entry",
)
async def delete_score(
    score_id: str,
    service: ScoreService = Depends(get_score_service),
) -> ScoreResponse:
    return service.delete_score(score_id=score_id)
