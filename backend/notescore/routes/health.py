"""
NoteScore Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports the size of each collection and the uptime of the app that
       served the request. There are no external dependencies to probe, so a
       responding process is healthy.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

GET /health is mounted outside the API prefix, and is excluded from rate
limiting and access logging.
"""

import time

from fastapi import APIRouter, Depends, Request

from notescore import __version__
from notescore.dependencies import get_note_service, get_score_service
from notescore.schemas.common import HealthResponse
from notescore.services.note_service import NoteService
from notescore.services.score_service import ScoreService

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    notes: NoteService = Depends(get_note_service),
    scores: ScoreService = Depends(get_score_service),
) -> HealthResponse:
    # started_at is stamped by create_app()
    uptime = time.time() - request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=notes.count(),
        scores=scores.count(),
        uptime_seconds=round(uptime, 2),
    )
