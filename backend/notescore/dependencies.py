"""
NoteScore Backend — Request Dependencies
==========================================

What:  FastAPI dependencies handing route handlers the services of the
       application that received the request.
Why:   Services live on `app.state` (one set per create_app() call), so tests
       can build isolated apps with injected seed data.

Usage in routes:
    @router.get("/notes")
    async def list_notes(service: NoteService = Depends(get_note_service)):
        return service.list_notes()
"""

from fastapi import Request

from notescore.services.note_service import NoteService
from notescore.services.score_service import ScoreService


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


def get_score_service(request: Request) -> ScoreService:
    return request.app.state.score_service
