"""
NoteScore Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── sample_notes / sample_scores: Fixed seed rows with known ids
    ├── note_service / score_service: Services seeded with the rows above
    ├── app: A fresh FastAPI app wired to those services
    └── test_client: HTTPX AsyncClient talking to that app
"""

import os

# Override settings for testing BEFORE any notescore imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SCORE_SEED"] = "1234"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notescore.models import Note, Score
from notescore.services.note_service import NoteService
from notescore.services.score_service import ScoreService


@pytest.fixture
def unknown_id():
    return "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def sample_notes():
    return [
        Note(id="note-1", text="First note"),
        Note(id="note-2", text="Buy milk and HELLO to the neighbours"),
        Note(id="note-3", text="Dentist appointment on Friday"),
    ]


@pytest.fixture
def sample_scores():
    return [
        Score(id="score-1", note="Tomato Soup", score=7),
        Score(id="score-2", note="Pad Thai", score=11),
        Score(id="score-3", note="Mushroom SOUP", score=3),
        Score(id="score-4", note="Lasagne", score=12),
    ]


@pytest.fixture
def note_service(sample_notes):
    return NoteService(notes=sample_notes)


@pytest.fixture
def score_service(sample_scores):
    return ScoreService(scores=sample_scores)


@pytest.fixture
def app(note_service, score_service):
    from notescore.main import create_app
    return create_app(note_service=note_service, score_service=score_service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
