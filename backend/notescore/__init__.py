"""
NoteScore Backend — Application Package Initializer
=====================================================

What: Marks the `notescore` directory as a Python package.
Why:  Enables module imports like `from notescore.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the same layering for both collections:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Search, create, update, delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Records + Pydantic contracts
    ├─────────────────────────────────────┤
    │     Collection (In-Memory State)    │  ← Ordered, lock-guarded list
    └─────────────────────────────────────┘

    Notes and Scores never share state; each service owns its collection.
"""

__version__ = "1.0.0"
