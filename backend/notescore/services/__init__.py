# Services package init
"""
NoteScore Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the in-memory
       collections.
Why:   Routes handle HTTP, services handle the collection rules.
How:   Each service owns one Collection and exposes list/create/update/delete.
       They're injected into routes via FastAPI's dependency injection.

Service Inventory:
    - Collection:   Ordered, lock-guarded record container shared by both services
    - NoteService:  Notes collection (unknown id → NotFoundError)
    - ScoreService: Score collection (unknown id → InvalidReferenceError)
    - seed:         Initial rows for both collections

Why services are separate from routes:
    1. Testability: Services can be unit-tested without HTTP overhead
    2. Isolation: Each service is the only writer of its collection
"""
