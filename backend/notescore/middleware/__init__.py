# Middleware package init
"""
NoteScore Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Logging] → [CORS] → Route Handler

    1. Request ID FIRST: Every response, 429s included, carries the ID
    2. Rate Limit: Reject abusive requests before any route processing
       (a no-op unless RATE_LIMIT_ENABLED is set)
    3. Logging: One access line per request, tagged with the request ID
    4. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)

    The order is reversed for responses, so the request ID header is set
    on every response and the access line sees the final status code.
"""
