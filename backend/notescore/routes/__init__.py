# Routes package init
"""
NoteScore Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /api/v1/notes             (list, ?query= search)
                  POST   /api/v1/notes             (create)
                  PATCH  /api/v1/notes/{id}        (replace text)
                  DELETE /api/v1/notes/{id}        (delete)
    - score.py:   GET    /api/v1/score             (list, ?query= search)
                  POST   /api/v1/score             (create, 201)
                  PATCH  /api/v1/score/{id}        (replace note + score)
                  DELETE /api/v1/score/{id}        (delete)
    - health.py:  GET    /health                   (service health check)

Design Principle:
    Routes are THIN: they declare the validated input/output shapes and
    delegate to a service. Business logic belongs in services, not routes.
"""
