"""
NoteScore Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of both collections.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status code.
Who:   Raised by services and middleware; caught by global handlers.

Exception Hierarchy:
    NoteScoreError (base)
    ├── NotFoundError            → 404 Not Found          (Notes: unknown id)
    ├── InvalidReferenceError    → 400 Bad Request        (Score: unknown id)
    └── RateLimitExceededError   → 429 Too Many Requests

Notes and Scores signal a missing id differently (404 vs 400). The two
exceptions keep that contract explicit instead of sharing one class.
"""

from typing import Any, Dict, Optional


class NoteScoreError(Exception):
    """
    Base exception for all NoteScore application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NoteScoreError):
    """
    Raised when a note id is not present in the Notes collection.

    HTTP:    404 Not Found
    Body:    {"message": "NotFound", ...}
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="NotFound", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class InvalidReferenceError(NoteScoreError):
    """
    Raised when a PATCH/DELETE references a score id that does not exist.

    HTTP:    400 Bad Request
    Body:    {"message": "Score does not exist", ...}
    """

    def __init__(
        self,
        resource_id: Optional[str] = None,
        message: str = "Score does not exist",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class RateLimitExceededError(NoteScoreError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = dict(context or {})
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
