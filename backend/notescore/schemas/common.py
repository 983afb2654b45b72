"""
NoteScore Backend — Shared Schemas
====================================

What:  Error and health response models used by more than one router.
Why:   Clients need one error structure to parse failures programmatically,
       whichever collection produced them.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

# Query strings are searched as case-insensitive substrings
QUERY_MIN_LENGTH = 4
QUERY_MAX_LENGTH = 100


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description ("NotFound", "Score does not exist", ...)
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "invalid_reference",
            "message": "Score does not exist",
            "request_id": "1f0c2a9e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    scores: int = Field(description="Number of score entries currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
