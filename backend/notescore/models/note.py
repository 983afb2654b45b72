"""
NoteScore Backend — Note Record
=================================

What:  The stored representation of a short text note.
Who:   Created and replaced by NoteService; converted to NoteResponse by routes.

Lifecycle:
    1. Created by POST /notes with a fresh UUID
    2. Text replaced by PATCH /notes/{id} (id and position unchanged)
    3. Removed by DELETE /notes/{id}
"""

import uuid
from dataclasses import dataclass, field

TEXT_MIN_LENGTH = 6
TEXT_MAX_LENGTH = 300


def new_id() -> str:
    """Opaque identifier for a new record (UUID4 in canonical text form)."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Note:
    text: str
    id: str = field(default_factory=new_id)
