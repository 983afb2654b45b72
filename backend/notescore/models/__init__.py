"""
NoteScore Backend — Domain Records
====================================

What:  Immutable records held by the in-memory collections.
Why:   Records are replaced rather than mutated, so a value handed out by a
       service never changes underneath the caller.
"""

from notescore.models.note import Note
from notescore.models.score import Score

__all__ = ["Note", "Score"]
