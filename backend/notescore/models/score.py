"""
NoteScore Backend — Score Record
==================================

What:  A short label ("note") paired with an integer rating between 1 and 12.
Who:   Created and replaced by ScoreService; converted to ScoreResponse by routes.

Lifecycle:
    1. Seeded at startup (synthetic dish names) or created by POST /score
    2. Both fields replaced by PATCH /score/{id}
    3. Removed by DELETE /score/{id}
"""

from dataclasses import dataclass, field

from notescore.models.note import new_id

NOTE_MIN_LENGTH = 4
NOTE_MAX_LENGTH = 100
SCORE_MIN = 1
SCORE_MAX = 12


@dataclass(frozen=True)
class Score:
    note: str
    score: int
    id: str = field(default_factory=new_id)
