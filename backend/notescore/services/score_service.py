"""
NoteScore Backend — Score Service
===================================

What:  Business logic for the Score collection (label + rating pairs).
How:   Same shape as NoteService: an owned Collection[Score] plus the four
       operations, searching the `note` field.
Who:   Called by routes/score.py through the get_score_service dependency.

Behavioral notes (kept for client compatibility):
    - An unknown id raises InvalidReferenceError → HTTP 400
      {"message": "Score does not exist"}, not the 404 used by Notes.
    - update_score() stores the new values but returns the entry as it was
      BEFORE the update. Clients that need the new values re-read the list.
"""

import logging
from typing import Iterable, List, Optional

from notescore.config import settings
from notescore.exceptions import InvalidReferenceError
from notescore.models import Score
from notescore.schemas.score import ScoreResponse
from notescore.services.collection import Collection, contains_ignore_case
from notescore.services.seed import generate_scores

logger = logging.getLogger(__name__)


class ScoreService:
    """
    Owner of the Score collection.

    Args:
        scores: Initial rows. None generates `settings.score_seed_count`
                synthetic rows (reproducible when `settings.score_seed` is set).
    """

    def __init__(self, scores: Optional[Iterable[Score]] = None):
        if scores is None:
            scores = generate_scores(count=settings.score_seed_count, seed=settings.score_seed)
        self._scores: Collection[Score] = Collection(scores)
        logger.debug("Score collection initialised with %d rows", len(self._scores))

    def count(self) -> int:
        return len(self._scores)

    def list_scores(self, query: Optional[str] = None) -> List[ScoreResponse]:
        if not query:
            scores = self._scores.all()
        else:
            scores = self._scores.filter(lambda entry: contains_ignore_case(entry.note, query))
        return [ScoreResponse.model_validate(entry) for entry in scores]

    def create_score(self, note: str, score: int) -> ScoreResponse:
        entry = self._scores.append(Score(note=note, score=score))
        logger.info("Score created: %s (%s=%d)", entry.id, entry.note, entry.score)
        return ScoreResponse.model_validate(entry)

    def update_score(self, score_id: str, note: str, score: int) -> ScoreResponse:
        """
        Replace both fields of an existing entry.

        Returns:
            The entry's PREVIOUS value. The collection holds the new one.

        Raises:
            InvalidReferenceError: No entry has this id.
        """
        result = self._scores.replace(
            score_id, lambda entry: Score(id=entry.id, note=note, score=score)
        )
        if result is None:
            raise InvalidReferenceError(resource_id=score_id)

        previous, _ = result
        logger.info("Score updated: %s", score_id)
        return ScoreResponse.model_validate(previous)

    def delete_score(self, score_id: str) -> ScoreResponse:
        """
        Remove an entry and return the value it held.

        Raises:
            InvalidReferenceError: No entry has this id.
        """
        removed = self._scores.remove(score_id)
        if removed is None:
            raise InvalidReferenceError(resource_id=score_id)

        logger.info("Score deleted: %s", score_id)
        return ScoreResponse.model_validate(removed)
