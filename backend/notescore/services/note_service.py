"""
NoteScore Backend — Note Service
==================================

What:  Business logic for the Notes collection: search, create, update, delete.
Why:   Keeps the collection rules out of the route handlers so they can be
       tested without HTTP.
How:   Owns a Collection[Note]; converts records to NoteResponse on the way out.
Who:   Called by routes/notes.py through the get_note_service dependency.
When:  Created once per application instance by create_app().

Error Handling:
    An unknown id raises NotFoundError, which main.py maps to
    HTTP 404 {"message": "NotFound"}.
"""

import dataclasses
import logging
from typing import Iterable, List, Optional

from notescore.exceptions import NotFoundError
from notescore.models import Note
from notescore.schemas.note import NoteResponse
from notescore.services.collection import Collection, contains_ignore_case
from notescore.services.seed import default_notes

logger = logging.getLogger(__name__)


class NoteService:
    """
    Owner of the Notes collection.

    Args:
        notes: Initial rows. None seeds the single default note; pass an
               empty list for an empty collection.
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: Collection[Note] = Collection(
            default_notes() if notes is None else notes
        )

    def count(self) -> int:
        return len(self._notes)

    def list_notes(self, query: Optional[str] = None) -> List[NoteResponse]:
        """
        Every note in insertion order, or only those whose text contains
        `query` (case-insensitive) when a non-empty query is given.
        """
        if not query:
            notes = self._notes.all()
        else:
            notes = self._notes.filter(lambda note: contains_ignore_case(note.text, query))
        return [NoteResponse.model_validate(note) for note in notes]

    def create_note(self, text: str) -> NoteResponse:
        note = self._notes.append(Note(text=text))
        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    def update_note(self, note_id: str, text: str) -> NoteResponse:
        """
        Replace the text of an existing note, keeping its id and position.

        Returns:
            The note as stored after the update.

        Raises:
            NotFoundError: No note has this id.
        """
        result = self._notes.replace(note_id, lambda note: dataclasses.replace(note, text=text))
        if result is None:
            logger.debug("Update of unknown note %s", note_id)
            raise NotFoundError(resource="note", resource_id=note_id)

        _, current = result
        logger.info("Note updated: %s", note_id)
        return NoteResponse.model_validate(current)

    def delete_note(self, note_id: str) -> NoteResponse:
        """
        Remove a note and return the value it held.

        Raises:
            NotFoundError: No note has this id.
        """
        removed = self._notes.remove(note_id)
        if removed is None:
            logger.debug("Delete of unknown note %s", note_id)
            raise NotFoundError(resource="note", resource_id=note_id)

        logger.info("Note deleted: %s", note_id)
        return NoteResponse.model_validate(removed)
