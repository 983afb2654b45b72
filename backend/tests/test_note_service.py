"""
NoteScore Backend — Note Service Unit Tests
=============================================

What:  Tests for NoteService business logic (list, create, update, delete).
How:   Services are built on fixed seed rows (see conftest.py); no HTTP.

What we test:
    ✅ Default seeding and injected seed rows
    ✅ Search returns exactly the case-insensitive matches, in order
    ✅ Create appends a note with a fresh id
    ✅ Update keeps id, position and length
    ✅ Delete removes exactly one note
    ✅ Unknown ids raise NotFoundError
"""

import pytest

from notescore.exceptions import NotFoundError
from notescore.services.note_service import NoteService


class TestNoteServiceSeed:

    def test_default_seed_is_first_note(self):
        service = NoteService()
        notes = service.list_notes()
        assert [n.text for n in notes] == ["First note"]

    def test_empty_seed(self):
        service = NoteService(notes=[])
        assert service.count() == 0
        assert service.list_notes() == []


class TestNoteServiceList:

    def test_no_query_returns_everything_in_order(self, note_service):
        assert [n.id for n in note_service.list_notes()] == ["note-1", "note-2", "note-3"]

    def test_empty_query_returns_everything(self, note_service):
        assert len(note_service.list_notes(query="")) == 3

    def test_query_is_case_insensitive_substring(self, note_service):
        result = note_service.list_notes(query="hello")
        assert [n.id for n in result] == ["note-2"]

    def test_query_partitions_the_collection(self, note_service):
        everything = note_service.list_notes()
        matched = note_service.list_notes(query="NOTE")
        matched_ids = {n.id for n in matched}
        for note in everything:
            assert ("note" in note.text.lower()) == (note.id in matched_ids)

    def test_query_without_matches(self, note_service):
        assert note_service.list_notes(query="zzzz") == []


class TestNoteServiceCreate:

    def test_create_appends_with_fresh_id(self, note_service):
        existing = {n.id for n in note_service.list_notes()}

        created = note_service.create_note(text="Hello world")

        assert created.text == "Hello world"
        assert created.id not in existing
        notes = note_service.list_notes()
        assert notes[-1] == created
        assert len(notes) == 4

    def test_created_ids_are_unique(self, note_service):
        ids = {note_service.create_note(text=f"note number {i}").id for i in range(25)}
        assert len(ids) == 25


class TestNoteServiceUpdate:

    def test_update_replaces_text_in_place(self, note_service):
        updated = note_service.update_note("note-2", text="Completely new text")

        assert updated.id == "note-2"
        assert updated.text == "Completely new text"
        notes = note_service.list_notes()
        assert [n.id for n in notes] == ["note-1", "note-2", "note-3"]
        assert notes[1].text == "Completely new text"

    def test_update_unknown_id_raises(self, note_service, unknown_id):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.update_note(unknown_id, text="whatever")
        assert exc_info.value.message == "NotFound"
        assert exc_info.value.resource_id == unknown_id
        assert note_service.count() == 3


class TestNoteServiceDelete:

    def test_delete_returns_removed_note(self, note_service):
        removed = note_service.delete_note("note-1")

        assert removed.id == "note-1"
        assert removed.text == "First note"
        ids = [n.id for n in note_service.list_notes()]
        assert ids == ["note-2", "note-3"]

    def test_delete_twice_raises(self, note_service):
        note_service.delete_note("note-3")
        with pytest.raises(NotFoundError):
            note_service.delete_note("note-3")
        assert note_service.count() == 2
