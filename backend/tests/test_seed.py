"""
NoteScore Backend — Seed Data Tests
=====================================

What:  Tests for the initial rows of both collections.
"""

from notescore.models.note import TEXT_MAX_LENGTH, TEXT_MIN_LENGTH
from notescore.models.score import NOTE_MAX_LENGTH, NOTE_MIN_LENGTH, SCORE_MAX, SCORE_MIN
from notescore.services.seed import default_notes, generate_scores


class TestDefaultNotes:

    def test_single_first_note(self):
        notes = default_notes()
        assert len(notes) == 1
        assert notes[0].text == "First note"
        assert TEXT_MIN_LENGTH <= len(notes[0].text) <= TEXT_MAX_LENGTH

    def test_fresh_id_per_call(self):
        assert default_notes()[0].id != default_notes()[0].id


class TestGenerateScores:

    def test_default_count_is_twenty(self):
        assert len(generate_scores()) == 20

    def test_rows_satisfy_constraints(self):
        scores = generate_scores(count=50, seed=7)
        assert len({s.id for s in scores}) == 50
        for entry in scores:
            assert NOTE_MIN_LENGTH <= len(entry.note) <= NOTE_MAX_LENGTH
            assert SCORE_MIN <= entry.score <= SCORE_MAX

    def test_same_seed_is_reproducible(self):
        assert generate_scores(count=10, seed=42) == generate_scores(count=10, seed=42)

    def test_different_seeds_differ(self):
        first = [s.id for s in generate_scores(count=5, seed=1)]
        second = [s.id for s in generate_scores(count=5, seed=2)]
        assert first != second

    def test_zero_count(self):
        assert generate_scores(count=0) == []
