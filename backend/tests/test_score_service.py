"""
NoteScore Backend — Score Service Unit Tests
==============================================

What:  Tests for ScoreService business logic.

What we test:
    ✅ Synthetic seeding honours the configured count
    ✅ Search over the `note` field
    ✅ Update stores new values but returns the previous entry
    ✅ Unknown ids raise InvalidReferenceError ("Score does not exist")
"""

from unittest.mock import patch

import pytest

from notescore.exceptions import InvalidReferenceError
from notescore.services.score_service import ScoreService


class TestScoreServiceSeed:

    def test_default_seed_has_twenty_rows(self):
        assert ScoreService().count() == 20

    def test_seed_count_comes_from_settings(self):
        with patch("notescore.services.score_service.settings") as mock_settings:
            mock_settings.score_seed_count = 3
            mock_settings.score_seed = 99
            service = ScoreService()
        assert service.count() == 3

    def test_injected_rows_are_used_as_is(self, score_service, sample_scores):
        assert [s.id for s in score_service.list_scores()] == [s.id for s in sample_scores]


class TestScoreServiceList:

    def test_query_matches_note_case_insensitively(self, score_service):
        result = score_service.list_scores(query="soup")
        assert [s.id for s in result] == ["score-1", "score-3"]

    def test_no_query_returns_everything(self, score_service):
        assert score_service.count() == len(score_service.list_scores(query=None)) == 4


class TestScoreServiceCreate:

    def test_create_appends(self, score_service):
        created = score_service.create_score(note="Soup", score=5)

        assert created.note == "Soup"
        assert created.score == 5
        assert score_service.list_scores()[-1] == created


class TestScoreServiceUpdate:

    def test_update_returns_previous_value(self, score_service):
        returned = score_service.update_score("score-2", note="Green Curry", score=4)

        assert returned.id == "score-2"
        assert returned.note == "Pad Thai"
        assert returned.score == 11

        stored = score_service.list_scores()[1]
        assert stored.id == "score-2"
        assert stored.note == "Green Curry"
        assert stored.score == 4

    def test_update_unknown_id_raises(self, score_service, unknown_id):
        with pytest.raises(InvalidReferenceError) as exc_info:
            score_service.update_score(unknown_id, note="Soup", score=5)
        assert exc_info.value.message == "Score does not exist"


class TestScoreServiceDelete:

    def test_delete_removes_one(self, score_service):
        removed = score_service.delete_score("score-3")

        assert removed.note == "Mushroom SOUP"
        assert [s.id for s in score_service.list_scores()] == ["score-1", "score-2", "score-4"]

    def test_delete_unknown_id_raises(self, score_service, unknown_id):
        with pytest.raises(InvalidReferenceError):
            score_service.delete_score(unknown_id)
        assert score_service.count() == 4
