"""
NoteScore Backend — Collection Unit Tests
===========================================

What:  Tests for the ordered, id-addressed container both services share.

What we test:
    ✅ Insertion order is kept by append, replace and remove
    ✅ Duplicate ids are rejected
    ✅ replace() returns (previous, current) and refuses id changes
    ✅ Unknown ids return None instead of raising
    ✅ Case-insensitive substring matching
"""

import dataclasses

import pytest

from notescore.models import Note
from notescore.services.collection import Collection, contains_ignore_case


def make_collection():
    return Collection([Note(id="a", text="alpha text"), Note(id="b", text="bravo text"),
                       Note(id="c", text="charlie text")])


class TestCollectionOrdering:

    def test_all_returns_insertion_order(self):
        collection = make_collection()
        assert [n.id for n in collection.all()] == ["a", "b", "c"]

    def test_append_goes_to_the_end(self):
        collection = make_collection()
        collection.append(Note(id="d", text="delta text"))
        assert [n.id for n in collection.all()] == ["a", "b", "c", "d"]
        assert len(collection) == 4

    def test_replace_keeps_position(self):
        collection = make_collection()
        collection.replace("b", lambda n: dataclasses.replace(n, text="changed text"))
        assert [n.id for n in collection.all()] == ["a", "b", "c"]
        assert collection.get("b").text == "changed text"

    def test_remove_keeps_relative_order(self):
        collection = make_collection()
        removed = collection.remove("b")
        assert removed.id == "b"
        assert [n.id for n in collection.all()] == ["a", "c"]

    def test_all_is_a_snapshot(self):
        collection = make_collection()
        snapshot = collection.all()
        collection.remove("a")
        assert len(snapshot) == 3


class TestCollectionIds:

    def test_duplicate_id_rejected_on_append(self):
        collection = make_collection()
        with pytest.raises(ValueError, match="Duplicate id"):
            collection.append(Note(id="a", text="another alpha"))
        assert len(collection) == 3

    def test_duplicate_id_rejected_on_construction(self):
        with pytest.raises(ValueError):
            Collection([Note(id="x", text="first x"), Note(id="x", text="second x")])

    def test_replace_returns_previous_and_current(self):
        collection = make_collection()
        previous, current = collection.replace(
            "a", lambda n: dataclasses.replace(n, text="new alpha")
        )
        assert previous.text == "alpha text"
        assert current.text == "new alpha"

    def test_replace_cannot_change_id(self):
        collection = make_collection()
        with pytest.raises(ValueError, match="immutable"):
            collection.replace("a", lambda n: Note(id="z", text=n.text))
        assert collection.get("a") is not None

    def test_unknown_id_returns_none(self):
        collection = make_collection()
        assert collection.get("missing") is None
        assert collection.replace("missing", lambda n: n) is None
        assert collection.remove("missing") is None
        assert len(collection) == 3


class TestContainsIgnoreCase:

    @pytest.mark.parametrize("value,query,expected", [
        ("Hello world", "hello", True),
        ("Hello world", "LO WO", True),
        ("Hello world", "world!", False),
        ("Tomato Soup", "soup", True),
        ("Pad Thai", "soup", False),
    ])
    def test_matching(self, value, query, expected):
        assert contains_ignore_case(value, query) is expected
