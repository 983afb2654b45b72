"""
NoteScore Backend — Seed Data
===============================

What:  Initial rows placed in each collection before the first request.
Who:   Called by NoteService / ScoreService when no explicit rows are given.
How:   Notes get a single fixed row. Scores get synthetic dish/rating pairs
       generated with Faker; passing `seed` makes the output (ids included)
       reproducible, which is what tests rely on.
"""

import logging
from typing import List, Optional

from faker import Faker

from notescore.models import Note, Score
from notescore.models.score import SCORE_MAX, SCORE_MIN

logger = logging.getLogger(__name__)

# Every name satisfies the 4-100 character limit on Score.note
DISHES = (
    "Beef Wellington",
    "Bibimbap",
    "Caesar Salad",
    "Chicken Parmigiana",
    "Chili con Carne",
    "Fish and Chips",
    "French Onion Soup",
    "Katsu Curry",
    "Lasagne",
    "Massaman Curry",
    "Moussaka",
    "Pad Thai",
    "Paella",
    "Peking Duck",
    "Pierogi",
    "Pizza Margherita",
    "Ramen",
    "Risotto alla Milanese",
    "Shakshuka",
    "Som Tam",
    "Spaghetti Carbonara",
    "Tacos al Pastor",
    "Tom Yum Goong",
    "Wiener Schnitzel",
)


def default_notes() -> List[Note]:
    return [Note(text="First note")]


def generate_scores(count: int = 20, seed: Optional[int] = None) -> List[Score]:
    """
    Build `count` synthetic Score rows.

    Args:
        count: Number of rows to produce.
        seed:  Faker seed. None gives a different set on every call.

    Returns:
        List of Score records with unique ids, dish names and ratings in [1, 12].
    """
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    scores = [
        Score(
            id=fake.uuid4(),
            note=fake.random_element(elements=DISHES),
            score=fake.random_int(min=SCORE_MIN, max=SCORE_MAX),
        )
        for _ in range(count)
    ]
    logger.debug("Generated %d seed scores (seed=%s)", len(scores), seed)
    return scores
