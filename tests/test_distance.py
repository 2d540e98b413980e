# tests/test_distance.py
import random

import pytest

from spellcheck_assistant.core.distance import levenshtein


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("the", "thy", 1),
        ("the", "tea", 2),
        ("teh", "the", 2),  # transposition costs two edits
        ("quikc", "quick", 2),
        ("same", "same", 0),
    ],
)
def test_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


def _sample(rng, n=60):
    alphabet = "abc"
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 6))) for _ in range(n)]


def test_metric_properties_on_sampled_strings():
    rng = random.Random(7)
    words = _sample(rng)
    for x in words:
        assert levenshtein(x, x) == 0
    for _ in range(400):
        x, y, z = rng.choice(words), rng.choice(words), rng.choice(words)
        assert levenshtein(x, y) == levenshtein(y, x)
        assert levenshtein(x, z) <= levenshtein(x, y) + levenshtein(y, z)
        if x != y:
            assert levenshtein(x, y) > 0


def test_distance_bounded_by_longer_length():
    assert levenshtein("abc", "xyz") == 3
    assert levenshtein("ab", "wxyz") == 4
