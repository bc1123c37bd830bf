import random
import string
from datetime import datetime, timedelta, timezone

import pytest

from yxlp.randomizer import pick_many, pick_one, random_instant, random_token


def test_pick_one_returns_member():
    rng = random.Random(0)
    items = ["a", "b", "c"]
    for _ in range(50):
        assert pick_one(rng, items) in items


def test_pick_one_empty_raises():
    with pytest.raises(IndexError):
        pick_one(random.Random(0), [])


def test_pick_many_never_repeats():
    rng = random.Random(1)
    items = list(range(10))
    for count in range(1, 11):
        picked = pick_many(rng, items, count)
        assert len(picked) == count
        assert len(set(picked)) == count
        assert set(picked) <= set(items)


def test_pick_many_saturates_and_handles_non_positive():
    rng = random.Random(2)
    assert sorted(pick_many(rng, [1, 2, 3], 10)) == [1, 2, 3]
    assert pick_many(rng, [1, 2, 3], 0) == []
    assert pick_many(rng, [1, 2, 3], -4) == []
    assert pick_many(rng, [], 3) == []


def test_pick_many_leaves_input_untouched():
    items = [1, 2, 3, 4, 5]
    pick_many(random.Random(3), items, 3)
    assert items == [1, 2, 3, 4, 5]


def test_random_token_length_and_alphabet():
    rng = random.Random(4)
    allowed = set(string.ascii_letters + string.digits)
    for length in (0, 1, 6, 10, 32):
        token = random_token(rng, length)
        assert len(token) == length
        assert set(token) <= allowed
    assert random_token(rng, -1) == ""


def test_random_instant_within_bounds():
    rng = random.Random(5)
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    end = start + timedelta(days=30)
    for _ in range(200):
        ts = random_instant(rng, start, end)
        assert start <= ts <= end


def test_same_seed_same_draws():
    a, b = random.Random(99), random.Random(99)
    assert [random_token(a, 8) for _ in range(5)] == [random_token(b, 8) for _ in range(5)]
