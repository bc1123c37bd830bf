from __future__ import annotations

import random
import string
from datetime import datetime
from typing import List, Sequence, TypeVar


T = TypeVar("T")

_TOKEN_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits


def pick_one(rng: random.Random, items: Sequence[T]) -> T:
    if not items:
        raise IndexError("pick_one() from an empty sequence")
    return items[rng.randrange(len(items))]


def pick_many(rng: random.Random, items: Sequence[T], count: int) -> List[T]:
    # Same distribution as taking the head of a shuffled copy; saturates at len(items).
    return rng.sample(items, max(0, min(count, len(items))))


def random_token(rng: random.Random, length: int) -> str:
    return "".join(_TOKEN_CHARS[rng.randrange(len(_TOKEN_CHARS))] for _ in range(max(0, length)))


def random_instant(rng: random.Random, start: datetime, end: datetime) -> datetime:
    return start + (end - start) * rng.random()
