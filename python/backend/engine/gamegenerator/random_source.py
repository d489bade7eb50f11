"""Injectable randomness for the scrambler.

Anything with a ``random() -> float`` method returning values in ``[0, 1)``
will do; :class:`random.Random` instances qualify as-is.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Protocol


class RandomSource(Protocol):
    """The scrambler's single `next()` capability, spelled ``random()``."""

    def random(self) -> float: ...


def seeded_random(seed: int | None = None) -> random.Random:
    """Return a reproducible source for *seed* (fresh entropy when ``None``)."""
    return random.Random(seed)


def daily_seed(day: date) -> int:
    """Seed shared by every player on *day*, e.g. ``20261019``."""
    return int(day.strftime("%Y%m%d"))


def daily_random(day: date | None = None) -> random.Random:
    """Return the puzzle-of-the-day source for *day* (today by default)."""
    return seeded_random(daily_seed(day or date.today()))
