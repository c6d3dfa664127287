"""
Secret Selection Strategies

A strategy maps a selection context to an index into the candidate set.
"""

import hashlib
import random
from datetime import date
from typing import Optional, Sequence, Union

SelectionContext = Union[date, str, None]


class RandomSelection:
    """Uniform random pick; the context is ignored."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def __call__(self, candidates: Sequence[str], context: SelectionContext = None) -> int:
        return self.rng.randrange(len(candidates))


class DailySelection:
    """Same pick for everyone on a given date."""

    name = "daily"

    def __init__(self, salt: str = "guessgrid"):
        self.salt = salt

    def __call__(self, candidates: Sequence[str], context: SelectionContext = None) -> int:
        if context is None:
            context = date.today()
        day = context.isoformat() if isinstance(context, date) else str(context)
        digest = hashlib.sha256(f"{day}::{self.salt}".encode("utf-8")).hexdigest()
        return int(digest, 16) % len(candidates)


SELECTION_STRATEGIES = {
    RandomSelection.name: RandomSelection,
    DailySelection.name: DailySelection,
}


def get_selection_strategy(name: str):
    """Instantiate a selection strategy by name ("random" or "daily")."""
    try:
        return SELECTION_STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown selection mode '{name}'. Must be one of: {', '.join(SELECTION_STRATEGIES)}"
        ) from None
