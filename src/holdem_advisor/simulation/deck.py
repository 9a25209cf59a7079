"""Deck management for Monte Carlo trials."""

import random
from typing import Iterable, List, Optional

from holdem_advisor.models.card import Card, Rank, Suit

FULL_DECK = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


class Deck:
    """The 52-card deck minus a set of dead cards.

    The live cards are fixed at construction; every ``shuffled()`` call
    returns a fresh shuffled copy so trials never share a working list.
    """

    def __init__(self, dead: Iterable[Card] = (), rng: Optional[random.Random] = None):
        dead_set = set(dead)
        self.live: List[Card] = [c for c in FULL_DECK if c not in dead_set]
        self.rng = rng or random.Random()

    def shuffled(self) -> List[Card]:
        """Return a new uniformly shuffled list of the live cards."""
        cards = list(self.live)
        self.rng.shuffle(cards)
        return cards

    def deal(self, count: int) -> List[Card]:
        """Deal ``count`` cards from the top of a fresh shuffle.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.live):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.live)}")
        return self.shuffled()[:count]

    @property
    def remaining(self) -> int:
        """Get the number of live cards."""
        return len(self.live)

    def __len__(self) -> int:
        return len(self.live)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.live)})"
