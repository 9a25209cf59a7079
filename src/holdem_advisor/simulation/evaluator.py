"""Hand evaluation: best five-card score out of five to seven cards."""

from enum import IntEnum
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from holdem_advisor.errors import InvalidHandError
from holdem_advisor.models.card import Card

# (category, tiebreak, ...). Plain tuple ordering is the hand ordering:
# a shorter tuple that prefixes a longer one compares lower.
HandScore = Tuple[int, ...]


class HandRank(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


HAND_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
}


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate_best(cards: Sequence[Card]) -> HandScore:
        """Score the best five-card hand contained in ``cards``.

        Args:
            cards: Five, six or seven distinct cards, in any order.

        Returns:
            HandScore tuple; larger is better.

        Raises:
            InvalidHandError: Wrong number of cards or a duplicated card.
        """
        if len(cards) < 5 or len(cards) > 7:
            raise InvalidHandError(f"Need 5 to 7 cards, got {len(cards)}")
        if len(set(cards)) != len(cards):
            raise InvalidHandError(
                f"Duplicate card in hand: {' '.join(c.code for c in cards)}")
        return HandEvaluator._best_of(
            [(c.rank.numeric_value, c.suit.value) for c in cards])

    @staticmethod
    def _best_of(cards: List[Tuple[int, str]]) -> HandScore:
        """Best score over every 5-card subset of pre-validated (value, suit) pairs."""
        if len(cards) == 5:
            return HandEvaluator._evaluate_five(cards)
        best: HandScore = ()
        for combo in combinations(cards, 5):
            score = HandEvaluator._evaluate_five(combo)
            if score > best:
                best = score
        return best

    @staticmethod
    def _evaluate_five(cards: Sequence[Tuple[int, str]]) -> HandScore:
        """Evaluate exactly 5 cards."""
        ranks = sorted([value for value, _ in cards], reverse=True)
        first_suit = cards[0][1]
        is_flush = all(suit == first_suit for _, suit in cards)
        straight_high = HandEvaluator._straight_high(ranks)

        # Count rank frequencies
        rank_counts: Dict[int, int] = {}
        for r in ranks:
            rank_counts[r] = rank_counts.get(r, 0) + 1

        # Groups ordered by (count desc, rank desc)
        groups = sorted(rank_counts.items(), key=lambda item: (-item[1], -item[0]))
        top_rank, top_count = groups[0]
        second_count = groups[1][1] if len(groups) > 1 else 0

        if is_flush and straight_high:
            return (HandRank.STRAIGHT_FLUSH, straight_high)

        if top_count == 4:
            return (HandRank.FOUR_OF_A_KIND, top_rank, groups[1][0])

        if top_count == 3 and second_count == 2:
            return (HandRank.FULL_HOUSE, top_rank, groups[1][0])

        if is_flush:
            return (HandRank.FLUSH, *ranks)

        if straight_high:
            return (HandRank.STRAIGHT, straight_high)

        kickers = [rank for rank, count in groups if count == 1]

        if top_count == 3:
            return (HandRank.THREE_OF_A_KIND, top_rank, *kickers)

        if top_count == 2 and second_count == 2:
            # groups already put the higher pair first
            return (HandRank.TWO_PAIR, top_rank, groups[1][0], *kickers)

        if top_count == 2:
            return (HandRank.ONE_PAIR, top_rank, *kickers)

        return (HandRank.HIGH_CARD, *ranks)

    @staticmethod
    def _straight_high(ranks: Sequence[int]) -> Optional[int]:
        """Highest card of the best run of five ranks, or None.

        The ace also plays low, so A-2-3-4-5 returns 5.
        """
        unique = sorted(set(ranks))
        if 14 in unique:
            unique.insert(0, 1)

        streak = 1
        high = None
        for prev, cur in zip(unique, unique[1:]):
            if cur == prev + 1:
                streak += 1
                if streak >= 5:
                    high = cur
            else:
                streak = 1
        return high

    @staticmethod
    def compare(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
        """Compare two hands.

        Returns:
            1 if cards1 wins, -1 if cards2 wins, 0 if tie.
        """
        score1 = HandEvaluator.evaluate_best(cards1)
        score2 = HandEvaluator.evaluate_best(cards2)
        return (score1 > score2) - (score1 < score2)

    @staticmethod
    def get_winners(scores: Sequence[HandScore]) -> List[int]:
        """Indices of every score tied for the maximum."""
        if not scores:
            return []
        best = max(scores)
        return [i for i, score in enumerate(scores) if score == best]

    @staticmethod
    def get_rank_name(score: HandScore) -> str:
        """Get a human-readable name for a hand score."""
        return HAND_NAMES[HandRank(score[0])]


def evaluate_best(cards: Sequence[Card]) -> HandScore:
    return HandEvaluator.evaluate_best(cards)
