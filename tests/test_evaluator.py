"""Tests for best-of-N hand evaluation."""

import random
from itertools import combinations, permutations

import pytest

from holdem_advisor.errors import ErrorKind, InvalidHandError
from holdem_advisor.models.card import parse_cards, split_codes
from holdem_advisor.simulation.deck import FULL_DECK
from holdem_advisor.simulation.evaluator import HandEvaluator, HandRank, evaluate_best


def hand(codes: str):
    return parse_cards(split_codes(codes))


class TestFiveCardCategories:
    """Each category with its exact tiebreak sequence."""

    @pytest.mark.parametrize("codes, expected", [
        ("As Ks Qs Js Ts", (8, 14)),
        ("9h 8h 7h 6h 5h", (8, 9)),
        ("5d 4d 3d 2d Ad", (8, 5)),
        ("Ac Ad Ah As 7c", (7, 14, 7)),
        ("Kc Kd Kh 2s 2c", (6, 13, 2)),
        ("Ah Jh 9h 4h 2h", (5, 14, 11, 9, 4, 2)),
        ("Tc 9d 8h 7s 6c", (4, 10)),
        ("Ac 2d 3h 4s 5c", (4, 5)),
        ("7c 7d 7h Ks 2c", (3, 7, 13, 2)),
        ("Jc Jd 4h 4s Ac", (2, 11, 4, 14)),
        ("Qc Qd 9h 5s 3c", (1, 12, 9, 5, 3)),
        ("Ac Jd 9h 5s 3c", (0, 14, 11, 9, 5, 3)),
    ])
    def test_category_and_tiebreak(self, codes, expected):
        assert evaluate_best(hand(codes)) == expected

    def test_royal_flush_is_straight_flush(self):
        score = evaluate_best(hand("As Ks Qs Js Ts"))
        assert score[0] == HandRank.STRAIGHT_FLUSH
        assert HandEvaluator.get_rank_name(score) == "Straight Flush"

    def test_wheel_between_nine_high_and_broadway(self):
        wheel = evaluate_best(hand("Ac 2d 3h 4s 5c"))
        six_high = evaluate_best(hand("2c 3d 4h 5s 6c"))
        broadway = evaluate_best(hand("Ac Kd Qh Js Tc"))
        assert wheel < six_high < broadway

    def test_ace_does_not_wrap(self):
        score = evaluate_best(hand("Qc Kd Ah 2s 3c"))
        assert score[0] == HandRank.HIGH_CARD

    def test_kicker_breaks_pair_tie(self):
        better = evaluate_best(hand("Qc Qd Ah 5s 3c"))
        worse = evaluate_best(hand("Qh Qs Kh 5d 3d"))
        assert better > worse

    def test_category_dominates_tiebreak(self):
        low_straight = evaluate_best(hand("Ac 2d 3h 4s 5c"))
        trip_aces = evaluate_best(hand("Ac Ad Ah Ks Qc"))
        assert low_straight > trip_aces


class TestBestOfN:
    """Six and seven card sets."""

    def test_seven_cards_picks_flush_over_straight(self):
        score = evaluate_best(hand("9h 8h 7c 6h 5d 2h Ah"))
        assert score == (5, 14, 9, 8, 6, 2)

    def test_seven_cards_full_house_from_two_trips(self):
        score = evaluate_best(hand("Kc Kd Kh 9s 9c 9d 2c"))
        assert score == (6, 13, 9)

    def test_six_cards_wheel_with_extra(self):
        score = evaluate_best(hand("Ac 2d 3h 4s 5c Kd"))
        assert score == (4, 5)

    def test_best_dominates_every_subset(self):
        rng = random.Random(7)
        for size in (6, 7):
            for _ in range(40):
                cards = rng.sample(FULL_DECK, size)
                best = evaluate_best(cards)
                subsets = [evaluate_best(list(c)) for c in combinations(cards, 5)]
                assert all(best >= s for s in subsets)
                assert best == max(subsets)

    def test_permutation_invariance(self):
        cards = hand("Ts 9s 8d 7c 6s Ad Ah")
        expected = evaluate_best(cards)
        for order in list(permutations(cards))[::97]:
            assert evaluate_best(list(order)) == expected

    def test_board_chop(self):
        board = hand("As Ks Qs Js Ts")
        first = evaluate_best(board + hand("2c 3d"))
        second = evaluate_best(board + hand("7h 8h"))
        assert first == second == (8, 14)
        assert HandEvaluator.compare(board + hand("2c 3d"), board + hand("7h 8h")) == 0


class TestInvalidHands:
    """Size and duplicate checks."""

    @pytest.mark.parametrize("codes", ["As Ks Qs Js", "As Ks Qs Js Ts 9s 8s 7s", ""])
    def test_wrong_size(self, codes):
        with pytest.raises(InvalidHandError) as exc:
            evaluate_best(hand(codes))
        assert exc.value.kind == ErrorKind.INVALID_HAND

    def test_duplicate_card(self):
        with pytest.raises(InvalidHandError):
            evaluate_best(hand("As As Qs Js Ts"))


class TestHelpers:
    """compare and get_winners."""

    def test_compare(self):
        pair = hand("Ac Ad 8h 5s 2c")
        high = hand("Kc Qd Jh Ts 8c")
        assert HandEvaluator.compare(pair, high) == 1
        assert HandEvaluator.compare(high, pair) == -1

    def test_get_winners(self):
        scores = [(1, 10, 9, 8, 7), (2, 5, 4, 3), (2, 5, 4, 3)]
        assert HandEvaluator.get_winners(scores) == [1, 2]
        assert HandEvaluator.get_winners([]) == []
