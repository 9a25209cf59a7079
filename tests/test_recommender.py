"""Tests for the move recommendation.

The recommender is a fixed decision table with no history or learning, so
each test pins one row of the table.
"""

import pytest

from holdem_advisor.advice.recommender import MoveRecommender, recommend
from holdem_advisor.errors import (
    HoldemAdvisorError, InvalidBoardSizeError, InvalidTableContextError,
)
from holdem_advisor.models.action import Street
from holdem_advisor.models.position import Position


def rec(equity_pct, to_call=0.0, pot_size=100.0, opponents=1,
        position=Position.MIDDLE, stack_bb=100.0, board_count=0):
    return recommend(equity_pct, opponents, position, pot_size, to_call, stack_bb, board_count)


class TestNoBetFacing:
    """Rows used when to_call is zero."""

    def test_value_bet(self):
        r = rec(70)
        assert r.action == "Value Bet / Raise"
        assert "70.0%" in r.reason

    def test_short_stack_jam(self):
        assert rec(70, stack_bb=20).action == "Aggressive Bet / Jam"
        assert rec(70, stack_bb=20.5).action == "Value Bet / Raise"

    def test_strong_threshold_inclusive(self):
        assert rec(62).action == "Value Bet / Raise"
        assert rec(61.9).action == "Check or Small Probe Bet"

    def test_check_or_small_bet(self):
        r = rec(50)
        assert r.action == "Check or Small Probe Bet"
        assert "50.0%" in r.reason

    def test_check_fold(self):
        assert rec(44.9).action == "Check / Fold to Heavy Action"
        assert rec(0).action == "Check / Fold to Heavy Action"

    def test_position_bias(self):
        # 0.61 + 0.015 late bias crosses 0.62; early bias does not
        assert rec(61, position=Position.LATE).action == "Value Bet / Raise"
        assert rec(63, position=Position.EARLY).action == "Check or Small Probe Bet"
        assert rec(64, position=Position.BLIND).action == "Value Bet / Raise"

    def test_multiway_penalty(self):
        # 0.66 - 2 * 0.015 = 0.63 with three opponents, 0.60 with five
        assert rec(66, opponents=3).action == "Value Bet / Raise"
        assert rec(66, opponents=5).action == "Check or Small Probe Bet"


class TestFacingBet:
    """Rows used when to_call is positive."""

    def test_fold_example(self):
        r = rec(30, to_call=50, pot_size=50)
        assert r.action == "Fold"
        assert "50.0%" in r.reason

    def test_call(self):
        # pot odds 20 / 120 = 0.1667, edge 0.0333
        r = rec(20, to_call=20, pot_size=100)
        assert r.action == "Call"
        assert "16.7%" in r.reason

    def test_call_near_fold_boundary(self):
        # pot odds 0.5, edge -0.01
        assert rec(49, to_call=50, pot_size=50).action == "Call"

    def test_raise(self):
        # pot odds 0.1667, edge 0.4333
        r = rec(60, to_call=20, pot_size=100)
        assert r.action == "Raise"
        assert "43.3 pts" in r.reason

    def test_raise_jam_short(self):
        assert rec(60, to_call=20, pot_size=100, stack_bb=15).action == "Raise / Jam"

    def test_adjusted_equity_floor(self):
        recommender = MoveRecommender()
        assert recommender.adjusted_equity(1, 8, Position.EARLY) == 0.0
        assert rec(1, to_call=10, pot_size=0, opponents=8, position=Position.EARLY).action == "Fold"

    def test_pot_odds(self):
        assert MoveRecommender.pot_odds(50, 50) == 0.5
        assert MoveRecommender.pot_odds(100, 0) == 0.0

    def test_negative_call_means_no_bet(self):
        assert rec(70, to_call=-10).action == "Value Bet / Raise"
        assert rec(30, to_call=-10).action == "Check / Fold to Heavy Action"

    def test_negative_pot_clamped(self):
        # pot 0 makes the pot odds 1.0
        assert rec(50, to_call=10, pot_size=-100).action == "Fold"


class TestStreet:
    """Street labels from board size."""

    @pytest.mark.parametrize("count, street", [
        (0, Street.PREFLOP), (3, Street.FLOP), (4, Street.TURN), (5, Street.RIVER),
    ])
    def test_street(self, count, street):
        r = rec(50, board_count=count)
        assert r.street == street
        assert str(r).startswith(street.value)

    def test_bad_board_count(self):
        with pytest.raises(InvalidBoardSizeError):
            rec(50, board_count=2)

    def test_position_from_string(self):
        assert rec(61, position="BTN").action == "Value Bet / Raise"
        assert rec(61, position="late").action == "Value Bet / Raise"

    def test_unknown_position(self):
        with pytest.raises(HoldemAdvisorError):
            recommend(50, 1, "dealer", 100, 10, 100, 0)


class TestPosition:
    """Seat group parsing."""

    @pytest.mark.parametrize("text, position", [
        ("late", Position.LATE), ("  Early ", Position.EARLY),
        ("BTN", Position.LATE), ("utg+1", Position.EARLY),
        ("HJ", Position.MIDDLE), ("BB", Position.BLIND),
    ])
    def test_parse(self, text, position):
        assert Position.parse(text) is position

    def test_parse_passes_members_through(self):
        assert Position.parse(Position.BLIND) is Position.BLIND

    def test_unknown_is_table_context_error(self):
        with pytest.raises(InvalidTableContextError) as info:
            Position.parse("dealer")
        assert isinstance(info.value, ValueError)
