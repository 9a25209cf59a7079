"""Baseline move recommendation from simulated equity and pot odds.

This is a fixed, stateless decision table: the same inputs always give the
same action. Thresholds are product-tuned constants and are kept as literals.
"""

from typing import Union

from holdem_advisor.models.action import Street
from holdem_advisor.models.position import Position
from holdem_advisor.models.simulation import Recommendation


class MoveRecommender:
    """Turns an equity estimate and table context into a suggested action."""

    STRONG_EQUITY = 0.62
    MEDIUM_EQUITY = 0.45
    FOLD_EDGE = -0.02
    RAISE_EDGE = 0.12
    MULTIWAY_PENALTY = 0.015
    SHORT_STACK_BB = 20

    def adjusted_equity(self, equity_pct: float, opponents: int, position: Position) -> float:
        """Raw equity shifted by seat and reduced for every extra opponent."""
        equity = equity_pct / 100
        multiway_penalty = max(0, opponents - 1) * self.MULTIWAY_PENALTY
        return max(0.0, equity + position.bias - multiway_penalty)

    @staticmethod
    def pot_odds(pot_size: float, to_call: float) -> float:
        """Share of the final pot the hero must put in to call."""
        if to_call <= 0:
            return 0.0
        return to_call / (pot_size + to_call)

    def recommend(self, equity_pct: float, opponents: int,
                  position: Union[Position, str], pot_size: float,
                  to_call: float, stack_bb: float,
                  board_count: int) -> Recommendation:
        """Pick an action for the current spot.

        Args:
            equity_pct: Simulated equity, 0-100.
            opponents: Number of opponents still in the hand.
            position: Seat group of the hero.
            pot_size: Pot before the hero acts.
            to_call: Amount the hero must call; 0 when not facing a bet.
            stack_bb: Effective stack in big blinds.
            board_count: Number of community cards (0, 3, 4 or 5).

        Returns:
            Recommendation with street, action and reason.
        """
        position = Position.parse(position)
        street = Street.from_board_count(board_count)
        adjusted = self.adjusted_equity(equity_pct, opponents, position)
        short_stacked = stack_bb <= self.SHORT_STACK_BB
        to_call = max(0.0, to_call)
        pot_size = max(0.0, pot_size)

        if to_call == 0:
            if adjusted >= self.STRONG_EQUITY:
                return Recommendation(
                    street=street,
                    action="Aggressive Bet / Jam" if short_stacked else "Value Bet / Raise",
                    reason=f"Strong estimated equity ({equity_pct:.1f}%) with no call pressure.",
                )
            if adjusted >= self.MEDIUM_EQUITY:
                return Recommendation(
                    street=street,
                    action="Check or Small Probe Bet",
                    reason=f"Medium strength spot ({equity_pct:.1f}%) where pot control is reasonable.",
                )
            return Recommendation(
                street=street,
                action="Check / Fold to Heavy Action",
                reason=f"Equity is likely too low ({equity_pct:.1f}%) for building a big pot.",
            )

        pot_odds = self.pot_odds(pot_size, to_call)
        edge = adjusted - pot_odds

        if edge < self.FOLD_EDGE:
            return Recommendation(
                street=street,
                action="Fold",
                reason=(f"Estimated equity ({equity_pct:.1f}%) is below pot-odds "
                        f"requirement ({pot_odds * 100:.1f}%)."),
            )
        if edge > self.RAISE_EDGE:
            return Recommendation(
                street=street,
                action="Raise / Jam" if short_stacked else "Raise",
                reason=f"Large equity edge over pot odds ({edge * 100:.1f} pts).",
            )
        return Recommendation(
            street=street,
            action="Call",
            reason=f"Equity is close to or above pot-odds threshold ({pot_odds * 100:.1f}%).",
        )


def recommend(equity_pct: float, opponents: int, position: Union[Position, str],
              pot_size: float, to_call: float, stack_bb: float,
              board_count: int) -> Recommendation:
    return MoveRecommender().recommend(
        equity_pct, opponents, position, pot_size, to_call, stack_bb, board_count)
