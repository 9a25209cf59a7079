"""Simulation data models: requests and results."""

from dataclasses import dataclass, field
from typing import List, Optional

from holdem_advisor import config
from holdem_advisor.models.action import Street
from holdem_advisor.models.card import Card
from holdem_advisor.models.position import Position


@dataclass(frozen=True)
class SimulationResult:
    """Outcome tallies of one Monte Carlo run.

    ``equity_share`` is the sum of pot shares credited to the hero: 1 per
    outright win and 1/n per n-way chop.
    """
    wins: int
    ties: int
    losses: int
    iterations: int
    equity_share: float

    @property
    def win_pct(self) -> float:
        return 100.0 * self.wins / self.iterations

    @property
    def tie_pct(self) -> float:
        return 100.0 * self.ties / self.iterations

    @property
    def loss_pct(self) -> float:
        return 100.0 * self.losses / self.iterations

    @property
    def equity_pct(self) -> float:
        return 100.0 * self.equity_share / self.iterations

    def summary_dict(self) -> dict:
        return {
            "Win%": self.win_pct,
            "Tie%": self.tie_pct,
            "Loss%": self.loss_pct,
            "Equity%": self.equity_pct,
        }


@dataclass(frozen=True)
class Recommendation:
    """A suggested action with its justification."""
    street: Street
    action: str
    reason: str

    def __str__(self) -> str:
        return f"{self.street.value}: {self.action}"


@dataclass
class SpotRequest:
    """Everything a caller collects before asking for advice on a spot."""
    hero_cards: List[str]
    board_cards: List[str] = field(default_factory=list)
    opponents: int = config.DEFAULT_OPPONENTS
    position: Position = field(
        default_factory=lambda: Position.parse(config.DEFAULT_POSITION))
    pot_size: float = config.DEFAULT_POT
    to_call: float = config.DEFAULT_TO_CALL
    stack_bb: float = config.DEFAULT_STACK_BB
    iterations: int = config.DEFAULT_ITERATIONS
    seed: Optional[int] = None


@dataclass(frozen=True)
class SpotAnalysis:
    """Simulation plus recommendation for one spot."""
    hero_cards: List[Card]
    board_cards: List[Card]
    result: SimulationResult
    recommendation: Recommendation
