"""Hand evaluation and Monte Carlo equity simulation."""

from holdem_advisor.simulation.deck import Deck, FULL_DECK
from holdem_advisor.simulation.evaluator import HandEvaluator, HandRank, HandScore, evaluate_best
from holdem_advisor.simulation.equity import EquitySimulator, simulate

__all__ = [
    "Deck", "FULL_DECK",
    "HandEvaluator", "HandRank", "HandScore", "evaluate_best",
    "EquitySimulator", "simulate",
]
