"""Data models for the hold'em advisor."""

from holdem_advisor.models.card import Card, Rank, Suit
from holdem_advisor.models.action import Street
from holdem_advisor.models.position import Position
from holdem_advisor.models.simulation import (
    SimulationResult, Recommendation, SpotRequest, SpotAnalysis
)

__all__ = [
    "Card", "Rank", "Suit",
    "Street",
    "Position",
    "SimulationResult", "Recommendation", "SpotRequest", "SpotAnalysis",
]
