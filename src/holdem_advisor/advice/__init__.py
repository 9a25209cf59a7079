"""Move recommendation."""

from holdem_advisor.advice.recommender import MoveRecommender, recommend

__all__ = ["MoveRecommender", "recommend"]
