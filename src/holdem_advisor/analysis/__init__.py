"""Spot analysis combining simulation and recommendation."""

from holdem_advisor.analysis.spot import SpotAnalyzer, analyze_spot

__all__ = ["SpotAnalyzer", "analyze_spot"]
