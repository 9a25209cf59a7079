"""Output formatters."""

from holdem_advisor.formatters.table import TableFormatter

__all__ = ["TableFormatter"]
