"""Input validation errors raised by the evaluator, simulator and advisor."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds a caller may need to distinguish."""
    INVALID_CARD = "invalid_card"
    DUPLICATE_CARD = "duplicate_card"
    INVALID_BOARD_SIZE = "invalid_board_size"
    INVALID_OPPONENT_COUNT = "invalid_opponent_count"
    INVALID_HAND = "invalid_hand"
    INVALID_ITERATIONS = "invalid_iterations"
    INVALID_TABLE_CONTEXT = "invalid_table_context"


class HoldemAdvisorError(ValueError):
    """Base class for all input errors. Raised before any simulation work."""
    kind: ErrorKind


class InvalidCardError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_CARD


class DuplicateCardError(HoldemAdvisorError):
    kind = ErrorKind.DUPLICATE_CARD


class InvalidBoardSizeError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_BOARD_SIZE


class InvalidOpponentCountError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_OPPONENT_COUNT


class InvalidHandError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_HAND


class InvalidIterationsError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_ITERATIONS


class InvalidTableContextError(HoldemAdvisorError):
    kind = ErrorKind.INVALID_TABLE_CONTEXT
