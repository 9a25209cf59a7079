"""Street model."""

from enum import Enum

from holdem_advisor.errors import InvalidBoardSizeError


class Street(str, Enum):
    PREFLOP = "Preflop"
    FLOP = "Flop"
    TURN = "Turn"
    RIVER = "River"

    @classmethod
    def from_board_count(cls, count: int) -> "Street":
        """Street implied by the number of visible community cards."""
        if count not in BOARD_SIZES:
            raise InvalidBoardSizeError(
                f"Board must have 0, 3, 4, or 5 cards, got {count}")
        return list(cls)[BOARD_SIZES.index(count)]


BOARD_SIZES = (0, 3, 4, 5)
