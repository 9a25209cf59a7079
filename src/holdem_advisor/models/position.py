"""Table position model used by the move recommendation."""

from enum import Enum

from holdem_advisor.errors import InvalidTableContextError


class Position(str, Enum):
    """Coarse seat group relative to the button."""
    EARLY = "early"
    MIDDLE = "middle"
    LATE = "late"
    BLIND = "blind"

    @property
    def bias(self) -> float:
        """Equity adjustment applied before comparing against thresholds."""
        return POSITION_BIAS[self]

    @property
    def label(self) -> str:
        return {
            "early": "Early Position",
            "middle": "Middle Position",
            "late": "Late Position",
            "blind": "Blinds",
        }[self.value]

    @classmethod
    def parse(cls, s: str) -> "Position":
        """Accept a group name ('late') or a 9-max seat label ('BTN', 'UTG+1')."""
        if isinstance(s, cls):
            return s
        key = str(s).strip()
        if key.lower() in cls._value2member_map_:
            return cls(key.lower())
        if key.upper() in SEAT_GROUPS:
            return SEAT_GROUPS[key.upper()]
        raise InvalidTableContextError(f"Unknown position: {s}")


POSITION_BIAS = {
    Position.EARLY: -0.02,
    Position.MIDDLE: 0.0,
    Position.LATE: 0.015,
    Position.BLIND: -0.01,
}

SEAT_GROUPS = {
    "UTG": Position.EARLY,
    "UTG+1": Position.EARLY,
    "MP": Position.MIDDLE,
    "MP+1": Position.MIDDLE,
    "HJ": Position.MIDDLE,
    "CO": Position.LATE,
    "BTN": Position.LATE,
    "SB": Position.BLIND,
    "BB": Position.BLIND,
}
