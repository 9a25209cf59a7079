"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

from holdem_advisor.errors import InvalidCardError


class Suit(str, Enum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
        }
        if s in mapping:
            return mapping[s]
        if s.lower() in mapping:
            return mapping[s.lower()]
        raise InvalidCardError(f"Unknown suit: {s!r}")

    @property
    def symbol(self) -> str:
        return {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}[self.value]

    @property
    def label(self) -> str:
        return {"s": "Spades", "h": "Hearts", "d": "Diamonds", "c": "Clubs"}[self.value]


_RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
    "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        return _RANK_VALUES[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for r in cls:
            if r.value == c.upper():
                return r
        raise InvalidCardError(f"Unknown rank: {c!r}")


@dataclass(frozen=True)
class Card:
    """A single playing card. Immutable and hashable."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card code like 'Ah', 'Ts', '2c' (also '10h')."""
        if not isinstance(s, str):
            raise InvalidCardError(f"Cannot parse card: {s!r}")
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise InvalidCardError(f"Cannot parse card: {s!r}")

    @property
    def value(self) -> int:
        """Numeric rank, 2..14 with the ace high."""
        return self.rank.numeric_value

    @property
    def code(self) -> str:
        """Canonical two-character code, e.g. 'Td'."""
        return f"{self.rank.value}{self.suit.value}"

    @property
    def label(self) -> str:
        """Picker label, e.g. 'AS (Spades)'."""
        return f"{self.rank.value}{self.suit.value.upper()} ({self.suit.label})"

    def __repr__(self) -> str:
        return self.code

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"


CardLike = Union[Card, str]


def to_card(card: CardLike) -> Card:
    """Accept either a Card or a card code."""
    if isinstance(card, Card):
        return card
    return Card.parse(card)


def parse_cards(cards: Iterable[CardLike]) -> List[Card]:
    """Parse a sequence of card codes (or Cards) into Cards."""
    return [to_card(c) for c in cards]


def split_codes(text: str) -> List[str]:
    """Split a free-form string like 'As Kd,7h' or 'AsKd7h' into codes."""
    text = text.replace(",", " ").strip()
    if not text:
        return []
    if " " in text:
        return [part for part in text.split() if part]
    if len(text) % 2:
        raise InvalidCardError(f"Cannot split card codes: {text!r}")
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(c.code for c in cards)


def card_options() -> List[Tuple[str, str]]:
    """All 52 (code, label) pairs, ranks high to low, suits s/h/d/c."""
    options = []
    for rank in reversed(list(Rank)):
        for suit in Suit:
            card = Card(rank, suit)
            options.append((card.code, card.label))
    return options
