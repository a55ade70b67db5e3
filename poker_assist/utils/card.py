"""Card and Deck classes for poker."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from poker_assist.utils.constants import RANK_VALUES, SUIT_SYMBOLS, Rank, Suit

_SYMBOL_SUITS: dict[str, Suit] = {sym: suit for suit, sym in SUIT_SYMBOLS.items()}


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a string like 'Ah', 'Td', '10d' or 'A♠'.

        Args:
            s: Rank characters followed by a single suit character.

        Returns:
            A new Card instance.

        Raises:
            ValueError: If the string has the wrong length or contains
                       invalid rank/suit characters.
        """
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Card string must be 2 or 3 characters, got '{s}'")
        rank_str, suit_str = s[:-1], s[-1]
        if rank_str == "10":
            rank_str = "T"
        try:
            rank = Rank(rank_str.upper())
        except ValueError:
            raise ValueError(f"Invalid rank: '{rank_str}'")
        suit = _SYMBOL_SUITS.get(suit_str)
        if suit is None:
            try:
                suit = Suit(suit_str.lower())
            except ValueError:
                raise ValueError(f"Invalid suit character: '{suit_str}'")
        return cls(rank=rank, suit=suit)

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    @property
    def display(self) -> str:
        """Human-friendly form with a suit symbol, e.g. '10♥'."""
        rank = "10" if self.rank == Rank.TEN else self.rank.value
        return f"{rank}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards: 'Ah Ks, Td' -> [Card, Card, Card]."""
    return [Card.from_str(c) for c in s.replace(",", " ").split()]


class Deck:
    """The standard 52-card deck."""

    @staticmethod
    def full() -> list[Card]:
        """All 52 cards in a fixed order (suit-major)."""
        return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
