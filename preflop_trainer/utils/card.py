"""Playing cards and the shuffled deck hole cards are drawn from."""

from __future__ import annotations

import random
from dataclasses import dataclass

from preflop_trainer.utils.constants import RANK_VALUES, Rank, Suit


@dataclass(frozen=True)
class Card:
    """A single card. Compares by rank only, so 'Ah' and 'As' sort together."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Parse 'Ah', 'td', '9C'; rank and suit letters in any case.

        Raises:
            ValueError: If the text is not a rank followed by a suit.
        """
        text = s.strip()
        if len(text) != 2:
            raise ValueError(f"Card string must be 2 characters, got '{s}'")
        try:
            rank = Rank(text[0].upper())
        except ValueError:
            raise ValueError(f"Invalid rank character: '{text[0]}'") from None
        try:
            suit = Suit(text[1].lower())
        except ValueError:
            raise ValueError(f"Invalid suit character: '{text[1]}'") from None
        return cls(rank, suit)

    @property
    def value(self) -> int:
        """Rank value, deuce = 2 up to ace = 14."""
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return self.rank.value + self.suit.value

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value


def full_deck() -> list[Card]:
    """All 52 cards, suit by suit."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """A shuffled deck drawn from a caller-owned random source.

    Passing the session's Random keeps a seeded drill reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        self._cards = full_deck()
        self._rng.shuffle(self._cards)

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Take n cards off the top.

        Raises:
            ValueError: If fewer than n cards are left.
        """
        if n > self.remaining:
            raise ValueError(f"Cannot deal {n} cards, only {self.remaining} remaining")
        dealt, self._cards = self._cards[:n], self._cards[n:]
        return dealt

    def deal_hole_cards(self) -> tuple[Card, Card]:
        """Two distinct cards for one player."""
        card_a, card_b = self.deal(2)
        return card_a, card_b
