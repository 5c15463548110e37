"""Two-card hand model and canonical hand notation.

Hand notation:
  - "AA"   → pocket pair
  - "AKs"  → suited
  - "AKo"  → offsuit
  - "AK"   → both suited and offsuit (range notation only)
  - "JJ+"  → JJ, QQ, KK, AA
  - "ATs+" → ATs, AJs, AQs, AKs
  - "A5s-A2s" → A5s, A4s, A3s, A2s

A dealt hand is reduced to its canonical key ("AKs", "T9o", "77"): ranks
ordered high to low, suit identity discarded except for suited-ness.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from preflop_trainer.utils.card import Card
from preflop_trainer.utils.constants import RANK_NAMES, RANKS_DESCENDING, Rank

_RANK_INDEX: dict[Rank, int] = {r: i for i, r in enumerate(RANKS_DESCENDING)}


class HandType(StrEnum):
    PAIR = "pair"
    SUITED = "suited"
    OFFSUIT = "offsuit"


@dataclass(frozen=True)
class HandNotation:
    """A hand in standard poker notation (e.g. AKs, JJ, T9o)."""

    rank1: Rank
    rank2: Rank
    hand_type: HandType

    @classmethod
    def from_str(cls, s: str) -> HandNotation:
        """Parse notation like 'AKs', 'JJ', 'T9o'.

        Raises:
            ValueError: If notation is invalid.
        """
        if len(s) < 2 or len(s) > 3:
            raise ValueError(f"Invalid hand notation: '{s}'")

        r1 = Rank(s[0])
        r2 = Rank(s[1])

        if r1 == r2:
            if len(s) == 3:
                raise ValueError(f"Pocket pairs take no suit indicator: '{s}'")
            return cls(rank1=r1, rank2=r2, hand_type=HandType.PAIR)

        # Ensure rank1 is the higher rank
        if _RANK_INDEX[r1] > _RANK_INDEX[r2]:
            r1, r2 = r2, r1

        if len(s) == 2:
            raise ValueError(f"Non-pair hand needs 's' or 'o': '{s}'")
        if s[2] == "s":
            return cls(rank1=r1, rank2=r2, hand_type=HandType.SUITED)
        if s[2] == "o":
            return cls(rank1=r1, rank2=r2, hand_type=HandType.OFFSUIT)
        raise ValueError(f"Invalid suit indicator: '{s[2]}'")

    @property
    def key(self) -> str:
        return str(self)

    @property
    def combo_count(self) -> int:
        if self.hand_type == HandType.PAIR:
            return 6
        if self.hand_type == HandType.SUITED:
            return 4
        return 12

    def __str__(self) -> str:
        r = f"{self.rank1.value}{self.rank2.value}"
        if self.hand_type == HandType.PAIR:
            return r
        if self.hand_type == HandType.SUITED:
            return r + "s"
        return r + "o"


@dataclass(frozen=True)
class Hand:
    """The two hole cards dealt for a round."""

    card_a: Card
    card_b: Card

    def __post_init__(self) -> None:
        if self.card_a == self.card_b:
            raise ValueError(f"A hand cannot hold the same card twice: {self.card_a}")

    @property
    def suited(self) -> bool:
        return self.card_a.suit == self.card_b.suit

    @property
    def notation(self) -> HandNotation:
        return to_notation(self.card_a, self.card_b)

    @property
    def key(self) -> str:
        return classify(self.card_a, self.card_b)

    def __str__(self) -> str:
        return f"{self.card_a} {self.card_b}"


def to_notation(card_a: Card, card_b: Card) -> HandNotation:
    """Convert two specific cards to their notation form."""
    r1, r2 = card_a.rank, card_b.rank
    # Ensure rank1 is the higher rank
    if _RANK_INDEX[r1] > _RANK_INDEX[r2]:
        r1, r2 = r2, r1

    if r1 == r2:
        return HandNotation(r1, r2, HandType.PAIR)
    if card_a.suit == card_b.suit:
        return HandNotation(r1, r2, HandType.SUITED)
    return HandNotation(r1, r2, HandType.OFFSUIT)


def classify(card_a: Card, card_b: Card) -> str:
    """Canonical hand key for two hole cards, e.g. 'AKs', 'T9o', '77'."""
    return to_notation(card_a, card_b).key


def display_name(hand_key: str) -> str:
    """Human label for a hand key.

    >>> display_name("AA")
    'Pocket Aces'
    >>> display_name("KQs")
    'K-Q Suited'
    """
    hand = HandNotation.from_str(hand_key)
    if hand.hand_type == HandType.PAIR:
        return f"Pocket {_plural(RANK_NAMES[hand.rank1])}"
    kind = "Suited" if hand.hand_type == HandType.SUITED else "Offsuit"
    return f"{hand.rank1.value}-{hand.rank2.value} {kind}"


def _plural(name: str) -> str:
    return name + "es" if name.endswith("x") else name + "s"


def all_hand_keys() -> list[str]:
    """The 169 canonical starting hands, strongest ranks first."""
    keys: list[str] = []
    for i, high in enumerate(RANKS_DESCENDING):
        keys.append(f"{high.value}{high.value}")
        for low in RANKS_DESCENDING[i + 1:]:
            keys.append(f"{high.value}{low.value}s")
            keys.append(f"{high.value}{low.value}o")
    return keys


# ---------------------------------------------------------------------------
# Range notation expansion
# ---------------------------------------------------------------------------


def expand_notation(notation: str) -> list[HandNotation]:
    """Expand range notation into a list of HandNotation objects.

    Supports single hands ("AKs", "JJ"), plus notation ("JJ+", "ATs+"),
    dash ranges ("JJ-88", "A5s-A2s") and "AK" for both AKs and AKo.
    """
    notation = notation.strip()

    if "-" in notation:
        parts = notation.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid range notation: '{notation}'")
        return _expand_dash_range(parts[0].strip(), parts[1].strip())

    if notation.endswith("+"):
        return _expand_plus(notation[:-1])

    r1 = Rank(notation[0])
    r2 = Rank(notation[1])

    if len(notation) == 2 and r1 != r2:
        # "AK" means both AKs and AKo
        if _RANK_INDEX[r1] > _RANK_INDEX[r2]:
            r1, r2 = r2, r1
        return [
            HandNotation(r1, r2, HandType.SUITED),
            HandNotation(r1, r2, HandType.OFFSUIT),
        ]

    return [HandNotation.from_str(notation)]


def expand_range(notation: str) -> list[str]:
    """Expand comma-separated range notation into hand keys."""
    keys: list[str] = []
    for part in notation.split(","):
        part = part.strip()
        if part:
            keys.extend(h.key for h in expand_notation(part))
    return keys


def _expand_plus(base: str) -> list[HandNotation]:
    """Expand 'JJ+' or 'ATs+' style notation."""
    hand = HandNotation.from_str(base)

    if hand.hand_type == HandType.PAIR:
        idx = _RANK_INDEX[hand.rank1]
        return [
            HandNotation(RANKS_DESCENDING[i], RANKS_DESCENDING[i], HandType.PAIR)
            for i in range(idx + 1)
        ]

    # ATs+ → ATs, AJs, AQs, AKs (kicker climbs toward rank1)
    high = hand.rank1
    low_idx = _RANK_INDEX[hand.rank2]
    high_idx = _RANK_INDEX[high]
    return [
        HandNotation(high, RANKS_DESCENDING[i], hand.hand_type)
        for i in range(high_idx + 1, low_idx + 1)
    ]


def _expand_dash_range(start: str, end: str) -> list[HandNotation]:
    """Expand 'JJ-88' or 'A5s-A2s' style notation."""
    h_start = HandNotation.from_str(start)
    h_end = HandNotation.from_str(end)

    if h_start.hand_type == HandType.PAIR and h_end.hand_type == HandType.PAIR:
        lo, hi = sorted([_RANK_INDEX[h_start.rank1], _RANK_INDEX[h_end.rank1]])
        return [
            HandNotation(RANKS_DESCENDING[i], RANKS_DESCENDING[i], HandType.PAIR)
            for i in range(lo, hi + 1)
        ]

    # Non-pair range: same high card, varying low card
    if h_start.rank1 != h_end.rank1:
        raise ValueError(
            f"Non-pair dash ranges must share the high card: '{start}-{end}'"
        )
    if h_start.hand_type != h_end.hand_type:
        raise ValueError(
            f"Dash range endpoints must have same type (s/o): '{start}-{end}'"
        )

    lo, hi = sorted([_RANK_INDEX[h_start.rank2], _RANK_INDEX[h_end.rank2]])
    return [
        HandNotation(h_start.rank1, RANKS_DESCENDING[i], h_start.hand_type)
        for i in range(lo, hi + 1)
    ]
