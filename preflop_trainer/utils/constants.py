"""Constants for the preflop trainer."""

from enum import StrEnum


class Suit(StrEnum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"


class Rank(StrEnum):
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


RANK_VALUES: dict[Rank, int] = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

# Ranks ordered high to low
RANKS_DESCENDING: list[Rank] = sorted(Rank, key=RANK_VALUES.__getitem__, reverse=True)

RANK_NAMES: dict[Rank, str] = {
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}


class Position(StrEnum):
    """Six-max seats in preflop action order."""

    UTG = "UTG"
    MP = "MP"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    @property
    def is_late(self) -> bool:
        return self in (Position.CO, Position.BTN)

    @property
    def is_blind(self) -> bool:
        return self in (Position.SB, Position.BB)

    @property
    def label(self) -> str:
        return POSITION_LABELS[self]


POSITION_LABELS: dict[Position, str] = {
    Position.UTG: "Under the Gun",
    Position.MP: "Middle",
    Position.CO: "Cutoff",
    Position.BTN: "Button",
    Position.SB: "Small Blind",
    Position.BB: "Big Blind",
}


class Action(StrEnum):
    FOLD = "FOLD"
    CALL = "CALL"
    RAISE = "RAISE"
