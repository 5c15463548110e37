"""Coarse strength tiers for all 169 starting hands.

Tiers run from 1 (premium) to 5 (trash). Tiers 1-4 are written in range
notation; every hand not named falls through to tier 5, so the table is
total by construction.
"""

from __future__ import annotations

from preflop_trainer.core.errors import UnknownHandKey
from preflop_trainer.core.hand import all_hand_keys, expand_range

WEAKEST_TIER = 5

_TIER_NOTATION: dict[int, str] = {
    1: "JJ+,AKs,AKo",
    2: "TT,99,AQs,AJs,ATs,KQs,KJs,AQo",
    3: "88,77,A9s,A8s,A5s,A4s,KTs,QJs,QTs,JTs,AJo,ATo,KQo",
    4: (
        "66-22,"
        "A7s,A6s,A3s,A2s,"
        "K9s-K6s,Q9s,J9s,T9s,T8s,98s,97s,87s,76s,65s,54s,"
        "A9o,KJo,KTo,QJo,QTo,JTo"
    ),
}

TIER_LABELS: dict[int, str] = {
    1: "Premium",
    2: "Strong",
    3: "Playable",
    4: "Speculative",
    5: "Trash",
}


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for tier, notation in sorted(_TIER_NOTATION.items()):
        for key in expand_range(notation):
            if key in table:
                raise ValueError(f"{key} listed in tier {table[key]} and tier {tier}")
            table[key] = tier
    for key in all_hand_keys():
        table.setdefault(key, WEAKEST_TIER)
    if len(table) != 169:
        raise ValueError(f"Hand ranking table has {len(table)} keys, expected 169")
    return table


HAND_RANKING_TABLE: dict[str, int] = _build_table()


def strength_of(hand_key: str, table: dict[str, int] | None = None) -> int:
    """Tier (1-5) of a canonical hand key.

    Raises:
        UnknownHandKey: If the key has no entry in the table.
    """
    lookup = HAND_RANKING_TABLE if table is None else table
    try:
        return lookup[hand_key]
    except KeyError:
        raise UnknownHandKey(hand_key) from None


def tier_label(tier: int) -> str:
    return TIER_LABELS.get(tier, TIER_LABELS[WEAKEST_TIER])


def hands_in_tier(tier: int) -> list[str]:
    """Hand keys in a tier, in the order all_hand_keys() lists them."""
    return [k for k in all_hand_keys() if HAND_RANKING_TABLE[k] == tier]
