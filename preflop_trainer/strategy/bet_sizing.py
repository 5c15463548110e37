"""Preflop raise sizing.

Gives the textbook raise-to amount for a scenario together with the band
of amounts graded as correct, plus the four candidate sizes a trainer
shows the user.

Sizing kinds:
  - open:     first in, 3x the big blind
  - isolate:  raise over limpers, 3x the big blind plus 1 big blind per limper
  - 3-bet:    3x the last raise
  - 4-bet+:   ~2.3x the last raise, tighter band
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from preflop_trainer.core.scenarios import Scenario


class SizingKind(StrEnum):
    OPEN = "open"
    ISOLATE = "isolate"
    THREE_BET = "3bet"
    FOUR_BET = "4bet"


@dataclass(frozen=True)
class SizingRules:
    """Multipliers behind every sizing band."""

    open_multiplier: float = 3.0  # x big blind
    open_band_bb: float = 0.5  # +/- big blinds around the target
    limper_increment_bb: float = 1.0  # added per limper when isolating
    three_bet_multiplier: float = 3.0  # x last raise
    three_bet_min: float = 2.5
    three_bet_max: float = 3.5
    four_bet_multiplier: float = 2.3
    four_bet_min: float = 2.2
    four_bet_max: float = 2.5

    def __post_init__(self) -> None:
        for name in (
            "open_multiplier", "open_band_bb", "three_bet_multiplier",
            "four_bet_multiplier",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.limper_increment_bb < 0:
            raise ValueError("limper_increment_bb cannot be negative")
        # Every band must start at a legal min-raise: 2x the unit.
        if self.open_multiplier - self.open_band_bb < 2:
            raise ValueError("open band must start at 2 big blinds or more")
        if not 2 <= self.three_bet_min <= self.three_bet_multiplier <= self.three_bet_max:
            raise ValueError("3-bet sizing needs 2 <= min <= multiplier <= max")
        if not 2 <= self.four_bet_min <= self.four_bet_multiplier <= self.four_bet_max:
            raise ValueError("4-bet sizing needs 2 <= min <= multiplier <= max")


DEFAULT_SIZING_RULES = SizingRules()


@dataclass(frozen=True)
class SizingBand:
    """Target raise-to amount and the inclusive band graded as correct."""

    amount: float
    min: float
    max: float

    def contains(self, amount: float) -> bool:
        return self.min <= amount <= self.max


@dataclass(frozen=True)
class SizingOption:
    """A raise-to amount offered to the user, with a description."""

    amount: float
    label: str


def sizing_kind(scenario: Scenario) -> SizingKind:
    if scenario.raises_ahead >= 2:
        return SizingKind.FOUR_BET
    if scenario.raises_ahead == 1:
        return SizingKind.THREE_BET
    if scenario.callers_ahead > 0:
        return SizingKind.ISOLATE
    return SizingKind.OPEN


def sizing_unit(scenario: Scenario, big_blind: float = 2.0) -> float:
    """The amount raise multiples are quoted in: the big blind, or the last raise."""
    if scenario.raises_ahead >= 1:
        return scenario.last_raise
    return big_blind


def correct_sizing(
    scenario: Scenario,
    big_blind: float = 2.0,
    rules: SizingRules = DEFAULT_SIZING_RULES,
) -> SizingBand:
    """Compute the correct raise-to band for a scenario.

    Args:
        scenario: The action in front of the hero.
        big_blind: Big blind in chips.
        rules: Multipliers to size with.

    Returns:
        SizingBand with min <= amount <= max.
    """
    kind = sizing_kind(scenario)

    if kind == SizingKind.OPEN:
        amount = big_blind * rules.open_multiplier
        band = big_blind * rules.open_band_bb
        return _band(amount, amount - band, amount + band)

    if kind == SizingKind.ISOLATE:
        amount = big_blind * (
            rules.open_multiplier
            + scenario.callers_ahead * rules.limper_increment_bb
        )
        band = big_blind * rules.open_band_bb
        return _band(amount, amount - band, amount + band)

    last = scenario.last_raise
    if kind == SizingKind.THREE_BET:
        return _band(
            last * rules.three_bet_multiplier,
            last * rules.three_bet_min,
            last * rules.three_bet_max,
        )

    return _band(
        last * rules.four_bet_multiplier,
        last * rules.four_bet_min,
        last * rules.four_bet_max,
    )


def _band(amount: float, lo: float, hi: float) -> SizingBand:
    amount, lo, hi = round(amount, 1), round(lo, 1), round(hi, 1)
    return SizingBand(amount=amount, min=min(lo, amount), max=max(hi, amount))


_CORRECT_LABELS: dict[SizingKind, str] = {
    SizingKind.OPEN: "Standard",
    SizingKind.ISOLATE: "Isolation",
    SizingKind.THREE_BET: "Standard",
    SizingKind.FOUR_BET: "Compact",
}


def sizing_options(
    scenario: Scenario,
    big_blind: float = 2.0,
    rules: SizingRules = DEFAULT_SIZING_RULES,
) -> list[SizingOption]:
    """Four raise-to candidates for a scenario, smallest first.

    Always holds the correct amount, one smaller and one larger distractor,
    and a "Standard (3x)" framing. When 3x already lands inside the correct
    band an overbet takes its place. Distractors always sit outside the band.
    """
    band = correct_sizing(scenario, big_blind, rules)
    unit = sizing_unit(scenario, big_blind)

    small = round(band.amount * 2 / 3, 1)
    if small >= band.min:
        small = round(max(band.min - unit / 2, unit / 2), 1)
    large = round(band.amount * 1.5, 1)
    if large <= band.max:
        large = round(band.max + unit / 2, 1)

    standard = round(unit * 3, 1)
    if band.contains(standard) or standard in (small, large):
        overbet = round(max(band.amount * 2, large + unit / 2), 1)
        third = SizingOption(overbet, "Overbet")
    else:
        third = SizingOption(standard, "Standard")

    options = [
        SizingOption(band.amount, _CORRECT_LABELS[sizing_kind(scenario)]),
        SizingOption(small, "Small"),
        SizingOption(large, "Large"),
        third,
    ]
    labelled = [
        SizingOption(o.amount, f"{o.label} ({_multiple(o.amount, unit)}x)")
        for o in options
    ]
    return sorted(labelled, key=lambda o: o.amount)


def _multiple(amount: float, unit: float) -> str:
    if unit <= 0:
        return "?"
    m = round(amount / unit, 1)
    if math.isclose(m, round(m)):
        return str(int(round(m)))
    return f"{m:g}"
