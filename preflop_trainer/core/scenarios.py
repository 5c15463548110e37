"""Catalog of synthetic preflop action scenarios.

Each scenario describes the action in front of the hero: how many raises
and limpers there have been, the pot, the amount to call and the size of
the last raise. Amounts are chips, scaled from big-blind multiples so the
catalog follows whatever blinds the trainer is configured with.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from preflop_trainer.core.errors import InvalidScenarioForPosition
from preflop_trainer.utils.constants import Position


class ScenarioCategory(StrEnum):
    FOLDED_TO_YOU = "folded_to_you"
    LIMPERS = "limpers"
    FACING_RAISE = "facing_raise"
    FACING_3BET = "facing_3bet"
    FACING_4BET = "facing_4bet"


# (min raises, max raises or None for unbounded, callers required)
_CATEGORY_SHAPE: dict[ScenarioCategory, tuple[int, int | None, bool | None]] = {
    ScenarioCategory.FOLDED_TO_YOU: (0, 0, False),
    ScenarioCategory.LIMPERS: (0, 0, True),
    ScenarioCategory.FACING_RAISE: (1, 1, None),
    ScenarioCategory.FACING_3BET: (2, 2, None),
    ScenarioCategory.FACING_4BET: (3, None, None),
}


@dataclass(frozen=True)
class Scenario:
    """A named preflop action pattern."""

    name: str
    label: str
    category: ScenarioCategory
    raises_ahead: int
    callers_ahead: int
    pot: float
    to_call: float
    last_raise: float

    def __post_init__(self) -> None:
        if self.raises_ahead < 0 or self.callers_ahead < 0:
            raise ValueError(f"Scenario {self.name}: negative action counts")
        lo, hi, needs_callers = _CATEGORY_SHAPE[self.category]
        if self.raises_ahead < lo or (hi is not None and self.raises_ahead > hi):
            raise ValueError(
                f"Scenario {self.name}: {self.raises_ahead} raises ahead "
                f"does not fit category {self.category}"
            )
        if needs_callers is True and self.callers_ahead == 0:
            raise ValueError(f"Scenario {self.name}: limped pot without limpers")
        if needs_callers is False and self.callers_ahead > 0:
            raise ValueError(f"Scenario {self.name}: callers in an unopened pot")

    @property
    def is_unopened(self) -> bool:
        return self.raises_ahead == 0 and self.callers_ahead == 0

    @property
    def is_limped(self) -> bool:
        return self.raises_ahead == 0 and self.callers_ahead > 0

    @property
    def is_reraised(self) -> bool:
        return self.raises_ahead >= 2


def build_catalog(big_blind: float = 2.0) -> tuple[Scenario, ...]:
    """Build the scenario catalog with amounts in chips."""
    bb = big_blind

    def scenario(name, label, category, raises, callers, pot_bb, to_call_bb, last_bb):
        return Scenario(
            name=name,
            label=label,
            category=category,
            raises_ahead=raises,
            callers_ahead=callers,
            pot=pot_bb * bb,
            to_call=to_call_bb * bb,
            last_raise=last_bb * bb,
        )

    return (
        scenario("folded_to_you", "Folded to you",
                 ScenarioCategory.FOLDED_TO_YOU, 0, 0, 1.5, 1, 1),
        scenario("one_limper", "One limper",
                 ScenarioCategory.LIMPERS, 0, 1, 2.5, 1, 1),
        scenario("multiple_limpers", "Two limpers",
                 ScenarioCategory.LIMPERS, 0, 2, 3.5, 1, 1),
        scenario("facing_raise", "Facing a raise",
                 ScenarioCategory.FACING_RAISE, 1, 0, 4.5, 3, 3),
        scenario("facing_raise_and_caller", "Facing a raise and a caller",
                 ScenarioCategory.FACING_RAISE, 1, 1, 7.5, 3, 3),
        scenario("facing_3bet", "Facing a 3-bet",
                 ScenarioCategory.FACING_3BET, 2, 0, 13.5, 9, 9),
        scenario("facing_4bet", "Facing a 4-bet",
                 ScenarioCategory.FACING_4BET, 3, 0, 30.5, 20, 20),
    )


SCENARIO_CATALOG: tuple[Scenario, ...] = build_catalog()


def get_scenario(name: str, catalog: tuple[Scenario, ...] = SCENARIO_CATALOG) -> Scenario:
    for s in catalog:
        if s.name == name:
            return s
    raise KeyError(f"No scenario named '{name}'")


def is_valid_for_position(scenario: Scenario, position: Position) -> bool:
    """Whether a seat can face this scenario.

    Nobody acts before UTG, so UTG only sees an unopened pot. Action only
    reaches the big blind after the rest of the table has acted, so the big
    blind is never dealt an unopened pot.
    """
    if position == Position.UTG:
        return scenario.category == ScenarioCategory.FOLDED_TO_YOU
    if position == Position.BB:
        return scenario.category != ScenarioCategory.FOLDED_TO_YOU
    return True


def eligible_scenarios(
    position: Position,
    catalog: tuple[Scenario, ...] = SCENARIO_CATALOG,
) -> list[Scenario]:
    """Scenarios a position may be dealt.

    Raises:
        InvalidScenarioForPosition: If the catalog has none.
    """
    eligible = [s for s in catalog if is_valid_for_position(s, position)]
    if not eligible:
        raise InvalidScenarioForPosition(position)
    return eligible
