"""Deal a training round and compute its ground truth.

Sampling is constrained rather than resampled: the position is drawn
first, then the scenario is drawn only from those the position can face.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from preflop_trainer.core.config import TrainerConfig
from preflop_trainer.core.errors import SizingNotApplicable
from preflop_trainer.core.hand import Hand
from preflop_trainer.core.scenarios import Scenario, build_catalog, eligible_scenarios
from preflop_trainer.strategy.bet_sizing import SizingBand, correct_sizing
from preflop_trainer.strategy.decision_policy import decide
from preflop_trainer.utils.card import Deck
from preflop_trainer.utils.constants import Action, Position

logger = logging.getLogger("preflop_trainer.training.dealer")


@dataclass(frozen=True)
class RoundState:
    """One dealt round with its textbook answer. Replaced wholesale per deal."""

    hand: Hand
    position: Position
    scenario: Scenario
    correct_answer: Action
    correct_sizing: SizingBand | None
    effective_to_call: float

    @property
    def hand_key(self) -> str:
        return self.hand.key

    @property
    def is_free_check(self) -> bool:
        """A blind with nothing more to put in, e.g. the big blind in a limped pot."""
        return self.position.is_blind and self.effective_to_call == 0

    @property
    def available_actions(self) -> tuple[Action, ...]:
        if self.is_free_check:
            return (Action.CALL, Action.RAISE)
        return (Action.FOLD, Action.CALL, Action.RAISE)

    def action_label(self, action: Action) -> str:
        """Button text for an action; a free call reads as a check."""
        if action == Action.CALL and self.is_free_check:
            return "Check"
        return action.value.title()

    def sizing_band(self) -> SizingBand:
        """The graded raise band.

        Raises:
            SizingNotApplicable: If the textbook answer is not a raise.
        """
        if self.correct_sizing is None:
            raise SizingNotApplicable(
                f"Correct answer is {self.correct_answer}, not a raise"
            )
        return self.correct_sizing


def blind_posted(position: Position, config: TrainerConfig) -> float:
    if position == Position.SB:
        return config.small_blind
    if position == Position.BB:
        return config.big_blind
    return 0.0


def effective_to_call(scenario: Scenario, position: Position, config: TrainerConfig) -> float:
    """Amount still owed after the blind the seat has already posted."""
    return max(0.0, round(scenario.to_call - blind_posted(position, config), 1))


def build_round(
    hand: Hand,
    position: Position,
    scenario: Scenario,
    config: TrainerConfig | None = None,
) -> RoundState:
    """Compute the ground truth for a fixed hand, seat and scenario."""
    config = config or TrainerConfig()
    answer = decide(hand.key, position, scenario)
    sizing = None
    if answer == Action.RAISE:
        sizing = correct_sizing(scenario, config.big_blind, config.sizing)
    return RoundState(
        hand=hand,
        position=position,
        scenario=scenario,
        correct_answer=answer,
        correct_sizing=sizing,
        effective_to_call=effective_to_call(scenario, position, config),
    )


def deal_round(
    rng: random.Random,
    config: TrainerConfig | None = None,
    catalog: tuple[Scenario, ...] | None = None,
) -> RoundState:
    """Deal a random hand, seat and scenario and compute the answer.

    Args:
        rng: The single random source for the session.
        config: Blinds and sizing rules; defaults if omitted.
        catalog: Scenario catalog; built from the configured big blind
            if omitted.

    Raises:
        InvalidScenarioForPosition: If the catalog has nothing the drawn
            seat can face.
    """
    config = config or TrainerConfig()
    if catalog is None:
        catalog = build_catalog(config.big_blind)

    card_a, card_b = Deck(rng).deal_hole_cards()
    position = rng.choice(list(Position))
    scenario = rng.choice(eligible_scenarios(position, catalog))

    state = build_round(Hand(card_a, card_b), position, scenario, config)
    logger.debug(
        "Dealt %s (%s) in %s, %s → %s",
        state.hand, state.hand_key, position, scenario.name, state.correct_answer,
    )
    return state
