"""Grade a submitted decision against a round's ground truth.

score() is pure: it takes the current ScoreState and returns a Verdict
carrying the updated one. It must run at most once per round; calling it
twice for the same round counts the decision twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from preflop_trainer.core.errors import UnknownHandKey
from preflop_trainer.core.hand import display_name
from preflop_trainer.core.hand_strength import strength_of, tier_label
from preflop_trainer.strategy.bet_sizing import SizingBand
from preflop_trainer.strategy.decision_policy import explain_decision
from preflop_trainer.training.dealer import RoundState
from preflop_trainer.utils.constants import Action

logger = logging.getLogger("preflop_trainer.training.scoring")


class VerdictTier(StrEnum):
    CORRECT = "CORRECT"
    PARTIAL = "PARTIAL"
    INCORRECT = "INCORRECT"


@dataclass(frozen=True)
class UserDecision:
    """What the user chose. amount is the raise-to size, required for raises."""

    action: Action
    amount: float | None = None

    def __post_init__(self) -> None:
        if self.action == Action.RAISE and self.amount is None:
            raise ValueError("A raise needs a raise-to amount")


@dataclass(frozen=True)
class ScoreState:
    """Running accuracy counters for a drill."""

    correct_count: int = 0
    total_count: int = 0
    sizing_correct_count: int = 0
    sizing_total_count: int = 0
    streak: int = 0
    best_streak: int = 0

    @property
    def accuracy(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.correct_count / self.total_count

    @property
    def sizing_accuracy(self) -> float:
        if self.sizing_total_count == 0:
            return 0.0
        return self.sizing_correct_count / self.sizing_total_count

    def summary(self) -> str:
        return (
            f"{self.correct_count}/{self.total_count} correct ({self.accuracy:.0%}), "
            f"sizing {self.sizing_correct_count}/{self.sizing_total_count}, "
            f"streak {self.streak} (best {self.best_streak})"
        )


@dataclass(frozen=True)
class Verdict:
    tier: VerdictTier
    explanation: str
    sizing_explanation: str | None
    score: ScoreState


def score(decision: UserDecision, round_state: RoundState, state: ScoreState) -> Verdict:
    """Grade a decision and return the verdict with updated counters."""
    raised = decision.action == Action.RAISE
    action_correct = decision.action == round_state.correct_answer

    sizing_correct = False
    sizing_text = None
    if action_correct and raised:
        band = round_state.sizing_band()
        sizing_correct = band.contains(decision.amount)
        sizing_text = _sizing_explanation(decision.amount, band)

    if not action_correct:
        tier = VerdictTier.INCORRECT
    elif raised and not sizing_correct:
        tier = VerdictTier.PARTIAL
    else:
        tier = VerdictTier.CORRECT

    streak = state.streak + 1 if tier == VerdictTier.CORRECT else 0
    updated = replace(
        state,
        total_count=state.total_count + 1,
        correct_count=state.correct_count + (1 if action_correct else 0),
        sizing_total_count=state.sizing_total_count + (1 if raised else 0),
        sizing_correct_count=state.sizing_correct_count + (1 if sizing_correct else 0),
        streak=streak,
        best_streak=max(state.best_streak, streak),
    )

    logger.info(
        "%s %s %s: chose %s, answer %s → %s (%s)",
        round_state.position, round_state.scenario.name, round_state.hand_key,
        decision.action, round_state.correct_answer, tier, updated.summary(),
    )
    return Verdict(
        tier=tier,
        explanation=_explanation(tier, decision, round_state),
        sizing_explanation=sizing_text,
        score=updated,
    )


def _explanation(tier: VerdictTier, decision: UserDecision, round_state: RoundState) -> str:
    key = round_state.hand_key
    try:
        tier_no = strength_of(key)
        strength = f"tier {tier_no}, {tier_label(tier_no).lower()}"
    except UnknownHandKey:
        strength = "unranked"
    rule = explain_decision(key, round_state.position, round_state.scenario)
    answer = round_state.action_label(round_state.correct_answer)

    if tier == VerdictTier.INCORRECT:
        chosen = round_state.action_label(decision.action)
        head = f"{chosen} is wrong here; the textbook play is {answer}."
    elif tier == VerdictTier.PARTIAL:
        head = f"{answer} is right, but the size is off."
    else:
        head = f"{answer} is correct."

    return (
        f"{head} {display_name(key)} ({strength}) from the "
        f"{round_state.position.label} when {round_state.scenario.label.lower()}: "
        f"{rule.description}."
    )


def _sizing_explanation(amount: float, band: SizingBand) -> str:
    target = f"{band.amount:g} (anything from {band.min:g} to {band.max:g})"
    if amount < band.min:
        return f"Raising to {amount:g} is too small; aim for {target}."
    if amount > band.max:
        return f"Raising to {amount:g} is too large; aim for {target}."
    return f"Raising to {amount:g} is within the band; the target is {target}."
