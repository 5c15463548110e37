"""Textbook preflop decision policy.

The policy is a fixed, hand-authored heuristic: an ordered list of rules,
each pairing a condition on (hand tier, position, scenario) with an action.
Rules are evaluated top-down and the first match wins, so more specific,
aggression-aware rules sit above the general position-looseness rules.

Rule order:
  1. reraised_premium       3-bet+ pot, tier 1 or select tier 2 → RAISE
  2. reraised_call_down     3-bet+ pot, tier 2-3                → CALL
  3. value_raise            tier 1-3                            → RAISE
  4. big_blind_option       limped pot, big blind               → CALL
  5. limped_pot_overlimp    limped pot, late position or blind  → CALL
  6. positional_steal       unopened, late or blind, tier 4     → RAISE
  7. positional_loose_call  unopened, late or blind, tier 5     → CALL
  8. default_fold           anything else                       → FOLD
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from preflop_trainer.core.errors import UnknownHandKey
from preflop_trainer.core.hand_strength import WEAKEST_TIER, strength_of
from preflop_trainer.core.scenarios import Scenario
from preflop_trainer.utils.constants import Action, Position

logger = logging.getLogger("preflop_trainer.strategy.policy")

# Tier-2 hands strong enough to keep re-raising into a 3-bet or 4-bet
CONTINUE_RERAISING: frozenset[str] = frozenset({"TT", "AQs"})


@dataclass(frozen=True)
class Spot:
    """Everything a rule may look at."""

    hand_key: str
    tier: int
    position: Position
    scenario: Scenario


@dataclass(frozen=True)
class PolicyRule:
    """One row of the decision table."""

    name: str
    description: str
    applies: Callable[[Spot], bool]
    action: Action


def _positional(spot: Spot) -> bool:
    return spot.position.is_late or spot.position.is_blind


POLICY_RULES: tuple[PolicyRule, ...] = (
    PolicyRule(
        "reraised_premium",
        "Premium hands keep re-raising even after a 3-bet",
        lambda s: s.scenario.is_reraised
        and (s.tier == 1 or s.hand_key in CONTINUE_RERAISING),
        Action.RAISE,
    ),
    PolicyRule(
        "reraised_call_down",
        "Facing a 3-bet or more, strong but non-premium hands just call",
        lambda s: s.scenario.is_reraised and s.tier <= 3,
        Action.CALL,
    ),
    PolicyRule(
        "value_raise",
        "Strong hands raise for value",
        lambda s: s.tier <= 3,
        Action.RAISE,
    ),
    PolicyRule(
        "big_blind_option",
        "The big blind never folds when limpers let it see a flop for free",
        lambda s: s.scenario.is_limped and s.position == Position.BB,
        Action.CALL,
    ),
    PolicyRule(
        "limped_pot_overlimp",
        "With limpers in and good position or money already posted, "
        "speculative hands complete rather than raise",
        lambda s: s.scenario.is_limped and _positional(s),
        Action.CALL,
    ),
    PolicyRule(
        "positional_steal",
        "Late position and the blinds can open speculative hands to steal",
        lambda s: s.scenario.is_unopened and _positional(s) and s.tier == 4,
        Action.RAISE,
    ),
    PolicyRule(
        "positional_loose_call",
        "Late position and the blinds can play weak hands cheaply when "
        "nobody has shown aggression",
        lambda s: s.scenario.is_unopened and _positional(s),
        Action.CALL,
    ),
    PolicyRule(
        "default_fold",
        "Weak hands fold out of position or against aggression",
        lambda s: True,
        Action.FOLD,
    ),
)


def _tier_or_weakest(hand_key: str) -> int:
    try:
        return strength_of(hand_key)
    except UnknownHandKey:
        logger.error(
            "Hand %s missing from the strength table, treating as tier %d",
            hand_key, WEAKEST_TIER,
        )
        return WEAKEST_TIER


def explain_decision(
    hand_key: str,
    position: Position,
    scenario: Scenario,
    rules: tuple[PolicyRule, ...] = POLICY_RULES,
) -> PolicyRule:
    """Return the first rule that matches the spot."""
    spot = Spot(
        hand_key=hand_key,
        tier=_tier_or_weakest(hand_key),
        position=position,
        scenario=scenario,
    )
    for rule in rules:
        if rule.applies(spot):
            logger.debug(
                "%s %s %s (tier %d) → %s via %s",
                position, scenario.name, hand_key, spot.tier,
                rule.action, rule.name,
            )
            return rule
    # default_fold matches everything; only a custom rule list gets here
    raise ValueError("Policy rule list has no catch-all rule")


def decide(hand_key: str, position: Position, scenario: Scenario) -> Action:
    """Textbook preflop action for a hand, seat and scenario."""
    return explain_decision(hand_key, position, scenario).action
