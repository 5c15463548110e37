"""TrainerSession: one drill's live round, score and round state machine.

Round phases:
    DEALT → AWAITING_ACTION → (raise) AWAITING_SIZING → SCORED → (deal) DEALT

Each round is scored exactly once. Input that arrives in the wrong phase
raises RoundClosed; presentation layers decide how to surface it.
"""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from preflop_trainer.core.config import TrainerConfig
from preflop_trainer.core.errors import ActionNotOffered, RoundClosed
from preflop_trainer.core.scenarios import Scenario, build_catalog
from preflop_trainer.strategy.bet_sizing import SizingOption, sizing_options
from preflop_trainer.training.dealer import RoundState, deal_round
from preflop_trainer.training.scoring import ScoreState, UserDecision, Verdict, score
from preflop_trainer.utils.constants import Action

logger = logging.getLogger("preflop_trainer.training.session")


class RoundPhase(StrEnum):
    IDLE = "IDLE"  # nothing dealt yet
    DEALT = "DEALT"
    AWAITING_ACTION = "AWAITING_ACTION"
    AWAITING_SIZING = "AWAITING_SIZING"
    SCORED = "SCORED"


class TrainerSession:
    """Drives rounds for a single user.

    Usage:
        session = TrainerSession(config)
        round_state = session.deal()
        verdict = session.choose_action(Action.CALL)
        # or, for raises:
        session.choose_action(Action.RAISE)
        verdict = session.choose_sizing(6.0)
    """

    def __init__(
        self,
        config: TrainerConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or TrainerConfig()
        self._rng = rng or random.Random(self._config.seed)
        self._catalog: tuple[Scenario, ...] = build_catalog(self._config.big_blind)
        self._round: RoundState | None = None
        self._phase = RoundPhase.IDLE
        self._score = ScoreState()
        self._last_verdict: Verdict | None = None

    @property
    def config(self) -> TrainerConfig:
        return self._config

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def current_round(self) -> RoundState | None:
        return self._round

    @property
    def score_state(self) -> ScoreState:
        return self._score

    @property
    def last_verdict(self) -> Verdict | None:
        return self._last_verdict

    def deal(self) -> RoundState:
        """Start a new round, discarding any unscored one."""
        if self._phase in (RoundPhase.AWAITING_ACTION, RoundPhase.AWAITING_SIZING):
            logger.debug("Discarding unscored round %s", self._round.hand_key)
        self._phase = RoundPhase.DEALT
        self._round = deal_round(self._rng, self._config, self._catalog)
        self._last_verdict = None
        self._phase = RoundPhase.AWAITING_ACTION
        return self._round

    def load_round(self, round_state: RoundState) -> None:
        """Install a prepared round, e.g. to replay a specific spot."""
        self._round = round_state
        self._last_verdict = None
        self._phase = RoundPhase.AWAITING_ACTION

    def sizing_options(self) -> list[SizingOption]:
        """Raise-to candidates for the current round's scenario."""
        round_state = self._require_round()
        return sizing_options(
            round_state.scenario, self._config.big_blind, self._config.sizing,
        )

    def choose_action(self, action: Action) -> Verdict | None:
        """Submit the user's action.

        Returns the verdict for fold and call. A raise moves the round to
        AWAITING_SIZING and returns None until choose_sizing() is called.

        Raises:
            RoundClosed: If no round is awaiting an action.
            ActionNotOffered: If the action is not available this round.
        """
        if self._phase != RoundPhase.AWAITING_ACTION:
            raise RoundClosed(f"Cannot take an action in phase {self._phase}")
        round_state = self._require_round()
        if action not in round_state.available_actions:
            raise ActionNotOffered(f"{action} is not offered this round")

        if action == Action.RAISE:
            self._phase = RoundPhase.AWAITING_SIZING
            return None
        return self._finish(UserDecision(action))

    def choose_sizing(self, amount: float) -> Verdict:
        """Submit the raise-to amount for a pending raise.

        Raises:
            RoundClosed: If no raise is awaiting a size.
        """
        if self._phase != RoundPhase.AWAITING_SIZING:
            raise RoundClosed(f"Cannot size a raise in phase {self._phase}")
        return self._finish(UserDecision(Action.RAISE, amount))

    def restart(self) -> None:
        """Clear the score and any live round."""
        self._score = ScoreState()
        self._round = None
        self._last_verdict = None
        self._phase = RoundPhase.IDLE

    def _finish(self, decision: UserDecision) -> Verdict:
        verdict = score(decision, self._require_round(), self._score)
        self._score = verdict.score
        self._last_verdict = verdict
        self._phase = RoundPhase.SCORED
        return verdict

    def _require_round(self) -> RoundState:
        if self._round is None:
            raise RoundClosed("No round has been dealt")
        return self._round
