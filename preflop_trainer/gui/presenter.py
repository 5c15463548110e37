"""Framework-agnostic presenter for the trainer GUI.

TrainerPresenter mediates between the TrainerView (UI) and the
TrainerSession. It has NO Qt/PySide6 imports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from preflop_trainer.core.errors import TrainerError
from preflop_trainer.core.hand import display_name
from preflop_trainer.interface.intro_flag import IntroFlagStore
from preflop_trainer.training.scoring import Verdict
from preflop_trainer.training.session import RoundPhase, TrainerSession
from preflop_trainer.utils.constants import Action

if TYPE_CHECKING:
    from preflop_trainer.gui.view_protocol import TrainerView

logger = logging.getLogger("preflop_trainer.gui.presenter")


class TrainerPresenter:
    """Coordinates view input, session state and result display."""

    def __init__(
        self,
        view: TrainerView,
        session: TrainerSession | None = None,
        intro_store: IntroFlagStore | None = None,
    ) -> None:
        self._view = view
        self._session = session or TrainerSession()
        self._intro = intro_store or IntroFlagStore()

    @property
    def session(self) -> TrainerSession:
        return self._session

    def start(self) -> None:
        """Show the intro on first launch, otherwise deal straight away."""
        if not self._intro.has_seen_intro():
            self._view.show_intro()
            return
        self.on_next_round()

    def on_intro_dismissed(self) -> None:
        self._intro.mark_seen()
        self.on_next_round()

    def on_next_round(self) -> None:
        round_state = self._session.deal()
        labels = [
            (a.value, round_state.action_label(a))
            for a in round_state.available_actions
        ]
        self._view.show_round(round_state, display_name(round_state.hand_key), labels)
        self._view.show_score(self._session.score_state)

    def on_action_clicked(self, action_value: str) -> None:
        """Handle a fold/call/check/raise button.

        Repeated clicks after the round is scored are ignored, so a
        double-tap cannot score a round twice.
        """
        if self._session.phase != RoundPhase.AWAITING_ACTION:
            logger.debug("Ignoring %s in phase %s", action_value, self._session.phase)
            return
        try:
            verdict = self._session.choose_action(Action(action_value))
        except (ValueError, TrainerError) as e:
            self._view.show_error(str(e))
            return

        if verdict is None:
            self._view.show_sizing_options(self._session.sizing_options())
            return
        self._show_verdict(verdict)

    def on_sizing_clicked(self, amount: float) -> None:
        if self._session.phase != RoundPhase.AWAITING_SIZING:
            logger.debug("Ignoring sizing %s in phase %s", amount, self._session.phase)
            return
        self._show_verdict(self._session.choose_sizing(amount))

    def on_restart(self) -> None:
        self._session.restart()
        self.on_next_round()

    def _show_verdict(self, verdict: Verdict) -> None:
        self._view.show_verdict(verdict)
        self._view.show_score(verdict.score)
