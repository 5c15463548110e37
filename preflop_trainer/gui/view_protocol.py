"""Abstract view interface for the trainer GUI.

The TrainerView Protocol defines the contract between the TrainerPresenter
and any concrete UI framework. The presenter depends only on this
protocol, never on framework-specific imports.
"""

from __future__ import annotations

from typing import Protocol

from preflop_trainer.strategy.bet_sizing import SizingOption
from preflop_trainer.training.dealer import RoundState
from preflop_trainer.training.scoring import ScoreState, Verdict


class TrainerView(Protocol):
    """Interface that any GUI framework must implement."""

    def show_intro(self) -> None:
        """Show the rules overlay; the view reports dismissal to the presenter."""
        ...

    def show_round(
        self,
        round_state: RoundState,
        hand_name: str,
        action_labels: list[tuple[str, str]],
    ) -> None:
        """Render cards, seat, pot and the action buttons.

        action_labels holds (action value, button text) pairs, already
        reduced to the actions this round offers.
        """
        ...

    def show_sizing_options(self, options: list[SizingOption]) -> None:
        """Swap the action buttons for raise-size buttons."""
        ...

    def show_verdict(self, verdict: Verdict) -> None:
        """Show the feedback panel for a scored round."""
        ...

    def show_score(self, score: ScoreState) -> None:
        """Update the scoreboard."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...
