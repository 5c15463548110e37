"""Exceptions raised by the trainer core.

None of these are user-facing. They signal broken contracts between the
core and its callers (a non-total strength table, a malformed scenario
catalog, a presentation layer asking for something the round does not
have) and are left to the caller's own error handling.
"""

from __future__ import annotations


class TrainerError(Exception):
    """Base class for trainer contract violations."""


class UnknownHandKey(TrainerError, KeyError):
    """The hand strength table has no entry for a hand key."""

    def __init__(self, hand_key: str) -> None:
        super().__init__(hand_key)
        self.hand_key = hand_key

    def __str__(self) -> str:
        return f"No strength tier for hand key '{self.hand_key}'"


class InvalidScenarioForPosition(TrainerError):
    """The scenario catalog holds no scenario a position may be dealt."""

    def __init__(self, position: str) -> None:
        super().__init__(f"No eligible scenario for position {position}")
        self.position = position


class SizingNotApplicable(TrainerError):
    """A raise sizing was requested for a round whose answer is not a raise."""


class RoundClosed(TrainerError):
    """Input arrived for a round that is already scored or was never dealt."""


class ActionNotOffered(TrainerError):
    """The submitted action is not one of the round's available actions."""
