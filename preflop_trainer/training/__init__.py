"""Round dealing, scoring and the per-user drill session.

Key public API:
    deal_round      -- Deal a random hand, seat and scenario with its answer
    score           -- Grade a decision and return updated counters
    TrainerSession  -- Live round, score and round state machine
"""

from preflop_trainer.training.dealer import RoundState, deal_round
from preflop_trainer.training.scoring import ScoreState, UserDecision, Verdict, score
from preflop_trainer.training.session import RoundPhase, TrainerSession

__all__ = [
    "RoundState",
    "deal_round",
    "ScoreState",
    "UserDecision",
    "Verdict",
    "score",
    "RoundPhase",
    "TrainerSession",
]
