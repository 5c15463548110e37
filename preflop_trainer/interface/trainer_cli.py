"""Terminal preflop drill.

Usage:
    python -m preflop_trainer.interface.trainer_cli [--seed N] [--rounds N]

Example round:
    ══════════════════════════════════════════
      ROUND 3 — Button, Facing a 3-bet
    ══════════════════════════════════════════
      Hand:      Kh Qh (K-Q Suited)
      Pot:       27    To call: 18
    > What do you do? (fold/call/raise): raise
      #1 Small (1.5x)      27.6
      #2 Compact (2.3x)    41.4
      #3 Standard (3x)     54
      #4 Large (3.5x)      62.1
    > Raise to (#1-#4 or amount): #2

      [!] Raise is wrong here; the textbook play is Call. ...
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import replace
from pathlib import Path

from preflop_trainer.core.config import load_config
from preflop_trainer.core.errors import ActionNotOffered
from preflop_trainer.core.hand import display_name
from preflop_trainer.interface.intro_flag import INTRO_TEXT, IntroFlagStore
from preflop_trainer.strategy.bet_sizing import SizingOption
from preflop_trainer.training.dealer import RoundState
from preflop_trainer.training.scoring import Verdict, VerdictTier
from preflop_trainer.training.session import TrainerSession
from preflop_trainer.utils.constants import Action

_DIVIDER = "═" * 50

_VERDICT_MARKS = {
    VerdictTier.CORRECT: "[OK]",
    VerdictTier.PARTIAL: "[~]",
    VerdictTier.INCORRECT: "[!]",
}


class QuitDrill(Exception):
    """The user asked to leave the drill."""


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _parse_action(s: str) -> Action:
    """Parse 'f', 'fold', 'c', 'call', 'check', 'r', 'raise' into an Action."""
    s = s.strip().lower()
    aliases = {
        "f": Action.FOLD, "fold": Action.FOLD,
        "c": Action.CALL, "call": Action.CALL, "k": Action.CALL, "check": Action.CALL,
        "r": Action.RAISE, "raise": Action.RAISE,
    }
    if s not in aliases:
        raise ValueError(f"Unknown action: '{s}'")
    return aliases[s]


def _parse_sizing(s: str, options: list[SizingOption]) -> float:
    """Accept an option as '#2' or a raw raise-to amount like '4'.

    Bare numbers are always amounts, so an amount never reads as an option.
    """
    s = s.strip()
    if s.startswith("#"):
        index = s[1:].strip()
        if not index.isdigit() or not 1 <= int(index) <= len(options):
            raise ValueError(f"Pick an option from #1 to #{len(options)}")
        return options[int(index) - 1].amount
    amount = float(s)
    if not math.isfinite(amount) or amount <= 0:
        raise ValueError("Raise size must be a positive number")
    return amount


def _prompt(msg: str, default: str = "") -> str:
    """Print a prompt and read user input."""
    suffix = f" [{default}]" if default else ""
    try:
        val = input(f"  {msg}{suffix}: ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        raise QuitDrill()
    if val.lower() in ("q", "quit", "exit"):
        raise QuitDrill()
    return val if val else default


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def _print_round(number: int, round_state: RoundState) -> None:
    scenario = round_state.scenario
    print()
    print(_DIVIDER)
    print(f"  ROUND {number} — {round_state.position.label}, {scenario.label}")
    print(_DIVIDER)
    print(f"  Hand:      {round_state.hand} ({display_name(round_state.hand_key)})")
    to_call = "free" if round_state.is_free_check else f"{round_state.effective_to_call:g}"
    print(f"  Pot:       {scenario.pot:g}    To call: {to_call}")


def _print_options(options: list[SizingOption]) -> None:
    for i, option in enumerate(options, 1):
        print(f"    #{i} {option.label:<18} {option.amount:g}")


def _print_verdict(verdict: Verdict) -> None:
    print()
    print(f"  {_VERDICT_MARKS[verdict.tier]} {verdict.explanation}")
    if verdict.sizing_explanation:
        print(f"      {verdict.sizing_explanation}")
    print(f"  Score: {verdict.score.summary()}")


# ---------------------------------------------------------------------------
# Drill loop
# ---------------------------------------------------------------------------


def play_round(session: TrainerSession, number: int) -> Verdict:
    """Deal, collect the user's answer and print the verdict."""
    round_state = session.deal()
    _print_round(number, round_state)
    choices = "/".join(round_state.action_label(a).lower() for a in round_state.available_actions)

    while True:
        try:
            action = _parse_action(_prompt(f"What do you do? ({choices})"))
            verdict = session.choose_action(action)
            break
        except (ValueError, ActionNotOffered) as e:
            print(f"    {e}")

    if verdict is None:
        options = session.sizing_options()
        _print_options(options)
        while True:
            try:
                amount = _parse_sizing(_prompt(f"Raise to (#1-#{len(options)} or amount)"), options)
                break
            except ValueError as e:
                print(f"    {e}")
        verdict = session.choose_sizing(amount)

    _print_verdict(verdict)
    return verdict


def run(argv: list[str] | None = None) -> int:
    """Main entry point for the terminal drill."""
    parser = argparse.ArgumentParser(description="Drill textbook preflop decisions.")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to config JSON (default: ~/.preflop_trainer/config.json)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible deals")
    parser.add_argument("--rounds", type=int, default=0, help="Stop after N rounds (0 = until quit)")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default from config)")
    parser.add_argument("--state", type=Path, default=None,
                        help="Path to the intro-flag state file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    print()
    print(_DIVIDER)
    print("  PREFLOP TRAINER")
    print(_DIVIDER)

    intro = IntroFlagStore(args.state)
    if not intro.has_seen_intro():
        print(INTRO_TEXT)
        intro.mark_seen()

    session = TrainerSession(config)
    number = 0
    try:
        while args.rounds <= 0 or number < args.rounds:
            number += 1
            play_round(session, number)
    except QuitDrill:
        pass

    print()
    print(f"  Final score: {session.score_state.summary()}")
    return 0


if __name__ == "__main__":
    sys.exit(run())
