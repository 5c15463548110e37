"""Tests for the terminal drill."""

import json
import random

import pytest

from preflop_trainer.core.scenarios import get_scenario
from preflop_trainer.interface.intro_flag import INTRO_FLAG_KEY, IntroFlagStore
from preflop_trainer.interface.trainer_cli import (
    QuitDrill,
    _parse_action,
    _parse_sizing,
    _prompt,
    play_round,
    run,
)
from preflop_trainer.strategy.bet_sizing import SizingOption, sizing_options
from preflop_trainer.training.scoring import VerdictTier
from preflop_trainer.training.session import TrainerSession
from preflop_trainer.utils.constants import Action


class TestParseAction:
    @pytest.mark.parametrize("text,expected", [
        ("f", Action.FOLD), ("Fold", Action.FOLD),
        ("c", Action.CALL), ("check", Action.CALL), ("k", Action.CALL),
        ("r", Action.RAISE), (" RAISE ", Action.RAISE),
    ])
    def test_aliases(self, text, expected) -> None:
        assert _parse_action(text) == expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            _parse_action("shove")


class TestParseSizing:
    OPTIONS = [SizingOption(4.0, "Small (2x)"), SizingOption(6.0, "Standard (3x)")]

    def test_option_number(self) -> None:
        assert _parse_sizing("#2", self.OPTIONS) == 6.0

    def test_option_number_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            _parse_sizing("#5", self.OPTIONS)

    def test_raw_amount(self) -> None:
        assert _parse_sizing("7.5", self.OPTIONS) == 7.5

    def test_bare_number_is_always_an_amount(self) -> None:
        assert _parse_sizing("2", self.OPTIONS) == 2.0
        assert _parse_sizing("9", self.OPTIONS) == 9.0

    def test_amount_matching_an_option_index(self) -> None:
        options = sizing_options(get_scenario("folded_to_you"))
        assert [o.amount for o in options][0] == 4.0
        assert _parse_sizing("4", options) == 4.0

    def test_rejects_infinity(self) -> None:
        with pytest.raises(ValueError):
            _parse_sizing("inf", self.OPTIONS)

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            _parse_sizing("-3", self.OPTIONS)

    def test_rejects_text(self) -> None:
        with pytest.raises(ValueError):
            _parse_sizing("big", self.OPTIONS)


class TestPrompt:
    def test_quit(self, monkeypatch) -> None:
        monkeypatch.setattr("builtins.input", lambda _: "q")
        with pytest.raises(QuitDrill):
            _prompt("What do you do?")

    def test_eof_quits(self, monkeypatch) -> None:
        def eof(_):
            raise EOFError
        monkeypatch.setattr("builtins.input", eof)
        with pytest.raises(QuitDrill):
            _prompt("What do you do?")


class TestPlayRound:
    def test_textbook_answers_are_correct(self, monkeypatch, capsys) -> None:
        session = TrainerSession(rng=random.Random(8))

        def answer(prompt: str) -> str:
            r = session.current_round
            if "Raise to" in prompt:
                return f"{r.correct_sizing.amount:g}"
            return r.correct_answer.value.lower()

        monkeypatch.setattr("builtins.input", answer)
        for number in range(1, 16):
            verdict = play_round(session, number)
            assert verdict.tier == VerdictTier.CORRECT
        assert session.score_state.correct_count == 15
        assert "ROUND 15" in capsys.readouterr().out

    def test_reprompts_on_bad_input(self, monkeypatch, capsys) -> None:
        session = TrainerSession(rng=random.Random(8))
        replies = iter(["shove"])

        def answer(prompt: str) -> str:
            reply = next(replies, None)
            if reply is not None:
                return reply
            r = session.current_round
            if "Raise to" in prompt:
                return f"{r.correct_sizing.amount:g}"
            return r.correct_answer.value.lower()

        monkeypatch.setattr("builtins.input", answer)
        play_round(session, 1)
        assert "Unknown action" in capsys.readouterr().out


class TestRun:
    def test_quit_prints_final_score(self, monkeypatch, capsys, tmp_path) -> None:
        monkeypatch.setattr("builtins.input", lambda _: "q")
        state = tmp_path / "state.json"
        code = run(["--seed", "1", "--config", str(tmp_path / "c.json"), "--state", str(state)])
        out = capsys.readouterr().out
        assert code == 0
        assert "Final score: 0/0 correct" in out
        assert "You are dealt two cards" in out
        assert json.loads(state.read_text())[INTRO_FLAG_KEY] is True

    def test_intro_shown_once(self, monkeypatch, capsys, tmp_path) -> None:
        monkeypatch.setattr("builtins.input", lambda _: "q")
        state = tmp_path / "state.json"
        IntroFlagStore(state).mark_seen()
        run(["--config", str(tmp_path / "c.json"), "--state", str(state)])
        assert "You are dealt two cards" not in capsys.readouterr().out

    def test_unknown_log_level_is_a_usage_error(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            run(["--log-level", "LOUD", "--state", str(tmp_path / "s.json")])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_any_case(self, monkeypatch, capsys, tmp_path) -> None:
        monkeypatch.setattr("builtins.input", lambda _: "q")
        code = run(["--log-level", "debug", "--config", str(tmp_path / "c.json"),
                    "--state", str(tmp_path / "s.json")])
        assert code == 0

    def test_rounds_limit(self, monkeypatch, capsys, tmp_path) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt: "#2" if "Raise to" in prompt else "c")
        run(["--seed", "4", "--rounds", "3",
             "--config", str(tmp_path / "c.json"), "--state", str(tmp_path / "s.json")])
        out = capsys.readouterr().out
        assert "ROUND 3" in out
        assert "ROUND 4" not in out
        assert "Final score:" in out


class TestIntroFlagStore:
    def test_fresh_store_has_not_seen(self, tmp_path) -> None:
        assert not IntroFlagStore(tmp_path / "s.json").has_seen_intro()

    def test_mark_seen_persists(self, tmp_path) -> None:
        path = tmp_path / "nested" / "s.json"
        IntroFlagStore(path).mark_seen()
        assert IntroFlagStore(path).has_seen_intro()

    def test_corrupt_state_reads_as_unseen(self, tmp_path) -> None:
        path = tmp_path / "s.json"
        path.write_text("{oops")
        assert not IntroFlagStore(path).has_seen_intro()
