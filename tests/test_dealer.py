"""Tests for round dealing."""

import random

import pytest

from preflop_trainer.core.config import TrainerConfig
from preflop_trainer.core.errors import InvalidScenarioForPosition, SizingNotApplicable
from preflop_trainer.core.hand import Hand
from preflop_trainer.core.scenarios import ScenarioCategory, get_scenario
from preflop_trainer.training.dealer import build_round, deal_round, effective_to_call
from preflop_trainer.utils.card import Card
from preflop_trainer.utils.constants import Action, Position


def _hand(a: str, b: str) -> Hand:
    return Hand(Card.from_str(a), Card.from_str(b))


@pytest.fixture(scope="module")
def many_rounds():
    rng = random.Random(2024)
    return [deal_round(rng) for _ in range(3000)]


class TestDealRound:
    def test_two_distinct_cards(self, many_rounds) -> None:
        for r in many_rounds:
            assert r.hand.card_a != r.hand.card_b

    def test_utg_only_folded_to_you(self, many_rounds) -> None:
        for r in many_rounds:
            if r.position == Position.UTG:
                assert r.scenario.category == ScenarioCategory.FOLDED_TO_YOU

    def test_big_blind_never_folded_to_you(self, many_rounds) -> None:
        for r in many_rounds:
            if r.position == Position.BB:
                assert r.scenario.category != ScenarioCategory.FOLDED_TO_YOU

    def test_every_position_dealt(self, many_rounds) -> None:
        assert {r.position for r in many_rounds} == set(Position)

    def test_sizing_only_for_raises(self, many_rounds) -> None:
        for r in many_rounds:
            if r.correct_answer == Action.RAISE:
                band = r.correct_sizing
                assert band is not None
                assert band.min <= band.amount <= band.max
            else:
                assert r.correct_sizing is None

    def test_free_check_only_for_big_blind_in_limped_pot(self, many_rounds) -> None:
        for r in many_rounds:
            expected = r.position == Position.BB and r.scenario.is_limped
            assert r.is_free_check == expected

    def test_same_seed_same_rounds(self) -> None:
        a = [deal_round(random.Random(5)) for _ in range(3)]
        b = [deal_round(random.Random(5)) for _ in range(3)]
        assert a == b

    def test_catalog_without_eligible_scenario(self) -> None:
        only_raise = (get_scenario("facing_raise"),)
        rng = random.Random(0)
        with pytest.raises(InvalidScenarioForPosition):
            for _ in range(200):
                deal_round(rng, catalog=only_raise)


class TestEffectiveToCall:
    def test_small_blind_owes_the_difference(self) -> None:
        config = TrainerConfig()
        assert effective_to_call(get_scenario("folded_to_you"), Position.SB, config) == 1.0

    def test_big_blind_faces_raise(self) -> None:
        config = TrainerConfig()
        assert effective_to_call(get_scenario("facing_raise"), Position.BB, config) == 4.0

    def test_other_seats_owe_everything(self) -> None:
        config = TrainerConfig()
        assert effective_to_call(get_scenario("facing_raise"), Position.CO, config) == 6.0


class TestRoundState:
    def test_free_check_round(self) -> None:
        r = build_round(_hand("7c", "2d"), Position.BB, get_scenario("one_limper"))
        assert r.is_free_check
        assert r.effective_to_call == 0
        assert Action.FOLD not in r.available_actions
        assert r.action_label(Action.CALL) == "Check"
        assert r.correct_answer == Action.CALL

    def test_regular_round_offers_everything(self) -> None:
        r = build_round(_hand("Ah", "Ad"), Position.UTG, get_scenario("folded_to_you"))
        assert r.available_actions == (Action.FOLD, Action.CALL, Action.RAISE)
        assert r.action_label(Action.CALL) == "Call"
        assert r.hand_key == "AA"
        assert r.correct_answer == Action.RAISE
        assert r.sizing_band().amount == 6.0

    def test_sizing_band_of_non_raise_round(self) -> None:
        r = build_round(_hand("7c", "2d"), Position.MP, get_scenario("folded_to_you"))
        assert r.correct_answer == Action.FOLD
        with pytest.raises(SizingNotApplicable):
            r.sizing_band()

    def test_small_blind_checks_when_blinds_are_equal(self) -> None:
        config = TrainerConfig(small_blind=2.0, big_blind=2.0)
        r = build_round(_hand("7c", "2d"), Position.SB, get_scenario("folded_to_you"), config)
        assert r.effective_to_call == 0
        assert r.is_free_check
        assert r.available_actions == (Action.CALL, Action.RAISE)
        assert r.action_label(Action.CALL) == "Check"

    def test_free_check_answer_is_always_offered(self) -> None:
        config = TrainerConfig(small_blind=2.0, big_blind=2.0)
        rng = random.Random(31)
        for _ in range(2000):
            r = deal_round(rng, config)
            assert r.correct_answer in r.available_actions

    def test_config_blinds_flow_through(self) -> None:
        config = TrainerConfig(small_blind=5.0, big_blind=10.0)
        r = build_round(_hand("Ah", "Ad"), Position.SB, get_scenario("folded_to_you"), config)
        assert r.correct_sizing.amount == 30.0
