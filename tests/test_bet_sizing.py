"""Tests for preflop raise sizing."""

import pytest

from preflop_trainer.core.scenarios import SCENARIO_CATALOG, get_scenario
from preflop_trainer.strategy.bet_sizing import (
    SizingBand,
    SizingKind,
    SizingRules,
    correct_sizing,
    sizing_kind,
    sizing_options,
)


class TestSizingKind:
    @pytest.mark.parametrize("name,kind", [
        ("folded_to_you", SizingKind.OPEN),
        ("one_limper", SizingKind.ISOLATE),
        ("facing_raise", SizingKind.THREE_BET),
        ("facing_raise_and_caller", SizingKind.THREE_BET),
        ("facing_3bet", SizingKind.FOUR_BET),
        ("facing_4bet", SizingKind.FOUR_BET),
    ])
    def test_kinds(self, name: str, kind: SizingKind) -> None:
        assert sizing_kind(get_scenario(name)) == kind


class TestCorrectSizing:
    def test_band_contains_amount_for_every_scenario(self) -> None:
        for s in SCENARIO_CATALOG:
            band = correct_sizing(s)
            assert band.min <= band.amount <= band.max

    def test_open_is_three_big_blinds(self) -> None:
        band = correct_sizing(get_scenario("folded_to_you"))
        assert band == SizingBand(amount=6.0, min=5.0, max=7.0)

    def test_isolation_grows_with_limpers(self) -> None:
        one = correct_sizing(get_scenario("one_limper"))
        two = correct_sizing(get_scenario("multiple_limpers"))
        assert one.amount == 8.0
        assert two.amount == 10.0

    def test_3bet_is_three_times_last_raise(self) -> None:
        band = correct_sizing(get_scenario("facing_raise"))
        assert band == SizingBand(amount=18.0, min=15.0, max=21.0)

    def test_4bet_is_tighter(self) -> None:
        band = correct_sizing(get_scenario("facing_3bet"))
        assert band.amount == pytest.approx(41.4)
        assert band.min == pytest.approx(39.6)
        assert band.max == pytest.approx(45.0)
        assert (band.max - band.min) / band.amount < 0.2

    def test_scales_with_big_blind(self) -> None:
        band = correct_sizing(get_scenario("folded_to_you"), big_blind=10.0)
        assert band.amount == 30.0

    def test_custom_rules(self) -> None:
        rules = SizingRules(open_multiplier=2.5)
        band = correct_sizing(get_scenario("folded_to_you"), rules=rules)
        assert band.amount == 5.0

    def test_contains_is_inclusive(self) -> None:
        band = SizingBand(amount=6.0, min=5.0, max=7.0)
        assert band.contains(5.0)
        assert band.contains(7.0)
        assert not band.contains(7.5)


class TestSizingOptions:
    def test_four_unique_ascending_options(self) -> None:
        for s in SCENARIO_CATALOG:
            amounts = [o.amount for o in sizing_options(s)]
            assert len(amounts) == 4
            assert len(set(amounts)) == 4
            assert amounts == sorted(amounts)

    def test_exactly_one_option_inside_the_band(self) -> None:
        for s in SCENARIO_CATALOG:
            band = correct_sizing(s)
            inside = [o for o in sizing_options(s) if band.contains(o.amount)]
            assert [o.amount for o in inside] == [band.amount]

    def test_smaller_and_larger_distractors(self) -> None:
        for s in SCENARIO_CATALOG:
            band = correct_sizing(s)
            amounts = [o.amount for o in sizing_options(s)]
            assert min(amounts) < band.amount < max(amounts)

    def test_standard_framing_always_offered(self) -> None:
        for s in SCENARIO_CATALOG:
            labels = [o.label for o in sizing_options(s)]
            assert "Standard (3x)" in labels

    def test_open_options(self) -> None:
        options = sizing_options(get_scenario("folded_to_you"))
        assert [o.amount for o in options] == [4.0, 6.0, 9.0, 12.0]
        assert [o.label for o in options] == [
            "Small (2x)", "Standard (3x)", "Large (4.5x)", "Overbet (6x)",
        ]


class TestSizingRules:
    def test_defaults_are_valid(self) -> None:
        assert SizingRules().open_multiplier == 3.0

    @pytest.mark.parametrize("overrides", [
        {"open_band_bb": 3.0},
        {"open_multiplier": 0.0},
        {"open_band_bb": -0.5},
        {"limper_increment_bb": -1.0},
        {"three_bet_min": 3.2},
        {"three_bet_max": 2.8},
        {"four_bet_min": 1.5},
        {"four_bet_multiplier": 2.6},
    ])
    def test_rejects_broken_multipliers(self, overrides: dict) -> None:
        with pytest.raises(ValueError):
            SizingRules(**overrides)

    def test_wide_bands_keep_distractors_outside(self) -> None:
        rules = SizingRules(
            open_band_bb=1.0,
            three_bet_max=6.0,
            four_bet_multiplier=2.2,
            four_bet_min=2.0,
            four_bet_max=5.0,
        )
        for s in SCENARIO_CATALOG:
            band = correct_sizing(s, rules=rules)
            options = sizing_options(s, rules=rules)
            amounts = [o.amount for o in options]
            assert all(a > 0 for a in amounts)
            assert len(set(amounts)) == 4
            assert [a for a in amounts if band.contains(a)] == [band.amount]
