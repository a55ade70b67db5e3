"""Tests for bluff heuristics: board threat, fold equity and opportunities."""

import pytest

from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.strategy.bluff import (
    aggression_ratio,
    board_threat,
    detect_strong_bluff_opportunity,
    estimate_bluff_success,
    good_for_value,
    learned_baseline,
    sizing_aggression,
)
from poker_assist.utils.card import Card
from poker_assist.utils.constants import ActionType, Street


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


def _ctx(hole: str = "3h 4h", board: str = "", **kwargs) -> GameContext:
    params = dict(pot=100, amount_to_call=0, hero_stack=1000, big_blind=10)
    params.update(kwargs)
    return GameContext.from_strings(hole, board, **params)


class TestBoardThreat:
    @pytest.mark.parametrize("board, expected", [
        ("", 0.3),
        ("2c 7d 9s", 0.2),
        ("2c 3d 4s", 0.3),
        ("Th Jh Qh", 0.6),
        ("Ah Kh Qh Jh Th", 0.75),
    ])
    def test_threat(self, board: str, expected: float) -> None:
        assert board_threat(_cards(board)) == pytest.approx(expected)

    def test_bounds(self) -> None:
        for board in ("2c 2d 2h 2s 3c", "9h Th Jh Qh Kh", "Ac Kd"):
            assert 0.1 <= board_threat(_cards(board)) <= 0.8


class TestAggressionAndSizing:
    def test_no_actions(self) -> None:
        assert aggression_ratio([]) == 0.5

    def test_only_raises_and_all_ins_count(self) -> None:
        actions = [
            PriorAction(ActionType.RAISE, 30),
            PriorAction(ActionType.CALL, 30),
            PriorAction(ActionType.ALL_IN, 500),
            PriorAction(ActionType.BET, 20),
        ]
        assert aggression_ratio(actions) == pytest.approx(0.5)

    @pytest.mark.parametrize("action, expected", [
        (ActionType.ALL_IN, 1.0),
        (ActionType.BET, 0.2),
        (ActionType.RAISE, 0.7),
        (ActionType.CALL, 0.2),
        (ActionType.CHECK, 0.2),
        (ActionType.FOLD, 0.2),
    ])
    def test_sizing_aggression(self, action: ActionType, expected: float) -> None:
        assert sizing_aggression(action) == expected


class TestEstimateBluffSuccess:
    def test_river_baseline(self) -> None:
        assert estimate_bluff_success(Street.RIVER, 2, 0.0, 0.0, 0.0) == 55

    def test_pressure_bonus_capped(self) -> None:
        # 0.45 + min(0.25, 0.09 + 0.175) - 0.1
        assert estimate_bluff_success(Street.FLOP, 2, 0.5, 0.3, 0.7) == 60

    def test_multiway_discount(self) -> None:
        assert estimate_bluff_success(Street.FLOP, 4, 0.5, 0.3, 0.7) == 44

    def test_floor(self) -> None:
        assert estimate_bluff_success(Street.PREFLOP, 9, 1.0, 0.1, 0.0) == 5

    def test_ceiling(self) -> None:
        params = {Street.FLOP: (40, 50)}
        assert estimate_bluff_success(Street.FLOP, 2, 0.0, 0.8, 1.0, params) == 90

    def test_accepts_street_strings(self) -> None:
        assert estimate_bluff_success("RIVER", 2, 0.0, 0.0, 0.0) == 55

    @pytest.mark.parametrize("street", ["river", "River", "RIVER"])
    def test_street_strings_any_case(self, street: str) -> None:
        assert estimate_bluff_success(street, 2, 0.0, 0.0, 0.0) == 55
        assert learned_baseline(street, {Street.RIVER: (15, 20)}) == pytest.approx(0.75)

    @pytest.mark.parametrize("counts, expected", [
        ((40, 50), 80),
        ((19, 19), 45),  # too few samples, baseline used
        ((15, 20), 75),
        ((2, 40), 20),   # learned rate floored
    ])
    def test_learned_rates(self, counts: tuple[int, int], expected: int) -> None:
        params = {Street.FLOP: counts}
        assert estimate_bluff_success(Street.FLOP, 2, 0.0, 0.0, 0.0, params) == expected

    def test_learned_rates_for_other_street_ignored(self) -> None:
        params = {Street.TURN: (40, 50)}
        assert estimate_bluff_success(Street.FLOP, 2, 0.0, 0.0, 0.0, params) == 45


class TestLearnedBaseline:
    def test_no_params(self) -> None:
        assert learned_baseline(Street.RIVER, None) is None
        assert learned_baseline(Street.RIVER, {}) is None

    def test_clamped(self) -> None:
        assert learned_baseline(Street.RIVER, {Street.RIVER: (20, 20)}) == pytest.approx(0.8)
        assert learned_baseline(Street.RIVER, {Street.RIVER: (0, 20)}) == pytest.approx(0.2)


class TestOpportunity:
    def test_river_bluff(self) -> None:
        ctx = _ctx("3h 4h", "2c 7d 9s Jh Kc")
        opp = detect_strong_bluff_opportunity(ctx, 0.2, 20.0, 0.6, 0.2, 70)
        assert opp is not None
        assert opp.suggested_action == ActionType.RAISE
        assert opp.success_odds == 70
        assert "threatening board" in opp.reason

    def test_river_needs_passive_opponents(self) -> None:
        ctx = _ctx("3h 4h", "2c 7d 9s Jh Kc")
        assert detect_strong_bluff_opportunity(ctx, 0.2, 20.0, 0.6, 0.6, 70) is None

    def test_skipped_when_forcing(self) -> None:
        ctx = _ctx("3h 4h", "2c 7d 9s Jh Kc", force_bluff=True)
        assert detect_strong_bluff_opportunity(ctx, 0.2, 20.0, 0.6, 0.2, 70) is None

    @pytest.mark.parametrize("bluff_odds, expected", [(30, 40), (55, 55)])
    def test_semi_bluff(self, bluff_odds: int, expected: int) -> None:
        ctx = _ctx("3h 4h", "Th Jh Qc")
        opp = detect_strong_bluff_opportunity(ctx, 0.4, 35.0, 0.6, 0.5, bluff_odds)
        assert opp.reason.startswith("Semi-bluff")
        assert opp.success_odds == expected

    def test_semi_bluff_needs_scary_board(self) -> None:
        ctx = _ctx("3h 4h", "2c 7d 9s")
        assert detect_strong_bluff_opportunity(ctx, 0.4, 35.0, 0.2, 0.5, 50) is None

    def test_preflop_steal(self) -> None:
        ctx = _ctx("7d 2c", pot=15)
        opp = detect_strong_bluff_opportunity(ctx, 0.2, 17.0, 0.3, 0.0, 45)
        assert opp.reason.startswith("Preflop steal")
        assert opp.success_odds == 65

    @pytest.mark.parametrize("bluff_odds, expected", [(50, 40), (20, 30), (90, 55)])
    def test_light_three_bet(self, bluff_odds: int, expected: int) -> None:
        ctx = _ctx("7d 2c", pot=45, amount_to_call=20)
        opp = detect_strong_bluff_opportunity(ctx, 0.2, 17.0, 0.3, 0.0, bluff_odds)
        assert opp.reason.startswith("Light 3-bet")
        assert opp.success_odds == expected

    def test_no_three_bet_against_big_raise(self) -> None:
        ctx = _ctx("7d 2c", pot=45, amount_to_call=40)
        assert detect_strong_bluff_opportunity(ctx, 0.2, 17.0, 0.3, 0.0, 50) is None

    def test_no_preflop_bluff_against_aggressive_table(self) -> None:
        ctx = _ctx("7d 2c", pot=15)
        assert detect_strong_bluff_opportunity(ctx, 0.2, 17.0, 0.3, 0.5, 50) is None


class TestGoodForValue:
    def test_strong_postflop_hand(self) -> None:
        assert good_for_value(_ctx("Ah Ad", "As 7d 2c"), 0.8, 70.0)

    def test_never_preflop(self) -> None:
        assert not good_for_value(_ctx("Ah Ad"), 0.85, 72.0)

    def test_never_when_forcing(self) -> None:
        assert not good_for_value(_ctx("Ah Ad", "As 7d 2c", force_bluff=True), 0.8, 70.0)

    def test_weak_hand(self) -> None:
        assert not good_for_value(_ctx("3h 4h", "2c 7d 9s"), 0.2, 20.0)

    def test_bluff_intent_with_equity(self) -> None:
        assert good_for_value(_ctx("3h 4h", "2c 7d 9s", bluff_intent=True), 0.45, 65.0)
