"""Tests for GameContext construction and derived properties."""

import pytest

from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.utils.card import Card
from poker_assist.utils.constants import ActionType, Street


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


def _ctx(**kwargs) -> GameContext:
    params = dict(
        hole_cards=_cards("Ah Kd"),
        community_cards=[],
        street=Street.PREFLOP,
        pot=15.0,
        amount_to_call=0.0,
        hero_stack=1000.0,
        big_blind=10.0,
    )
    params.update(kwargs)
    return GameContext(**params)


class TestConstruction:
    def test_lists_become_tuples(self) -> None:
        ctx = _ctx(actions=[PriorAction(ActionType.RAISE, 30)], opponent_stacks=[500, 800])
        assert isinstance(ctx.hole_cards, tuple)
        assert isinstance(ctx.community_cards, tuple)
        assert isinstance(ctx.actions, tuple)
        assert ctx.opponent_stacks == (500, 800)

    def test_street_string_is_coerced(self) -> None:
        ctx = _ctx(street="FLOP", community_cards=_cards("2c 7d 9s"))
        assert ctx.street == Street.FLOP

    @pytest.mark.parametrize("name", ["flop", "Flop", "FLOP"])
    def test_street_name_is_case_insensitive(self, name: str) -> None:
        ctx = _ctx(street=name, community_cards=_cards("2c 7d 9s"))
        assert ctx.street is Street.FLOP

    def test_defaults(self) -> None:
        ctx = _ctx()
        assert ctx.active_players == 2
        assert not ctx.bluff_intent
        assert not ctx.force_bluff
        assert ctx.opponent_analytics == {}
        assert ctx.starting_stack is None


class TestValidation:
    def test_big_blind_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="big_blind"):
            _ctx(big_blind=0)

    def test_active_players_at_least_one(self) -> None:
        with pytest.raises(ValueError, match="active_players"):
            _ctx(active_players=0)

    @pytest.mark.parametrize("field", ["pot", "amount_to_call", "hero_stack", "small_blind"])
    def test_negative_money(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            _ctx(**{field: -1})

    def test_negative_opponent_stack(self) -> None:
        with pytest.raises(ValueError, match="opponent_stacks"):
            _ctx(opponent_stacks=[100, -5])

    def test_too_many_hole_cards(self) -> None:
        with pytest.raises(ValueError, match="hole cards"):
            _ctx(hole_cards=_cards("Ah Kd Qc"))

    def test_too_many_community_cards(self) -> None:
        with pytest.raises(ValueError, match="community cards"):
            _ctx(street=Street.RIVER, community_cards=_cards("2c 3c 4c 5c 6c 7c"))

    def test_duplicate_cards(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            _ctx(street=Street.FLOP, community_cards=_cards("Ah 7d 9s"))

    def test_invalid_street(self) -> None:
        with pytest.raises(ValueError):
            _ctx(street="SHOWDOWN")


class TestDerived:
    def test_no_bet_to_call(self) -> None:
        assert _ctx().no_bet_to_call
        assert not _ctx(amount_to_call=10).no_bet_to_call

    def test_pot_odds(self) -> None:
        assert _ctx(pot=100, amount_to_call=50).pot_odds == pytest.approx(100 / 3)
        assert _ctx(pot=100, amount_to_call=100).pot_odds == pytest.approx(50.0)

    def test_pot_odds_zero_without_bet(self) -> None:
        assert _ctx(pot=100).pot_odds == 0.0

    def test_hero_bbs(self) -> None:
        assert _ctx(hero_stack=150, big_blind=10).hero_bbs == pytest.approx(15.0)

    def test_force_bluff_implies_bluffing(self) -> None:
        assert _ctx(force_bluff=True).bluffing
        assert _ctx(bluff_intent=True).bluffing
        assert not _ctx().bluffing

    def test_is_preflop(self) -> None:
        assert _ctx().is_preflop
        assert not _ctx(street=Street.FLOP, community_cards=_cards("2c 7d 9s")).is_preflop


class TestFromStrings:
    @pytest.mark.parametrize("board, street", [
        ("", Street.PREFLOP),
        ("Qs Jh 2c", Street.FLOP),
        ("Qs Jh 2c 5d", Street.TURN),
        ("Qs Jh 2c 5d 9s", Street.RIVER),
    ])
    def test_infers_street(self, board: str, street: Street) -> None:
        ctx = GameContext.from_strings(
            "Ah Kd", board, pot=20, amount_to_call=0, hero_stack=500, big_blind=10,
        )
        assert ctx.street == street
        assert len(ctx.community_cards) == len(board.split())

    def test_explicit_street(self) -> None:
        ctx = GameContext.from_strings(
            "Ah Kd", "Qs Jh 2c", street=Street.FLOP,
            pot=20, amount_to_call=0, hero_stack=500, big_blind=10,
        )
        assert ctx.street == Street.FLOP

    def test_uninferable_board(self) -> None:
        with pytest.raises(ValueError, match="infer street"):
            GameContext.from_strings(
                "Ah Kd", "Qs Jh", pot=20, amount_to_call=0, hero_stack=500, big_blind=10,
            )
