"""Bluff heuristics: board threat, fold-equity estimate, opportunity spotting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.strategy.thresholds import (
    BLUFF_BASELINE,
    BLUFF_SUCCESS_MAX,
    BLUFF_SUCCESS_MIN,
    LEARNED_RATE_MAX,
    LEARNED_RATE_MIN,
    LOW_AGGRESSION,
    MAX_AGGRESSION_PENALTY,
    MAX_PRESSURE_BONUS,
    MIN_LEARNED_SAMPLES,
    MULTIWAY_DISCOUNT,
    THREATENING_BOARD,
)
from poker_assist.utils.card import Card
from poker_assist.utils.constants import ActionType, Street


@dataclass(frozen=True)
class BluffOpportunity:
    """A spot where a bluff looks profitable without being asked for."""

    reason: str
    suggested_action: ActionType
    success_odds: int


def board_threat(community: Sequence[Card]) -> float:
    """How scary the board looks, in [0.1, 0.8].

    Flush potential, adjacent ranks and broadway cards all add threat.
    An empty board scores 0.3.
    """
    if not community:
        return 0.3

    high_cards = sum(1 for c in community if c.value >= 10)
    max_suit = max(Counter(c.suit for c in community).values())
    values = sorted(c.value for c in community)

    flush_threat = 0.15 if max_suit >= 3 else 0.0
    straight_threat = sum(0.05 for lo, hi in zip(values, values[1:]) if hi - lo == 1)
    high_card_threat = min(0.2, high_cards * 0.05)

    return max(0.1, min(0.8, 0.2 + flush_threat + straight_threat + high_card_threat))


def aggression_ratio(actions: Sequence[PriorAction]) -> float:
    """Share of raises and all-ins among observed actions (0.5 when none)."""
    if not actions:
        return 0.5
    aggressive = sum(1 for a in actions if a.action in (ActionType.RAISE, ActionType.ALL_IN))
    return aggressive / len(actions)


def sizing_aggression(action: ActionType) -> float:
    """How much pressure the recommended action's sizing applies."""
    if action == ActionType.ALL_IN:
        return 1.0
    if action == ActionType.RAISE:
        return 0.7
    return 0.2


def learned_baseline(
    street: Street,
    params: Mapping[Street, tuple[int, int]] | None,
) -> float | None:
    """Historical success rate for the street, if enough samples exist.

    ``params`` maps street to (successes, total).
    """
    if not params:
        return None
    entry = params.get(Street(street))
    if entry is None:
        return None
    successes, total = entry
    if total < MIN_LEARNED_SAMPLES:
        return None
    return max(LEARNED_RATE_MIN, min(LEARNED_RATE_MAX, successes / total))


def estimate_bluff_success(
    street: Street,
    active_players: int,
    aggression: float,
    threat: float,
    sizing: float,
    params: Mapping[Street, tuple[int, int]] | None = None,
) -> int:
    """Estimated chance (integer percent, [5, 90]) that a bluff takes the pot.

    Args:
        street: Current street; selects the baseline.
        active_players: Players in the hand, hero included.
        aggression: Observed opponent aggression ratio in [0, 1].
        threat: Board threat in [0.1, 0.8].
        sizing: Sizing aggression of the planned action in [0, 1].
        params: Learned per-street (successes, total) counts.
    """
    street = Street(street)
    base = learned_baseline(street, params)
    if base is None:
        base = BLUFF_BASELINE[street]

    opponents = max(1, active_players - 1)
    fold_equity = base - (opponents - 1) * MULTIWAY_DISCOUNT
    fold_equity += min(MAX_PRESSURE_BONUS, threat * 0.3 + sizing * 0.25)
    fold_equity -= min(MAX_AGGRESSION_PENALTY, aggression * 0.2)

    fold_equity = max(BLUFF_SUCCESS_MIN, min(BLUFF_SUCCESS_MAX, fold_equity))
    return round(fold_equity * 100)


def detect_strong_bluff_opportunity(
    context: GameContext,
    strength: float,
    win_prob: float,
    threat: float,
    aggression: float,
    bluff_odds: int,
) -> BluffOpportunity | None:
    """Flag spots where bluffing is attractive even without bluff intent.

    Skipped entirely when the hero is already forcing a bluff.
    """
    if context.force_bluff:
        return None

    street = context.street
    scary_board = threat >= THREATENING_BOARD
    low_aggression = aggression <= LOW_AGGRESSION

    if (
        street == Street.RIVER
        and strength < 0.30
        and win_prob < 45
        and scary_board
        and low_aggression
    ):
        return BluffOpportunity(
            reason=(
                "Busted draw/weak showdown value on a threatening board; opponents "
                "have shown limited aggression. A well-sized bluff can maximize "
                "fold equity."
            ),
            suggested_action=ActionType.RAISE,
            success_odds=bluff_odds,
        )

    if street in (Street.FLOP, Street.TURN) and 0.30 <= strength <= 0.55 and scary_board:
        return BluffOpportunity(
            reason=(
                "Semi-bluff: you have equity with potential to improve and the board "
                "applies pressure; an aggressive line can win now or later."
            ),
            suggested_action=ActionType.RAISE,
            success_odds=max(bluff_odds, 40),
        )

    if (
        street == Street.PREFLOP
        and strength < 0.25
        and low_aggression
        and context.active_players <= 3
    ):
        if context.no_bet_to_call:
            odds = round((1 - (context.active_players - 1) * 0.15) * 100)
            return BluffOpportunity(
                reason=(
                    "Preflop steal: unopened pot, low table aggression, and many folds "
                    "expected. Opening raise pressures blinds."
                ),
                suggested_action=ActionType.RAISE,
                success_odds=max(35, min(65, odds)),
            )
        if context.active_players <= 2 and context.amount_to_call <= context.big_blind * 3:
            return BluffOpportunity(
                reason=(
                    "Light 3-bet spot: heads-up and low aggression indicate a profitable "
                    "bluff 3-bet frequency."
                ),
                suggested_action=ActionType.RAISE,
                success_odds=max(30, min(55, round(bluff_odds * 0.8))),
            )

    return None


def good_for_value(context: GameContext, strength: float, win_prob: float) -> bool:
    """Whether the hand is strong enough to switch from bluffing to value."""
    if context.force_bluff or context.is_preflop:
        return False
    weak_bluff = context.bluff_intent and strength < 0.5 and win_prob < 55
    return (strength >= 0.75 or win_prob >= 60) and not weak_bluff
