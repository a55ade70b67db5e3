"""Heuristic hand strength and win probability.

All figures are closed-form approximations, not equity calculations:
preflop strength comes from a formula over the two hole cards, postflop
strength from the best hand's category alone.
"""

from __future__ import annotations

from collections.abc import Sequence

from poker_assist.core.hand_evaluator import HandEvaluator
from poker_assist.strategy.opponent_profile import OpponentProfile
from poker_assist.strategy.stack_psychology import StackPsychology
from poker_assist.strategy.thresholds import (
    AGGRESSIVE_OPPONENT_PENALTY,
    AGGRESSIVE_PENALTY_STRENGTH,
    CATEGORY_STRENGTH,
    CONNECTED_BONUS,
    DEEP_OPPONENT_PENALTY,
    HIGH_CARD_TIERS,
    LOOSE_OPPONENT_PENALTY,
    ONE_GAP_BONUS,
    OPPONENT_DISCOUNT,
    PAIR_FLOOR,
    PAIR_TIERS,
    PASSIVE_OPPONENT_BOOST,
    PREFLOP_CAP,
    SHORT_HERO_PENALTY,
    SHORT_OPPONENT_BOOST,
    STREET_MULTIPLIER,
    SUITED_BONUS,
    TIGHT_OPPONENT_BOOST,
    UNPAIRED_BASE,
    WIN_PROB_MAX,
    WIN_PROB_MIN,
)
from poker_assist.utils.card import Card
from poker_assist.utils.constants import Street


def preflop_strength(hole: Sequence[Card]) -> float:
    """Score two hole cards on a [0, 0.90] scale."""
    if len(hole) != 2:
        return 0.0

    card1, card2 = hole
    if card1.value == card2.value:
        for min_value, strength in PAIR_TIERS:
            if card1.value >= min_value:
                return strength
        return PAIR_FLOOR

    high = max(card1.value, card2.value)
    gap = abs(card1.value - card2.value)
    strength = UNPAIRED_BASE

    for min_value, bonus in HIGH_CARD_TIERS:
        if high >= min_value:
            strength += bonus
            break

    if card1.suit == card2.suit:
        strength += SUITED_BONUS

    if gap <= 1:
        strength += CONNECTED_BONUS
    elif gap <= 3:
        strength += ONE_GAP_BONUS

    return min(strength, PREFLOP_CAP)


def hand_strength(hole: Sequence[Card], community: Sequence[Card]) -> float:
    """Normalized [0, 1] strength of hero's holding.

    Without community cards the preflop formula applies; afterwards the
    best hand's category maps to a fixed step value.
    """
    if len(hole) < 2:
        return 0.0
    if not community:
        return preflop_strength(hole)
    best = HandEvaluator.best_hand(hole, community)
    return CATEGORY_STRENGTH[best.category]


def opponent_multiplier(strength: float, profile: OpponentProfile | None) -> float:
    """Confidence adjustment for the opponents' tendencies."""
    if profile is None:
        return 1.0
    multiplier = 1.0
    if profile.is_tight:
        multiplier *= TIGHT_OPPONENT_BOOST
    elif profile.is_loose:
        multiplier *= LOOSE_OPPONENT_PENALTY

    if profile.is_aggressive and strength < AGGRESSIVE_PENALTY_STRENGTH:
        multiplier *= AGGRESSIVE_OPPONENT_PENALTY
    elif profile.is_passive:
        multiplier *= PASSIVE_OPPONENT_BOOST
    return multiplier


def stack_multiplier(strength: float, psych: StackPsychology | None) -> float:
    """Confidence adjustment for stack dynamics."""
    if psych is None:
        return 1.0
    multiplier = 1.0
    if psych.short_stack_present and strength >= 0.50:
        multiplier *= SHORT_OPPONENT_BOOST
    if psych.deep_stack_present and strength < 0.60:
        multiplier *= DEEP_OPPONENT_PENALTY
    if psych.hero_is_short and strength < 0.55:
        multiplier *= SHORT_HERO_PENALTY
    return multiplier


def win_probability_for_strength(
    strength: float,
    active_players: int,
    street: Street,
    profile: OpponentProfile | None = None,
    psych: StackPsychology | None = None,
) -> float:
    """Win probability (percent, clamped to [5, 95]) for a given strength."""
    extra_opponents = max(0, active_players - 2)
    win = (
        strength
        * OPPONENT_DISCOUNT ** extra_opponents
        * STREET_MULTIPLIER[Street(street)]
        * opponent_multiplier(strength, profile)
        * stack_multiplier(strength, psych)
        * 100
    )
    return max(WIN_PROB_MIN, min(WIN_PROB_MAX, win))


def win_probability(
    hole: Sequence[Card],
    community: Sequence[Card],
    active_players: int,
    street: Street,
    profile: OpponentProfile | None = None,
    psych: StackPsychology | None = None,
) -> float:
    """Estimated chance (percent) that hero holds the best hand.

    Args:
        hole: Hero's hole cards.
        community: Community cards dealt so far.
        active_players: Players still in the hand, hero included.
        street: Current betting street.
        profile: Aggregated opponent tendencies, if tracked.
        psych: Stack psychology read, if opponent stacks are known.

    Returns:
        A value in [5, 95].
    """
    strength = hand_strength(hole, community)
    return win_probability_for_strength(strength, active_players, street, profile, psych)


def pot_odds(call_amount: float, pot: float) -> float:
    """Equity (percent) needed to call: call / (pot + call) * 100."""
    total = pot + call_amount
    if call_amount <= 0 or total <= 0:
        return 0.0
    return call_amount / total * 100


def expected_value(win_prob: float, pot: float, call_amount: float) -> float:
    """EV of calling, in chips, rounded to cents."""
    ev = (win_prob / 100) * (pot + call_amount) - call_amount
    return round(ev, 2)
