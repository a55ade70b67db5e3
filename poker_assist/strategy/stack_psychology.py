"""Stack-depth psychology and the strategy adjustments it implies.

Short stacks play push/fold and gamble more; deep stacks can apply
pressure across streets. ``analyze_stack_psychology`` classifies the
table, ``compute_stack_adjustments`` turns that read into sizing and
calling knobs for the decision engine.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from poker_assist.core.game_context import GameContext
from poker_assist.strategy.thresholds import (
    BULLY_SIZING,
    DEEP_HERO_SIZING,
    DEEP_STACK_BB,
    FACING_DEEP_RATIO,
    FACING_SHORT_RATIO,
    MEDIUM_SHORT_BB,
    SHORT_HERO_SIZING,
    SHORT_STACK_BB,
    VS_DEEP_SLOWPLAY_SIZING,
    VS_SHORT_VALUE_SIZING,
)
from poker_assist.utils.constants import Street


@dataclass(frozen=True)
class StackPsychology:
    """How stack sizes shape everyone's incentives this hand."""

    hero_status: str            # "short" | "medium" | "deep"
    opponent_status: str        # "short" | "medium" | "deep" | "mixed"
    hero_bbs: float
    avg_opponent_bbs: float
    desperation: float          # 0-100
    intimidation: float         # 0-100
    short_stack_present: bool
    deep_stack_present: bool
    stack_pressure: str         # "facing-deep" | "facing-short" | "balanced"

    @property
    def hero_is_short(self) -> bool:
        return self.hero_status == "short"

    @property
    def hero_is_deep(self) -> bool:
        return self.hero_status == "deep"


@dataclass(frozen=True)
class StackAdjustments:
    """Stack-driven knobs consumed by the decision rules."""

    sizing_multiplier: float = 1.0
    call_threshold: float = 0.0   # Chips hero will call without odds


def classify_stack(bbs: float) -> str:
    """Classify a stack by depth in big blinds."""
    if bbs < SHORT_STACK_BB:
        return "short"
    if bbs < DEEP_STACK_BB:
        return "medium"
    return "deep"


def analyze_stack_psychology(
    hero_stack: float,
    opponent_stacks: Sequence[float],
    big_blind: float,
    starting_stack: float | None = None,
) -> StackPsychology:
    """Classify hero and opponent stacks and score the pressure on hero.

    Args:
        hero_stack: Hero's remaining chips.
        opponent_stacks: Remaining chips of each active opponent.
        big_blind: Big blind amount.
        starting_stack: Hero's buy-in, used to detect heavy losses.
    """
    hero_bbs = hero_stack / big_blind
    opp_bbs = np.asarray(opponent_stacks, dtype=float) / big_blind
    has_opponents = opp_bbs.size > 0
    avg_opp = float(opp_bbs.mean()) if has_opponents else 0.0

    short_present = bool((opp_bbs < SHORT_STACK_BB).any())
    deep_present = bool((opp_bbs > DEEP_STACK_BB).any())

    if not has_opponents:
        opponent_status = "medium"
    elif short_present and deep_present:
        opponent_status = "mixed"
    elif avg_opp < SHORT_STACK_BB:
        opponent_status = "short"
    elif avg_opp > DEEP_STACK_BB:
        opponent_status = "deep"
    else:
        opponent_status = "medium"

    desperation = 0.0
    if hero_bbs < SHORT_STACK_BB:
        desperation = 50 + (SHORT_STACK_BB - hero_bbs) * 2.5
        if starting_stack and hero_stack < starting_stack * 0.5:
            desperation += 20
        desperation = min(100.0, desperation)
    elif hero_bbs < MEDIUM_SHORT_BB:
        desperation = 20 + (MEDIUM_SHORT_BB - hero_bbs) * 2

    intimidation = 0.0
    if deep_present:
        biggest = float(opp_bbs.max())
        if hero_bbs <= 0:
            intimidation = 80.0
        elif biggest > hero_bbs * 2:
            intimidation = 40 + min(40.0, (biggest / hero_bbs - 2) * 10)
        elif biggest > hero_bbs:
            intimidation = 20 + (biggest / hero_bbs - 1) * 20

    if has_opponents and avg_opp > hero_bbs * FACING_DEEP_RATIO:
        stack_pressure = "facing-deep"
    elif has_opponents and avg_opp < hero_bbs * FACING_SHORT_RATIO:
        stack_pressure = "facing-short"
    else:
        stack_pressure = "balanced"

    return StackPsychology(
        hero_status=classify_stack(hero_bbs),
        opponent_status=opponent_status,
        hero_bbs=hero_bbs,
        avg_opponent_bbs=avg_opp,
        desperation=desperation,
        intimidation=intimidation,
        short_stack_present=short_present,
        deep_stack_present=deep_present,
        stack_pressure=stack_pressure,
    )


def compute_stack_adjustments(
    psych: StackPsychology | None,
    strength: float,
    win_prob: float,
    context: GameContext,
) -> StackAdjustments:
    """Derive sizing and calling knobs from the stack read.

    Without a stack read the neutral defaults apply: no sizing change
    and a call threshold of two big blinds.
    """
    call = context.amount_to_call
    facing_bet = not context.no_bet_to_call
    multiplier = 1.0
    threshold = context.big_blind * 2

    if psych is None:
        return StackAdjustments(multiplier, threshold)

    if psych.hero_is_short:
        # All-or-nothing sizing, tighter calls
        multiplier = SHORT_HERO_SIZING
        threshold *= 0.75
    elif psych.hero_is_deep:
        multiplier = DEEP_HERO_SIZING
        threshold *= 1.2

    if psych.short_stack_present:
        if strength >= 0.65 and win_prob >= 65:
            multiplier *= VS_SHORT_VALUE_SIZING
        if facing_bet and call >= context.pot * 0.8 and strength < 0.60:
            threshold *= 0.80

    if psych.deep_stack_present or psych.stack_pressure == "facing-deep":
        if strength >= 0.70 and context.street != Street.RIVER:
            multiplier *= VS_DEEP_SLOWPLAY_SIZING
        if strength < 0.55 and win_prob < 60:
            threshold *= 0.85

    if psych.stack_pressure == "facing-short" and 0.45 <= strength < 0.65:
        multiplier *= BULLY_SIZING

    if psych.desperation > 50 and strength >= 0.40 and facing_bet and call <= context.hero_stack:
        threshold *= 1.3

    if psych.intimidation > 40:
        threshold *= 0.90

    return StackAdjustments(
        sizing_multiplier=multiplier,
        call_threshold=threshold,
    )
