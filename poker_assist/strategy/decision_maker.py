"""Rule-cascade decision engine.

Turns hand strength, win probability and pot odds into one of the six
actions with a sizing. The cascade is an ordered list of named rules;
the first rule whose predicate matches produces the decision.

Rule groups, in order:
  stack commitment
    → preflop (premium / strong / playable / free check / fold)
    → bluff lines (preflop, forced, stab, raise, commit)
    → general (give up / value / solid / marginal / weak)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, replace

from poker_assist.core.game_context import GameContext
from poker_assist.strategy.opponent_profile import BALANCED_PROFILE, OpponentProfile
from poker_assist.strategy.stack_psychology import (
    StackAdjustments,
    StackPsychology,
    compute_stack_adjustments,
)
from poker_assist.strategy.thresholds import (
    BASE_PRIMARY_FREQUENCY,
    BLUFF_CALL_MULTIPLE,
    BLUFF_OPEN_FRACTION,
    BLUFF_PRIMARY_SHIFT,
    BLUFF_RAISE_FRACTION,
    BLUFF_SECONDARY_SHIFT,
    BLUFF_SMALL_CALL_BB,
    BLUFF_STAB_FRACTION,
    GIVE_UP_STRENGTH,
    GIVE_UP_WIN_PROB,
    HALF_POT,
    HIGH_FOLD_TO_AGGRESSION,
    LOOSE_BLUFF_BIAS,
    MARGINAL_STRENGTH,
    MARGINAL_WIN_PROB,
    MAX_MARGIN_BONUS,
    PREFLOP_OPEN_BB,
    PREFLOP_PLAYABLE,
    PREFLOP_PREMIUM,
    PREFLOP_RAISE_BB,
    PREFLOP_STRONG,
    PREFLOP_TRASH,
    PRIMARY_FREQUENCY_MAX,
    PRIMARY_FREQUENCY_MIN,
    PUSH_FOLD_BB,
    SOLID_STRENGTH,
    SOLID_WIN_PROB,
    TIGHT_BLUFF_BIAS,
    VALUE_POT_FRACTION,
    VALUE_STRENGTH,
    VALUE_WIN_PROB,
    WEAK_CALL_WIN_PROB,
)
from poker_assist.utils.constants import ActionType

logger = logging.getLogger("poker_assist.strategy")


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Decision:
    """The engine's chosen action.

    ``amount`` is the bet/raise-to size or the call amount; fold, check
    and all-in carry no amount. ``rule`` names the rule that fired.
    """

    action: ActionType
    amount: float | None = None
    rule: str = ""


@dataclass(frozen=True)
class AlternativeLine:
    """A secondary line offered next to the primary decision."""

    action: ActionType
    amount: float | None
    reasoning: str


@dataclass(frozen=True)
class Spot:
    """Inputs of one decision plus the sizing figures derived from them."""

    strength: float
    win_prob: float
    pot_odds: float
    context: GameContext
    profile: OpponentProfile
    psych: StackPsychology | None
    adjustments: StackAdjustments

    @property
    def call(self) -> float:
        return self.context.amount_to_call

    @property
    def stack(self) -> float:
        return self.context.hero_stack

    @property
    def bb(self) -> float:
        return self.context.big_blind

    @property
    def pot(self) -> float:
        return self.context.pot

    @property
    def unopened(self) -> bool:
        return self.context.no_bet_to_call

    @property
    def min_raise(self) -> float:
        """Minimum legal raise-to: twice the call or two big blinds."""
        return max(self.bb * 2, self.call * 2)

    @property
    def pot_raise(self) -> float:
        return math.floor(self.pot * VALUE_POT_FRACTION)

    @property
    def open_action(self) -> ActionType:
        """Preflop aggression is always a raise (blinds are posted)."""
        return ActionType.RAISE if self.context.is_preflop else ActionType.BET

    @property
    def is_solid(self) -> bool:
        return self.win_prob >= SOLID_WIN_PROB or self.strength >= SOLID_STRENGTH

    @property
    def is_marginal(self) -> bool:
        return self.win_prob >= MARGINAL_WIN_PROB or self.strength >= MARGINAL_STRENGTH


Outcome = tuple[ActionType, float | None]


@dataclass(frozen=True)
class Rule:
    """A named (predicate, action) pair in the cascade."""

    name: str
    applies: Callable[[Spot], bool]
    act: Callable[[Spot], Outcome]


# ---------------------------------------------------------------------------
# Sizing helpers
# ---------------------------------------------------------------------------


def _raise_or_shove(action: ActionType, amount: float, stack: float) -> Outcome:
    if amount >= stack:
        return ActionType.ALL_IN, None
    return action, min(amount, stack)


def _check_or_fold(spot: Spot) -> Outcome:
    if spot.unopened:
        return ActionType.CHECK, None
    return ActionType.FOLD, None


def _call(spot: Spot) -> Outcome:
    return ActionType.CALL, spot.call


# ---------------------------------------------------------------------------
# Stack commitment
# ---------------------------------------------------------------------------


def _short_stack_committed(spot: Spot) -> bool:
    return (
        spot.psych is not None
        and spot.psych.hero_is_short
        and spot.strength >= 0.50
        and spot.stack < spot.bb * PUSH_FOLD_BB
        and not spot.unopened
        and spot.call >= spot.stack * 0.5
    )


# ---------------------------------------------------------------------------
# Preflop
# ---------------------------------------------------------------------------


def _preflop_premium(spot: Spot) -> Outcome:
    amount = min(spot.stack, max(PREFLOP_RAISE_BB * spot.bb, spot.pot_raise))
    if amount >= spot.stack:
        return ActionType.ALL_IN, None
    return ActionType.RAISE, max(PREFLOP_RAISE_BB * spot.bb, amount)


def _preflop_strong(spot: Spot) -> Outcome:
    if spot.unopened:
        base = PREFLOP_RAISE_BB * spot.bb
    else:
        base = max(spot.min_raise, PREFLOP_OPEN_BB * spot.bb)
    amount = min(spot.stack, math.floor(base))
    if amount >= spot.stack:
        return ActionType.ALL_IN, None
    return ActionType.RAISE, max(spot.bb, amount)


def _preflop_open(spot: Spot) -> Outcome:
    amount = math.floor(PREFLOP_OPEN_BB * spot.bb)
    return ActionType.RAISE, max(spot.bb, min(amount, spot.stack))


# ---------------------------------------------------------------------------
# Bluff lines
# ---------------------------------------------------------------------------


def _preflop_bluff(spot: Spot) -> Outcome:
    if spot.unopened:
        extra = spot.bb if spot.context.active_players > 3 else 0
        open_size = math.floor(PREFLOP_RAISE_BB * spot.bb + extra)
        return ActionType.RAISE, min(max(open_size, spot.min_raise), spot.stack)
    three_bet = max(spot.min_raise, math.floor(spot.call * 3))
    return _raise_or_shove(ActionType.RAISE, three_bet, spot.stack)


def _tightness_bias(profile: OpponentProfile) -> float:
    if profile.is_tight:
        return TIGHT_BLUFF_BIAS
    if profile.is_loose:
        return LOOSE_BLUFF_BIAS
    return 1.0


def _forced_bluff(spot: Spot) -> Outcome:
    if spot.unopened:
        fraction = BLUFF_OPEN_FRACTION * _tightness_bias(spot.profile)
        amount = max(spot.min_raise, math.floor(spot.pot * fraction))
        return spot.open_action, min(amount, spot.stack)

    # Opponents who fold a lot to aggression need less pressure
    if spot.profile.avg_fold_to_aggression > HIGH_FOLD_TO_AGGRESSION:
        fraction = 0.5
    else:
        fraction = BLUFF_RAISE_FRACTION
    amount = max(
        spot.min_raise,
        math.floor(max(spot.pot * fraction, spot.call * BLUFF_CALL_MULTIPLE)),
    )
    if amount >= spot.stack or spot.stack <= spot.pot:
        return ActionType.ALL_IN, None
    return ActionType.RAISE, min(amount, spot.stack)


def _bluff_stab(spot: Spot) -> Outcome:
    amount = max(spot.min_raise, math.floor(spot.pot * BLUFF_STAB_FRACTION))
    return spot.open_action, min(amount, spot.stack)


def _bluff_raise(spot: Spot) -> Outcome:
    amount = max(spot.min_raise, math.floor(spot.pot * BLUFF_RAISE_FRACTION))
    return _raise_or_shove(ActionType.RAISE, amount, spot.stack)


# ---------------------------------------------------------------------------
# General
# ---------------------------------------------------------------------------


def _value_raise(spot: Spot) -> Outcome:
    amount = math.floor(max(spot.min_raise, spot.pot_raise) * spot.adjustments.sizing_multiplier)
    action = spot.open_action if spot.unopened else ActionType.RAISE
    return _raise_or_shove(action, amount, spot.stack)


def _solid_bet(spot: Spot) -> Outcome:
    amount = math.floor(math.floor(spot.pot * HALF_POT) * spot.adjustments.sizing_multiplier)
    return spot.open_action, max(spot.bb, min(amount, spot.stack))


def _marginal_call_ok(spot: Spot) -> bool:
    threshold = spot.bb * 2.5 if spot.profile.is_passive else spot.bb * 2
    threshold = max(threshold, spot.adjustments.call_threshold)
    return spot.pot_odds > 0 and spot.win_prob > spot.pot_odds and spot.call <= threshold


RULES: tuple[Rule, ...] = (
    Rule("short_stack_commit", _short_stack_committed, lambda s: (ActionType.ALL_IN, None)),
    # Preflop
    Rule(
        "preflop_premium",
        lambda s: s.context.is_preflop and s.strength >= PREFLOP_PREMIUM,
        _preflop_premium,
    ),
    Rule(
        "preflop_strong",
        lambda s: s.context.is_preflop and s.strength >= PREFLOP_STRONG,
        _preflop_strong,
    ),
    Rule(
        "preflop_open",
        lambda s: s.context.is_preflop and s.strength >= PREFLOP_PLAYABLE and s.unopened,
        _preflop_open,
    ),
    Rule(
        "preflop_call",
        lambda s: s.context.is_preflop and s.strength >= PREFLOP_PLAYABLE and s.call <= s.bb,
        _call,
    ),
    Rule(
        "preflop_free_check",
        lambda s: s.context.is_preflop and not s.context.bluffing and s.unopened,
        lambda s: (ActionType.CHECK, None),
    ),
    Rule(
        "preflop_fold",
        lambda s: s.context.is_preflop and not s.context.bluffing and s.strength < PREFLOP_TRASH,
        lambda s: (ActionType.FOLD, None),
    ),
    # Bluff lines
    Rule("preflop_bluff", lambda s: s.context.bluffing and s.context.is_preflop, _preflop_bluff),
    Rule("forced_bluff", lambda s: s.context.force_bluff, _forced_bluff),
    Rule("bluff_stab", lambda s: s.context.bluffing and s.unopened, _bluff_stab),
    Rule(
        "bluff_raise",
        lambda s: s.context.bluffing and s.call <= s.bb * BLUFF_SMALL_CALL_BB,
        _bluff_raise,
    ),
    Rule(
        "bluff_commit",
        lambda s: s.context.bluffing and s.stack <= s.pot,
        lambda s: (ActionType.ALL_IN, None),
    ),
    # General
    Rule(
        "give_up",
        lambda s: s.win_prob < GIVE_UP_WIN_PROB or s.strength < GIVE_UP_STRENGTH,
        _check_or_fold,
    ),
    Rule(
        "value_raise",
        lambda s: s.win_prob >= VALUE_WIN_PROB or s.strength >= VALUE_STRENGTH,
        _value_raise,
    ),
    Rule("solid_bet", lambda s: s.is_solid and s.unopened, _solid_bet),
    Rule(
        "solid_call_odds",
        lambda s: s.is_solid and s.pot_odds > 0 and s.win_prob > s.pot_odds,
        _call,
    ),
    Rule(
        "solid_call_small",
        lambda s: s.is_solid and s.call <= max(s.bb * 3, s.adjustments.call_threshold),
        _call,
    ),
    Rule("solid_fold", lambda s: s.is_solid, lambda s: (ActionType.FOLD, None)),
    Rule("marginal_check", lambda s: s.is_marginal and s.unopened, lambda s: (ActionType.CHECK, None)),
    Rule("marginal_call", lambda s: s.is_marginal and _marginal_call_ok(s), _call),
    Rule("marginal_fold", lambda s: s.is_marginal, lambda s: (ActionType.FOLD, None)),
    Rule("weak_check", lambda s: s.unopened, lambda s: (ActionType.CHECK, None)),
    Rule(
        "weak_call",
        lambda s: s.call <= s.bb and s.win_prob >= WEAK_CALL_WIN_PROB,
        _call,
    ),
    Rule("weak_fold", lambda s: True, lambda s: (ActionType.FOLD, None)),
)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def clamp_action(
    action: ActionType,
    amount: float | None,
    hero_stack: float,
) -> Outcome:
    """Make an action legal for the hero's stack.

    - Fold, check and all-in carry no amount
    - Bets, raises and calls at or above the stack become ALL_IN
    """
    if action in (ActionType.FOLD, ActionType.CHECK, ActionType.ALL_IN):
        return action, None
    amount = max(0.0, amount or 0.0)
    if amount >= hero_stack:
        return ActionType.ALL_IN, None
    return action, amount


def clamp_decision(decision: Decision, hero_stack: float) -> Decision:
    """Apply ``clamp_action`` to a decision, keeping its rule name."""
    action, amount = clamp_action(decision.action, decision.amount, hero_stack)
    if action == decision.action and amount == decision.amount:
        return decision
    return replace(decision, action=action, amount=amount)


def decide(
    strength: float,
    win_prob: float,
    pot_odds: float,
    context: GameContext,
    profile: OpponentProfile | None = None,
    psych: StackPsychology | None = None,
) -> Decision:
    """Choose an action for the hero.

    Args:
        strength: Hand strength in [0, 1].
        win_prob: Estimated win probability (percent).
        pot_odds: Equity needed to call (percent, 0 when nothing to call).
        context: The game snapshot.
        profile: Aggregated opponent tendencies (balanced when omitted).
        psych: Stack psychology read (neutral when omitted).

    Returns:
        A legal Decision: never a fold when checking is free, never a
        fold when a bluff is forced, never a size at or above the stack.
    """
    spot = Spot(
        strength=strength,
        win_prob=win_prob,
        pot_odds=pot_odds,
        context=context,
        profile=profile or BALANCED_PROFILE,
        psych=psych,
        adjustments=compute_stack_adjustments(psych, strength, win_prob, context),
    )

    for rule in RULES:
        if rule.applies(spot):
            action, amount = rule.act(spot)
            decision = clamp_decision(Decision(action, amount, rule.name), context.hero_stack)
            logger.debug(
                "Rule %s → %s %s (strength=%.2f, win=%.1f%%, odds=%.1f%%)",
                rule.name, decision.action,
                "" if decision.amount is None else f"{decision.amount:g}",
                strength, win_prob, pot_odds,
            )
            return decision

    # weak_fold always applies
    raise AssertionError("decision cascade exhausted")


# ---------------------------------------------------------------------------
# Secondary line and mixed frequencies
# ---------------------------------------------------------------------------


def build_secondary(primary: Decision, context: GameContext) -> AlternativeLine | None:
    """Derive the alternative line that trades caution for aggression or back.

    All-in has no counterpart and yields None. Sizes are clamped to the
    hero's stack like the primary.
    """
    bb = context.big_blind
    pot = context.pot
    stack = context.hero_stack
    unopened = context.no_bet_to_call
    postflop_open = unopened and not context.is_preflop
    open_action = ActionType.BET if postflop_open else ActionType.RAISE

    def line(action: ActionType, amount: float | None, why: str) -> AlternativeLine:
        action, amount = clamp_action(action, amount, stack)
        return AlternativeLine(action, amount, why)

    if context.bluffing:
        if primary.action in (ActionType.BET, ActionType.RAISE):
            # Clamped bet/raise sizes are always below the stack
            return line(
                ActionType.ALL_IN, None,
                "Bluff line alternative: maximize fold equity with a shove.",
            )
        if primary.action in (ActionType.CHECK, ActionType.CALL):
            size = max(bb * 3, math.floor(pot * 0.6))
            return line(
                open_action, min(stack, size),
                f"Bluff line alternative: convert to a bluff {open_action.lower()}.",
            )
        if primary.action == ActionType.FOLD:
            if postflop_open:
                size = max(bb * 3, math.floor(pot * 0.6))
                return line(
                    ActionType.BET, min(stack, size),
                    "Bluff line alternative: apply maximum pressure.",
                )
            return line(ActionType.ALL_IN, None, "Bluff line alternative: apply maximum pressure.")

    if primary.action in (ActionType.BET, ActionType.RAISE):
        if unopened:
            return line(ActionType.CHECK, None, "Alternative: check back and keep the pot small.")
        return line(
            ActionType.CALL, context.amount_to_call,
            "Alternative: take a lower-variance line by calling.",
        )
    if primary.action == ActionType.CALL:
        size = max(bb * 2, math.floor(pot * 0.4))
        return line(
            open_action, min(stack, size),
            f"Alternative: seize initiative with a value/protection {open_action.lower()}.",
        )
    if primary.action == ActionType.CHECK:
        stab = ActionType.RAISE if context.is_preflop else ActionType.BET
        size = max(bb * 2, math.floor(pot * 0.33))
        return line(stab, min(stack, size), "Alternative: apply pressure with a small stab.")
    if primary.action == ActionType.FOLD:
        if unopened:
            return line(ActionType.CHECK, None, "Alternative: check back for free equity realization.")
        return line(ActionType.CALL, context.amount_to_call, "Alternative: call if pot odds are close.")

    return None


def allocate_frequencies(
    primary: ActionType,
    secondary: ActionType | None,
    win_prob: float,
    pot_odds: float,
    bluff_intent: bool,
) -> tuple[int, int]:
    """Split 100% between the primary and secondary lines.

    The primary gets 60% plus up to 30% for the margin by which the win
    probability beats the pot odds. Bluff intent shifts weight toward
    whichever line is aggressive.

    Returns:
        (primary_frequency, secondary_frequency), summing to 100.
    """
    if secondary is None:
        return 100, 0

    margin = max(0.0, win_prob - pot_odds)
    primary_freq = BASE_PRIMARY_FREQUENCY + min(MAX_MARGIN_BONUS, math.floor(margin / 5))

    if bluff_intent:
        if primary.is_aggressive:
            primary_freq = min(PRIMARY_FREQUENCY_MAX, primary_freq + BLUFF_PRIMARY_SHIFT)
        elif secondary.is_aggressive:
            primary_freq = max(55, primary_freq - BLUFF_SECONDARY_SHIFT)

    primary_freq = max(PRIMARY_FREQUENCY_MIN, min(PRIMARY_FREQUENCY_MAX, primary_freq))
    return primary_freq, 100 - primary_freq
