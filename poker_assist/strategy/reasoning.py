"""Human-readable explanation of a recommendation."""

from __future__ import annotations

from collections.abc import Sequence

from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.core.hand_evaluator import HandEvaluator
from poker_assist.strategy.decision_maker import Decision
from poker_assist.strategy.stack_psychology import StackPsychology
from poker_assist.utils.constants import ActionType


def hand_quality(strength: float) -> str:
    if strength >= 0.75:
        return "strong"
    if strength >= 0.50:
        return "moderate"
    if strength >= 0.30:
        return "weak"
    return "very weak"


def _format_chips(amount: float) -> str:
    return f"${amount:g}"


def _action_text(decision: Decision, win_prob: float, pot_odds: float) -> str:
    action = decision.action
    if action == ActionType.FOLD:
        text = "Folding is recommended as your hand strength is insufficient to justify calling or raising."
        if pot_odds > 0 and win_prob < pot_odds:
            text += (
                f" The pot odds ({pot_odds:.1f}%) are not favorable compared to "
                "your win probability."
            )
        return text
    if action == ActionType.CHECK:
        return "Checking is optimal here to see the next card for free while minimizing risk."
    if action == ActionType.CALL:
        text = "Calling is justified based on pot odds and your hand's potential."
        if pot_odds > 0:
            text += (
                f" Your win probability ({win_prob:.1f}%) exceeds the pot odds "
                f"({pot_odds:.1f}%)."
            )
        return text
    if action == ActionType.BET:
        text = "Betting is recommended to build the pot and put pressure on opponents."
        if decision.amount:
            text += f" A bet of {_format_chips(decision.amount)} represents good value based on pot size."
        return text
    if action == ActionType.RAISE:
        text = "Raising puts pressure on opponents and builds the pot with your strong hand."
        if decision.amount:
            text += f" A raise to {_format_chips(decision.amount)} represents good value based on pot size."
        return text
    return "Going all-in maximizes value with your premium hand and commitment to the pot."


def _count_actions(actions: Sequence[PriorAction]) -> tuple[int, int]:
    """(raises + all-ins, calls) among the observed actions."""
    pressure = sum(1 for a in actions if a.action in (ActionType.RAISE, ActionType.ALL_IN))
    calls = sum(1 for a in actions if a.action == ActionType.CALL)
    return pressure, calls


def _stack_notes(decision: Decision, psych: StackPsychology) -> list[str]:
    notes: list[str] = []
    if psych.hero_is_short:
        notes.append(
            f"You're short-stacked ({psych.hero_bbs:.1f} BBs), so pick your spots carefully."
        )
        if psych.desperation > 60:
            notes.append("High desperation: need to double up, but avoid spewing chips.")
    elif psych.hero_is_deep:
        notes.append(f"You have a deep stack ({psych.hero_bbs:.1f} BBs); use it to apply pressure.")

    if psych.short_stack_present:
        notes.append(
            "Short-stacked opponents present; they're more likely to call or shove "
            "out of desperation."
        )
        if decision.action in (ActionType.BET, ActionType.RAISE):
            notes.append("Sized larger for value against short stacks who may feel pot-committed.")

    if psych.stack_pressure == "facing-deep":
        notes.append(
            f"Facing deep-stacked opponents (avg {psych.avg_opponent_bbs:.1f} BBs) who can "
            "apply pressure on multiple streets."
        )
    elif psych.stack_pressure == "facing-short":
        notes.append("You have the stack advantage: bully short stacks with aggression.")

    if psych.intimidation > 50:
        notes.append("Facing much bigger stacks: play tighter and avoid marginal spots.")
    return notes


def generate_reasoning(
    decision: Decision,
    strength: float,
    win_prob: float,
    pot_odds: float,
    context: GameContext,
    psych: StackPsychology | None = None,
) -> str:
    """Explain the decision in a few sentences.

    Covers hand quality, the chosen action, the current made hand (or
    preflop note), bluff-mode remarks and stack dynamics.
    """
    parts = [
        f"Your hand is {hand_quality(strength)} with a {win_prob:.1f}% win probability.",
        _action_text(decision, win_prob, pot_odds),
    ]

    if context.is_preflop:
        parts.append("Position and preflop strength are key factors in this decision.")
    else:
        best = HandEvaluator.best_hand(context.hole_cards, context.community_cards)
        if best.is_complete:
            parts.append(f"Current hand: {best.description}.")

    if context.bluff_intent and not context.force_bluff and decision.action == ActionType.FOLD:
        pressure, calls = _count_actions(context.actions)
        multiway = " in a multiway pot" if context.active_players > 2 else ""
        parts.append(
            f"Opponents show {pressure} raises/shoves and {calls} calls{multiway}, "
            "indicating strong ranges. Continuing the bluff risks unfavorable pot odds "
            "and low fold equity."
        )

    if context.force_bluff:
        parts.append(
            "You chose to continue the bluff; the suggestion maximizes fold equity "
            "with aggressive sizing."
        )
    elif context.bluff_intent:
        parts.append(
            "You indicated a bluff intent; the line is biased toward aggression to "
            "maximize fold equity."
        )

    if psych is not None:
        parts.extend(_stack_notes(decision, psych))

    return " ".join(parts)
