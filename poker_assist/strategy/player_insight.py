"""Range read of a single opponent from their action sequence.

A looser companion to the decision engine: pattern-matches the number
of bets, calls and checks into a range label, then nudges the bluff
likelihood by street, check-raises and bet sizing.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.interface.opponent_stats import PlayerAnalytics
from poker_assist.utils.constants import ActionType, Street

LARGE_BET = 50.0  # Chips


@dataclass(frozen=True)
class InsightSummary:
    """What an opponent's actions suggest about their holding."""

    summary: str
    likely_range: str
    confidence: int
    possible_hands: tuple[str, ...]
    bluff_likelihood: int
    bluff_reasoning: str
    detailed_analysis: str


@dataclass(frozen=True)
class _Pattern:
    likely_range: str
    possible_hands: tuple[str, ...]
    confidence: int
    bluff_likelihood: int
    note: str | None = None


def _has_check_raise(actions: Sequence[PriorAction]) -> bool:
    """A check followed later by a bet or raise."""
    checked = False
    for a in actions:
        if a.action == ActionType.CHECK:
            checked = True
        elif checked and a.action in (ActionType.BET, ActionType.RAISE):
            return True
    return False


def _match_pattern(
    raises: int,
    calls: int,
    checks: int,
    all_ins: int,
    street: Street | None,
) -> _Pattern | None:
    if raises >= 3:
        return _Pattern(
            "Premium hands (AA, KK, QQ) or very strong made hands",
            ("Pocket Aces", "Pocket Kings", "Pocket Queens", "Top Set", "Straight", "Flush"),
            75, 15,
        )
    if raises == 2:
        return _Pattern(
            "Strong hands (TT+, AK, AQ) or strong draws",
            ("Overpair", "Top Pair Top Kicker", "Two Pair", "Flush Draw", "Straight Draw"),
            65, 25,
        )
    if raises == 1 and calls >= 2:
        return _Pattern(
            "Top pairs, draws, or mid pairs",
            ("Top Pair", "Pocket Pair", "Flush Draw", "Straight Draw", "Middle Pair"),
            55, 35,
            "passive play after initial aggression",
        )
    if raises == 1 and calls == 0:
        return _Pattern(
            "Polarized: very strong OR bluffing",
            ("Strong Made Hand", "Overpair", "Set", "Air/Bluff", "Weak Draw"),
            50, 45,
            "single aggressive action with no follow-up",
        )
    if calls >= 3:
        return _Pattern(
            "Drawing hands or weak made hands",
            ("Flush Draw", "Straight Draw", "Weak Pair", "Ace High", "Gutshot"),
            55, 40,
            "consistent calling suggests drawing or pot control",
        )
    if checks >= 2 and raises == 0:
        return _Pattern(
            "Weak showdown value or marginal hands",
            ("Weak Pair", "Ace High", "King High", "Backdoor Draw", "Nothing"),
            50, 50,
            "excessive checking indicates weakness or trap",
        )
    if all_ins > 0:
        return _Pattern(
            "Polarized: nuts or complete bluff",
            ("Top Set", "Straight", "Flush", "Overpair", "Total Bluff"),
            45, 55 if street == Street.RIVER else 35,
            "all-in move is highly polarizing",
        )
    return None


def _bluff_reasoning(likelihood: int, notes: list[str]) -> str:
    joined = "; ".join(notes)
    if likelihood >= 60:
        text = f"High bluff likelihood ({likelihood}%). "
        if notes:
            text += f"Suspicious actions: {joined}. "
        return text + "Betting pattern suggests polarized range with significant bluff component."
    if likelihood >= 40:
        text = f"Moderate bluff likelihood ({likelihood}%). "
        if notes:
            text += f"Notable actions: {joined}. "
        return text + "Actions indicate mixed range of value and bluffs."
    text = f"Low bluff likelihood ({likelihood}%). Betting pattern suggests genuine strength."
    if notes:
        text += f" However: {joined}."
    return text


def generate_player_insight(
    actions: Sequence[PriorAction],
    context: GameContext | None = None,
    analytics: PlayerAnalytics | None = None,
) -> InsightSummary:
    """Read an opponent's likely range and bluff frequency.

    Args:
        actions: The opponent's actions this hand, in order.
        context: Current game snapshot, for the street and board.
        analytics: Tracked stats for the opponent, if any.

    Returns:
        InsightSummary with a range label, confidence and bluff likelihood.
    """
    counts = Counter(a.action for a in actions)
    raises = counts[ActionType.BET] + counts[ActionType.RAISE] + counts[ActionType.ALL_IN]
    calls = counts[ActionType.CALL]
    checks = counts[ActionType.CHECK]
    all_ins = counts[ActionType.ALL_IN]

    likely_range = "Wide, mixed strength"
    confidence = 40
    possible_hands: list[str] = []
    bluff_likelihood = round(analytics.bluff_frequency) if analytics else 30
    notes: list[str] = []

    # Enough history for the stats to mean something
    if analytics and analytics.hands_tracked > 10:
        if analytics.vpip < 20 and analytics.pfr < 15:
            confidence += 10
            notes.append(f"tight player (VPIP {analytics.vpip:g}%)")
        elif analytics.vpip > 35:
            confidence -= 5
            notes.append(f"loose player (VPIP {analytics.vpip:g}%)")

        if analytics.aggression_factor > 2.5:
            bluff_likelihood += 10
            notes.append(f"high aggression factor ({analytics.aggression_factor:.1f})")
        elif analytics.aggression_factor < 1:
            bluff_likelihood -= 10

    street = context.street if context else None

    pattern = _match_pattern(raises, calls, checks, all_ins, street)
    if pattern is not None:
        likely_range = pattern.likely_range
        possible_hands = list(pattern.possible_hands)
        confidence = pattern.confidence
        bluff_likelihood = pattern.bluff_likelihood
        if pattern.note:
            notes.append(pattern.note)

    if street == Street.PREFLOP:
        bluff_likelihood = max(20, bluff_likelihood - 15)
    elif street == Street.RIVER:
        bluff_likelihood = min(70, bluff_likelihood + 15)
        if raises > 0 and calls == 0:
            notes.append("river aggression without prior commitment")
            bluff_likelihood = min(75, bluff_likelihood + 10)

    if _has_check_raise(actions):
        notes.append("check-raise detected - could be trap or bluff")
        bluff_likelihood = 40

    large_bets = sum(
        1 for a in actions
        if a.action in (ActionType.BET, ActionType.RAISE) and a.amount > LARGE_BET
    )
    if large_bets >= 2:
        notes.append("oversized bets may indicate polarization")
        bluff_likelihood = min(65, bluff_likelihood + 10)

    street_label = street.value if street else "UNKNOWN"
    if raises + all_ins >= 2:
        activity = "strong aggression"
    elif raises + all_ins == 1:
        activity = "selective aggression"
    else:
        activity = "passive play"
    analysis = [
        f"On {street_label}: {raises} raises/bets, {calls} calls, {checks} checks.",
        f"Player shows {activity}.",
    ]

    board = context.community_cards if context else ()
    if len(board) >= 3:
        max_suit = max(Counter(c.suit for c in board).values())
        if max_suit >= 3:
            analysis.append(f"Board shows flush draw potential ({max_suit} suited cards).")
            if raises > 0 and "Flush Draw" not in possible_hands:
                possible_hands.append("Flush Draw")

    analysis.append(
        f"Range confidence: {confidence}%. "
        f"Most likely holdings: {', '.join(possible_hands[:3]) or 'unclear'}."
    )

    lean = "possible bluff" if bluff_likelihood >= 50 else "likely value"
    return InsightSummary(
        summary=f"{likely_range}. Actions suggest {lean}.",
        likely_range=likely_range,
        confidence=confidence,
        possible_hands=tuple(possible_hands),
        bluff_likelihood=bluff_likelihood,
        bluff_reasoning=_bluff_reasoning(bluff_likelihood, notes),
        detailed_analysis=" ".join(analysis),
    )
