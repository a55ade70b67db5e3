"""Output data structures for the advisor engine.

SecondaryRecommendation: An alternative line with its mixing frequency.
SmartBluff: A flagged bluffing opportunity the hero did not ask for.
AIRecommendation: Complete engine output for one game snapshot.
ParamsFetcher: Interface for the caller-provided model parameter source.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from poker_assist.core.hand_evaluator import HandEvaluation
from poker_assist.utils.constants import ActionType


@dataclass(frozen=True)
class SecondaryRecommendation:
    """An alternative line, played ``frequency`` percent of the time."""

    action: ActionType
    bet_size: float | None
    reasoning: str
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "bet_size": self.bet_size,
            "reasoning": self.reasoning,
            "frequency": self.frequency,
        }


@dataclass(frozen=True)
class SmartBluff:
    """A spot where bluffing looks profitable.

    Attributes:
        flag: Always True when present; kept for display code.
        reason: Why the spot qualifies.
        suggested_action: The bluffing action to take.
        success_odds: Estimated fold equity in percent.
    """

    flag: bool
    reason: str
    suggested_action: ActionType
    success_odds: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "flag": self.flag,
            "reason": self.reason,
            "suggested_action": self.suggested_action.value,
            "success_odds": self.success_odds,
        }


@dataclass(frozen=True)
class AIRecommendation:
    """Complete output from the advisor for one game snapshot.

    Attributes:
        action: Recommended primary action.
        bet_size: Bet/raise-to size or call amount; None for fold,
                  check and all-in.
        win_probability: Estimated chance of holding the best hand (5-95).
        reasoning: Free-text explanation.
        pot_odds: Equity needed to call (percent); None with no bet.
        expected_value: EV of calling in chips.
        secondary: Alternative line, if the primary has a counterpart.
        bluff_aware: Whether the hero declared bluff intent.
        primary_frequency: How often to take the primary line (50-100).
        bluff_success_odds: Estimated fold equity in percent (5-90).
        good_for_value: Hand is strong enough to stop bluffing.
        smart_bluff: Flagged bluffing opportunity, if any.
        hand: Best-hand evaluation for display.
        rule: Name of the decision rule that fired.
    """

    action: ActionType
    bet_size: float | None
    win_probability: float
    reasoning: str
    pot_odds: float | None
    expected_value: float
    secondary: SecondaryRecommendation | None
    bluff_aware: bool
    primary_frequency: int
    bluff_success_odds: int
    good_for_value: bool
    smart_bluff: SmartBluff | None
    hand: HandEvaluation
    rule: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping of the recommendation."""
        return {
            "action": self.action.value,
            "bet_size": self.bet_size,
            "win_probability": self.win_probability,
            "reasoning": self.reasoning,
            "pot_odds": self.pot_odds,
            "expected_value": self.expected_value,
            "secondary": self.secondary.to_dict() if self.secondary else None,
            "bluff_aware": self.bluff_aware,
            "primary_frequency": self.primary_frequency,
            "bluff_success_odds": self.bluff_success_odds,
            "good_for_value": self.good_for_value,
            "smart_bluff": self.smart_bluff.to_dict() if self.smart_bluff else None,
            "hand": {
                "category": self.hand.category.name,
                "tiebreak_value": self.hand.tiebreak_value,
                "description": self.hand.description,
            },
            "rule": self.rule,
        }


@runtime_checkable
class ParamsFetcher(Protocol):
    """Source of the learned model parameter blob.

    Called at most once per process. May return None when nothing has
    been learned yet; exceptions are logged and treated as "no params".

    Usage:
        engine = AdvisorEngine(params_fetcher=lambda: json.loads(path.read_text()))
    """

    def __call__(self) -> Mapping[str, Any] | None: ...
