"""Texas Hold'em hand evaluation engine.

Every evaluation carries a single integer ``tiebreak_value`` equal to
``category * 1000 + primary rank``, so comparing two evaluations is a
plain integer comparison and categories never overlap.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering
from itertools import combinations

from poker_assist.utils.card import Card
from poker_assist.utils.constants import RANK_NAMES, HandRanking

CATEGORY_BASE = 1000

_WHEEL = [14, 5, 4, 3, 2]


@total_ordering
@dataclass(frozen=True)
class HandEvaluation:
    """Result of evaluating a poker hand."""

    category: HandRanking
    tiebreak_value: int
    description: str

    @property
    def is_complete(self) -> bool:
        """False for the sentinel returned when fewer than 5 cards exist."""
        return self.tiebreak_value > 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.tiebreak_value < other.tiebreak_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.tiebreak_value == other.tiebreak_value

    def __hash__(self) -> int:
        return hash(self.tiebreak_value)


INCOMPLETE_HAND = HandEvaluation(
    category=HandRanking.HIGH_CARD,
    tiebreak_value=0,
    description="Incomplete hand",
)


def _plural(value: int) -> str:
    name = RANK_NAMES[value]
    return name + "es" if name == "Six" else name + "s"


class HandEvaluator:
    """Evaluates poker hands and determines the best 5-card combination."""

    @staticmethod
    def evaluate(cards: Iterable[Card]) -> HandEvaluation:
        """Evaluate the best 5-card hand from a list of cards.

        Args:
            cards: Any number of distinct cards. With more than five the
                   best 5-card subset is returned.

        Returns:
            HandEvaluation for the best hand, or the incomplete sentinel
            (HIGH_CARD, value 0) when fewer than 5 cards are given.
        """
        cards = list(cards)
        if len(cards) < 5:
            return INCOMPLETE_HAND
        if len(cards) == 5:
            return HandEvaluator._evaluate_five(cards)
        return max(
            HandEvaluator._evaluate_five(list(combo))
            for combo in combinations(cards, 5)
        )

    @staticmethod
    def best_hand(hole: Iterable[Card], community: Iterable[Card]) -> HandEvaluation:
        """Best 5-card hand from hole + community cards.

        Enumerates all C(n, 5) subsets; with fewer than 5 cards in total
        the incomplete sentinel is returned.
        """
        return HandEvaluator.evaluate([*hole, *community])

    @staticmethod
    def _evaluate_five(cards: list[Card]) -> HandEvaluation:
        """Evaluate exactly 5 cards."""
        values = sorted((c.value for c in cards), reverse=True)
        is_flush = len({c.suit for c in cards}) == 1
        straight_high = HandEvaluator._straight_high(values)
        counts = Counter(values)
        # Groups ordered by size, then rank: [(rank, count), ...]
        groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
        shape = [count for _, count in groups]
        top = groups[0][0]

        if is_flush and straight_high is not None:
            if straight_high == 14:
                return HandEvaluator._result(HandRanking.ROYAL_FLUSH, 0, "Royal Flush")
            return HandEvaluator._result(
                HandRanking.STRAIGHT_FLUSH, straight_high,
                f"Straight Flush, {RANK_NAMES[straight_high]} high",
            )

        if shape == [4, 1]:
            return HandEvaluator._result(
                HandRanking.FOUR_OF_A_KIND, top, f"Four of a Kind, {_plural(top)}"
            )

        if shape == [3, 2]:
            pair = groups[1][0]
            return HandEvaluator._result(
                HandRanking.FULL_HOUSE, top,
                f"Full House, {_plural(top)} full of {_plural(pair)}",
            )

        if is_flush:
            return HandEvaluator._result(
                HandRanking.FLUSH, values[0], f"Flush, {RANK_NAMES[values[0]]} high"
            )

        if straight_high is not None:
            return HandEvaluator._result(
                HandRanking.STRAIGHT, straight_high,
                f"Straight, {RANK_NAMES[straight_high]} high",
            )

        if shape == [3, 1, 1]:
            return HandEvaluator._result(
                HandRanking.THREE_OF_A_KIND, top, f"Three of a Kind, {_plural(top)}"
            )

        if shape == [2, 2, 1]:
            # Only the higher pair counts toward the tiebreak
            low = groups[1][0]
            return HandEvaluator._result(
                HandRanking.TWO_PAIR, top, f"Two Pair, {_plural(top)} and {_plural(low)}"
            )

        if shape == [2, 1, 1, 1]:
            return HandEvaluator._result(
                HandRanking.ONE_PAIR, top, f"Pair of {_plural(top)}"
            )

        return HandEvaluator._result(
            HandRanking.HIGH_CARD, values[0], f"High Card: {RANK_NAMES[values[0]]}"
        )

    @staticmethod
    def _straight_high(values: list[int]) -> int | None:
        """Return the high card value of a straight, or None.

        Handles the A-2-3-4-5 (wheel) straight as a special case where
        the ace plays low and the straight is five-high.
        """
        distinct = sorted(set(values), reverse=True)
        if len(distinct) != 5:
            return None
        if distinct[0] - distinct[4] == 4:
            return distinct[0]
        if distinct == _WHEEL:
            return 5
        return None

    @staticmethod
    def _result(category: HandRanking, score: int, description: str) -> HandEvaluation:
        return HandEvaluation(
            category=category,
            tiebreak_value=int(category) * CATEGORY_BASE + score,
            description=description,
        )


def evaluate(cards: Iterable[Card]) -> HandEvaluation:
    """Module-level shortcut for :meth:`HandEvaluator.evaluate`."""
    return HandEvaluator.evaluate(cards)


def best_hand(hole: Iterable[Card], community: Iterable[Card]) -> HandEvaluation:
    """Module-level shortcut for :meth:`HandEvaluator.best_hand`."""
    return HandEvaluator.best_hand(hole, community)
