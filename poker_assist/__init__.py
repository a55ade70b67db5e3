"""Poker hand evaluation and action advice.

Ranks hands, estimates strength and win probability from a snapshot of
the game, and recommends fold / check / call / bet / raise / all-in with
a sizing, an alternative line and a short explanation. Also reads an
opponent's range from their action sequence.

Key public API:
    evaluate                 -- Rank a set of cards (best 5 of them)
    best_hand                -- Best 5-card hand from hole + community cards
    generate_recommendation  -- Recommend an action for a GameContext
    generate_player_insight  -- Range and bluff read of one opponent
    AdvisorEngine            -- Recommendation orchestrator
    GameContext, PriorAction -- Engine input
    Card                     -- Playing card value type
    AIRecommendation         -- Engine output
"""

from poker_assist.advisor import AdvisorEngine, AIRecommendation, generate_recommendation
from poker_assist.core.game_context import GameContext, PriorAction
from poker_assist.core.hand_evaluator import best_hand, evaluate
from poker_assist.strategy.player_insight import generate_player_insight
from poker_assist.utils.card import Card

__all__ = [
    "AIRecommendation",
    "AdvisorEngine",
    "Card",
    "GameContext",
    "PriorAction",
    "best_hand",
    "evaluate",
    "generate_player_insight",
    "generate_recommendation",
]
