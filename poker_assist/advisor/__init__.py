"""Recommendation engine for a human poker player.

Combines heuristic hand strength, opponent and stack reads, a rule
cascade and bluff heuristics into a single recommendation per spot.

Key public API:
    AdvisorEngine            -- Orchestrator with an optional params fetcher
    generate_recommendation  -- One-shot recommendation for a GameContext
    AIRecommendation         -- Engine output (action, sizing, metrics)
    ModelParams              -- Learned per-street bluff success rates
"""

from poker_assist.advisor.data_structures import AIRecommendation, ParamsFetcher
from poker_assist.advisor.engine import AdvisorEngine, generate_recommendation
from poker_assist.advisor.model_params import ModelParams, load_model_params_file

__all__ = [
    "AIRecommendation",
    "AdvisorEngine",
    "ModelParams",
    "ParamsFetcher",
    "generate_recommendation",
    "load_model_params_file",
]
