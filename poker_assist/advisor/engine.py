"""AdvisorEngine: top-level orchestrator for one recommendation.

Runs the strength estimator, opponent and stack reads, decision cascade,
secondary line, bluff heuristics and reasoning, and packs the results
into an AIRecommendation.

Logs one INFO line per recommendation for decision transparency.
"""

from __future__ import annotations

import logging
import time

from poker_assist.advisor.data_structures import (
    AIRecommendation,
    ParamsFetcher,
    SecondaryRecommendation,
    SmartBluff,
)
from poker_assist.advisor.model_params import (
    ModelParams,
    current_model_params,
    load_model_params_once,
)
from poker_assist.core.game_context import GameContext
from poker_assist.core.hand_evaluator import HandEvaluator
from poker_assist.strategy.bluff import (
    aggression_ratio,
    board_threat,
    detect_strong_bluff_opportunity,
    estimate_bluff_success,
    good_for_value,
    sizing_aggression,
)
from poker_assist.strategy.decision_maker import (
    allocate_frequencies,
    build_secondary,
    decide,
)
from poker_assist.strategy.hand_strength import (
    expected_value,
    hand_strength,
    win_probability_for_strength,
)
from poker_assist.strategy.opponent_profile import analyze_opponent_tendencies
from poker_assist.strategy.reasoning import generate_reasoning
from poker_assist.strategy.stack_psychology import analyze_stack_psychology

logger = logging.getLogger("poker_assist.advisor")


class AdvisorEngine:
    """Recommendation orchestrator.

    The optional ``params_fetcher`` is called once per process, on the
    first recommendation, to load learned bluff rates.

    Usage:
        engine = AdvisorEngine()
        rec = engine.recommend(GameContext.from_strings("Ah Ad", pot=15, ...))
    """

    def __init__(self, params_fetcher: ParamsFetcher | None = None) -> None:
        self._params_fetcher = params_fetcher

    def recommend(
        self,
        context: GameContext,
        model_params: ModelParams | None = None,
    ) -> AIRecommendation:
        """Produce a recommendation for the hero.

        Args:
            context: The game snapshot.
            model_params: Explicit learned parameters; the process-wide
                cache is used when omitted.

        Returns:
            AIRecommendation with action, sizing and supporting metrics.
        """
        if model_params is None:
            model_params = load_model_params_once(self._params_fetcher)

        t_start = time.perf_counter()
        rec = _build_recommendation(context, model_params)
        elapsed_ms = (time.perf_counter() - t_start) * 1000

        size = "" if rec.bet_size is None else f" {rec.bet_size:g}"
        logger.info(
            "%s %s%s (win=%.1f%%, rule=%s, %.1fms)",
            context.street, rec.action, size, rec.win_probability, rec.rule, elapsed_ms,
        )
        return rec


def _build_recommendation(
    context: GameContext,
    model_params: ModelParams | None,
) -> AIRecommendation:
    hole, board = context.hole_cards, context.community_cards

    strength = hand_strength(hole, board)
    profile = analyze_opponent_tendencies(context.opponent_analytics)
    psych = None
    if context.opponent_stacks:
        psych = analyze_stack_psychology(
            context.hero_stack,
            context.opponent_stacks,
            context.big_blind,
            context.starting_stack,
        )

    win = win_probability_for_strength(
        strength, context.active_players, context.street, profile, psych,
    )
    odds = context.pot_odds
    ev = expected_value(win, context.pot, context.amount_to_call)
    logger.debug(
        "Inputs: strength=%.2f win=%.1f%% odds=%.1f%% ev=%.2f profile=%s/%s stacks=%s",
        strength, win, odds, ev, profile.tightness, profile.style,
        psych.hero_status if psych else "n/a",
    )

    decision = decide(strength, win, odds, context, profile, psych)
    reasoning = generate_reasoning(decision, strength, win, odds, context, psych)

    alternative = build_secondary(decision, context)
    primary_freq, secondary_freq = allocate_frequencies(
        decision.action,
        alternative.action if alternative else None,
        win,
        odds,
        context.bluffing,
    )
    secondary = None
    if alternative is not None:
        secondary = SecondaryRecommendation(
            action=alternative.action,
            bet_size=alternative.amount,
            reasoning=alternative.reasoning,
            frequency=secondary_freq,
        )

    threat = board_threat(board)
    aggression = aggression_ratio(context.actions)
    bluff_odds = estimate_bluff_success(
        context.street,
        context.active_players,
        aggression,
        threat,
        sizing_aggression(decision.action),
        model_params.bluff_success_rates if model_params else None,
    )

    opportunity = detect_strong_bluff_opportunity(
        context, strength, win, threat, aggression, bluff_odds,
    )
    smart_bluff = None
    if opportunity is not None:
        smart_bluff = SmartBluff(
            flag=True,
            reason=opportunity.reason,
            suggested_action=opportunity.suggested_action,
            success_odds=opportunity.success_odds,
        )

    return AIRecommendation(
        action=decision.action,
        bet_size=decision.amount,
        win_probability=win,
        reasoning=reasoning,
        pot_odds=odds if odds > 0 else None,
        expected_value=ev,
        secondary=secondary,
        bluff_aware=context.bluffing,
        primary_frequency=primary_freq,
        bluff_success_odds=bluff_odds,
        good_for_value=good_for_value(context, strength, win),
        smart_bluff=smart_bluff,
        hand=HandEvaluator.best_hand(hole, board),
        rule=decision.rule,
    )


def generate_recommendation(
    context: GameContext,
    model_params: ModelParams | None = None,
) -> AIRecommendation:
    """Recommend an action using explicit or already-cached parameters.

    Never fetches; callers that want learned rates either pass them in
    or construct an AdvisorEngine with a fetcher.
    """
    return AdvisorEngine().recommend(context, model_params or current_model_params())
