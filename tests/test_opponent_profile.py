"""Tests for aggregated opponent tendencies."""

import pytest

from poker_assist.interface.opponent_stats import PlayerAnalytics
from poker_assist.strategy.opponent_profile import (
    BALANCED_PROFILE,
    analyze_opponent_tendencies,
    classify_style,
    classify_tightness,
)


class TestClassification:
    @pytest.mark.parametrize("vpip, expected", [
        (15, "tight"),
        (20, "balanced"),
        (30, "balanced"),
        (31, "loose"),
    ])
    def test_tightness(self, vpip: float, expected: str) -> None:
        assert classify_tightness(vpip) == expected

    @pytest.mark.parametrize("af, pfr, expected", [
        (2.5, 10, "aggressive"),
        (1.5, 20, "aggressive"),
        (0.5, 10, "passive"),
        (1.5, 15, "balanced"),
        (2.0, 18, "balanced"),
    ])
    def test_style(self, af: float, pfr: float, expected: str) -> None:
        assert classify_style(af, pfr) == expected


class TestAnalyzeOpponentTendencies:
    def test_no_analytics(self) -> None:
        assert analyze_opponent_tendencies(None) is BALANCED_PROFILE
        assert analyze_opponent_tendencies({}) is BALANCED_PROFILE

    def test_balanced_defaults(self) -> None:
        profile = BALANCED_PROFILE
        assert profile.avg_vpip == 25.0
        assert profile.avg_pfr == 15.0
        assert profile.avg_aggression_factor == 1.5
        assert profile.avg_bluff_frequency == 30.0
        assert profile.avg_fold_to_aggression == 50.0
        assert not (profile.is_tight or profile.is_loose)
        assert not (profile.is_aggressive or profile.is_passive)

    def test_averages(self) -> None:
        profile = analyze_opponent_tendencies({
            1: PlayerAnalytics(vpip=10, pfr=8, aggression_factor=1.0, fold_to_aggression=60),
            2: PlayerAnalytics(vpip=20, pfr=12, aggression_factor=3.0, fold_to_aggression=80),
        })
        assert profile.avg_vpip == pytest.approx(15.0)
        assert profile.avg_pfr == pytest.approx(10.0)
        assert profile.avg_aggression_factor == pytest.approx(2.0)
        assert profile.avg_fold_to_aggression == pytest.approx(70.0)
        assert profile.is_tight
        assert profile.style == "balanced"

    def test_loose_aggressive_table(self) -> None:
        profile = analyze_opponent_tendencies({
            "a": PlayerAnalytics(vpip=45, pfr=30, aggression_factor=3.0),
        })
        assert profile.is_loose
        assert profile.is_aggressive

    def test_passive_table(self) -> None:
        profile = analyze_opponent_tendencies({
            "a": PlayerAnalytics(vpip=25, pfr=5, aggression_factor=0.5),
            "b": PlayerAnalytics(vpip=25, pfr=5, aggression_factor=0.7),
        })
        assert profile.is_passive
