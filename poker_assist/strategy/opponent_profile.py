"""Aggregate read of the opponents at the table.

Averages every tracked opponent's stats into a single profile and
classifies it by tightness (VPIP) and style (aggression factor / PFR).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from poker_assist.interface.opponent_stats import PlayerAnalytics
from poker_assist.strategy.thresholds import (
    AGGRESSIVE_AF,
    AGGRESSIVE_PFR,
    LOOSE_VPIP,
    PASSIVE_AF,
    TIGHT_VPIP,
)


@dataclass(frozen=True)
class OpponentProfile:
    """Averaged opponent tendencies."""

    avg_vpip: float = 25.0
    avg_pfr: float = 15.0
    avg_aggression_factor: float = 1.5
    avg_bluff_frequency: float = 30.0
    avg_fold_to_aggression: float = 50.0
    tightness: str = "balanced"  # "tight" | "loose" | "balanced"
    style: str = "balanced"      # "aggressive" | "passive" | "balanced"

    @property
    def is_tight(self) -> bool:
        return self.tightness == "tight"

    @property
    def is_loose(self) -> bool:
        return self.tightness == "loose"

    @property
    def is_aggressive(self) -> bool:
        return self.style == "aggressive"

    @property
    def is_passive(self) -> bool:
        return self.style == "passive"


BALANCED_PROFILE = OpponentProfile()


def classify_tightness(vpip: float) -> str:
    if vpip < TIGHT_VPIP:
        return "tight"
    if vpip > LOOSE_VPIP:
        return "loose"
    return "balanced"


def classify_style(aggression_factor: float, pfr: float) -> str:
    if aggression_factor > AGGRESSIVE_AF or pfr > AGGRESSIVE_PFR:
        return "aggressive"
    if aggression_factor < PASSIVE_AF:
        return "passive"
    return "balanced"


def analyze_opponent_tendencies(
    analytics: Mapping[str | int, PlayerAnalytics] | None,
) -> OpponentProfile:
    """Average all tracked opponents into one profile.

    Returns the default balanced profile when nothing is tracked.
    """
    if not analytics:
        return BALANCED_PROFILE

    players = list(analytics.values())
    stats = np.array(
        [
            [p.vpip, p.pfr, p.aggression_factor, p.bluff_frequency, p.fold_to_aggression]
            for p in players
        ],
        dtype=float,
    )
    vpip, pfr, af, bluff, fold = (float(x) for x in stats.mean(axis=0))

    return OpponentProfile(
        avg_vpip=vpip,
        avg_pfr=pfr,
        avg_aggression_factor=af,
        avg_bluff_frequency=bluff,
        avg_fold_to_aggression=fold,
        tightness=classify_tightness(vpip),
        style=classify_style(af, pfr),
    )
