"""Tracked statistics for a single opponent.

The surrounding application records these numbers (hand histories,
manual edits); the engine only reads them. Percentages are on a 0-100
scale.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerAnalytics:
    """Tracked statistics for a single opponent."""

    name: str = ""
    hands_tracked: int = 0
    vpip: float = 25.0
    pfr: float = 15.0
    aggression_factor: float = 1.5  # (bets + raises) / calls
    bluff_frequency: float = 30.0
    fold_to_aggression: float = 50.0

    @classmethod
    def from_counts(
        cls,
        name: str,
        hands: int,
        vpip: int = 0,
        pfr: int = 0,
        aggressive: int = 0,
        passive: int = 0,
        bluffs_shown: int = 0,
        showdowns: int = 0,
        aggression_faced: int = 0,
        folds_to_aggression: int = 0,
    ) -> PlayerAnalytics:
        """Build analytics from raw counters.

        The aggression factor of a player who never called is reported as
        the number of aggressive actions, keeping it finite.
        """
        return cls(
            name=name,
            hands_tracked=hands,
            vpip=(vpip / hands * 100) if hands else 0.0,
            pfr=(pfr / hands * 100) if hands else 0.0,
            aggression_factor=(aggressive / passive) if passive else float(aggressive),
            bluff_frequency=(bluffs_shown / showdowns * 100) if showdowns else 30.0,
            fold_to_aggression=(
                (folds_to_aggression / aggression_faced * 100) if aggression_faced else 50.0
            ),
        )

    @property
    def player_type(self) -> str:
        """Classify player based on VPIP and PFR."""
        if self.hands_tracked < 5:
            return "Unknown (need more data)"
        if self.vpip > 35 and self.pfr > 25:
            return "LAG (Loose-Aggressive)"
        if self.vpip > 35:
            return "Loose-Passive (Calling Station)"
        if self.vpip <= 25 and self.pfr > 18:
            return "TAG (Tight-Aggressive)"
        if self.vpip <= 25:
            return "Nit (Tight-Passive)"
        return "Average"

    def summary(self) -> str:
        """One-line summary of this player."""
        label = self.name or "Opponent"
        if self.hands_tracked == 0:
            return f"{label}: No stats yet"
        return (
            f"{label}: {self.player_type} | "
            f"VPIP {self.vpip:.0f}% | PFR {self.pfr:.0f}% | "
            f"AF {self.aggression_factor:.1f} | Bluff {self.bluff_frequency:.0f}% | "
            f"{self.hands_tracked} hands"
        )
