"""Tuning constants for the heuristic engine, grouped by concern.

Strengths are on a [0, 1] scale, probabilities and odds on 0-100, stack
depths in big blinds.
"""

from __future__ import annotations

from poker_assist.utils.constants import HandRanking, Street

# ---------------------------------------------------------------------------
# Hand strength
# ---------------------------------------------------------------------------

# Preflop pocket pairs: (minimum rank value, strength), checked in order
PAIR_TIERS: tuple[tuple[int, float], ...] = (
    (12, 0.85),  # QQ+
    (10, 0.75),  # TT-JJ
    (8, 0.65),   # 88-99
)
PAIR_FLOOR = 0.55

# Preflop non-pairs: base plus high-card, suited and connectedness bonuses
UNPAIRED_BASE = 0.30
HIGH_CARD_TIERS: tuple[tuple[int, float], ...] = (
    (12, 0.15),
    (10, 0.10),
    (8, 0.05),
)
SUITED_BONUS = 0.08
CONNECTED_BONUS = 0.05  # gap <= 1
ONE_GAP_BONUS = 0.02    # gap <= 3
PREFLOP_CAP = 0.90

# Postflop strength by best-hand category; the engine deliberately
# ignores within-category detail here
CATEGORY_STRENGTH: dict[HandRanking, float] = {
    HandRanking.ROYAL_FLUSH: 0.95,
    HandRanking.STRAIGHT_FLUSH: 0.95,
    HandRanking.FOUR_OF_A_KIND: 0.90,
    HandRanking.FULL_HOUSE: 0.85,
    HandRanking.FLUSH: 0.75,
    HandRanking.STRAIGHT: 0.65,
    HandRanking.THREE_OF_A_KIND: 0.55,
    HandRanking.TWO_PAIR: 0.45,
    HandRanking.ONE_PAIR: 0.35,
    HandRanking.HIGH_CARD: 0.20,
}

# ---------------------------------------------------------------------------
# Win probability
# ---------------------------------------------------------------------------

OPPONENT_DISCOUNT = 0.92  # Per active opponent beyond the first
STREET_MULTIPLIER: dict[Street, float] = {
    Street.PREFLOP: 0.85,
    Street.FLOP: 0.90,
    Street.TURN: 0.95,
    Street.RIVER: 1.00,
}
WIN_PROB_MIN = 5.0
WIN_PROB_MAX = 95.0

TIGHT_OPPONENT_BOOST = 1.05
LOOSE_OPPONENT_PENALTY = 0.95
AGGRESSIVE_OPPONENT_PENALTY = 0.93  # Applied below AGGRESSIVE_PENALTY_STRENGTH
AGGRESSIVE_PENALTY_STRENGTH = 0.60
PASSIVE_OPPONENT_BOOST = 1.03

SHORT_OPPONENT_BOOST = 1.03       # Strength >= 0.50
DEEP_OPPONENT_PENALTY = 0.97      # Strength < 0.60
SHORT_HERO_PENALTY = 0.95         # Strength < 0.55

# ---------------------------------------------------------------------------
# Opponent profile
# ---------------------------------------------------------------------------

TIGHT_VPIP = 20.0
LOOSE_VPIP = 30.0
AGGRESSIVE_AF = 2.0
AGGRESSIVE_PFR = 18.0
PASSIVE_AF = 1.0
HIGH_FOLD_TO_AGGRESSION = 60.0

# ---------------------------------------------------------------------------
# Stack tiers (big blinds)
# ---------------------------------------------------------------------------

SHORT_STACK_BB = 20.0
MEDIUM_SHORT_BB = 30.0
DEEP_STACK_BB = 50.0
PUSH_FOLD_BB = 15.0
FACING_DEEP_RATIO = 1.5
FACING_SHORT_RATIO = 0.67

# ---------------------------------------------------------------------------
# Decision thresholds
# ---------------------------------------------------------------------------

PREFLOP_PREMIUM = 0.75
PREFLOP_STRONG = 0.60
PREFLOP_PLAYABLE = 0.45
PREFLOP_TRASH = 0.30

GIVE_UP_WIN_PROB = 15.0
GIVE_UP_STRENGTH = 0.25
VALUE_WIN_PROB = 80.0
VALUE_STRENGTH = 0.80
SOLID_WIN_PROB = 60.0
SOLID_STRENGTH = 0.65
MARGINAL_WIN_PROB = 40.0
MARGINAL_STRENGTH = 0.45
WEAK_CALL_WIN_PROB = 25.0

# ---------------------------------------------------------------------------
# Sizing (fractions of the pot, multiples of the big blind)
# ---------------------------------------------------------------------------

VALUE_POT_FRACTION = 0.75
HALF_POT = 0.5
PREFLOP_OPEN_BB = 2.5
PREFLOP_RAISE_BB = 3.0

SHORT_HERO_SIZING = 1.3
DEEP_HERO_SIZING = 0.9
VS_SHORT_VALUE_SIZING = 1.25
VS_DEEP_SLOWPLAY_SIZING = 0.85
BULLY_SIZING = 1.15

BLUFF_OPEN_FRACTION = 0.5
BLUFF_STAB_FRACTION = 0.6
BLUFF_RAISE_FRACTION = 0.7
BLUFF_CALL_MULTIPLE = 2.5
BLUFF_SMALL_CALL_BB = 4.0
TIGHT_BLUFF_BIAS = 1.2
LOOSE_BLUFF_BIAS = 0.85

# ---------------------------------------------------------------------------
# Bluff model
# ---------------------------------------------------------------------------

BLUFF_BASELINE: dict[Street, float] = {
    Street.PREFLOP: 0.35,
    Street.FLOP: 0.45,
    Street.TURN: 0.50,
    Street.RIVER: 0.55,
}
MIN_LEARNED_SAMPLES = 20
LEARNED_RATE_MIN = 0.2
LEARNED_RATE_MAX = 0.8
MULTIWAY_DISCOUNT = 0.08
MAX_PRESSURE_BONUS = 0.25
MAX_AGGRESSION_PENALTY = 0.2
BLUFF_SUCCESS_MIN = 0.05
BLUFF_SUCCESS_MAX = 0.90

THREATENING_BOARD = 0.5
LOW_AGGRESSION = 0.35

# ---------------------------------------------------------------------------
# Mixed strategy
# ---------------------------------------------------------------------------

BASE_PRIMARY_FREQUENCY = 60
MAX_MARGIN_BONUS = 30
BLUFF_PRIMARY_SHIFT = 10
BLUFF_SECONDARY_SHIFT = 15
PRIMARY_FREQUENCY_MIN = 50
PRIMARY_FREQUENCY_MAX = 95
