"""Snapshot of the game handed to the engine for one recommendation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from poker_assist.utils.card import Card, parse_cards
from poker_assist.utils.constants import ActionType, Street

if TYPE_CHECKING:
    from poker_assist.interface.opponent_stats import PlayerAnalytics


@dataclass(frozen=True)
class PriorAction:
    """A single action observed this hand (any player)."""

    action: ActionType
    amount: float = 0.0
    player: str | int | None = None


@dataclass(frozen=True)
class GameContext:
    """Everything the engine needs to produce one recommendation.

    Built by the caller from live game state. ``amount_to_call`` is what
    the hero must put in to continue, not the table's current bet.
    Sequence fields accept lists and are stored as tuples.
    """

    hole_cards: tuple[Card, ...]
    community_cards: tuple[Card, ...]
    street: Street
    pot: float
    amount_to_call: float
    hero_stack: float
    big_blind: float
    small_blind: float = 0.0
    active_players: int = 2  # Including hero
    actions: tuple[PriorAction, ...] = ()

    bluff_intent: bool = False
    force_bluff: bool = False  # Never fold; choose the best bluffing line

    # Opponent modeling (player id -> stats)
    opponent_analytics: Mapping[str | int, PlayerAnalytics] = field(default_factory=dict, hash=False)
    opponent_stacks: tuple[float, ...] = ()
    starting_stack: float | None = None

    def __post_init__(self) -> None:
        for name in ("hole_cards", "community_cards", "actions", "opponent_stacks"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "street", Street(self.street))

        if self.big_blind <= 0:
            raise ValueError(f"big_blind must be positive, got {self.big_blind}")
        if self.active_players < 1:
            raise ValueError(f"active_players must be at least 1, got {self.active_players}")
        for name in ("pot", "amount_to_call", "hero_stack", "small_blind"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative, got {getattr(self, name)}")
        if any(s < 0 for s in self.opponent_stacks):
            raise ValueError("opponent_stacks cannot contain negative stacks")
        if len(self.hole_cards) > 2:
            raise ValueError(f"At most 2 hole cards, got {len(self.hole_cards)}")
        if len(self.community_cards) > 5:
            raise ValueError(f"At most 5 community cards, got {len(self.community_cards)}")
        all_cards = self.hole_cards + self.community_cards
        if len(set(all_cards)) != len(all_cards):
            raise ValueError("Duplicate cards in hole/community cards")

    @property
    def no_bet_to_call(self) -> bool:
        return self.amount_to_call == 0

    @property
    def is_preflop(self) -> bool:
        return self.street == Street.PREFLOP

    @property
    def bluffing(self) -> bool:
        """Bluff line requested; a forced bluff implies bluff intent."""
        return self.bluff_intent or self.force_bluff

    @property
    def hero_bbs(self) -> float:
        """Hero's stack in big blinds."""
        return self.hero_stack / self.big_blind

    @property
    def pot_odds(self) -> float:
        """Equity (0-100) needed to call; 0 when there is nothing to call."""
        if self.amount_to_call <= 0:
            return 0.0
        return self.amount_to_call / (self.pot + self.amount_to_call) * 100

    @classmethod
    def from_strings(
        cls,
        hole: str,
        board: str = "",
        street: Street | None = None,
        **kwargs,
    ) -> GameContext:
        """Create a context from card strings like 'Ah Kd' and 'Qs Jh 2c'.

        The street is inferred from the board size when not given.
        """
        community = parse_cards(board)
        if street is None:
            street = {0: Street.PREFLOP, 3: Street.FLOP, 4: Street.TURN, 5: Street.RIVER}.get(
                len(community)
            )
            if street is None:
                raise ValueError(f"Cannot infer street from {len(community)} board cards")
        return cls(
            hole_cards=tuple(parse_cards(hole)),
            community_cards=tuple(community),
            street=street,
            **kwargs,
        )
