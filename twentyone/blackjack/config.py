"""
Table configuration.

`GameConfiguration` is the read-only bundle the core consumes at construction
time: deck count, penetration threshold, blackjack payout, rule toggles and
table limits. It validates itself on creation and can round-trip through a
plain dictionary for the (external) settings layer.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional

from twentyone.blackjack.constants import (
    DEFAULT_BLACKJACK_MULTIPLIER,
    DEFAULT_RESHUFFLE_THRESHOLD,
)
from twentyone.common.money import Money
from twentyone.common.random_source import RandomSource
from twentyone.common.shoe import Shoe
from twentyone.exceptions import InvalidArgumentError

MIN_DECKS = 1
MAX_DECKS = 8
_MONEY_FIELDS = ("minimum_bet", "maximum_bet")


@dataclass(frozen=True)
class GameConfiguration:
    """
    Rules and limits for one table.

    Attributes:
        num_decks: Decks in the shoe (1-8)
        penetration_threshold: Remaining fraction below which the shoe asks for a reshuffle
        blackjack_payout: Multiplier paid on a natural (1.5 is 3:2)
        allow_double_down: Whether doubling is offered
        allow_split: Whether splitting pairs is offered
        auto_reshuffle_enabled: Whether the shoe announces crossing the threshold
        minimum_bet: Smallest accepted wager
        maximum_bet: Largest accepted wager
        max_hands: Most hands one player may hold after splitting
    """

    num_decks: int = 6
    penetration_threshold: float = DEFAULT_RESHUFFLE_THRESHOLD
    blackjack_payout: float = DEFAULT_BLACKJACK_MULTIPLIER
    allow_double_down: bool = True
    allow_split: bool = True
    auto_reshuffle_enabled: bool = True
    minimum_bet: Money = field(default_factory=lambda: Money(5))
    maximum_bet: Money = field(default_factory=lambda: Money(500))
    max_hands: int = 4

    def __post_init__(self):
        # Accept plain numbers for the limits.
        for name in _MONEY_FIELDS:
            object.__setattr__(self, name, Money.of(getattr(self, name)))

        if not MIN_DECKS <= self.num_decks <= MAX_DECKS:
            raise InvalidArgumentError(
                f"Number of decks must be between {MIN_DECKS} and {MAX_DECKS}."
            )
        if not 0.0 <= self.penetration_threshold <= 1.0:
            raise InvalidArgumentError("Penetration threshold must be between 0.0 and 1.0.")
        if self.blackjack_payout <= 0:
            raise InvalidArgumentError("Blackjack payout must be positive.")
        if not self.minimum_bet.is_positive:
            raise InvalidArgumentError("Minimum bet must be positive.")
        if self.minimum_bet.currency != self.maximum_bet.currency:
            raise InvalidArgumentError("Table limits must use the same currency.")
        if self.minimum_bet >= self.maximum_bet:
            raise InvalidArgumentError("Minimum bet must be less than maximum bet.")
        if self.max_hands < 1:
            raise InvalidArgumentError("A player must be allowed at least one hand.")

    @property
    def max_splits(self) -> int:
        return self.max_hands - 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary for serialization."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Money):
                value = {"amount": str(value.amount), "currency": value.currency}
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfiguration":
        """
        Build a configuration from a mapping, ignoring unknown keys.

        Money fields accept a number, a numeric string, or the
        ``{"amount": ..., "currency": ...}`` form produced by `to_dict`.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                continue
            if key in _MONEY_FIELDS and isinstance(value, Mapping):
                value = Money(value["amount"], value.get("currency", "USD"))
            kwargs[key] = value
        return cls(**kwargs)

    def create_shoe(self, random_source: Optional[RandomSource] = None, listener=None) -> Shoe:
        """Build a shoe that follows this configuration."""
        return Shoe(
            deck_count=self.num_decks,
            random_source=random_source,
            penetration_threshold=self.penetration_threshold,
            auto_reshuffle_enabled=self.auto_reshuffle_enabled,
            listener=listener,
        )

    def __str__(self) -> str:
        return (
            f"GameConfiguration: {self.num_decks} decks, "
            f"DoubleDown: {self.allow_double_down}, Split: {self.allow_split}, "
            f"Penetration: {self.penetration_threshold:.1%}, "
            f"Payout: {self.blackjack_payout:.1f}:1"
        )
