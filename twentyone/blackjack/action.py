"""Defines the PlayerAction enum for the actions a player can request on a blackjack hand."""
from enum import Enum


class PlayerAction(Enum):
    """Enum for the possible actions a player can take in a game of blackjack."""

    HIT = "hit"
    STAND = "stand"
    DOUBLE_DOWN = "double"
    SPLIT = "split"

    def __str__(self) -> str:
        return self.value
