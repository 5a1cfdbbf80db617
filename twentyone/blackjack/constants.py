"""Blackjack-specific constants, value mappings and result enums."""

from enum import Enum

from twentyone.common.card import Rank

BLACKJACK = 21
DEALER_STAND_VALUE = 17
DEFAULT_RESHUFFLE_THRESHOLD = 0.25
DEFAULT_BLACKJACK_MULTIPLIER = 1.5
SOFT_ACE_BONUS = 10

# Array-indexed lookup (indexed by Rank.value), used on the scoring hot path
_BLACKJACK_VALUE_ARRAY = [
    0,   # unused
    11,  # ACE (1)
    2,   # TWO (2)
    3,   # THREE (3)
    4,   # FOUR (4)
    5,   # FIVE (5)
    6,   # SIX (6)
    7,   # SEVEN (7)
    8,   # EIGHT (8)
    9,   # NINE (9)
    10,  # TEN (10)
    10,  # JACK (11)
    10,  # QUEEN (12)
    10,  # KING (13)
]


def get_blackjack_value(rank: Rank) -> int:
    """Get the blackjack value for a rank, counting an ace as 11."""
    return _BLACKJACK_VALUE_ARRAY[rank.value]


class GameResult(Enum):
    """Outcome of one player hand against the dealer, from the player's side."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"

    @property
    def is_win(self) -> bool:
        return self in (GameResult.WIN, GameResult.BLACKJACK)

    def __str__(self) -> str:
        return self.name.capitalize()


class BetType(Enum):
    """How a wager came into being."""

    STANDARD = "standard"
    DOUBLE_DOWN = "double_down"
    SPLIT = "split"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
