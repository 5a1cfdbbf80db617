"""
twentyone: the core of a casino blackjack table.

The `common` package holds the game-agnostic pieces (cards, shoe, money,
randomness); `blackjack` holds scoring, rules, bets and split bookkeeping.
"""

from twentyone.blackjack.action import PlayerAction
from twentyone.blackjack.actor import Player
from twentyone.blackjack.bet import Bet, PayoutResult, PayoutSummary
from twentyone.blackjack.betting import BettingResult, BettingService
from twentyone.blackjack.config import GameConfiguration
from twentyone.blackjack.constants import BetType, GameResult
from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.multi_hand import MultiHandPlayer
from twentyone.blackjack.player_hand import PlayerHand
from twentyone.blackjack.rules import ActionValidation, RuleEvaluator
from twentyone.blackjack.shoe_manager import ShoeManager
from twentyone.blackjack.split import SplitHandManager
from twentyone.common.card import Card, Rank, Suit, standard_deck
from twentyone.common.money import Money
from twentyone.common.random_source import NumpyRandomSource, PythonRandomSource, RandomSource
from twentyone.common.shoe import ReshuffleNotice, Shoe, ShoeStatus
from twentyone.exceptions import (
    BlackjackError,
    EmptySourceError,
    InsufficientFundsError,
    InvalidActionError,
    InvalidArgumentError,
    InvalidStateError,
)

__version__ = "0.1.0"

__all__ = [
    "ActionValidation",
    "Bet",
    "BetType",
    "BettingResult",
    "BettingService",
    "BlackjackError",
    "BlackjackHand",
    "Card",
    "EmptySourceError",
    "GameConfiguration",
    "GameResult",
    "InsufficientFundsError",
    "InvalidActionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Money",
    "MultiHandPlayer",
    "NumpyRandomSource",
    "PayoutResult",
    "PayoutSummary",
    "Player",
    "PlayerAction",
    "PlayerHand",
    "PythonRandomSource",
    "RandomSource",
    "Rank",
    "ReshuffleNotice",
    "RuleEvaluator",
    "Shoe",
    "ShoeManager",
    "ShoeStatus",
    "SplitHandManager",
    "Suit",
    "standard_deck",
]
