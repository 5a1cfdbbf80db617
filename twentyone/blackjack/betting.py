"""
This module provides the `BettingService`, the table's ledger of bankrolls and opening bets.

Players are looked up by name without regard to case or surrounding
whitespace. Table limits and the blackjack multiplier come from a
`GameConfiguration`.

Bet placement reports the expected failures (limits, funds, a bet already
down) through a `BettingResult` instead of raising, so a front end can show the
message and ask again. Programming errors such as a negative starting bankroll
still raise.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from twentyone.blackjack.bet import Bet, PayoutResult, PayoutSummary
from twentyone.blackjack.config import GameConfiguration
from twentyone.blackjack.constants import GameResult
from twentyone.common.money import Amount, Money
from twentyone.exceptions import InvalidArgumentError
from twentyone.log import get_logger

logger = get_logger("betting")


@dataclass(frozen=True)
class BettingResult:
    """Outcome of validating or placing a bet."""

    is_success: bool
    message: str
    bet: Optional[Bet] = None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def __bool__(self) -> bool:
        return self.is_success

    @classmethod
    def success(cls, message: str, bet: Optional[Bet] = None) -> "BettingResult":
        return cls(True, message, bet)

    @classmethod
    def failure(cls, message: str) -> "BettingResult":
        return cls(False, message)


def _key(player_name: str) -> str:
    return player_name.strip().casefold()


def _blank(player_name) -> bool:
    return not isinstance(player_name, str) or not player_name.strip()


class BettingService:
    """
    Bankrolls and current bets for every player at a table.

    :param config: Supplies the table limits and the blackjack payout
    """

    def __init__(self, config: Optional[GameConfiguration] = None):
        self.config = config or GameConfiguration()
        self._bankrolls: Dict[str, Money] = {}
        self._bets: Dict[str, Bet] = {}

    @property
    def minimum_bet(self) -> Money:
        return self.config.minimum_bet

    @property
    def maximum_bet(self) -> Money:
        return self.config.maximum_bet

    @property
    def blackjack_multiplier(self) -> float:
        return self.config.blackjack_payout

    @property
    def currency(self) -> str:
        return self.config.minimum_bet.currency

    def _money(self, amount: Amount) -> Money:
        return Money.of(amount, self.currency)

    def set_initial_bankroll(self, player_name: str, amount: Amount) -> None:
        if _blank(player_name):
            raise InvalidArgumentError("Player name cannot be empty or whitespace.")
        amount = self._money(amount)
        if amount.is_negative:
            raise InvalidArgumentError("Initial bankroll cannot be negative.")
        self._bankrolls[_key(player_name)] = amount

    def get_bankroll(self, player_name: str) -> Money:
        """The player's bankroll; unknown players have nothing."""
        if _blank(player_name):
            return Money.zero(self.currency)
        return self._bankrolls.get(_key(player_name), Money.zero(self.currency))

    def has_sufficient_funds(self, player_name: str, amount: Amount) -> bool:
        if _blank(player_name):
            return False
        return self.get_bankroll(player_name) >= self._money(amount)

    def update_bankroll(self, player_name: str, amount: Amount) -> Money:
        """
        Apply a signed adjustment to a bankroll.

        A bankroll never goes below zero; a larger loss empties it.

        :return: The new bankroll
        """
        if _blank(player_name):
            raise InvalidArgumentError("Player name cannot be empty or whitespace.")
        bankroll = self.get_bankroll(player_name) + self._money(amount)
        if bankroll.is_negative:
            bankroll = Money.zero(self.currency)
        self._bankrolls[_key(player_name)] = bankroll
        return bankroll

    def validate_bet(self, player_name: str, amount: Amount) -> BettingResult:
        if _blank(player_name):
            return BettingResult.failure("Player name cannot be empty or whitespace.")

        amount = Money.of(amount, self.currency)
        if not amount.is_positive:
            return BettingResult.failure("Bet amount must be positive.")
        if amount.currency != self.currency:
            return BettingResult.failure(
                f"Bet currency {amount.currency} does not match table currency {self.currency}."
            )
        if amount < self.minimum_bet:
            return BettingResult.failure(
                f"Bet amount {amount} is below minimum bet {self.minimum_bet}."
            )
        if amount > self.maximum_bet:
            return BettingResult.failure(
                f"Bet amount {amount} exceeds maximum bet {self.maximum_bet}."
            )
        if not self.has_sufficient_funds(player_name, amount):
            return BettingResult.failure(
                f"Insufficient funds. Available: {self.get_bankroll(player_name)}, "
                f"Required: {amount}."
            )
        return BettingResult.success("Bet validation successful.")

    def place_bet(self, player_name: str, amount: Amount) -> BettingResult:
        """Validate and place an opening bet, taking the stake from the bankroll."""
        validation = self.validate_bet(player_name, amount)
        if validation.is_failure:
            return validation

        current = self.get_current_bet(player_name)
        if current is not None and current.is_active:
            return BettingResult.failure(f"Player {player_name.strip()} already has an active bet.")

        amount = self._money(amount)
        bet = Bet(amount, player_name)
        key = _key(player_name)
        self._bankrolls[key] = self._bankrolls[key] - amount
        self._bets[key] = bet
        logger.debug("%s placed %s", bet.player_name, amount)
        return BettingResult.success(
            f"Bet of {amount} placed successfully for {bet.player_name}.", bet
        )

    def get_current_bet(self, player_name: str) -> Optional[Bet]:
        if _blank(player_name):
            return None
        return self._bets.get(_key(player_name))

    def calculate_payout(self, result: GameResult, bet: Bet) -> PayoutResult:
        if bet is None:
            raise InvalidArgumentError("Cannot calculate a payout without a bet.")
        multiplier = self.blackjack_multiplier
        return PayoutResult(
            bet=bet,
            result=result,
            payout=bet.calculate_payout(result, multiplier),
            total_return=bet.calculate_total_return(result, multiplier),
        )

    def process_payouts(self, player_results: Mapping[str, GameResult]) -> PayoutSummary:
        """
        Settle every listed player's active bet and credit the total return.

        Players without an active bet are skipped. Every payout is priced before
        any bankroll changes, so an error leaves the ledger untouched.
        Names that fold to the same player (e.g. "Alice" and "alice") are rejected.
        """
        if player_results is None:
            raise InvalidArgumentError("Player results are required.")

        seen = set()
        for player_name in player_results:
            key = _key(player_name) if not _blank(player_name) else player_name
            if key in seen:
                raise InvalidArgumentError(f"Player {player_name!r} is listed more than once.")
            seen.add(key)

        priced = []
        for player_name, result in player_results.items():
            bet = self.get_current_bet(player_name)
            if bet is None or not bet.is_active:
                continue
            priced.append((player_name, self.calculate_payout(result, bet)))

        for player_name, payout in priced:
            payout.bet.settle()
            self.update_bankroll(player_name, payout.total_return)
            logger.debug("Paid %s", payout)

        return PayoutSummary(payout for _, payout in priced)

    def get_all_current_bets(self) -> Dict[str, Bet]:
        return {bet.player_name: bet for bet in self._bets.values()}

    def clear_all_bets(self) -> None:
        """Forget every bet, typically at the start of a round."""
        self._bets.clear()
