"""
Wagers and their settlement.

A `Bet` is created active and moves to settled exactly once. While active it
can price itself against a `GameResult` and spawn the derived bets used for
doubling down and splitting. Settled bets refuse every further money
operation.

>>> bet = Bet(10, "Alice")
>>> bet.calculate_payout(GameResult.BLACKJACK, 1.5)
Money('15.00', 'USD')
>>> bet.calculate_total_return(GameResult.PUSH)
Money('10.00', 'USD')
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List

from twentyone.blackjack.constants import DEFAULT_BLACKJACK_MULTIPLIER, BetType, GameResult
from twentyone.common.money import Amount, Money
from twentyone.exceptions import InvalidArgumentError, InvalidStateError


class Bet:
    """
    A wager placed by one player on one hand.

    :param amount: Stake, strictly positive (Money or a plain number)
    :param player_name: Owner of the bet; surrounding whitespace is trimmed
    :param bet_type: How the bet came about
    """

    def __init__(self, amount: Amount, player_name: str, bet_type: BetType = BetType.STANDARD):
        if not isinstance(player_name, str) or not player_name.strip():
            raise InvalidArgumentError("Player name cannot be empty or whitespace.")

        amount = Money.of(amount)
        if not amount.is_positive:
            raise InvalidArgumentError("Bet amount must be positive.")

        self._amount = amount
        self._player_name = player_name.strip()
        self._bet_type = bet_type
        self._placed_at = datetime.now(timezone.utc)
        self._is_active = True

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def player_name(self) -> str:
        return self._player_name

    @property
    def bet_type(self) -> BetType:
        return self._bet_type

    @property
    def placed_at(self) -> datetime:
        return self._placed_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_settled(self) -> bool:
        return not self._is_active

    def settle(self) -> None:
        """Close the bet. A bet can only be settled once."""
        if self.is_settled:
            raise InvalidStateError("Bet has already been settled.")
        self._is_active = False

    def calculate_payout(
        self, result: GameResult, blackjack_multiplier: float = DEFAULT_BLACKJACK_MULTIPLIER
    ) -> Money:
        """
        Winnings on top of the stake.

        :param result: Outcome of the hand
        :param blackjack_multiplier: Paid on a natural; must be positive
        :return: amount for a win, amount times the multiplier for a blackjack, zero otherwise
        """
        if blackjack_multiplier <= 0:
            raise InvalidArgumentError("Blackjack multiplier must be positive.")
        if self.is_settled:
            raise InvalidStateError("Cannot calculate payout for a settled bet.")

        if result == GameResult.WIN:
            return self._amount
        if result == GameResult.BLACKJACK:
            return self._amount * blackjack_multiplier
        if result in (GameResult.PUSH, GameResult.LOSE):
            return Money.zero(self._amount.currency)
        raise InvalidArgumentError(f"Unknown game result: {result}")

    def calculate_total_return(
        self, result: GameResult, blackjack_multiplier: float = DEFAULT_BLACKJACK_MULTIPLIER
    ) -> Money:
        """Stake plus payout on a win, the stake alone on a push, nothing on a loss."""
        if self.is_settled:
            raise InvalidStateError("Cannot calculate total return for a settled bet.")

        if result.is_win:
            return self._amount + self.calculate_payout(result, blackjack_multiplier)
        if result == GameResult.PUSH:
            return self._amount
        if result == GameResult.LOSE:
            return Money.zero(self._amount.currency)
        raise InvalidArgumentError(f"Unknown game result: {result}")

    def _check_derivable(self, kind: str) -> None:
        if self.is_settled:
            raise InvalidStateError(f"Cannot create {kind} bet from a settled bet.")
        if self._bet_type != BetType.STANDARD:
            raise InvalidStateError(f"Can only create {kind} bet from a standard bet.")

    def create_double_down_bet(self) -> "Bet":
        """A new bet for twice the stake, typed DOUBLE_DOWN."""
        self._check_derivable("double down")
        return Bet(self._amount * 2, self._player_name, BetType.DOUBLE_DOWN)

    def create_split_bet(self) -> "Bet":
        """A new bet for the same stake, typed SPLIT."""
        self._check_derivable("split")
        return Bet(self._amount, self._player_name, BetType.SPLIT)

    def __eq__(self, other):
        if not isinstance(other, Bet):
            return NotImplemented
        return (
            self._amount == other._amount
            and self._player_name.lower() == other._player_name.lower()
            and self._bet_type == other._bet_type
            and self._placed_at == other._placed_at
        )

    def __hash__(self):
        return hash((self._amount, self._player_name.lower(), self._bet_type, self._placed_at))

    def __repr__(self) -> str:
        return f"Bet({self._amount!r}, {self._player_name!r}, {self._bet_type})"

    def __str__(self) -> str:
        status = "Active" if self._is_active else "Settled"
        type_text = "" if self._bet_type == BetType.STANDARD else f" ({self._bet_type})"
        return f"{self._player_name}: {self._amount}{type_text} - {status}"


@dataclass(frozen=True)
class PayoutResult:
    """The priced outcome of one bet."""

    bet: Bet
    result: GameResult
    payout: Money
    total_return: Money

    @property
    def player_name(self) -> str:
        return self.bet.player_name

    @property
    def is_win(self) -> bool:
        return self.result.is_win

    @property
    def is_loss(self) -> bool:
        return self.result == GameResult.LOSE

    @property
    def is_push(self) -> bool:
        return self.result == GameResult.PUSH

    @property
    def is_blackjack(self) -> bool:
        return self.result == GameResult.BLACKJACK

    @property
    def net(self) -> Money:
        """What the player gained or lost relative to the stake."""
        return self.total_return - self.bet.amount

    def __str__(self) -> str:
        return (
            f"{self.player_name}: {self.result} - Payout: {self.payout}, "
            f"Total Return: {self.total_return}"
        )


class PayoutSummary:
    """Aggregate of the payouts made at the end of a round."""

    def __init__(self, results: Iterable[PayoutResult] = ()):
        self.results: List[PayoutResult] = list(results)

    def _sum(self, values) -> Money:
        total = None
        for value in values:
            total = value if total is None else total + value
        return total if total is not None else Money.zero()

    @property
    def total_wagered(self) -> Money:
        return self._sum(r.bet.amount for r in self.results)

    @property
    def total_payout(self) -> Money:
        return self._sum(r.payout for r in self.results)

    @property
    def total_return(self) -> Money:
        return self._sum(r.total_return for r in self.results)

    @property
    def house_net(self) -> Money:
        """Positive when the house came out ahead."""
        return self.total_wagered - self.total_return

    def count(self, result: GameResult) -> int:
        return sum(1 for r in self.results if r.result == result)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def __str__(self) -> str:
        return (
            f"{len(self.results)} payouts, wagered {self.total_wagered}, "
            f"returned {self.total_return}"
        )
