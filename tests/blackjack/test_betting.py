import pytest

from twentyone.blackjack.bet import Bet
from twentyone.blackjack.betting import BettingResult, BettingService
from twentyone.blackjack.config import GameConfiguration
from twentyone.blackjack.constants import GameResult
from twentyone.common.money import Money
from twentyone.exceptions import InvalidArgumentError


@pytest.fixture
def service():
    service = BettingService(GameConfiguration(minimum_bet=5, maximum_bet=100))
    service.set_initial_bankroll("Alice", 200)
    service.set_initial_bankroll("Bob", 50)
    return service


def test_bankrolls_are_case_insensitive(service):
    assert service.get_bankroll("alice") == Money(200)
    assert service.get_bankroll("  ALICE ") == Money(200)
    assert service.get_bankroll("Nobody") == Money(0)
    assert service.get_bankroll("") == Money(0)


def test_set_initial_bankroll_validation(service):
    with pytest.raises(InvalidArgumentError):
        service.set_initial_bankroll("", 10)
    with pytest.raises(InvalidArgumentError):
        service.set_initial_bankroll("Carol", -1)


def test_has_sufficient_funds(service):
    assert service.has_sufficient_funds("Bob", 50)
    assert not service.has_sufficient_funds("Bob", "50.01")
    assert not service.has_sufficient_funds(" ", 1)


@pytest.mark.parametrize(
    "name, amount, fragment",
    [
        ("", 10, "Player name"),
        ("Alice", 0, "positive"),
        ("Alice", 4, "below minimum"),
        ("Alice", 101, "exceeds maximum"),
        ("Bob", 60, "Insufficient funds"),
        ("Alice", Money(10, "EUR"), "currency"),
    ],
)
def test_validate_bet_failures(service, name, amount, fragment):
    result = service.validate_bet(name, amount)
    assert result.is_failure
    assert not result
    assert fragment in result.message


def test_place_bet(service):
    result = service.place_bet("alice", 25)
    assert result.is_success
    assert isinstance(result.bet, Bet)
    assert result.bet.amount == Money(25)
    assert service.get_bankroll("Alice") == Money(175)
    assert service.get_current_bet("ALICE") is result.bet


def test_place_bet_twice_fails(service):
    service.place_bet("Alice", 25)
    result = service.place_bet("Alice", 25)
    assert result.is_failure
    assert "already has an active bet" in result.message
    assert service.get_bankroll("Alice") == Money(175)


def test_failed_validation_leaves_bankroll(service):
    assert not service.place_bet("Bob", 60)
    assert service.get_bankroll("Bob") == Money(50)
    assert service.get_current_bet("Bob") is None


def test_calculate_payout_uses_table_multiplier():
    service = BettingService(GameConfiguration(blackjack_payout=1.2))
    payout = service.calculate_payout(GameResult.BLACKJACK, Bet(10, "Alice"))
    assert payout.payout == Money(12)
    assert payout.total_return == Money(22)
    with pytest.raises(InvalidArgumentError):
        service.calculate_payout(GameResult.WIN, None)


def test_process_payouts(service):
    service.set_initial_bankroll("Carol", 100)
    service.place_bet("Alice", 20)
    service.place_bet("Bob", 10)
    service.place_bet("Carol", 10)

    summary = service.process_payouts(
        {
            "Alice": GameResult.BLACKJACK,
            "Bob": GameResult.LOSE,
            "Carol": GameResult.PUSH,
            "Nobody": GameResult.WIN,
        }
    )

    assert len(summary) == 3
    assert service.get_bankroll("Alice") == Money(230)
    assert service.get_bankroll("Bob") == Money(40)
    assert service.get_bankroll("Carol") == Money(100)
    assert summary.total_wagered == Money(40)
    assert summary.total_return == Money(60)
    assert all(bet.is_settled for bet in service.get_all_current_bets().values())


def test_process_payouts_skips_settled_bets(service):
    service.place_bet("Alice", 20)
    service.process_payouts({"Alice": GameResult.WIN})
    summary = service.process_payouts({"Alice": GameResult.WIN})
    assert len(summary) == 0
    assert service.get_bankroll("Alice") == Money(220)


def test_new_bet_allowed_after_settlement(service):
    service.place_bet("Alice", 20)
    service.process_payouts({"Alice": GameResult.LOSE})
    assert service.place_bet("Alice", 20).is_success


def test_update_bankroll_clamps_at_zero(service):
    assert service.update_bankroll("Bob", -80) == Money(0)
    assert service.update_bankroll("Bob", 15) == Money(15)
    with pytest.raises(InvalidArgumentError):
        service.update_bankroll("", 1)


def test_clear_all_bets(service):
    service.place_bet("Alice", 20)
    service.clear_all_bets()
    assert service.get_current_bet("Alice") is None
    assert service.get_all_current_bets() == {}


def test_limits_come_from_configuration():
    service = BettingService()
    assert service.minimum_bet == Money(5)
    assert service.maximum_bet == Money(500)
    assert service.blackjack_multiplier == 1.5
    assert service.currency == "USD"


def test_betting_result_helpers():
    assert BettingResult.success("ok")
    failure = BettingResult.failure("no")
    assert failure.is_failure and failure.bet is None


def test_process_payouts_rejects_names_for_the_same_player(service):
    service.place_bet("Alice", 10)
    with pytest.raises(InvalidArgumentError):
        service.process_payouts({"Alice": GameResult.WIN, " alice": GameResult.WIN})
    assert service.get_bankroll("Alice") == Money(190)
    assert service.get_current_bet("Alice").is_active
