from decimal import Decimal

import pytest

from twentyone.common.money import Money
from twentyone.exceptions import InvalidArgumentError, InvalidStateError


def test_defaults():
    money = Money(10)
    assert money.amount == Decimal("10.00")
    assert money.currency == "USD"
    assert str(money) == "10.00 USD"
    assert repr(money) == "Money('10.00', 'USD')"


def test_currency_is_upper_cased():
    assert Money(1, "eur").currency == "EUR"


def test_rejects_more_than_two_decimal_places():
    with pytest.raises(InvalidArgumentError):
        Money("1.005")


@pytest.mark.parametrize("bad", ["abc", float("nan"), float("inf"), None])
def test_rejects_malformed_amounts(bad):
    with pytest.raises(InvalidArgumentError):
        Money(bad)


def test_rejects_blank_currency():
    with pytest.raises(InvalidArgumentError):
        Money(1, " ")


def test_float_amounts_keep_their_decimal_value():
    assert Money(0.1).amount == Decimal("0.10")


def test_arithmetic():
    assert Money(10) + Money("2.50") == Money("12.50")
    assert Money(10) - 3 == Money(7)
    assert -Money(5) == Money(-5)
    assert abs(Money(-5)) == Money(5)


def test_multiplication_rounds_half_away_from_zero():
    assert Money(10) * 1.5 == Money(15)
    assert Money("0.05") * Decimal("0.5") == Money("0.03")
    assert Money("-0.05") * Decimal("0.5") == Money("-0.03")


def test_division():
    assert Money(10) / 4 == Money("2.50")
    with pytest.raises(ZeroDivisionError):
        Money(10) / 0


def test_mixed_currencies_are_rejected():
    with pytest.raises(InvalidStateError):
        Money(1, "USD") + Money(1, "EUR")
    with pytest.raises(InvalidStateError):
        Money(1, "USD") < Money(2, "EUR")


def test_ordering():
    assert Money(5) < Money(10)
    assert Money(10) >= Money(10)
    assert max(Money(1), Money(3), Money(2)) == Money(3)


def test_equality_with_plain_numbers():
    assert Money(15) == 15
    assert Money("15.50") == Decimal("15.5")
    assert hash(Money(15)) == hash(Money("15.00"))


def test_predicates():
    assert Money(1).is_positive
    assert Money(0).is_zero and not Money(0)
    assert Money(-1).is_negative


def test_of_passes_money_through():
    money = Money(3, "EUR")
    assert Money.of(money) is money
    assert Money.of(3) == Money(3)


def test_immutable():
    with pytest.raises(AttributeError):
        Money(1)._amount = Decimal(2)
