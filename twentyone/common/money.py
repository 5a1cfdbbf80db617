"""
Money value type.

`Money` pairs a `Decimal` amount (at most two decimal places) with an upper
case currency code. It is immutable, hashable and totally ordered within one
currency; mixing currencies raises `InvalidStateError`.

>>> Money(10) * 1.5
Money('15.00', 'USD')
>>> str(Money("2.5"))
'2.50 USD'
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import total_ordering
from numbers import Number
from typing import Union

from twentyone.exceptions import InvalidArgumentError, InvalidStateError

CENT = Decimal("0.01")
DEFAULT_CURRENCY = "USD"

Amount = Union["Money", Decimal, int, float, str]


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Go through str so 0.1 stays 0.1 rather than its binary expansion.
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid money amount: {value!r}") from exc


def _round(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@total_ordering
class Money:
    """An amount of money in a single currency."""

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount=0, currency: str = DEFAULT_CURRENCY):
        if not isinstance(currency, str) or not currency.strip():
            raise InvalidArgumentError("Currency cannot be empty or whitespace.")

        value = _to_decimal(amount)
        if not value.is_finite():
            raise InvalidArgumentError(f"Money amount must be finite: {amount!r}")
        if value != _round(value):
            raise InvalidArgumentError(
                "Money amount cannot have more than 2 decimal places."
            )

        object.__setattr__(self, "_amount", _round(value))
        object.__setattr__(self, "_currency", currency.strip().upper())

    @classmethod
    def of(cls, value: Amount, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Coerce a number or an existing Money into Money."""
        if isinstance(value, Money):
            return value
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(0, currency)

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def is_positive(self) -> bool:
        return self._amount > 0

    @property
    def is_zero(self) -> bool:
        return self._amount == 0

    @property
    def is_negative(self) -> bool:
        return self._amount < 0

    def __setattr__(self, name, value):
        raise AttributeError("Money is immutable")

    def _check_currency(self, other: "Money") -> None:
        if self._currency != other._currency:
            raise InvalidStateError(
                "Cannot perform operation on different currencies: "
                f"{self._currency} and {other._currency}."
            )

    def _coerce(self, other) -> "Money":
        if isinstance(other, Money):
            self._check_currency(other)
            return other
        if isinstance(other, (Number, Decimal)) and not isinstance(other, bool):
            return Money(_round(_to_decimal(other)), self._currency)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Money(self._amount + other._amount, self._currency)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Money(self._amount - other._amount, self._currency)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, multiplier):
        if isinstance(multiplier, Money) or isinstance(multiplier, bool):
            return NotImplemented
        if not isinstance(multiplier, (Number, Decimal)):
            return NotImplemented
        return Money(_round(self._amount * _to_decimal(multiplier)), self._currency)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Money) or not isinstance(divisor, (Number, Decimal)):
            return NotImplemented
        divisor = _to_decimal(divisor)
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide money by zero.")
        return Money(_round(self._amount / divisor), self._currency)

    def __neg__(self):
        return Money(-self._amount, self._currency)

    def __abs__(self):
        return Money(abs(self._amount), self._currency)

    def __bool__(self):
        return self._amount != 0

    def __eq__(self, other):
        if isinstance(other, Money):
            return self._amount == other._amount and self._currency == other._currency
        if isinstance(other, (Number, Decimal)) and not isinstance(other, bool):
            return self._amount == _to_decimal(other)
        return NotImplemented

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._amount < other._amount

    def __hash__(self):
        # Money(15) == 15, so both must land in the same bucket.
        return hash(self._amount)

    def __float__(self):
        return float(self._amount)

    def __repr__(self) -> str:
        return f"Money('{self._amount}', '{self._currency}')"

    def __str__(self) -> str:
        return f"{self._amount:.2f} {self._currency}"
