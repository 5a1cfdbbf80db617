"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Spades, Hearts, Diamonds and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace, Two through Ten, Jack, Queen and King. Every rank has a distinct
value so that Jack, Queen and King never collapse into Ten.

- `Card`: An immutable (suit, rank) pair with value equality. Cards are normally
obtained from `standard_deck()` rather than built one by one.

This module is part of the `twentyone` package, a blackjack rules and state engine.
"""

from enum import Enum, unique
from typing import List, Tuple


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, valued by position (Ace low).
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def is_face(self) -> bool:
        """True for Jack, Queen and King."""
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def is_ten_valued(self) -> bool:
        """True for every rank worth ten points in blackjack."""
        return self.value >= Rank.TEN.value

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        if self == Rank.ACE:
            return "A"
        if self.is_face:
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of Hearts
    >>> card == Card(Suit.HEARTS, Rank.TWO)
    True
    """

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __delattr__(self, name):
        raise AttributeError("Card is immutable")

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __reduce__(self):
        return (Card, (self._suit, self._rank))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self._rank.rank_str} of {self._suit}"


# Precompute the standard deck once; callers get a fresh list each time.
_STANDARD_DECK: Tuple[Card, ...] = tuple(
    Card(suit, rank) for suit in Suit for rank in Rank
)


def standard_deck() -> List[Card]:
    """
    Return a new list holding the 52 cards of a standard deck in suit/rank order.

    >>> len(standard_deck())
    52
    """
    return list(_STANDARD_DECK)
