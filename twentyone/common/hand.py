"""
This module contains classes to represent a hand of cards.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
A hand is an ordered sequence of cards; callers only ever see a read-only view
of it, and mutation goes through `add_card`, `remove_card` and `clear` so that
subclasses can react to every change.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""
from abc import ABC
from typing import Iterable, List, Optional, Tuple

from twentyone.common.card import Card


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    Subclasses override `_on_change` to invalidate anything derived from the cards.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = []
        for card in cards or ():
            self.add_card(card)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Returns a read-only view of the cards in the hand."""
        return tuple(self._cards)

    @property
    def card_count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(tuple(self._cards))

    def _on_change(self) -> None:
        """Hook called after every mutation."""

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the end of the hand.

        Args:
            card: The card to add.
        """
        if not isinstance(card, Card):
            raise TypeError(f"Expected a Card, got {type(card).__name__}")
        self._cards.append(card)
        self._on_change()

    def remove_card(self, card: Card) -> None:
        """
        Removes a card from the hand.

        Args:
            card: The card to remove.

        Raises:
            ValueError: If the card is not found in the hand.
        """
        try:
            self._cards.remove(card)
        except ValueError as exc:
            raise ValueError(f"Card {card} not found in hand.") from exc
        self._on_change()

    def clear(self) -> None:
        """Removes every card from the hand."""
        self._cards.clear()
        self._on_change()


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.

    This class provides a string representation of a hand of cards for both debugging and display purposes.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"{type(self).__name__}({self._cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "A of Spades, 7 of Hearts", or "Empty hand".
        """
        if not self._cards:
            return "Empty hand"
        return ", ".join(str(card) for card in self._cards)
