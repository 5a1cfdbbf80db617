"""
BlackjackHand: a hand with memoized blackjack scoring.
"""

from typing import Iterable, Optional

from twentyone.blackjack.constants import BLACKJACK, SOFT_ACE_BONUS, get_blackjack_value
from twentyone.common.card import Card, Rank
from twentyone.common.hand import Hand


class BlackjackHand(Hand):
    """
    A hand in the game of Blackjack.

    The value is computed lazily and cached until the next mutation. Scoring
    counts every ace as 11, then demotes aces to 1 one at a time while the
    total is over 21.

    >>> from twentyone.common.card import Suit
    >>> hand = BlackjackHand([Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.SIX)])
    >>> hand.value(), hand.is_soft
    (17, True)
    """

    __slots__ = ("_cached_value", "_soft_aces", "_value_cache_valid", "_is_split", "_is_complete")

    def __init__(self, cards: Optional[Iterable[Card]] = None, is_split: bool = False):
        self._cached_value = 0
        self._soft_aces = 0
        self._value_cache_valid = False
        self._is_split = is_split
        self._is_complete = False
        super().__init__(cards)

    def _on_change(self) -> None:
        self._value_cache_valid = False

    def clear(self) -> None:
        """Empty the hand and forget its split and complete flags."""
        self._is_split = False
        self._is_complete = False
        super().clear()

    def _compute(self) -> None:
        total = 0
        soft_aces = 0
        for card in self._cards:
            if card.rank == Rank.ACE:
                soft_aces += 1
            total += get_blackjack_value(card.rank)

        while total > BLACKJACK and soft_aces > 0:
            total -= SOFT_ACE_BONUS
            soft_aces -= 1

        self._cached_value = total
        self._soft_aces = soft_aces
        self._value_cache_valid = True

    def value(self) -> int:
        """Calculate the optimal value of the hand with ace handling."""
        if not self._value_cache_valid:
            self._compute()
        return self._cached_value

    get_value = value

    @property
    def is_busted(self) -> bool:
        return self.value() > BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Exactly two cards totalling 21."""
        return len(self._cards) == 2 and self.value() == BLACKJACK

    @property
    def is_soft(self) -> bool:
        """An ace still counts as 11. A natural is never reported as soft."""
        if not self._value_cache_valid:
            self._compute()
        return self._soft_aces > 0 and not self.is_blackjack

    @property
    def is_pair(self) -> bool:
        return len(self._cards) == 2 and self._cards[0].rank == self._cards[1].rank

    @property
    def is_split(self) -> bool:
        """Return whether this hand was created from a split."""
        return self._is_split

    is_split_hand = is_split

    @property
    def is_split_aces(self) -> bool:
        return self._is_split and bool(self._cards) and self._cards[0].rank == Rank.ACE

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    def mark_as_split_hand(self) -> None:
        self._is_split = True

    def mark_as_complete(self) -> None:
        self._is_complete = True

    def can_receive_more_cards(self) -> bool:
        if self._is_complete or self.is_busted or self.is_blackjack:
            return False
        # Split aces get exactly one card each.
        if self.is_split_aces and len(self._cards) == 2:
            return False
        return True
