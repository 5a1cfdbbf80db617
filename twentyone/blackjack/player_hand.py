"""
PlayerHand couples one hand with the bet riding on it.

A player hand is Active while it can act, Inactive while the turn sits on a
sibling hand, and Complete once it can never act again. Completion happens
automatically when a card busts the hand, makes a natural, gives a split ace
its single extra card, or lands on a doubled hand.
"""

from twentyone.blackjack.bet import Bet
from twentyone.blackjack.constants import BetType
from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card
from twentyone.exceptions import InvalidActionError, InvalidArgumentError, InvalidStateError


class PlayerHand:
    """
    One hand of a player together with its wager.

    :param hand: The cards; owned exclusively by this object
    :param bet: The wager; owned exclusively by this object until settlement
    :param is_active: Whether the hand starts with the turn
    """

    def __init__(self, hand: BlackjackHand, bet: Bet, is_active: bool = True):
        if hand is None:
            raise InvalidArgumentError("A player hand needs a hand.")
        if bet is None:
            raise InvalidArgumentError("A player hand needs a bet.")
        self._hand = hand
        self._bet = bet
        self._is_active = is_active
        self._is_complete = False
        self._is_doubled = False

    @property
    def hand(self) -> BlackjackHand:
        return self._hand

    @property
    def bet(self) -> Bet:
        return self._bet

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def is_doubled(self) -> bool:
        return self._is_doubled

    @property
    def is_busted(self) -> bool:
        return self._hand.is_busted

    @property
    def is_blackjack(self) -> bool:
        return self._hand.is_blackjack

    @property
    def is_split_hand(self) -> bool:
        return self._hand.is_split_hand

    @property
    def hand_value(self) -> int:
        return self._hand.value()

    @property
    def card_count(self) -> int:
        return self._hand.card_count

    def mark_as_complete(self) -> None:
        self._is_complete = True
        self._is_active = False
        self._hand.mark_as_complete()

    def mark_as_inactive(self) -> None:
        self._is_active = False

    def reactivate(self) -> None:
        if self._is_complete:
            raise InvalidStateError("Cannot reactivate a complete hand.")
        self._is_active = True

    def can_receive_more_cards(self) -> bool:
        if self._is_complete or not self._is_active:
            return False
        return self._hand.can_receive_more_cards()

    def add_card(self, card: Card) -> None:
        """
        Deal a card to this hand and complete it if the card ends its play.

        :raises InvalidStateError: if the hand is inactive, complete, or full
        """
        if not self.can_receive_more_cards():
            raise InvalidStateError("This hand cannot receive more cards.")

        self._hand.add_card(card)

        hand = self._hand
        if (
            hand.is_busted
            or hand.is_blackjack
            or (hand.is_split_aces and hand.card_count == 2)
            or self._is_doubled
        ):
            self.mark_as_complete()

    def can_split(self) -> bool:
        if not self._is_active or self._is_complete:
            return False
        return self._hand.is_pair

    def can_double_down(self) -> bool:
        if not self._is_active or self._is_complete or self._hand.card_count != 2:
            return False
        if self._is_doubled:
            return False
        return not self._hand.is_busted and not self._hand.is_blackjack

    def apply_double_down(self, bet: Bet) -> None:
        """
        Swap in the doubled wager. The hand then takes one card and completes.

        :param bet: A DOUBLE_DOWN bet derived from this hand's current bet
        """
        if not self.can_double_down():
            raise InvalidActionError("This hand cannot be doubled down.")
        if bet.bet_type != BetType.DOUBLE_DOWN:
            raise InvalidArgumentError("Doubling requires a double down bet.")
        self._bet = bet
        self._is_doubled = True

    def __str__(self) -> str:
        if self._is_complete:
            status = "Complete"
        else:
            status = "Active" if self._is_active else "Inactive"
        split_text = " (Split)" if self.is_split_hand else ""
        return (
            f"Hand: {self._hand} (Value: {self.hand_value}), "
            f"Bet: {self._bet.amount}, Status: {status}{split_text}"
        )

    def __repr__(self) -> str:
        return f"PlayerHand({self._hand!r}, {self._bet!r})"
