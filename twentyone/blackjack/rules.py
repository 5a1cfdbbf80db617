"""
Rule evaluation for blackjack.

`RuleEvaluator` answers every rules question the round controller asks: what a
card is worth, whether the dealer draws, whether a requested action is legal,
and who won. It keeps no game state; an optional `GameConfiguration` only
switches doubling and splitting on or off in `get_valid_actions`.
"""

from dataclasses import dataclass
from typing import List, Optional

from twentyone.blackjack.action import PlayerAction
from twentyone.blackjack.config import GameConfiguration
from twentyone.blackjack.constants import BLACKJACK, DEALER_STAND_VALUE, GameResult
from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card, Rank


@dataclass(frozen=True)
class ActionValidation:
    """Outcome of validating one action, with the reason when it is refused."""

    is_valid: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def valid(cls) -> "ActionValidation":
        return cls(True)

    @classmethod
    def invalid(cls, message: str) -> "ActionValidation":
        return cls(False, message)


class RuleEvaluator:
    def __init__(self, config: Optional[GameConfiguration] = None):
        self.config = config

    def card_value_contribution(self, card: Card, current_hand_total: int) -> int:
        """
        Value a card adds to a running total.

        Args:
            card: The card being added.
            current_hand_total: The hand total before the card.

        Returns:
            int: 11 or 1 for an ace (whichever does not bust), 10 for faces, else the face value.
        """
        if card.rank == Rank.ACE:
            return 11 if current_hand_total + 11 <= BLACKJACK else 1
        if card.rank.is_face:
            return 10
        return card.rank.value

    def should_dealer_hit(self, dealer_value: int) -> bool:
        """The dealer draws to 16 and stands on every 17, soft or hard."""
        return dealer_value < DEALER_STAND_VALUE

    def determine_result(
        self, player_hand: BlackjackHand, dealer_hand: BlackjackHand
    ) -> GameResult:
        """
        Settle one player hand against the dealer's final hand.

        Args:
            player_hand (BlackjackHand): The player's finished hand.
            dealer_hand (BlackjackHand): The dealer's finished hand.

        Returns:
            GameResult: The outcome from the player's point of view.
        """
        if player_hand.is_busted:
            return GameResult.LOSE

        if dealer_hand.is_busted:
            return GameResult.BLACKJACK if player_hand.is_blackjack else GameResult.WIN

        player_natural = player_hand.is_blackjack
        dealer_natural = dealer_hand.is_blackjack
        if player_natural and dealer_natural:
            return GameResult.PUSH
        if player_natural:
            return GameResult.BLACKJACK
        if dealer_natural:
            return GameResult.LOSE

        player_value = player_hand.value()
        dealer_value = dealer_hand.value()
        if player_value > dealer_value:
            return GameResult.WIN
        if player_value < dealer_value:
            return GameResult.LOSE
        return GameResult.PUSH

    def validate_action(self, action: PlayerAction, hand: BlackjackHand) -> ActionValidation:
        """
        Check an action against the hand, explaining any refusal.

        Args:
            action (PlayerAction): The requested action.
            hand (BlackjackHand): The hand the action applies to.

        Returns:
            ActionValidation: Valid, or invalid with a message.
        """
        if hand.is_busted:
            return ActionValidation.invalid("Cannot take action on a busted hand.")

        if action in (PlayerAction.HIT, PlayerAction.STAND):
            return ActionValidation.valid()
        if action == PlayerAction.DOUBLE_DOWN:
            if hand.card_count != 2:
                return ActionValidation.invalid("Can only double down on initial two cards.")
            return ActionValidation.valid()
        if action == PlayerAction.SPLIT:
            if hand.card_count != 2:
                return ActionValidation.invalid("Can only split with exactly two cards.")
            if not hand.is_pair:
                return ActionValidation.invalid("Can only split pairs of the same rank.")
            return ActionValidation.valid()
        return ActionValidation.invalid(f"Unknown action: {action}")

    def is_valid_player_action(self, action: PlayerAction, hand: BlackjackHand) -> bool:
        return self.validate_action(action, hand).is_valid

    def get_valid_actions(self, hand: BlackjackHand) -> List[PlayerAction]:
        """
        List the actions the hand allows, honouring the configuration's toggles.

        Args:
            hand (BlackjackHand): The hand about to act.

        Returns:
            list[PlayerAction]: In the order hit, stand, double down, split.
        """
        actions = [a for a in PlayerAction if self.is_valid_player_action(a, hand)]
        if self.config is not None:
            if not self.config.allow_double_down:
                actions = [a for a in actions if a != PlayerAction.DOUBLE_DOWN]
            if not self.config.allow_split:
                actions = [a for a in actions if a != PlayerAction.SPLIT]
        return actions

    def can_double_down(self, hand: BlackjackHand) -> bool:
        """Two cards, neither busted nor a natural."""
        if hand.card_count != 2:
            return False
        return not hand.is_busted and not hand.is_blackjack

    def can_split(self, hand: BlackjackHand) -> bool:
        """Two cards of the same rank."""
        return hand.is_pair

    def is_natural_blackjack(self, hand: BlackjackHand) -> bool:
        return hand.is_blackjack

    def is_busted(self, hand: BlackjackHand) -> bool:
        return hand.is_busted
