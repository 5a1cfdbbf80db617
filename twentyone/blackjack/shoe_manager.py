"""
This module provides the `ShoeManager`, the table-side owner of a `Shoe`.

The shoe only queues `ReshuffleNotice` objects; the manager drains that queue
and republishes each notice on an `EventEmitter`:

    - ``RESHUFFLE_NEEDED`` notices become `ShoeEventType.RESHUFFLE_REQUIRED`
    - ``RESHUFFLED`` notices become `ShoeEventType.RESHUFFLE_OCCURRED`

The round controller calls `handle_automatic_reshuffle` between rounds, so the
shoe is never refilled in the middle of a deal.
"""

from typing import List, Optional

from twentyone.blackjack.config import GameConfiguration
from twentyone.common.card import Card
from twentyone.common.random_source import RandomSource
from twentyone.common.shoe import NoticeKind, ReshuffleNotice, Shoe, ShoeStatus
from twentyone.events.emitter import EventEmitter, ShoeEventType
from twentyone.exceptions import InvalidArgumentError, InvalidStateError
from twentyone.log import get_logger

logger = get_logger("shoe_manager")

AUTOMATIC_REASON = "Automatic reshuffle performed by ShoeManager"

_EVENT_FOR_NOTICE = {
    NoticeKind.RESHUFFLE_NEEDED: ShoeEventType.RESHUFFLE_REQUIRED,
    NoticeKind.RESHUFFLED: ShoeEventType.RESHUFFLE_OCCURRED,
}


class ShoeManager:
    """
    Owns a shoe, its reshuffle policy and the events about it.

    :param shoe: The shoe to manage; may be supplied later through `initialize`
    :param emitter: Where reshuffle events are published; a private emitter by default
    :param penetration_threshold: Pushed into the shoe on `initialize`
    :param auto_reshuffle_enabled: Pushed into the shoe on `initialize`
    """

    def __init__(
        self,
        shoe: Optional[Shoe] = None,
        emitter: Optional[EventEmitter] = None,
        penetration_threshold: float = 0.25,
        auto_reshuffle_enabled: bool = True,
    ):
        if not 0.0 <= penetration_threshold <= 1.0:
            raise InvalidArgumentError("Penetration threshold must be between 0.0 and 1.0.")
        self.events = emitter if emitter is not None else EventEmitter()
        self._penetration_threshold = penetration_threshold
        self._auto_reshuffle_enabled = auto_reshuffle_enabled
        self._shoe: Optional[Shoe] = None
        if shoe is not None:
            self.initialize(shoe)

    @classmethod
    def from_configuration(
        cls,
        config: GameConfiguration,
        random_source: Optional[RandomSource] = None,
        emitter: Optional[EventEmitter] = None,
    ) -> "ShoeManager":
        """Build a fresh shoe from ``config`` and manage it."""
        return cls(
            shoe=config.create_shoe(random_source),
            emitter=emitter,
            penetration_threshold=config.penetration_threshold,
            auto_reshuffle_enabled=config.auto_reshuffle_enabled,
        )

    def initialize(self, shoe: Shoe) -> None:
        """Take over ``shoe`` and apply this manager's reshuffle policy to it."""
        if shoe is None:
            raise InvalidArgumentError("Cannot manage a missing shoe.")
        self._shoe = shoe
        shoe.auto_reshuffle_enabled = self._auto_reshuffle_enabled
        shoe.penetration_threshold = self._penetration_threshold

    @property
    def current_shoe(self) -> Shoe:
        if self._shoe is None:
            raise InvalidStateError("Shoe manager has not been initialized with a shoe.")
        return self._shoe

    @property
    def auto_reshuffle_enabled(self) -> bool:
        return self._auto_reshuffle_enabled

    @auto_reshuffle_enabled.setter
    def auto_reshuffle_enabled(self, value: bool) -> None:
        self._auto_reshuffle_enabled = value
        if self._shoe is not None:
            self._shoe.auto_reshuffle_enabled = value

    @property
    def penetration_threshold(self) -> float:
        return self._penetration_threshold

    @penetration_threshold.setter
    def penetration_threshold(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise InvalidArgumentError("Penetration threshold must be between 0.0 and 1.0.")
        self._penetration_threshold = value
        if self._shoe is not None:
            self._shoe.penetration_threshold = value

    def draw(self) -> Card:
        """Draw from the managed shoe and publish any notice the draw produced."""
        card = self.current_shoe.draw()
        self.process_pending_notices()
        return card

    def is_reshuffle_needed(self) -> bool:
        if self._shoe is None:
            return False
        return self._shoe.needs_reshuffle(self._penetration_threshold)

    def handle_automatic_reshuffle(self) -> bool:
        """
        Refill the shoe if the policy allows it and the threshold has been crossed.

        :return: True when a reshuffle was performed
        """
        shoe = self.current_shoe
        if not self._auto_reshuffle_enabled or not self.is_reshuffle_needed():
            return False

        # Publish what the draws announced before the reset discards it.
        self.process_pending_notices()
        shoe.trigger_reshuffle(AUTOMATIC_REASON)
        self.process_pending_notices()
        return True

    def trigger_manual_reshuffle(self, reason: str = "Manual reshuffle") -> ReshuffleNotice:
        self.process_pending_notices()
        notice = self.current_shoe.trigger_reshuffle(reason)
        self.process_pending_notices()
        return notice

    def process_pending_notices(self) -> List[ReshuffleNotice]:
        """
        Drain the shoe's notice queue and publish each notice, oldest first.

        :return: The notices that were published
        """
        notices = self.current_shoe.drain_notices()
        for notice in notices:
            event_type = _EVENT_FOR_NOTICE[notice.kind]
            logger.debug("Publishing %s: %s", event_type.name, notice)
            self.events.emit(event_type, notice)
        return notices

    def status(self) -> ShoeStatus:
        return self.current_shoe.status()

    def __str__(self) -> str:
        if self._shoe is None:
            return "ShoeManager (no shoe)"
        return f"ShoeManager: {self._shoe.status()}"
