"""
Multi-deck shoe with penetration tracking.

A `Shoe` holds ``deck_count`` standard decks in one FIFO queue. Cards come off
the front on `draw`. Once the remaining fraction drops below the penetration
threshold the shoe *announces* that a reshuffle is due but never reshuffles by
itself: a reshuffle in the middle of a deal would corrupt the round, so the
caller decides when to act.

Announcements are `ReshuffleNotice` objects. They are queued on the shoe (see
`pending_notices` and `drain_notices`) and, if a listener was passed to the
constructor, handed to it synchronously as well.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Deque, List, Optional, Tuple

from twentyone.common.card import Card, standard_deck
from twentyone.common.random_source import PythonRandomSource, RandomSource
from twentyone.exceptions import EmptySourceError, InvalidArgumentError
from twentyone.log import get_logger

logger = get_logger("shoe")

CARDS_PER_DECK = 52
NEARLY_EMPTY_FRACTION = 0.05


class NoticeKind(Enum):
    """What a reshuffle notice announces."""

    RESHUFFLE_NEEDED = "reshuffle_needed"
    RESHUFFLED = "reshuffled"


@dataclass(frozen=True)
class ReshuffleNotice:
    """A reshuffle announcement emitted by a shoe."""

    kind: NoticeKind
    reason: str
    remaining_percentage: float
    threshold: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return (
            f"Shoe reshuffle at {self.timestamp:%H:%M:%S} - {self.reason} "
            f"(Remaining: {self.remaining_percentage:.1%}, "
            f"Threshold: {self.threshold:.1%})"
        )


@dataclass(frozen=True)
class ShoeStatus:
    """Point-in-time snapshot of a shoe, for display and statistics collaborators."""

    deck_count: int
    total_cards: int
    remaining_cards: int
    remaining_percentage: float
    penetration_threshold: float
    needs_reshuffle: bool
    auto_reshuffle_enabled: bool

    @property
    def cards_dealt(self) -> int:
        return self.total_cards - self.remaining_cards

    @property
    def is_empty(self) -> bool:
        return self.remaining_cards == 0

    @property
    def is_nearly_empty(self) -> bool:
        return self.remaining_percentage < NEARLY_EMPTY_FRACTION

    def __str__(self) -> str:
        status = (
            f"Shoe: {self.remaining_cards}/{self.total_cards} cards "
            f"({self.remaining_percentage:.1%})"
        )
        if self.needs_reshuffle:
            status += " - RESHUFFLE NEEDED"
        return status


NoticeListener = Callable[[ReshuffleNotice], None]


def _validate_threshold(value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(
            f"Penetration threshold must be between 0.0 and 1.0, got {value}"
        )
    return float(value)


class Shoe:
    """
    A shoe of several standard decks.

    :param deck_count: Number of 52-card decks (at least 1, default 6)
    :param random_source: Supplies shuffles; defaults to an unseeded `PythonRandomSource`
    :param penetration_threshold: Remaining fraction below which a reshuffle is announced
    :param auto_reshuffle_enabled: Whether draws announce crossing the threshold at all
    :param listener: Optional callable receiving every notice as it is emitted
    """

    def __init__(
        self,
        deck_count: int = 6,
        random_source: Optional[RandomSource] = None,
        penetration_threshold: float = 0.25,
        auto_reshuffle_enabled: bool = True,
        listener: Optional[NoticeListener] = None,
    ):
        if isinstance(deck_count, bool) or not isinstance(deck_count, int):
            raise InvalidArgumentError(f"Deck count must be an integer, got {deck_count!r}")
        if deck_count < 1:
            raise InvalidArgumentError("Deck count must be at least 1.")

        self._deck_count = deck_count
        self._random_source = random_source or PythonRandomSource()
        self._penetration_threshold = _validate_threshold(penetration_threshold)
        self.auto_reshuffle_enabled = auto_reshuffle_enabled
        self._listener = listener
        self._cards: Deque[Card] = deque()
        self._notices: Deque[ReshuffleNotice] = deque()

        self.reset()

    @property
    def deck_count(self) -> int:
        return self._deck_count

    @property
    def total_cards(self) -> int:
        return self._deck_count * CARDS_PER_DECK

    @property
    def remaining_cards(self) -> int:
        """Return the number of cards remaining in the shoe."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards(self) -> Tuple[Card, ...]:
        """The undealt cards, next card first."""
        return tuple(self._cards)

    @property
    def penetration_threshold(self) -> float:
        return self._penetration_threshold

    @penetration_threshold.setter
    def penetration_threshold(self, value: float) -> None:
        self._penetration_threshold = _validate_threshold(value)

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    def draw(self) -> Card:
        """
        Remove and return the next card.

        :raises EmptySourceError: if the shoe holds no cards
        """
        if not self._cards:
            raise EmptySourceError("Cannot draw from an empty shoe.")

        card = self._cards.popleft()

        if self.auto_reshuffle_enabled:
            remaining = self.get_remaining_percentage()
            if remaining < self._penetration_threshold:
                self._emit(
                    NoticeKind.RESHUFFLE_NEEDED,
                    "Penetration threshold reached",
                    remaining,
                )
        return card

    def shuffle(self) -> None:
        """Shuffle the undealt cards in place using the injected random source."""
        # Deque indexing is O(n) in the middle, so permute a list and swap it in.
        cards = list(self._cards)
        self._random_source.shuffle(cards)
        self._cards = deque(cards)

    def reset(self) -> None:
        """Refill the shoe with every deck and shuffle."""
        self._cards.clear()
        for _ in range(self._deck_count):
            self._cards.extend(standard_deck())
        self.shuffle()
        # A refilled shoe no longer needs the reshuffle it asked for.
        self._notices = deque(
            n for n in self._notices if n.kind != NoticeKind.RESHUFFLE_NEEDED
        )
        logger.debug("Shoe reset with %d decks (%d cards)", self._deck_count, len(self._cards))

    def get_remaining_percentage(self) -> float:
        """Return the fraction of cards left, between 0.0 and 1.0."""
        total = self.total_cards
        if total <= 0:
            return 0.0
        return len(self._cards) / total

    def needs_reshuffle(self, threshold: float = 0.25) -> bool:
        """True when the remaining fraction is strictly below ``threshold``."""
        return self.get_remaining_percentage() < threshold

    def trigger_reshuffle(self, reason: str = "Manual reshuffle") -> ReshuffleNotice:
        """
        Reset the shoe immediately and announce it.

        :param reason: Free text carried on the notice
        :return: The "reshuffled" notice that was emitted
        """
        if reason is None:
            raise InvalidArgumentError("Reshuffle reason cannot be None.")
        remaining = self.get_remaining_percentage()
        self.reset()
        logger.info("Shoe reshuffled: %s (%.1f%% remaining)", reason, remaining * 100)
        return self._emit(NoticeKind.RESHUFFLED, reason, remaining)

    def pending_notices(self) -> List[ReshuffleNotice]:
        """Notices emitted since the last drain, oldest first, without clearing them."""
        return list(self._notices)

    def drain_notices(self) -> List[ReshuffleNotice]:
        """Return and clear every queued notice."""
        notices = list(self._notices)
        self._notices.clear()
        return notices

    def status(self) -> ShoeStatus:
        return ShoeStatus(
            deck_count=self._deck_count,
            total_cards=self.total_cards,
            remaining_cards=self.remaining_cards,
            remaining_percentage=self.get_remaining_percentage(),
            penetration_threshold=self._penetration_threshold,
            needs_reshuffle=self.needs_reshuffle(self._penetration_threshold),
            auto_reshuffle_enabled=self.auto_reshuffle_enabled,
        )

    def _emit(self, kind: NoticeKind, reason: str, remaining: float) -> ReshuffleNotice:
        notice = ReshuffleNotice(
            kind=kind,
            reason=reason,
            remaining_percentage=remaining,
            threshold=self._penetration_threshold,
        )
        self._notices.append(notice)
        if self._listener is not None:
            self._listener(notice)
        return notice

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return (
            f"Shoe with {self._deck_count} decks, {self.remaining_cards} cards "
            f"remaining ({self.get_remaining_percentage():.1%})"
        )

    def __repr__(self) -> str:
        return (
            f"Shoe(deck_count={self._deck_count}, "
            f"penetration_threshold={self._penetration_threshold}, "
            f"auto_reshuffle_enabled={self.auto_reshuffle_enabled})"
        )
