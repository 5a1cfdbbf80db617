"""
Pytest configuration for tests at the root level.

Shared fixtures: seeded random sources and a small card factory so tests can
spell hands as rank strings, e.g. ``make_hand("A", "6")``.
"""

import os

# Must be set before the package configures its loggers.
os.environ.setdefault("TWENTYONE_DISABLE_LOGGING", "1")

import pytest

from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.random_source import NumpyRandomSource, PythonRandomSource

_RANKS = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "split: mark test as testing split scenarios")
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture
def seeded_source():
    return PythonRandomSource(seed=42)


@pytest.fixture
def numpy_source():
    return NumpyRandomSource(seed=42)


@pytest.fixture
def make_card():
    """Build a card from a rank string; suits rotate so equal ranks stay distinguishable."""
    suits = list(Suit)
    counter = {"n": 0}

    def factory(rank: str, suit: Suit = None) -> Card:
        if suit is None:
            suit = suits[counter["n"] % len(suits)]
            counter["n"] += 1
        return Card(suit, _RANKS[rank])

    return factory


@pytest.fixture
def make_hand(make_card):
    def factory(*ranks: str, is_split: bool = False) -> BlackjackHand:
        return BlackjackHand([make_card(r) for r in ranks], is_split=is_split)

    return factory
