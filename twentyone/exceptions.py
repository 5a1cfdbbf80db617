"""
Exceptions raised by the twentyone core.

Every error is raised synchronously to the immediate caller. The classes form
a small taxonomy rooted at `BlackjackError`:

    - `EmptySourceError`: a draw was requested from an empty shoe.
    - `InvalidArgumentError`: a value handed to the core is out of range.
    - `InvalidStateError`: the object is not in a state that permits the call.
    - `InvalidActionError`: a player action is not allowed for the hand.
    - `InsufficientFundsError`: a bankroll cannot cover the requested wager.

`EmptySourceError` and `InvalidArgumentError` also derive from the matching
builtin so callers catching ``IndexError`` or ``ValueError`` keep working.
"""


class BlackjackError(Exception):
    """Base class for all errors raised by the blackjack core."""


class EmptySourceError(BlackjackError, IndexError):
    """Raised when drawing from a shoe that holds no cards."""


class InvalidArgumentError(BlackjackError, ValueError):
    """Raised when an argument is outside its permitted range."""


class InvalidStateError(BlackjackError):
    """Raised when an operation is not permitted in the object's current state."""


class InvalidActionError(BlackjackError):
    """Raised when a player attempts an action that is not currently valid."""


class InsufficientFundsError(InvalidActionError):
    """Raised when a player does not have enough money to perform an action."""
