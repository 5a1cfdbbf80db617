"""
Pluggable randomness for shuffling.

The shoe never touches the global `random` module. Instead it receives a
`RandomSource` at construction time, which makes every shuffle reproducible
from a seed:

>>> a, b = PythonRandomSource(seed=7), PythonRandomSource(seed=7)
>>> x, y = list(range(10)), list(range(10))
>>> a.shuffle(x); b.shuffle(y)
>>> x == y
True

Two implementations are provided: `PythonRandomSource` wraps a private
`random.Random`, and `NumpyRandomSource` wraps a numpy `Generator` for callers
that already manage numpy seeds. A source is not thread safe; share one across
shoes only if calls are externally serialised.
"""

import random
from typing import MutableSequence, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can pick integers and shuffle a sequence in place."""

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        ...

    def shuffle(self, items: MutableSequence) -> None:
        """Permute ``items`` in place, uniformly at random."""
        ...


def fisher_yates(items: MutableSequence, source: RandomSource) -> None:
    """
    Shuffle ``items`` in place with the Fisher-Yates algorithm.

    Works on lists and deques alike; runs in O(n) index operations for lists.

    :param items: The sequence to permute
    :param source: Supplies the random indices
    """
    for i in range(len(items) - 1, 0, -1):
        j = source.next_int(0, i + 1)
        if i != j:
            items[i], items[j] = items[j], items[i]


class PythonRandomSource:
    """
    Random source backed by a private `random.Random` instance.

    :param seed: Optional seed; the same seed yields the same permutations
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return self._rng.randrange(low, high)

    def shuffle(self, items: MutableSequence) -> None:
        fisher_yates(items, self)

    def __repr__(self) -> str:
        return f"PythonRandomSource(seed={self.seed!r})"


class NumpyRandomSource:
    """
    Random source backed by `numpy.random.Generator`.

    :param seed: Optional seed, or an existing Generator to draw from
    """

    def __init__(self, seed=None):
        if isinstance(seed, np.random.Generator):
            self.seed = None
            self._rng = seed
        else:
            self.seed = seed
            self._rng = np.random.default_rng(seed)

    def next_int(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return int(self._rng.integers(low, high))

    def shuffle(self, items: MutableSequence) -> None:
        # Draw the whole swap schedule in one call, then apply it in order.
        n = len(items)
        if n < 2:
            return
        upper = np.arange(n, 1, -1)
        swaps = (self._rng.random(n - 1) * upper).astype(np.int64)
        for offset, j in enumerate(swaps):
            i = n - 1 - offset
            j = int(j)
            if i != j:
                items[i], items[j] = items[j], items[i]

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"
