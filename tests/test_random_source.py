import numpy as np
import pytest

from twentyone.common.random_source import (
    NumpyRandomSource,
    PythonRandomSource,
    RandomSource,
    fisher_yates,
)


@pytest.mark.parametrize("factory", [PythonRandomSource, NumpyRandomSource])
def test_sources_satisfy_protocol(factory):
    assert isinstance(factory(seed=1), RandomSource)


@pytest.mark.parametrize("factory", [PythonRandomSource, NumpyRandomSource])
def test_same_seed_same_permutation(factory):
    a, b = list(range(52)), list(range(52))
    factory(seed=99).shuffle(a)
    factory(seed=99).shuffle(b)
    assert a == b
    assert sorted(a) == list(range(52))


@pytest.mark.parametrize("factory", [PythonRandomSource, NumpyRandomSource])
def test_next_int_range(factory):
    source = factory(seed=3)
    values = {source.next_int(0, 3) for _ in range(200)}
    assert values == {0, 1, 2}


@pytest.mark.parametrize("factory", [PythonRandomSource, NumpyRandomSource])
def test_next_int_empty_range(factory):
    with pytest.raises(ValueError):
        factory(seed=3).next_int(5, 5)


def test_numpy_source_accepts_generator():
    rng = np.random.default_rng(5)
    source = NumpyRandomSource(rng)
    assert source.seed is None
    items = list(range(10))
    source.shuffle(items)
    assert sorted(items) == list(range(10))


def test_shuffle_short_sequences():
    for source in (PythonRandomSource(seed=1), NumpyRandomSource(seed=1)):
        empty, single = [], ["x"]
        source.shuffle(empty)
        source.shuffle(single)
        assert empty == [] and single == ["x"]


class _Reverse:
    """Always swaps with index 0, which makes the permutation easy to predict."""

    def next_int(self, low, high):
        return low

    def shuffle(self, items):
        fisher_yates(items, self)


def test_fisher_yates_uses_the_source():
    items = [1, 2, 3]
    _Reverse().shuffle(items)
    # i=2 swaps with 0 -> [3, 2, 1]; i=1 swaps with 0 -> [2, 3, 1]
    assert items == [2, 3, 1]


@pytest.mark.slow
def test_shuffle_is_roughly_uniform():
    source = PythonRandomSource(seed=2024)
    counts = [0, 0, 0]
    trials = 6000
    for _ in range(trials):
        items = [0, 1, 2]
        source.shuffle(items)
        counts[items[0]] += 1
    for count in counts:
        assert abs(count - trials / 3) < trials * 0.05
