"""Tests for the seeded random stream."""

from __future__ import annotations

import numpy as np
import pytest

from evocore import InvalidArgumentError, RandomStream, SerializationError
from evocore.utils import json


def test_same_seed_same_draws() -> None:
    a, b = RandomStream(42), RandomStream(42)

    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
    assert a.random_uint32() == b.random_uint32()
    assert a.random_uint64() == b.random_uint64()


def test_different_seeds_differ() -> None:
    assert RandomStream(1).random() != RandomStream(2).random()


def test_uniform_respects_bounds() -> None:
    stream = RandomStream(7)
    low = np.array([-5.0, 0.0, 3.0])
    high = np.array([10.0, 1.0, 3.0])

    for _ in range(100):
        x = stream.uniform(low, high)
        assert x.shape == (3,)
        assert np.all(x >= low) and np.all(x <= high)
    assert x[2] == 3.0


def test_integers_and_uint_ranges() -> None:
    stream = RandomStream(3)
    draws = [stream.integers(0, 4) for _ in range(200)]

    assert set(draws) == {0, 1, 2, 3}
    assert 0 <= stream.random_uint32() <= 0xFFFFFFFF
    assert 0 <= stream.random_uint64() <= 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("seed", [-1, 1.5, "seed", True])
def test_invalid_seed_rejected(seed) -> None:
    with pytest.raises(InvalidArgumentError):
        RandomStream(seed)


def test_unseeded_stream_gets_a_seed() -> None:
    stream = RandomStream()
    assert 0 <= stream.seed <= 0xFFFFFFFF


def test_restore_continues_the_sequence() -> None:
    stream = RandomStream(11)
    stream.random()
    stream.random_uint32()
    state = stream.snapshot()
    expected = [stream.random() for _ in range(3)] + [stream.random_uint32()]

    restored = RandomStream.restore(json.loads(json.dumps(state)))

    assert restored.seed == 11
    assert [restored.random() for _ in range(3)] + [restored.random_uint32()] == expected


def test_copy_is_independent() -> None:
    stream = RandomStream(5)
    clone = stream.copy()

    assert clone == stream
    first = stream.random()
    assert clone != stream
    assert clone.random() == first


def test_restore_rejects_malformed_state() -> None:
    with pytest.raises(SerializationError):
        RandomStream.restore({"seed": 1})
    state = RandomStream(1).snapshot()
    state["bit_generator"] = "MT19937"
    with pytest.raises(SerializationError):
        RandomStream.restore(state)
