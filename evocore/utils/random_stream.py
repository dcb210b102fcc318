"""Seeded random source owned by a single population or algorithm."""

from __future__ import annotations

import copy
from typing import Any

import numpy as np

from evocore.exceptions import InvalidArgumentError, SerializationError

__all__ = ["RandomStream", "random_seed"]

_UINT32_MAX = 0xFFFFFFFF
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def random_seed() -> int:
    """Draw a fresh 32-bit seed from OS entropy."""
    return int(np.random.SeedSequence().entropy) & _UINT32_MAX


class RandomStream:
    """Deterministic generator that never touches numpy's global state.

    The stream wraps a ``PCG64`` bit generator seeded from ``seed``. Two
    streams built from the same seed produce the same draws in the same
    order, and a stream restored from :meth:`snapshot` continues exactly
    where the original left off.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random_seed()
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise InvalidArgumentError(f"Seed must be an integer, got {seed!r}")
        if seed < 0:
            raise InvalidArgumentError(f"Seed must be non-negative, got {seed}")
        self._seed = int(seed)
        self._generator = np.random.Generator(np.random.PCG64(self._seed))

    @property
    def seed(self) -> int:
        return self._seed

    def random(self) -> float:
        """Uniform real in ``[0, 1)``."""
        return float(self._generator.random())

    def uniform(self, low: Any, high: Any) -> np.ndarray:
        """Uniform reals in ``[low, high)``, one per entry of the bounds."""
        low = np.asarray(low, dtype=np.float64)
        high = np.asarray(high, dtype=np.float64)
        return low + (high - low) * self._generator.random(low.shape)

    def normal(self, scale: Any) -> np.ndarray:
        """Zero-mean gaussian draws, one per entry of ``scale``."""
        scale = np.asarray(scale, dtype=np.float64)
        return self._generator.standard_normal(scale.shape) * scale

    def integers(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``."""
        return int(self._generator.integers(low, high))

    def random_uint32(self) -> int:
        return int(self._generator.integers(0, _UINT32_MAX, endpoint=True))

    def random_uint64(self) -> int:
        return int(
            self._generator.integers(0, _UINT64_MAX, endpoint=True, dtype=np.uint64)
        )

    def copy(self) -> RandomStream:
        return copy.deepcopy(self)

    def snapshot(self) -> dict[str, Any]:
        """Export generator state as JSON-compatible data.

        PCG64 carries 128-bit integers, which are stored as hex strings so
        that any JSON backend can hold them.
        """
        state = self._generator.bit_generator.state
        return {
            "seed": self._seed,
            "bit_generator": state["bit_generator"],
            "state": hex(state["state"]["state"]),
            "inc": hex(state["state"]["inc"]),
            "has_uint32": int(state["has_uint32"]),
            "uinteger": int(state["uinteger"]),
        }

    @classmethod
    def restore(cls, data: dict[str, Any]) -> RandomStream:
        """Rebuild a stream exported by :meth:`snapshot`."""
        try:
            stream = cls(int(data["seed"]))
            if data["bit_generator"] != "PCG64":
                raise SerializationError(
                    f"Unsupported bit generator {data['bit_generator']!r}"
                )
            stream._generator.bit_generator.state = {
                "bit_generator": "PCG64",
                "state": {
                    "state": int(data["state"], 16),
                    "inc": int(data["inc"], 16),
                },
                "has_uint32": int(data["has_uint32"]),
                "uinteger": int(data["uinteger"]),
            }
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed random stream snapshot: {exc}") from exc
        return stream

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RandomStream):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"RandomStream(seed={self._seed})"
