from __future__ import annotations

import copy
from typing import Any, TypeVar

from loguru import logger
import numpy as np

from evocore.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    SerializationError,
)
from evocore.problems.base import UserProblem
from evocore.problems.null_problem import NullProblem
from evocore.registry import PROBLEM_KIND, TypeRegistry

__all__ = ["Problem"]

P = TypeVar("P", bound=UserProblem)


class Problem:
    """
    Type-erased wrapper around a concrete :class:`UserProblem`.

    The wrapper owns a private copy of the concrete problem, validates its
    bounds once at construction, checks every decision vector passed to
    :meth:`fitness` and counts fitness evaluations.
    """

    def __init__(self, udp: UserProblem | None = None):
        if udp is None:
            udp = NullProblem()
        if isinstance(udp, Problem):
            raise InvalidArgumentError(
                "A Problem cannot wrap another Problem; use Problem.copy()"
            )
        if not isinstance(udp, UserProblem):
            raise InvalidArgumentError(
                f"Expected a UserProblem instance, got {type(udp).__name__}"
            )

        self._udp = copy.deepcopy(udp)
        self._lb, self._ub = self._read_bounds(self._udp)
        self._nobj = self._read_nobj(self._udp)
        self._fevals = 0

        logger.debug(
            "[Problem] Init | type={}, nx={}, nobj={}",
            type(self._udp).__name__,
            self.get_nx(),
            self._nobj,
        )

    @staticmethod
    def _read_bounds(udp: UserProblem) -> tuple[np.ndarray, np.ndarray]:
        lb, ub = udp.get_bounds()
        lb = np.array(lb, dtype=np.float64)
        ub = np.array(ub, dtype=np.float64)
        if lb.ndim != 1 or ub.ndim != 1:
            raise InvalidArgumentError("Bounds must be one-dimensional sequences")
        if lb.shape != ub.shape:
            raise InvalidArgumentError(
                f"Lower and upper bounds have different lengths: {lb.size} != {ub.size}"
            )
        if lb.size == 0:
            raise InvalidArgumentError("Problem dimension must be at least 1")
        if np.isnan(lb).any() or np.isnan(ub).any():
            raise InvalidArgumentError("Bounds must not contain NaN values")
        bad = np.flatnonzero(lb > ub)
        if bad.size:
            i = int(bad[0])
            raise InvalidArgumentError(
                f"Lower bound {lb[i]} exceeds upper bound {ub[i]} at index {i}"
            )
        lb.flags.writeable = False
        ub.flags.writeable = False
        return lb, ub

    @staticmethod
    def _read_nobj(udp: UserProblem) -> int:
        nobj = udp.get_nobj()
        if isinstance(nobj, bool) or not isinstance(nobj, (int, np.integer)) or nobj < 1:
            raise InvalidArgumentError(
                f"Number of objectives must be a positive integer, got {nobj!r}"
            )
        return int(nobj)

    def fitness(self, x: Any) -> np.ndarray:
        """Evaluate ``x`` and return its fitness vector."""
        x = self.check_decision_vector(x)
        f = np.array(self._udp.fitness(x.copy()), dtype=np.float64)
        if f.ndim != 1 or f.size != self._nobj:
            raise InvalidArgumentError(
                f"{self.get_name()} returned a fitness of shape {f.shape}, "
                f"expected ({self._nobj},)"
            )
        if not np.isfinite(f).all():
            raise InvalidArgumentError(
                f"{self.get_name()} returned a non-finite fitness {f.tolist()} for {x.tolist()}"
            )
        self._fevals += 1
        return f

    def check_decision_vector(self, x: Any) -> np.ndarray:
        """Convert ``x`` to a float vector, enforcing the problem dimension."""
        x = np.array(x, dtype=np.float64)
        if x.ndim != 1 or x.size != self.get_nx():
            raise DimensionMismatchError(
                f"Decision vector has shape {x.shape}, expected ({self.get_nx()},)"
            )
        return x

    def feasibility_x(self, x: Any) -> bool:
        """True if ``x`` lies inside the box bounds."""
        x = self.check_decision_vector(x)
        return bool(np.all((x >= self._lb) & (x <= self._ub)))

    def get_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        return self._lb.copy(), self._ub.copy()

    def get_lb(self) -> np.ndarray:
        return self._lb.copy()

    def get_ub(self) -> np.ndarray:
        return self._ub.copy()

    def get_nx(self) -> int:
        return int(self._lb.size)

    def get_nobj(self) -> int:
        return self._nobj

    def get_fevals(self) -> int:
        return self._fevals

    def get_name(self) -> str:
        return self._udp.get_name()

    def get_extra_info(self) -> str:
        return self._udp.get_extra_info()

    # Optional capabilities of the wrapped problem

    def has_best_known(self) -> bool:
        return callable(getattr(self._udp, "best_known", None))

    def best_known(self) -> np.ndarray:
        if not self.has_best_known():
            raise InvalidArgumentError(
                f"{self.get_name()} does not provide a best known solution"
            )
        return self.check_decision_vector(self._udp.best_known())

    def is_stochastic(self) -> bool:
        return callable(getattr(self._udp, "set_seed", None)) and callable(
            getattr(self._udp, "get_seed", None)
        )

    def set_seed(self, seed: int) -> None:
        if not self.is_stochastic():
            raise InvalidArgumentError(
                f"{self.get_name()} is not stochastic and has no seed"
            )
        self._udp.set_seed(seed)

    def get_seed(self) -> int:
        if not self.is_stochastic():
            raise InvalidArgumentError(
                f"{self.get_name()} is not stochastic and has no seed"
            )
        return self._udp.get_seed()

    def is_(self, cls: type) -> bool:
        return type(self._udp) is cls

    def extract(self, cls: type[P]) -> P | None:
        """The wrapped concrete problem if it is exactly of type ``cls``."""
        return self._udp if self.is_(cls) else None

    def copy(self) -> Problem:
        return copy.deepcopy(self)

    def snapshot(self) -> dict[str, Any]:
        return {
            "type": TypeRegistry.tag_of(PROBLEM_KIND, self._udp),
            "state": self._udp.get_state(),
            "fevals": self._fevals,
        }

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Problem:
        try:
            udp_cls = TypeRegistry.resolve(PROBLEM_KIND, data["type"])
            problem = cls(udp_cls.from_state(data["state"]))
            problem._fevals = int(data["fevals"])
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed problem snapshot: {exc}") from exc
        return problem

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Problem):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __str__(self) -> str:
        lines = [
            f"Problem name: {self.get_name()}",
            f"\tGlobal dimension:\t\t{self.get_nx()}",
            f"\tFitness dimension:\t\t{self._nobj}",
            f"\tLower bounds: {self._lb.tolist()}",
            f"\tUpper bounds: {self._ub.tolist()}",
            f"\tFitness evaluations: {self._fevals}",
            f"\tStochastic: {self.is_stochastic()}",
        ]
        if self.is_stochastic():
            lines.append(f"\tSeed: {self.get_seed()}")
        extra = self.get_extra_info()
        if extra:
            lines += ["", "Extra info:", extra]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Problem({type(self._udp).__name__}, nx={self.get_nx()})"
