from __future__ import annotations

import copy
import operator
from typing import Any

from loguru import logger
import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from evocore.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    OutOfRangeError,
    SerializationError,
)
from evocore.problems.base import UserProblem
from evocore.problems.problem import Problem
from evocore.utils.random_stream import RandomStream

__all__ = ["Individual", "Population"]


class Individual(BaseModel):
    """Read-only view of one candidate solution."""

    id: int = Field(ge=0, description="Unique 64-bit identifier")
    decision_vector: tuple[float, ...] = Field(
        description="Coordinates of the candidate in the search space"
    )
    fitness_vector: tuple[float, ...] = Field(
        description="Cached fitness of decision_vector"
    )

    model_config = ConfigDict(frozen=True)


class Population:
    """
    Fixed-size collection of individuals bound to one problem.

    The population owns a copy of its problem and a private
    :class:`RandomStream`. Construction samples ``size`` decision vectors
    uniformly inside the problem bounds and evaluates them, so the same
    ``(problem, size, seed)`` always produces identical individuals.
    """

    def __init__(
        self,
        problem: Problem | UserProblem | None = None,
        size: int = 0,
        seed: int | None = None,
    ):
        if isinstance(problem, Problem):
            problem = problem.copy()
        else:
            problem = Problem(problem)
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise InvalidArgumentError(
                f"Population size must be a non-negative integer, got {size!r}"
            )

        self._problem = problem
        self._stream = RandomStream(seed)

        nx, nobj = problem.get_nx(), problem.get_nobj()
        xs = np.empty((size, nx))
        fs = np.empty((size, nobj))
        ids: list[int] = []
        for i in range(size):
            xs[i] = self.random_decision_vector()
            ids.append(self._stream.random_uint64())
            fs[i] = problem.fitness(xs[i])

        self._x, self._f, self._ids = xs, fs, ids

        logger.debug(
            "[Population] Init | problem={}, size={}, seed={}",
            problem.get_name(),
            size,
            self._stream.seed,
        )

    # Accessors

    def size(self) -> int:
        return len(self._ids)

    def __len__(self) -> int:
        return self.size()

    def get_problem(self) -> Problem:
        """The population's own problem (not a copy)."""
        return self._problem

    def get_seed(self) -> int:
        return self._stream.seed

    def get_x(self) -> np.ndarray:
        return self._x.copy()

    def get_f(self) -> np.ndarray:
        return self._f.copy()

    def get_ids(self) -> list[int]:
        return list(self._ids)

    def get_individual(self, index: int) -> Individual:
        i = self._check_index(index)
        return Individual(
            id=self._ids[i],
            decision_vector=tuple(self._x[i].tolist()),
            fitness_vector=tuple(self._f[i].tolist()),
        )

    # Updates

    def set_individual(self, index: int, x: Any) -> None:
        """Replace the decision vector at ``index`` and re-evaluate it."""
        i = self._check_index(index)
        x = self._check_in_bounds(x)
        f = self._problem.fitness(x)
        self._x[i], self._f[i] = x, f

    def set_xf(self, index: int, x: Any, f: Any) -> None:
        """Store ``x`` with an already computed fitness ``f`` at ``index``."""
        i = self._check_index(index)
        x = self._check_in_bounds(x)
        f = np.array(f, dtype=np.float64)
        if f.ndim != 1 or f.size != self._problem.get_nobj():
            raise DimensionMismatchError(
                f"Fitness vector has shape {f.shape}, "
                f"expected ({self._problem.get_nobj()},)"
            )
        if not np.isfinite(f).all():
            raise InvalidArgumentError(f"Fitness vector {f.tolist()} is not finite")
        self._x[i], self._f[i] = x, f

    def reseed_problem(self, seed: int) -> None:
        """Switch a stochastic problem to ``seed`` and re-evaluate everyone."""
        self._problem.set_seed(seed)
        fs = np.empty_like(self._f)
        for i in range(self.size()):
            fs[i] = self._problem.fitness(self._x[i])
        self._f = fs

    # Selection

    def best_index(self) -> int:
        """Index of the lowest fitness, ties broken by lowest index."""
        return int(np.argmin(self._single_objective_column()))

    def worst_index(self) -> int:
        """Index of the highest fitness, ties broken by lowest index."""
        return int(np.argmax(self._single_objective_column()))

    def champion_x(self) -> np.ndarray:
        return self._x[self.best_index()].copy()

    def champion_fitness(self) -> np.ndarray:
        return self._f[self.best_index()].copy()

    def _single_objective_column(self) -> np.ndarray:
        if self._problem.get_nobj() != 1:
            raise InvalidArgumentError(
                "Best/worst individuals are only defined for single-objective problems, "
                f"{self._problem.get_name()} has {self._problem.get_nobj()} objectives"
            )
        if self.size() == 0:
            raise InvalidArgumentError("Cannot select from an empty population")
        return self._f[:, 0]

    # Sampling and mutation primitives

    def random_decision_vector(self) -> np.ndarray:
        """Uniform sample inside the problem bounds from the population stream."""
        lb, ub = self._finite_bounds()
        return np.clip(self._stream.uniform(lb, ub), lb, ub)

    def mutate_uniform(
        self, x: Any, rate: float, rng: RandomStream | None = None
    ) -> tuple[np.ndarray, int]:
        """
        Resample coordinates of ``x`` uniformly within bounds.

        Each coordinate is redrawn with probability ``rate``; when none is
        picked, one random coordinate is redrawn instead.

        Args:
            x: Decision vector to perturb (left untouched)
            rate: Per-coordinate mutation probability in ``[0, 1]``
            rng: Stream to draw from (the population stream if None)

        Returns:
            The mutated copy and the number of coordinates changed
        """
        if not 0.0 <= rate <= 1.0:
            raise InvalidArgumentError(f"Mutation rate must be in [0, 1], got {rate}")
        stream = rng or self._stream
        x = self._problem.check_decision_vector(x)
        lb, ub = self._finite_bounds()
        nx = x.size

        mask = stream.uniform(np.zeros(nx), np.ones(nx)) < rate
        if not mask.any():
            mask[stream.integers(0, nx)] = True
        x[mask] = stream.uniform(lb[mask], ub[mask])
        return np.clip(x, lb, ub), int(mask.sum())

    def mutate_gaussian(
        self, x: Any, sigma: float, rng: RandomStream | None = None
    ) -> np.ndarray:
        """
        Gaussian perturbation of every coordinate of ``x``.

        The standard deviation is ``sigma`` times the bound width. Values
        leaving the box are reflected back and clamped if still outside.
        """
        if not sigma > 0.0:
            raise InvalidArgumentError(f"Mutation sigma must be positive, got {sigma}")
        stream = rng or self._stream
        x = self._problem.check_decision_vector(x)
        lb, ub = self._finite_bounds()

        x = x + stream.normal(sigma * (ub - lb))
        x = np.where(x < lb, 2.0 * lb - x, x)
        x = np.where(x > ub, 2.0 * ub - x, x)
        return np.clip(x, lb, ub)

    # Validation helpers

    def _check_index(self, index: int) -> int:
        try:
            i = operator.index(index)
        except TypeError as exc:
            raise InvalidArgumentError(f"Index must be an integer, got {index!r}") from exc
        if not 0 <= i < self.size():
            raise OutOfRangeError(
                f"Index {i} is out of range for a population of size {self.size()}"
            )
        return i

    def _check_in_bounds(self, x: Any) -> np.ndarray:
        x = self._problem.check_decision_vector(x)
        if not self._problem.feasibility_x(x):
            raise InvalidArgumentError(
                f"Decision vector {x.tolist()} lies outside the problem bounds"
            )
        return x

    def _finite_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        lb, ub = self._problem.get_bounds()
        if not (np.isfinite(lb).all() and np.isfinite(ub).all()):
            raise InvalidArgumentError(
                "Cannot sample decision vectors within infinite bounds"
            )
        if not np.isfinite(ub - lb).all():
            raise InvalidArgumentError("Bounds range is too large to sample from")
        return lb, ub

    # Value semantics

    def copy(self) -> Population:
        return copy.deepcopy(self)

    def snapshot(self) -> dict[str, Any]:
        return {
            "problem": self._problem.snapshot(),
            "x": self._x.tolist(),
            "f": self._f.tolist(),
            "ids": list(self._ids),
            "stream": self._stream.snapshot(),
        }

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Population:
        try:
            problem = Problem.restore(data["problem"])
            nx, nobj = problem.get_nx(), problem.get_nobj()
            ids = [int(i) for i in data["ids"]]
            xs = np.array(data["x"], dtype=np.float64).reshape(len(ids), nx)
            fs = np.array(data["f"], dtype=np.float64).reshape(len(ids), nobj)
            stream = RandomStream.restore(data["stream"])
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed population snapshot: {exc}") from exc

        pop = cls.__new__(cls)
        pop._problem = problem
        pop._stream = stream
        pop._x, pop._f, pop._ids = xs, fs, ids
        return pop

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __str__(self) -> str:
        lines = [str(self._problem), "", f"Population size: {self.size()}", ""]
        lines.append("List of individuals: ")
        for i in range(self.size()):
            lines += [
                f"#{i}:",
                f"\tID:\t\t\t{self._ids[i]}",
                f"\tDecision vector:\t{self._x[i].tolist()}",
                f"\tFitness vector:\t\t{self._f[i].tolist()}",
            ]
        if self.size() and self._problem.get_nobj() == 1:
            lines += [
                "",
                f"Champion decision vector: {self.champion_x().tolist()}",
                f"Champion fitness: {self.champion_fitness().tolist()}",
            ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Population({self._problem.get_name()!r}, size={self.size()})"
