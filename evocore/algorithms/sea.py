from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from evocore.algorithms.base import UserAlgorithm
from evocore.exceptions import InvalidArgumentError
from evocore.population import Population
from evocore.registry import register_algorithm
from evocore.utils.random_stream import RandomStream

__all__ = ["SEA", "SEALogEntry"]

# Column header is repeated every this many log lines
HEADER_INTERVAL = 50


class SEALogEntry(BaseModel):
    """One line of the SEA log."""

    generation: int = Field(ge=1, description="Generation number (1-based)")
    fitness_evals: int = Field(
        ge=0, description="Fitness evaluations spent so far in this evolve call"
    )
    best_fitness: float = Field(description="Champion fitness after the generation")
    improvement: float = Field(
        description="Previous logged best minus current best (initial best for the first line)"
    )
    mutations: float = Field(
        ge=0, description="Mean number of coordinates changed per offspring"
    )

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int, float, float, float]:
        return (
            self.generation,
            self.fitness_evals,
            self.best_fitness,
            self.improvement,
            self.mutations,
        )


@register_algorithm("Simple evolutionary algorithm with per-slot greedy replacement")
class SEA(UserAlgorithm):
    """
    Simple Evolutionary Algorithm.

    Every generation, each individual produces one offspring by resampling
    its coordinates uniformly within bounds, each with probability ``1/nx``
    (at least one coordinate always changes). The offspring replaces its
    parent only if its fitness is strictly lower, so the fitness stored in
    every slot never gets worse on a deterministic problem.

    For stochastic problems a new problem seed is drawn from the algorithm
    stream at the start of each generation and the population is
    re-evaluated under it before breeding.

    All randomness comes from the algorithm's own :class:`RandomStream`, so
    two instances with the same ``(gen, seed, verbosity)`` applied to equal
    populations produce identical logs.
    """

    def __init__(self, gen: int = 1, seed: int | None = None, verbosity: int = 0):
        if isinstance(gen, bool) or not isinstance(gen, int) or gen < 1:
            raise InvalidArgumentError(
                f"Number of generations must be a positive integer, got {gen!r}"
            )
        self._gen = gen
        self._stream = RandomStream(seed)
        self._verbosity = 0
        self._log: list[SEALogEntry] = []
        self.set_verbosity(verbosity)

    def evolve(self, pop: Population) -> Population:
        pop = pop.copy()
        prob = pop.get_problem()
        if prob.get_nobj() != 1:
            raise InvalidArgumentError(
                f"{self.get_name()} cannot handle multi-objective problems, "
                f"{prob.get_name()} has {prob.get_nobj()} objectives"
            )

        self._log = []
        if pop.size() == 0:
            logger.warning("[SEA] Empty population, nothing to evolve")
            return pop

        size = pop.size()
        rate = 1.0 / prob.get_nx()
        fevals0 = prob.get_fevals()
        previous_best = float(pop.champion_fitness()[0])
        lines = 0

        logger.debug(
            "[SEA] Start | gen={}, size={}, nx={}, seed={}",
            self._gen,
            size,
            prob.get_nx(),
            self._stream.seed,
        )

        for gen in range(1, self._gen + 1):
            if prob.is_stochastic():
                pop.reseed_problem(self._stream.random_uint32())

            parents_x = pop.get_x()
            parents_f = pop.get_f()
            mutated = 0
            for i in range(size):
                child, changed = pop.mutate_uniform(parents_x[i], rate, rng=self._stream)
                mutated += changed
                child_f = prob.fitness(child)
                if child_f[0] < parents_f[i][0]:
                    pop.set_xf(i, child, child_f)

            if self._verbosity > 0 and gen % self._verbosity == 0:
                best = float(pop.champion_fitness()[0])
                entry = SEALogEntry(
                    generation=gen,
                    fitness_evals=prob.get_fevals() - fevals0,
                    best_fitness=best,
                    improvement=previous_best - best,
                    mutations=mutated / size,
                )
                previous_best = best
                self._log.append(entry)
                if lines % HEADER_INTERVAL == 0:
                    logger.info(
                        "[SEA] {:>7} {:>15} {:>15} {:>15} {:>15}",
                        "Gen:",
                        "Fevals:",
                        "Best:",
                        "Improvement:",
                        "Mutations:",
                    )
                logger.info(
                    "[SEA] {:>7} {:>15} {:>15.6g} {:>15.6g} {:>15.4g}",
                    *entry.as_tuple(),
                )
                lines += 1

        logger.debug(
            "[SEA] Done | fevals={}, champion={}",
            prob.get_fevals() - fevals0,
            float(pop.champion_fitness()[0]),
        )
        return pop

    def get_gen(self) -> int:
        return self._gen

    def set_seed(self, seed: int) -> None:
        self._stream = RandomStream(seed)

    def get_seed(self) -> int:
        return self._stream.seed

    def set_verbosity(self, level: int) -> None:
        if isinstance(level, bool) or not isinstance(level, int) or level < 0:
            raise InvalidArgumentError(
                f"Verbosity must be a non-negative integer, got {level!r}"
            )
        self._verbosity = level

    def get_verbosity(self) -> int:
        return self._verbosity

    def get_log(self) -> tuple[SEALogEntry, ...]:
        return tuple(self._log)

    def get_name(self) -> str:
        return "SEA: (N+1)-EA Simple Evolutionary Algorithm"

    def get_extra_info(self) -> str:
        return (
            f"\tGenerations: {self._gen}\n"
            f"\tVerbosity: {self._verbosity}\n"
            f"\tSeed: {self._stream.seed}"
        )

    def get_state(self) -> dict[str, Any]:
        return {
            "gen": self._gen,
            "verbosity": self._verbosity,
            "stream": self._stream.snapshot(),
            "log": [entry.model_dump() for entry in self._log],
        }

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> SEA:
        stream = RandomStream.restore(state["stream"])
        sea = cls(gen=state["gen"], seed=stream.seed, verbosity=state["verbosity"])
        sea._stream = stream
        sea._log = [SEALogEntry.model_validate(line) for line in state["log"]]
        return sea
