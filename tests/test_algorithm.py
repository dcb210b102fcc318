"""Tests for the Algorithm wrapper."""

from __future__ import annotations

import numpy as np
import pytest

from evocore import (
    SEA,
    Algorithm,
    InvalidArgumentError,
    NullAlgorithm,
    Population,
    UserAlgorithm,
)


class _InPlaceAlgorithm(UserAlgorithm):
    """Misbehaving strategy that edits the population it is given."""

    def evolve(self, pop):
        pop.set_individual(0, np.ones(pop.get_problem().get_nx()))
        return pop


class _BrokenAlgorithm(UserAlgorithm):
    def evolve(self, pop):
        return None


def test_default_is_null_algorithm(population: Population) -> None:
    algo = Algorithm()

    assert algo.is_(NullAlgorithm)
    assert algo.get_name() == "Null algorithm"
    assert algo.evolve(population) == population
    assert not algo.has_set_seed()
    assert not algo.has_set_verbosity()
    assert algo.get_seed() is None
    with pytest.raises(InvalidArgumentError):
        algo.set_seed(1)
    with pytest.raises(InvalidArgumentError):
        algo.set_verbosity(1)


def test_wraps_sea(population: Population) -> None:
    algo = Algorithm(SEA(10, 23))
    algo.set_verbosity(1)
    algo.set_seed(23)

    assert algo.get_verbosity() == 1
    assert algo.get_seed() == 23
    assert "Verbosity: 1" in algo.get_extra_info()
    assert algo.extract(NullAlgorithm) is None

    evolved = algo.evolve(population)
    assert len(algo.extract(SEA).get_log()) == 10
    assert evolved.champion_fitness()[0] <= population.champion_fitness()[0]


def test_matches_direct_sea_run(population: Population) -> None:
    wrapped = Algorithm(SEA(10, 23, verbosity=1))
    direct = SEA(10, 23, verbosity=1)

    assert wrapped.evolve(population) == direct.evolve(population)
    assert wrapped.extract(SEA).get_log() == direct.get_log()


def test_wrapper_owns_a_copy() -> None:
    sea = SEA(10, 23)
    algo = Algorithm(sea)
    sea.set_verbosity(4)

    assert algo.get_verbosity() == 0


def test_evolve_protects_caller_population(population: Population) -> None:
    before = population.snapshot()
    result = Algorithm(_InPlaceAlgorithm()).evolve(population)

    assert population.snapshot() == before
    assert result.get_individual(0).fitness_vector == (0.0,)


def test_evolve_validation(population: Population) -> None:
    with pytest.raises(InvalidArgumentError):
        Algorithm(SEA(1, 1)).evolve("population")
    with pytest.raises(InvalidArgumentError):
        Algorithm(_BrokenAlgorithm()).evolve(population)
    with pytest.raises(InvalidArgumentError):
        Algorithm(Algorithm())
    with pytest.raises(InvalidArgumentError):
        Algorithm(object())


def test_str_contains_description() -> None:
    text = str(Algorithm(SEA(10, 23, verbosity=2)))

    assert "Algorithm name: SEA: (N+1)-EA Simple Evolutionary Algorithm" in text
    assert "Seed: 23" in text
    assert "Verbosity: 2" in text
