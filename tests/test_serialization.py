"""Snapshot/restore round trips for problems, populations and algorithms."""

from __future__ import annotations

import pytest

from evocore import (
    SEA,
    Algorithm,
    Inventory,
    NullAlgorithm,
    Population,
    Problem,
    RandomStream,
    Rosenbrock,
    SerializationError,
    UserProblem,
)
from evocore.registry import register_problem
from evocore.serialization import from_json, restore, snapshot, to_json


class _Unregistered(UserProblem):
    def fitness(self, x):
        return [0.0]

    def get_bounds(self):
        return [0.0], [1.0]

    def get_state(self):
        return {}


@pytest.mark.parametrize(
    "make",
    [
        lambda: Problem(Rosenbrock(25)),
        lambda: Problem(Inventory(5, 3, 99)),
        lambda: Population(Problem(Rosenbrock(4)), 3, 2),
        lambda: Population(Problem(Inventory(3, 2, 8)), 4, 1),
        lambda: Algorithm(SEA(10, 23, verbosity=1)),
        lambda: Algorithm(),
    ],
)
def test_snapshot_round_trip(make) -> None:
    entity = make()
    data = snapshot(entity)

    assert snapshot(restore(data)) == data
    assert snapshot(from_json(to_json(entity))) == data
    assert from_json(to_json(entity, pretty=True)) == entity


def test_problem_restore_keeps_evaluation_count() -> None:
    prob = Problem(Rosenbrock(3))
    prob.fitness([0.0, 0.0, 0.0])

    restored = from_json(to_json(prob))
    assert restored.get_fevals() == 1
    assert restored.extract(Rosenbrock).dim == 3


def test_algorithm_log_survives_round_trip_exactly(population: Population) -> None:
    algo = Algorithm(SEA(10, 23))
    algo.set_verbosity(1)
    algo.evolve(population)
    before_text = str(algo)
    before_log = algo.extract(SEA).get_log()

    text = to_json(algo)
    algo = Algorithm(NullAlgorithm())
    algo = from_json(text)

    assert str(algo) == before_text
    after_log = algo.extract(SEA).get_log()
    assert after_log == before_log
    for before, after in zip(before_log, after_log):
        assert before.as_tuple() == after.as_tuple()


def test_restored_entities_continue_identically(population: Population) -> None:
    algo = Algorithm(SEA(5, 7, verbosity=1))
    pop = algo.evolve(population)

    algo_copy = from_json(to_json(algo))
    pop_copy = from_json(to_json(pop))

    assert algo.evolve(pop) == algo_copy.evolve(pop_copy)
    assert algo.extract(SEA).get_log() == algo_copy.extract(SEA).get_log()
    assert pop.random_decision_vector().tolist() == pop_copy.random_decision_vector().tolist()


def test_unregistered_problem_cannot_be_saved() -> None:
    with pytest.raises(SerializationError):
        snapshot(Problem(_Unregistered()))


@pytest.mark.parametrize(
    "envelope",
    [
        {},
        {"kind": "island", "data": {}},
        {"kind": "problem", "data": {"type": "NoSuchProblem", "state": {}, "fevals": 0}},
        {"kind": "problem", "data": {"type": "Rosenbrock"}},
        {"kind": "population", "data": {"ids": [1]}},
        {"kind": "algorithm", "data": {"type": "SEA"}},
        {
            "kind": "algorithm",
            "data": {
                "type": "SEA",
                "state": {
                    "gen": 2,
                    "verbosity": 1,
                    "stream": RandomStream(1).snapshot(),
                    "log": [{"generation": 0}],
                },
            },
        },
        {"kind": "problem", "data": {"type": "Rosenbrock", "state": {"dim": 1}, "fevals": 0}},
    ],
)
def test_malformed_snapshots_rejected(envelope) -> None:
    with pytest.raises(SerializationError):
        restore(envelope)


def test_invalid_json_rejected() -> None:
    with pytest.raises(SerializationError):
        from_json("{not json")
    with pytest.raises(SerializationError):
        snapshot(Rosenbrock(2))


@register_problem("Steep valley with very large finite values", tag="serialization-test-steep")
class _Steep(UserProblem):
    def fitness(self, x):
        return [1e308 if x[0] > 0.5 else float(x[0])]

    def get_bounds(self):
        return [0.0, 0.0], [1.0, 1.0]

    def get_state(self):
        return {}


def test_extreme_finite_fitness_round_trips() -> None:
    pop = Population(Problem(_Steep()), 6, 3)
    restored = from_json(to_json(pop))

    assert restored == pop
    assert restored.get_f().tolist() == pop.get_f().tolist()
