"""EvoCore – seeded, reproducible black-box optimization core."""

from evocore.algorithms import SEA, Algorithm, NullAlgorithm, SEALogEntry, UserAlgorithm
from evocore.exceptions import (
    DimensionMismatchError,
    EvoCoreError,
    InvalidArgumentError,
    OutOfRangeError,
    SerializationError,
)
from evocore.population import Individual, Population
from evocore.problems import Inventory, NullProblem, Problem, Rosenbrock, UserProblem
from evocore.utils.random_stream import RandomStream

__all__ = [
    "SEA",
    "Algorithm",
    "DimensionMismatchError",
    "EvoCoreError",
    "Individual",
    "InvalidArgumentError",
    "Inventory",
    "NullAlgorithm",
    "NullProblem",
    "OutOfRangeError",
    "Population",
    "Problem",
    "RandomStream",
    "Rosenbrock",
    "SEALogEntry",
    "SerializationError",
    "UserAlgorithm",
    "UserProblem",
]
