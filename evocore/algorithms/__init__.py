from evocore.algorithms.algorithm import Algorithm
from evocore.algorithms.base import UserAlgorithm
from evocore.algorithms.null_algorithm import NullAlgorithm
from evocore.algorithms.sea import SEA, SEALogEntry

__all__ = [
    "Algorithm",
    "NullAlgorithm",
    "SEA",
    "SEALogEntry",
    "UserAlgorithm",
]
