from evocore.problems.base import UserProblem
from evocore.problems.inventory import Inventory
from evocore.problems.null_problem import NullProblem
from evocore.problems.problem import Problem
from evocore.problems.rosenbrock import Rosenbrock

__all__ = [
    "Inventory",
    "NullProblem",
    "Problem",
    "Rosenbrock",
    "UserProblem",
]
