from typing import Any

import numpy as np

from evocore.exceptions import InvalidArgumentError
from evocore.problems.base import UserProblem
from evocore.registry import register_problem


@register_problem("Generalised n-dimensional Rosenbrock function")
class Rosenbrock(UserProblem):
    """
    The Rosenbrock problem.

    Box-constrained continuous single-objective problem. The objective is the
    generalised n-dimensional Rosenbrock function::

        F(x_1, ..., x_n) = sum_{i=1}^{n-1} [100 (x_i^2 - x_{i+1})^2 + (x_i - 1)^2]

    with x_i in [-5, 10]. The global minimum is at x_i = 1, where F = 0.
    """

    LOWER = -5.0
    UPPER = 10.0

    def __init__(self, dim: int = 2):
        if dim < 2:
            raise InvalidArgumentError(
                f"Rosenbrock Function must have minimum 2 dimensions, {dim} requested"
            )
        self.dim = int(dim)

    def fitness(self, x: np.ndarray) -> list[float]:
        x = np.asarray(x, dtype=np.float64)
        head, tail = x[:-1], x[1:]
        terms = 100.0 * (head * head - tail) ** 2 + (head - 1.0) ** 2
        return [float(np.sum(terms))]

    def get_bounds(self) -> tuple[list[float], list[float]]:
        return [self.LOWER] * self.dim, [self.UPPER] * self.dim

    def get_name(self) -> str:
        return "Multidimensional Rosenbrock Function"

    def get_extra_info(self) -> str:
        return f"\tDimension: {self.dim}"

    def best_known(self) -> np.ndarray:
        return np.ones(self.dim)

    def get_state(self) -> dict[str, Any]:
        return {"dim": self.dim}
