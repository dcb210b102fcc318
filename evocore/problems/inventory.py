from typing import Any

import numpy as np

from evocore.exceptions import InvalidArgumentError
from evocore.problems.base import UserProblem
from evocore.registry import register_problem
from evocore.utils.random_stream import RandomStream

# Purchase cost, backorder penalty and holding cost per unit
PURCHASE_COST = 1.0
BACKORDER_COST = 1.5
HOLDING_COST = 0.1
MAX_DEMAND = 100.0
MAX_ORDER = 200.0


@register_problem("Stochastic multi-period inventory problem")
class Inventory(UserProblem):
    """
    Stochastic inventory problem.

    The decision vector holds the amount purchased at the start of each week.
    Weekly demand is uniform in ``[0, 100]``; unmet demand is backordered at a
    penalty and leftover stock pays a holding cost. Fitness is the cost
    averaged over ``sample_size`` demand scenarios drawn from a generator
    re-seeded with ``seed`` at every evaluation, so the same ``(x, seed)``
    always yields the same cost while :meth:`set_seed` switches scenarios.
    """

    def __init__(self, weeks: int = 4, sample_size: int = 10, seed: int | None = None):
        if weeks < 1:
            raise InvalidArgumentError(
                f"The inventory problem needs at least one week, {weeks} requested"
            )
        if sample_size < 1:
            raise InvalidArgumentError(
                f"The sample size must be at least 1, {sample_size} requested"
            )
        self.weeks = int(weeks)
        self.sample_size = int(sample_size)
        self.seed = RandomStream(seed).seed

    def fitness(self, x: np.ndarray) -> list[float]:
        stream = RandomStream(self.seed)
        demand = stream.uniform(
            np.zeros((self.sample_size, self.weeks)),
            np.full((self.sample_size, self.weeks), MAX_DEMAND),
        )
        cost = np.zeros(self.sample_size)
        stock = np.zeros(self.sample_size)
        for week in range(self.weeks):
            level = stock + x[week] - demand[:, week]
            cost += (
                PURCHASE_COST * x[week]
                + BACKORDER_COST * np.maximum(-level, 0.0)
                + HOLDING_COST * np.maximum(level, 0.0)
            )
            stock = np.maximum(level, 0.0)
        return [float(np.sum(cost) / self.sample_size)]

    def get_bounds(self) -> tuple[list[float], list[float]]:
        return [0.0] * self.weeks, [MAX_ORDER] * self.weeks

    def set_seed(self, seed: int) -> None:
        self.seed = RandomStream(seed).seed

    def get_seed(self) -> int:
        return self.seed

    def get_name(self) -> str:
        return "Inventory problem"

    def get_extra_info(self) -> str:
        return (
            f"\tWeeks: {self.weeks}\n"
            f"\tSample size: {self.sample_size}\n"
            f"\tSeed: {self.seed}"
        )

    def get_state(self) -> dict[str, Any]:
        return {"weeks": self.weeks, "sample_size": self.sample_size, "seed": self.seed}
