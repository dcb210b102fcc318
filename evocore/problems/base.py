from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np


class UserProblem(ABC):
    """
    Abstract base class for concrete optimization problems.

    A concrete problem defines the objective and the box bounds of the search
    space. Optional capabilities are discovered on the instance:

    - ``best_known()``: decision vector of the known optimum
    - ``set_seed(seed)`` / ``get_seed()``: the problem is stochastic and draws
      from an internally owned random source
    """

    @abstractmethod
    def fitness(self, x: np.ndarray) -> Sequence[float]:
        """
        Evaluate a decision vector.

        Args:
            x: Decision vector, already checked against the problem dimension

        Returns:
            Fitness vector with ``get_nobj()`` entries
        """
        ...

    @abstractmethod
    def get_bounds(self) -> tuple[Sequence[float], Sequence[float]]:
        """
        Box bounds of the search space.

        Returns:
            ``(lower, upper)`` sequences, one entry per decision variable
        """
        ...

    def get_nobj(self) -> int:
        return 1

    def get_name(self) -> str:
        return type(self).__name__

    def get_extra_info(self) -> str:
        return ""

    def get_state(self) -> dict[str, Any]:
        """
        Internal fields needed to rebuild this problem with ``from_state``.

        Override this method to make the problem serializable.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not support snapshots"
        )

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> "UserProblem":
        return cls(**state)
