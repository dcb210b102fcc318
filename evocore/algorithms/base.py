from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from evocore.population import Population


class UserAlgorithm(ABC):
    """
    Abstract base class for concrete search strategies.

    Optional capabilities are discovered on the instance:

    - ``set_seed(seed)`` / ``get_seed()``: the strategy owns a seeded stream
    - ``set_verbosity(level)`` / ``get_verbosity()``: the strategy keeps a log
    """

    @abstractmethod
    def evolve(self, pop: Population) -> Population:
        """
        Evolve a population.

        Args:
            pop: Population to start from; implementations must not mutate it

        Returns:
            The evolved population
        """
        ...

    def get_name(self) -> str:
        return type(self).__name__

    def get_extra_info(self) -> str:
        return ""

    def get_state(self) -> dict[str, Any]:
        """
        Internal fields needed to rebuild this strategy with ``from_state``.

        Override this method to make the strategy serializable.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not support snapshots"
        )

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> UserAlgorithm:
        return cls(**state)
