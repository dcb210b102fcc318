from __future__ import annotations

from typing import TYPE_CHECKING, Any

from evocore.algorithms.base import UserAlgorithm
from evocore.registry import register_algorithm

if TYPE_CHECKING:
    from evocore.population import Population


@register_algorithm("Placeholder algorithm that leaves populations untouched")
class NullAlgorithm(UserAlgorithm):
    def evolve(self, pop: Population) -> Population:
        return pop.copy()

    def get_name(self) -> str:
        return "Null algorithm"

    def get_state(self) -> dict[str, Any]:
        return {}
