from typing import Any

from evocore.exceptions import InvalidArgumentError
from evocore.problems.base import UserProblem
from evocore.registry import register_problem


@register_problem("Placeholder problem with constant zero fitness")
class NullProblem(UserProblem):
    """One-dimensional problem in ``[0, 1]`` whose fitness is always zero."""

    def __init__(self, nobj: int = 1):
        if nobj < 1:
            raise InvalidArgumentError(
                f"The null problem must have at least one objective, {nobj} requested"
            )
        self.nobj = int(nobj)

    def fitness(self, x):
        return [0.0] * self.nobj

    def get_bounds(self):
        return [0.0], [1.0]

    def get_nobj(self) -> int:
        return self.nobj

    def get_name(self) -> str:
        return "Null problem"

    def get_state(self) -> dict[str, Any]:
        return {"nobj": self.nobj}
