from __future__ import annotations

import copy
from typing import Any, TypeVar

from loguru import logger

from evocore.algorithms.base import UserAlgorithm
from evocore.algorithms.null_algorithm import NullAlgorithm
from evocore.exceptions import InvalidArgumentError, SerializationError
from evocore.population import Population
from evocore.registry import ALGORITHM_KIND, TypeRegistry

__all__ = ["Algorithm"]

A = TypeVar("A", bound=UserAlgorithm)


class Algorithm:
    """
    Type-erased wrapper around a concrete :class:`UserAlgorithm`.

    :meth:`evolve` hands the concrete strategy a private copy of the
    population, so the caller's population is never modified.
    """

    def __init__(self, uda: UserAlgorithm | None = None):
        if uda is None:
            uda = NullAlgorithm()
        if isinstance(uda, Algorithm):
            raise InvalidArgumentError(
                "An Algorithm cannot wrap another Algorithm; use Algorithm.copy()"
            )
        if not isinstance(uda, UserAlgorithm):
            raise InvalidArgumentError(
                f"Expected a UserAlgorithm instance, got {type(uda).__name__}"
            )
        self._uda = copy.deepcopy(uda)

    def evolve(self, pop: Population) -> Population:
        if not isinstance(pop, Population):
            raise InvalidArgumentError(
                f"evolve() expects a Population, got {type(pop).__name__}"
            )
        logger.debug(
            "[Algorithm] Evolve | algorithm={}, problem={}, size={}",
            self.get_name(),
            pop.get_problem().get_name(),
            pop.size(),
        )
        result = self._uda.evolve(pop.copy())
        if not isinstance(result, Population):
            raise InvalidArgumentError(
                f"{self.get_name()} returned {type(result).__name__} instead of a Population"
            )
        return result

    def get_name(self) -> str:
        return self._uda.get_name()

    def get_extra_info(self) -> str:
        return self._uda.get_extra_info()

    # Optional capabilities of the wrapped strategy

    def has_set_seed(self) -> bool:
        return callable(getattr(self._uda, "set_seed", None))

    def set_seed(self, seed: int) -> None:
        if not self.has_set_seed():
            raise InvalidArgumentError(f"{self.get_name()} does not support set_seed()")
        self._uda.set_seed(seed)

    def get_seed(self) -> int | None:
        getter = getattr(self._uda, "get_seed", None)
        return getter() if callable(getter) else None

    def has_set_verbosity(self) -> bool:
        return callable(getattr(self._uda, "set_verbosity", None))

    def set_verbosity(self, level: int) -> None:
        if not self.has_set_verbosity():
            raise InvalidArgumentError(
                f"{self.get_name()} does not support set_verbosity()"
            )
        self._uda.set_verbosity(level)

    def get_verbosity(self) -> int | None:
        getter = getattr(self._uda, "get_verbosity", None)
        return getter() if callable(getter) else None

    def is_(self, cls: type) -> bool:
        return type(self._uda) is cls

    def extract(self, cls: type[A]) -> A | None:
        """The wrapped concrete strategy if it is exactly of type ``cls``."""
        return self._uda if self.is_(cls) else None

    def copy(self) -> Algorithm:
        return copy.deepcopy(self)

    def snapshot(self) -> dict[str, Any]:
        return {
            "type": TypeRegistry.tag_of(ALGORITHM_KIND, self._uda),
            "state": self._uda.get_state(),
        }

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Algorithm:
        try:
            uda_cls = TypeRegistry.resolve(ALGORITHM_KIND, data["type"])
            return cls(uda_cls.from_state(data["state"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed algorithm snapshot: {exc}") from exc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __str__(self) -> str:
        lines = [f"Algorithm name: {self.get_name()}"]
        seed = self.get_seed()
        if seed is not None:
            lines.append(f"\tSeed: {seed}")
        verbosity = self.get_verbosity()
        if verbosity is not None:
            lines.append(f"\tVerbosity: {verbosity}")
        extra = self.get_extra_info()
        if extra:
            lines += ["", "Extra info:", extra]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Algorithm({type(self._uda).__name__})"
