from dataclasses import dataclass
from typing import Callable, TypeVar

from evocore.exceptions import SerializationError

T = TypeVar("T", bound=type)

PROBLEM_KIND = "problem"
ALGORITHM_KIND = "algorithm"


@dataclass(frozen=True)
class RegisteredType:
    """Information about a registered problem or algorithm class."""

    tag: str
    kind: str
    cls: type
    import_path: str
    description: str


class TypeRegistry:
    """Registry of concrete problem/algorithm classes keyed by a stable type tag.

    Snapshots store the tag; restoring looks the class back up here.
    """

    _types: dict[tuple[str, str], RegisteredType] = {}

    @classmethod
    def register(
        cls, kind: str, description: str = "", tag: str | None = None
    ) -> Callable[[T], T]:
        """Decorator to register a class under ``kind``.

        Args:
            kind: Either ``"problem"`` or ``"algorithm"``
            description: Free-form description
            tag: Registry key (class name if None)
        """

        def decorator(registered: T) -> T:
            key = tag or registered.__name__
            existing = cls._types.get((kind, key))
            if existing is not None and existing.cls is not registered:
                raise ValueError(
                    f"{kind} tag '{key}' already registered by {existing.import_path}"
                )
            cls._types[(kind, key)] = RegisteredType(
                tag=key,
                kind=kind,
                cls=registered,
                import_path=f"{registered.__module__}.{registered.__qualname__}",
                description=description,
            )
            registered._type_tag = key
            return registered

        return decorator

    @classmethod
    def get(cls, kind: str, tag: str) -> RegisteredType | None:
        return cls._types.get((kind, tag))

    @classmethod
    def resolve(cls, kind: str, tag: str) -> type:
        """Return the class registered under ``tag`` or raise SerializationError."""
        info = cls._types.get((kind, tag))
        if info is None:
            raise SerializationError(f"Unknown {kind} type tag '{tag}'")
        return info.cls

    @classmethod
    def tag_of(cls, kind: str, obj: object) -> str:
        """Type tag of an instance, which must be of a registered class."""
        tag = getattr(type(obj), "_type_tag", None)
        info = cls._types.get((kind, tag)) if tag else None
        if info is None or info.cls is not type(obj):
            raise SerializationError(
                f"{type(obj).__name__} is not a registered {kind} type"
            )
        return tag

    @classmethod
    def get_all(cls, kind: str | None = None) -> dict[str, RegisteredType]:
        """All registered entries, optionally filtered by kind."""
        return {
            tag: info
            for (k, tag), info in cls._types.items()
            if kind is None or k == kind
        }


def register_problem(description: str = "", tag: str | None = None):
    return TypeRegistry.register(PROBLEM_KIND, description=description, tag=tag)


def register_algorithm(description: str = "", tag: str | None = None):
    return TypeRegistry.register(ALGORITHM_KIND, description=description, tag=tag)
