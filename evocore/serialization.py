"""Snapshot envelopes for problems, populations and algorithms.

A snapshot is plain JSON-compatible data; :func:`to_json` and
:func:`from_json` turn it into text and back. Restoring a snapshot yields an
entity whose subsequent behaviour, random streams included, is identical to
the original's.
"""
from __future__ import annotations

from typing import Any, Union

from evocore.algorithms.algorithm import Algorithm
from evocore.exceptions import SerializationError
from evocore.population import Population
from evocore.problems.problem import Problem
from evocore.utils import json

__all__ = ["snapshot", "restore", "to_json", "from_json"]

Entity = Union[Problem, Population, Algorithm]

_KINDS: dict[str, type] = {
    "problem": Problem,
    "population": Population,
    "algorithm": Algorithm,
}


def snapshot(entity: Entity) -> dict[str, Any]:
    """Wrap the entity's snapshot in a ``{"kind", "data"}`` envelope."""
    for kind, cls in _KINDS.items():
        if isinstance(entity, cls):
            return {"kind": kind, "data": entity.snapshot()}
    raise SerializationError(f"Cannot snapshot objects of type {type(entity).__name__}")


def restore(envelope: dict[str, Any]) -> Entity:
    try:
        kind, data = envelope["kind"], envelope["data"]
    except (KeyError, TypeError) as exc:
        raise SerializationError(f"Malformed snapshot envelope: {exc}") from exc
    cls = _KINDS.get(kind)
    if cls is None:
        raise SerializationError(f"Unknown snapshot kind '{kind}'")
    return cls.restore(data)


def to_json(entity: Entity, pretty: bool = False) -> str:
    return json.dumps(snapshot(entity), pretty=pretty)


def from_json(text: Union[str, bytes]) -> Entity:
    try:
        envelope = json.loads(text)
    except ValueError as exc:
        raise SerializationError(f"Snapshot is not valid JSON: {exc}") from exc
    return restore(envelope)
