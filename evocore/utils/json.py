"""JSON helpers for snapshots.

Uses **orjson** when available and the standard :pymod:`json` module
otherwise. Both backends write floats in their shortest round-tripping form,
so a snapshot decoded from text holds bit-identical values.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

__all__ = ["dumps", "loads", "read", "write"]

try:
    import orjson as _backend  # type: ignore

    def dumps(obj: Any, pretty: bool = False) -> str:
        """Serialize *obj* with orjson, indented by two spaces if *pretty*."""
        option = _backend.OPT_INDENT_2 if pretty else None
        return _backend.dumps(obj, option=option).decode()

    loads = _backend.loads  # type: ignore

except ModuleNotFoundError:  # pragma: no cover
    import json as _backend  # type: ignore

    def dumps(obj: Any, pretty: bool = False) -> str:  # type: ignore[misc]
        return _backend.dumps(obj, indent=2 if pretty else None)

    def loads(data: Union[str, bytes, bytearray]) -> Any:  # type: ignore[misc]
        return _backend.loads(data)


def write(path: Union[str, Path], obj: Any, pretty: bool = True) -> Path:
    """Write *obj* to *path* as UTF-8 JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(obj, pretty=pretty) + "\n", encoding="utf-8")
    return path


def read(path: Union[str, Path]) -> Any:
    return loads(Path(path).read_bytes())
