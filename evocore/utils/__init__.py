"""Utility helpers shared across the *evocore* codebase."""
from __future__ import annotations

from evocore.utils.random_stream import RandomStream, random_seed

__all__ = ["RandomStream", "random_seed"]
