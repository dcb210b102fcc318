"""Shared fixtures for the evocore test suite."""

from __future__ import annotations

from loguru import logger
import pytest

from evocore import Population, Problem, Rosenbrock


@pytest.fixture(autouse=True, scope="session")
def _silence_logger():
    logger.remove()
    yield


@pytest.fixture
def rosenbrock25() -> Problem:
    return Problem(Rosenbrock(25))


@pytest.fixture
def population(rosenbrock25: Problem) -> Population:
    return Population(rosenbrock25, 5, 23)
