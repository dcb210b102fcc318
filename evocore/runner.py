from __future__ import annotations

from pathlib import Path
import time

from loguru import logger

from evocore import serialization
from evocore.algorithms.algorithm import Algorithm
from evocore.algorithms.base import UserAlgorithm
from evocore.config import ExperimentConfig
from evocore.population import Population
from evocore.problems.base import UserProblem
from evocore.problems.problem import Problem
from evocore.utils import json

__all__ = ["read_snapshot", "run_experiment", "write_snapshot"]


def run_experiment(
    problem: Problem | UserProblem,
    algorithm: Algorithm | UserAlgorithm,
    config: ExperimentConfig,
) -> tuple[Population, Algorithm]:
    """Build the initial population, evolve it once and report the champion."""
    start_time = time.time()
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm(algorithm)

    logger.info("[Runner] Experiment: {}", config.name)
    pop = Population(problem, config.population.size, config.population.seed)
    logger.info(
        "[Runner] Problem: {} | size={} | seed={}",
        pop.get_problem().get_name(),
        pop.size(),
        pop.get_seed(),
    )
    logger.info("[Runner] Algorithm: {} | seed={}", algorithm.get_name(), algorithm.get_seed())
    logger.info("[Runner] Initial champion fitness: {}", pop.champion_fitness().tolist())

    pop = algorithm.evolve(pop)

    logger.info("[Runner] Final champion fitness: {}", pop.champion_fitness().tolist())
    logger.info("[Runner] Champion decision vector: {}", pop.champion_x().tolist())
    logger.info(
        "[Runner] Fitness evaluations: {} | duration={:.2f}s",
        pop.get_problem().get_fevals(),
        time.time() - start_time,
    )

    if config.snapshot_path:
        write_snapshot(config.snapshot_path, pop, algorithm)
    return pop, algorithm


def write_snapshot(path: str | Path, pop: Population, algorithm: Algorithm) -> Path:
    """Write a JSON document holding both the algorithm and population snapshots."""
    document = {
        "algorithm": serialization.snapshot(algorithm),
        "population": serialization.snapshot(pop),
    }
    path = json.write(path, document)
    logger.info("[Runner] Snapshot written to {}", path)
    return path


def read_snapshot(path: str | Path) -> tuple[Population, Algorithm]:
    """Load a document written by :func:`write_snapshot`."""
    document = json.read(path)
    pop = serialization.restore(document["population"])
    algorithm = serialization.restore(document["algorithm"])
    return pop, algorithm
