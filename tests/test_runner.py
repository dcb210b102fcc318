"""Tests for experiment configuration and the runner."""

from __future__ import annotations

from pathlib import Path

from hydra import compose, initialize_config_dir
from hydra.utils import instantiate
from pydantic import ValidationError
import pytest

from evocore import SEA, Algorithm, Inventory, Problem, Rosenbrock
from evocore.config import ExperimentConfig, PopulationConfig
from evocore.runner import read_snapshot, run_experiment

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def test_population_config_validation() -> None:
    with pytest.raises(ValidationError):
        PopulationConfig(size=0)
    with pytest.raises(ValidationError):
        PopulationConfig(seed=-1)
    assert PopulationConfig().size == 20


def test_experiment_config_ignores_component_nodes() -> None:
    cfg = ExperimentConfig.model_validate(
        {
            "name": "demo",
            "problem": {"_target_": "evocore.problems.Rosenbrock"},
            "population": {"size": 4, "seed": 3},
        }
    )

    assert cfg.population.size == 4
    assert cfg.logging.level == "INFO"
    assert cfg.snapshot_path is None


def test_run_experiment_writes_snapshot(tmp_path: Path) -> None:
    snapshot_path = tmp_path / "out" / "snapshot.json"
    config = ExperimentConfig(
        population=PopulationConfig(size=4, seed=2),
        snapshot_path=str(snapshot_path),
    )

    pop, algo = run_experiment(Rosenbrock(5), SEA(5, 1, verbosity=1), config)

    assert isinstance(algo, Algorithm)
    assert pop.size() == 4
    assert len(algo.extract(SEA).get_log()) == 5
    assert snapshot_path.exists()

    restored_pop, restored_algo = read_snapshot(snapshot_path)
    assert restored_pop == pop
    assert restored_algo == algo


def test_run_experiment_is_reproducible() -> None:
    config = ExperimentConfig(population=PopulationConfig(size=5, seed=23))

    pop1, algo1 = run_experiment(Problem(Rosenbrock(25)), Algorithm(SEA(10, 23, 1)), config)
    pop2, algo2 = run_experiment(Problem(Rosenbrock(25)), Algorithm(SEA(10, 23, 1)), config)

    assert pop1 == pop2
    assert algo1.extract(SEA).get_log() == algo2.extract(SEA).get_log()


def test_hydra_config_instantiates_components() -> None:
    with initialize_config_dir(config_dir=str(CONFIG_DIR), version_base=None):
        cfg = compose(config_name="config", overrides=["problem=inventory"])

    problem = instantiate(cfg.problem)
    algorithm = instantiate(cfg.algorithm)

    assert isinstance(problem, Inventory)
    assert problem.get_seed() == 1432
    assert isinstance(algorithm, SEA)
    assert algorithm.get_gen() == 500
    assert cfg.population.size == 20
