from datetime import datetime, timezone

import hydra
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from evocore.algorithms import Algorithm
from evocore.config import ExperimentConfig
from evocore.problems import Problem
from evocore.runner import run_experiment
from evocore.utils.logger_setup import setup_logger


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    settings = ExperimentConfig.model_validate(
        OmegaConf.to_container(cfg, resolve=True)
    )
    log_file_path = setup_logger(**settings.logging.model_dump(), run_name=settings.name)
    logger.info(
        "Experiment working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info("Log file: {}", log_file_path)
    logger.info("Start time: {}", datetime.now(timezone.utc).isoformat())

    problem = Problem(instantiate(cfg.problem))
    algorithm = Algorithm(instantiate(cfg.algorithm))
    try:
        run_experiment(problem, algorithm, settings)
    except Exception as e:  # pylint: disable=broad-except
        logger.error("Experiment failed: {}", e)
        raise
    finally:
        logger.info("End time: {}", datetime.now(timezone.utc).isoformat())


if __name__ == "__main__":
    main()
