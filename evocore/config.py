from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Options forwarded to :func:`evocore.utils.logger_setup.setup_logger`."""

    log_dir: str = Field(default="logs")
    level: str = Field(default="INFO")
    rotation: str = Field(default="50 MB")
    retention: str = Field(default="30 days")
    enable_colors: bool = Field(default=True)
    console: bool = Field(default=True, description="Also log to stdout")


class PopulationConfig(BaseModel):
    """Initial population settings."""

    size: int = Field(default=20, ge=1, description="Number of individuals")
    seed: int | None = Field(
        default=None, ge=0, description="Population stream seed (random if None)"
    )


class ExperimentConfig(BaseModel):
    """Everything but the problem and algorithm nodes of an experiment config."""

    name: str = Field(default="experiment")
    population: PopulationConfig = Field(default_factory=PopulationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    snapshot_path: str | None = Field(
        default=None,
        description="Where to write the final algorithm+population snapshot (skipped if None)",
    )

    model_config = ConfigDict(extra="ignore")
