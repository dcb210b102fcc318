"""
Logging setup for EvoCore runs.

One console sink (colored on a TTY) and one rotating, zipped file sink per
experiment.
"""

from datetime import datetime, timezone
from pathlib import Path
import re
import sys

from loguru import logger

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
_COLOR_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<yellow>{line}</yellow> | "
    "<level>{message}</level>"
)


def log_file_name(run_name: str, when: datetime | None = None) -> str:
    """File name for ``run_name``, made filesystem-safe and timestamped (UTC)."""
    when = when or datetime.now(timezone.utc)
    safe = re.sub(r"[^A-Za-z0-9_.-]+", "_", run_name).strip("_") or "run"
    return f"{safe}_{when.strftime('%Y%m%d_%H%M%S')}.log"


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
    run_name: str = "evocore",
    console: bool = True,
) -> Path:
    """
    Replace all loguru sinks with the EvoCore console and file sinks.

    Args:
        log_dir: Directory for log files (created if missing)
        level: Minimum level for both sinks
        rotation: loguru rotation policy, e.g. "50 MB" or "1 day"
        retention: loguru retention policy, e.g. "30 days"
        enable_colors: Color console output when stdout is a TTY
        run_name: Prefix of the log file name, usually the experiment name
        console: Also log to stdout

    Returns:
        Path of the log file
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / log_file_name(run_name)

    logger.remove()

    if console:
        colorize = enable_colors and sys.stdout.isatty()
        logger.add(
            sys.stdout,
            level=level,
            format=_COLOR_FORMAT if colorize else _FILE_FORMAT,
            colorize=colorize,
            backtrace=True,
            diagnose=False,
        )

    logger.add(
        str(log_file),
        level=level,
        format=_FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )

    logger.debug("[Logger] Writing {} logs to {}", level, log_file)
    return log_file
