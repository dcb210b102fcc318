"""Tests for the loguru sink configuration."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from evocore.utils.logger_setup import log_file_name, setup_logger


def test_log_file_name_is_sanitized() -> None:
    when = datetime(2024, 5, 1, 12, 30, 5, tzinfo=timezone.utc)

    assert log_file_name("rosenbrock-sea", when) == "rosenbrock-sea_20240501_123005.log"
    assert log_file_name("a b/c", when) == "a_b_c_20240501_123005.log"
    assert log_file_name("///", when) == "run_20240501_123005.log"


def test_setup_logger_writes_file(tmp_path: Path) -> None:
    try:
        log_file = setup_logger(
            log_dir=str(tmp_path / "logs"),
            level="DEBUG",
            run_name="unit",
            console=False,
        )
        logger.info("[Test] hello {}", 42)
    finally:
        logger.remove()

    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("unit_")
    text = log_file.read_text(encoding="utf-8")
    assert "[Test] hello 42" in text
    assert "INFO" in text
