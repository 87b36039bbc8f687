"""Logging configuration (``log`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SolrBuilder.config.common import get_section, read_value

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings consumed by ``configure_logging(runtime=...)``.

    Attributes:
        level: Stream handler level.
        to_file: Whether to mirror logs to a file.
        log_dir: Directory for log files.
    """

    level: str = "INFO"
    to_file: bool = False
    log_dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read and validate the ``log`` section.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If the level is unknown or the directory is blank.
    """
    section = get_section(raw, "log")
    config = RuntimeConfig(
        level=read_value(section, "level", "INFO", str, "log.level").upper(),
        to_file=read_value(section, "to_file", False, bool, "log.to_file"),
        log_dir=read_value(section, "dir", "log", str, "log.dir"),
    )
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if not config.log_dir.strip():
        raise ValueError("log.dir must not be empty")
    return config
