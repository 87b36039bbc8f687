"""SolrBuilder logging utilities.

Provides the package logger with a timestamp + abbreviated level prefix, and
centralizes logger initialization for applications embedding the builder.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from SolrBuilder.config.runtime import RuntimeConfig


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        """Format one log record with an abbreviated level."""
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("SolrBuilder")


def configure_logging(
    *,
    runtime: RuntimeConfig | None = None,
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Configure the SolrBuilder logger.

    Uses format: mm-dd HH:MM:SS [<LVL>] <message>
    where LVL is one of: DEBG/INFO/WARN/ERRO.

    Args:
        runtime: Loaded ``log`` section; when given it replaces the other
            arguments.
        level: Logging level (e.g., INFO, DEBUG).
        log_to_file: Whether to mirror logs to a file under ``log_dir``.
        log_dir: Base directory for log files.
    """
    if runtime is not None:
        level, log_to_file, log_dir = runtime.level, runtime.to_file, runtime.log_dir

    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    formatter = _AbbrevLevelFormatter(
        fmt="%(asctime)s [%(levelabbr)s] %(message)s",
        datefmt="%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    if log_to_file:
        timestamp = datetime.now().strftime("%m%d%H%M%S")
        log_root = Path(log_dir or "log")
        log_root.mkdir(parents=True, exist_ok=True)
        log_path = log_root / f"solr_{timestamp}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False
