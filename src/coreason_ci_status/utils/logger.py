import sys
from pathlib import Path
from typing import Optional

from loguru import logger

__all__ = ["configure_logging", "logger"]


def _ensure_log_directory(log_file: Path) -> None:
    if not log_file.parent.exists():
        log_file.parent.mkdir(parents=True, exist_ok=True)


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Replaces the loguru handlers with a stderr sink at `level`.

    Nothing is written to disk unless `log_file` is given, in which case a
    rotating DEBUG sink is added there as well.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    )
    if log_file is not None:
        _ensure_log_directory(log_file)
        logger.add(log_file, rotation="1 MB", retention=3, level="DEBUG")
