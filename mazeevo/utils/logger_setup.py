"""
loguru sinks for MazeEvo runs.

Library modules only emit through ``from loguru import logger``; the
entrypoint decides where the records go by calling ``setup_logger`` once.
"""

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

_PLAIN_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} | {message}"
)

_COLOR_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<blue>{function}</blue>:<yellow>{line}</yellow> | "
    "<level>{message}</level>"
)


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
    module_levels: dict[str, str] | None = None,
) -> str:
    """
    Route MazeEvo logging to the console and a rotating log file.

    Args:
        log_dir: Directory for log files, created if missing
        level: Minimum level for both sinks
        rotation: Log rotation policy (e.g., "50 MB", "1 day")
        retention: Log retention policy (e.g., "30 days", "1 month")
        enable_colors: Colorize console output when stderr is a terminal
        module_levels: Per-module minimum levels, e.g.
            ``{"mazeevo.decoder": "INFO"}`` to mute per-genome decode traces

    Returns:
        Path to the log file
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"mazeevo_{stamp}.log"

    # loguru's dict filter: "" is the default for every other module
    filters = {"": level, **(module_levels or {})}

    logger.remove()
    colorize = enable_colors and sys.stderr.isatty()
    logger.add(
        sys.stderr,
        level=level,
        format=_COLOR_FORMAT if colorize else _PLAIN_FORMAT,
        colorize=colorize,
        filter=filters,
        backtrace=True,
        diagnose=True,
    )
    logger.add(
        str(log_file),
        level=level,
        format=_PLAIN_FORMAT,
        filter=filters,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True,
    )

    logger.info(f"[setup_logger] Logging to console and {log_file}")
    logger.debug(f"[setup_logger] Level {level}, module levels {module_levels or {}}")
    return str(log_file)
