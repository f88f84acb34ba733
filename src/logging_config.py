import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.game_manager.config import (
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
    LOGS_DIR,
)


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Install file and console handlers on the root logger.

    Does nothing if the root logger already has handlers, so repeated
    calls from CLI entry points are safe.

    Args:
        log_level: Console and root level name, e.g. ``"DEBUG"``.
        log_file: Rotating log file. Defaults to ``logs/placement_game.log``.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    if log_file is None:
        log_file = LOGS_DIR / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_file
    )
