# chronoalgebra/utils/logging_config.py
import logging
import sys
from pathlib import Path

from .config import SETTINGS


def setup_logging(level=None, log_file: str | None = None):
    """
    Configure logging for applications built on chronoalgebra.
    The library itself only emits through module loggers and never calls this.
    """
    if level is None:
        level = SETTINGS.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    logger = logging.getLogger("chronoalgebra")
    logger.setLevel(level)

    # Remove existing handlers (if any)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("Log file: %s", log_path.absolute())

    return logger
