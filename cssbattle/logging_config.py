"""Centralized logging configuration for the roster importer."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = False,
) -> logging.Logger:
    """
    Configure the 'cssbattle' logger.

    Library modules only create child loggers of 'cssbattle'; handlers are
    attached here, by the command-line entry point. Console output goes to
    stderr so stdout stays free for command output.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Also write a timestamped log file into log_dir
    """
    logger = logging.getLogger('cssbattle')
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        log_dir = Path(log_dir or 'logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'cssbattle_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    return logger
