# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from namenorm.config.manager import UserConfig

LOG_FILE_NAME = "namenorm.log"


def setup_logging(config: Optional[UserConfig] = None, debug: bool = False) -> Optional[Path]:
    """Setup loguru logging for the application.

    Configures:
    - Console output: WARNING+ (DEBUG+ with debug=True)
    - File output: DEBUG+ if local_log is configured

    Returns:
        Path of the log file, or None when file logging is off
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if config is None or not config.local_log:
        return None

    try:
        log_dir = Path(config.local_log)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")
        return log_file

    except Exception as e:
        # Don't fail the entire application if logging setup fails
        logger.warning(f"Failed to setup file logging: {e}")
        return None
