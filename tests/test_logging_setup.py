# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_logging_setup.py

from loguru import logger

from namenorm.config.manager import UserConfig
from namenorm.system.logging_setup import LOG_FILE_NAME, setup_logging


def test_no_file_logging_without_local_log():
    assert setup_logging(UserConfig()) is None
    assert setup_logging(None, debug=True) is None


def test_file_logging_creates_log(tmp_path):
    log_dir = tmp_path / "logs" / "namenorm"
    config = UserConfig(local_log=log_dir)

    log_file = setup_logging(config)
    logger.info("batch finished")
    logger.remove()

    assert log_file == log_dir / LOG_FILE_NAME
    content = log_file.read_text()
    assert "File logging enabled" in content
    assert "batch finished" in content


def test_unusable_log_dir_is_not_fatal(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    assert setup_logging(UserConfig(local_log=blocker / "logs")) is None
