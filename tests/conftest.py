# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the namenorm test suite.

Directories are built on the real filesystem so that the names reach the
disk exactly as written (NFD stays NFD on Linux and APFS).
"""

import os

import pytest
from loguru import logger

CAFE_NFD = "cafe\u0301.txt"
CAFE_NFC = "caf\u00e9.txt"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point every config search path at an empty directory."""
    config_home = tmp_path_factory.mktemp("config_home")
    monkeypatch.setenv("HOME", str(config_home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home / "xdg"))
    monkeypatch.setenv("NAMENORM_CONFIG_HOME", str(config_home / "namenorm"))
    (config_home / "namenorm").mkdir()
    yield config_home / "namenorm"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any handlers a test (or the CLI callback) installed."""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG", format="{level}: {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def mixed_dir(tmp_path):
    """
    A directory with one NFD name, one ASCII name, a hidden file and a subdirectory.

    café.txt is written decomposed: e followed by U+0301 COMBINING ACUTE ACCENT.
    """
    folder = tmp_path / "mixed"
    folder.mkdir()
    (folder / CAFE_NFD).write_text("coffee")
    (folder / "resume.txt").write_text("cv")
    (folder / ".hidden").write_text("secret")
    (folder / "sub").mkdir()

    os.utime(folder / CAFE_NFD, (1_700_000_000, 1_700_000_000))
    os.utime(folder / "resume.txt", (1_600_000_000, 1_600_000_000))
    yield folder
