# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/cli/__init__.py

"""Command Line Interface package for namenorm."""

from .main import cli_main as main, app

__all__ = ['main', 'app']
