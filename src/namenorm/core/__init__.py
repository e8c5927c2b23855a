# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/core/__init__.py

"""Scanning, normalization checks, and batch renaming."""
