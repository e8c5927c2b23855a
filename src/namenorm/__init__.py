# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/__init__.py

"""Find and fix filenames stored in decomposed (NFD) Unicode form."""

from namenorm.api import (
    is_file_decomposed,
    rename_batch,
    rename_files_to_composed,
    scan_directory_files,
    scan_directory_tree,
)
from namenorm.core.batch import BatchResult, RenameBatch, RenameOp
from namenorm.core.scanner import DirectoryNode, FileRecord, SortKey

__all__ = [
    "scan_directory_tree",
    "scan_directory_files",
    "is_file_decomposed",
    "rename_files_to_composed",
    "rename_batch",
    "BatchResult",
    "RenameBatch",
    "RenameOp",
    "DirectoryNode",
    "FileRecord",
    "SortKey",
]
