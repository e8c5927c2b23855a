# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/api.py

"""
Request/response API for embedding applications.

Every function returns a definite result and none of them raises: scans
return whatever could be read, renames return success or failure. The
typical flow is scan, select the NFD records, rename, scan again:

    records = scan_directory_files(folder)
    batch = RenameBatch.from_records(records)
    ok = rename_files_to_composed(batch.paths)
    records = scan_directory_files(folder)
"""

from typing import Iterable, Optional

from loguru import logger

from namenorm.config.manager import UserConfig, load_user_config
from namenorm.core.batch import BatchResult, RenameBatch
from namenorm.core.normalization import is_decomposed
from namenorm.core.renamers import get_renamer
from namenorm.core.scanner import DirectoryNode, FileRecord, PathLike, build_tree, list_files
from namenorm.system.exceptions import NamenormError


def scan_directory_tree(path: PathLike) -> DirectoryNode:
    """Subdirectory tree under path; unreadable branches have no children."""
    return build_tree(path)


def scan_directory_files(path: PathLike) -> list[FileRecord]:
    """Files directly inside path, labelled NFC/NFD, newest first."""
    return list_files(path)


def is_file_decomposed(name: str) -> bool:
    return is_decomposed(name)


def rename_batch(
    paths: Iterable[PathLike],
    strategy: Optional[str] = None,
    config: Optional[UserConfig] = None,
    dry_run: bool = False) -> BatchResult:
    """
    Rename every NFD path in paths to its NFC spelling.

    Args:
        paths: Absolute (or cwd-relative) file paths
        strategy: "direct" or "script"; defaults to the configured renamer
        config: User configuration; loaded from the standard locations if None
        dry_run: Plan only, leave the disk untouched

    Returns:
        BatchResult with per-file outcomes. Setup errors (bad config, unknown
        strategy) fail every submitted path.
    """
    batch = RenameBatch.from_paths(paths)
    try:
        if config is None:
            config = load_user_config()
        renamer = get_renamer(strategy, config)
    except NamenormError as e:
        logger.error(f"Cannot start rename batch: {e}")
        result = BatchResult(attempted=len(batch), dry_run=dry_run)
        for path in batch:
            result.add_failure(path, str(e))
        return result

    if dry_run:
        return renamer.plan(batch)

    if not len(batch):
        logger.warning("Rename batch is empty, nothing to do")
    return renamer.rename(batch)


def rename_files_to_composed(paths: Iterable[PathLike], strategy: Optional[str] = None,
                             config: Optional[UserConfig] = None) -> bool:
    """True iff the batch was non-empty and every file was renamed or skipped."""
    return rename_batch(paths, strategy=strategy, config=config).success
