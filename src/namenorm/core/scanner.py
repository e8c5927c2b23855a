# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/core/scanner.py

from __future__ import annotations

# Standard library imports
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

# Third-party imports
from loguru import logger

# Local imports
from namenorm.core.normalization import (
    NFD,
    NormalizationForm,
    compose,
    decomposed_breakdown,
    normalization_form,
)
from namenorm.system.exceptions import AttributeUnavailable, DirectoryUnreadable

# Substituted when a file's mtime cannot be read, so it sorts last.
EARLIEST_MTIME = datetime.min.replace(tzinfo=timezone.utc)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class DirectoryNode:
    """A directory and its (non-hidden) subdirectories, as seen at scan time."""
    path: Path
    name: str
    children: tuple[DirectoryNode, ...] = ()

    def walk(self):
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class FileRecord:
    """One file in a scanned directory, labelled with its normalization form."""
    path: Path
    name: str
    size: int
    mtime: datetime
    form: NormalizationForm
    breakdown: Optional[str] = None

    @property
    def is_decomposed(self) -> bool:
        return self.form == NFD

    @property
    def label(self) -> str:
        if self.is_decomposed:
            return f"{self.form}: {self.breakdown}"
        return self.form

    @classmethod
    def from_name(cls, path: Path, size: int, mtime: datetime) -> FileRecord:
        """Build a record, computing the label from the on-disk name."""
        form = normalization_form(path.name)
        return cls(
            path=path,
            name=path.name,
            size=size,
            mtime=mtime,
            form=form,
            breakdown=decomposed_breakdown(path.name) if form == NFD else None,
        )


class SortKey(Enum):
    MTIME = "mtime"
    NAME = "name"
    SIZE = "size"
    FORM = "form"


def _hidden_by_stat(st: os.stat_result) -> bool:
    # BSD/macOS chflags hidden, Windows hidden attribute
    if getattr(st, "st_flags", 0) & getattr(stat, "UF_HIDDEN", 0):
        return True
    if getattr(st, "st_file_attributes", 0) & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0):
        return True
    return False


def is_hidden(entry: os.DirEntry) -> bool:
    """Dotfile convention, plus the platform hidden flag when available."""
    if entry.name.startswith('.'):
        return True
    try:
        return _hidden_by_stat(entry.stat(follow_symlinks=False))
    except OSError:
        return False


def is_hidden_path(path: Path) -> bool:
    if path.name.startswith('.'):
        return True
    try:
        return _hidden_by_stat(path.lstat())
    except OSError:
        return False


def _absolute(path: PathLike) -> Path:
    # abspath rather than resolve(): symlinks in the path stay as the user gave them
    return Path(os.path.abspath(os.fspath(path)))


def _read_entries(directory: Path) -> list[os.DirEntry]:
    """List the immediate children of directory, sorted by name."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryUnreadable(f"Cannot read directory {directory}: {e}", path=str(directory)) from e
    return sorted(entries, key=lambda entry: entry.name)


def _read_attributes(entry: os.DirEntry) -> tuple[int, datetime]:
    try:
        st = entry.stat()
    except OSError as e:
        raise AttributeUnavailable(f"Cannot stat {entry.path}: {e}", path=entry.path) from e
    return st.st_size, datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)


def _is_subdirectory(entry: os.DirEntry) -> bool:
    # Symlinked directories are not followed, to stay clear of cycles
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _is_file_like(entry: os.DirEntry) -> bool:
    try:
        return not entry.is_dir()
    except OSError:
        return True


def build_tree(path: PathLike) -> DirectoryNode:
    """
    Build the directory tree rooted at path.

    Hidden entries are skipped and only directories become nodes. A directory
    that cannot be listed is logged and returned with no children; the rest
    of the tree is still built.

    Args:
        path: Root directory

    Returns:
        DirectoryNode for path
    """
    root = _absolute(path)
    name = root.name or str(root)

    try:
        entries = _read_entries(root)
    except DirectoryUnreadable as e:
        logger.warning(f"Skipping unreadable directory: {e}")
        return DirectoryNode(path=root, name=name)

    children = tuple(
        build_tree(entry.path)
        for entry in entries
        if not is_hidden(entry) and _is_subdirectory(entry)
    )
    logger.debug(f"Scanned {root}: {len(children)} subdirectories")
    return DirectoryNode(path=root, name=name, children=children)


def list_files(path: PathLike) -> list[FileRecord]:
    """
    List the non-hidden files directly inside path, newest first.

    Size and mtime that cannot be read default to 0 and EARLIEST_MTIME.
    An unreadable directory gives an empty list.

    Args:
        path: Directory to list

    Returns:
        FileRecords sorted by modification time, descending
    """
    directory = _absolute(path)

    try:
        entries = _read_entries(directory)
    except DirectoryUnreadable as e:
        logger.warning(f"Cannot list files: {e}")
        return []

    records: list[FileRecord] = []
    for entry in entries:
        if is_hidden(entry) or not _is_file_like(entry):
            continue

        try:
            size, mtime = _read_attributes(entry)
        except AttributeUnavailable as e:
            logger.debug(f"Using default attributes: {e}")
            size, mtime = 0, EARLIEST_MTIME

        record = FileRecord.from_name(directory / entry.name, size, mtime)
        logger.debug(f"  {record.name!r}: {record.form}")
        records.append(record)

    return sort_records(records, SortKey.MTIME)


def sort_records(
    records: Iterable[FileRecord],
    key: Union[SortKey, str] = SortKey.MTIME,
    descending: Optional[bool] = None) -> list[FileRecord]:
    """
    Return records sorted by key.

    When descending is None, mtime sorts newest first and every other key
    sorts ascending. Names compare by their composed, casefolded form so NFD
    and NFC spellings of the same name sit together.
    """
    key = SortKey(key)
    if descending is None:
        descending = key is SortKey.MTIME

    def _name_key(record: FileRecord) -> str:
        return compose(record.name).casefold()

    sort_keys = {
        SortKey.MTIME: lambda r: r.mtime,
        SortKey.NAME: _name_key,
        SortKey.SIZE: lambda r: r.size,
        SortKey.FORM: lambda r: (r.form, _name_key(r)),
    }
    return sorted(records, key=sort_keys[key], reverse=descending)
