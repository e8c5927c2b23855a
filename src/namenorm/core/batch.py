# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/core/batch.py

"""Rename batches, planned operations, and per-file batch outcomes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Union

from namenorm.core.normalization import display_text
from namenorm.core.scanner import FileRecord


@dataclass(frozen=True)
class RenameBatch:
    """Absolute file paths submitted together for NFC renaming."""
    paths: tuple[Path, ...] = ()

    @classmethod
    def from_paths(cls, paths: Iterable[Union[str, os.PathLike]]) -> RenameBatch:
        """Absolute, de-duplicated, in submission order."""
        seen: dict[Path, None] = {}
        for p in paths:
            seen.setdefault(Path(os.path.abspath(os.fspath(p))), None)
        return cls(paths=tuple(seen))

    @classmethod
    def from_records(cls, records: Iterable[FileRecord]) -> RenameBatch:
        """Select the NFD-flagged records of a scan."""
        return cls.from_paths(record.path for record in records if record.is_decomposed)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)


@dataclass(frozen=True)
class RenameOp:
    """Single same-directory rename"""
    src: Path
    dst: Path


@dataclass
class BatchResult:
    """Outcome of a rename batch, entry by entry."""
    attempted: int = 0
    dry_run: bool = False
    planned: list[RenameOp] = field(default_factory=list)
    renamed: list[RenameOp] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)  # (path, reason)
    failed: list[tuple[Path, str]] = field(default_factory=list)  # (path, error)
    output: str = ""

    @property
    def success(self) -> bool:
        """True iff the batch was non-empty and no entry failed."""
        return self.attempted > 0 and not self.failed

    def add_failure(self, path: Path, error: str) -> None:
        self.failed.append((path, error))

    def add_skip(self, path: Path, reason: str) -> None:
        self.skipped.append((path, reason))

    def summary(self) -> str:
        lines = [
            "Rename Result:" if not self.dry_run else "Rename Plan (dry run):",
            f"  - Submitted: {self.attempted}",
            f"  - {'Would rename' if self.dry_run else 'Renamed'}: "
            f"{len(self.planned) if self.dry_run else len(self.renamed)}",
            f"  - Skipped: {len(self.skipped)}",
            f"  - Failed: {len(self.failed)}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for path, error in self.failed[:10]:
                lines.append(f"  - {display_text(path.name)}: {display_text(error)}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "dry_run": self.dry_run,
            "attempted": self.attempted,
            "planned": [_op_to_dict(op) for op in self.planned],
            "renamed": [_op_to_dict(op) for op in self.renamed],
            "skipped": [{"path": display_text(str(p)), "reason": reason} for p, reason in self.skipped],
            "failed": [{"path": display_text(str(p)), "error": display_text(error)} for p, error in self.failed],
        }


def _op_to_dict(op: RenameOp) -> dict[str, str]:
    return {"src": display_text(str(op.src)), "dst": display_text(str(op.dst))}
