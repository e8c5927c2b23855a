# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/core/renamers.py

"""
Batch renamers that move NFD filenames to their NFC spelling.

Two strategies share the same planning step:

- DirectRenamer: one os.replace() per file.
- ShellScriptRenamer: writes a bash script of `mv -f` commands into the
  target directory, runs it, and removes it again.

Both attempt every entry and record the outcome per file. A batch succeeds
only if no entry failed.
"""

import os
import re
import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from loguru import logger

from namenorm.config.manager import UserConfig
from namenorm.core.batch import BatchResult, RenameBatch, RenameOp
from namenorm.core.normalization import compose
from namenorm.core.scanner import is_hidden_path
from namenorm.system.exceptions import (
    CleanupFailed,
    ConfigError,
    RenameFailed,
    ScriptExecutionFailed,
)

FAILURE_MARKER = "namenorm-rename-failed"
_FAILURE_LINE = re.compile(rf"^{FAILURE_MARKER} (\d+)$", re.MULTILINE)


class BatchRenamer(ABC):
    """Renames a batch of NFD files to NFC within their own directories."""

    strategy: str = ""

    def plan(self, batch: RenameBatch) -> BatchResult:
        """Work out the renames for batch without touching the disk."""
        result = BatchResult(attempted=len(batch), dry_run=True)

        for path in batch:
            if not os.path.lexists(path):
                result.add_failure(path, "No such file")
                continue
            if is_hidden_path(path):
                result.add_skip(path, "hidden")
                continue

            nfc_name = compose(path.name)
            if nfc_name == path.name:
                result.add_skip(path, "already NFC")
                continue

            result.planned.append(RenameOp(src=path, dst=path.parent / nfc_name))

        return result

    def rename(self, batch: RenameBatch) -> BatchResult:
        """Plan and execute batch. Never raises for per-file problems."""
        result = self.plan(batch)
        result.dry_run = False

        if result.planned:
            self._execute(result.planned, result)

        for path, reason in result.skipped:
            logger.debug(f"Skipped {path}: {reason}")
        for path, error in result.failed:
            logger.error(f"Rename failed for {path}: {error}")
        logger.info(
            f"{self.strategy} rename batch: {len(result.renamed)} renamed, "
            f"{len(result.skipped)} skipped, {len(result.failed)} failed"
        )
        return result

    @abstractmethod
    def _execute(self, ops: list[RenameOp], result: BatchResult) -> None:
        """Perform ops, recording each in result.renamed or result.failed."""
        raise NotImplementedError("_execute() not implemented")


class DirectRenamer(BatchRenamer):
    """Rename with os.replace(), one file at a time."""

    strategy = "direct"

    def _execute(self, ops: list[RenameOp], result: BatchResult) -> None:
        for op in ops:
            try:
                self._rename_one(op)
            except RenameFailed as e:
                result.add_failure(op.src, str(e))
                continue
            result.renamed.append(op)
            logger.info(f"Renamed: {op.src} -> {op.dst}")

    def _rename_one(self, op: RenameOp) -> None:
        if op.dst.exists() and not _same_file(op.src, op.dst):
            logger.warning(f"Overwriting existing {op.dst}")
        try:
            os.replace(op.src, op.dst)
        except OSError as e:
            raise RenameFailed(
                f"Cannot rename {op.src.name!r} to {op.dst.name!r}: {e}", path=str(op.src)
            ) from e


def _same_file(a: Path, b: Path) -> bool:
    # normalization-insensitive filesystems report both spellings as one file
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def generate_rename_script(ops: list[RenameOp]) -> str:
    """
    Build a bash script renaming each op with `mv -f`.

    Every path is shell-quoted, so quotes, spaces and `$` in the parent
    directory or filename are passed through literally. A failing mv prints
    FAILURE_MARKER with its op index and the script exits non-zero at the end.
    """
    lines = ["#!/bin/bash", "status=0"]
    for index, op in enumerate(ops):
        src = shlex.quote(os.fspath(op.src))
        dst = shlex.quote(os.fspath(op.dst))
        lines.append(f"mv -f -- {src} {dst} || {{ echo '{FAILURE_MARKER} {index}'; status=1; }}")
    lines.append('exit "$status"')
    return "\n".join(lines) + "\n"


def parse_failed_indices(output: str) -> set[int]:
    return {int(match) for match in _FAILURE_LINE.findall(output)}


class ShellScriptRenamer(BatchRenamer):
    """Rename by generating and running a shell script of mv commands."""

    strategy = "script"

    def __init__(self, shell: str = "/bin/bash", script_name: str = "rename_to_nfc.sh") -> None:
        self.shell = shell
        self.script_name = script_name

    def _execute(self, ops: list[RenameOp], result: BatchResult) -> None:
        script_path = ops[0].src.parent / self.script_name
        created = False
        try:
            if os.path.lexists(script_path):
                raise ScriptExecutionFailed(f"Refusing to overwrite existing {script_path}")
            created = True
            result.output = self._run_script(script_path, generate_rename_script(ops))
        except ScriptExecutionFailed as e:
            result.output = e.output
            self._record_script_failure(ops, result, e)
        else:
            result.renamed.extend(ops)
        finally:
            if created:
                try:
                    self._remove_script(script_path)
                except CleanupFailed as e:
                    logger.warning(str(e))

    def _run_script(self, script_path: Path, content: str) -> str:
        """Write, run and return the combined output of the rename script.

        Raises:
            ScriptExecutionFailed: If the script cannot be written or launched,
                or exits with a non-zero status
        """
        try:
            script_path.write_bytes(os.fsencode(content))
            script_path.chmod(0o755)
            logger.debug(f"Rename script written: {script_path}")
            completed = subprocess.run(
                [self.shell, str(script_path)],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            raise ScriptExecutionFailed(f"Cannot run rename script {script_path}: {e}") from e

        output = completed.stdout.decode("utf-8", errors="replace")
        if output:
            logger.debug(f"Rename script output:\n{output}")
        if completed.returncode != 0:
            raise ScriptExecutionFailed(
                f"Rename script exited with status {completed.returncode}",
                returncode=completed.returncode,
                output=output,
            )
        return output

    def _record_script_failure(self, ops: list[RenameOp], result: BatchResult,
                               error: ScriptExecutionFailed) -> None:
        failed_indices = parse_failed_indices(error.output)
        if not failed_indices:
            # No per-command markers: nothing can be assumed renamed
            for op in ops:
                result.add_failure(op.src, str(error))
            return

        for index, op in enumerate(ops):
            if index in failed_indices:
                result.add_failure(op.src, f"mv failed for {op.src.name!r}")
            else:
                result.renamed.append(op)

    def _remove_script(self, script_path: Path) -> None:
        try:
            script_path.unlink(missing_ok=True)
        except OSError as e:
            raise CleanupFailed(f"Cannot remove rename script {script_path}: {e}", path=str(script_path)) from e


def get_renamer(strategy: Optional[str] = None, config: Optional[UserConfig] = None) -> BatchRenamer:
    """Create the renamer for strategy, defaulting to the configured one.

    Raises:
        ConfigError: If strategy is not "direct" or "script"
    """
    config = config or UserConfig()
    strategy = strategy or config.renamer

    if strategy == "direct":
        return DirectRenamer()
    if strategy == "script":
        return ShellScriptRenamer(shell=config.shell, script_name=config.script_name)
    raise ConfigError(f"Unknown renamer strategy: {strategy!r} (expected 'direct' or 'script')")
