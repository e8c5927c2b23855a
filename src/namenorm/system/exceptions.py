# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/system/exceptions.py

"""
namenorm-specific exception classes.

Scanning errors are non-fatal and are handled per entry inside the scanner.
Rename errors are collected per file and aggregated into a failed batch.
None of these escape the consumer API in namenorm.api.
"""


class NamenormError(Exception):
    """Base exception for all namenorm errors."""
    pass


class ConfigError(NamenormError):
    """Raised when configuration loading or validation fails."""
    pass


# === FILESYSTEM ERRORS ===

class FilesystemError(NamenormError):
    """Base class for filesystem operation errors."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)


class DirectoryUnreadable(FilesystemError):
    """A directory could not be listed. The branch is reported with no children."""
    pass


class AttributeUnavailable(FilesystemError):
    """File size or modification time could not be read."""
    pass


class RenameFailed(FilesystemError):
    """A single file in a rename batch could not be renamed."""
    pass


class CleanupFailed(FilesystemError):
    """An auxiliary rename script could not be removed. Logged only."""
    pass


# === SCRIPT EXECUTION ERRORS ===

class ScriptExecutionFailed(NamenormError):
    """The rename script could not be written, launched, or exited non-zero."""

    def __init__(self, message: str, returncode: int = None, output: str = ""):
        self.returncode = returncode
        self.output = output
        super().__init__(message)
