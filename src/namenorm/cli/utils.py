# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/cli/utils.py

"""Output helpers shared by namenorm commands."""

from typing import Any

import orjson
import typer
from rich.console import Console

from namenorm.core.normalization import display_text
from namenorm.core.scanner import FileRecord


def record_to_dict(record: FileRecord) -> dict[str, Any]:
    return {
        "path": display_text(str(record.path)),
        "name": display_text(record.name),
        "size": record.size,
        "mtime": record.mtime.isoformat(),
        "form": record.form,
        "breakdown": record.breakdown and display_text(record.breakdown),
        "label": display_text(record.label),
    }


def emit_json(data: Any) -> None:
    """Print data as indented JSON on stdout, bypassing rich markup."""
    typer.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8"))


def handle_operation_error(console: Console, operation: str, error: Exception) -> None:
    """Handle operation errors with consistent formatting."""
    console.print(f"[red]✗[/red] Error {operation}: {error}")
    raise typer.Exit(1)
