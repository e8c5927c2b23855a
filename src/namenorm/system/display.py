# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/system/display.py

# Standard library imports
from typing import Optional

# Third-party imports
import humanize
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

# Local imports
from namenorm.core.batch import BatchResult
from namenorm.core.normalization import (
    decomposed_breakdown,
    display_text,
    normalization_form,
    scalar_codes,
)
from namenorm.core.scanner import EARLIEST_MTIME, DirectoryNode, FileRecord


def directory_tree(node: DirectoryNode, tree: Optional[Tree] = None) -> Tree:
    """Convert a DirectoryNode to a rich Tree, one branch per subdirectory."""
    label = f"[bold blue]{escape(display_text(node.name))}[/bold blue]"
    branch = Tree(label) if tree is None else tree.add(label)
    for child in node.children:
        directory_tree(child, branch)
    return branch


def format_mtime(record: FileRecord) -> str:
    if record.mtime == EARLIEST_MTIME:
        return "unknown"
    return record.mtime.astimezone().strftime("%Y-%m-%d %H:%M")


def records_to_table(records: list[FileRecord], title: Optional[str] = None) -> Table:
    """Convert file records to a rich Table.

    NFD rows are highlighted and carry their scalar breakdown.
    """
    table = Table(title=escape(display_text(title)) if title else None)
    table.add_column("Name")
    table.add_column("Form")
    table.add_column("Size", justify="right")
    table.add_column("Modified")

    for record in records:
        if record.is_decomposed:
            form = f"[yellow]{escape(display_text(record.label))}[/yellow]"
        else:
            form = f"[green]{record.label}[/green]"
        table.add_row(
            escape(display_text(record.name)),
            form,
            humanize.naturalsize(record.size),
            format_mtime(record),
        )
    return table


def names_to_table(names: list[str]) -> Table:
    """Normalization details for bare names, as used by `namenorm check`."""
    table = Table()
    table.add_column("Name")
    table.add_column("Form")
    table.add_column("Decomposed")
    table.add_column("Scalars")
    for name in names:
        table.add_row(
            escape(display_text(name)),
            normalization_form(name),
            escape(display_text(decomposed_breakdown(name))),
            scalar_codes(name),
        )
    return table


def batch_result_to_table(result: BatchResult) -> Table:
    """One row per submitted path: renamed, would rename, skipped or failed."""
    table = Table(title="Rename plan (dry run)" if result.dry_run else "Rename result")
    table.add_column("Status")
    table.add_column("Path")
    table.add_column("Detail")

    ops = result.planned if result.dry_run else result.renamed
    status = "[cyan]would rename[/cyan]" if result.dry_run else "[green]renamed[/green]"
    for op in ops:
        table.add_row(status, escape(display_text(str(op.dst))), escape(scalar_codes(op.src.name)))
    for path, reason in result.skipped:
        table.add_row("[dim]skipped[/dim]", escape(display_text(str(path))), reason)
    for path, error in result.failed:
        table.add_row("[red]failed[/red]", escape(display_text(str(path))), escape(display_text(error)))
    return table
