# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/cli/main.py

"""
namenorm command line interface.

Thin wrapper over namenorm.api: each command scans or renames, then renders
the result with rich (or as JSON with --json).
"""

# Standard library imports
from importlib.metadata import version
from pathlib import Path
from typing import Optional, Any

# Third-party imports
import typer
from rich.console import Console

# Local imports
from namenorm import api
from namenorm.cli.utils import emit_json, handle_operation_error, record_to_dict
from namenorm.config.manager import UserConfig
from namenorm.core.batch import BatchResult, RenameBatch
from namenorm.core.normalization import (
    decomposed_breakdown,
    display_text,
    normalization_form,
    normalization_label,
    scalar_codes,
)
from namenorm.core.scanner import SortKey, sort_records
from namenorm.system.display import (
    batch_result_to_table,
    directory_tree,
    names_to_table,
    records_to_table,
)
from namenorm.system.exceptions import ConfigError
from namenorm.system.logging_setup import setup_logging

app = typer.Typer(
    help="""namenorm - find and fix decomposed (NFD) Unicode filenames

[bold blue]Browse:[/bold blue] tree, ls, check
[bold green]Fix:[/bold green] rename, fix
""",
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("namenorm")
        except Exception as e:
            handle_operation_error(console, "retrieving version", e)
        console.print(f"namenorm version {pkg_version}")
        raise typer.Exit()


def _config(ctx: typer.Context) -> UserConfig:
    return ctx.obj if isinstance(ctx.obj, UserConfig) else UserConfig()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """namenorm - inspect and compose Unicode filenames."""
    try:
        config = UserConfig.load()
    except ConfigError as e:
        console.print(f"[red]✗[/red] Configuration error: {e}")
        raise typer.Exit(1)
    setup_logging(config, debug=debug)
    ctx.obj = config


# =============================================================================
# BROWSE COMMANDS - Read-only
# =============================================================================

@app.command()
def tree(
    path: Path = typer.Argument(Path("."), help="Root directory"),
) -> None:
    """[bold blue]Browse[/bold blue]: Show the subdirectory tree."""
    node = api.scan_directory_tree(path)
    console.print(directory_tree(node))


@app.command(name="ls")
def list_files_command(
    ctx: typer.Context,
    path: Path = typer.Argument(Path("."), help="Directory to list"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", "-s", help="Sort field (default from config)"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse the sort order"),
    nfd_only: bool = typer.Option(False, "--nfd-only", help="Only show decomposed (NFD) names"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> None:
    """[bold blue]Browse[/bold blue]: List files with their normalization form."""
    key = sort or SortKey(_config(ctx).default_sort)
    records = api.scan_directory_files(path)
    records = sort_records(records, key)
    if reverse:
        records.reverse()
    if nfd_only:
        records = [r for r in records if r.is_decomposed]

    if to_json:
        emit_json([record_to_dict(r) for r in records])
        return
    console.print(records_to_table(records, title=str(path)))
    nfd_count = sum(1 for r in records if r.is_decomposed)
    if nfd_count:
        console.print(f"[yellow]{nfd_count} decomposed (NFD) name(s)[/yellow]")


@app.command()
def check(
    names: list[str] = typer.Argument(..., help="Filenames to inspect"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> None:
    """[bold blue]Browse[/bold blue]: Show the normalization form of names."""
    if to_json:
        emit_json([
            {
                "name": display_text(name),
                "form": normalization_form(name),
                "label": display_text(normalization_label(name)),
                "decomposed": display_text(decomposed_breakdown(name)),
                "scalars": scalar_codes(name),
            }
            for name in names
        ])
        return
    console.print(names_to_table(names))


# =============================================================================
# FIX COMMANDS - Rename files on disk
# =============================================================================

def _report(result: BatchResult, to_json: bool) -> None:
    if to_json:
        emit_json(result.to_dict())
    else:
        console.print(batch_result_to_table(result))
        console.print(result.summary())
    if not result.success:
        if not to_json:
            console.print("[red]✗[/red] Rename batch failed")
        raise typer.Exit(1)


@app.command()
def rename(
    ctx: typer.Context,
    paths: list[Path] = typer.Argument(..., help="Files to rename to NFC"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Renamer: direct or script"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be renamed without making changes"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> Any:
    """[bold green]Fix[/bold green]: Rename the given files to their composed (NFC) names."""
    result = api.rename_batch(paths, strategy=strategy, config=_config(ctx), dry_run=dry_run)
    _report(result, to_json)


@app.command()
def fix(
    ctx: typer.Context,
    path: Path = typer.Argument(Path("."), help="Directory whose NFD files to rename"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Renamer: direct or script"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be renamed without making changes"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> Any:
    """[bold green]Fix[/bold green]: Rename every NFD file in a directory, then re-scan it."""
    batch = RenameBatch.from_records(api.scan_directory_files(path))
    if not len(batch):
        if to_json:
            emit_json(BatchResult().to_dict())
        else:
            console.print("[green]✓[/green] No decomposed (NFD) filenames found")
        return

    result = api.rename_batch(batch.paths, strategy=strategy, config=_config(ctx), dry_run=dry_run)
    if not dry_run and not to_json:
        console.print(records_to_table(api.scan_directory_files(path), title=str(path)))
    _report(result, to_json)


# =============================================================================
# ENTRY POINT
# =============================================================================

def cli_main() -> None:  # pragma: no cover - entry point
    """Entry point for the namenorm CLI application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    cli_main()
