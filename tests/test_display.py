# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_display.py

import os
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console

from namenorm.core.batch import BatchResult, RenameOp
from namenorm.core.scanner import EARLIEST_MTIME, DirectoryNode, FileRecord
from namenorm.system.display import (
    batch_result_to_table,
    directory_tree,
    format_mtime,
    names_to_table,
    records_to_table,
)

CAFE_NFD = "cafe\u0301.txt"
CAFE_NFC = "caf\u00e9.txt"


def render(renderable) -> str:
    console = Console(record=True, width=200)
    console.print(renderable)
    return console.export_text()


def test_directory_tree_lists_every_level():
    node = DirectoryNode(
        path=Path("/data"),
        name="data",
        children=(
            DirectoryNode(Path("/data/[raw]"), "[raw]", (DirectoryNode(Path("/data/[raw]/2024"), "2024"),)),
            DirectoryNode(Path("/data/clean"), "clean"),
        ),
    )
    text = render(directory_tree(node))
    for name in ("data", "[raw]", "2024", "clean"):
        assert name in text


def test_records_table():
    records = [
        FileRecord.from_name(Path("/data") / CAFE_NFD, 2048, datetime(2024, 5, 1, tzinfo=timezone.utc)),
        FileRecord.from_name(Path("/data/resume.txt"), 0, EARLIEST_MTIME),
    ]
    text = render(records_to_table(records, title="/data"))

    assert "resume.txt" in text
    assert "NFD: c a f e" in text
    assert "2.0 kB" in text
    assert "unknown" in text


def test_format_mtime():
    record = FileRecord.from_name(Path("/data/a.txt"), 1, EARLIEST_MTIME)
    assert format_mtime(record) == "unknown"
    record = FileRecord.from_name(Path("/data/a.txt"), 1, datetime(2024, 5, 1, 12, tzinfo=timezone.utc))
    assert format_mtime(record).startswith("2024-05-0")


def test_names_table_shows_scalars():
    text = render(names_to_table([CAFE_NFD, "plain"]))
    assert "U+0301" in text
    assert "NFD" in text
    assert "NFC" in text


def test_batch_result_table():
    result = BatchResult(attempted=3)
    result.renamed.append(RenameOp(Path("/data") / CAFE_NFD, Path("/data") / CAFE_NFC))
    result.add_skip(Path("/data/resume.txt"), "already NFC")
    result.add_failure(Path("/data/gone.txt"), "No such file")

    text = render(batch_result_to_table(result))

    assert "Rename result" in text
    assert str(Path("/data") / CAFE_NFC) in text
    assert "U+0301" in text
    assert "renamed" in text
    assert "already NFC" in text
    assert "No such file" in text


def test_dry_run_table_title():
    result = BatchResult(attempted=1, dry_run=True)
    result.planned.append(RenameOp(Path("/data") / CAFE_NFD, Path("/data") / CAFE_NFC))
    text = render(batch_result_to_table(result))
    assert "Rename plan (dry run)" in text
    assert "would rename" in text


def test_undecodable_names_render_escaped():
    bad = os.fsdecode(b"bad\xff.txt")
    records = [FileRecord.from_name(Path("/data") / bad, 3, EARLIEST_MTIME)]
    text = render(records_to_table(records, title=f"/data/{bad}"))
    assert "bad\\xff.txt" in text
