"""
cli_report.py - Console Reporting

All output goes to stdout; nothing here touches the filesystem.
"""

from pathlib import Path
from typing import Iterable

from crtime import RenameItem, RenameResult


def print_directory(directory: Path):
    print(f"Directory: {directory}")


def print_preview(items: Iterable[RenameItem]):
    """Print the planned renames, one per line"""
    for item in items:
        print(f"Rename: {item.original_name} -> {item.new_name}")


def print_result(result: RenameResult):
    """Print renamed and failed items, then the completion marker"""
    print()
    print("Renamed items:")
    for item in result.success:
        print(f"- {item.original_name} -> {item.new_name}")

    print()
    print("Failed:")
    for outcome in result.failed:
        print(f"- {outcome.item.original_name} -> {outcome.item.new_name}: {outcome.reason}")

    print("Ok")


def print_cancelled():
    print("Renaming cancelled.")
