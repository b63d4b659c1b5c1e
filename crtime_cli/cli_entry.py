"""
cli_entry.py - CLI Entry Point

Usage:
    crtime <directory>
"""

import sys
from typing import Callable, List, Optional

from crtime import (
    ConfigError, CrtimeError, RunConfig,
    scan_directory, execute_rename,
)
from crtime.scan_files import CreatedReader

from .cli_interactive import confirm_execution
from .cli_report import print_directory, print_preview, print_result, print_cancelled

PROG = "crtime"


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    """
    Parse arguments into a RunConfig

    The first argument is always the directory, even when it starts
    with "-". Further arguments are ignored.

    Raises:
        ConfigError: No directory given
    """
    if argv is None:
        argv = sys.argv[1:]
    return RunConfig.from_args([PROG, *argv])


def run(
    config: RunConfig,
    read_line: Callable[[], str] = input,
    created_of: Optional[CreatedReader] = None
) -> None:
    """
    Scan, preview, confirm and rename

    Raises:
        OSError: The directory cannot be scanned
    """
    print_directory(config.directory)

    items = scan_directory(config.directory, created_of)
    print_preview(items)

    if not confirm_execution(read_line):
        print_cancelled()
        return

    result = execute_rename(items)
    print_result(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    try:
        config = parse_config(argv)
    except ConfigError as e:
        print(f"Problem with parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except (OSError, CrtimeError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
