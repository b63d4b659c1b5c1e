"""
crtime - Creation Time Rename Core Module

Provides directory scanning, name derivation and rename execution
"""

from .errors import (
    CrtimeError,
    ConfigError,
    ClassificationError,
)

from .models_fs import (
    RunConfig,
    RenameItem,
    RenameOutcome,
    ClassificationKind,
)

from .name_rules import (
    TIMESTAMP_FORMAT,
    format_created,
    derive_new_name,
)

from .sort_rules import (
    sort_by_created,
)

from .scan_files import (
    creation_time,
    classify_entry,
    iter_entries,
    collect_items,
    scan_directory,
)

from .exec_rename import (
    RenameResult,
    rename_item,
    partition_outcomes,
    execute_rename,
)

__all__ = [
    # Errors
    "CrtimeError",
    "ConfigError",
    "ClassificationError",

    # Data models
    "RunConfig",
    "RenameItem",
    "RenameOutcome",
    "ClassificationKind",
    "RenameResult",

    # Naming
    "TIMESTAMP_FORMAT",
    "format_created",
    "derive_new_name",

    # Sorting
    "sort_by_created",

    # Scanning
    "creation_time",
    "classify_entry",
    "iter_entries",
    "collect_items",
    "scan_directory",

    # Execution
    "rename_item",
    "partition_outcomes",
    "execute_rename",
]
