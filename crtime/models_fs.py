"""
models_fs.py - Core Data Structure Definitions

Contains:
- RunConfig: Run configuration (target directory)
- RenameItem: A file eligible for renaming
- RenameOutcome: Result of applying one RenameItem
- ClassificationKind: Why a directory entry was not renameable
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigError


class ClassificationKind(Enum):
    """Classification failure enumeration"""
    IO = "io"                        # Reading entry or metadata failed
    ITEM_IS_DIR = "item_is_dir"      # Entry is a directory
    NAME_FAILED = "name_failed"      # No final component, or not valid UTF-8
    PARENT_FAILED = "parent_failed"  # Path has no parent component


@dataclass(frozen=True)
class RunConfig:
    """Run configuration"""
    directory: Path

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "RunConfig":
        """Create RunConfig from a raw argument vector (args[0] is the program)"""
        if len(args) < 2:
            raise ConfigError("Not enough arguments")
        return cls(directory=Path(args[1]))


@dataclass(frozen=True)
class RenameItem:
    """File eligible for renaming"""
    created: datetime               # Creation time (UTC)
    original_name: str              # Final path component
    new_name: str                   # Derived name
    source_path: Path               # Path as yielded by the scan
    target_path: Path               # source_path.parent / new_name


@dataclass(frozen=True)
class RenameOutcome:
    """Result of a single rename attempt"""
    item: RenameItem
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        """Whether the rename succeeded"""
        return self.error is None

    @property
    def reason(self) -> str:
        """Failure reason text (empty on success)"""
        if self.error is None:
            return ""
        if self.error.strerror:
            return f"{self.error.strerror} (os error {self.error.errno})"
        return str(self.error)
