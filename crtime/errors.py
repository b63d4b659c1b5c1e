"""
errors.py - Exception Definitions

- ConfigError: invalid command-line arguments
- ClassificationError: a directory entry cannot be renamed
"""

from typing import Optional


class CrtimeError(Exception):
    """Base error for the project."""


class ConfigError(CrtimeError):
    pass


class ClassificationError(CrtimeError):
    """A directory entry could not become a RenameItem."""

    def __init__(self, kind, cause: Optional[OSError] = None):
        self.kind = kind
        self.cause = cause
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
