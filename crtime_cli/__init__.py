"""
crtime_cli - Command Line Interface for the creation time renamer
"""

from .cli_entry import main, run, parse_config
from .cli_interactive import confirm_execution

__all__ = ["main", "run", "parse_config", "confirm_execution"]
