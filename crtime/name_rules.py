"""
name_rules.py - Name Derivation Module

Builds the timestamp-prefixed target name of a file
"""

from datetime import datetime

# Year, month, day, minute, second. Hours are not part of the prefix.
TIMESTAMP_FORMAT = "%Y%m%d%M%S"


def format_created(created: datetime) -> str:
    """Format a creation time as the name prefix"""
    return created.strftime(TIMESTAMP_FORMAT)


def derive_new_name(created: datetime, original_name: str) -> str:
    """
    Derive the new filename

    Args:
        created: Creation time (UTC)
        original_name: Original filename

    Returns:
        "<prefix> <original_name>"
    """
    return f"{format_created(created)} {original_name}"
