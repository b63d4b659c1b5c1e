"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply each rename once, in order
- Capture per-item errors instead of raising
- Partition outcomes into successes and failures
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple
import logging
import os

from .models_fs import RenameItem, RenameOutcome

logger = logging.getLogger(__name__)


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameItem] = field(default_factory=list)
    failed: List[RenameOutcome] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


def rename_item(item: RenameItem) -> RenameOutcome:
    """Move one item to its target path, capturing any OSError"""
    try:
        os.rename(item.source_path, item.target_path)
    except OSError as e:
        logger.debug("Rename failed %s -> %s: %s", item.source_path, item.target_path, e)
        return RenameOutcome(item=item, error=e)
    return RenameOutcome(item=item)


def partition_outcomes(
    outcomes: Iterable[RenameOutcome]
) -> Tuple[List[RenameItem], List[RenameOutcome]]:
    """
    Split outcomes into (successes, failures), keeping order within each
    """
    success: List[RenameItem] = []
    failed: List[RenameOutcome] = []
    for outcome in outcomes:
        if outcome.ok:
            success.append(outcome.item)
        else:
            failed.append(outcome)
    return success, failed


def execute_rename(items: Iterable[RenameItem]) -> RenameResult:
    """
    Execute renames

    Every item is attempted exactly once. A failure does not stop later
    items and nothing is rolled back.

    Args:
        items: Items in execution order

    Returns:
        Execution result
    """
    success, failed = partition_outcomes(rename_item(item) for item in items)
    return RenameResult(success=success, failed=failed)
