"""
scan_files.py - File Scanning Module

Provides non-recursive directory scanning and classification of
directory entries into RenameItems
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union
import logging
import os
import stat
import sys

from .birthtime import birthtime
from .errors import ClassificationError
from .models_fs import ClassificationKind, RenameItem
from .name_rules import derive_new_name
from .sort_rules import sort_by_created

logger = logging.getLogger(__name__)

# A directory entry, or the error raised while reading it
RawEntry = Union[os.DirEntry, OSError]
CreatedReader = Callable[[Path, os.stat_result], datetime]


def creation_time(path: Path, st: os.stat_result, platform: Optional[str] = None) -> datetime:
    """
    Read the creation time of a path

    Args:
        path: Entry path
        st: lstat result of path
        platform: Override for sys.platform

    Raises:
        OSError: The platform or filesystem does not report a creation time
    """
    timestamp = birthtime(path, st, platform or sys.platform)
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def _is_utf8(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def classify_entry(raw: RawEntry, created_of: Optional[CreatedReader] = None) -> RenameItem:
    """
    Turn one directory entry into a RenameItem

    Args:
        raw: Directory entry, or the error raised while reading it
        created_of: Creation time reader (defaults to creation_time)

    Returns:
        RenameItem

    Raises:
        ClassificationError: The entry cannot be renamed
    """
    if created_of is None:
        created_of = creation_time

    if isinstance(raw, OSError):
        raise ClassificationError(ClassificationKind.IO, raw) from raw

    path = Path(raw.path)
    try:
        st = raw.stat(follow_symlinks=False)
        created = created_of(path, st)
    except OSError as e:
        raise ClassificationError(ClassificationKind.IO, e) from e

    if stat.S_ISDIR(st.st_mode):
        raise ClassificationError(ClassificationKind.ITEM_IS_DIR)

    name = path.name
    if not name or not _is_utf8(name):
        raise ClassificationError(ClassificationKind.NAME_FAILED)

    new_name = derive_new_name(created, name)

    parent = path.parent
    if parent == path:
        raise ClassificationError(ClassificationKind.PARENT_FAILED)

    return RenameItem(
        created=created,
        original_name=name,
        new_name=new_name,
        source_path=path,
        target_path=parent / new_name,
    )


def _drain(it) -> Iterator[RawEntry]:
    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                return
            except OSError as e:
                yield e
                continue
            yield entry


def iter_entries(directory: Path) -> Iterator[RawEntry]:
    """
    Open a directory and iterate its entries (non-recursive)

    Opening the directory happens immediately, so an unreadable directory
    raises OSError here rather than on first iteration.
    """
    return _drain(os.scandir(directory))


def collect_items(
    entries: Iterable[RawEntry],
    created_of: Optional[CreatedReader] = None
) -> List[RenameItem]:
    """
    Classify entries, drop the ones that fail and sort by creation time

    Args:
        entries: Raw directory entries
        created_of: Creation time reader

    Returns:
        Renameable items, oldest first
    """
    items: List[RenameItem] = []
    for raw in entries:
        try:
            items.append(classify_entry(raw, created_of))
        except ClassificationError as e:
            logger.debug("Skipping entry %s: %s", getattr(raw, "path", raw), e)

    logger.debug("Collected %d renameable items", len(items))
    return sort_by_created(items)


def scan_directory(directory: Path, created_of: Optional[CreatedReader] = None) -> List[RenameItem]:
    """
    Scan single directory (non-recursive) for renameable files

    Raises:
        OSError: The directory cannot be opened
    """
    return collect_items(iter_entries(directory), created_of)
