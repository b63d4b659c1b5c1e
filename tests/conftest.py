import errno
import os
from datetime import datetime, timezone

import pytest

import crtime.scan_files
from crtime import creation_time


def mtime_as_created(path, st: os.stat_result) -> datetime:
    return datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)


@pytest.fixture
def created_of():
    """Creation time reader that works on filesystems without birth times."""
    return mtime_as_created


@pytest.fixture
def use_mtime_as_created(monkeypatch):
    monkeypatch.setattr(crtime.scan_files, "creation_time", mtime_as_created)


@pytest.fixture
def require_birthtime(tmp_path):
    """Skip unless this platform and filesystem report real creation times."""
    marker = tmp_path / ".birthtime-check"
    marker.write_text("", encoding="utf-8")
    try:
        creation_time(marker, os.lstat(marker))
    except OSError as e:
        if e.errno in (errno.ENOTSUP, errno.ENOSYS, errno.EOPNOTSUPP):
            pytest.skip("filesystem does not report creation times")
        raise
    finally:
        marker.unlink()


@pytest.fixture
def make_file(tmp_path):
    def _make(name: str, created: datetime, directory=None):
        path = (directory or tmp_path) / name
        path.write_text(name, encoding="utf-8")
        ts = created.timestamp()
        os.utime(path, (ts, ts))
        return path

    return _make
