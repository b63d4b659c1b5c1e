"""
birthtime.py - Creation Time Lookup

os.stat only reports a creation time on some platforms:
- macOS / BSD / Windows (3.12+): st_birthtime
- Windows before 3.12: st_ctime
- Linux: not at all, so stx_btime is read through the statx syscall
"""

from functools import lru_cache
from pathlib import Path
import ctypes
import errno
import os

AT_FDCWD = -100
AT_SYMLINK_NOFOLLOW = 0x100
STATX_BTIME = 0x800


class StatxTimestamp(ctypes.Structure):
    _fields_ = [
        ("tv_sec", ctypes.c_int64),
        ("tv_nsec", ctypes.c_uint32),
        ("reserved", ctypes.c_int32),
    ]


class Statx(ctypes.Structure):
    """struct statx from <linux/stat.h> (256 bytes)"""
    _fields_ = [
        ("stx_mask", ctypes.c_uint32),
        ("stx_blksize", ctypes.c_uint32),
        ("stx_attributes", ctypes.c_uint64),
        ("stx_nlink", ctypes.c_uint32),
        ("stx_uid", ctypes.c_uint32),
        ("stx_gid", ctypes.c_uint32),
        ("stx_mode", ctypes.c_uint16),
        ("spare0", ctypes.c_uint16),
        ("stx_ino", ctypes.c_uint64),
        ("stx_size", ctypes.c_uint64),
        ("stx_blocks", ctypes.c_uint64),
        ("stx_attributes_mask", ctypes.c_uint64),
        ("stx_atime", StatxTimestamp),
        ("stx_btime", StatxTimestamp),
        ("stx_ctime", StatxTimestamp),
        ("stx_mtime", StatxTimestamp),
        ("spare", ctypes.c_uint8 * 128),
    ]


@lru_cache(maxsize=None)
def _libc_statx():
    """statx from the C library, or None when it does not export one"""
    try:
        libc = ctypes.CDLL(None, use_errno=True)
    except OSError:
        return None
    func = getattr(libc, "statx", None)
    if func is None:
        return None
    func.argtypes = [
        ctypes.c_int, ctypes.c_char_p, ctypes.c_int,
        ctypes.c_uint, ctypes.POINTER(Statx),
    ]
    func.restype = ctypes.c_int
    return func


def _not_supported(path) -> OSError:
    return OSError(errno.ENOTSUP, "creation time is not available on this platform", str(path))


def statx_birthtime(path: Path) -> float:
    """
    Read the birth time of a path (symlinks not followed) via statx

    Raises:
        OSError: statx failed, or the filesystem did not report STATX_BTIME
    """
    func = _libc_statx()
    if func is None:
        raise _not_supported(path)

    buf = Statx()
    if func(AT_FDCWD, os.fsencode(path), AT_SYMLINK_NOFOLLOW, STATX_BTIME, ctypes.byref(buf)) != 0:
        err = ctypes.get_errno()
        raise OSError(err, os.strerror(err), str(path))
    if not buf.stx_mask & STATX_BTIME:
        raise _not_supported(path)

    return buf.stx_btime.tv_sec + buf.stx_btime.tv_nsec / 1e9


def birthtime(path: Path, st: os.stat_result, platform: str) -> float:
    """
    Creation time of a path as a POSIX timestamp

    Args:
        path: Path the stat result belongs to
        st: Result of lstat on path
        platform: sys.platform value

    Raises:
        OSError: No creation time can be obtained
    """
    value = getattr(st, "st_birthtime", None)
    if value is not None:
        return value
    if platform == "win32":
        return st.st_ctime
    if platform.startswith("linux"):
        return statx_birthtime(path)
    raise _not_supported(path)
