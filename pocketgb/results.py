"""Result codes of the FAT file system layer and their POSIX counterparts.

Each :class:`FResult` has a human-readable description and an ``errno``
value. :func:`raise_for_result` turns a failing code into a
:class:`FatFsError`, and :func:`mode_from_posix` converts ``fopen``-style
mode strings to file system open flags.
"""

from __future__ import annotations

import errno
from enum import IntEnum, IntFlag


class FResult(IntEnum):
    """Result of a file system operation."""

    OK = 0
    DISK_ERR = 1
    INT_ERR = 2
    NOT_READY = 3
    NO_FILE = 4
    NO_PATH = 5
    INVALID_NAME = 6
    DENIED = 7
    EXIST = 8
    INVALID_OBJECT = 9
    WRITE_PROTECTED = 10
    INVALID_DRIVE = 11
    NOT_ENABLED = 12
    NO_FILESYSTEM = 13
    MKFS_ABORTED = 14
    TIMEOUT = 15
    LOCKED = 16
    NOT_ENOUGH_CORE = 17
    TOO_MANY_OPEN_FILES = 18
    INVALID_PARAMETER = 19


class OpenMode(IntFlag):
    """Flags passed to the file system when opening a file."""

    OPEN_EXISTING = 0x00
    READ = 0x01
    WRITE = 0x02
    CREATE_NEW = 0x04
    CREATE_ALWAYS = 0x08
    OPEN_ALWAYS = 0x10
    OPEN_APPEND = 0x30


_DESCRIPTIONS: dict[FResult, str] = {
    FResult.OK: "Succeeded",
    FResult.DISK_ERR: "A hard error occurred in the low level disk I/O layer",
    FResult.INT_ERR: "Assertion failed",
    FResult.NOT_READY: "The physical drive cannot work",
    FResult.NO_FILE: "Could not find the file",
    FResult.NO_PATH: "Could not find the path",
    FResult.INVALID_NAME: "The path name format is invalid",
    FResult.DENIED: "Access denied due to prohibited access or directory full",
    FResult.EXIST: "Access denied due to prohibited access (exists)",
    FResult.INVALID_OBJECT: "The file/directory object is invalid",
    FResult.WRITE_PROTECTED: "The physical drive is write protected",
    FResult.INVALID_DRIVE: "The logical drive number is invalid",
    FResult.NOT_ENABLED: "The volume has no work area (mount)",
    FResult.NO_FILESYSTEM: "There is no valid FAT volume",
    FResult.MKFS_ABORTED: "The f_mkfs() aborted due to any problem",
    FResult.TIMEOUT: "Could not get a grant to access the volume within defined period",
    FResult.LOCKED: "The operation is rejected according to the file sharing policy",
    FResult.NOT_ENOUGH_CORE: "LFN working buffer could not be allocated",
    FResult.TOO_MANY_OPEN_FILES: "Number of open files > FF_FS_LOCK",
    FResult.INVALID_PARAMETER: "Given parameter is invalid",
}

_ERRNOS: dict[FResult, int] = {
    FResult.OK: 0,
    FResult.DISK_ERR: errno.EIO,
    FResult.INT_ERR: errno.EIO,
    FResult.NOT_READY: errno.EIO,
    FResult.NO_FILE: errno.ENOENT,
    FResult.NO_PATH: errno.ENOENT,
    FResult.INVALID_NAME: errno.ENAMETOOLONG,
    FResult.DENIED: errno.EACCES,
    FResult.EXIST: errno.EEXIST,
    FResult.INVALID_OBJECT: errno.EIO,
    FResult.WRITE_PROTECTED: errno.EACCES,
    FResult.INVALID_DRIVE: errno.ENOENT,
    FResult.NOT_ENABLED: errno.ENOENT,
    FResult.NO_FILESYSTEM: errno.ENOENT,
    FResult.MKFS_ABORTED: errno.EIO,
    FResult.TIMEOUT: errno.EIO,
    FResult.LOCKED: errno.EACCES,
    FResult.NOT_ENOUGH_CORE: errno.ENOMEM,
    FResult.TOO_MANY_OPEN_FILES: errno.ENFILE,
    FResult.INVALID_PARAMETER: errno.ENOSYS,
}

_POSIX_MODES: dict[str, OpenMode] = {
    "r": OpenMode.READ,
    "r+": OpenMode.READ | OpenMode.WRITE,
    "w": OpenMode.CREATE_ALWAYS | OpenMode.WRITE,
    "w+": OpenMode.CREATE_ALWAYS | OpenMode.WRITE | OpenMode.READ,
    "a": OpenMode.OPEN_APPEND | OpenMode.WRITE,
    "a+": OpenMode.OPEN_APPEND | OpenMode.WRITE | OpenMode.READ,
    "wx": OpenMode.CREATE_NEW | OpenMode.WRITE,
    "w+x": OpenMode.CREATE_NEW | OpenMode.WRITE | OpenMode.READ,
}


def _as_result(result: int) -> FResult | None:
    try:
        return FResult(result)
    except ValueError:
        return None


def describe(result: int) -> str:
    """Return a description of a result code, or "Unknown"."""
    known = _as_result(result)
    return _DESCRIPTIONS[known] if known is not None else "Unknown"


def to_errno(result: int) -> int:
    """Return the ``errno`` value for a result code; -1 if it is unknown."""
    known = _as_result(result)
    return _ERRNOS[known] if known is not None else -1


def mode_from_posix(mode: str) -> OpenMode:
    """Convert an ``fopen`` mode string to open flags.

    Unrecognised modes give no flags at all.
    """
    return _POSIX_MODES.get(mode, OpenMode(0))


class FatFsError(OSError):
    """A file system operation failed."""

    def __init__(self, result: int) -> None:
        super().__init__(to_errno(result), describe(result))
        self.result = _as_result(result)
        self.code = int(result)


def raise_for_result(result: int) -> None:
    """Raise :class:`FatFsError` unless ``result`` reports success."""
    if int(result) != FResult.OK:
        raise FatFsError(result)