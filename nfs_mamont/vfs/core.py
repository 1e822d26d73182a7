"""Errors and shared argument types of the virtual file system interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from .file import Attr, Handle, WccAttr

MAX_NAME_LEN = 255
"""Maximum length of a name passed to file system operations."""

MAX_PATH_LEN = 1024
"""Maximum length of a path passed to file system operations."""


class Error(enum.IntEnum):
    """Status codes a file system operation may fail with."""

    PERMISSION = 1
    NO_ENTRY = 2
    IO = 5
    NXIO = 6
    ACCESS = 13
    EXIST = 17
    XDEV = 18
    NODEV = 19
    NOT_DIR = 20
    IS_DIR = 21
    INVALID_ARGUMENT = 22
    FILE_TOO_LARGE = 27
    NO_SPACE = 28
    READ_ONLY_FS = 30
    TOO_MANY_LINKS = 31
    NAME_TOO_LONG = 63
    NOT_EMPTY = 66
    QUOTA_EXCEEDED = 69
    STALE_FILE = 70
    TOO_MANY_LEVELS_OF_REMOTE = 71
    BAD_FILE_HANDLE = 10001
    NOT_SYNC = 10002
    BAD_COOKIE = 10003
    NOT_SUPPORTED = 10004
    TOO_SMALL = 10005
    SERVER_FAULT = 10006
    BAD_TYPE = 10007
    JUKEBOX = 10008


class VfsError(Exception):
    """Raised when a file system operation fails with an :class:`Error` status."""

    def __init__(self, error: Error | int, message: str | None = None) -> None:
        self.error = Error(error)
        text = message or f"{self.error.name} ({int(self.error)})"
        super().__init__(text)


@dataclass
class WccData:
    """Weak cache consistency data: attributes before and after an operation."""

    before: WccAttr | None = None
    after: Attr | None = None


@dataclass
class DirOpArgs:
    """A named entry inside a directory, used by directory operations."""

    dir: Handle
    name: str


class Vfs(abc.ABC):
    """Marker base for complete virtual file system implementations."""