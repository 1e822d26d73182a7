"""File handles, types and attributes shared by the file system operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

HANDLE_SIZE = 8

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _require_uint(
    name: str, value: int | None, maximum: int = _U32_MAX, *, optional: bool = False
) -> None:
    """Check that ``value`` is an unsigned integer no greater than ``maximum``."""
    if value is None and optional:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer" + (" or None" if optional else ""))
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}")


def _require_uints(
    obj: object, names: Iterable[str], maximum: int = _U32_MAX, *, optional: bool = False
) -> None:
    """Check several integer attributes of ``obj`` at once."""
    for name in names:
        _require_uint(name, getattr(obj, name), maximum, optional=optional)


def _fixed_bytes(what: str, value: object, length: int) -> bytes:
    """Return ``value`` as bytes, requiring it to be bytes-like of ``length``."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes")
    data = bytes(value)
    if len(data) != length:
        raise ValueError(f"{what} must be exactly {length} bytes")
    return data


@dataclass(frozen=True)
class Handle:
    """Unique file identifier, the file handle of the protocol."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed_bytes("handle data", self.data, HANDLE_SIZE))


class FileType(enum.IntEnum):
    """Type of a file system object."""

    REGULAR = 1
    DIRECTORY = 2
    BLOCK_DEVICE = 3
    CHARACTER_DEVICE = 4
    SYMLINK = 5
    SOCKET = 6
    FIFO = 7


@dataclass(frozen=True)
class Time:
    """Seconds and nanoseconds since midnight January 1, 1970 GMT."""

    seconds: int
    nanos: int

    def __post_init__(self) -> None:
        _require_uints(self, ("seconds", "nanos"))


@dataclass(frozen=True)
class Device:
    """Major and minor numbers of a block or character device."""

    major: int
    minor: int

    def __post_init__(self) -> None:
        _require_uints(self, ("major", "minor"))


@dataclass
class Attr:
    """Attributes of a file system object."""

    file_type: FileType
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    used: int
    device: Device
    fs_id: int
    file_id: int
    atime: Time
    mtime: Time
    ctime: Time

    def __post_init__(self) -> None:
        self.file_type = FileType(self.file_type)
        _require_uints(self, ("mode", "nlink", "uid", "gid"))
        _require_uints(self, ("size", "used", "fs_id", "file_id"), _U64_MAX)


@dataclass(frozen=True)
class WccAttr:
    """Weak cache consistency attributes taken before an operation."""

    size: int
    mtime: Time
    ctime: Time

    def __post_init__(self) -> None:
        _require_uint("size", self.size, _U64_MAX)