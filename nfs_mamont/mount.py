"""MOUNT protocol version 3: data types and the server interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from pathlib import PurePath, PurePosixPath
from typing import Union

from .vfs.file import Handle

MOUNT_DIRPATH_LEN = 1024
"""Maximum bytes in a path name."""

MOUNT_HOST_NAME_LEN = 255
"""Maximum bytes in a host name."""

MOUNT_PROGRAM = 100005
MOUNT_VERSION = 3

PathLike = Union[str, PurePath]


def _as_path(value: PathLike) -> PurePosixPath:
    return PurePosixPath(value)


@dataclass
class MountEntry:
    """A client host together with a directory it has mounted."""

    hostname: str
    directory: PurePosixPath

    def __post_init__(self) -> None:
        self.directory = _as_path(self.directory)


@dataclass
class ExportEntry:
    """An exported directory and the client names allowed to mount it."""

    directory: PurePosixPath
    names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.directory = _as_path(self.directory)
        self.names = list(self.names)


class MntError(enum.IntEnum):
    """Status codes the MNT procedure may fail with."""

    PERM = 1
    NO_ENT = 2
    IO = 5
    ACCESS = 13
    NO_DIR = 20
    INVAL = 22
    NAME_TOO_LONG = 63
    NOT_SUPP = 10004
    SERVER_FAULT = 10006


class MountError(Exception):
    """Raised by :meth:`Mount.mnt` when the directory cannot be mounted."""

    def __init__(self, error: MntError | int, message: str | None = None) -> None:
        self.error = MntError(error)
        text = message or f"{self.error.name} ({int(self.error)})"
        super().__init__(text)


@dataclass
class MntSuccess:
    """Result of a successful MNT call."""

    file_handle: Handle
    auth_flavors: list[int] = field(default_factory=list)


@dataclass
class DumpSuccess:
    """Result of DUMP: every recorded client and directory pair."""

    mount_list: list[MountEntry] = field(default_factory=list)


@dataclass
class ExportSuccess:
    """Result of EXPORT: every exported directory and its allowed clients."""

    exports: list[ExportEntry] = field(default_factory=list)


@dataclass
class MountArgs:
    """Argument of MNT: the server path to mount."""

    dirpath: PurePosixPath

    def __post_init__(self) -> None:
        self.dirpath = _as_path(self.dirpath)


@dataclass
class UnmountArgs:
    """Argument of UMNT: the server path to unmount."""

    dirpath: PurePosixPath

    def __post_init__(self) -> None:
        self.dirpath = _as_path(self.dirpath)


class Mount(abc.ABC):
    """The procedures of the MOUNT version 3 protocol."""

    @abc.abstractmethod
    async def null(self) -> None:
        """Do nothing; lets clients test and time the server."""

    @abc.abstractmethod
    async def mnt(self, dirpath: PathLike) -> MntSuccess:
        """Map a server directory to a file handle and record the mount.

        Raises :class:`MountError` on failure.
        """

    @abc.abstractmethod
    async def dump(self) -> DumpSuccess:
        """Return the list of remotely mounted file systems."""

    @abc.abstractmethod
    async def umnt(self, dirpath: PathLike) -> None:
        """Remove this client's mount entry for ``dirpath``."""

    @abc.abstractmethod
    async def unmount_all(self) -> None:
        """Remove every mount entry recorded for this client."""

    @abc.abstractmethod
    async def export(self) -> ExportSuccess:
        """Return the exported file systems and who may mount each."""