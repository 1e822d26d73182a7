"""File system information procedures: FSINFO, FSSTAT and PATHCONF."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from .core import Error, VfsError
from .file import Attr, Handle, Time

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _check_uint(name: str, value: int, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}")


class Properties(enum.IntFlag):
    """File system property bits reported by :meth:`FsInfo.fs_info`."""

    LINK = 0x0001
    SYMLINK = 0x0002
    HOMOGENEOUS = 0x0008
    CANSETTIME = 0x0010
    ALL = LINK | SYMLINK | HOMOGENEOUS | CANSETTIME

    @classmethod
    def from_wire(cls, raw: int) -> Properties:
        """Build properties from a raw value, dropping unknown bits."""
        return cls(int(raw) & int(cls.ALL))

    def contains(self, flag: int) -> bool:
        """Whether every bit of ``flag`` is set."""
        return int(self) & int(flag) == int(flag)


@dataclass
class FsInfoArgs:
    """Arguments of :meth:`FsInfo.fs_info`: a handle of a mount point."""

    root: Handle


@dataclass
class FsInfoSuccess:
    """Static limits and preferences of the file system."""

    read_max: int
    read_pref: int
    read_mult: int
    write_max: int
    write_pref: int
    write_mult: int
    read_dir_pref: int
    max_file_size: int
    time_delta: Time
    properties: Properties
    root_attr: Attr | None = None

    def __post_init__(self) -> None:
        for name in (
            "read_max",
            "read_pref",
            "read_mult",
            "write_max",
            "write_pref",
            "write_mult",
            "read_dir_pref",
        ):
            _check_uint(name, getattr(self, name), _U32_MAX)
        _check_uint("max_file_size", self.max_file_size, _U64_MAX)
        if not isinstance(self.time_delta, Time):
            raise TypeError("time_delta must be a Time")
        self.properties = Properties.from_wire(int(self.properties))


class FsInfoFailure(VfsError):
    """Raised by :meth:`FsInfo.fs_info`."""

    def __init__(
        self,
        error: Error | int,
        root_attr: Attr | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.root_attr = root_attr


class FsInfo(abc.ABC):
    """Reports nonvolatile file system information."""

    @abc.abstractmethod
    async def fs_info(self, args: FsInfoArgs) -> FsInfoSuccess:
        """Return the limits of the file system at ``args.root``.

        Raises :class:`FsInfoFailure`.
        """


@dataclass
class FsStatArgs:
    """Arguments of :meth:`FsStat.fs_stat`: a handle of a mount point."""

    root: Handle


@dataclass
class FsStatSuccess:
    """Space and file slot usage of the file system."""

    total_bytes: int
    free_bytes: int
    available_bytes: int
    total_files: int
    free_files: int
    available_files: int
    invarsec: int
    root_attr: Attr | None = None

    def __post_init__(self) -> None:
        for name in (
            "total_bytes",
            "free_bytes",
            "available_bytes",
            "total_files",
            "free_files",
            "available_files",
        ):
            _check_uint(name, getattr(self, name), _U64_MAX)
        _check_uint("invarsec", self.invarsec, _U32_MAX)


class FsStatFailure(VfsError):
    """Raised by :meth:`FsStat.fs_stat`."""

    def __init__(
        self,
        error: Error | int,
        root_attr: Attr | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.root_attr = root_attr


class FsStat(abc.ABC):
    """Reports volatile file system state."""

    @abc.abstractmethod
    async def fs_stat(self, args: FsStatArgs) -> FsStatSuccess:
        """Return usage of the file system at ``args.root``.

        Raises :class:`FsStatFailure`.
        """


@dataclass
class PathConfArgs:
    """Arguments of :meth:`PathConf.path_conf`."""

    file: Handle


@dataclass
class PathConfSuccess:
    """Path configuration of a file or directory.

    With ``no_trunc`` set, names longer than ``name_max`` are rejected with
    ``Error.NAME_TOO_LONG``; otherwise they are silently truncated.
    """

    link_max: int
    name_max: int
    no_trunc: bool
    chown_restricted: bool
    case_insensitive: bool
    case_preserving: bool
    file_attr: Attr | None = None

    def __post_init__(self) -> None:
        _check_uint("link_max", self.link_max, _U32_MAX)
        _check_uint("name_max", self.name_max, _U32_MAX)
        for name in ("no_trunc", "chown_restricted", "case_insensitive", "case_preserving"):
            setattr(self, name, bool(getattr(self, name)))


class PathConfFailure(VfsError):
    """Raised by :meth:`PathConf.path_conf`."""

    def __init__(
        self,
        error: Error | int,
        file_attr: Attr | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.file_attr = file_attr


class PathConf(abc.ABC):
    """Reports path configuration of file system objects."""

    @abc.abstractmethod
    async def path_conf(self, args: PathConfArgs) -> PathConfSuccess:
        """Return the path configuration of ``args.file``.

        Raises :class:`PathConfFailure`.
        """