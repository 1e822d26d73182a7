"""Procedures that remove or move directory entries: REMOVE, RMDIR and RENAME."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field

from .core import DirOpArgs, Error, VfsError, WccData


def _check_dir_op(name: str, value: object) -> None:
    if not isinstance(value, DirOpArgs):
        raise TypeError(f"{name} must be a DirOpArgs")


@dataclass
class RemoveArgs:
    """Arguments of :meth:`Remove.remove`: the entry to delete."""

    object: DirOpArgs

    def __post_init__(self) -> None:
        _check_dir_op("object", self.object)


@dataclass
class RemoveSuccess:
    """Cache data for the directory the entry was removed from."""

    wcc_data: WccData = field(default_factory=WccData)


class RemoveFailure(VfsError):
    """Raised by :meth:`Remove.remove`; carries cache data for the directory."""

    def __init__(
        self,
        error: Error | int,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class Remove(abc.ABC):
    """Deletes directory entries."""

    @abc.abstractmethod
    async def remove(self, args: RemoveArgs) -> RemoveSuccess:
        """Remove ``args.object`` from its directory; raises :class:`RemoveFailure`."""


@dataclass
class RmDirArgs:
    """Arguments of :meth:`RmDir.rm_dir`: the subdirectory to delete."""

    object: DirOpArgs

    def __post_init__(self) -> None:
        _check_dir_op("object", self.object)


@dataclass
class RmDirSuccess:
    """Cache data for the parent directory."""

    wcc_data: WccData = field(default_factory=WccData)


class RmDirFailure(VfsError):
    """Raised by :meth:`RmDir.rm_dir`; carries cache data for the parent."""

    def __init__(
        self,
        error: Error | int,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class RmDir(abc.ABC):
    """Deletes subdirectories."""

    @abc.abstractmethod
    async def rm_dir(self, args: RmDirArgs) -> RmDirSuccess:
        """Remove the subdirectory ``args.object``.

        Servers may reject "." with ``Error.INVALID_ARGUMENT`` and ".."
        with ``Error.EXIST``. Raises :class:`RmDirFailure`.
        """


@dataclass
class RenameArgs:
    """Arguments of :meth:`Rename.rename`: the entry to move and its new place."""

    source: DirOpArgs
    target: DirOpArgs

    def __post_init__(self) -> None:
        _check_dir_op("source", self.source)
        _check_dir_op("target", self.target)


@dataclass
class RenameSuccess:
    """Cache data for the source and target directories."""

    from_dir_wcc: WccData = field(default_factory=WccData)
    to_dir_wcc: WccData = field(default_factory=WccData)


class RenameFailure(VfsError):
    """Raised by :meth:`Rename.rename`; carries cache data for both directories."""

    def __init__(
        self,
        error: Error | int,
        from_dir_wcc: WccData | None = None,
        to_dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.from_dir_wcc = from_dir_wcc if from_dir_wcc is not None else WccData()
        self.to_dir_wcc = to_dir_wcc if to_dir_wcc is not None else WccData()


class Rename(abc.ABC):
    """Moves directory entries, atomically as seen by the client."""

    @abc.abstractmethod
    async def rename(self, args: RenameArgs) -> RenameSuccess:
        """Rename ``args.source`` to ``args.target``.

        Both must be on the same file system, otherwise ``Error.XDEV``.
        An existing target is replaced if compatible (both non-directories,
        or both directories with the target empty), otherwise the call fails
        with ``Error.EXIST``. If both name the same file nothing is done and
        the call succeeds. Raises :class:`RenameFailure`.
        """