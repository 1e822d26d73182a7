"""Read-only lookups: ACCESS, GETATTR, LOOKUP and READLINK."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath
from typing import Union

from .core import Error, VfsError
from .file import Attr, Handle

PathLike = Union[str, PurePath]


class Mask(enum.IntFlag):
    """Access rights checked by :meth:`Access.access`."""

    READ = 0x0001
    LOOKUP = 0x0002
    MODIFY = 0x0004
    EXTEND = 0x0008
    DELETE = 0x0010
    EXECUTE = 0x0020
    ALL = READ | LOOKUP | MODIFY | EXTEND | DELETE | EXECUTE

    @classmethod
    def from_wire(cls, raw: int) -> Mask:
        """Build a mask from a raw value, dropping unknown bits."""
        return cls(int(raw) & int(cls.ALL))

    def contains(self, flag: int) -> bool:
        """Whether every bit of ``flag`` is set in this mask."""
        return int(self) & int(flag) == int(flag)


@dataclass
class AccessArgs:
    """Arguments of :meth:`Access.access`."""

    file: Handle
    mask: Mask

    def __post_init__(self) -> None:
        self.mask = Mask.from_wire(int(self.mask))


@dataclass
class AccessSuccess:
    """Rights granted, with the object's attributes when available."""

    access: Mask
    object_attr: Attr | None = None


class AccessFailure(VfsError):
    """Raised by :meth:`Access.access`."""

    def __init__(self, error: Error | int, object_attr: Attr | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.object_attr = object_attr


class Access(abc.ABC):
    """Determines the rights a caller has on a file system object."""

    @abc.abstractmethod
    async def access(self, args: AccessArgs) -> AccessSuccess:
        """Return the subset of ``args.mask`` the caller holds.

        The result is advisory: rights may be revoked at any time.
        Raises :class:`AccessFailure` on failure.
        """


@dataclass
class GetAttrArgs:
    """Arguments of :meth:`GetAttr.get_attr`."""

    file: Handle


class GetAttr(abc.ABC):
    """Retrieves attributes of a file system object."""

    @abc.abstractmethod
    async def get_attr(self, args: GetAttrArgs) -> Attr:
        """Return the attributes of ``args.file``; raises :class:`VfsError`."""


@dataclass
class LookupArgs:
    """Arguments of :meth:`Lookup.lookup`."""

    parent: Handle
    name: PurePosixPath

    def __post_init__(self) -> None:
        self.name = PurePosixPath(self.name)


@dataclass
class LookupSuccess:
    """Handle of the found object and attributes of it and its directory."""

    file: Handle
    file_attr: Attr | None = None
    dir_attr: Attr | None = None


class LookupFailure(VfsError):
    """Raised by :meth:`Lookup.lookup`."""

    def __init__(self, error: Error | int, dir_attr: Attr | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.dir_attr = dir_attr


class Lookup(abc.ABC):
    """Searches a directory for a name."""

    @abc.abstractmethod
    async def lookup(self, args: LookupArgs) -> LookupSuccess:
        """Return the handle for ``args.name`` in ``args.parent``.

        Symbolic links are not followed. Raises :class:`LookupFailure`.
        """


@dataclass
class ReadLinkArgs:
    """Arguments of :meth:`ReadLink.read_link`."""

    file: Handle


@dataclass
class ReadLinkSuccess:
    """Target of the symbolic link and its attributes."""

    data: PurePosixPath
    symlink_attr: Attr | None = None

    def __post_init__(self) -> None:
        self.data = PurePosixPath(self.data)


class ReadLinkFailure(VfsError):
    """Raised by :meth:`ReadLink.read_link`."""

    def __init__(self, error: Error | int, symlink_attr: Attr | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.symlink_attr = symlink_attr


class ReadLink(abc.ABC):
    """Reads the target of a symbolic link."""

    @abc.abstractmethod
    async def read_link(self, args: ReadLinkArgs) -> ReadLinkSuccess:
        """Return the link data of ``args.file``.

        Objects that are not symbolic links fail with
        ``Error.INVALID_ARGUMENT``. Raises :class:`ReadLinkFailure`.
        """