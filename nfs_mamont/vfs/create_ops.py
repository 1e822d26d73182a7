"""Procedures that add directory entries: CREATE, MKDIR, MKNOD, SYMLINK and LINK."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from pathlib import PurePath, PurePosixPath
from typing import Union

from .core import DirOpArgs, Error, VfsError, WccData
from .file import Attr, Device, FileType, Handle
from .set_attr import NewAttr

VERIFY_LEN = 8
"""Length in bytes of the verifier used for exclusive creation."""

PathLike = Union[str, PurePath]


def _check_dir_op(value: object) -> None:
    if not isinstance(value, DirOpArgs):
        raise TypeError("object must be a DirOpArgs")


@dataclass(frozen=True)
class CreateVerifier:
    """Opaque bytes that make an exclusive creation idempotent."""

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("verifier must be bytes")
        data = bytes(self.data)
        if len(data) != VERIFY_LEN:
            raise ValueError(f"verifier must be exactly {VERIFY_LEN} bytes")
        object.__setattr__(self, "data", data)


@dataclass
class Unchecked:
    """Create the file without checking for an existing entry of the same name."""

    attr: NewAttr = field(default_factory=NewAttr)


@dataclass
class Guarded:
    """Create the file, failing with ``Error.EXIST`` if the name is taken."""

    attr: NewAttr = field(default_factory=NewAttr)


@dataclass
class Exclusive:
    """Create the file with exclusive semantics, identified by a verifier.

    No attributes are given: the server may keep the verifier in the new
    file's metadata.
    """

    verifier: CreateVerifier

    def __post_init__(self) -> None:
        if not isinstance(self.verifier, CreateVerifier):
            self.verifier = CreateVerifier(self.verifier)


How = Union[Unchecked, Guarded, Exclusive]
_HOW_TYPES = (Unchecked, Guarded, Exclusive)


@dataclass
class CreateArgs:
    """Arguments of :meth:`Create.create`."""

    object: DirOpArgs
    how: How

    def __post_init__(self) -> None:
        _check_dir_op(self.object)
        if not isinstance(self.how, _HOW_TYPES):
            raise TypeError("how must be Unchecked, Guarded or Exclusive")


@dataclass
class CreateSuccess:
    """Handle and attributes of the new file, and cache data for its directory."""

    file: Handle | None = None
    attr: Attr | None = None
    wcc_data: WccData = field(default_factory=WccData)


class CreateFailure(VfsError):
    """Raised by :meth:`Create.create`; carries cache data for the directory."""

    def __init__(
        self,
        error: Error | int,
        wcc_data: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.wcc_data = wcc_data if wcc_data is not None else WccData()


class Create(abc.ABC):
    """Creates regular files."""

    @abc.abstractmethod
    async def create(self, args: CreateArgs) -> CreateSuccess:
        """Create a regular file at ``args.object`` as ``args.how`` says.

        Raises :class:`CreateFailure`.
        """


@dataclass
class MkDirArgs:
    """Arguments of :meth:`MkDir.mk_dir`."""

    object: DirOpArgs
    attr: NewAttr = field(default_factory=NewAttr)

    def __post_init__(self) -> None:
        _check_dir_op(self.object)


@dataclass
class MkDirSuccess:
    """Handle and attributes of the new directory, and cache data for its parent."""

    file: Handle | None = None
    attr: Attr | None = None
    wcc_data: WccData = field(default_factory=WccData)


class MkDirFailure(VfsError):
    """Raised by :meth:`MkDir.mk_dir`; carries cache data for the parent."""

    def __init__(
        self,
        error: Error | int,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class MkDir(abc.ABC):
    """Creates subdirectories."""

    @abc.abstractmethod
    async def mk_dir(self, args: MkDirArgs) -> MkDirSuccess:
        """Create a subdirectory; the names "." and ".." fail with ``Error.EXIST``.

        Raises :class:`MkDirFailure`.
        """


_DEVICE_KINDS = frozenset({FileType.CHARACTER_DEVICE, FileType.BLOCK_DEVICE})
_ATTR_KINDS = frozenset({FileType.SOCKET, FileType.FIFO})


@dataclass
class What:
    """The type of special file to create, with its attributes and device numbers.

    Device files carry attributes and a device; sockets and fifos carry
    attributes only; regular files, directories and symbolic links carry
    neither. Missing attributes default to an empty :class:`NewAttr`.
    """

    kind: FileType
    attr: NewAttr | None = None
    device: Device | None = None

    def __post_init__(self) -> None:
        self.kind = FileType(self.kind)
        if self.kind in _DEVICE_KINDS:
            if self.device is None:
                raise ValueError(f"{self.kind.name} requires device numbers")
            if self.attr is None:
                self.attr = NewAttr()
        elif self.kind in _ATTR_KINDS:
            if self.device is not None:
                raise ValueError(f"{self.kind.name} takes no device numbers")
            if self.attr is None:
                self.attr = NewAttr()
        elif self.attr is not None or self.device is not None:
            raise ValueError(f"{self.kind.name} takes no attributes or device numbers")


@dataclass
class MkNodeArgs:
    """Arguments of :meth:`MkNode.mk_node`."""

    object: DirOpArgs
    what: What

    def __post_init__(self) -> None:
        _check_dir_op(self.object)
        if not isinstance(self.what, What):
            raise TypeError("what must be a What")


@dataclass
class MkNodeSuccess:
    """Handle and attributes of the new special file, and cache data for its directory."""

    file: Handle | None = None
    attr: Attr | None = None
    wcc_data: WccData = field(default_factory=WccData)


class MkNodeFailure(VfsError):
    """Raised by :meth:`MkNode.mk_node`; carries cache data for the directory."""

    def __init__(
        self,
        error: Error | int,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class MkNode(abc.ABC):
    """Creates special files."""

    @abc.abstractmethod
    async def mk_node(self, args: MkNodeArgs) -> MkNodeSuccess:
        """Create a special file of type ``args.what``.

        A server supporting none of the types fails with
        ``Error.NOT_SUPPORTED``; one lacking only the requested type fails
        with ``Error.BAD_TYPE``. Raises :class:`MkNodeFailure`.
        """


@dataclass
class SymlinkArgs:
    """Arguments of :meth:`Symlink.symlink`."""

    object: DirOpArgs
    path: PurePosixPath
    attr: NewAttr = field(default_factory=NewAttr)

    def __post_init__(self) -> None:
        _check_dir_op(self.object)
        self.path = PurePosixPath(self.path)


@dataclass
class SymlinkSuccess:
    """Handle and attributes of the new link, and cache data for its directory."""

    file: Handle | None = None
    attr: Attr | None = None
    wcc_data: WccData = field(default_factory=WccData)


class SymlinkFailure(VfsError):
    """Raised by :meth:`Symlink.symlink`; carries cache data for the directory."""

    def __init__(
        self,
        error: Error | int,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class Symlink(abc.ABC):
    """Creates symbolic links."""

    @abc.abstractmethod
    async def symlink(self, args: SymlinkArgs) -> SymlinkSuccess:
        """Create a symbolic link to ``args.path``, atomically with its contents.

        The names "." and ".." fail with ``Error.EXIST``.
        Raises :class:`SymlinkFailure`.
        """


@dataclass
class LinkArgs:
    """Arguments of :meth:`Link.link`."""

    file: Handle
    link: DirOpArgs

    def __post_init__(self) -> None:
        if not isinstance(self.link, DirOpArgs):
            raise TypeError("link must be a DirOpArgs")


@dataclass
class LinkSuccess:
    """Attributes of the linked object and cache data for the link directory."""

    file_attr: Attr | None = None
    dir_wcc: WccData = field(default_factory=WccData)


class LinkFailure(VfsError):
    """Raised by :meth:`Link.link`."""

    def __init__(
        self,
        error: Error | int,
        file_attr: Attr | None = None,
        dir_wcc: WccData | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.file_attr = file_attr
        self.dir_wcc = dir_wcc if dir_wcc is not None else WccData()


class Link(abc.ABC):
    """Creates hard links."""

    @abc.abstractmethod
    async def link(self, args: LinkArgs) -> LinkSuccess:
        """Create a hard link to ``args.file`` at ``args.link``.

        Both must be on the same file system, otherwise ``Error.XDEV``.
        Servers may reject "." and ".." with ``Error.INVALID_ARGUMENT``.
        Raises :class:`LinkFailure`.
        """